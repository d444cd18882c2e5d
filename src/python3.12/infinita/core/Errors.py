#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-


__all__: list[str] = [
    'StreamError', 'EmptyInputError', 'UnsupportedOperationError'
]


class StreamError(Exception):
    """Base class of the contract violations raised by streams."""


class EmptyInputError(StreamError, ValueError):
    """A finite sequence given to `cycle` was empty.

    There is no infinite repetition of nothing."""


class UnsupportedOperationError(StreamError, LookupError):
    """An operation needed the end of a stream, and streams have none.

    Deliberately not a `TypeError`: `list()` swallows a `TypeError` from
    `len()` and would then try to exhaust the stream."""
