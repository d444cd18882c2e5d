#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-

from __future__ import annotations
from typing import Callable

from .Streams import Step, Stream


__all__: list[str] = [
    'transpose', 'zip_with', 'unzip', 'apply', 'head', 'tail', 'extract',
    'duplicate'
]


# Point-free accessors, for mapping over streams of streams.
def head[T](stream: Stream[T]) -> T:
    return stream.head

def tail[T](stream: Stream[T]) -> Stream[T]:
    return stream.tail

def extract[T](stream: Stream[T]) -> T:
    return stream.extract()

def duplicate[T](stream: Stream[T]) -> Stream[Stream[T]]:
    return stream.duplicate()

def apply[A, B](f: Callable[[A], B], x: A) -> B:
    return f(x)


def transpose[T](rows: Stream[Stream[T]]) -> Stream[Stream[T]]:
    """Swap rows and columns: ``transpose(rows)[i][j] == rows[j][i]``.

    The first column is the head of every row, the rest is the transpose
    of the rows' tails."""
    return Stream(lambda: (rows.map(head), transpose(rows.map(tail))))


def zip_with[A, B, C](f: Callable[[A, B], C], s1: Stream[A], s2: Stream[B]
) -> Stream[C]:
    """Pointwise ``f(s1[i], s2[i])``."""
    def zipped() -> Step[C]:
        a, as_ = s1.force()
        b, bs = s2.force()
        return f(a, b), zip_with(f, as_, bs)
    return Stream(zipped)


def unzip[A, B](pairs: Stream[tuple[A, B]]) -> tuple[Stream[A], Stream[B]]:
    """Independent projections of a stream of pairs.

    Each projection forces `pairs` on its own; memoize `pairs` first if
    producing them is expensive."""
    return pairs.map(lambda ab: ab[0]), pairs.map(lambda ab: ab[1])
