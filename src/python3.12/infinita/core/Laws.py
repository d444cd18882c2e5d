#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-

from __future__ import annotations
from typing import Any, Callable

from .Combinators import apply, duplicate, extract, transpose, zip_with
from .Streams     import Stream


__all__: list[str] = [
    'prefix', 'prefix_eq',
    'functor_identity', 'functor_composition',
    'applicative_zip', 'applicative_identity',
    'monad_left_identity', 'monad_right_identity', 'monad_associativity',
    'copointed_head', 'comonad_extract_duplicate', 'comonad_map_extract',
    'comonad_duplicate_duplicate', 'comonad_extend',
    'transpose_involution',
]


##############################################################################
# Algebraic Laws over Finite Prefixes
# ------------------------------------
#
# Two streams are never comparable as wholes.  Every law here is checked
# by materializing the first `n` positions of both sides, descending
# `depth` levels into streams of streams, and comparing the lists.
#

def prefix(x: Any, n: int, depth: int = 1) -> Any:
    """First `n` positions of `x`, as nested lists `depth` levels deep.

    Values that are not streams are returned as they are."""
    if depth < 1 or not isinstance(x, Stream):
        return x
    return [prefix(item, n, depth - 1) for item in x.take(n)]

def prefix_eq(s1: Any, s2: Any, n: int, depth: int = 1) -> bool:
    return prefix(s1, n, depth) == prefix(s2, n, depth)


# Functor
def functor_identity(s: Stream[Any], n: int) -> bool:
    return prefix_eq(s.map(lambda x: x), s, n)

def functor_composition(s: Stream[Any], f: Callable[[Any], Any],
                        g: Callable[[Any], Any], n: int) -> bool:
    return prefix_eq(s.map(f).map(g), s.map(lambda x: g(f(x))), n)


# Applicative
def applicative_zip(fs: Stream[Callable[[Any], Any]], xs: Stream[Any],
                    n: int) -> bool:
    return prefix_eq(fs.ap(xs), zip_with(apply, fs, xs), n)

def applicative_identity(xs: Stream[Any], n: int) -> bool:
    return prefix_eq(Stream.pure(lambda x: x).ap(xs), xs, n)


# Monad
def monad_left_identity(x: Any, f: Callable[[Any], Stream[Any]],
                        n: int) -> bool:
    return prefix_eq(Stream.pure(x).bind(f), f(x), n)

def monad_right_identity(s: Stream[Any], n: int) -> bool:
    return prefix_eq(s.bind(Stream.pure), s, n)

def monad_associativity(s: Stream[Any], f: Callable[[Any], Stream[Any]],
                        g: Callable[[Any], Stream[Any]], n: int) -> bool:
    return prefix_eq(s.bind(f).bind(g),
                     s.bind(lambda x: f(x).bind(g)), n)


# Copointed, Comonad
def copointed_head(s: Stream[Any]) -> bool:
    return s.extract() == s.head

def comonad_extract_duplicate(s: Stream[Any], n: int) -> bool:
    return prefix_eq(s.duplicate().extract(), s, n)

def comonad_map_extract(s: Stream[Any], n: int) -> bool:
    return prefix_eq(s.duplicate().map(extract), s, n)

def comonad_duplicate_duplicate(s: Stream[Any], n: int) -> bool:
    return prefix_eq(s.duplicate().duplicate(),
                     s.duplicate().map(duplicate), n, depth=3)

def comonad_extend(s: Stream[Any], f: Callable[[Stream[Any]], Any],
                   n: int) -> bool:
    return prefix_eq(s.extend(f), s.tails.map(f), n)


def transpose_involution(rows: Stream[Stream[Any]], n: int) -> bool:
    return prefix_eq(transpose(transpose(rows)), rows, n, depth=2)
