#!/usr/bin/env python3.12
# pyright: reportUnusedClass=false
# https://peps.python.org/pep-0695/

from __future__ import annotations
from typing import Callable, Protocol, Self, runtime_checkable

__all__: list[str] = [
    'Functor', 'Pointed', 'Applicative', 'Monad', 'Copointed', 'Comonad',
]

#############################################################################
#  Algebraic Capabilities
# ------------------------
#
#  Independent capabilities, satisfied structurally.  A conforming type
#  does not inherit from any of these; `isinstance` works since they are
#  all runtime checkable.  Laws are stated with `==` meaning "equal on
#  every finite prefix", see `infinita.core.Laws`.
#

@runtime_checkable
class Functor[A](Protocol):
    """Pointwise mapping.

    - identity:    ``x.map(lambda a: a) == x``
    - composition: ``x.map(f).map(g) == x.map(lambda a: g(f(a)))``
    """
    def map[B](self: Self, f: Callable[[A], B]) -> Functor[B]:
        raise NotImplementedError


@runtime_checkable
class Pointed[A](Functor[A], Protocol):
    """Embedding of a single value: ``pure(x)`` is the constant structure."""
    @classmethod
    def pure(cls: type[Self], x: A) -> Pointed[A]:
        raise NotImplementedError


@runtime_checkable
class Applicative[A](Pointed[A], Protocol):
    """Position-wise application of a structure of functions.

    - ``fs.ap(xs) == zip_with(lambda f, x: f(x), fs, xs)``
    - identity: ``pure(lambda a: a).ap(x) == x``
    """
    def ap[B, C](self: Self, xs: Applicative[B]) -> Applicative[C]:
        raise NotImplementedError


@runtime_checkable
class Monad[A](Applicative[A], Protocol):
    """Sequencing with a continuation that depends on the value.

    - left identity:  ``pure(a).bind(f) == f(a)``
    - right identity: ``x.bind(pure) == x``
    - associativity:  ``x.bind(f).bind(g) == x.bind(lambda a: f(a).bind(g))``
    """
    def bind[B](self: Self, f: Callable[[A], Monad[B]]) -> Monad[B]:
        raise NotImplementedError


@runtime_checkable
class Copointed[A](Protocol):
    """Extraction of the focused value."""
    def extract(self: Self) -> A:
        raise NotImplementedError


@runtime_checkable
class Comonad[A](Functor[A], Copointed[A], Protocol):
    """Context-aware extraction over substructures.

    - ``x.duplicate().extract() == x``
    - ``x.duplicate().map(lambda w: w.extract()) == x``
    - ``x.duplicate().duplicate() == x.duplicate().map(lambda w: w.duplicate())``
    - ``x.extend(f) == x.duplicate().map(f)``
    """
    def duplicate(self: Self) -> Comonad[Comonad[A]]:
        raise NotImplementedError

    def extend[B](self: Self, f: Callable[[Comonad[A]], B]) -> Comonad[B]:
        raise NotImplementedError
