#!/usr/bin/env python3.12
# pyright: reportUnusedClass=false


from typing import Iterable, NamedTuple, Sequence


__all__: list[str] = [
    'Cel', 'Nnl', 'Nil', 'Cons', 'uncons',
    'cons', 'cons_to_iterable', 'cons_to_list'
]


type Cel[T] = tuple[T, Cel[T]] | tuple[()]
"""### A classic cons cell list type, with a tuple as the base type.
O(1) push onto an :strong:`immutable` FILO stack, so every prefix
built by pushing shares all of its cells with the prefixes before it."""

type Nnl[T] = tuple[T, Cel[T]]
"""### A not-empty cons cell list type."""


class Nil(NamedTuple):
    """Decomposition of an empty finite sequence."""


class Cons[T](NamedTuple):
    """Decomposition of a non-empty finite sequence."""
    head: T
    tail: Sequence[T]


def uncons[T](seq: Sequence[T]) -> Nil | Cons[T]:
    """Split a finite sequence into head and tail, or say it is empty.

    Callers `match` on the result instead of indexing a possibly empty
    sequence::

        match uncons(xs):
            case Nil():            ...
            case Cons(head, tail): ...
    """
    if len(seq) == 0:
        return Nil()
    return Cons(seq[0], seq[1:])


def cons[T](car: T, cdr: Cel[T]) -> Nnl[T]:
    return (car, cdr)


def cons_to_iterable[T](cell: Cel[T]) -> Iterable[T]:
    car: T
    cdr: Cel[T]
    empty: Cel[T] = ()
    while cell != empty:
        car, cdr = cell  # type: ignore
        yield car
        cell = cdr


def cons_to_list[T](cell: Cel[T]) -> list[T]:
    """List in the order the cells were pushed, oldest first."""
    items = list(cons_to_iterable(cell))
    items.reverse()
    return items
