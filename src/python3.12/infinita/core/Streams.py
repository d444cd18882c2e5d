#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-

from __future__ import annotations
from itertools import islice, takewhile
from operator import index as as_index
from typing import Any, Callable, Final, Iterable, Iterator, Never, Self, overload

import loguru         as LG
import more_itertools as MI
import rich.repr      as RR

from  .Errors     import   EmptyInputError, UnsupportedOperationError
from ..immutables import   Cel, Nil, Cons, cons, cons_to_list, uncons
from ..config     import   Settings


DEBUG:   Final[bool] = Settings().DEBUG
MEMOIZE: Final[bool] = Settings().MEMOIZE


__all__: list[str] = [
    'Step', 'Stream', 'StreamIterator', 'once',
    'unfold', 'repeat', 'iterate', 'cycle',
]


type Step[T] = tuple[T, Stream[T]]
"""What forcing a stream produces: its head and the rest of it."""


def once[C](thunk: Callable[[], C]) -> Callable[[], C]:
    """Suspension running `thunk` on the first call, replaying it after."""
    cell: list[C] = []
    def replay() -> C:
        if not cell:
            cell.append(thunk())
        return cell[0]
    return replay


class _Unbounded:
    __slots__ = ()
    def __repr__(self: Self) -> str:
        return '...'

UNBOUNDED: Final[_Unbounded] = _Unbounded()


def _unsupported(what: str) -> Never:
    if DEBUG:
        LG.logger.debug(f'Unsupported on an infinite stream: {what}')
    raise UnsupportedOperationError(f'An infinite stream has no {what}.')


################################################################################
#
# ---------- Stream -----------------------------------------------------------
#
#  A stream is nothing but a suspended step.  Every definition below that
#  refers to "the rest of the stream" does so inside a closure handed to
#  `Stream(...)`, so building a stream never forces anything, and
#  self-referential definitions (`repeat`, `cycle`) terminate.
#
#  Forcing is not memoized: forcing the same node twice runs its step twice.
#  Combinators force each node of their inputs once per output node, and
#  caching is available per stream (`memoize`) or for all of them
#  (`INFINITA_MEMOIZE`).
#

class Stream[T]:
    """An immutable, lazily generated, infinite sequence."""
    __slots__ = ('_step',)
    _step: Callable[[], Step[T]]

    def __init__(self: Self, step: Callable[[], Step[T]]) -> None:
        object.__setattr__(self, '_step', once(step) if MEMOIZE else step)

    def __setattr__(self: Self, name: str, value: Any) -> None:
        raise AttributeError(f"'{type(self).__name__}' object is immutable")

    def __delattr__(self: Self, name: str) -> None:
        raise AttributeError(f"'{type(self).__name__}' object is immutable")

              # ╭────────────────────────────────────────────────────────╮
    if DEBUG: # │ -- BEGIN IF DEBUG SECTION -- BEGIN IF DEBUG SECTION -- │
              # ╰────────────────────────────────────────────────────────╯

        def force(self: Self) -> Step[T]:
            """Run the step: the head and the rest of the stream."""
            LG.logger.trace(f'force {type(self).__name__}@{id(self):#x}')
            return self._step()

          #     ╭────────────────────────────────────────────────────────╮
    else: #     │ --- ELSE IF DEBUG SECTION --- ELSE IF DEBUG SECTION -- │
          #     ╰────────────────────────────────────────────────────────╯

        def force(self: Self) -> Step[T]:
            """Run the step: the head and the rest of the stream."""
            return self._step()

    #           ╭────────────────────────────────────────────────────────╮
    #           │ ---  END IF DEBUG SECTION --- END IF DEBUG SECTION --- │
    #           ╰────────────────────────────────────────────────────────╯

    def memoize(self: Self) -> Stream[T]:
        """Same values, but each node runs the underlying step at most once.

        Trades memory for time: every forced cell stays reachable from
        the returned stream for as long as it is referenced."""
        def cached() -> Step[T]:
            head, tail = self.force()
            return head, tail.memoize()
        return Stream(once(cached))

    @classmethod
    def cons(cls: type[Self], x: T, rest: Stream[T]) -> Stream[T]:
        """`x` followed by `rest`."""
        return cls(lambda: (x, rest))

    ###########################################################################
    #  Corecursive Constructors
    # --------------------------
    #
    #  None of these has a base case, so none of them can fail (but `cycle`
    #  must reject an empty period up front).
    #
    @classmethod
    def unfold[A](cls: type[Self], seed: A, step: Callable[[A], tuple[T, A]]
    ) -> Stream[T]:
        """Thread a hidden state through `step`, emitting its first part."""
        def unfolded() -> Step[T]:
            head, seed_ = step(seed)
            return head, cls.unfold(seed_, step)
        return cls(unfolded)

    @classmethod
    def repeat(cls: type[Self], x: T) -> Stream[T]:
        """`x` forever.  The stream is its own tail."""
        def repeated() -> Step[T]:
            return x, stream
        stream = cls(repeated)
        return stream

    @classmethod
    def iterate(cls: type[Self], x: T, f: Callable[[T], T]) -> Stream[T]:
        """`x, f(x), f(f(x)), ...`"""
        return cls(lambda: (x, cls.iterate(f(x), f)))

    @classmethod
    def cycle(cls: type[Self], xs: Iterable[T]) -> Stream[T]:
        """Repeat a finite, non-empty period forever.

        Each step moves the head of the period to its back.  Raises
        `EmptyInputError` when `xs` is empty."""
        match uncons(tuple(xs)):
            case Nil():
                if DEBUG:
                    LG.logger.debug('Refusing to cycle an empty sequence.')
                raise EmptyInputError('Cannot cycle an empty sequence.')
            case Cons(head, tail):
                return cls(lambda: (head, cls.cycle((*tail, head))))
        raise RuntimeError("BUGS BUGS BUGS!!!")

    @classmethod
    def of(cls: type[Self], *xs: T) -> Stream[T]:
        """Periodic stream from literal values: `Stream.of(1, 2)` is 1, 2, 1, ..."""
        return cls.cycle(xs)

    @classmethod
    def from_sequence(cls: type[Self], xs: Iterable[T]) -> Stream[T]:
        return cls.cycle(xs)

    ###########################################################################
    #  Selection & Slicing
    # ---------------------
    #
    #  Loops rather than recursion, so the depth of `n` does not matter.
    #  `take_while`, `drop_while` and `filter` never return if their
    #  predicate never changes its mind.  That is the contract, not a bug:
    #  callers must know their predicate eventually holds (or fails).
    #
    @property
    def head(self: Self) -> T:
        return self.force()[0]

    @property
    def tail(self: Self) -> Stream[T]:
        return self.force()[1]

    def index(self: Self, n: int) -> T:
        """Element at 0-based position `n`."""
        if n < 0:
            _unsupported('end to index from')
        return self.drop(n).head

    def drop(self: Self, n: int) -> Stream[T]:
        """The stream without its first `n` elements."""
        if n < 0:
            raise ValueError(f'Cannot drop a negative count: {n}')
        stream = self
        for _ in range(n):
            stream = stream.force()[1]
        return stream

    def take(self: Self, n: int) -> list[T]:
        """The first `n` elements, in order."""
        if n < 0:
            raise ValueError(f'Cannot take a negative count: {n}')
        return MI.take(n, self)

    def split_at(self: Self, n: int) -> tuple[list[T], Stream[T]]:
        """`(take(n), drop(n))`, walking the prefix once."""
        if n < 0:
            raise ValueError(f'Cannot split at a negative count: {n}')
        cursor = StreamIterator(self)
        prefix = MI.take(n, cursor)
        return prefix, cursor.stream

    def take_while(self: Self, p: Callable[[T], bool]) -> list[T]:
        """Longest prefix whose elements all satisfy `p`.

        Diverges if every element satisfies `p`."""
        return list(takewhile(p, self))

    def drop_while(self: Self, p: Callable[[T], bool]) -> Stream[T]:
        """The suffix starting at the first element not satisfying `p`.

        Diverges if every element satisfies `p`."""
        stream = self
        while True:
            head, tail = stream.force()
            if not p(head):
                return stream
            stream = tail

    def filter(self: Self, p: Callable[[T], bool]) -> Stream[T]:
        """Elements satisfying `p`, in order.

        Forcing diverges when no element past the current one satisfies
        `p`; building the filtered stream never does."""
        def filtered() -> Step[T]:
            stream = self
            while True:
                head, tail = stream.force()
                if p(head):
                    return head, tail.filter(p)
                stream = tail
        return Stream(filtered)

    @property
    def inits(self: Self) -> Stream[list[T]]:
        """All finite prefixes: `[]`, `[s0]`, `[s0, s1]`, ...

        Prefixes grow as shared cons cells, and each is only turned into
        a list when its node is forced."""
        def from_prefix(prefix: Cel[T], rest: Stream[T]) -> Stream[list[T]]:
            def step() -> Step[list[T]]:
                head, tail = rest.force()
                return cons_to_list(prefix), from_prefix(cons(head, prefix), tail)
            return Stream(step)
        return from_prefix((), self)

    @property
    def tails(self: Self) -> Stream[Stream[T]]:
        """All suffixes, starting with the stream itself."""
        return Stream(lambda: (self, self.tail.tails))

    ###########################################################################
    #  Combinators
    # -------------
    #
    def interleave_with(self: Self, other: Stream[T]) -> Stream[T]:
        """`self[0], other[0], self[1], other[1], ...`"""
        def interleaved() -> Step[T]:
            head, tail = self.force()
            return head, other.interleave_with(tail)
        return Stream(interleaved)

    def intersperse(self: Self, x: T) -> Stream[T]:
        """`self[0], x, self[1], x, ...`"""
        def interspersed() -> Step[T]:
            head, tail = self.force()
            return head, Stream.cons(x, tail.intersperse(x))
        return Stream(interspersed)

    def scanl[A](self: Self, initial: A, combine: Callable[[A, T], A]
    ) -> Stream[A]:
        """Running folds: `initial, combine(initial, self[0]), ...`"""
        def scanned() -> Step[A]:
            head, tail = self.force()
            return initial, tail.scanl(combine(initial, head), combine)
        return Stream(scanned)

    def scanl1(self: Self, f: Callable[[T, T], T]) -> Stream[T]:
        """Running folds seeded with the head: `s0, f(s0, s1), ...`"""
        def scanned() -> Step[T]:
            head, tail = self.force()
            return tail.scanl(head, f).force()
        return Stream(scanned)

    def zip[B](self: Self, other: Stream[B]) -> Stream[tuple[T, B]]:
        """Pairs of elements at equal positions."""
        def zipped() -> Step[tuple[T, B]]:
            a, as_ = self.force()
            b, bs = other.force()
            return (a, b), as_.zip(bs)
        return Stream(zipped)

    ###########################################################################
    #  Functor, Pointed, Applicative, Monad
    # --------------------------------------
    #
    def map[B](self: Self, f: Callable[[T], B]) -> Stream[B]:
        def mapped() -> Step[B]:
            head, tail = self.force()
            return f(head), tail.map(f)
        return Stream(mapped)

    @classmethod
    def pure(cls: type[Self], x: T) -> Stream[T]:
        return cls.repeat(x)

    def ap[A, B](self: Stream[Callable[[A], B]], xs: Stream[A]) -> Stream[B]:
        """Apply the function at each position to the value there."""
        def applied() -> Step[B]:
            f, fs = self.force()
            x, xs_ = xs.force()
            return f(x), fs.ap(xs_)
        return Stream(applied)

    def bind[B](self: Self, f: Callable[[T], Stream[B]]) -> Stream[B]:
        """Diagonal of `self.map(f)`: element `n` is `f(self[n])[n]`."""
        def diagonal(state: tuple[Stream[Stream[B]], int]
        ) -> tuple[B, tuple[Stream[Stream[B]], int]]:
            rows, n = state
            row, rows_ = rows.force()
            return row.index(n), (rows_, n + 1)
        return Stream.unfold((self.map(f), 0), diagonal)

    ###########################################################################
    #  Copointed, Comonad
    # --------------------
    #
    def extract(self: Self) -> T:
        return self.head

    def duplicate(self: Self) -> Stream[Stream[T]]:
        return self.tails

    def extend[B](self: Self, f: Callable[[Stream[T]], B]) -> Stream[B]:
        """`f` applied to every suffix: element `i` is `f(self.drop(i))`."""
        return Stream(lambda: (f(self), self.tail.extend(f)))

    ###########################################################################
    #  Python Protocols
    # ------------------
    #
    def __iter__(self: Self) -> StreamIterator[T]:
        return StreamIterator(self)

    @overload
    def __getitem__(self: Self, key: int) -> T: ...
    @overload
    def __getitem__(self: Self, key: slice) -> list[T] | Stream[T]: ...
    def __getitem__(self: Self, key: int | slice) -> T | list[T] | Stream[T]:
        if not isinstance(key, slice):
            return self.index(as_index(key))
        start = 0 if key.start is None else as_index(key.start)
        stride = 1 if key.step is None else as_index(key.step)
        if start < 0 or (key.stop is not None and as_index(key.stop) < 0):
            _unsupported('end to slice from')
        if stride < 1:
            raise ValueError(f'Slice step must be positive: {stride}')
        if key.stop is not None:
            return list(islice(self, start, as_index(key.stop), stride))
        if stride == 1:
            return self.drop(start)
        def strided(stream: Stream[T]) -> tuple[T, Stream[T]]:
            head, tail = stream.force()
            return head, tail.drop(stride - 1)
        return Stream.unfold(self.drop(start), strided)

    @property
    def start_index(self: Self) -> int:
        return 0

    @property
    def end_index(self: Self) -> Never:
        _unsupported('end index')

    def __len__(self: Self) -> Never:
        _unsupported('length')

    def __reversed__(self: Self) -> Never:
        _unsupported('end to reverse from')

    def __bool__(self: Self) -> bool:
        return True

    def __repr__(self: Self) -> str:
        return f'[{self.head!r}, ...]'

    def __rich_repr__(self: Self) -> RR.Result:
        yield self.head
        yield UNBOUNDED


class StreamIterator[T](Iterator[T]):
    """Pull cursor over a stream.

    The one mutable object in the package: `stream` is the position
    still to be read, reassigned to the tail on every `next()`.  It never
    raises `StopIteration`, so bound it with `take`, slicing or
    `itertools.islice`."""
    __slots__ = ('stream',)
    stream: Stream[T]

    def __init__(self: Self, stream: Stream[T]) -> None:
        self.stream = stream

    def __iter__(self: Self) -> Self:
        return self

    def __next__(self: Self) -> T:
        head, self.stream = self.stream.force()
        return head


unfold  = Stream.unfold
repeat  = Stream.repeat
iterate = Stream.iterate
cycle   = Stream.cycle
