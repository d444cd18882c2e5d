#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-

from __future__ import annotations
from operator import add
from typing import Annotated, Iterable

import loguru, rich, typer
import rich.console, rich.logging, rich.table, rich.traceback

from infinita import Stream, zip_with
from infinita.config import Settings

APP = typer.Typer(name='infinita-sequences', pretty_exceptions_enable=False,
                  no_args_is_help=True)

STDOUT = rich.console.Console(log_path=False)
STDERR = rich.console.Console(
    stderr=True, log_path=False, tab_size=4, soft_wrap=True)

Count = Annotated[int, typer.Option('--count', '-n', min=0,
                                    help='How many elements to show.')]

##############################################################################
# Classic Streams
# ----------------
#
# Every sequence below is infinite; the commands only ever take a prefix.
#

def naturals() -> Stream[int]:
    return Stream.iterate(0, lambda n: n + 1)


def fibonacci() -> Stream[int]:
    return Stream.unfold((0, 1), lambda ab: (ab[0], (ab[1], ab[0] + ab[1])))


def sieve(candidates: Stream[int]) -> Stream[int]:
    """Sieve of Eratosthenes: one `filter` layer per prime found."""
    def sifted() -> tuple[int, Stream[int]]:
        prime, rest = candidates.force()
        return prime, sieve(rest.filter(lambda n: n % prime != 0).memoize())
    return Stream(sifted)


def primes() -> Stream[int]:
    return sieve(naturals().drop(2))


def triangular() -> Stream[int]:
    return naturals().tail.scanl1(add)


def leibniz_pi() -> Stream[float]:
    """Partial sums of 4 * (1 - 1/3 + 1/5 - ...)."""
    summands = zip_with(lambda sign, n: sign * 4.0 / n,
                        Stream.of(1, -1),
                        Stream.iterate(1, lambda n: n + 2))
    return summands.scanl1(add)


def euler_transform(s: Stream[float]) -> Stream[float]:
    """Sequence accelerator for alternating series, one window at a time."""
    def accelerate(window: Stream[float]) -> float:
        s0, s1, s2 = window.take(3)
        denominator = s0 - 2 * s1 + s2
        if denominator == 0:
            return s2
        return s2 - (s2 - s1) ** 2 / denominator
    return s.extend(accelerate).memoize()


def tableau(s: Stream[float]) -> Stream[float]:
    """Head of every repeated acceleration of `s`."""
    return Stream.iterate(s.memoize(), euler_transform).map(lambda t: t.head)


##############################################################################
# Command Line
# -------------
#

def show(title: str, columns: dict[str, Iterable[object]]) -> None:
    table = rich.table.Table(title=title)
    loguru.logger.debug(f'Showing {title}')
    table.add_column('n', justify='right', style='dim')
    for name in columns:
        table.add_column(name, justify='right')
    for n, row in enumerate(zip(*columns.values())):
        table.add_row(str(n), *(str(value) for value in row))
    STDOUT.print(table)


@APP.callback()
def configure(
    debug: Annotated[bool, typer.Option(
        '--debug',
        help=('Log everything, the library included. Per-force traces '
              'also need INFINITA_DEBUG=1 when the process starts.'))] = False
) -> None:
    settings = Settings()
    loguru.logger.configure(handlers=[dict(
        level='TRACE' if debug or settings.DEBUG else settings.LOG_LEVEL,
        sink=rich.logging.RichHandler(
            console=STDERR,
            markup=True,
            show_path=False,
            rich_tracebacks=True,
            ),
        format='{message}',)])
    # importing the package disables all of `infinita`, this module included
    loguru.logger.enable(__name__)
    if debug or settings.DEBUG:
        loguru.logger.enable('infinita')


@APP.command('naturals')
def show_naturals(count: Count = 10) -> None:
    show('Naturals', {'value': naturals().take(count)})


@APP.command('fibonacci')
def show_fibonacci(count: Count = 10) -> None:
    show('Fibonacci', {'value': fibonacci().take(count)})


@APP.command('primes')
def show_primes(count: Count = 10) -> None:
    loguru.logger.info(f'Sieving {count} primes')
    show('Primes', {'value': primes().take(count)})


@APP.command('triangular')
def show_triangular(count: Count = 10) -> None:
    show('Triangular numbers', {'value': triangular().take(count)})


@APP.command('pi')
def show_pi(count: Count = 8) -> None:
    partial = leibniz_pi().memoize()
    loguru.logger.info(f'Accelerating {count} partial sums of the Leibniz series')
    show('Approximations of pi', {
        'partial sum': partial.take(count),
        'euler'      : euler_transform(partial).take(count),
        'tableau'    : tableau(partial).take(count),
    })


def main() -> None:
    rich.traceback.install(show_locals=False, console=STDERR)
    APP()


if __name__ == '__main__':
    main()
