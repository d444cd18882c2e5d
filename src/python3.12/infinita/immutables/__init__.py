#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-


__all__: list[str] = [
    'Cel', 'Nnl', 'Nil', 'Cons', 'uncons',
    'cons', 'cons_to_iterable', 'cons_to_list'
]

from .Cel import (
    Cel, Nnl, Nil, Cons, uncons,
    cons, cons_to_iterable, cons_to_list
)
