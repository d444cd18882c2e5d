#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-


__all__: list[str] = [
    'Functor', 'Pointed', 'Applicative', 'Monad', 'Copointed', 'Comonad',

    'StreamError', 'EmptyInputError', 'UnsupportedOperationError',

    'Step', 'Stream', 'StreamIterator', 'once',
    'unfold', 'repeat', 'iterate', 'cycle',

    'transpose', 'zip_with', 'unzip',

    'Laws',

    'Cel', 'Nnl', 'Nil', 'Cons', 'uncons',
]

import loguru as LG

from .core       import *
from .immutables import Cel, Nnl, Nil, Cons, uncons

# Library logging stays silent until an application opts in with
# `loguru.logger.enable('infinita')`.
LG.logger.disable(__name__)
