#!/usr/bin/env python3
# -*- coding: utf-8; mode: python -*-


__all__: list[str] = [
    'Functor', 'Pointed', 'Applicative', 'Monad', 'Copointed', 'Comonad',

    'StreamError', 'EmptyInputError', 'UnsupportedOperationError',

    'Step', 'Stream', 'StreamIterator', 'once',
    'unfold', 'repeat', 'iterate', 'cycle',

    'transpose', 'zip_with', 'unzip',

    'Laws',
]

from .Types       import ( Functor, Pointed, Applicative, Monad            #
                         , Copointed, Comonad                              )
from .Errors      import ( StreamError, EmptyInputError                    #
                         , UnsupportedOperationError                       )
from .Streams     import ( Step, Stream, StreamIterator, once              #
                         , unfold, repeat, iterate, cycle                  )
from .Combinators import   transpose, zip_with, unzip
from .            import   Laws
