"""
    Stock associative combiners for segment trees.

    A combiner is any callable taking two values and returning their
    combination. It must be associative; it need not be commutative, the
    segment tree always passes the left operand first.
"""

import operator


def minimum(a, b):
    # the left operand wins ties
    return b if b < a else a


def maximum(a, b):
    return b if a < b else a


add = operator.add
multiply = operator.mul


COMBINERS = {'min': minimum,
             'max': maximum,
             'sum': add,
             'prod': multiply}


def get_combiner(fn):
    if isinstance(fn, str):
        try:
            return COMBINERS[fn]
        except KeyError:
            raise ValueError('Unknown combiner {0!r}, choose one of: {1}.'.format(fn, ', '.join(sorted(COMBINERS))))
    if not callable(fn):
        raise TypeError('Combiner must be callable or a name, got: ' + str(type(fn)))
    return fn
