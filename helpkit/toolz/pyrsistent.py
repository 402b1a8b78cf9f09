import functools
from pathlib import Path

import pymaybe
from pyrsistent import pmap, pvector

from .common import (
    pipe, vmap, map, is_dict, is_seq,
)

__all__ = [
    # pyrsistent
    'freeze', 'no_pyrsistent', 'to_pyrsistent',
]

# ----------------------------------------------------------------------
#
# pyrsistent object functions
#
# ----------------------------------------------------------------------

def to_pyrsistent(obj):
    '''Convert object to immutable pyrsistent objects

    Examples:

    >>> to_pyrsistent({'png': ['image/png', 'image/x-png']})['png']
    pvector(['image/png', 'image/x-png'])

    >>> to_pyrsistent({'css': ['text/css']})['css'][0] = 'text/plain'
    Traceback (most recent call last):
      ...
    TypeError: ...
    '''
    if is_dict(obj):
        return pipe(
            obj.items(),
            vmap(lambda k, v: (k, to_pyrsistent(v))),
            pmap,
        )
    if is_seq(obj):
        return pipe(obj, map(to_pyrsistent), pvector)
    return obj

def no_pyrsistent(obj):
    '''Convert pyrsistent (and other non-builtin) objects to Python
    types suitable for serialization

    pmap -> dict
    pvector -> list
    Path -> str
    Nothing -> None

    Examples:

    >>> pipe(pmap({'pieces': pvector([1, 2, 3])}), no_pyrsistent)
    {'pieces': [1, 2, 3]}
    '''
    match obj:
        case pymaybe.Nothing():
            return None
        case dobj if is_dict(dobj):
            return pipe(
                dobj.items(),
                vmap(lambda k, v: (no_pyrsistent(k), no_pyrsistent(v))),
                dict,
            )
        case seq if is_seq(seq):
            return pipe(seq, map(no_pyrsistent), list)
        case path if isinstance(path, Path):
            return str(path)
    return obj

def freeze(func):
    '''Ensure output of func is immutable

    Uses to_pyrsistent on the output of func

    Examples:

    >>> @freeze
    ... def f():
    ...     return [1, 2, 3]
    >>> f()
    pvector([1, 2, 3])
    '''
    @functools.wraps(func)
    def return_frozen(*a, **kw):
        return pipe(func(*a, **kw), to_pyrsistent)
    return return_frozen
