import functools
import collections
import pprint

from pymaybe import maybe, Nothing
from toolz.curried import *

from ..logging import new_log

log = new_log(__name__)

__all__ = [
    # common
    'new_log', 'error_raise',
    'is_str', 'is_dict', 'is_seq', 'is_indexable', 'is_digits',
    'is_none', 'is_some',
    'vcall', 'vmap', 'vmapcat', 'vfilter', 'Nothing', 'maybe',
]

# ----------------------------------------------------------------------
#
# Logging operations
#
# ----------------------------------------------------------------------

@curry
def error_raise(func, *, pprinter=pprint.pformat):
    '''Log the arguments of func at error level when it raises, then
    re-raise

    Examples:

    >>> @error_raise
    ... def boom(path):
    ...     raise IOError(path)
    >>> boom('missing.bin')
    Traceback (most recent call last):
      ...
    OSError: missing.bin
    '''
    @functools.wraps(func)
    def raiser(*a, **kw):
        try:
            return func(*a, **kw)
        except Exception:
            kw_str = {
                k: pprinter(v) for k, v in kw.items()
            }
            log.error(
                f'{func.__name__} failed\n\n'
                f'args: \n\n{pprint.pformat([pprinter(o) for o in a])}\n\n'
                f'kwargs: \n\n{pprint.pformat(kw_str)}\n\n'
            )
            raise
    return raiser

# ----------------------------------------------------------------------
#
# Basic type operations
#
# ----------------------------------------------------------------------

def is_str(v):
    '''Is this a string object
    '''
    return isinstance(v, str)

def is_dict(d):
    return isinstance(d, collections.abc.Mapping)

def is_indexable(s):
    return hasattr(s, '__getitem__')

def is_seq(s):
    return (
        isinstance(s, collections.abc.Iterable)
        and                     # noqa
        (not is_dict(s))
        and                     # noqa
        (not isinstance(s, (str, bytes)))
    )

def is_digits(value):
    '''Is this a non-empty string made only of ASCII digits

    Examples:

    >>> is_digits('007')
    True
    >>> is_digits('-1'), is_digits(''), is_digits(7)
    (False, False, False)
    '''
    return is_str(value) and value.isascii() and value.isdigit()

def is_none(v):
    return maybe(v).is_none()

def is_some(v):
    return maybe(v).is_some()

# ----------------------------------------------------------------------
#
# Variadic versions of toolz functions
#
# ----------------------------------------------------------------------

@curry
def vcall(func, value):
    '''Variadic call

    Example:

    >>> pipe(['report.pdf', 2], vcall(lambda name, n: f'{name}.{n:03d}'))
    'report.pdf.002'
    '''
    return func(*value)

@curry
def vmap(func, seq):
    '''Variadic map

    Example:

    >>> pipe([('png', 'image/png'), ('css', 'text/css')],
    ...      vmap(lambda ext, mime: f'{ext}={mime}'), tuple)
    ('png=image/png', 'css=text/css')
    '''
    return pipe(
        seq,
        map(vcall(func)),
    )

@curry
def vfilter(func, seq):
    '''Variadic filter

    Example:

    >>> pipe([(1, 2), (4, 3), (5, 6)], vfilter(lambda a, b: a < b), tuple)
    ((1, 2), (5, 6))
    '''
    return pipe(
        seq,
        filter(vcall(func)),
    )

@curry
def vmapcat(func, seq):
    '''Variadic mapcat

    Example:

    >>> pipe([('tif', ['image/tiff']), ('zip', ['a', 'b'])],
    ...      vmapcat(lambda ext, mimes: [(m, ext) for m in mimes]), tuple)
    (('image/tiff', 'tif'), ('a', 'zip'), ('b', 'zip'))
    '''
    return pipe(
        seq,
        mapcat(vcall(func)),
    )
