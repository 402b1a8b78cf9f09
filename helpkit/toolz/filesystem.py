from pathlib import Path
import inspect
import functools
import tempfile # noqa
import typing as T

from toolz.functoolz import compose

from .common import (
    pipe, curry, new_log,
)

log = new_log(__name__)

__all__ = [
    # filesystem
    'Pathlike', 'POS_PARAM_KINDS', 'ensure_paths', 'ensure_paths_curry',
    'slurpbchunks',
    'is_file', 'suffix',
]

Pathlike = T.Union[str, Path]

# ----------------------------------------------------------------------
#
# File operations
#
# ----------------------------------------------------------------------

def is_path_type(t):
    return t in {
        T.Union[str, Path], Path
    }

POS_PARAM_KINDS = {
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
}
@curry
def ensure_paths(func, *, expanduser: bool=True):
    '''Convert every argument annotated as a path (Path or Union[str,
    Path]) into a Path object, with the user symbol `~` expanded by
    default.

    Examples

    >>> @ensure_paths
    ... def f(a: T.Union[str, Path]):
    ...     print(a.name)
    ...     print(a.suffix)
    ...
    >>> f('archive.tar.001')
    archive.tar.001
    .001
    >>> f(Path('archive.tar'))
    archive.tar
    .tar

    '''
    path_params = {
        name: (i, param)
        for i, (name, param)
        in enumerate(inspect.signature(func).parameters.items())
        if is_path_type(param.annotation)
    }

    pos_params = {
        i for name, (i, param) in path_params.items()
        if param.kind in POS_PARAM_KINDS
    }

    def to_path(value):
        path = Path(value)
        return path.expanduser() if expanduser else path

    @functools.wraps(func)
    def path_arg_converter(*args, **kwargs):
        args = [
            to_path(v) if (i in pos_params and v is not None) else v
            for i, v in enumerate(args)
        ]
        kwargs = {
            k: to_path(v) if (k in path_params and v is not None) else v
            for k, v in kwargs.items()
        }
        return func(*args, **kwargs)
    return path_arg_converter

ensure_paths_curry = compose(
    curry,
    ensure_paths,
)

@ensure_paths
def is_file(path: Pathlike) -> bool:
    return path.is_file()

@ensure_paths
def suffix(path: Pathlike) -> str:
    '''Lowercase extension of the path, without the leading dot

    >>> suffix('photos/Holiday.JPG')
    'jpg'
    >>> suffix('README')
    ''
    '''
    return path.suffix[1:].lower()

@ensure_paths_curry
def slurpbchunks(size: int, path: Pathlike):
    '''Lazily read the file at path as a sequence of byte blocks of at
    most size bytes

    >>> with tempfile.TemporaryDirectory() as temp:
    ...     path = Path(temp, 'data.bin')
    ...     _ = path.write_bytes(b'abcdefg')
    ...     chunks = pipe(path, slurpbchunks(3), tuple)
    >>> chunks
    (b'abc', b'def', b'g')
    '''
    with path.open('rb') as rfp:
        while chunk := rfp.read(size):
            yield chunk
