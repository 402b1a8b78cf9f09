from typing import (
    Hashable, Iterable, Any, Union,
)

from .common import (
    pipe, curry, map, filter, is_dict, is_seq, is_str, is_indexable,
    is_digits, is_none, is_some, Nothing,
)

__all__ = [
    # dictionary
    'DELIMITER', 'WILDCARD', 'get_path', 'is_traversable',
]

DELIMITER = '.'
WILDCARD = '*'

KeyPath = Union[str, Iterable[Hashable]]

# ----------------------------------------------------------------------
#
# Nested data access
#
# ----------------------------------------------------------------------

def is_traversable(value):
    '''Can get_path dig into this value (a mapping or an indexable
    non-string sequence)

    Examples:

    >>> is_traversable({}), is_traversable([]), is_traversable(())
    (True, True, True)
    >>> is_traversable('not a container'), is_traversable({1, 2})
    (False, False)
    '''
    return is_dict(value) or (is_seq(value) and is_indexable(value))

def children(level):
    if is_dict(level):
        return level.values()
    return level

def lookup(level, key):
    '''Value of key in one level of a tree, or Nothing() if the key is
    missing or its value is None

    All-digit string keys index into sequences. For mappings the string
    key wins, its integer form is tried second.

    Examples:

    >>> lookup({'a': 1}, 'a'), lookup({1: 'one'}, '1'), lookup(['x'], '0')
    (1, 'one', 'x')
    >>> is_none(lookup({'a': None}, 'a'))
    True
    '''
    if is_dict(level):
        candidates = (key, int(key)) if is_digits(key) else (key,)
        for k in candidates:
            if not isinstance(k, Hashable) or k not in level:
                continue
            if level[k] is not None:
                return level[k]
        return Nothing()

    if is_digits(key):
        key = int(key)
    if isinstance(key, int) and not isinstance(key, bool):
        if 0 <= key < len(level) and level[key] is not None:
            return level[key]
    return Nothing()

def split_path(path: str, delimiter: str, wildcard: bool):
    '''Split a delimited path into keys, ignoring leading delimiters and
    spaces, and trailing delimiters, spaces and (if enabled) wildcards

    >>> split_path(' .theme.*.color.*', '.', True)
    ['theme', '*', 'color']
    >>> split_path('theme/*', '/', False)
    ['theme', '*']
    '''
    path = path.lstrip(f'{delimiter} ')
    path = path.rstrip(f'{delimiter} {WILDCARD}' if wildcard else f'{delimiter} ')
    return path.split(delimiter)

@curry
def get_path(path: KeyPath, container: Any, *, wildcard: bool = True,
             default: Any = Nothing(), delimiter: str = DELIMITER):
    '''Get a value from nested mappings/sequences using a delimited path
    (or a sequence of keys).

    Using a wildcard "*" searches every element at that level with the
    rest of the path and returns the list of values found.

    Args:
      path (str|Iterable[Hashable]): delimited key path or key sequence

      container (Mapping|Sequence): tree to search

      wildcard (bool): treat "*" as the wildcard key (default: True)

      default (Any): returned when nothing is found (default: Nothing())

      delimiter (str): key path delimiter (default: ".")

    Returns: (Any) the value found, list of values for wildcard paths, or
      default

    Examples:

    >>> data = {'theme': [{'color': 'red'}, {'size': 2}, {'color': 'blue'}]}
    >>> pipe(data, get_path('theme.0.color'))
    'red'
    >>> pipe(data, get_path('theme.*.color'))
    ['red', 'blue']
    >>> pipe(data, get_path('theme.1.color', default='not found'))
    'not found'
    >>> get_path(['theme', 1, 'size'], data)
    2

    '''
    if not is_traversable(container):
        return default

    if is_dict(container) and (is_str(path) or isinstance(path, int)):
        if path in container:
            return container[path]

    if is_str(path):
        keys = split_path(path, delimiter, wildcard)
    elif is_seq(path):
        keys = list(path)
    else:
        keys = [path]

    level = container
    while keys:
        key = keys.pop(0)
        value = lookup(level, key)

        if is_none(value):
            if not (wildcard and key == WILDCARD):
                return default
            if keys:
                values = pipe(
                    children(level),
                    map(get_path(
                        keys, wildcard=wildcard, default=Nothing(),
                        delimiter=delimiter,
                    )),
                    filter(is_some),
                    list,
                )
            else:
                values = pipe(
                    children(level),
                    filter(lambda v: v is not None),
                    list,
                )
            return values if values else default

        if not keys:
            return value
        if not is_traversable(value):
            return default
        level = value

    return default
