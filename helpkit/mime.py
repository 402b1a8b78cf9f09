'''Extension/MIME type lookups and best-effort MIME sniffing of files

The extension table and its reverse index are built together at import
and never change afterwards.
'''
import re
from pathlib import Path
import typing as T

from PIL import Image, UnidentifiedImageError

from . import logging
from .toolz import *
from .data import MIME_TYPES

log = logging.new_log(__name__)

# Generic binary marker, never used for reverse lookups
OCTET_STREAM = 'application/octet-stream'

# Extensions whose content is inspected before trusting the name
IMAGE_EXT_RE = re.compile(r'^(?:jpe?g|png|[gt]if|bmp|swf)$')

def normalize_extension(ext: str) -> str:
    return ext.strip().lstrip('.').lower()

def table_items(table: T.Mapping[str, T.Sequence[str]]):
    '''(extension, MIME types) pairs of the table, normalised, in table
    order and without extensions that have no MIME type
    '''
    return pipe(
        table.items(),
        vmap(lambda ext, mimes: (normalize_extension(ext), tuple(mimes))),
        vfilter(lambda ext, mimes: bool(mimes)),
        tuple,
    )

@freeze
def build_extension_index(table: T.Mapping[str, T.Sequence[str]]):
    return dict(table_items(table))

@freeze
def build_mime_index(table: T.Mapping[str, T.Sequence[str]]):
    '''MIME type -> extensions, in table order and without duplicates

    The grouping runs over the ordered table, the result is frozen
    afterwards.

    >>> build_mime_index({'b': ['x/y'], 'a': ['x/y', 'x/z']})['x/y']
    pvector(['b', 'a'])
    '''
    return pipe(
        table_items(table),
        vmapcat(lambda ext, mimes: [(mime, ext) for mime in mimes]),
        vfilter(lambda mime, ext: mime != OCTET_STREAM),
        groupby(first),
        valmap(compose_left(map(second), unique, tuple)),
    )

EXTENSION_MIMES = build_extension_index(MIME_TYPES)
MIME_EXTENSIONS = build_mime_index(MIME_TYPES)

def mime_for_extension(ext: str, multi: bool = False):
    '''MIME type of an extension

    >>> mime_for_extension('png')
    'image/png'
    >>> mime_for_extension('.AVI', multi=True)
    ('video/avi', 'video/msvideo', 'video/x-msvideo')

    Returns None (or () when multi is set) for unknown extensions.
    '''
    mimes = EXTENSION_MIMES.get(normalize_extension(ext))
    if mimes:
        return tuple(mimes) if multi else mimes[0]
    return () if multi else None

def extension_for_mime(mime_type: str, multi: bool = False):
    '''Extension(s) for a MIME type, the counterpart of
    mime_for_extension

    >>> extension_for_mime('image/png')
    'png'
    >>> extension_for_mime('image/jpeg', multi=True)
    ('jpe', 'jpeg', 'jpg')

    Returns None (or () when multi is set) for unknown types.
    '''
    exts = MIME_EXTENSIONS.get(mime_type.strip().lower())
    if exts:
        return tuple(exts) if multi else exts[0]
    return () if multi else None

@ensure_paths
def image_mime(path: T.Union[str, Path]) -> T.Optional[str]:
    '''MIME type of an image file from its content signature, None if
    Pillow does not recognise it
    '''
    try:
        with Image.open(path) as image:
            return Image.MIME.get(image.format)
    except UnidentifiedImageError:
        log.debug(f'No image signature found in {path}')
        return None

@ensure_paths
def mime(path: T.Union[str, Path]) -> T.Optional[str]:
    '''Best-effort MIME type of a file.

    Images (by extension) are identified by content first, everything
    else (and unrecognised images) by the extension table.

    Raises:
      FileNotFoundError: the path does not exist or is not a file
    '''
    path = path.resolve()
    if not path.is_file():
        raise FileNotFoundError(f'No such file: {path}')

    ext = suffix(path)
    if IMAGE_EXT_RE.match(ext):
        found = image_mime(path)
        if found:
            log.debug(f'{path.name}: {found} (image signature)')
            return found

    if ext:
        found = mime_for_extension(ext)
        log.debug(f'{path.name}: {found} (extension)')
        return found

    log.debug(f'{path.name}: no extension, unable to determine MIME type')
    return None
