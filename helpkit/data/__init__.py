from .mime_types import MIME_TYPES

from . import mime_types
