from . import (
    toolz,
    logging,
    yaml,
    config,
    data,
    mime,
    pieces,
)
__version__ = '0.1.0'
