import typing as T
import logging

import coloredlogs
# helpkit.toolz imports new_log from here, so merge comes straight from toolz
from toolz.curried import merge

LOG_FORMAT = '{asctime} {levelname: <6} [{name}:{lineno: >4}]  {message}'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'

# Pillow logs every chunk it parses at debug level
NOISY_LOGGERS = ('PIL',)

def new_log(name):
    log = logging.getLogger(name)
    log.addHandler(logging.NullHandler())
    return log

def setup_logging(loglevel: T.Union[str, int], **config_kw):
    '''Install a coloredlogs console handler on the root logger

    Args:
      loglevel (str|int): level name ("debug", "info", ...) or number

      **config_kw: overrides for coloredlogs.install
    '''
    level = loglevel.upper() if isinstance(loglevel, str) else loglevel
    kw = merge({
        'level': level,
        'datefmt': LOG_DATEFMT,
        'fmt': LOG_FORMAT,
        'style': '{',
        'field_styles': merge(
            coloredlogs.DEFAULT_FIELD_STYLES, {
                'name': {'bold': True, 'color': 'blue'}
            }
        ),
    }, config_kw)
    coloredlogs.install(**kw)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
