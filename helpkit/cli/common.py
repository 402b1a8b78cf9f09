import sys
import functools
from pathlib import Path
import typing as T

import click

from .. import logging, config
from ..toolz import curry, compose, get_path

log = logging.new_log(__name__)

LOGLEVELS = ['debug', 'info', 'warning', 'error', 'critical']

loglevel = compose(
    click.option(
        '--loglevel', default=None,
        type=click.Choice(LOGLEVELS),
        help='Logging level (default: configured loglevel)'
    )
)

block_size = compose(
    click.option(
        '-b', '--block-size', type=click.IntRange(min=1), default=None,
        help='Bytes copied per read/write (default: configured block_size)',
    )
)

def configured(cfg, path: str, value=None):
    '''Command line value if given, otherwise the configured one
    '''
    if value is not None:
        return value
    return get_path(path, cfg, default=None)

def setup(cfg, loglevel_: T.Optional[str]):
    logging.setup_logging(configured(cfg, 'loglevel', loglevel_) or 'info')

def get_content(inpath: T.Optional[T.Union[str, Path]]):
    '''Get input data from either input Path or stdin
    '''
    if inpath:
        log.info(f'Getting input from path: {inpath}')
        return Path(inpath).expanduser().read_text()
    log.info('Getting input from stdin...')
    return sys.stdin.read()

@curry
def _exit_with_msg(logger, msg):
    ctx = click.get_current_context()
    click.echo(ctx.get_help(), err=True)
    logger.error(msg)
    raise click.Abort()

exit_with_msg = _exit_with_msg(log)

def abort(msg: str):
    log.error(msg)
    raise click.Abort()

def not_found(msg: str):
    log.warning(msg)
    click.get_current_context().exit(1)

def with_config(func):
    '''Pass the loaded configuration as first argument, aborting the
    command when it is missing or invalid
    '''
    configured_func = config.with_config(func)

    @functools.wraps(func)
    def wrapper(*a, **kw):
        try:
            return configured_func(*a, **kw)
        except config.HelpkitConfigError as error:
            abort(str(error))
    return wrapper
