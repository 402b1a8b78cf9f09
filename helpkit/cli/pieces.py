'''Split/join command line tools
'''
import click

from . import common
from .. import logging, pieces

log = logging.new_log(__name__)

@click.command(help='''
Split FILE into numbered pieces (FILE.001, FILE.002, ...) of SIZE MB each
and print the number of pieces created.
''')
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option(
    '-s', '--size', type=float, default=None,
    help='Size, in MB, for each piece (default: configured piece_size)',
)
@common.block_size
@common.loglevel
@common.with_config
def split(config, file, size, block_size, loglevel):
    common.setup(config, loglevel)
    size = common.configured(config, 'pieces.piece_size', size)
    block_size = common.configured(config, 'pieces.block_size', block_size)
    try:
        count = pieces.split(file, size, block_size)
    except ValueError as error:
        common.exit_with_msg(str(error))
    except OSError as error:
        common.abort(f'Unable to split {file}: {error}')
    click.echo(count)

@click.command(help='''
Join the pieces of a split FILE (FILE.001, FILE.002, ...) back into FILE
and print the number of pieces joined.
''')
@click.argument('file', type=click.Path(dir_okay=False))
@common.block_size
@common.loglevel
@common.with_config
def join(config, file, block_size, loglevel):
    common.setup(config, loglevel)
    block_size = common.configured(config, 'pieces.block_size', block_size)
    try:
        count = pieces.join(file, block_size)
    except ValueError as error:
        common.exit_with_msg(str(error))
    except OSError as error:
        common.abort(f'Unable to join {file}: {error}')
    if not count:
        log.warning(f'No pieces found for {file}')
    click.echo(count)

@click.command(name='pieces', help='''
List the pieces of a split FILE, in joining order.
''')
@click.argument('file', type=click.Path(dir_okay=False))
def list_pieces(file):
    for path in pieces.piece_paths(file):
        click.echo(str(path))
