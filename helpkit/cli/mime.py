'''MIME type lookup command line tools
'''
import click

from . import common
from .. import logging, mime as _mime

log = logging.new_log(__name__)

@click.command(help='''
Print the best-effort MIME type of each FILE ("-" when unknown).
''')
@click.argument(
    'files', type=click.Path(exists=True, dir_okay=False), nargs=-1,
    required=True,
)
@common.loglevel
@common.with_config
def mime(config, files, loglevel):
    common.setup(config, loglevel)
    for path in files:
        click.echo(f'{path}\t{_mime.mime(path) or "-"}')

@click.command(help='''
Print the MIME type of extension EXT (e.g. "png" or ".png").
''')
@click.argument('ext')
@click.option(
    '-m', '--multi', is_flag=True,
    help='Print every candidate MIME type, one per line',
)
def mime_for_extension(ext, multi):
    found = _mime.mime_for_extension(ext, multi=multi)
    if not found:
        common.not_found(f'No MIME type known for extension: {ext}')
    click.echo('\n'.join(found) if multi else found)

@click.command(help='''
Print the file extension for MIME type MIME_TYPE (e.g. "image/png").
''')
@click.argument('mime_type')
@click.option(
    '-m', '--multi', is_flag=True,
    help='Print every matching extension, one per line',
)
def extension_for_mime(mime_type, multi):
    found = _mime.extension_for_mime(mime_type, multi=multi)
    if not found:
        common.not_found(f'No extension known for MIME type: {mime_type}')
    click.echo('\n'.join(found) if multi else found)
