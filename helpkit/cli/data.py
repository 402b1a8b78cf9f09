'''Nested data access command line tools
'''
import click

from . import common
from .. import logging, yaml
from ..toolz import get_path as _get_path, is_none, is_traversable, DELIMITER

log = logging.new_log(__name__)

@click.command(help='''
Read YAML (or JSON) data from a file or stdin and print the value found at
the delimited key PATH (e.g. "theme.*.color"). Exits with status 1 when
nothing is found.
''')
@click.argument('path')
@click.option(
    '-i', '--inpath', type=click.Path(exists=True, dir_okay=False),
    help='Path of the YAML/JSON file to read. If empty, read stdin.',
)
@click.option(
    '-d', '--delimiter', default=DELIMITER, show_default=True,
    help='Key delimiter used in PATH',
)
@click.option(
    '--no-wildcard', is_flag=True,
    help='Treat "*" as a plain key instead of a wildcard',
)
@common.loglevel
@common.with_config
def get_path(config, path, inpath, delimiter, no_wildcard, loglevel):
    common.setup(config, loglevel)
    data = yaml.load(common.get_content(inpath))
    value = _get_path(
        path, data, wildcard=not no_wildcard, delimiter=delimiter,
    )
    if is_none(value):
        common.not_found(f'Nothing found at path: {path}')
    if is_traversable(value):
        click.echo(yaml.dump(value), nl=False)
    else:
        click.echo(value)
