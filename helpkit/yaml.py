import io
from pathlib import Path
import typing as T

from ruamel.yaml import YAML
from pymaybe import Nothing

from . import logging
from . import toolz as _

log = logging.new_log(__name__)

def _yaml():
    yaml = YAML(typ='rt')
    yaml.default_flow_style = False
    yaml.width = 2**31
    return yaml

def dump(obj: T.Any) -> str:
    '''Dump obj (pyrsistent objects included) as a YAML string
    '''
    buf = io.StringIO()
    _yaml().dump(_.no_pyrsistent(obj), buf)
    return buf.getvalue()

def load(stream: T.Union[str, T.TextIO]) -> T.Any:
    '''Load YAML (or JSON, which is YAML) from a string or stream
    '''
    return _yaml().load(stream)

@_.ensure_paths
def read_yaml(path: T.Union[str, Path]):
    '''Read YAML data from path and return object
    '''
    with path.open() as rfp:
        return load(rfp)

def maybe_read_yaml(path: T.Union[str, Path]):
    try:
        return read_yaml(path)
    except Exception:
        log.exception(f'Error reading YAML path: {path}')
        return Nothing()
