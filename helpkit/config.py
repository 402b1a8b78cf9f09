'''Configuration for the helpkit command line tools

The configuration is a YAML file, config.yml, in the configuration
directory given by $HELPKIT_CONFIG_DIR (default: ~/.config/helpkit). A
commented boilerplate is written the first time it is loaded:

```
loglevel: info

pieces:
  piece_size: 10
  block_size: 8192
```

Command line options always win over configured values.
'''
import os
import functools
import numbers
import typing as T
from pathlib import Path

from . import logging, yaml
from .toolz import *

log = logging.new_log(__name__)

CONFIG_DIR_ENV = 'HELPKIT_CONFIG_DIR'
DEFAULT_CONFIG_DIR = '~/.config/helpkit'
CONFIG_NAME = 'config.yml'

class HelpkitConfigError(IOError):
    pass

CONFIG_BP = '''\
#--------------------------------------------------------------------------
#
# Configuration for {app_name}
#
#--------------------------------------------------------------------------

# Log output level (debug, info, warning, error, critical)
loglevel: info

pieces:
  # Size of each piece, in MB, when splitting files
  piece_size: 10

  # Size, in bytes, of the blocks copied between files
  block_size: 8192
'''

def base_config(app_name: str = 'helpkit'):
    return CONFIG_BP.format(
        app_name=app_name,
    )

KeyReqs = T.Iterable[
    T.Tuple[
        str,             # group key
        T.Iterable[str], # required sub-keys
        str              # information about key
    ]
]

KEY_REQS: KeyReqs = (
    ('pieces', ('piece_size', 'block_size'), 'split/join defaults'),
)

def is_positive_number(value):
    return (
        isinstance(value, numbers.Real)
        and not isinstance(value, bool)
        and value > 0
    )

def is_positive_integer(value):
    return isinstance(value, numbers.Integral) and is_positive_number(value)

SIZE_KEYS = (
    ('pieces', 'piece_size', is_positive_number, 'a positive number'),
    ('pieces', 'block_size', is_positive_integer, 'a positive integer'),
)

@curry
def config_verifier(key_reqs: KeyReqs, config: T.Mapping):
    '''Check that every group in key_reqs exists with all of its sub-keys
    and that sizes are valid. Problems are logged, then raised
    as a single HelpkitConfigError.
    '''
    problems = []
    for app_key, sub_keys, access_text in key_reqs:
        group = config.get(app_key)
        if not is_dict(group):
            problems.append(f'missing group "{app_key}" ({access_text})')
            continue
        for k in sub_keys:
            if k not in group:
                problems.append(f'missing key "{app_key}.{k}"')
            elif group[k] is None or group[k] == '':
                problems.append(f'no value for "{app_key}.{k}"')

    for app_key, k, is_valid, valid_text in SIZE_KEYS:
        value = get_path([app_key, k], config, default=None)
        if value is not None and not is_valid(value):
            problems.append(
                f'"{app_key}.{k}" must be {valid_text}, got {value!r}'
            )

    if problems:
        log.error(
            'The configuration is in a bad state for the following reasons:'
        )
        for problem in problems:
            log.error(f'  - {problem}')
        raise HelpkitConfigError(
            f'Invalid configuration: {"; ".join(problems)}'
        )
    return config

verify_config = config_verifier(KEY_REQS)

def config_dir() -> Path:
    return Path(
        os.environ.get(CONFIG_DIR_ENV) or DEFAULT_CONFIG_DIR
    ).expanduser()

def config_dir_provider(dir_func: T.Callable[[], Path]):
    def provide_config_dir(func):
        @functools.wraps(func)
        def wrapper(*a, **kw):
            config_dir_path = dir_func()
            config_dir_path.mkdir(mode=0o700, exist_ok=True, parents=True)
            return func(config_dir_path, *a, **kw)
        return wrapper
    return provide_config_dir

def config_loader(provide_config_dir_dec: T.Callable, config_name: str,
                  config_bp: str):
    @provide_config_dir_dec
    def load_config(config_dir_path):
        path = config_dir_path / config_name
        if not path.exists():
            log.info(
                f'Creating new configuration: {path}'
            )
            path.write_text(config_bp)
            path.chmod(0o600)
        config = yaml.maybe_read_yaml(path)
        if is_none(config):
            raise HelpkitConfigError(f'Unable to read configuration: {path}')
        if not is_dict(config):
            raise HelpkitConfigError(
                f'Configuration must be a mapping: {path}'
            )
        return to_pyrsistent(config)
    return load_config

def config_provider(loader: T.Callable, verifier: T.Callable):
    def with_config(func):
        @functools.wraps(func)
        def wrapper(*a, **kw):
            config = pipe(
                loader(),
                verifier,
            )
            return func(config, *a, **kw)
        return wrapper
    return with_config

read_config = config_loader(
    config_dir_provider(config_dir), CONFIG_NAME, base_config(),
)

def load_config():
    return pipe(read_config(), verify_config)

with_config = config_provider(read_config, verify_config)
