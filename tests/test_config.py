import stat

import pytest
from pyrsistent import PMap

from helpkit import config
from helpkit.config import HelpkitConfigError, verify_config

def test_load_config_creates_boilerplate(config_dir):
    cfg = config.load_config()
    path = config_dir / config.CONFIG_NAME

    assert path.exists()
    assert stat.S_IMODE(path.stat().st_mode) == 0o600
    assert isinstance(cfg, PMap)
    assert cfg['loglevel'] == 'info'
    assert cfg['pieces']['piece_size'] == 10
    assert cfg['pieces']['block_size'] == 8192

def test_load_config_reads_existing(config_dir):
    config_dir.mkdir(parents=True)
    (config_dir / config.CONFIG_NAME).write_text(
        'loglevel: debug\n'
        'pieces:\n'
        '  piece_size: 2.5\n'
        '  block_size: 4096\n'
    )
    cfg = config.load_config()
    assert cfg['loglevel'] == 'debug'
    assert cfg['pieces']['piece_size'] == 2.5

@pytest.mark.parametrize('cfg', [
    {},
    {'pieces': None},
    {'pieces': {'piece_size': 10}},
    {'pieces': {'piece_size': '', 'block_size': 8192}},
    {'pieces': {'piece_size': 0, 'block_size': 8192}},
    {'pieces': {'piece_size': 10, 'block_size': 'big'}},
    {'pieces': {'piece_size': 10, 'block_size': 8192.0}},
])
def test_verify_config_rejects(cfg, caplog):
    with pytest.raises(HelpkitConfigError):
        verify_config(cfg)
    assert 'bad state' in caplog.text

def test_verify_config_accepts():
    cfg = {'pieces': {'piece_size': 0.5, 'block_size': 1024}}
    assert verify_config(cfg) is cfg

def test_load_config_rejects_bad_file(config_dir):
    config_dir.mkdir(parents=True)
    (config_dir / config.CONFIG_NAME).write_text('- just\n- a list\n')
    with pytest.raises(HelpkitConfigError):
        config.load_config()

def test_config_error_is_ioerror():
    assert issubclass(HelpkitConfigError, IOError)

def test_with_config(config_dir):
    @config.with_config
    def piece_size(cfg, scale):
        return cfg['pieces']['piece_size'] * scale

    assert piece_size(3) == 30
