from pathlib import Path
from pytest import fixture

from helpkit import config

@fixture(autouse=True)
def config_dir(tmpdir, monkeypatch):
    path = Path(tmpdir) / 'config'
    monkeypatch.setenv(config.CONFIG_DIR_ENV, str(path))
    return path

@fixture
def quiet_config(config_dir):
    config_dir.mkdir(parents=True, exist_ok=True)
    path = config_dir / config.CONFIG_NAME
    path.write_text(
        config.base_config().replace('loglevel: info', 'loglevel: error')
    )
    return path

@fixture
def make_file(tmpdir):
    def make(name: str, content: bytes = b'') -> Path:
        path = Path(tmpdir) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path
    return make
