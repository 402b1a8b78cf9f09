from pathlib import Path

from helpkit.toolz import (
    pipe, slurpbchunks, is_file, suffix, ensure_paths,
)

def test_slurpbchunks(binary_path):
    assert pipe(
        binary_path,
        slurpbchunks(4),
        tuple,
    ) == (bytes([0, 1, 2, 3]), bytes([4, 5, 6, 7]), bytes([8, 9]))

def test_slurpbchunks_empty(tmpdir):
    path = Path(tmpdir) / 'empty'
    path.write_bytes(b'')
    assert pipe(str(path), slurpbchunks(4), tuple) == ()

def test_is_file(hello_path, tmpdir):
    assert is_file(str(hello_path))
    assert not is_file(Path(tmpdir) / 'missing')
    assert not is_file(tmpdir)

def test_suffix():
    assert suffix('archive.TAR') == 'tar'
    assert suffix('archive.tar.001') == '001'
    assert suffix('Makefile') == ''

def test_ensure_paths_converts_str_and_keyword():
    @ensure_paths
    def f(a: Path, b: Path = None, c: str = 'x'):
        return a, b, c

    a, b, c = f('~/piece.001', b='other')
    assert isinstance(a, Path) and not str(a).startswith('~')
    assert b == Path('other')
    assert c == 'x'

def test_ensure_paths_converts_empty_str():
    @ensure_paths
    def f(a: Path, b: Path = None):
        return a, b

    assert f('') == (Path(''), None)
    assert f('x', b='') == (Path('x'), Path(''))
