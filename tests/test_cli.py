from pathlib import Path

import pytest
from click.testing import CliRunner

from helpkit.cli import pieces as pieces_cli, mime as mime_cli, data as data_cli
from helpkit import pieces
from helpkit.pieces import piece_path

@pytest.fixture
def runner(quiet_config):
    return CliRunner()

def test_split_and_join(runner, make_file):
    data = bytes(range(256)) * 12
    path = make_file('data.bin', data)

    result = runner.invoke(
        pieces_cli.split,
        [str(path), '--size', str(1024 / 1024 ** 2), '-b', '1024'],
    )
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == '3'
    assert piece_path(path, 3).stat().st_size == 1024

    result = runner.invoke(pieces_cli.list_pieces, [str(path)])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        str(piece_path(path, n)) for n in (1, 2, 3)
    ]

    path.unlink()
    result = runner.invoke(pieces_cli.join, [str(path), '-b', '100'])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == '3'
    assert path.read_bytes() == data

def test_split_uses_configured_size(runner, make_file, quiet_config):
    quiet_config.write_text(
        quiet_config.read_text().replace('piece_size: 10', 'piece_size: 0.001')
    )
    path = make_file('data.bin', b'x' * 3000)
    result = runner.invoke(pieces_cli.split, [str(path)])
    assert result.exit_code == 0, result.output
    # 1048 byte budget, rounded up to one 8k block
    assert result.stdout.strip() == '1'

def test_split_bad_size(runner, make_file):
    path = make_file('data.bin', b'abc')
    result = runner.invoke(pieces_cli.split, [str(path), '--size', '0'])
    assert result.exit_code != 0
    assert not piece_path(path, 1).exists()

def test_split_missing_file(runner, tmpdir):
    result = runner.invoke(pieces_cli.split, [str(Path(tmpdir) / 'missing')])
    assert result.exit_code == 2

def test_join_without_pieces(runner, tmpdir):
    path = Path(tmpdir) / 'nothing.bin'
    result = runner.invoke(pieces_cli.join, [str(path)])
    assert result.exit_code == 0
    assert result.stdout.strip() == '0'
    assert path.read_bytes() == b''

def test_mime(runner, make_file):
    css = make_file('style.css', b'body {}')
    unknown = make_file('blob.zzz', b'?')
    result = runner.invoke(mime_cli.mime, [str(css), str(unknown)])
    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == [
        f'{css}\ttext/css',
        f'{unknown}\t-',
    ]

def test_mime_for_extension(runner):
    result = runner.invoke(mime_cli.mime_for_extension, ['.png'])
    assert result.stdout == 'image/png\n'

    result = runner.invoke(mime_cli.mime_for_extension, ['png', '-m'])
    assert result.stdout == 'image/png\nimage/x-png\n'

    result = runner.invoke(mime_cli.mime_for_extension, ['nope'])
    assert result.exit_code == 1

def test_extension_for_mime(runner):
    result = runner.invoke(mime_cli.extension_for_mime, ['image/jpeg'])
    assert result.stdout == 'jpe\n'

    result = runner.invoke(mime_cli.extension_for_mime, ['image/jpeg', '--multi'])
    assert result.stdout == 'jpe\njpeg\njpg\n'

    result = runner.invoke(
        mime_cli.extension_for_mime, ['application/octet-stream'],
    )
    assert result.exit_code == 1

def test_get_path_from_file(runner, make_file):
    path = make_file('theme.json', (
        b'{"theme": [{"color": "red"}, {"size": 2}, {"color": "blue"}]}'
    ))
    result = runner.invoke(data_cli.get_path, ['theme.0.color', '-i', str(path)])
    assert result.exit_code == 0, result.output
    assert result.stdout == 'red\n'

    result = runner.invoke(data_cli.get_path, ['theme.*.color', '-i', str(path)])
    assert result.exit_code == 0, result.output
    assert result.stdout == '- red\n- blue\n'

def test_get_path_from_stdin(runner):
    result = runner.invoke(
        data_cli.get_path, ['a/b'], input='a:\n  b: 3\n',
    )
    assert result.exit_code == 1

    result = runner.invoke(
        data_cli.get_path, ['a/b', '-d', '/'], input='a:\n  b: 3\n',
    )
    assert result.exit_code == 0, result.output
    assert result.stdout == '3\n'

def test_get_path_no_wildcard(runner):
    yaml_text = 'a:\n  x:\n    b: 1\n'
    result = runner.invoke(data_cli.get_path, ['a.*.b'], input=yaml_text)
    assert result.exit_code == 0, result.output
    assert result.stdout == '- 1\n'

    result = runner.invoke(
        data_cli.get_path, ['a.*.b', '--no-wildcard'], input=yaml_text,
    )
    assert result.exit_code == 1

def test_float_block_size_in_config(runner, make_file, quiet_config):
    quiet_config.write_text(
        quiet_config.read_text().replace('block_size: 8192', 'block_size: 8192.0')
    )
    path = make_file('data.bin', b'abc')
    for command in (pieces_cli.split, pieces_cli.join):
        result = runner.invoke(command, [str(path)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
    assert not piece_path(path, 1).exists()
    assert path.read_bytes() == b'abc'

def test_join_bad_block_size(runner, tmpdir, monkeypatch):
    def bad_block_size(block_size):
        raise ValueError(f'bad block size {block_size!r}')
    monkeypatch.setattr(pieces, 'check_block_size', bad_block_size)

    path = Path(tmpdir) / 'nothing.bin'
    result = runner.invoke(pieces_cli.join, [str(path)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert not path.exists()
