from pathlib import Path
from pytest import fixture

@fixture
def hello_path(tmpdir):
    path = Path(tmpdir) / 'hello.txt'
    path.write_text('hello')
    return path

@fixture
def binary_path(tmpdir):
    path = Path(tmpdir) / 'data.bin'
    path.write_bytes(bytes(range(10)))
    return path

@fixture
def theme():
    return {
        'name': 'dark',
        'theme': [
            {'color': 'red', 'size': 0},
            {'size': 2},
            {'color': 'blue', 'size': None},
        ],
        'fonts': {
            'body': {'family': 'serif'},
            'code': {'family': 'mono'},
            'caption': 'inherit',
        },
        'grid': [[1, 2], [3, 4]],
        'theme.name': 'direct',
        7: 'seven',
    }
