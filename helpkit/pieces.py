'''Split large files into numbered pieces and join them back together

A file "backup.tar" split into three pieces leaves "backup.tar.001",
"backup.tar.002" and "backup.tar.003" next to it. Joining "backup.tar"
concatenates those pieces, in order, back into "backup.tar".
'''
import math
import itertools
from pathlib import Path
import typing as T

from . import logging
from .toolz import *

log = logging.new_log(__name__)

# Default piece size, in MB
PIECE_SIZE = 10

# Files are copied in 8k blocks
BLOCK_SIZE = 1024 * 8

MB = 1024 * 1024

def piece_budget(piece_size: float) -> int:
    '''Piece size in MB to the nominal number of bytes per piece

    >>> piece_budget(10)
    10485760
    >>> piece_budget(0.01)
    10485
    '''
    if not piece_size > 0:
        raise ValueError(f'Piece size must be positive, got {piece_size!r}')
    budget = math.floor(piece_size * MB)
    if budget < 1:
        raise ValueError(
            f'Piece size {piece_size!r} MB is smaller than one byte'
        )
    return budget

def check_block_size(block_size: int) -> int:
    if not (isinstance(block_size, int) and block_size > 0):
        raise ValueError(
            f'Block size must be a positive integer, got {block_size!r}'
        )
    return block_size

@curry
def piece_path(path: Pathlike, number: int) -> Path:
    '''Path of piece number "number" of path

    >>> piece_path('backup.tar', 2).name
    'backup.tar.002'
    >>> piece_path('backup.tar', 1234).name
    'backup.tar.1234'
    '''
    if number < 1:
        raise ValueError(f'Piece numbers start at 1, got {number!r}')
    path = Path(path).expanduser()
    return path.with_name(f'{path.name}.{number:03d}')

@ensure_paths
def piece_paths(path: Pathlike) -> T.Iterator[Path]:
    '''Existing pieces of path, in order, stopping at the first gap
    '''
    return itertools.takewhile(
        is_file,
        map(piece_path(path), itertools.count(1)),
    )

@error_raise
@ensure_paths
def split(path: Pathlike, piece_size: float = PIECE_SIZE,
          block_size: int = BLOCK_SIZE) -> int:
    '''Split a file into pieces of piece_size MB, for easy transmission.

    The file is copied block by block and a piece is closed once it holds
    at least piece_size MB, so a piece overshoots that size by up to
    block_size - 1 bytes when the two don't divide evenly. The last piece
    holds the remainder. An empty file still gets one (empty) piece.

    Pieces that already exist are overwritten. If anything fails, the
    pieces written so far are left on disk.

    Args:
      path (str|Path): file to be split

      piece_size (float): size, in MB, for each piece (default: 10)

      block_size (int): bytes per read/write (default: 8192)

    Returns: (int) the number of pieces that were created

    Raises:
      OSError: the file can't be read or a piece can't be written

      ValueError: piece_size or block_size is not positive
    '''
    budget = piece_budget(piece_size)
    check_block_size(block_size)

    pieces = total = 0
    with path.open('rb') as rfp:
        block = rfp.read(block_size)
        while True:
            pieces += 1
            current = piece_path(path, pieces)

            written = 0
            with current.open('wb') as wfp:
                while block and written < budget:
                    wfp.write(block)
                    written += len(block)
                    block = rfp.read(block_size)
            total += written
            log.debug(f'Wrote {written} bytes to {current.name}')

            if not block:
                break

    log.info(
        f'Split {path} ({total} bytes) into {pieces} piece(s)'
        f' of {budget} bytes'
    )
    return pieces

@error_raise
@ensure_paths
def join(path: Pathlike, block_size: int = BLOCK_SIZE) -> int:
    '''Join the pieces of a split file back into a whole file, the
    reverse of split.

    The file at path is overwritten. Pieces are read from path.001
    upwards until one is missing; they are left in place.

    Args:
      path (str|Path): split file name, without the .001 suffix

      block_size (int): bytes per read/write (default: 8192)

    Returns: (int) the number of pieces that were joined

    Raises:
      OSError: the file can't be written or a piece can't be read
    '''
    check_block_size(block_size)

    pieces = 0
    with path.open('wb') as wfp:
        for piece in piece_paths(path):
            pieces += 1
            for chunk in slurpbchunks(block_size, piece):
                wfp.write(chunk)
            log.debug(f'Joined {piece.name}')

    log.info(f'Joined {pieces} piece(s) into {path}')
    return pieces
