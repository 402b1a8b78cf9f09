'''
Superset of the toolz API with the extra bits helpkit is built from
'''
import toolz.curried as toolz
from toolz.curried import *

from .common import *
from .dictionary import *
from .filesystem import *
from .pyrsistent import *

from . import (
    common,
    dictionary,
    filesystem,
    pyrsistent,
)
