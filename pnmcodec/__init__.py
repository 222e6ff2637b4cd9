# pnmcodec/__init__.py

from .pnmcodec import __doc__, __all__, __version__
from .pnmcodec import *
