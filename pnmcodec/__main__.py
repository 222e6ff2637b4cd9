# pnmcodec/__main__.py

import sys

from .pnmcodec import main

sys.exit(main())
