"""Allow running msgextract with ``python -m msgextract``."""

import sys

from .main import main

sys.exit(main())
