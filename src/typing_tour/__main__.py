"""Run the tour with ``python -m typing_tour``."""

import sys

from .cli import main

sys.exit(main())
