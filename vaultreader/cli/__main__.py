"""Allow ``python -m vaultreader.cli``."""

import sys

from . import main

sys.exit(main())
