"""Allow running as ``python -m lite_shell``."""

import sys

from .cli import main

sys.exit(main())
