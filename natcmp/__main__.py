"""Allow ``python -m natcmp``."""

import sys

from natcmp.cli import main

sys.exit(main())
