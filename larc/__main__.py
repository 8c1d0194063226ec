"""Allow ``python -m larc``."""

import sys

from larc.cli import main

sys.exit(main())
