"""Allow ``python -m localematch``."""

import sys

from localematch.cli import main

sys.exit(main())
