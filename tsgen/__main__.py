"""Allow ``python -m tsgen``."""

import sys

from tsgen.cli import main

sys.exit(main())
