"""Allow ``python -m cppinit``."""

import sys

from cppinit.cli import main

sys.exit(main())
