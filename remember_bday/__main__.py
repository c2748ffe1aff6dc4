"""Allow ``python -m remember_bday``."""

import sys

from remember_bday.cli import main

sys.exit(main())
