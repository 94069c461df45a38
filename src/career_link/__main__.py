"""Allow ``python -m career_link``."""

import sys

from .cli import main

sys.exit(main())
