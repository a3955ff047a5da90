"""Allow ``python -m html2richtext``."""

import sys

from html2richtext.cli import main

sys.exit(main())
