"""Allow ``python -m src.cli`` execution; runs the snapshot CLI."""

import sys

from src.cli.snapshot import main

sys.exit(main())
