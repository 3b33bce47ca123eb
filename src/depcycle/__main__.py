"""Allow ``python -m depcycle <filename>``."""

from depcycle.cli import main

raise SystemExit(main())
