"""Entry point for ``python -m vibedocs``."""

from vibedocs.cli import main

raise SystemExit(main())
