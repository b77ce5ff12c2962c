"""Server module entry point for running with python -m server.

Takes the same options as ``vibedocs serve`` (``--docs``, ``--host``,
``--port``, ``--reload``).
"""

import sys

from vibedocs.cli import main

if __name__ == "__main__":
    raise SystemExit(main(["serve", *sys.argv[1:]]))
