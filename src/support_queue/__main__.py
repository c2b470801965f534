"""Permite executar com `python -m support_queue`."""

import sys

from support_queue.adapters.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
