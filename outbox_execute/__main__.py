import sys

from outbox_execute.cli import main

if __name__ == "__main__":
    sys.exit(main())
