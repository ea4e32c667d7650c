import sys

from quadc.cli import main

if __name__ == "__main__":
    sys.exit(main())
