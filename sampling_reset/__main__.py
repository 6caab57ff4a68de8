import sys

from sampling_reset.cli import main

if __name__ == "__main__":
    sys.exit(main())
