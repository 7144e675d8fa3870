"""
cachematrix - timing demo entry point.

Usage
-----
    python main.py --size 1000
    python main.py --help
"""

import sys

from cachematrix.demo import main


if __name__ == "__main__":
    sys.exit(main())
