import os
import sys

SRC_PATH = os.path.join(os.path.dirname(__file__), "src")
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from trade_size.cli.app import main

if __name__ == "__main__":
    sys.exit(main())
