"""main.py

Launcher: `python main.py table [csv] [bid_id]` or `python main.py sort [csv]`.
"""

import sys

from cli import main

if __name__ == '__main__':
    sys.exit(main())
