#!/usr/bin/env python3
"""termfolio terminal - minimal launcher."""

import sys

from termfolio.cli import main

if __name__ == '__main__':
    sys.exit(main())
