#!/usr/bin/env python3
"""Allow ``python -m namekit``."""

import sys

from .cli import main

sys.exit(main())
