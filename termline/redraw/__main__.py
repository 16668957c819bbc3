#!/usr/bin/env python3
"""Allow running as: python3 -m termline.redraw"""

from termline.redraw.cli import main
import sys

sys.exit(main() or 0)
