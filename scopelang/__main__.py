"""
Run ``python -m scopelang <script>``.
"""
import sys

from scopelang.cli import main

sys.exit(main())
