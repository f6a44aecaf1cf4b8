"""
Sales input file generator.

Usage:
    poetry run python generate_info_files.py                       # 10 products, 5 salesmen
    poetry run python generate_info_files.py --products 50 --salesmen 20
    poetry run python generate_info_files.py --output-dir data --seed 42
"""

import sys

from sales_datagen.cli import main

if __name__ == "__main__":
    sys.exit(main())
