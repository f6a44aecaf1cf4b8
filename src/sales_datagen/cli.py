"""
Command line entry points.

Usage:
    poetry run generate-info-files                      # 10 products, 5 salesmen under data/
    poetry run generate-info-files --products 50 --salesmen 20 --seed 7
    poetry run verify-info-files --data-dir data        # Load back and summarize
"""

from __future__ import annotations

import argparse
import logging
import sys

from sales_datagen.config.layout import DATA_FOLDER, DataLayout
from sales_datagen.config.loader import load_generation_config
from sales_datagen.generators.info_files import InfoFileGenerator
from sales_datagen.loaders.dataset import load_dataset

SUCCESS_MESSAGE = "Files generated successfully!"


def log_level(verbose: bool) -> int:
    """Quiet by default: only warnings and errors reach stderr."""
    return logging.DEBUG if verbose else logging.WARNING


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=log_level(verbose),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    # Faker logs locale lookups at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


def main(argv: list[str] | None = None) -> int:
    """Generate the products, salesmen and sales input files."""
    parser = argparse.ArgumentParser(
        description="Generate pseudo-random products, salesmen and sales files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  generate-info-files                              # Defaults from generation_config.json
  generate-info-files --products 100 --salesmen 30
  generate-info-files --output-dir /tmp/data --seed 42
        """,
    )
    parser.add_argument(
        "--products",
        type=int,
        default=None,
        help="Number of products to generate (default: from config, 10)",
    )
    parser.add_argument(
        "--salesmen",
        type=int,
        default=None,
        help="Number of salesmen to generate (default: from config, 5)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible output",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=DATA_FOLDER,
        help=f"Root directory for the generated files (default: {DATA_FOLDER})",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a generation config JSON file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress and debug details to stderr",
    )

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = load_generation_config(args.config)
        counts = config["default_counts"]
        n_products = args.products if args.products is not None else counts["products"]
        n_salesmen = args.salesmen if args.salesmen is not None else counts["salesmen"]

        generator = InfoFileGenerator(
            layout=DataLayout(args.output_dir), seed=args.seed, config=config
        )
        generation_pass = generator.generate(n_products, n_salesmen)
    except (OSError, ValueError, TypeError) as e:
        print(f"Error while generating files: {e}", file=sys.stderr)
        return 1

    if not generation_pass.ok:
        print(
            f"Error while generating files: {'; '.join(generation_pass.errors)}",
            file=sys.stderr,
        )
        return 1

    print(SUCCESS_MESSAGE)
    return 0


def verify_main(argv: list[str] | None = None) -> int:
    """Load a generated dataset and print what survived validation."""
    parser = argparse.ArgumentParser(
        description="Load generated files and report validated record counts",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default=DATA_FOLDER,
        help=f"Root directory of the dataset (default: {DATA_FOLDER})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress and debug details to stderr",
    )

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        dataset = load_dataset(args.data_dir)
    except OSError as e:
        print(f"Error while loading files: {e}", file=sys.stderr)
        return 1

    print(f"Products: {len(dataset.products)}")
    print(f"Salesmen: {len(dataset.salesmen)}")
    print(f"Sales:    {dataset.total_sales}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
