"""
Export the customer file to another CSV in the canonical column order.

Usage:
    python -m scripts.export_customers --output backup/customers.csv
    python -m scripts.export_customers --data-dir fixtures --output out.csv
"""

import argparse
import logging
import sys

from rich.logging import RichHandler

from src.business_objects.config import StorageConfig
from src.business_objects.errors import OrderDomainError
from src.repositories import CustomerRepository

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True)]
)
logger = logging.getLogger("orders")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Export customers to a CSV file")
    parser.add_argument("--output", required=True, help="Destination CSV (overwritten)")
    parser.add_argument("--data-dir", help="Directory holding customers.csv (default: data or $ORDERS_DATA_DIR)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    cfg = StorageConfig.from_env()
    if args.data_dir:
        cfg.data_dir = args.data_dir

    repo = CustomerRepository.from_config(cfg)
    try:
        customers = repo.load_all()
        repo.save_all(customers, args.output)
    except OrderDomainError as e:
        logger.error(f"Export failed: {e}")
        return 1

    logger.info(f"Exported {len(customers)} customers to '{args.output}'")
    return 0


if __name__ == "__main__":
    sys.exit(main())
