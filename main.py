# main.py
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from src.business_objects.config import StorageConfig
from src.business_objects.errors import OrderDomainError
from src.repositories import CustomerRepository, OrderRepository

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True)]
)
logger = logging.getLogger("orders")

console = Console()


def main():
    # ------------------------------------------------------------
    # Storage (ORDERS_DATA_DIR etc. override the defaults)
    # ------------------------------------------------------------
    cfg = StorageConfig.from_env()
    customers = CustomerRepository.from_config(cfg)
    orders = OrderRepository.from_config(cfg, customers=customers)

    try:
        all_customers = customers.load_all()
        all_orders = orders.load_all()
    except OrderDomainError as e:
        logger.error(f"Could not load data: {e}")
        sys.exit(1)

    logger.info(f"Loaded {len(all_customers)} customers and {len(all_orders)} orders from {cfg.data_dir}/")

    # Show a few examples
    table = Table(title="Sample orders")
    table.add_column("Order", justify="right")
    table.add_column("Customer")
    table.add_column("Status")
    table.add_column("Products", justify="right")
    table.add_column("Total", justify="right")
    for order in all_orders[:5]:
        table.add_row(
            str(order.id),
            order.customer.email,
            order.fulfillment_status.value,
            str(order.product_count),
            str(order.total()),
        )
    console.print(table)

    if all_customers:
        first_customer = all_customers[0]
        their_orders = orders.find_by_customer(first_customer.id)
        console.print(f"Customer {first_customer.id} ({first_customer.email}) has {len(their_orders)} order(s).")


if __name__ == "__main__":
    main()
