from __future__ import annotations

import logging
from decimal import Decimal
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from src.business_objects.common import FulfillmentStatus
from src.business_objects.config import StorageConfig
from src.business_objects.customer import Customer
from src.business_objects.errors import DataIntegrityError, InvalidArgumentError, StorageError
from src.business_objects.order import Order, to_price
from .csv_storage import PathLike, read_rows
from .customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class OrderRepository:
    """
    Orders stored one per row as:
        id, status, customer_id, product_1, price_1, product_2, price_2, ...

    Customers are joined eagerly: `load_all` reads the customer file once per
    call and resolves every row against that snapshot. Any malformed row
    fails the whole load (no skip-and-continue).
    """

    def __init__(
        self,
        path: PathLike,
        customers: CustomerRepository,
        *,
        encoding: str = "utf-8",
        delimiter: str = ",",
    ) -> None:
        self.path = Path(path)
        self.customers = customers
        self.encoding = encoding
        self.delimiter = delimiter

    @classmethod
    def from_config(
        cls,
        config: StorageConfig,
        customers: Optional[CustomerRepository] = None,
    ) -> "OrderRepository":
        config.validate()
        if customers is None:
            customers = CustomerRepository.from_config(config)
        return cls(config.orders_path, customers, encoding=config.encoding, delimiter=config.delimiter)

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def load_all(self) -> List[Order]:
        rows = read_rows(self.path, encoding=self.encoding, delimiter=self.delimiter)
        known_customers = self.customers.load_all()

        orders: List[Order] = []
        for line_no, row in rows:
            orders.append(self._from_row(row, line_no, known_customers))

        logger.debug("Loaded %d orders from %s", len(orders), self.path)
        return orders

    def find(self, order_id: int) -> Optional[Order]:
        """First order whose id matches, or None."""
        for order in self.load_all():
            if order.id == order_id:
                return order
        return None

    def find_by_customer(self, customer_id: int) -> List[Order]:
        """All orders of one customer, in file order."""
        return [o for o in self.load_all() if o.customer.id == customer_id]

    # ------------------------------------------------------------------ #
    # Row parsing
    # ------------------------------------------------------------------ #

    def _from_row(self, row: List[str], line_no: int, known_customers: Sequence[Customer]) -> Order:
        where = f"{self.path}:{line_no}"
        if len(row) < 3:
            raise StorageError(f"{where}: expected at least id, status and customer_id, got {len(row)} columns")

        raw_id, raw_status, raw_customer_id = (c.strip() for c in row[:3])
        order_id = self._parse_int(raw_id, where=where, what="order id")
        customer_id = self._parse_int(raw_customer_id, where=where, what="customer id")
        products = self._parse_products(row[3:], where=where)

        try:
            status = FulfillmentStatus.parse(raw_status)
        except ValueError as e:
            raise DataIntegrityError(f"{where}: unknown fulfillment status '{raw_status}'") from e

        customer = self.customers.find(customer_id, customers=known_customers)
        if customer is None:
            raise DataIntegrityError(f"{where}: order {order_id} references unknown customer {customer_id}")

        return Order(id=order_id, products=products, customer=customer, fulfillment_status=status)

    @staticmethod
    def _parse_int(raw: str, *, where: str, what: str) -> int:
        try:
            return int(raw)
        except ValueError as e:
            raise StorageError(f"{where}: {what} '{raw}' is not an integer") from e

    @staticmethod
    def _parse_products(cells: List[str], *, where: str) -> Dict[str, Decimal]:
        if len(cells) % 2 != 0:
            raise StorageError(f"{where}: product columns must come in (name, price) pairs, got {len(cells)} cells")

        products: Dict[str, Decimal] = {}
        for i in range(0, len(cells), 2):
            name, raw_price = cells[i].strip(), cells[i + 1].strip()
            if not name:
                raise StorageError(f"{where}: empty product name in column {i + 4}")
            if name in products:
                raise StorageError(f"{where}: product '{name}' appears twice")
            try:
                products[name] = to_price(raw_price, name=f"price of '{name}'")
            except InvalidArgumentError as e:
                raise StorageError(f"{where}: {e}") from e
        return products
