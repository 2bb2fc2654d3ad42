from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from src.business_objects.common import Address
from src.business_objects.config import StorageConfig
from src.business_objects.customer import Customer
from src.business_objects.errors import InvalidArgumentError, StorageError
from .csv_storage import PathLike, read_rows, write_rows

logger = logging.getLogger(__name__)

CUSTOMER_COLUMNS = ("id", "email", "street", "city", "state", "zip")


class CustomerRepository:
    """
    Customers stored one per row as: id, email, street, city, state, zip.
    Every call re-reads the file; pass a preloaded list to `find` to avoid that.
    """

    def __init__(self, path: PathLike, *, encoding: str = "utf-8", delimiter: str = ",") -> None:
        self.path = Path(path)
        self.encoding = encoding
        self.delimiter = delimiter

    @classmethod
    def from_config(cls, config: StorageConfig) -> "CustomerRepository":
        config.validate()
        return cls(config.customers_path, encoding=config.encoding, delimiter=config.delimiter)

    # ------------------------------------------------------------------ #
    # Reads
    # ------------------------------------------------------------------ #

    def load_all(self) -> List[Customer]:
        customers: List[Customer] = []
        for line_no, row in read_rows(self.path, encoding=self.encoding, delimiter=self.delimiter):
            customers.append(self._from_row(row, line_no))
        logger.debug("Loaded %d customers from %s", len(customers), self.path)
        return customers

    def find(self, customer_id: int, customers: Optional[Sequence[Customer]] = None) -> Optional[Customer]:
        """First customer whose id matches, or None."""
        pool = self.load_all() if customers is None else customers
        for customer in pool:
            if customer.id == customer_id:
                return customer
        return None

    def _from_row(self, row: List[str], line_no: int) -> Customer:
        if len(row) != len(CUSTOMER_COLUMNS):
            raise StorageError(
                f"{self.path}:{line_no}: expected {len(CUSTOMER_COLUMNS)} columns "
                f"({', '.join(CUSTOMER_COLUMNS)}), got {len(row)}"
            )
        cells = [c.strip() for c in row]
        for column, value in zip(CUSTOMER_COLUMNS, cells):
            if not value:
                raise StorageError(f"{self.path}:{line_no}: empty {column}")
        raw_id, email, street, city, state, zip_code = cells
        try:
            return Customer(
                id=int(raw_id),
                email=email,
                address=Address(street=street, city=city, state=state, zip=zip_code),
            )
        except (ValueError, InvalidArgumentError) as e:
            raise StorageError(f"{self.path}:{line_no}: customer id '{raw_id}' is not an integer") from e

    # ------------------------------------------------------------------ #
    # Writes
    # ------------------------------------------------------------------ #

    def save_all(self, customers: Iterable[Customer], destination: PathLike) -> None:
        """Overwrite `destination` with `customers` in the canonical column order."""
        count = write_rows(
            destination,
            (c.as_row() for c in customers),
            encoding=self.encoding,
            delimiter=self.delimiter,
        )
        logger.debug("Saved %d customers to %s", count, destination)
