"""
Domain model package for the CSV order store.

This package defines the core business objects:
- Customer
- Order

It also exposes the shared FulfillmentStatus enum, the Address type,
the storage configuration and the error hierarchy.
"""

from .common import (
    FulfillmentStatus,
    Address,
)
from .config import StorageConfig
from .errors import (
    OrderDomainError,
    InvalidArgumentError,
    StorageError,
    DataIntegrityError,
)
from .customer import Customer
from .order import Order

__all__ = [
    # common
    "FulfillmentStatus",
    "Address",
    "StorageConfig",
    # errors
    "OrderDomainError",
    "InvalidArgumentError",
    "StorageError",
    "DataIntegrityError",
    # entities
    "Customer",
    "Order",
]
