"""
CSV-backed repositories.

- CustomerRepository: load, look up and save customers
- OrderRepository: load orders and join them to their customers
"""

from .customer_repository import CustomerRepository
from .order_repository import OrderRepository

__all__ = [
    "CustomerRepository",
    "OrderRepository",
]
