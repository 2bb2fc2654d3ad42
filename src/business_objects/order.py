from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Mapping

from .common import FulfillmentStatus, ReadOnlyId
from .customer import Customer
from .errors import InvalidArgumentError


def to_price(value: Any, *, name: str = "price") -> Decimal:
    """
    Coerce a unit price to Decimal.
    Floats go through str() so 1.99 becomes Decimal('1.99'), not its binary expansion.
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be a number. Got {value!r}.")
    try:
        price = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise InvalidArgumentError(f"{name} must be a number. Got {value!r}.") from e
    if not price.is_finite() or price < 0:
        raise InvalidArgumentError(f"{name} must be a finite, non-negative number. Got {value!r}.")
    return price


@dataclass
class Order(ReadOnlyId):
    """
    A purchase placed by one customer.

    Fields
    -------
    products : dict(product name -> unit price)
        Names are unique within the order; prices are Decimals >= 0.
        Prices and total() compare exactly only against Decimal values
        (or ones built from strings); Decimal("4.99") != 4.99.
    fulfillment_status : FulfillmentStatus
        Validated once at construction; there is no transition policy.
    """

    id: int
    products: Dict[str, Decimal]
    customer: Customer
    fulfillment_status: FulfillmentStatus = field(default=FulfillmentStatus.PENDING)

    # ------------------------------------------------------------------ #
    # Validation
    # ------------------------------------------------------------------ #

    def __post_init__(self) -> None:
        if isinstance(self.id, bool):
            raise InvalidArgumentError(f"Order id must be an integer. Got {self.id!r}.")
        try:
            self._init_id(int(self.id))
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"Order id must be an integer. Got {self.id!r}.") from e

        if not isinstance(self.products, Mapping):
            raise InvalidArgumentError("products must be a mapping of product name -> price.")
        products: Dict[str, Decimal] = {}
        for name, price in self.products.items():
            if not isinstance(name, str):
                raise InvalidArgumentError(f"Product names must be strings. Got {name!r}.")
            products[name] = to_price(price, name=f"price of '{name}'")
        self.products = products

        if not isinstance(self.customer, Customer):
            raise InvalidArgumentError(f"customer must be a Customer. Got {self.customer!r}.")

        # The str mixin makes "pending" == FulfillmentStatus.PENDING, so check the kind first.
        if not isinstance(self.fulfillment_status, FulfillmentStatus):
            raise InvalidArgumentError(
                f"Invalid fulfillment status {self.fulfillment_status!r}. "
                f"Allowed: {[s.value for s in FulfillmentStatus]}"
            )

    # ------------------------------------------------------------------ #
    # Products
    # ------------------------------------------------------------------ #

    @property
    def product_count(self) -> int:
        return len(self.products)

    def total(self) -> Decimal:
        """Sum of the current unit prices (0 for an empty order)."""
        return sum(self.products.values(), Decimal("0"))

    def add_product(self, name: str, price: Any) -> None:
        if not isinstance(name, str):
            raise InvalidArgumentError(f"Product names must be strings. Got {name!r}.")
        if name in self.products:
            raise InvalidArgumentError(f"Product '{name}' is already in order {self.id}.")
        self.products[name] = to_price(price, name=f"price of '{name}'")

    def remove_product(self, name: str) -> None:
        if name not in self.products:
            raise InvalidArgumentError(f"Product '{name}' is not in order {self.id}.")
        del self.products[name]
