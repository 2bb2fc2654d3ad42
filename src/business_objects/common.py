from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Tuple


class FulfillmentStatus(str, Enum):
    """Lifecycle labels for an order. No transition rules are enforced."""
    PENDING = "pending"
    PAID = "paid"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    COMPLETE = "complete"

    @classmethod
    def parse(cls, token: str) -> "FulfillmentStatus":
        """
        Map a storage token ('complete', ' Paid ', ...) onto a member.
        Raises ValueError for anything outside the closed set.
        """
        if not isinstance(token, str):
            raise ValueError(f"Status token must be a string. Got {token!r}.")
        return cls(token.strip().lower())


@dataclass
class Address:
    """Postal address of a customer (all parts kept as strings)."""
    street: str
    city: str
    state: str
    zip: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Address":
        return cls(
            street=str(data["street"]),
            city=str(data["city"]),
            state=str(data["state"]),
            zip=str(data["zip"]),
        )

    def as_tuple(self) -> Tuple[str, str, str, str]:
        return (self.street, self.city, self.state, self.zip)


class ReadOnlyId:
    """
    Mixin for dataclasses whose `id` may be set once (in __init__) and then
    never reassigned. `_init_id` lets __post_init__ store a coerced value.
    """

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError(f"{type(self).__name__}.id is read-only.")
        super().__setattr__(name, value)

    def _init_id(self, value: int) -> None:
        self.__dict__["id"] = value
