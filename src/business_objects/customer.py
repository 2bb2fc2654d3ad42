from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

from .common import Address, ReadOnlyId
from .errors import InvalidArgumentError


@dataclass
class Customer(ReadOnlyId):
    """
    Customer contact record.
    Orders hold a reference to the instance built by the customer repository;
    `id` is fixed after construction, `email` and `address` may be edited.
    """
    id: int
    email: str
    address: Union[Address, Mapping[str, Any]]

    def __post_init__(self) -> None:
        if isinstance(self.id, bool):
            raise InvalidArgumentError(f"Customer id must be an integer. Got {self.id!r}.")
        try:
            self._init_id(int(self.id))
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"Customer id must be an integer. Got {self.id!r}.") from e

        if not isinstance(self.address, Address):
            try:
                self.address = Address.from_mapping(self.address)
            except (KeyError, TypeError) as e:
                raise InvalidArgumentError(
                    "address must be an Address or a mapping with street, city, state and zip."
                ) from e

    def as_row(self) -> list[str]:
        """Canonical storage row: id, email, street, city, state, zip."""
        return [str(self.id), self.email, *self.address.as_tuple()]
