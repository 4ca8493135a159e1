"""
Selection functions over the customer list.

Every method is pure: it reads the records passed at construction and
returns a new tuple (or a single record, or ``None``) in dataset
insertion order.  Absence is signalled by ``None`` or an empty tuple;
translating that into an HTTP status is left to the router.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional, Tuple, Union

from secureapp_api.app.schemas.customer import Customer, CustomerStatus

_ID_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


class CustomerService:
    """Read-only queries over a fixed sequence of customers."""

    def __init__(self, customers: Iterable[Customer]) -> None:
        self._customers: Tuple[Customer, ...] = tuple(customers)

    @property
    def customers(self) -> Tuple[Customer, ...]:
        return self._customers

    @property
    def ids(self) -> list:
        return [customer.id for customer in self._customers]

    def find_by_id(self, customer_id: Optional[int]) -> Optional[Customer]:
        """Return the customer with ``customer_id`` or ``None``."""
        if customer_id is None:
            return None
        for customer in self._customers:
            if customer.id == customer_id:
                return customer
        return None

    def filter_by_status(self, status: Union[CustomerStatus, str]) -> Tuple[Customer, ...]:
        """Return all customers whose status equals ``status``.

        Unknown status strings match nothing.
        """
        try:
            wanted = CustomerStatus(status)
        except ValueError:
            return ()
        return tuple(customer for customer in self._customers if customer.status == wanted)

    def search(self, query: str) -> Tuple[Customer, ...]:
        """Case-insensitive substring match on first name, last name or email.

        The empty query matches every customer.  Results are not ranked.
        """
        needle = query.lower()
        return tuple(
            customer
            for customer in self._customers
            if needle in customer.first_name.lower()
            or needle in customer.last_name.lower()
            or needle in customer.email.lower()
        )


def parse_customer_id(raw: str) -> Optional[int]:
    """Parse a path segment into a customer id.

    Reads the leading base-10 integer and ignores whatever follows it,
    so ``"2abc"`` and ``"1.5"`` give 2 and 1.  Returns ``None`` when the
    segment does not start with digits; such ids are then reported as
    "not found" like any other unknown id.
    """
    match = _ID_PREFIX.match(raw)
    if match is None:
        return None
    return int(match.group(1))
