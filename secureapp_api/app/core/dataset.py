"""
Read-only in-memory dataset and request dependencies.

The dataset is built once when the application is created and stored
on ``app.state``.  Handlers never import it as a global; they receive
it, the clock and the services through FastAPI dependencies, so tests
can build an app around any dataset or clock they like.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional, Tuple

from fastapi import Depends, Request

from secureapp_api.app.schemas.command import COMMAND_ANSWERS
from secureapp_api.app.schemas.customer import Customer, CustomerStatus
from secureapp_api.app.services.command_service import CommandService
from secureapp_api.app.services.customer_service import CustomerService

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Dataset:
    """Customers and the command table served by the API.

    ``customers`` keeps insertion order.  ``commands`` is exposed as a
    read-only mapping.  The constructor rejects duplicate customer ids
    and command answers other than ``yes``/``no``.
    """

    customers: Tuple[Customer, ...] = ()
    commands: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        customers = tuple(self.customers)
        ids = [customer.id for customer in customers]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate customer ids: {duplicates}")
        commands = dict(self.commands)
        invalid = {name: answer for name, answer in commands.items() if answer not in COMMAND_ANSWERS}
        if invalid:
            raise ValueError(f"Command answers must be one of {COMMAND_ANSWERS}: {invalid}")
        object.__setattr__(self, "customers", customers)
        object.__setattr__(self, "commands", MappingProxyType(commands))

    def count_by_status(self, status: CustomerStatus) -> int:
        return sum(1 for customer in self.customers if customer.status == status)


def _customer(
    id: int,
    first_name: str,
    last_name: str,
    phone: str,
    address: Tuple[str, str, str, str],
    date_of_birth: str,
    customer_since: str,
    status: str,
) -> Customer:
    street, city, state, zip_code = address
    return Customer(
        id=id,
        first_name=first_name,
        last_name=last_name,
        email=f"{first_name.lower()}.{last_name.lower()}@email.com",
        phone=phone,
        address={"street": street, "city": city, "state": state, "zip_code": zip_code, "country": "USA"},
        date_of_birth=date_of_birth,
        customer_since=customer_since,
        status=status,
    )


SEED_CUSTOMERS: Tuple[Customer, ...] = (
    _customer(1, "John", "Smith", "+1-555-0123", ("123 Main St", "New York", "NY", "10001"),
              "1985-03-15", "2020-01-15", "active"),
    _customer(2, "Sarah", "Johnson", "+1-555-0456", ("456 Oak Ave", "Los Angeles", "CA", "90210"),
              "1990-07-22", "2019-06-10", "active"),
    _customer(3, "Michael", "Brown", "+1-555-0789", ("789 Pine Rd", "Chicago", "IL", "60601"),
              "1988-11-08", "2021-03-20", "inactive"),
    _customer(4, "Emily", "Davis", "+1-555-0321", ("321 Elm St", "Miami", "FL", "33101"),
              "1992-05-14", "2022-08-05", "active"),
    _customer(5, "David", "Wilson", "+1-555-0654", ("654 Maple Dr", "Seattle", "WA", "98101"),
              "1987-09-30", "2020-11-12", "active"),
)

SEED_COMMANDS: Mapping[str, str] = {
    "is-secure": "yes",
    "has-secrets": "no",
    "is-encrypted": "yes",
    "has-vulnerabilities": "no",
    "is-compliant": "yes",
    "has-backdoor": "no",
    "is-monitored": "yes",
    "has-malware": "no",
}


def load_dataset(
    customers: Optional[Iterable[Customer]] = None,
    commands: Optional[Mapping[str, str]] = None,
) -> Dataset:
    """Build the dataset, defaulting to the seed records."""
    dataset = Dataset(
        customers=tuple(SEED_CUSTOMERS if customers is None else customers),
        commands=SEED_COMMANDS if commands is None else commands,
    )
    logger.debug("Dataset loaded: %d customers, %d commands", len(dataset.customers), len(dataset.commands))
    return dataset


# ----------------------------------------------------------------------
# FastAPI dependencies
# ----------------------------------------------------------------------
def get_dataset(request: Request) -> Dataset:
    return request.app.state.dataset


def get_clock(request: Request) -> Clock:
    return request.app.state.clock


def get_customer_service(dataset: Dataset = Depends(get_dataset)) -> CustomerService:
    return CustomerService(dataset.customers)


def get_command_service(dataset: Dataset = Depends(get_dataset)) -> CommandService:
    return CommandService(dataset.commands)
