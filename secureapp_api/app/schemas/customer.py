"""
Pydantic schemas for customer records.

A customer carries contact details, a postal address and an
``active``/``inactive`` status.  Dates are kept as plain strings and
are not parsed.  Models are frozen so that the dataset cannot be
modified after start‑up.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CustomerStatus(str, Enum):
    """Lifecycle status of a customer account."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Address(_Record):
    """Postal address of a customer."""

    street: str
    city: str
    state: str
    zip_code: str
    country: str


class Customer(_Record):
    """Schema for reading a customer record."""

    id: int = Field(..., gt=0, description="Unique customer identifier")
    first_name: str
    last_name: str
    email: str
    phone: str
    address: Address
    date_of_birth: str
    customer_since: str
    status: CustomerStatus

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_json(self) -> dict:
        """Return the record as a JSON-ready dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
