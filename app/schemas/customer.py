"""Customer Schemas — Pydantic models for the /rest/customers boundary.

Invariants:
    - CustomerCreate is lenient: blank/missing first name reaches CustomerValidator,
      which reports it as a 422 violation rather than a schema error
    - CustomerUpdate replaces all four updatable fields, so it enforces the column
      limits itself and requires a non-blank first name (400 otherwise)
    - CustomerUpdate.id and CustomerCreate.id are accepted but never used
    - CustomerResponse is built from ORM rows (from_attributes)

Design Decisions:
    - alias_generator=to_camel + populate_by_name: clients send firstName, tests may send first_name
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.core.domain_types import (
    ADDRESS_LINE_MAX_LENGTH, NAME_MAX_LENGTH, POSTCODE_MAX_LENGTH,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True,
    )


class AddressPayload(_CamelModel):
    """Postal address as submitted on create; limits checked by CustomerValidator."""
    street: str | None = None
    town: str | None = None
    county: str | None = None
    postcode: str | None = None


class CustomerCreate(_CamelModel):
    """Body of POST /rest/customers/."""
    id: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    date_of_birth: date | None = None
    address: AddressPayload | None = None


class AddressUpdate(_CamelModel):
    """Replacement address on update."""
    street: str | None = Field(None, max_length=ADDRESS_LINE_MAX_LENGTH)
    town: str | None = Field(None, max_length=ADDRESS_LINE_MAX_LENGTH)
    county: str | None = Field(None, max_length=ADDRESS_LINE_MAX_LENGTH)
    postcode: str | None = Field(None, max_length=POSTCODE_MAX_LENGTH)


class CustomerUpdate(_CamelModel):
    """Body of PUT /rest/customers/{id}. Absent optional fields are cleared."""
    id: int | None = None
    first_name: str = Field(max_length=NAME_MAX_LENGTH)
    last_name: str | None = Field(None, max_length=NAME_MAX_LENGTH)
    date_of_birth: date | None = None
    address: AddressUpdate | None = None

    @field_validator("first_name")
    @classmethod
    def first_name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("firstName cannot be blank")
        return v


class AddressResponse(_CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    street: str | None = None
    town: str | None = None
    county: str | None = None
    postcode: str | None = None


class CustomerResponse(_CamelModel):
    """Public-facing customer data."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: int
    first_name: str
    last_name: str | None = None
    date_of_birth: date | None = None
    address: AddressResponse | None = None
