"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions (validator) that read these shapes are never async
"""

from datetime import date
from typing import Protocol

from app.core.domain_types import CustomerId
from app.core.lookup_result import LookupResult


class AddressLike(Protocol):
    """Structural contract for an address, ORM row or request payload alike."""
    street: str | None
    town: str | None
    county: str | None
    postcode: str | None


class CustomerLike(Protocol):
    """Structural contract for the customer fields the validator inspects."""
    first_name: str | None
    last_name: str | None
    date_of_birth: date | None
    address: AddressLike | None


class CustomerRepository(Protocol):
    """Contract for customer persistence — implemented by shell."""
    async def list(self) -> list: ...
    async def get_by_id(self, customer_id: CustomerId) -> LookupResult: ...
    async def exists_by_identity(self, customer: CustomerLike) -> bool: ...
    async def create(self, customer: CustomerLike) -> CustomerId: ...
    async def update(self, customer: object) -> None: ...
    async def delete_by_id(self, customer_id: CustomerId) -> None: ...
    async def delete_all(self) -> None: ...
