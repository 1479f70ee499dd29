"""Customer Validation — field rules applied to a submitted customer before create.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - One message appended per violation; no early exit, every rule runs
    - Messages are human-readable and safe to return to the client

Design Decisions:
    - Error sink (list[str]) passed in rather than returned: callers can feed several
      validators into one sink before deciding on the response
    - Validator is a Protocol so the route depends on the capability, not the class
"""

from datetime import date
from typing import Protocol

from app.core.domain_types import (
    ADDRESS_LINE_MAX_LENGTH, NAME_MAX_LENGTH, POSTCODE_MAX_LENGTH,
)
from app.core.repository_protocols import CustomerLike


class Validator(Protocol):
    """Anything that can check a target and report violations into a sink."""
    def validate(self, target: object, errors: list[str]) -> None: ...


class CustomerValidator:
    """Structural rules for a customer beyond basic schema presence checks."""

    def __init__(self, today: date | None = None):
        self._today = today

    def validate(self, target: CustomerLike, errors: list[str]) -> None:
        self._check_first_name(target, errors)
        self._check_last_name(target, errors)
        self._check_date_of_birth(target, errors)
        self._check_address(target, errors)

    def _check_first_name(self, customer: CustomerLike, errors: list[str]) -> None:
        if not customer.first_name or not customer.first_name.strip():
            errors.append("First name is required")
        elif len(customer.first_name) > NAME_MAX_LENGTH:
            errors.append(
                f"First name must be at most {NAME_MAX_LENGTH} characters",
            )

    def _check_last_name(self, customer: CustomerLike, errors: list[str]) -> None:
        if customer.last_name and len(customer.last_name) > NAME_MAX_LENGTH:
            errors.append(
                f"Last name must be at most {NAME_MAX_LENGTH} characters",
            )

    def _check_date_of_birth(self, customer: CustomerLike, errors: list[str]) -> None:
        today = self._today or date.today()
        if customer.date_of_birth is not None and customer.date_of_birth >= today:
            errors.append("Date of birth must be in the past")

    def _check_address(self, customer: CustomerLike, errors: list[str]) -> None:
        address = customer.address
        if address is None:
            return
        for label, value in (
            ("Street", address.street),
            ("Town", address.town),
            ("County", address.county),
        ):
            if value and len(value) > ADDRESS_LINE_MAX_LENGTH:
                errors.append(
                    f"{label} must be at most {ADDRESS_LINE_MAX_LENGTH} characters",
                )
        if address.postcode and len(address.postcode) > POSTCODE_MAX_LENGTH:
            errors.append(
                f"Postcode must be at most {POSTCODE_MAX_LENGTH} characters",
            )


def collect_violations(validator: Validator, target: object) -> list[str]:
    """Run a validator against a fresh sink and return what it reported."""
    errors: list[str] = []
    validator.validate(target, errors)
    return errors
