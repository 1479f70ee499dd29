"""Lookup Results — Found / NotFound and their conversion to a 404 error."""

import pytest

from app.core.errors import EntityNotFoundError
from app.core.lookup_result import Found, NotFound, unwrap_or_raise


def test_unwrap_returns_found_value():
    assert unwrap_or_raise(Found("customer")) == "customer"


def test_unwrap_raises_not_found_error():
    with pytest.raises(EntityNotFoundError) as exc_info:
        unwrap_or_raise(NotFound("Customer", 12))
    assert exc_info.value.entity_id == 12
    assert exc_info.value.http_status == 404


def test_not_found_to_error_keeps_entity_name():
    error = NotFound("Customer", 5).to_error()
    assert error.entity == "Customer"
    assert error.context.entity_id == 5


def test_results_are_value_objects():
    assert Found(1) == Found(1)
    assert NotFound("Customer", 1) != NotFound("Customer", 2)
