"""Database Access — session rollback and driver-error mapping."""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, NoResultFound, OperationalError,
)

from app.core.errors import DatabaseError
from app.infrastructure.database import DatabaseSessionManager, to_database_error


@pytest.mark.parametrize("exc, operation", [
    (IntegrityError("INSERT", {}, Exception("dup")), "commit"),
    (OperationalError("SELECT", {}, Exception("locked")), "execute"),
    (DBAPIError("SELECT", {}, Exception("driver")), "query"),
    (NoResultFound(), "unknown"),
])
def test_to_database_error_picks_most_specific_mapping(exc, operation):
    error = to_database_error(exc)
    assert error.operation == operation
    assert error.http_status == 503
    assert error.code == "DATABASE_ERROR"


@pytest.fixture
def manager(test_engine, test_session_factory):
    fake = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake.engine = test_engine
    fake._session_factory = test_session_factory
    return fake


async def test_session_maps_sqlalchemy_errors(manager):
    with pytest.raises(DatabaseError) as excinfo:
        async with manager.session() as session:
            await session.execute(text("SELECT * FROM no_such_table"))
    assert excinfo.value.operation == "execute"
    assert isinstance(excinfo.value.__cause__, OperationalError)


async def test_session_lets_other_errors_through(manager):
    with pytest.raises(KeyError):
        async with manager.session():
            raise KeyError("not a database problem")


async def test_health_check_passes_on_live_database(manager):
    assert await manager.health_check() is True
