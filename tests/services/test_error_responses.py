"""Error Responses — database and unexpected failures seen from the client.

Invariants:
    - A driver error inside a request is rolled back and answered 503 DATABASE_ERROR
    - An unexpected exception is answered 500 INTERNAL_ERROR without its text
"""

from sqlalchemy.exc import IntegrityError, OperationalError

from app.api.routes.customers import get_customer_service
from app.db.base import Base
from app.main import app
from app.services.customer_service import CustomerService


async def _drop_tables(engine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def test_missing_table_on_list_returns_503(live_client, test_engine):
    await _drop_tables(test_engine)
    res = await live_client.get("/rest/customers/")
    assert res.status_code == 503
    error = res.json()["error"]
    assert error["code"] == "DATABASE_ERROR"
    assert error["category"] == "database"
    assert error["message"] == "Database execute failed: Connection or operational error"


async def test_missing_table_on_create_returns_503(live_client, test_engine):
    await _drop_tables(test_engine)
    res = await live_client.post("/rest/customers/", json={"firstName": "Steve"})
    assert res.status_code == 503
    assert res.json()["error"]["code"] == "DATABASE_ERROR"


async def test_integrity_error_during_update_returns_503(live_client, seed_customer, monkeypatch):
    async def failing_update(self, customer):
        raise IntegrityError("UPDATE customers", {}, Exception("constraint failed"))

    monkeypatch.setattr(CustomerService, "update", failing_update)
    res = await live_client.put(
        f"/rest/customers/{seed_customer.id}", json={"firstName": "Steve"},
    )
    assert res.status_code == 503
    error = res.json()["error"]
    assert error["code"] == "DATABASE_ERROR"
    assert error["message"] == "Database commit failed: Integrity constraint violated"
    assert "constraint failed" not in res.text


async def test_operational_error_during_delete_all_returns_503(live_client, monkeypatch):
    async def failing_delete_all(self):
        raise OperationalError("DELETE FROM customers", {}, Exception("disk I/O error"))

    monkeypatch.setattr(CustomerService, "delete_all", failing_delete_all)
    res = await live_client.delete("/rest/customers/")
    assert res.status_code == 503
    assert res.json()["error"]["code"] == "DATABASE_ERROR"


async def test_unexpected_dependency_failure_returns_500_without_details(live_client):
    def broken_service():
        raise RuntimeError("password=hunter2 host=db.internal")

    app.dependency_overrides[get_customer_service] = broken_service
    res = await live_client.get("/rest/customers/")
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["message"] == "An unexpected error occurred"
    assert error["severity"] == "critical"
    assert "hunter2" not in res.text
    assert "RuntimeError" not in res.text


async def test_unexpected_error_inside_operation_returns_500(live_client, monkeypatch):
    async def exploding_list(self):
        raise ValueError("row 17 has a corrupt date column")

    monkeypatch.setattr(CustomerService, "list", exploding_list)
    res = await live_client.get("/rest/customers/")
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "corrupt" not in res.text
