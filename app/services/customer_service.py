"""Customer Service — persistence operations behind the /rest/customers routes.

Invariants:
    - get_by_id never raises for a missing id; it returns NotFound
    - Identity for duplicate detection is the first name
    - Every mutating method commits its own unit of work
    - Updates overwrite first name, last name, date of birth and address, nothing else

Design Decisions:
    - Address updated in place when one exists: replacing the row would INSERT before
      the orphan DELETE and trip the unique customer_id constraint
    - delete_all issues bulk DELETEs (addresses first) instead of loading every row
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import CustomerId
from app.core.lookup_result import Found, LookupResult, NotFound
from app.core.repository_protocols import AddressLike, CustomerLike
from app.models.address import Address
from app.models.customer import Customer

logger = logging.getLogger(__name__)


class CustomerService:
    """SQLAlchemy-backed implementation of CustomerRepository."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list(self) -> list[Customer]:
        result = await self.db.execute(select(Customer).order_by(Customer.id))
        return list(result.scalars().all())

    async def get_by_id(self, customer_id: CustomerId) -> LookupResult[Customer]:
        result = await self.db.execute(
            select(Customer).where(Customer.id == customer_id),
        )
        customer = result.scalar_one_or_none()
        if customer is None:
            return NotFound("Customer", customer_id)
        return Found(customer)

    async def exists_by_identity(self, customer: CustomerLike) -> bool:
        result = await self.db.execute(
            select(Customer.id)
            .where(Customer.first_name == customer.first_name)
            .limit(1),
        )
        return result.scalar_one_or_none() is not None

    async def create(self, customer: CustomerLike) -> CustomerId:
        row = Customer(
            first_name=customer.first_name,
            last_name=customer.last_name,
            date_of_birth=customer.date_of_birth,
            address=_new_address(customer.address),
        )
        self.db.add(row)
        await self.db.commit()
        logger.info(
            f"Customer {row.id} created", extra={"customer_id": row.id},
        )
        return CustomerId(row.id)

    async def update(self, customer: Customer) -> None:
        self.db.add(customer)
        await self.db.commit()

    async def delete_by_id(self, customer_id: CustomerId) -> None:
        result = await self.get_by_id(customer_id)
        if isinstance(result, NotFound):
            return
        await self.db.delete(result.value)
        await self.db.commit()

    async def delete_all(self) -> None:
        await self.db.execute(delete(Address))
        await self.db.execute(delete(Customer))
        await self.db.commit()


def apply_customer_update(current: Customer, changes: CustomerLike) -> Customer:
    """Overwrite name, date of birth and address on current; absent values become None."""
    current.first_name = changes.first_name
    current.last_name = changes.last_name
    current.date_of_birth = changes.date_of_birth
    _apply_address(current, changes.address)
    return current


def _apply_address(current: Customer, address: AddressLike | None) -> None:
    if address is None:
        current.address = None
    elif current.address is None:
        current.address = _new_address(address)
    else:
        for attr in ("street", "town", "county", "postcode"):
            setattr(current.address, attr, getattr(address, attr))


def _new_address(address: AddressLike | None) -> Address | None:
    if address is None:
        return None
    return Address(
        street=address.street,
        town=address.town,
        county=address.county,
        postcode=address.postcode,
    )
