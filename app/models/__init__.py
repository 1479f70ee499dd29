"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Customer is the aggregate root; an Address never outlives its customer

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from app.models.customer import Customer  # noqa: F401
from app.models.address import Address  # noqa: F401
