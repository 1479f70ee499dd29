"""Address ORM — postal address owned by exactly one Customer.

Invariants:
    - Always belongs to a Customer (customer_id FK, unique)
    - All address lines are optional
"""

from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.domain_types import ADDRESS_LINE_MAX_LENGTH, POSTCODE_MAX_LENGTH
from app.db.base import Base


class Address(Base):
    """Address entity."""
    __tablename__ = "addresses"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    customer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )
    street: Mapped[str | None] = mapped_column(
        String(ADDRESS_LINE_MAX_LENGTH), nullable=True,
    )
    town: Mapped[str | None] = mapped_column(
        String(ADDRESS_LINE_MAX_LENGTH), nullable=True,
    )
    county: Mapped[str | None] = mapped_column(
        String(ADDRESS_LINE_MAX_LENGTH), nullable=True,
    )
    postcode: Mapped[str | None] = mapped_column(
        String(POSTCODE_MAX_LENGTH), nullable=True,
    )

    customer: Mapped["Customer"] = relationship(
        "Customer", back_populates="address",
    )
