"""Customer ORM — persists the aggregate root exposed under /rest/customers.

Invariants:
    - id is an auto-increment integer primary key, assigned on insert, never reassigned
    - first_name is non-nullable
    - address is one-to-one and deleted with its customer

Design Decisions:
    - Integer id over UUID: ids appear in Location headers and URLs as plain numbers
    - selectin loading for address: async sessions cannot lazy-load on attribute access
"""

from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy import String, Date, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.domain_types import NAME_MAX_LENGTH
from app.db.base import Base


class Customer(Base):
    """Customer entity."""
    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    first_name: Mapped[str] = mapped_column(
        String(NAME_MAX_LENGTH), nullable=False, index=True,
    )
    last_name: Mapped[str | None] = mapped_column(
        String(NAME_MAX_LENGTH), nullable=True,
    )
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    address: Mapped[Optional["Address"]] = relationship(
        "Address", back_populates="customer", uselist=False,
        cascade="all, delete-orphan", lazy="selectin",
    )
