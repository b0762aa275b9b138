"""Customer ORM — the single persisted entity.

Invariants:
    - id is an INTEGER PRIMARY KEY AUTOINCREMENT: strictly increasing, never reused
    - created_at and updated_at default to the store's CURRENT_TIMESTAMP
    - No relationships, no foreign keys
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from customer_api.db.base import Base


class Customer(Base):
    """A customer record."""
    __tablename__ = "customers"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False, default="")
    dob: Mapped[str] = mapped_column(Text, nullable=False, default="")
    email: Mapped[str] = mapped_column(Text, nullable=False, default="")
    contact: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.current_timestamp(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.current_timestamp(),
    )

    def __repr__(self) -> str:
        return f"<Customer id={self.id} name={self.name!r}>"
