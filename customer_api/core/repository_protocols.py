"""Boundary Protocols — contracts between route handlers and persistence.

Invariants:
    - Handlers depend on CustomerRepository, never on the SQLAlchemy store directly
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from datetime import datetime
from typing import Protocol, Sequence

from customer_api.core.domain_types import CustomerId


class CustomerFields(Protocol):
    """The four caller-supplied fields of a customer."""
    name: str
    dob: str
    email: str
    contact: str


class CustomerLike(Protocol):
    """Structural contract for a persisted customer row."""
    id: int
    name: str
    dob: str
    email: str
    contact: str
    created_at: datetime
    updated_at: datetime


class CustomerRepository(Protocol):
    """Contract for customer persistence — implemented by the shell."""
    async def create(self, fields: CustomerFields) -> CustomerLike: ...
    async def update(
        self, customer_id: CustomerId, fields: CustomerFields,
    ) -> CustomerLike: ...
    async def get(self, customer_id: CustomerId) -> CustomerLike: ...
    async def list_page(self, offset: int, limit: int) -> Sequence[CustomerLike]: ...
    async def count(self) -> int: ...
