"""Customer Store — SQLAlchemy implementation of CustomerRepository.

Invariants:
    - create() and update() return the row re-read from the store, so timestamps
      are store-authoritative
    - update() does not check existence first; a missing id updates zero rows and
      the re-read raises CustomerNotFoundError
    - get() raises CustomerNotFoundError for zero rows, never returns None
    - list_page() applies no ORDER BY: the store's natural order
"""

import logging
from typing import Sequence

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from customer_api.core.domain_types import CustomerId
from customer_api.core.errors import CustomerNotFoundError
from customer_api.core.repository_protocols import CustomerFields
from customer_api.models.customer import Customer

logger = logging.getLogger(__name__)


class CustomerStore:
    """Persistence operations for customers over one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, fields: CustomerFields) -> Customer:
        """Insert a customer and return the stored row."""
        customer = Customer(
            name=fields.name,
            dob=fields.dob,
            email=fields.email,
            contact=fields.contact,
        )
        self.db.add(customer)
        await self.db.commit()
        logger.debug(
            f"Inserted customer {customer.id}",
            extra={"customer_id": customer.id},
        )
        return await self.get(CustomerId(customer.id))

    async def update(
        self, customer_id: CustomerId, fields: CustomerFields,
    ) -> Customer:
        """Replace the four mutable fields and refresh updated_at."""
        await self.db.execute(
            update(Customer)
            .where(Customer.id == customer_id)
            .values(
                name=fields.name,
                dob=fields.dob,
                email=fields.email,
                contact=fields.contact,
                updated_at=func.current_timestamp(),
            )
            .execution_options(synchronize_session=False),
        )
        await self.db.commit()
        return await self.get(customer_id)

    async def get(self, customer_id: CustomerId) -> Customer:
        result = await self.db.execute(
            select(Customer)
            .where(Customer.id == customer_id)
            .execution_options(populate_existing=True),
        )
        customer = result.scalar_one_or_none()
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return customer

    async def list_page(self, offset: int, limit: int) -> Sequence[Customer]:
        result = await self.db.execute(
            select(Customer).limit(limit).offset(offset),
        )
        return result.scalars().all()

    async def count(self) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(Customer),
        )
        return result.scalar_one()
