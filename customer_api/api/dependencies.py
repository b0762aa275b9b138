"""Request Dependencies — per-request store and body decoding.

Invariants:
    - The body is decoded as JSON whatever its Content-Type header says
    - Any decoding or shape failure becomes BadRequestError (400)
"""

from fastapi import Depends, Request
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from customer_api.core.errors import BadRequestError
from customer_api.core.repository_protocols import CustomerRepository
from customer_api.infrastructure.database import get_db
from customer_api.schemas.customer import CustomerDetails
from customer_api.services.customer_store import CustomerStore


def get_customer_repository(
    db: AsyncSession = Depends(get_db),
) -> CustomerRepository:
    return CustomerStore(db)


async def read_customer_details(request: Request) -> CustomerDetails:
    """Decode the raw request body into CustomerDetails."""
    raw = await request.body()
    try:
        return CustomerDetails.model_validate_json(raw)
    except ValidationError as e:
        raise BadRequestError(describe_body_errors(e.errors())) from e


def describe_body_errors(errors) -> str:
    for e in errors:
        if e["type"] == "json_invalid":
            return f"Invalid JSON body: {e['msg']}"
    parts = []
    for e in errors:
        field = ".".join(str(part) for part in e["loc"]) or "body"
        parts.append(f"{field}: {e['msg']}")
    return "Invalid request: " + "; ".join(parts)
