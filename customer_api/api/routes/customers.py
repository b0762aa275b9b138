"""Customer Routes — create, update, get and paginated list.

Invariants:
    - Successful responses are 200 with the {"data": ...} envelope (create included)
    - {customer_id} must be a base-10 signed 64-bit integer, else 400 "Invalid id"
    - An empty id segment (/customers/) is 400 "Invalid id" for GET and PUT, not a redirect
    - The id is checked before the body
    - Body decoding failures are 400; store failures are 500
    - GET of a missing id is 404; PUT of a missing id is 500
    - page/limit never fail: invalid values fall back to page=1, limit=10
"""

import logging

from fastapi import APIRouter, Depends, Query

from customer_api.api.dependencies import get_customer_repository, read_customer_details
from customer_api.core.domain_types import CustomerId, parse_customer_id
from customer_api.core.errors import (
    BadRequestError, CustomerNotFoundError, ErrorContext, InternalError,
)
from customer_api.core.pagination import build_page_request, count_total_pages
from customer_api.core.repository_protocols import CustomerRepository
from customer_api.schemas.customer import CustomerDetails, CustomerPage, CustomerResponse
from customer_api.schemas.envelope import ApiResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/customers", tags=["customers"])

_BODY_DOC = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {"schema": CustomerDetails.model_json_schema()},
        },
    },
}


def customer_id_from_path(customer_id: str) -> CustomerId:
    return parse_customer_id(customer_id)


@router.post(
    "", response_model=ApiResponse[CustomerResponse], openapi_extra=_BODY_DOC,
)
async def create_customer(
    body: CustomerDetails = Depends(read_customer_details),
    store: CustomerRepository = Depends(get_customer_repository),
):
    """Register a customer."""
    customer = await store.create(body)
    logger.info("Customer created", extra={"customer_id": customer.id})
    return ApiResponse[CustomerResponse](
        data=CustomerResponse.model_validate(customer),
    )


@router.put(
    "/{customer_id}",
    response_model=ApiResponse[CustomerResponse],
    openapi_extra=_BODY_DOC,
)
async def update_customer(
    customer_id: CustomerId = Depends(customer_id_from_path),
    body: CustomerDetails = Depends(read_customer_details),
    store: CustomerRepository = Depends(get_customer_repository),
):
    """Replace all four mutable fields of a customer."""
    try:
        customer = await store.update(customer_id, body)
    except CustomerNotFoundError as e:
        # updating a missing id is reported as a server error, not 404
        raise InternalError(
            e.message, ErrorContext(customer_id=customer_id, operation="update"),
        ) from e
    logger.info("Customer updated", extra={"customer_id": customer.id})
    return ApiResponse[CustomerResponse](
        data=CustomerResponse.model_validate(customer),
    )


@router.get("/{customer_id}", response_model=ApiResponse[CustomerResponse])
async def get_customer(
    customer_id: CustomerId = Depends(customer_id_from_path),
    store: CustomerRepository = Depends(get_customer_repository),
):
    """Get a customer by id."""
    customer = await store.get(customer_id)
    return ApiResponse[CustomerResponse](
        data=CustomerResponse.model_validate(customer),
    )


@router.api_route("/", methods=["GET", "PUT"], include_in_schema=False)
async def missing_customer_id():
    """/customers/ with nothing after the slash."""
    raise BadRequestError("Invalid id")


@router.get("", response_model=ApiResponse[CustomerPage])
async def list_customers(
    page: str | None = Query(None),
    limit: str | None = Query(None),
    store: CustomerRepository = Depends(get_customer_repository),
):
    """List customers, one page at a time."""
    page_request = build_page_request(page, limit)
    customers = await store.list_page(page_request.offset, page_request.limit)
    total_records = await store.count()
    logger.debug(
        f"Listed {len(customers)} of {total_records} customers",
        extra={"page": page_request.page, "limit": page_request.limit},
    )
    return ApiResponse[CustomerPage](
        data=CustomerPage(
            data=[CustomerResponse.model_validate(c) for c in customers],
            total_pages=count_total_pages(total_records, page_request.limit),
        ),
    )
