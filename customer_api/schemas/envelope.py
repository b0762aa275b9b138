"""Response Envelope — every successful JSON response is {"data": <payload>}."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Single-field envelope, parameterized over the payload type."""
    data: T
