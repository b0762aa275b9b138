"""Domain Types — identity type and strict integer parsing shared across layers.

Invariants:
    - CustomerId wraps the store-assigned integer id
    - Ids and pagination values are limited to the signed 64-bit range
    - Only [+-]?[0-9]+ parses: no whitespace, underscores, decimals or exponents
"""

import re
from typing import NewType

from customer_api.core.errors import BadRequestError


CustomerId = NewType("CustomerId", int)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")


def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def parse_int64(raw: str | None) -> int | None:
    """Parse a base-10 signed 64-bit integer, None when it is not one."""
    if not raw or not _DECIMAL_INT.fullmatch(raw):
        return None
    value = int(raw)
    if not fits_int64(value):
        return None
    return value


def parse_customer_id(raw: str | None) -> CustomerId:
    """Parse a customer id from a URL segment or raise BadRequestError."""
    value = parse_int64(raw)
    if value is None:
        raise BadRequestError("Invalid id")
    return CustomerId(value)
