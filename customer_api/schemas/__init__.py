from .customer import CustomerDetails, CustomerResponse, CustomerPage
from .envelope import ApiResponse

__all__ = [
    "ApiResponse",
    "CustomerDetails",
    "CustomerResponse",
    "CustomerPage",
]
