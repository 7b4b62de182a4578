"""
Service Error Type

Every rule violation in the delivery service raises ``DeliveryError``.
Callers tell failures apart by the operation they called; ``error_code``
is a machine-readable label for logs and API layers.
"""

from typing import Optional


class ErrorCode:
    """Known values for ``DeliveryError.error_code``."""
    DUPLICATE_CATEGORY = "duplicate_category"
    UNKNOWN_CATEGORY = "unknown_category"
    DUPLICATE_RESTAURANT = "duplicate_restaurant"
    DUPLICATE_DISH = "duplicate_dish"
    UNKNOWN_RESTAURANT = "unknown_restaurant"
    UNKNOWN_DISH = "unknown_dish"
    UNKNOWN_ORDER = "unknown_order"
    ALREADY_ASSIGNED = "already_assigned"


class DeliveryError(Exception):
    """
    Raised when an operation would break a catalog or order-book rule.

    Attributes:
        message: Human-readable description
        error_code: Machine-readable reason (see ``ErrorCode``)
    """

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "error": self.message,
            "error_code": self.error_code,
        }
