from typing import Optional

from fastapi import status


class ServiceError(Exception):
    """Base exception for service layer errors."""

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationError(ServiceError):
    """A draft admission failed intake validation. Never reaches the record store."""

    def __init__(self, message: str, field: Optional[str] = None, reason: str = "missing") -> None:
        super().__init__(message, status.HTTP_422_UNPROCESSABLE_ENTITY)
        self.field = field
        self.reason = reason


# Gateway error categories, picked from the store's error message
GATEWAY_DUPLICATE = "duplicate"
GATEWAY_NETWORK = "network"
GATEWAY_PERMISSION = "permission"
GATEWAY_NOT_FOUND = "not_found"
GATEWAY_UNKNOWN = "unknown"

_CATEGORY_STATUS = {
    GATEWAY_DUPLICATE: status.HTTP_409_CONFLICT,
    GATEWAY_NETWORK: status.HTTP_503_SERVICE_UNAVAILABLE,
    GATEWAY_PERMISSION: status.HTTP_403_FORBIDDEN,
    GATEWAY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    GATEWAY_UNKNOWN: status.HTTP_502_BAD_GATEWAY,
}

_CATEGORY_MESSAGES = {
    GATEWAY_DUPLICATE: "An application with this email already exists.",
    GATEWAY_NETWORK: "Network error. Please check your internet connection.",
    GATEWAY_PERMISSION: "Permission denied. Please contact administrator.",
    GATEWAY_NOT_FOUND: "Admission application not found.",
}


def categorize_gateway_error(message: str) -> str:
    """Pick a category by looking for known substrings in a store error message."""
    text = (message or "").lower()
    if "duplicate key" in text or "unique constraint" in text:
        return GATEWAY_DUPLICATE
    if "network" in text:
        return GATEWAY_NETWORK
    if "permission" in text:
        return GATEWAY_PERMISSION
    return GATEWAY_UNKNOWN


class GatewayError(ServiceError):
    """A record store call failed. The caller may retry the same action."""

    def __init__(self, message: str, category: Optional[str] = None) -> None:
        category = category or categorize_gateway_error(message)
        super().__init__(message, _CATEGORY_STATUS.get(category, status.HTTP_502_BAD_GATEWAY))
        self.category = category

    def user_message(self, action: str) -> str:
        """e.g. user_message("Failed to save application.")"""
        detail = _CATEGORY_MESSAGES.get(self.category, "Please try again.")
        return f"{action} {detail}"


class DeliveryError(ServiceError):
    """The report delivery channel refused or failed to send a report."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status.HTTP_502_BAD_GATEWAY)
