from typing import Optional


class DealsFetchError(Exception):
    """Base error for any failed CheapShark round trip."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class TransportError(DealsFetchError):
    """Non-success HTTP status or network failure."""


class ShapeError(DealsFetchError):
    """Response body does not have the expected fields."""
