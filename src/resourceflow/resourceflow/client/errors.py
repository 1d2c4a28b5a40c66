from __future__ import annotations

from typing import Any, List, Optional


class ApiError(Exception):
    """HTTP or network failure talking to the ResourceFlow API.

    status is None for connection errors and timeouts.
    """

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        error: Optional[str] = None,
        details: Optional[List[Any]] = None,
        url: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.error = error
        self.details = list(details or [])
        self.url = url

    def __repr__(self) -> str:
        return f"ApiError(status={self.status!r}, message={self.message!r})"


def is_network_error(error: ApiError) -> bool:
    return error.status is None


def is_validation_error(error: ApiError) -> bool:
    return error.status == 400


def is_not_found_error(error: ApiError) -> bool:
    return error.status == 404


def is_conflict_error(error: ApiError) -> bool:
    return error.status == 409


def is_server_error(error: ApiError) -> bool:
    return error.status is not None and 500 <= error.status < 600


def is_rate_limit_error(error: ApiError) -> bool:
    return error.status == 429


def should_retry(error: Exception) -> bool:
    """Only network failures and 5xx responses are retried."""
    if not isinstance(error, ApiError):
        return False
    return is_network_error(error) or is_server_error(error)


def user_message(error: ApiError) -> str:
    if is_network_error(error):
        return "Unable to connect to server. Please check your internet connection and try again."
    if is_validation_error(error):
        if error.details:
            return "Please fix the following issues:\n" + "\n".join(str(d) for d in error.details)
        return "Please check your input and try again."
    if is_not_found_error(error):
        return "The requested resource was not found."
    if is_conflict_error(error):
        return error.message or "This change conflicts with an existing record."
    if is_server_error(error):
        return "Server is temporarily unavailable. Please try again later."
    if is_rate_limit_error(error):
        return "Too many requests. Please wait a moment and try again."
    return error.message or "An unexpected error occurred"
