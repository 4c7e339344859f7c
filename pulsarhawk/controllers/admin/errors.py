"""Errors raised by the admin controller."""

from __future__ import annotations


class AdminError(Exception):
    """Base exception for admin API failures."""


class AdminRequestError(AdminError):
    """Transport failure, timeout or missing credentials."""


class AdminResponseError(AdminError):
    """The admin API answered with an error status."""

    def __init__(self, status: int, reason: str, detail: str = "") -> None:
        self.status = status
        self.reason = reason
        self.detail = detail
        message = f"HTTP {status} {reason}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class AdminDecodeError(AdminError):
    """The admin API answered with an unexpected payload."""
