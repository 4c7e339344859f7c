"""Pulsar admin REST controller."""

from pulsarhawk.controllers.admin.controller import PulsarAdminController
from pulsarhawk.controllers.admin.errors import (
    AdminDecodeError,
    AdminError,
    AdminRequestError,
    AdminResponseError,
)
from pulsarhawk.controllers.admin.parsers import AdminParser

__all__ = [
    "AdminDecodeError",
    "AdminError",
    "AdminParser",
    "AdminRequestError",
    "AdminResponseError",
    "PulsarAdminController",
]
