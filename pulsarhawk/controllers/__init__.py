"""Controllers module for pulsarhawk.

This module provides the network-facing controllers for the Pulsar admin API,
the websocket consumer and the latest-release check.
"""

from __future__ import annotations

# Base classes
from pulsarhawk.controllers.base import (
    AsyncControllerMixin,
    BaseController,
    WorkerResult,
)

# Admin domain
from pulsarhawk.controllers.admin import AdminError, PulsarAdminController

# Credentials
from pulsarhawk.controllers.auth import AuthError, TokenProvider

# Messaging domain
from pulsarhawk.controllers.messaging import (
    ConsumerStream,
    MessagingError,
    PulsarListener,
)

__all__ = [
    # Base
    "AsyncControllerMixin",
    "BaseController",
    "WorkerResult",
    # Domain controllers
    "AdminError",
    "AuthError",
    "ConsumerStream",
    "MessagingError",
    "PulsarAdminController",
    "PulsarListener",
    "TokenProvider",
]
