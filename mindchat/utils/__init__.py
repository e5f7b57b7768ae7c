"""
Utility modules for MindChat.
"""

from .error_handling import (
    MindChatError,
    InputError,
    SessionBusyError,
    AuthError,
    UpstreamError,
    ValidationFailure,
    RelayError,
    Notification,
    ErrorHandler,
)
from .performance import PerformanceMonitor

__all__ = [
    "MindChatError",
    "InputError",
    "SessionBusyError",
    "AuthError",
    "UpstreamError",
    "ValidationFailure",
    "RelayError",
    "Notification",
    "ErrorHandler",
    "PerformanceMonitor",
]
