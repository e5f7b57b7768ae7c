"""
Error types and user-facing error notifications.
"""

import logging
from dataclasses import dataclass
from typing import Optional

try:
    import streamlit as st
    STREAMLIT_AVAILABLE = True
except ImportError:
    STREAMLIT_AVAILABLE = False

logger = logging.getLogger(__name__)


class MindChatError(Exception):
    """Base error. Carries a user-facing title and an HTTP-equivalent status."""

    title = "Error"
    status_code = 500

    def __init__(self, message: str, title: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        if title is not None:
            self.title = title
        if status_code is not None:
            self.status_code = status_code


class InputError(MindChatError):
    """Missing or malformed credential, or an empty message."""
    status_code = 400


class SessionBusyError(InputError):
    """A reply is already streaming for this session."""
    title = "Please wait"


class AuthError(MindChatError):
    """Credential absent or rejected."""
    title = "API Key Required"
    status_code = 401


class UpstreamError(MindChatError):
    """Network or provider failure during an upstream call."""
    status_code = 500


class ValidationFailure(MindChatError):
    """The provider did not confirm the credential."""
    title = "Invalid API Key"
    status_code = 400


class RelayError(MindChatError):
    """Non-success response from the relay service."""


@dataclass
class Notification:
    """A categorized message for the user."""
    title: str
    description: str
    category: str = "generic"


class ErrorHandler:
    """Centralized error classification for better UX."""

    API_KEY_NOTIFICATION = Notification(
        title="API Key Error",
        description="Please check your OpenAI API key in settings.",
        category="api_key",
    )
    RATE_LIMIT_NOTIFICATION = Notification(
        title="Rate Limit Exceeded",
        description="Please wait a moment before sending another message.",
        category="rate_limit",
    )

    @staticmethod
    def classify(error: Exception) -> Notification:
        """Map an error to a notification, using its status when available and its text otherwise."""
        if isinstance(error, InputError):
            return Notification(title=error.title, description=str(error), category="input")

        if isinstance(error, (AuthError, ValidationFailure)):
            return Notification(title=error.title, description=str(error), category="api_key")

        error_msg = str(error) or "An error occurred while sending your message"
        lowered = error_msg.lower()

        if isinstance(error, RelayError) and error.status_code == 401:
            return ErrorHandler.API_KEY_NOTIFICATION
        if "api key" in lowered:
            return ErrorHandler.API_KEY_NOTIFICATION
        if "rate limit" in lowered:
            return ErrorHandler.RATE_LIMIT_NOTIFICATION
        return Notification(title="Error", description=error_msg)

    @staticmethod
    def display_notification(notification: Notification):
        """Show a notification as a toast."""
        if not STREAMLIT_AVAILABLE:
            logger.warning("%s: %s", notification.title, notification.description)
            return

        icon = "✅" if notification.category == "success" else "❌"
        st.toast(f"**{notification.title}**\n\n{notification.description}", icon=icon)

    @staticmethod
    def display_error(error: Exception):
        """Log an error and show its user-friendly notification."""
        logger.error("Chat error: %s", error)
        ErrorHandler.display_notification(ErrorHandler.classify(error))
