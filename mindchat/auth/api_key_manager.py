"""
Practical API key management with live validation.
"""

import logging
from typing import Callable, MutableMapping, Optional

try:
    import streamlit as st
    STREAMLIT_AVAILABLE = True
except ImportError:
    STREAMLIT_AVAILABLE = False

from .key_store import KeyStore
from ..config import settings
from ..relay.client import SimpleModelClient
from ..relay.models import ValidationResult
from ..utils import ErrorHandler, InputError, MindChatError, Notification, ValidationFailure

logger = logging.getLogger(__name__)


class KeyValidator:
    """Confirms with the provider that an API key authenticates."""

    def __init__(self, client_factory: Callable[[str, str], SimpleModelClient] = SimpleModelClient):
        self.client_factory = client_factory

    def validate(self, api_key: Optional[str]) -> ValidationResult:
        """Test the key with a model listing request.

        Every failure, including plain network errors, is reported the same way;
        the detail only goes to the log.
        """
        if not api_key or not api_key.strip():
            raise InputError("API key is required")

        try:
            client = self.client_factory(api_key, settings.model.model_name)
            client.list_models()
        except Exception as e:
            logger.warning("Validation error: %s", e)
            return ValidationResult(valid=False, error="Invalid API key")
        return ValidationResult(valid=True)


class APIKeyManager:
    """Settings panel logic: format checks, remote validation and local persistence."""

    SESSION_KEY = "api_key"

    def __init__(self, relay_client, key_store: Optional[KeyStore] = None):
        self.relay_client = relay_client
        self.key_store = key_store or KeyStore(settings.storage.path)
        self.key_name = settings.storage.api_key_name

    def load_api_key(self) -> Optional[str]:
        return self.key_store.get(self.key_name)

    @staticmethod
    def check_format(api_key: Optional[str]) -> str:
        """Reject keys that cannot be OpenAI keys before anything is sent."""
        if not api_key or not api_key.strip():
            raise InputError("Please enter an API key")

        api_key = api_key.strip()
        if not api_key.startswith(settings.ui.api_key_prefix):
            raise InputError(
                f'Please enter a valid OpenAI API key starting with "{settings.ui.api_key_prefix}"',
                title="Invalid API Key",
            )
        return api_key

    def save_api_key(self, api_key: Optional[str]) -> str:
        """Validate the key with the relay service and persist it on success."""
        api_key = self.check_format(api_key)

        if not self.relay_client.validate(api_key):
            raise ValidationFailure("The API key could not be validated with OpenAI")

        self.key_store.set(self.key_name, api_key)
        logger.info("API key validated and saved")
        return api_key

    def clear_api_key(self):
        self.key_store.remove(self.key_name)

    def sync_from_store(self, session_state: MutableMapping) -> Optional[str]:
        """Pick up keys saved or cleared elsewhere since the last check."""
        if self.key_name in self.key_store.poll():
            session_state[self.SESSION_KEY] = self.load_api_key()
        elif self.SESSION_KEY not in session_state:
            session_state[self.SESSION_KEY] = self.load_api_key()
        return session_state[self.SESSION_KEY]

    def render_settings(self):
        """Render the API key settings panel in the sidebar."""
        if not STREAMLIT_AVAILABLE:
            return

        current_key = st.session_state.get(self.SESSION_KEY)
        with st.sidebar.expander("⚙️ Settings", expanded=not current_key):
            draft = st.text_input(
                "OpenAI API Key", value=current_key or "", type="password", placeholder="sk-..."
            )
            st.caption(
                "Enter your OpenAI API key. You can find it in your "
                f"[OpenAI dashboard]({settings.ui.api_key_dashboard_url})."
            )

            if st.button("Save Settings", use_container_width=True):
                try:
                    with st.spinner("Validating..."):
                        saved_key = self.save_api_key(draft)
                except MindChatError as e:
                    ErrorHandler.display_notification(ErrorHandler.classify(e))
                else:
                    st.session_state[self.SESSION_KEY] = saved_key
                    ErrorHandler.display_notification(Notification(
                        title="Settings saved",
                        description="Your API key has been validated and saved successfully.",
                        category="success",
                    ))
                    st.rerun()

            if current_key and st.button("Clear API Key", use_container_width=True):
                self.clear_api_key()
                st.session_state[self.SESSION_KEY] = None
                st.rerun()
