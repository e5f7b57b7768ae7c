"""
Chat interface for MindChat.

A submitted prompt is first parked in the session state and the script is
rerun, so the chat input is already disabled on the run that streams the
reply. Notifications raised while streaming are shown on the run after it.
"""

import logging
from typing import Optional

try:
    import streamlit as st
    STREAMLIT_AVAILABLE = True
except ImportError:
    STREAMLIT_AVAILABLE = False

from .components import SessionManager
from .session import ChatSession
from ..config import settings
from ..utils import AuthError, ErrorHandler, InputError

logger = logging.getLogger(__name__)


class ChatInterface:
    """Renders the conversation and streams new replies into it."""

    PENDING_PROMPT_KEY = "pending_prompt"
    NOTIFICATION_KEY = "chat_notification"

    def __init__(self, relay_client):
        self.relay_client = relay_client
        self.session = SessionManager()

    def render(self, api_key: Optional[str]):
        """Render the complete chat interface."""
        chat_session = self.session.initialize_chat_session(self.relay_client.stream_chat)
        if chat_session is None:
            return

        notification = st.session_state.pop(self.NOTIFICATION_KEY, None)
        if notification is not None:
            ErrorHandler.display_notification(notification)

        for msg in chat_session.messages:
            with st.chat_message(msg.role):
                st.markdown(msg.content)

        pending = st.session_state.pop(self.PENDING_PROMPT_KEY, None)
        placeholder = settings.ui.input_placeholder if api_key else settings.ui.missing_key_placeholder
        prompt = st.chat_input(
            placeholder,
            disabled=pending is not None or chat_session.busy or not api_key,
        )

        if pending is not None:
            self._stream_reply(chat_session, pending, api_key)
            # Re-enable the input now that the reply is done
            st.rerun()
        elif prompt is not None:
            self._queue_prompt(chat_session, prompt, api_key)

        if not api_key:
            st.info(
                "To start chatting, open **Settings** in the sidebar and enter your OpenAI API key. "
                "You can get one from the OpenAI website."
            )

    def _queue_prompt(self, chat_session: ChatSession, user_input: str, api_key: Optional[str]):
        """Park a new user message and rerun with the input disabled."""
        try:
            chat_session.check_submission(user_input, api_key)
        except (InputError, AuthError) as e:
            ErrorHandler.display_notification(ErrorHandler.classify(e))
            return

        st.session_state[self.PENDING_PROMPT_KEY] = user_input
        st.rerun()

    def _stream_reply(self, chat_session: ChatSession, user_input: str, api_key: Optional[str]):
        """Submit a parked message and stream the assistant reply."""
        try:
            reply_stream = chat_session.submit(user_input, api_key)
        except (InputError, AuthError) as e:
            st.session_state[self.NOTIFICATION_KEY] = ErrorHandler.classify(e)
            return
        except Exception as e:
            # The user message stays in the transcript
            self._defer_error(e)
            return

        with st.chat_message("user"):
            st.markdown(user_input)

        with st.chat_message("assistant"):
            try:
                st.write_stream(reply_stream)
            except Exception as e:
                self._defer_error(e)
            finally:
                reply_stream.close()

    def _defer_error(self, error: Exception):
        logger.error("Chat error: %s", error)
        st.session_state[self.NOTIFICATION_KEY] = ErrorHandler.classify(error)
