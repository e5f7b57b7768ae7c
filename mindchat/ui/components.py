"""
Reusable UI components for the MindChat Streamlit interface.
"""

from typing import Optional

try:
    import streamlit as st
    STREAMLIT_AVAILABLE = True
except ImportError:
    STREAMLIT_AVAILABLE = False
    st = None

from .session import ChatSession, Relay
from ..config import settings


class UIComponents:
    """Collection of reusable UI components."""

    @staticmethod
    def render_header():
        if not STREAMLIT_AVAILABLE:
            return

        st.write(f"## {settings.ui.page_icon} {settings.ui.page_title}")

    @staticmethod
    def render_footer():
        """Render the crisis notice below the chat."""
        if not STREAMLIT_AVAILABLE:
            return

        st.divider()
        st.markdown(
            f"<div style='text-align: center; opacity: 0.7; font-size: 14px;'>"
            f"<p><strong>{settings.ui.crisis_notice}</strong></p>"
            f"<p>{settings.ui.disclaimer}</p>"
            f"</div>",
            unsafe_allow_html=True,
        )


class SessionManager:
    """Manages Streamlit session state."""

    CHAT_SESSION_KEY = "chat_session"

    @staticmethod
    def initialize_chat_session(relay: Relay) -> Optional[ChatSession]:
        """Create the chat session on first run and return it."""
        if not STREAMLIT_AVAILABLE:
            return None

        if SessionManager.CHAT_SESSION_KEY not in st.session_state:
            st.session_state[SessionManager.CHAT_SESSION_KEY] = ChatSession(relay)
        return st.session_state[SessionManager.CHAT_SESSION_KEY]
