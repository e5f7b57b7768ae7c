"""
Main application entry point for the MindChat Streamlit UI.
"""
import streamlit as st

from .api import RelayClient
from .auth import APIKeyManager, KeyStore
from .config import settings
from .ui import UIComponents
from .ui.chat_interface import ChatInterface
from .utils import PerformanceMonitor

# --- Caching Functions for Performance ---

@st.cache_resource
def get_relay_client(base_url: str) -> RelayClient:
    """Initializes and caches the relay client. No UI elements inside."""
    return RelayClient(base_url)

def get_key_store() -> KeyStore:
    """One store per browser session, so writes from other sessions are seen as changes."""
    if "key_store" not in st.session_state:
        st.session_state["key_store"] = KeyStore(settings.storage.path)
    return st.session_state["key_store"]

# --- Main Application Logic ---

def main():
    """Main application function."""
    st.set_page_config(
        page_title=settings.ui.page_title,
        page_icon=settings.ui.page_icon,
        layout="centered"
    )

    relay_client = get_relay_client(settings.api.base_url)
    api_key_manager = APIKeyManager(relay_client, get_key_store())

    # Keys saved from another tab show up here on the next rerun
    api_key = api_key_manager.sync_from_store(st.session_state)
    api_key_manager.render_settings()

    render_main_interface(relay_client, api_key)

@PerformanceMonitor.time_function()
def render_main_interface(relay_client: RelayClient, api_key):
    """Render the chat area with performance monitoring."""
    ui_components = UIComponents()
    ui_components.render_header()

    chat_interface = ChatInterface(relay_client)
    chat_interface.render(api_key=api_key)

    ui_components.render_footer()

def run_streamlit_app():
    """Entry point for running the Streamlit app."""
    main()

if __name__ == "__main__":
    run_streamlit_app()
