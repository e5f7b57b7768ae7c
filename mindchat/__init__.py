"""
MindChat - Supportive counseling chat over the OpenAI API.
"""

__version__ = "1.0.0"

from .config.settings import settings
from .main import main, run_streamlit_app

__all__ = ["settings", "main", "run_streamlit_app"]
