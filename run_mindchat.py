#!/usr/bin/env python3
"""
Launcher script for the MindChat UI.
Run with: streamlit run run_mindchat.py

The relay service must be running as well (``mindchat-server``).
"""

from mindchat.main import run_streamlit_app

if __name__ == "__main__":
    run_streamlit_app()
