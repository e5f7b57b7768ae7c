"""
Performance monitoring for relay and UI calls.
"""

import logging
import time
from functools import wraps

try:
    import streamlit as st
    STREAMLIT_AVAILABLE = True
except ImportError:
    STREAMLIT_AVAILABLE = False

logger = logging.getLogger(__name__)


class PerformanceMonitor:
    """Monitor and report execution time."""

    SLOW_THRESHOLD_S = 2.0

    @staticmethod
    def time_function(show_in_sidebar: bool = True):
        """Decorator to time function execution."""
        def decorator(func):
            @wraps(func)
            def wrapper(*args, **kwargs):
                start_time = time.perf_counter()
                try:
                    return func(*args, **kwargs)
                finally:
                    execution_time = time.perf_counter() - start_time
                    logger.debug("%s took %.3fs", func.__qualname__, execution_time)

                    if STREAMLIT_AVAILABLE and show_in_sidebar:
                        PerformanceMonitor._show_timing(func.__name__, execution_time)
            return wrapper
        return decorator

    @staticmethod
    def _show_timing(name: str, execution_time: float):
        if execution_time > PerformanceMonitor.SLOW_THRESHOLD_S:
            st.sidebar.warning(f"⏱️ {name}: {execution_time:.2f}s")
        else:
            st.sidebar.caption(f"⏱️ {name}: {execution_time:.2f}s")
