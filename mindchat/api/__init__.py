"""
HTTP surface for MindChat: the relay client used by the UI.

The FastAPI service itself lives in ``mindchat.api.server`` and is imported
on demand so the UI does not configure server logging.
"""

from .client import RelayClient

__all__ = ["RelayClient"]
