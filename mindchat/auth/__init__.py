"""
Authentication module for MindChat.
"""

from .api_key_manager import APIKeyManager, KeyValidator
from .key_store import KeyStore

__all__ = [
    "APIKeyManager",
    "KeyValidator",
    "KeyStore"
]
