"""
Chat relay module for MindChat.
"""

from .chat_relay import ChatRelay
from .client import SimpleModelClient
from .models import ChatRequest, Message, ValidateRequest, ValidationResult
from .prompts import SYSTEM_PROMPT

__all__ = [
    "ChatRelay",
    "SimpleModelClient",
    "ChatRequest",
    "Message",
    "ValidateRequest",
    "ValidationResult",
    "SYSTEM_PROMPT",
]
