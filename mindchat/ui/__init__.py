"""
User interface module for MindChat.
"""

from .components import UIComponents, SessionManager
from .chat_interface import ChatInterface
from .session import ChatSession, ReplyStream

__all__ = [
    "UIComponents",
    "SessionManager",
    "ChatInterface",
    "ChatSession",
    "ReplyStream"
]
