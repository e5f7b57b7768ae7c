"""
Configuration module for MindChat.
"""

from .settings import (
    ModelConfig,
    APIConfig,
    StorageConfig,
    UIConfig,
    Settings,
    settings
)

__all__ = [
    "ModelConfig",
    "APIConfig",
    "StorageConfig",
    "UIConfig",
    "Settings",
    "settings"
]
