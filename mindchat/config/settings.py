"""Configuration settings for MindChat application."""

import os
from pathlib import Path
from typing import Optional
from dataclasses import dataclass, field


@dataclass
class ModelConfig:
    """Upstream model settings used for every chat request."""
    model_name: str = "gpt-4"
    temperature: float = 0.7
    max_tokens: int = 1000


@dataclass
class APIConfig:
    """Relay service configuration."""
    base_url: str = field(default_factory=lambda: os.getenv("MINDCHAT_API_URL", "http://127.0.0.1:8000"))
    host: str = "127.0.0.1"
    port: int = 8000
    app_env: str = field(default_factory=lambda: os.getenv("APP_ENV", "development"))
    # None means the transport default applies
    request_timeout: Optional[float] = None
    chat_path: str = "/api/chat"
    validate_path: str = "/api/validate"


@dataclass
class StorageConfig:
    """Client-side key/value storage."""
    api_key_name: str = "openai-api-key"
    path: Path = field(
        default_factory=lambda: Path(os.getenv("MINDCHAT_HOME", "~/.mindchat")).expanduser() / "storage.json"
    )


@dataclass
class UIConfig:
    """UI text and presentation settings."""
    page_title: str = "MindChat"
    page_icon: str = "🧠"
    welcome_message_id: str = "welcome"
    welcome_message: str = (
        "Hello! I'm here to listen and support you in a safe, non-judgmental space. "
        "How are you feeling today?"
    )
    input_placeholder: str = "Share what's on your mind..."
    missing_key_placeholder: str = "Please add your OpenAI API key in settings to start chatting"
    api_key_prefix: str = "sk-"
    api_key_dashboard_url: str = "https://platform.openai.com/account/api-keys"
    crisis_notice: str = (
        "If you're experiencing a crisis, please contact your local emergency services "
        "or mental health crisis hotline."
    )
    disclaimer: str = "This AI chatbot is not a substitute for professional mental health care."


class Settings:
    """Main settings class that combines all configuration."""

    def __init__(self):
        self.model = ModelConfig()
        self.api = APIConfig()
        self.storage = StorageConfig()
        self.ui = UIConfig()

    def is_development(self) -> bool:
        return self.api.app_env.lower() in {"dev", "development", "local"}


# Global settings instance
settings = Settings()
