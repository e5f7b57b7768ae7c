"""Wire models shared by the relay service and the chat UI."""

from __future__ import annotations

import uuid
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ChatRole = Literal["user", "assistant", "system"]


def new_message_id() -> str:
    return uuid.uuid4().hex


class Message(BaseModel):
    id: str = Field(default_factory=new_message_id)
    role: ChatRole
    content: str

    def to_upstream(self) -> dict:
        """Upstream form: the provider only accepts role and content."""
        return {"role": self.role, "content": self.content}


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    messages: List[Message] = Field(default_factory=list)
    api_key: Optional[str] = Field(default=None, alias="apiKey")


class ValidateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    api_key: Optional[str] = Field(default=None, alias="apiKey")


class ValidationResult(BaseModel):
    valid: bool
    error: Optional[str] = None
