"""
Chat relay: forwards a transcript upstream with the counseling prompt and streams the reply.
"""

import logging
from typing import Callable, Dict, Iterator, List, Optional, Sequence

from .client import SimpleModelClient
from .models import Message
from .prompts import SYSTEM_PROMPT
from ..config import ModelConfig, settings
from ..utils import AuthError, MindChatError, PerformanceMonitor, UpstreamError

logger = logging.getLogger(__name__)


class ChatRelay:
    """Relays a conversation to the upstream provider."""

    def __init__(
        self,
        model_config: Optional[ModelConfig] = None,
        client_factory: Callable[[str, str], SimpleModelClient] = SimpleModelClient,
        system_prompt: str = SYSTEM_PROMPT,
    ):
        self.model_config = model_config or settings.model
        self.client_factory = client_factory
        self.system_prompt = system_prompt

    def build_messages(self, transcript: Sequence[Message]) -> List[Dict[str, str]]:
        """Prepend the system instruction to the caller's transcript."""
        messages = [{"role": "system", "content": self.system_prompt}]
        messages.extend(message.to_upstream() for message in transcript)
        return messages

    @PerformanceMonitor.time_function(show_in_sidebar=False)
    def open_stream(self, transcript: Sequence[Message], api_key: Optional[str]) -> Iterator[str]:
        """
        Start the upstream call and return its chunks.

        The returned iterator is one-shot: chunks arrive in order and cannot be
        replayed. Failures while setting up the call raise ``UpstreamError``
        with the original message; nothing is retried.
        """
        if not api_key:
            raise AuthError("API key is required")

        messages = self.build_messages(transcript)
        logger.info(
            "Relaying chat: model=%s messages=%d", self.model_config.model_name, len(messages)
        )

        try:
            client = self.client_factory(api_key, self.model_config.model_name)
            return client.chat_completion(
                messages=messages,
                max_tokens=self.model_config.max_tokens,
                temperature=self.model_config.temperature,
            )
        except MindChatError:
            raise
        except Exception as e:
            logger.error("Chat relay failed: %s", e)
            raise UpstreamError(str(e)) from e
