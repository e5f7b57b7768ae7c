"""
Thin wrapper over the OpenAI SDK.
"""

import logging
from typing import Dict, Iterator, List

from openai import OpenAI

logger = logging.getLogger(__name__)


class SimpleModelClient:
    """Client wrapper exposing the two upstream calls the app needs."""

    def __init__(self, api_key: str, model_name: str):
        self.model_name = model_name
        self.client = OpenAI(api_key=api_key)

    def list_models(self) -> List[str]:
        """Account introspection call; raises if the key is not accepted."""
        return [model.id for model in self.client.models.list()]

    def _iter_stream(self, stream) -> Iterator[str]:
        """Yield delta contents in arrival order, closing the upstream stream at the end."""
        try:
            for chunk in stream:
                if not chunk.choices:
                    continue
                content = chunk.choices[0].delta.content
                if content:
                    yield content
        except Exception:
            logger.exception("Upstream stream aborted")
            raise
        finally:
            stream.close()

    def chat_completion(self, messages: List[Dict[str, str]], max_tokens: int, temperature: float) -> Iterator[str]:
        """Start a streaming chat completion.

        The request is sent before this returns, so connection and
        authentication failures raise here rather than on first iteration.
        """
        stream = self.client.chat.completions.create(
            model=self.model_name, messages=messages, max_tokens=max_tokens,
            temperature=temperature, stream=True,
        )
        return self._iter_stream(stream)
