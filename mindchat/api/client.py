"""
HTTP client for the relay service.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional

import requests

from ..config import settings
from ..utils import RelayError

logger = logging.getLogger(__name__)


class RelayClient:
    """Calls /api/chat and /api/validate on the relay service."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url or settings.api.base_url
        self.timeout = timeout if timeout is not None else settings.api.request_timeout
        self.session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return response.text or f"Request failed with status {response.status_code}"
        if isinstance(data, dict) and data.get("error"):
            return str(data["error"])
        return f"Request failed with status {response.status_code}"

    def stream_chat(self, messages: List[Dict[str, Any]], api_key: Optional[str]) -> Iterator[str]:
        """
        Send the transcript and return the reply as it streams in.

        The request is made before this returns; a non-success status raises
        ``RelayError`` with the server's error text.
        """
        response = self.session.post(
            self._url(settings.api.chat_path),
            json={"messages": messages, "apiKey": api_key},
            stream=True,
            timeout=self.timeout,
        )
        if response.status_code != 200:
            message = self._error_message(response)
            response.close()
            raise RelayError(message, status_code=response.status_code)

        response.encoding = response.encoding or "utf-8"
        return self._iter_text(response)

    @staticmethod
    def _iter_text(response: requests.Response) -> Iterator[str]:
        try:
            for text in response.iter_content(chunk_size=None, decode_unicode=True):
                if text:
                    yield text
        finally:
            response.close()

    def validate(self, api_key: str) -> bool:
        """Ask the relay service whether the key authenticates upstream."""
        try:
            response = self.session.post(
                self._url(settings.api.validate_path),
                json={"apiKey": api_key},
                timeout=self.timeout,
            )
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("Key validation request failed: %s", e)
            return False
        return bool(isinstance(data, dict) and data.get("valid"))
