"""
Chat session state, independent of the rendering framework.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from ..config import settings
from ..relay.models import Message
from ..utils import AuthError, InputError, SessionBusyError

logger = logging.getLogger(__name__)

Relay = Callable[[List[Dict[str, str]], str], Iterable[str]]


class ChatSession:
    """Owns the transcript and the busy flag of one chat session.

    At most one reply streams at a time; a submission made while one is in
    flight is rejected, not queued.
    """

    def __init__(self, relay: Relay, welcome_message: Optional[str] = None):
        self.relay = relay
        self.messages: List[Message] = [
            Message(
                id=settings.ui.welcome_message_id,
                role="assistant",
                content=welcome_message or settings.ui.welcome_message,
            )
        ]
        self.busy = False

    def transcript_payload(self) -> List[Dict[str, str]]:
        return [message.model_dump() for message in self.messages]

    def check_submission(self, draft: Optional[str], api_key: Optional[str]) -> str:
        if self.busy:
            raise SessionBusyError("Please wait for the current reply to finish.")
        if not api_key:
            raise AuthError("Please add your OpenAI API key in settings.")
        if not draft or not draft.strip():
            raise InputError("Please enter a message.")
        return draft

    def submit(self, draft: Optional[str], api_key: Optional[str]) -> "ReplyStream":
        """
        Append the user's message and start the assistant reply.

        Returns an iterator over reply chunks. The assistant message is added
        to the transcript once the iterator is exhausted; if the reply fails,
        nothing is added. Closing it early clears the busy flag.
        """
        content = self.check_submission(draft, api_key)
        self.messages.append(Message(role="user", content=content))

        self.busy = True
        try:
            chunks = iter(self.relay(self.transcript_payload(), api_key))
        except BaseException:
            self.busy = False
            raise
        return ReplyStream(self, chunks)


class ReplyStream:
    """Iterator over the chunks of one assistant reply.

    Closing it, or dropping it, ends the reply: the upstream chunks are closed
    and the session accepts submissions again, even if no chunk was read.
    """

    def __init__(self, session: ChatSession, chunks: Iterator[str]):
        self._session = session
        self._chunks = chunks
        self._parts: List[str] = []
        self._finished = False

    def __iter__(self) -> "ReplyStream":
        return self

    def __next__(self) -> str:
        if self._finished:
            raise StopIteration
        try:
            chunk = next(self._chunks)
        except StopIteration:
            self._session.messages.append(Message(role="assistant", content="".join(self._parts)))
            self.close()
            raise
        except BaseException:
            self.close()
            raise
        self._parts.append(chunk)
        return chunk

    def close(self) -> None:
        if self._finished:
            return
        self._finished = True
        self._session.busy = False
        close = getattr(self._chunks, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "ReplyStream":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __del__(self):
        self.close()
