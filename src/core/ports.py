"""Ports (interfaces) used by the core.

Ports define the minimal contracts for fetching, HTML selection and chat
replies so that the core can be reused with different backends.
"""

from __future__ import annotations

from typing import Optional, Protocol

from core.models import ExpansionResult, FetchOutcome, MessageContext


class PageFetcherPort(Protocol):
    """Single-shot HTTP GET returning a response or a network failure."""

    async def fetch(self, url: str, user_agent: str) -> FetchOutcome:
        ...


class HtmlSelectorPort(Protocol):
    """Return the text of the first element matching a CSS selector."""

    def select_first(self, html: str, selector: str) -> Optional[str]:
        ...


class ReplierPort(Protocol):
    """Chat reply operations required by the listener."""

    async def reply(
        self,
        context: MessageContext,
        addressee: str,
        token: str,
        result: ExpansionResult,
    ) -> None:
        ...

    async def reply_text(self, context: MessageContext, text: str) -> None:
        ...
