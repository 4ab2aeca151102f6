"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to any integration-specific types.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Category(Enum):
    """Kinds of documentation pages a reference can point to."""

    REF = "ref"
    GUIDE = "guide"


@dataclass(frozen=True)
class ParsedReference:
    """A reference token split into its category and page key."""

    category: Category
    key: str


@dataclass(frozen=True)
class FetchResponse:
    """Transport-level success: the server answered with some status."""

    url: str
    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return self.status_code == 200


@dataclass(frozen=True)
class NetworkFailure:
    """Transport-level failure (timeout, refused connection, DNS...)."""

    url: str
    reason: str


FetchOutcome = Union[FetchResponse, NetworkFailure]


class FailureKind(Enum):
    UNKNOWN_CHANNEL = "unknown_channel"
    UNRECOGNIZED_REFERENCE = "unrecognized_reference"
    INVALID_REMOTE_PAGE = "invalid_remote_page"
    NETWORK_FAILURE = "network_failure"
    UNEXPECTED_FAILURE = "unexpected_failure"


@dataclass(frozen=True)
class ExpansionResult:
    """Outcome of expanding one reference token.

    Either ``url`` is set (``title`` may still be ``None``), or ``url`` is
    ``None`` and ``error_kind``/``error_message`` describe what went wrong.
    """

    url: Optional[str]
    title: Optional[str] = None
    error_kind: Optional[FailureKind] = None
    error_message: Optional[str] = None

    @classmethod
    def success(cls, url: str, title: Optional[str] = None) -> "ExpansionResult":
        return cls(url=url, title=title)

    @classmethod
    def failure(cls, kind: FailureKind, message: str) -> "ExpansionResult":
        return cls(url=None, title=None, error_kind=kind, error_message=message)

    @property
    def ok(self) -> bool:
        return self.url is not None


@dataclass(frozen=True)
class MessageContext:
    """Minimal message context used by the reference listener."""

    channel_id: str
    chat_id: int
    message_id: int
    text: str
    sender_name: str
    is_private: bool
