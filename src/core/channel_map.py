"""Channel to documentation base URL lookup (core domain)."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

LOGGER = logging.getLogger(__name__)


class ChannelMap:
    """Read-only mapping of channel identifiers to base URLs."""

    def __init__(self, entries: Optional[dict[str, str]] = None) -> None:
        self._entries: dict[str, str] = dict(entries or {})

    @classmethod
    def from_entries(cls, raw_entries: Iterable[str]) -> "ChannelMap":
        """Build the map from ``"channel:baseUrl"`` strings.

        Each entry is split on its first colon, so the base URL keeps its own
        ``scheme://`` colon. When a channel is listed twice the first entry
        wins.
        """

        entries: dict[str, str] = {}
        for raw in raw_entries:
            channel_id, sep, base_url = str(raw).partition(":")
            channel_id = channel_id.strip()
            base_url = base_url.strip().rstrip("/")
            if not sep or not channel_id or not base_url:
                LOGGER.warning("Ignoring malformed channelmap entry %r", raw)
                continue
            if channel_id in entries:
                LOGGER.warning("Duplicate channelmap entry for %s, keeping %s", channel_id, entries[channel_id])
                continue
            entries[channel_id] = base_url
        return cls(entries)

    def lookup(self, channel_id: str) -> Optional[str]:
        return self._entries.get(channel_id)

    def channels(self) -> list[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
