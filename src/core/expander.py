"""Reference expansion pipeline.

The expander enforces a strict order:
1) Resolve the channel's documentation base URL
2) Parse the reference token into a category and key
3) Build the target URL
4) Fetch the page (bounded by the configured timeout)
5) Extract a title (a missing title is not a failure)

Every failure is turned into an ExpansionResult; nothing is raised to the
caller except cancellation.
"""

from __future__ import annotations

import asyncio
import logging

from core.channel_map import ChannelMap
from core.config import FetchConfig
from core.models import ExpansionResult, FailureKind, NetworkFailure
from core.ports import PageFetcherPort
from core.references import build_url, parse_reference
from core.titles import TitleExtractor

LOGGER = logging.getLogger(__name__)

UNKNOWN_CHANNEL_MESSAGE = (
    "I don't know about documentation URLs for this channel: no channel base URL "
    "configured. Please add a channelmap entry for it."
)
UNRECOGNIZED_REFERENCE_MESSAGE = "I'm afraid I don't understand '{token}': unrecognized or malformed reference."
PAGE_NOT_FOUND_MESSAGE = (
    "I can't find a page for '{token}': page not found or unreachable for this reference. Sorry."
)
UNEXPECTED_FAILURE_MESSAGE = "An error occurred while I was trying to look up the URL for '{token}'. Sorry."


class ReferenceExpander:
    """Turns ``(token, channel)`` pairs into documentation URLs and titles."""

    def __init__(
        self,
        channel_map: ChannelMap,
        fetcher: PageFetcherPort,
        title_extractor: TitleExtractor,
        fetch_config: FetchConfig,
    ) -> None:
        self._channel_map = channel_map
        self._fetcher = fetcher
        self._title_extractor = title_extractor
        self._fetch_config = fetch_config

    async def expand(self, token: str, channel_id: str) -> ExpansionResult:
        """Expand one reference token in the context of ``channel_id``."""

        LOGGER.debug("Expanding reference %s in %s", token, channel_id)
        base_url = self._channel_map.lookup(channel_id)
        if base_url is None:
            LOGGER.info("No channelmap entry for %s", channel_id)
            return ExpansionResult.failure(FailureKind.UNKNOWN_CHANNEL, UNKNOWN_CHANNEL_MESSAGE)
        LOGGER.debug("The base url for %s is %s", channel_id, base_url)

        reference = parse_reference(token)
        if reference is None:
            return ExpansionResult.failure(
                FailureKind.UNRECOGNIZED_REFERENCE,
                UNRECOGNIZED_REFERENCE_MESSAGE.format(token=token),
            )

        url = build_url(base_url, reference.category, reference.key)
        try:
            outcome = await asyncio.wait_for(
                self._fetcher.fetch(url, self._fetch_config.user_agent),
                timeout=self._fetch_config.timeout_seconds,
            )
            if isinstance(outcome, NetworkFailure):
                LOGGER.warning("Fetching %s failed: %s", url, outcome.reason)
                return ExpansionResult.failure(
                    FailureKind.NETWORK_FAILURE,
                    PAGE_NOT_FOUND_MESSAGE.format(token=token),
                )
            if not outcome.ok:
                LOGGER.warning("%s returned response code %s", url, outcome.status_code)
                return ExpansionResult.failure(
                    FailureKind.INVALID_REMOTE_PAGE,
                    PAGE_NOT_FOUND_MESSAGE.format(token=token),
                )
            title = self._title_extractor.extract(outcome.body, reference.category)
        except asyncio.TimeoutError:
            LOGGER.warning("Fetching %s timed out after %ss", url, self._fetch_config.timeout_seconds)
            return ExpansionResult.failure(
                FailureKind.NETWORK_FAILURE,
                PAGE_NOT_FOUND_MESSAGE.format(token=token),
            )
        except Exception as exc:
            LOGGER.exception("Error (%s) while fetching URL %s", type(exc).__name__, url)
            return ExpansionResult.failure(
                FailureKind.UNEXPECTED_FAILURE,
                UNEXPECTED_FAILURE_MESSAGE.format(token=token),
            )

        return ExpansionResult.success(url, title)
