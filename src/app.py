"""Application entry point for the docsref listener."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Optional

from art import tprint
from telethon import events

import settings
from adapters.html_selector import SoupSelector
from adapters.http_fetcher import HttpxPageFetcher
from adapters.telegram_mapper import build_context
from adapters.telegram_replier import TelegramReplier
from client import build_client, start_client
from core.channel_map import ChannelMap
from core.config import FetchConfig
from core.expander import ReferenceExpander
from core.listener import ReferenceListener
from core.titles import TitleExtractor
from log_setup import configure_logging

NAME = "DOCSREF"
FONT = "tarty-1"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _configure_logging() -> None:
    configure_logging(settings.LOGGING or {}, settings.CONFIG_DIR)


def _build_expander() -> tuple[ReferenceExpander, HttpxPageFetcher]:
    """Wire the core expander with the httpx and BeautifulSoup adapters."""

    channel_map = ChannelMap.from_entries(settings.CHANNELMAP)
    fetch_config = FetchConfig(
        user_agent=settings.USER_AGENT,
        timeout_seconds=settings.FETCH_TIMEOUT_SECONDS,
    )
    fetcher = HttpxPageFetcher(timeout_seconds=settings.FETCH_TIMEOUT_SECONDS)
    expander = ReferenceExpander(
        channel_map=channel_map,
        fetcher=fetcher,
        title_extractor=TitleExtractor(SoupSelector()),
        fetch_config=fetch_config,
    )
    logging.getLogger(__name__).info(
        "%s channels are mapped: %s", len(channel_map), ", ".join(channel_map.channels())
    )
    return expander, fetcher


def _run() -> None:
    _print_banner()
    _configure_logging()
    logger = logging.getLogger(__name__)

    logger.info("Starting docsref")

    expander, fetcher = _build_expander()

    client = build_client()
    client.loop.run_until_complete(start_client(client))

    me = client.loop.run_until_complete(client.get_me())
    bot_username = getattr(me, "username", None)
    listener = ReferenceListener(expander, TelegramReplier(client), bot_username=bot_username)

    # Single handler keeps Telethon integration minimal and defers all filtering
    # to the core listener for consistency and testability.
    @client.on(events.NewMessage(incoming=True))
    async def handler(event) -> None:
        try:
            context = await build_context(event.message)
            await listener.handle(context)
        except Exception:
            logger.exception("Error while processing message")

    logger.info("Client connected as %s. Listening for incoming messages...", bot_username or "user")
    try:
        client.run_until_disconnected()
    finally:
        client.loop.run_until_complete(fetcher.aclose())


def _lookup(channel_id: str, token: str) -> int:
    """Expand a single reference from the command line."""

    _configure_logging()

    async def _run_lookup():
        expander, fetcher = _build_expander()
        try:
            return await expander.expand(token, channel_id)
        finally:
            await fetcher.aclose()

    result = asyncio.run(_run_lookup())
    if not result.ok:
        print(result.error_message, file=sys.stderr)
        return 1
    print(result.url if result.title is None else f'{result.url} "{result.title}"')
    return 0


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="docsref")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("run", help="Start the chat listener")
    lookup_parser = subparsers.add_parser(
        "lookup",
        help="Expand one reference for a channel and print the URL.",
    )
    lookup_parser.add_argument("channel", help="Channel identifier as used in the channelmap")
    lookup_parser.add_argument("reference", help="Reference such as ref:type or guide:introduction")

    args = parser.parse_args(argv)
    if args.command == "lookup":
        raise SystemExit(_lookup(args.channel, args.reference))
    _run()


if __name__ == "__main__":
    main()
