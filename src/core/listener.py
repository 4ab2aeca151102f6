"""Chat listener that watches messages for documentation references.

This module is integration-agnostic. It only relies on the expander and a
replier port, so any chat frontend can feed it MessageContext objects.
"""

from __future__ import annotations

import asyncio
import logging
import re
from typing import Optional

from core.expander import ReferenceExpander
from core.models import MessageContext
from core.ports import ReplierPort
from core.references import find_reference_tokens, parse_reference

LOGGER = logging.getLogger(__name__)

INFO_COMMAND = "docsinfo"
HELP_COMMAND = "docshelp"

HELP_TEXT = (
    "docsref: Convert link requests into documentation URLs. "
    "I will watch the channel for likely references. "
    "I can convert common references into URLs when I see them "
    "in the channel if they are prefixed with 'ref' or 'guides'. "
    "Hence you can query ref:type to get the Type Reference and "
    "guide:introduction to get the Introduction. "
    f"You can also ask directly with /{INFO_COMMAND} <reference>."
)
PRIVATE_CHAT_MESSAGE = f"I can't do {INFO_COMMAND} in private yet"
USAGE_MESSAGE = f"Usage: /{INFO_COMMAND} <reference>, e.g. /{INFO_COMMAND} ref:type"

_COMMAND_RE = re.compile(r"^/(?P<name>\w+)(?:@(?P<bot>\w+))?(?:\s+(?P<args>.*))?$", re.DOTALL)
# "alice: see ref:type" or "alice, ref:type" addresses alice. The colon must be
# followed by whitespace so a leading "ref:type" is not taken for a nickname.
_ADDRESSEE_RE = re.compile(r"^(\S+?)[:,]\s")


def resolve_addressee(text: str, sender_name: str) -> str:
    """Return who a passive reply should be addressed to."""

    match = _ADDRESSEE_RE.match(text)
    # "ref:file, that's the one" starts with a reference, not a nickname.
    if match and parse_reference(match.group(1)) is None:
        return match.group(1)
    return sender_name


class ReferenceListener:
    """Orchestrates token discovery, expansion and replies for one message."""

    def __init__(
        self,
        expander: ReferenceExpander,
        replier: ReplierPort,
        bot_username: Optional[str] = None,
    ) -> None:
        self._expander = expander
        self._replier = replier
        self._bot_username = bot_username.lower().lstrip("@") if bot_username else None

    async def handle(self, context: MessageContext) -> None:
        """Process one incoming chat message."""

        text = context.text.strip()
        if not text:
            return

        command = _COMMAND_RE.match(text)
        if command:
            await self._handle_command(context, command)
            return

        # We're a conversation watcher; messages aimed at us are not chatter.
        if self._is_addressed_to_bot(text):
            return
        # Private chats only get answers through the explicit command.
        if context.is_private:
            return

        tokens = find_reference_tokens(text)
        if not tokens:
            return

        # Each token is expanded on its own; one failure never hides the others.
        results = await asyncio.gather(
            *(self._expander.expand(token, context.channel_id) for token in tokens)
        )
        addressee = resolve_addressee(text, context.sender_name)
        for token, result in zip(tokens, results):
            if not result.ok:
                LOGGER.debug("Skipping %s in %s: %s", token, context.channel_id, result.error_kind)
                continue
            await self._replier.reply(context, addressee, token, result)

    async def _handle_command(self, context: MessageContext, command: re.Match) -> None:
        target_bot = command.group("bot")
        if target_bot and self._bot_username and target_bot.lower() != self._bot_username:
            return

        name = command.group("name").lower()
        if name == HELP_COMMAND:
            await self._replier.reply_text(context, HELP_TEXT)
            return
        if name != INFO_COMMAND:
            return

        LOGGER.debug("Handling %s request from %s", INFO_COMMAND, context.sender_name)
        if context.is_private:
            await self._replier.reply_text(context, PRIVATE_CHAT_MESSAGE)
            return

        args = (command.group("args") or "").split()
        if not args:
            await self._replier.reply_text(context, USAGE_MESSAGE)
            return

        token = args[0]
        result = await self._expander.expand(token, context.channel_id)
        await self._replier.reply(context, context.sender_name, token, result)

    def _is_addressed_to_bot(self, text: str) -> bool:
        if not self._bot_username:
            return False
        first_word = text.split(maxsplit=1)[0].lower().rstrip(":,")
        return first_word.lstrip("@") == self._bot_username
