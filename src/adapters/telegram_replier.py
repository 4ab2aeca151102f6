"""Telegram reply adapter.

Sends listener replies back into the chat the message came from, threaded
under the original message.
"""

from __future__ import annotations

from adapters.reply_formatting import format_reply
from core.models import ExpansionResult, MessageContext


class TelegramReplier:
    """Replier adapter that answers through a Telethon client."""

    def __init__(self, client) -> None:
        self._client = client

    async def reply(
        self,
        context: MessageContext,
        addressee: str,
        token: str,
        result: ExpansionResult,
    ) -> None:
        await self.reply_text(context, format_reply(addressee, token, result))

    async def reply_text(self, context: MessageContext, text: str) -> None:
        # Documentation pages make noisy previews; the title is already inline.
        await self._client.send_message(
            context.chat_id,
            text,
            reply_to=context.message_id,
            link_preview=False,
        )
