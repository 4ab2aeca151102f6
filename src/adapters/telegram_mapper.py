"""Telegram-to-core message mapping adapter.

This keeps Telethon-specific details out of the core listener.
"""

from __future__ import annotations

from typing import Any

from telethon.tl.custom import Message

from core.models import MessageContext


def channel_id_from_message(message: Message) -> str:
    """Normalize a channel identifier using a single rule enforced across the app.

    Public chats use ``@username``; everything else falls back to the numeric
    chat id. Neither form contains a colon, which keeps channelmap entries
    (``channel:baseUrl``) unambiguous.
    """

    chat = getattr(message, "chat", None)
    username = getattr(chat, "username", None)

    if isinstance(username, str) and username:
        return f"@{username.lower()}"

    return str(message.chat_id)


def sender_display_name(sender: Any) -> str:
    username = getattr(sender, "username", None)
    if username:
        return str(username)
    first = getattr(sender, "first_name", None)
    last = getattr(sender, "last_name", None)
    if first or last:
        return " ".join(part for part in [first, last] if part)
    title = getattr(sender, "title", None)
    if title:
        return str(title)
    return "someone"


async def build_context(message: Message) -> MessageContext:
    """Build a core MessageContext from a Telethon Message."""

    sender = await message.get_sender()
    return MessageContext(
        channel_id=channel_id_from_message(message),
        chat_id=message.chat_id,
        message_id=message.id,
        text=message.raw_text or "",
        sender_name=sender_display_name(sender),
        is_private=bool(getattr(message, "is_private", False)),
    )
