from __future__ import annotations

import asyncio

from adapters.telegram_mapper import build_context, channel_id_from_message, sender_display_name


class DummyChat:
    def __init__(self, username: "str | None" = None) -> None:
        self.username = username


class DummySender:
    def __init__(self, username=None, first_name=None, last_name=None) -> None:
        self.username = username
        self.first_name = first_name
        self.last_name = last_name


class DummyMessage:
    def __init__(
        self,
        *,
        chat_id: int,
        message_id: int,
        text: "str | None",
        chat: "DummyChat | None" = None,
        sender: "DummySender | None" = None,
        is_private: bool = False,
    ) -> None:
        self.chat_id = chat_id
        self.id = message_id
        self.raw_text = text
        self.chat = chat
        self.is_private = is_private
        self._sender = sender

    async def get_sender(self):
        return self._sender


def test_channel_id_prefers_lowercased_username() -> None:
    message = DummyMessage(chat_id=-100123, message_id=1, text="hi", chat=DummyChat("PuppetDocs"))
    assert channel_id_from_message(message) == "@puppetdocs"


def test_channel_id_falls_back_to_chat_id() -> None:
    message = DummyMessage(chat_id=-100123, message_id=1, text="hi", chat=DummyChat(None))
    assert channel_id_from_message(message) == "-100123"
    assert ":" not in channel_id_from_message(message)


def test_sender_display_name_fallbacks() -> None:
    assert sender_display_name(DummySender(username="alice")) == "alice"
    assert sender_display_name(DummySender(first_name="Ada", last_name="Lovelace")) == "Ada Lovelace"
    assert sender_display_name(None) == "someone"


def test_build_context() -> None:
    message = DummyMessage(
        chat_id=-100123,
        message_id=10,
        text=None,
        chat=DummyChat("puppet"),
        sender=DummySender(username="bob"),
        is_private=False,
    )
    context = asyncio.run(build_context(message))

    assert context.channel_id == "@puppet"
    assert context.chat_id == -100123
    assert context.message_id == 10
    assert context.text == ""
    assert context.sender_name == "bob"
    assert context.is_private is False
