from __future__ import annotations

import asyncio

from client import start_client


class DummyClient:
    def __init__(self, authorized: bool = True) -> None:
        self._authorized = authorized
        self.calls: list[tuple[str, dict]] = []

    async def connect(self) -> None:
        self.calls.append(("connect", {}))

    async def is_user_authorized(self) -> bool:
        return self._authorized

    async def start(self, **kwargs) -> None:
        self.calls.append(("start", kwargs))


def test_bot_token_login(monkeypatch) -> None:
    monkeypatch.setenv("BOT_TOKEN", "123:abc")
    client = DummyClient()

    asyncio.run(start_client(client))

    assert client.calls == [("start", {"bot_token": "123:abc"})]


def test_user_login_uses_phone_prompts(monkeypatch) -> None:
    monkeypatch.delenv("BOT_TOKEN", raising=False)
    monkeypatch.setenv("PHONE", "+100")
    monkeypatch.setenv("LOGIN_METHOD", "phone")
    client = DummyClient(authorized=False)

    asyncio.run(start_client(client))

    assert [name for name, _ in client.calls] == ["connect", "start"]
    kwargs = client.calls[1][1]
    assert kwargs["phone"]() == "+100"
    assert "bot_token" not in kwargs
