"""Telegram client factory and login for docsref.

docsref answers in group chats, so it normally runs as a bot (BOT_TOKEN).
Without a token it logs in as a user account, either by scanning a QR code
(LOGIN_METHOD=qr) or through Telethon's phone/code prompts.
"""

from __future__ import annotations

import logging
import os
from getpass import getpass

import qrcode
from dotenv import load_dotenv
from telethon import TelegramClient, errors

LOGGER = logging.getLogger(__name__)

QR_LOGIN_TIMEOUT_SECONDS = 120


def build_client() -> TelegramClient:
    """Create a Telethon client from API_ID/API_HASH/SESSION_NAME."""

    load_dotenv()

    api_id = os.getenv("API_ID")
    api_hash = os.getenv("API_HASH")
    session_name = os.getenv("SESSION_NAME", "docsref")

    # Telethon needs app credentials even for bot logins.
    if not api_id or not api_hash:
        raise RuntimeError("Missing API_ID or API_HASH in environment")

    LOGGER.info("Initializing Telegram client (session %s)", session_name)
    return TelegramClient(session_name, int(api_id), api_hash)


def _phone() -> str:
    return os.getenv("PHONE") or input("Phone number (international format): ").strip()


def _password() -> str:
    return os.getenv("2FA") or getpass("2FA password: ")


async def _login_with_qr(client: TelegramClient) -> None:
    qr_login = await client.qr_login()
    qr = qrcode.QRCode(border=1)
    qr.add_data(qr_login.url)
    qr.make(fit=True)
    qr.print_ascii(invert=True)
    try:
        await qr_login.wait(timeout=QR_LOGIN_TIMEOUT_SECONDS)
    except errors.SessionPasswordNeededError:
        await client.sign_in(password=_password())


async def start_client(client: TelegramClient) -> None:
    """Connect and authorize as a bot when BOT_TOKEN is set, else as a user."""

    bot_token = os.getenv("BOT_TOKEN")
    if bot_token:
        LOGGER.info("Logging in with a bot token")
        await client.start(bot_token=bot_token)
        return

    await client.connect()
    if not await client.is_user_authorized():
        if (os.getenv("LOGIN_METHOD") or "").strip().lower() == "qr":
            await _login_with_qr(client)
    # Already authorized sessions return immediately; otherwise Telethon
    # prompts for the phone, login code and 2FA password.
    await client.start(phone=_phone, password=_password)
