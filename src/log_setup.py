"""Logging setup for docsref.

Every page lookup goes through httpx and every chat event through Telethon;
both log at INFO on their own, which would drown the expansion log. Their
loggers are quietened by default and can be tuned per logger in config.json
under ``logging.levels``. Telegram credentials never reach a log line.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Mapping, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_PATH = "logs/docsref.log"

# Secrets docsref itself reads; masked even when redaction is not configured.
ALWAYS_REDACTED = ("API_HASH", "BOT_TOKEN")

DEFAULT_LOGGER_LEVELS = {
    "httpx": "WARNING",
    "httpcore": "WARNING",
    "telethon": "WARNING",
}


class RedactingFormatter(logging.Formatter):
    """Formatter that replaces secret values with ``***``."""

    def __init__(self, secrets: list[str], fmt: str = LOG_FORMAT, datefmt: Optional[str] = DATE_FORMAT) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        # Longest first so a secret containing another is masked whole.
        self._secrets = sorted({secret for secret in secrets if secret}, key=len, reverse=True)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for secret in self._secrets:
            message = message.replace(secret, "***")
        return message


def redaction_values(config: dict, environ: Mapping[str, str]) -> list[str]:
    """Values of the env variables whose contents must not be logged."""

    names = list(ALWAYS_REDACTED)
    redact_cfg = config.get("redact", {})
    if redact_cfg.get("enabled", False):
        names.extend(redact_cfg.get("patterns", []))
    return [environ[name] for name in names if environ.get(name)]


def _level(name: object, default: int = logging.INFO) -> int:
    value = logging.getLevelName(str(name).upper())
    return value if isinstance(value, int) else default


def logger_levels(config: dict) -> dict[str, int]:
    """Per-logger levels: quiet defaults for httpx/Telethon, then config overrides."""

    levels = dict(DEFAULT_LOGGER_LEVELS)
    levels.update(config.get("levels", {}))
    return {name: _level(level, logging.WARNING) for name, level in levels.items()}


def build_handlers(config: dict, base_dir: str, formatter: logging.Formatter) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    if config.get("console", True):
        handlers.append(logging.StreamHandler())

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", DEFAULT_LOG_PATH)
        if not os.path.isabs(path):
            path = os.path.join(base_dir, path)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                path,
                maxBytes=int(file_cfg.get("max_bytes", 5 * 1024 * 1024)),
                backupCount=int(file_cfg.get("backup_count", 5)),
                encoding="utf-8",
            )
        )

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure_logging(config: dict, base_dir: str, environ: Mapping[str, str] = os.environ) -> None:
    """Install handlers from the ``logging`` section of config.json."""

    if not config.get("enabled", False):
        return

    formatter = RedactingFormatter(redaction_values(config, environ))
    handlers = build_handlers(config, base_dir, formatter)
    if not handlers:
        return

    logging.basicConfig(level=_level(config.get("level", "INFO")), handlers=handlers)
    for name, level in logger_levels(config).items():
        logging.getLogger(name).setLevel(level)
