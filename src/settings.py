"""Static configuration for docsref.

All user-editable settings (channel map, fetch behavior, logging) live in a
single JSON file for quick edits without touching Python.
"""

import json
import os
from typing import Mapping, Optional

from dotenv import load_dotenv

from core.config import DEFAULT_TIMEOUT_SECONDS, DEFAULT_USER_AGENT

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
CONFIG_FILENAME = "config.json"


def resolve_config_path(environ: Mapping[str, str], cwd: str, project_root: Optional[str] = None) -> str:
    """Pick the config file: DOCSREF_CONFIG, then ./config.json, then the checkout's.

    An installed console script lives in site-packages, where PROJECT_ROOT
    no longer points at a checkout, so the working directory comes first.
    """

    explicit = environ.get("DOCSREF_CONFIG")
    if explicit:
        return os.path.abspath(os.path.join(cwd, explicit))
    local = os.path.join(cwd, CONFIG_FILENAME)
    if os.path.exists(local) or project_root is None:
        return local
    return os.path.join(project_root, CONFIG_FILENAME)


# DOCSREF_CONFIG may come from .env as well as the shell.
load_dotenv()
CONFIG_PATH = resolve_config_path(os.environ, os.getcwd(), PROJECT_ROOT)
# Relative paths in the config (such as the log file) are resolved from here.
CONFIG_DIR = os.path.dirname(CONFIG_PATH)


def _load_json_config() -> dict:
    """Load config.json with a flat, user-friendly schema."""

    if not os.path.exists(CONFIG_PATH):
        raise FileNotFoundError(f"Config file not found: {CONFIG_PATH}")

    with open(CONFIG_PATH, "r", encoding="utf-8") as handle:
        return json.load(handle)


_CONFIG = _load_json_config()

# Expose the raw config for modules that need structured access.
CONFIG = _CONFIG

# Channel map entries, each "<channel>:<base url without trailing slash>".
# Channels are "@username" for public chats or the numeric chat id otherwise.
CHANNELMAP = list(_CONFIG.get("channelmap", []))

# Outbound fetch identity and the timeout applied to every page lookup.
_fetch = _CONFIG.get("fetch", {})
USER_AGENT = _fetch.get("user_agent") or DEFAULT_USER_AGENT
FETCH_TIMEOUT_SECONDS = float(_fetch.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS))

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
