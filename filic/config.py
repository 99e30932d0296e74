"""Persistent JSON config helpers for the command line.

Stores hidden-entry visibility, the highlight style, and the text encoding.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import codecs
import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "filic"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_STYLE = "monokai"
DEFAULT_ENCODING = "utf-8"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem and serialization errors are ignored; preferences are never
    worth failing a command over.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _load_name(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _save_name(key: str, value: str) -> None:
    stripped = str(value).strip()
    if not stripped:
        return
    config = load_config()
    config[key] = stripped
    save_config(config)


def load_show_hidden() -> bool:
    """Return persisted hidden-entry visibility.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    value = load_config().get("show_hidden")
    return bool(value) if isinstance(value, bool) else False


def save_show_hidden(show_hidden: bool) -> None:
    config = load_config()
    config["show_hidden"] = bool(show_hidden)
    save_config(config)


def load_style() -> str:
    """Load the Pygments style name used by ``cat``."""
    return _load_name("style") or DEFAULT_STYLE


def save_style(style: str) -> None:
    _save_name("style", style)


def load_encoding() -> str:
    """Load the text encoding, ignoring names Python does not know."""
    name = _load_name("encoding")
    if name is None:
        return DEFAULT_ENCODING
    try:
        codecs.lookup(name)
    except LookupError:
        return DEFAULT_ENCODING
    return name


def save_encoding(encoding: str) -> None:
    _save_name("encoding", encoding)


__all__ = [
    "CONFIG_PATH",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_STYLE",
    "DEFAULT_ENCODING",
    "load_config",
    "save_config",
    "load_show_hidden",
    "save_show_hidden",
    "load_style",
    "save_style",
    "load_encoding",
    "save_encoding",
]
