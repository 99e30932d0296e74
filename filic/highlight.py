"""Terminal-safe text output with Pygments syntax highlighting."""

from __future__ import annotations

import re

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

FALLBACK_STYLE = "monokai"

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def _normalize_style(style: str) -> str:
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return FALLBACK_STYLE
    return style


def colorize_source(source: str, name: str, style: str = FALLBACK_STYLE) -> str:
    """Highlight ``source`` for a terminal, picking the lexer from file ``name``."""
    try:
        lexer = get_lexer_for_filename(name, source)
    except ClassNotFound:
        lexer = TextLexer()
    formatter = TerminalFormatter(style=_normalize_style(style))
    return highlight(sanitize_terminal_text(source), lexer, formatter)


__all__ = [
    "FALLBACK_STYLE",
    "sanitize_terminal_text",
    "colorize_source",
]
