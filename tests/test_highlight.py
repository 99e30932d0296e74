from __future__ import annotations

import unittest

from filic.highlight import colorize_source, sanitize_terminal_text


class HighlightTests(unittest.TestCase):
    def test_sanitize_escapes_control_bytes_but_keeps_whitespace(self) -> None:
        self.assertEqual(sanitize_terminal_text("a\x1b[2Jb\tc\n"), "a\\x1b[2Jb\tc\n")
        self.assertEqual(sanitize_terminal_text("plain"), "plain")

    def test_colorize_source_emits_ansi_for_known_lexer(self) -> None:
        rendered = colorize_source("def f():\n    return 1\n", "mod.py")

        self.assertIn("\x1b[", rendered)
        self.assertIn("return", rendered)

    def test_colorize_source_tolerates_unknown_style_and_extension(self) -> None:
        rendered = colorize_source("hello\n", "notes.unknown-ext", style="no-such-style")

        self.assertIn("hello", rendered)


if __name__ == "__main__":
    unittest.main()
