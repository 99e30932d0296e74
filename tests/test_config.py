from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from filic import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_falls_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("filic.config.CONFIG_PATH", Path(tmp) / "nested" / "config.json"):
                self.assertEqual(config.load_config(), {})
                self.assertFalse(config.load_show_hidden())
                self.assertEqual(config.load_style(), config.DEFAULT_STYLE)
                self.assertEqual(config.load_encoding(), config.DEFAULT_ENCODING)

    def test_saved_preferences_round_trip_under_distinct_keys(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("filic.config.CONFIG_PATH", config_path):
                config.save_show_hidden(True)
                config.save_style(" friendly ")
                config.save_encoding("latin-1")

                saved = config.load_config()
                self.assertEqual(saved, {"show_hidden": True, "style": "friendly", "encoding": "latin-1"})
                self.assertTrue(config.load_show_hidden())
                self.assertEqual(config.load_style(), "friendly")
                self.assertEqual(config.load_encoding(), "latin-1")

    def test_malformed_values_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text('{"show_hidden": "yes", "style": 3, "encoding": "no-such-codec"}', encoding="utf-8")
            with mock.patch("filic.config.CONFIG_PATH", config_path):
                self.assertFalse(config.load_show_hidden())
                self.assertEqual(config.load_style(), config.DEFAULT_STYLE)
                self.assertEqual(config.load_encoding(), config.DEFAULT_ENCODING)

            config_path.write_text("[1, 2]", encoding="utf-8")
            with mock.patch("filic.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
