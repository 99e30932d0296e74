from __future__ import annotations

import contextlib
import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from filic.cli import EXIT_ERROR, EXIT_OK, EXIT_TYPE_MISMATCH, main


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        patcher = mock.patch("filic.config.CONFIG_PATH", self.root / "config" / "config.json")
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def run_cli(self, *argv: str) -> tuple[int, str, str]:
        out = io.StringIO()
        err = io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_mkdir_touch_write_and_cat_walkthrough(self) -> None:
        target = self.root / "work" / "notes" / "a.txt"

        self.assertEqual(self.run_cli("mkdir", str(self.root / "work"))[0], EXIT_OK)
        self.assertEqual(self.run_cli("touch", str(target))[0], EXIT_OK)
        self.assertEqual(target.read_bytes(), b"")
        self.assertEqual(self.run_cli("write", str(target), "A")[0], EXIT_OK)
        self.assertEqual(self.run_cli("write", str(target), "B", "--append")[0], EXIT_OK)

        code, out, _err = self.run_cli("cat", str(target))

        self.assertEqual(code, EXIT_OK)
        self.assertEqual(out, "AB")

    def test_append_to_missing_file_fails(self) -> None:
        code, _out, err = self.run_cli("write", str(self.root / "missing.txt"), "x", "--append")

        self.assertEqual(code, EXIT_ERROR)
        self.assertTrue(err.startswith("filic: "))
        self.assertFalse((self.root / "missing.txt").exists())

    def test_cat_on_directory_reports_type_mismatch(self) -> None:
        (self.root / "sub").mkdir()

        code, _out, err = self.run_cli("cat", str(self.root / "sub"))

        self.assertEqual(code, EXIT_TYPE_MISMATCH)
        self.assertIn("exists but is a directory", err)

    def test_type_reports_live_state(self) -> None:
        (self.root / "a.txt").write_text("x", encoding="utf-8")

        self.assertEqual(self.run_cli("type", str(self.root))[1], "directory\n")
        self.assertEqual(self.run_cli("type", str(self.root / "a.txt"))[1], "file\n")
        self.assertEqual(self.run_cli("type", str(self.root / "nope"))[1], "missing\n")

    def test_ls_filters_by_kind_and_hides_dotfiles(self) -> None:
        (self.root / "dir").mkdir()
        (self.root / "a.txt").write_text("", encoding="utf-8")
        (self.root / ".secret").write_text("", encoding="utf-8")

        _code, out, _err = self.run_cli("ls", str(self.root))
        self.assertEqual(sorted(out.split()), ["a.txt", "dir"])

        _code, out, _err = self.run_cli("ls", str(self.root), "--all")
        self.assertIn(".secret", out.split())

        _code, out, _err = self.run_cli("ls", str(self.root), "--dirs")
        self.assertEqual(sorted(out.split()), ["dir"])

        _code, out, _err = self.run_cli("ls", str(self.root), "--files")
        self.assertEqual(out.split(), ["a.txt"])

    def test_ls_missing_directory_fails(self) -> None:
        code, _out, err = self.run_cli("ls", str(self.root / "missing"))

        self.assertEqual(code, EXIT_ERROR)
        self.assertIn("missing", err)

    def test_tree_prints_rendered_tree(self) -> None:
        (self.root / "pkg").mkdir()
        (self.root / "pkg" / "mod.py").write_text("", encoding="utf-8")

        code, out, _err = self.run_cli("tree", str(self.root / "pkg"))

        self.assertEqual(code, EXIT_OK)
        self.assertEqual(out.splitlines(), [str(self.root / "pkg") + os.sep, "└─ mod.py"])

    def test_tree_on_file_is_type_mismatch(self) -> None:
        (self.root / "a.txt").write_text("", encoding="utf-8")

        code, _out, err = self.run_cli("tree", str(self.root / "a.txt"))

        self.assertEqual(code, EXIT_TYPE_MISMATCH)
        self.assertIn("exists but is not a directory", err)

    def test_config_updates_and_prints_preferences(self) -> None:
        code, out, _err = self.run_cli("config")
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(out.splitlines(), ["show_hidden = off", "style = monokai", "encoding = utf-8"])

        code, out, _err = self.run_cli("config", "--show-hidden", "on", "--style", "friendly", "--encoding", "latin-1")
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(out.splitlines(), ["show_hidden = on", "style = friendly", "encoding = latin-1"])

        (self.root / ".secret").write_text("", encoding="utf-8")
        _code, out, _err = self.run_cli("ls", str(self.root))
        self.assertIn(".secret", out.split())

    def test_config_rejects_bad_switch_value(self) -> None:
        with self.assertRaises(SystemExit):
            self.run_cli("config", "--show-hidden", "maybe")


if __name__ == "__main__":
    unittest.main()
