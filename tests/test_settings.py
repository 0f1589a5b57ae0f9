from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from namechain.settings import load_settings

_KEYS = (
    "NAMECHAIN_DEPTH",
    "NAMECHAIN_MODEL_PATH",
    "NAMECHAIN_CORPUS_ENCODING",
    "NAMECHAIN_THRESHOLD",
)


class LoadSettingsTests(unittest.TestCase):
    def setUp(self) -> None:
        patcher = mock.patch.dict(os.environ)
        patcher.start()
        self.addCleanup(patcher.stop)
        for key in _KEYS:
            os.environ.pop(key, None)
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.env_path = Path(self._tmp.name) / ".env"

    def test_defaults_without_env_file(self) -> None:
        settings = load_settings(self.env_path)
        self.assertEqual(settings.depth, 3)
        self.assertIsNone(settings.model_path)
        self.assertIsNone(settings.resolved_model_path())
        self.assertEqual(settings.corpus_encoding, "utf-8")
        self.assertEqual(settings.threshold, 0.05)
        self.assertIsNone(settings.env_file)

    def test_env_file_values(self) -> None:
        self.env_path.write_text(
            "# model settings\n"
            "NAMECHAIN_DEPTH=4\n"
            "NAMECHAIN_MODEL_PATH='var/chain.txt'\n"
            "NAMECHAIN_THRESHOLD=0.2\n"
            "not a pair\n",
            encoding="utf-8",
        )
        settings = load_settings(self.env_path)
        self.assertEqual(settings.depth, 4)
        self.assertEqual(settings.model_path, "var/chain.txt")
        self.assertEqual(settings.resolved_model_path(), Path("var/chain.txt"))
        self.assertEqual(settings.threshold, 0.2)
        self.assertEqual(settings.env_file, self.env_path)

    def test_environment_overrides_env_file(self) -> None:
        self.env_path.write_text("NAMECHAIN_DEPTH=4\n", encoding="utf-8")
        os.environ["NAMECHAIN_DEPTH"] = "2"
        self.assertEqual(load_settings(self.env_path).depth, 2)

    def test_invalid_values(self) -> None:
        for key, value in (
            ("NAMECHAIN_DEPTH", "three"),
            ("NAMECHAIN_DEPTH", "0"),
            ("NAMECHAIN_THRESHOLD", "high"),
            ("NAMECHAIN_THRESHOLD", "1.5"),
        ):
            with self.subTest(key=key, value=value):
                with mock.patch.dict(os.environ, {key: value}):
                    with self.assertRaises(ValueError):
                        load_settings(self.env_path)


if __name__ == "__main__":
    unittest.main()
