from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path

from namechain.corpus import collect_files, iter_lines, iter_stream


class CorpusTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name)
        (self.root / "sub").mkdir()
        (self.root / "a.txt").write_text("userName\n\n  email  \n", encoding="utf-8")
        (self.root / "notes.md").write_text("ignored\n", encoding="utf-8")
        (self.root / "sub" / "c.txt").write_text("caf\xe9\n", encoding="utf-8")

    def test_directory_collects_txt_files(self) -> None:
        self.assertEqual(collect_files([self.root], recursive=False), [self.root / "a.txt"])

    def test_recursive_collection(self) -> None:
        files = collect_files([str(self.root)], recursive=True)
        self.assertEqual(files, [self.root / "a.txt", self.root / "sub" / "c.txt"])

    def test_explicit_file_is_kept(self) -> None:
        path = self.root / "notes.md"
        self.assertEqual(collect_files([path], recursive=False), [path])

    def test_missing_entry(self) -> None:
        with self.assertRaises(FileNotFoundError):
            collect_files([self.root / "missing"], recursive=False)

    def test_iter_lines_strips_and_skips_blank_lines(self) -> None:
        files = collect_files([self.root], recursive=True)
        self.assertEqual(list(iter_lines(files)), ["userName", "email", "caf\xe9"])

    def test_iter_stream(self) -> None:
        self.assertEqual(list(iter_stream(io.StringIO("a\n\n b\n"))), ["a", "b"])


if __name__ == "__main__":
    unittest.main()
