from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence, TextIO

logger = logging.getLogger(__name__)

__all__ = ["collect_files", "iter_lines", "iter_stream"]


def collect_files(entries: Sequence[str | Path], recursive: bool) -> List[Path]:
    files: list[Path] = []
    for entry in entries:
        path = Path(entry).expanduser()
        if path.is_file():
            files.append(path)
            logger.debug("queued corpus file %s", path)
            continue
        if path.is_dir():
            pattern = "**/*.txt" if recursive else "*.txt"
            for candidate in sorted(path.glob(pattern)):
                if candidate.is_file():
                    files.append(candidate)
                    logger.debug("discovered corpus file %s", candidate)
            continue
        raise FileNotFoundError(f"No such file or directory: {path}")
    return files


def iter_stream(handle: TextIO) -> Iterator[str]:
    """Yield one token per non-blank line, without surrounding whitespace."""
    for raw_line in handle:
        line = raw_line.strip()
        if line:
            yield line


def iter_lines(paths: Iterable[Path], encoding: str = "utf-8") -> Iterator[str]:
    for path in paths:
        with path.open("r", encoding=encoding) as handle:
            yield from iter_stream(handle)
