from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Dict


def _parse_env_file(path: Path) -> Dict[str, str]:
    """Minimal .env parser (no external dependency required)."""
    data: dict[str, str] = {}
    if not path.exists():
        return data
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        data[key.strip()] = value.strip().strip('"').strip("'")
    return data


@dataclass(frozen=True)
class NamechainSettings:
    depth: int
    model_path: str | None
    corpus_encoding: str
    threshold: float
    env_file: Path | None

    def resolved_model_path(self) -> Path | None:
        """Return the configured model file, or None to use the embedded chain."""
        if not self.model_path:
            return None
        return Path(self.model_path).expanduser()


def load_settings(env_path: str | Path = ".env") -> NamechainSettings:
    """Load namechain settings from .env (if present) + real environment."""
    env_file = Path(env_path)
    file_values = _parse_env_file(env_file)

    def read(key: str, default: str) -> str:
        return os.environ.get(key, file_values.get(key, default))

    depth_raw = read("NAMECHAIN_DEPTH", "3").strip()
    try:
        depth = int(depth_raw)
    except ValueError as exc:
        raise ValueError(f"NAMECHAIN_DEPTH must be an integer (got {depth_raw!r})") from exc
    if depth < 1:
        raise ValueError(f"NAMECHAIN_DEPTH must be >= 1 (got {depth})")
    model_path = read("NAMECHAIN_MODEL_PATH", "").strip() or None
    corpus_encoding = read("NAMECHAIN_CORPUS_ENCODING", "utf-8").strip() or "utf-8"
    threshold_raw = read("NAMECHAIN_THRESHOLD", "0.05").strip()
    try:
        threshold = float(threshold_raw)
    except ValueError as exc:
        raise ValueError(f"NAMECHAIN_THRESHOLD must be a number (got {threshold_raw!r})") from exc
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"NAMECHAIN_THRESHOLD must be within [0, 1] (got {threshold})")

    env_file_used = env_file if env_file.exists() else None
    return NamechainSettings(
        depth=depth,
        model_path=model_path,
        corpus_encoding=corpus_encoding,
        threshold=threshold,
        env_file=env_file_used,
    )
