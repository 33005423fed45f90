from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def _looks_binary(data: bytes) -> bool:
    """
    Heuristic: if there are NUL bytes, or too many control bytes, treat as binary.
    """
    if not data:
        return False
    if b"\x00" in data:
        return True

    sample = data[:4096]
    control = sum(1 for b in sample if b < 9 or (13 < b < 32))
    return (control / max(1, len(sample))) > 0.02  # Treating 2% control chars as suspicious


@dataclass(frozen=True, slots=True)
class TextLoader:
    """
    Loads a page source from disk.

    - Tries utf-8 first, falls back to latin-1 if needed.
    - Returns None for files larger than max_bytes or that look binary.
    """
    max_bytes: int = 5_000_000  # 5MB
    prefer_encoding: str = "utf-8"
    fallback_encoding: str = "latin-1"

    def load(self, path: Path) -> Optional[str]:
        if path.stat().st_size > self.max_bytes:
            logger.warning("Skipping %s: larger than %d bytes", path, self.max_bytes)
            return None

        data = path.read_bytes()
        if _looks_binary(data):
            logger.warning("Skipping %s: looks binary", path)
            return None

        try:
            return data.decode(self.prefer_encoding, errors="strict")
        except UnicodeDecodeError:
            # latin-1 maps every byte, so this cannot fail
            return data.decode(self.fallback_encoding, errors="replace")
