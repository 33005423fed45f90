from __future__ import annotations

from pathlib import Path
from typing import Collection, Mapping, Protocol

from twitter_card.domain.models import SourceFile


class Writer(Protocol):
    """
    Persists processed files, then copies the untouched ones.
    Both return the number of files written.
    """

    def write(self, files: Mapping[str, SourceFile]) -> int:
        ...

    def copy_assets(self, source_dir: Path, *, exclude: Collection[str]) -> int:
        ...
