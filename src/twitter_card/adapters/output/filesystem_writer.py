from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Collection, Mapping

from twitter_card.domain.models import SourceFile

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FilesystemWriter:
    """
    Writes each file's contents to output_dir/<path>, creating directories as needed.

    copy_assets mirrors everything else under the source directory (stylesheets,
    images, pages that were not loaded) so the output is a complete site.
    """
    output_dir: Path
    encoding: str = "utf-8"
    skip_hidden: bool = True

    def write(self, files: Mapping[str, SourceFile]) -> int:
        for rel, source in files.items():
            target = self.output_dir / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(source.contents, encoding=self.encoding)
            logger.debug("wrote %s", target)
        return len(files)

    def copy_assets(self, source_dir: Path, *, exclude: Collection[str]) -> int:
        copied = 0
        for path in sorted(p for p in source_dir.rglob("*") if p.is_file()):
            rel = path.relative_to(source_dir)
            if rel.as_posix() in exclude:
                continue
            if self.skip_hidden and any(part.startswith(".") for part in rel.parts):
                continue
            target = self.output_dir / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(path, target)
            logger.debug("copied %s", target)
            copied += 1
        return copied
