from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence, Tuple

from twitter_card.adapters.ingestion.loaders.text_loader import TextLoader
from twitter_card.domain.errors import FrontmatterError, IngestionError
from twitter_card.domain.models import IngestReport, SourceFile
from twitter_card.utils.parsing import split_frontmatter

logger = logging.getLogger(__name__)


def _is_hidden(path: Path) -> bool:
    return any(part.startswith(".") for part in path.parts)


def _iter_files(inputs: Sequence[str], *, recursive: bool) -> list[tuple[Path, Path]]:
    """
    Returns (root, file) pairs; `root` is what the file path is made relative to.
    """
    files: list[tuple[Path, Path]] = []

    for inp in inputs:
        p = Path(inp).expanduser()

        # Case 1: direct file or directory
        if p.exists():
            if p.is_dir():
                root = p.resolve()
                it = root.rglob("*") if recursive else root.glob("*")
                files.extend((root, x) for x in it if x.is_file())
            elif p.is_file():
                f = p.resolve()
                files.append((f.parent, f))
            continue

        # Case 2: glob pattern (ONLY if relative)
        if p.is_absolute():
            raise IngestionError(f"Input not found: {p}")

        cwd = Path(".").resolve()
        for m in Path(".").glob(inp):
            m = m.resolve()
            if m.is_dir():
                it = m.rglob("*") if recursive else m.glob("*")
                files.extend((cwd, x) for x in it if x.is_file())
            elif m.is_file():
                files.append((cwd, m))

    # Stable, deterministic ordering
    unique = {f: root for root, f in files}
    return [(unique[f], f) for f in sorted(unique, key=lambda x: str(x))]


@dataclass(frozen=True, slots=True)
class FilesystemIngestor:
    """
    Loads site pages into SourceFiles keyed by their POSIX path relative to the input.

    Frontmatter becomes the file metadata; the rest of the file becomes its contents.
    """
    allowed_extensions: set[str] = field(default_factory=lambda: {".html"})
    recursive: bool = True
    skip_hidden: bool = True

    text_loader: TextLoader = field(default_factory=TextLoader)

    def ingest(self, inputs: Sequence[str]) -> Tuple[dict[str, SourceFile], IngestReport]:
        scanned = loaded = 0
        skipped_hidden = skipped_extension = skipped_unreadable = 0
        by_ext: dict[str, int] = {}

        files: dict[str, SourceFile] = {}

        for root, path in _iter_files(inputs, recursive=self.recursive):
            scanned += 1
            rel = path.relative_to(root)

            if self.skip_hidden and _is_hidden(rel):
                skipped_hidden += 1
                continue

            ext = path.suffix.lower()
            if self.allowed_extensions and ext not in self.allowed_extensions:
                skipped_extension += 1
                continue

            text = self._load(path)
            if text is None:
                skipped_unreadable += 1
                continue

            try:
                frontmatter, contents = split_frontmatter(text)
            except FrontmatterError as e:
                raise FrontmatterError(f"{path}: {e}") from e

            files[rel.as_posix()] = SourceFile(contents=contents, metadata=frontmatter)
            loaded += 1
            by_ext[ext] = by_ext.get(ext, 0) + 1

        report = IngestReport(
            scanned=scanned,
            loaded=loaded,
            skipped_hidden=skipped_hidden,
            skipped_extension=skipped_extension,
            skipped_unreadable=skipped_unreadable,
            by_extension=dict(by_ext),
        )
        return files, report

    def _load(self, path: Path) -> Optional[str]:
        try:
            return self.text_loader.load(path)
        except OSError as e:
            raise IngestionError(f"Cannot read {path}: {e}") from e
