from __future__ import annotations

from typing import Protocol, Sequence

from twitter_card.domain.models import IngestReport, SourceFile


class Ingestor(Protocol):
    """
    Converts raw inputs (directories, files, globs) into an ordered path -> SourceFile mapping.
    """

    def ingest(self, inputs: Sequence[str]) -> tuple[dict[str, SourceFile], IngestReport]:
        ...
