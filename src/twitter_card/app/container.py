from __future__ import annotations

from dataclasses import dataclass

from twitter_card.adapters.dom.soup import SoupHtmlParser
from twitter_card.adapters.ingestion.filesystem import FilesystemIngestor
from twitter_card.adapters.output.filesystem_writer import FilesystemWriter
from twitter_card.pipeline import TwitterCard
from twitter_card.ports import Ingestor, Writer
from twitter_card.settings import Settings


@dataclass(frozen=True, slots=True)
class Container:
    """
    Lightweight dependency container.
    Holds the engine plus the adapters feeding and persisting it.
    """
    ingestor: Ingestor
    engine: TwitterCard
    writer: Writer


def build_container(settings: Settings) -> Container:
    ingestor = FilesystemIngestor(
        allowed_extensions={e.lower() for e in settings.build.extensions},
        skip_hidden=settings.build.skip_hidden,
    )
    engine = TwitterCard(settings.twitter, parser=SoupHtmlParser())
    writer = FilesystemWriter(output_dir=settings.paths.output_dir, skip_hidden=settings.build.skip_hidden)
    return Container(ingestor=ingestor, engine=engine, writer=writer)
