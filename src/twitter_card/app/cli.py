from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from twitter_card.app.container import build_container
from twitter_card.debug import dump_report
from twitter_card.domain.errors import TwitterCardError
from twitter_card.settings import load_settings

logger = logging.getLogger("twitter_card")


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Add Twitter card meta tags to the HTML pages of a site.")
    ap.add_argument("--config", default="settings.toml", help="Settings file (default: settings.toml)")
    ap.add_argument("--source", help="Source directory (overrides paths.source_dir)")
    ap.add_argument("--output", help="Output directory (overrides paths.output_dir)")
    ap.add_argument("--extensions", help="Comma-separated page extensions (overrides build.extensions)")
    ap.add_argument("--dump-report", metavar="DIR", help="Write a JSON build report to DIR")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings(args.config)
    if args.source or args.output:
        settings = replace(
            settings,
            paths=replace(
                settings.paths,
                source_dir=Path(args.source).resolve() if args.source else settings.paths.source_dir,
                output_dir=Path(args.output).resolve() if args.output else settings.paths.output_dir,
            ),
        )
    if args.extensions:
        exts = tuple(e.strip() for e in args.extensions.split(",") if e.strip())
        settings = replace(settings, build=replace(settings.build, extensions=exts))

    try:
        c = build_container(settings)
        files, ingest_report = c.ingestor.ingest([str(settings.paths.source_dir)])
        process_report = c.engine(files)
        written = c.writer.write(files)
        copied = c.writer.copy_assets(settings.paths.source_dir, exclude=files.keys())
    except TwitterCardError as e:
        logger.error("Build failed: %s", e)
        return 1

    if args.dump_report:
        path = dump_report(ingest_report, process_report, out_dir=args.dump_report)
        logger.info("Report written to %s", path)

    print(f"Twitter cards added: {len(process_report.processed)}")
    print(f"  scanned: {ingest_report.scanned}")
    print(f"  skipped: {len(process_report.skipped)}")
    print(f"  written: {written} -> {settings.paths.output_dir}")
    print(f"  copied:  {copied}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
