import json
from dataclasses import asdict
from datetime import datetime
from pathlib import Path

from twitter_card.domain.models import IngestReport, ProcessReport


def dump_report(
    ingest: IngestReport,
    process: ProcessReport,
    out_dir: str = "logs/builds",
) -> str:
    """
    Persist the reports of one build for later inspection.

    Args:
        ingest: What the ingestor scanned, loaded and skipped.
        process: Which files got card tags and which were left alone.
        out_dir: Directory to write the JSON file to.

    Returns:
        Path of the written report file.
    """
    Path(out_dir).mkdir(parents=True, exist_ok=True)
    time_string = datetime.now().strftime("%Y%m%d_%H%M%S")
    path = Path(out_dir) / f"{time_string}.json"

    payload = {
        "ingest": asdict(ingest),
        "process": asdict(process),
        "timestamp": time_string,
    }

    path.write_text(
        json.dumps(payload, indent=2, ensure_ascii=False),
        encoding="utf-8",
    )

    return str(path)
