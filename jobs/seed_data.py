#!/usr/bin/env python3
import sys
import logging
import argparse
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

# Add project root to path
sys.path.insert(0, ".")

from core.config import get_settings
from core.logging import setup_json_logging
from core.seed import default_seed
from core.store import VideoStore

logger = logging.getLogger(__name__)


def seed_data_file(data_file: Path, force: bool = False, dry_run: bool = False) -> bool:
    """Write the seed dataset to ``data_file``.

    An existing file is left alone unless ``force`` is set.
    """
    trace_id = f"seed_data_{datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')}"
    state = default_seed()

    logger.info("Starting seed", extra={
        "trace_id": trace_id,
        "data_file": str(data_file),
        "force": force,
        "dry_run": dry_run
    })

    if data_file.exists() and not force:
        logger.warning("Data file already exists, use --force to overwrite", extra={
            "trace_id": trace_id,
            "data_file": str(data_file)
        })
        return False

    if dry_run:
        logger.info("Dry run mode - no file changes", extra={
            "trace_id": trace_id,
            "would_write_videos": len(state.videos),
            "would_write_creators": len(state.creators)
        })
        return True

    written = VideoStore(data_file).save(state)
    logger.info("Seed completed", extra={
        "trace_id": trace_id,
        "data_file": str(data_file),
        "written": written
    })
    return written


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Write the seed videos and creators to the data file")
    parser.add_argument("--data-file", type=Path, default=None, help="Data file path (default: DATA_FILE setting)")
    parser.add_argument("--force", action="store_true", help="Overwrite an existing data file")
    parser.add_argument("--dry-run", action="store_true", help="Don't write the data file")

    args = parser.parse_args(argv)

    setup_json_logging()

    data_file = args.data_file or get_settings().data_file
    return 0 if seed_data_file(data_file, args.force, args.dry_run) else 1

if __name__ == "__main__":
    sys.exit(main())
