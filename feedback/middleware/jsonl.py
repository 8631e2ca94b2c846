"""Append-only JSONL log files shared by the HTTP middleware."""

import json
import logging
import time
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def append_entry(log_dir: Path, log_file: Path, entry: dict[str, Any]) -> bool:
    """Stamp and append one entry. A write failure is logged, never raised."""
    line = json.dumps({"timestamp": time.time(), **entry})
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        with open(log_file, "a") as f:
            f.write(line + "\n")
    except OSError:
        logger.warning("Could not append to %s", log_file)
        return False
    return True
