# -*- coding: utf-8 -*-
import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILENAME = "build_dictionaries.log"


def setup_logging(verbose: bool = False, log_dir: Optional[Path] = None) -> None:
    """Log to stdout and, when log_dir is given, to a file inside it."""
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_dir / LOG_FILENAME, encoding="utf-8"))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
    # urllib3 logs every request at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def is_missing(value) -> bool:
    # Airtable omits empty cells, a cleared text cell can still come back as ""
    return value is None or value == ""
