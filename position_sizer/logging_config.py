"""
Logging setup for the CLI and the Streamlit app.
Console output goes to stdout; an optional log file gets the same format, appended.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

from position_sizer.config import LOG_FORMAT


def setup_logging(level: str = "INFO", log_file: Optional[str] = None, fmt: str = LOG_FORMAT) -> None:
    level_value = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=level_value,
        format=fmt,
        stream=sys.stdout,
        force=True,
    )
    root = logging.getLogger()

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        try:
            fh = logging.FileHandler(path, mode="a", encoding="utf-8")
            fh.setLevel(level_value)
            fh.setFormatter(logging.Formatter(fmt))
            root.addHandler(fh)
        except OSError as e:
            root.warning("Could not open log file %s: %s", path, e)
