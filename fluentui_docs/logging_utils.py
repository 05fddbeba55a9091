"""Logging setup for the server and the stdio transport."""

import logging
import sys
from pathlib import Path

from .config import settings


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    """Configure root logging once.

    Logs go to stderr so the stdio MCP transport keeps stdout for protocol
    messages. A file handler is added when ``log_file`` (or
    ``FLUENTUI_LOG_FILE``) is set.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    level_name = (level or settings.log_level).upper()
    root_logger.setLevel(getattr(logging, level_name, logging.INFO))

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    path = log_file or settings.log_file
    if path:
        log_path = Path(path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
