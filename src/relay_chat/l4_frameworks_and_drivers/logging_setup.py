"""File-based debug logging setup."""

from __future__ import annotations

import logging
from pathlib import Path


def setup_file_logging(log_dir: Path) -> Path:
    """Configure file-based debug logging into *log_dir*; the terminal belongs to the TUI."""
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / 'rc_debug.log'
    root = logging.getLogger('rc')
    root.setLevel(logging.DEBUG)
    for existing in root.handlers:
        if isinstance(existing, logging.FileHandler) and Path(existing.baseFilename) == log_path.resolve():
            return log_path
    handler = logging.FileHandler(log_path, encoding='utf-8')
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s'))
    root.addHandler(handler)
    logging.getLogger('rc.app').info('Debug logging started → %s', log_path)
    return log_path
