"""
Utility functions for the database export tool.
"""

import logging
import sys
from pathlib import Path
from typing import Any

SIZE_UNITS = ['B', 'KB', 'MB', 'GB', 'TB', 'PB']


def setup_logging(log_settings: dict[str, Any]) -> None:
    """Setup logging configuration."""
    log_level = getattr(logging, log_settings.get('level', 'INFO').upper())
    log_file = log_settings.get('file')

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def bytes_to_size_string(size: int, decimals: int = 1) -> str:
    """Format a byte count as a human readable string, e.g. '1.5 KB'."""
    value = float(max(size, 0))
    unit = 0
    while value >= 1024 and unit < len(SIZE_UNITS) - 1:
        value /= 1024
        unit += 1

    if unit == 0:
        return f"{int(value)} {SIZE_UNITS[0]}"
    return f"{value:.{decimals}f} {SIZE_UNITS[unit]}"
