"""
Settings — environment-driven configuration.

Values come from the process environment, with a local .env file
loaded first:

- RESUME_PATH         default resume file for CLI commands
- MAX_UPLOAD_SIZE_MB  largest text file the loader accepts (default 2)
- LOG_LEVEL           logging level for the CLI (default WARNING)
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_MAX_UPLOAD_SIZE_MB = 2
DEFAULT_LOG_LEVEL = "WARNING"


def resume_path() -> str | None:
    """Default resume path, or None when RESUME_PATH is unset or blank."""
    return os.getenv("RESUME_PATH") or None


def max_upload_bytes() -> int:
    """Upload size limit in bytes."""
    raw = os.getenv("MAX_UPLOAD_SIZE_MB", str(DEFAULT_MAX_UPLOAD_SIZE_MB))
    try:
        size_mb = int(raw)
    except ValueError:
        raise ValueError(
            f"MAX_UPLOAD_SIZE_MB must be a whole number of megabytes, got {raw!r}. "
            "Fix it in your .env file."
        ) from None
    if size_mb <= 0:
        raise ValueError(f"MAX_UPLOAD_SIZE_MB must be positive, got {size_mb}.")
    return size_mb * 1024 * 1024


def log_level() -> str:
    return os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
