"""
Text Loader — reads resume / job description files as plain text.

Guard rails:
- the path must point to an existing file
- files above the upload limit (2 MB by default) are rejected
- bytes that are not valid UTF-8 are replaced, never fatal
"""

from __future__ import annotations

import logging
from pathlib import Path

from resume_scanner.services.settings import max_upload_bytes

logger = logging.getLogger(__name__)


def load_text(file_path: str | Path, max_bytes: int | None = None) -> str:
    """
    Read a text file for analysis.

    Args:
        file_path: Path to a .txt / .md (or any plain text) file
        max_bytes: Size limit; defaults to the configured upload limit

    Returns:
        File contents as a string

    Raises:
        FileNotFoundError: if the path is not a file
        ValueError: if the file is larger than the limit
    """
    path = Path(file_path).expanduser()
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")

    limit = max_upload_bytes() if max_bytes is None else max_bytes
    size = path.stat().st_size
    if size > limit:
        logger.warning("Rejected %s: %d bytes exceeds limit of %d", path.name, size, limit)
        raise ValueError(
            f"File too large ({size / (1024 * 1024):.1f} MB). "
            f"Maximum allowed size is {limit / (1024 * 1024):.1f} MB."
        )

    return path.read_bytes().decode("utf-8", errors="replace")
