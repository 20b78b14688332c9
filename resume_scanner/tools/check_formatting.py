"""
Tool: check_formatting — ATS formatting issues and word count.
"""

from __future__ import annotations

from typing import Any

from resume_scanner.ats.formatter_check import FormatterCheck


def check_formatting(resume_text: str) -> dict[str, Any]:
    """Return the list of formatting issues and the resume's word count."""
    return FormatterCheck().check(resume_text)
