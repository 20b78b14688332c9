"""
Tool: compute_score — overall 0–100 resume score.
"""

from __future__ import annotations

from typing import Any

from resume_scanner.ats.resume_score import ResumeScore


def compute_score(bullet_report: dict[str, Any], formatting_report: dict[str, Any]) -> int:
    """
    Combine bullet and formatting reports into one score.

    Args:
        bullet_report: Output from analyze_bullets
        formatting_report: Output from check_formatting

    Returns:
        Integer score between 0 and 100
    """
    return ResumeScore().score(bullet_report, formatting_report)
