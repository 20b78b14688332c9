"""
Tool: analyze_bullets — strong / weak bullet counts for a resume.
"""

from __future__ import annotations

from typing import Any

from resume_scanner.ats.bullet_analyzer import BulletAnalyzer


def analyze_bullets(resume_text: str) -> dict[str, Any]:
    """Return total, strong, weak and weak_examples for the resume's bullet lines."""
    return BulletAnalyzer().analyze(resume_text)
