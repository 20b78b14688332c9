"""
Tool: match_keywords — keyword coverage of a resume.
"""

from __future__ import annotations

from typing import Any

from resume_scanner.ats.keyword_matcher import KeywordMatcher


def match_keywords(keywords: dict[str, list[str]], target_text: str) -> dict[str, Any]:
    """
    Check which extracted keywords appear in the target text.

    Args:
        keywords: Output from extract_keywords
        target_text: Resume text to search

    Returns:
        dict with matched / missing keyword lists and a 0–100 score
    """
    return KeywordMatcher().match(keywords, target_text)
