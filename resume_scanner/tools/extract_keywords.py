"""
Tool: extract_keywords — categorized ATS keywords from a job description.
"""

from __future__ import annotations

from resume_scanner.ats.keyword_extractor import KeywordExtractor


def extract_keywords(text: str) -> dict[str, list[str]]:
    """
    Extract tools, skills and domain keywords from a job description or resume.

    Args:
        text: Raw text to scan

    Returns:
        dict with "tools", "skills" and "domain" lists (empty for empty text)
    """
    return KeywordExtractor().extract(text)
