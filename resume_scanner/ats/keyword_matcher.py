"""
Keyword Matcher — coverage of extracted JD keywords in a resume.

Pure Python: keywords are compared against the resume's token set,
so a keyword only matches as a whole word ("sql" does not match
"mysql").

Score: 0–100, the share of keywords found.
"""

from __future__ import annotations

import logging
from typing import Any

from resume_scanner.ats import lexicon
from resume_scanner.ats.rounding import round_half_up
from resume_scanner.ats.tokenizer import word_set

logger = logging.getLogger(__name__)


class KeywordMatcher:
    """Compares a keyword result against target text."""

    MAX_SCORE = 100

    def match(self, keywords: dict[str, Any], target_text: str) -> dict[str, Any]:
        """
        Split keywords into matched and missing against the target text.

        Args:
            keywords: Output from KeywordExtractor.extract()
            target_text: Text to search, usually the resume

        Returns:
            dict with "matched" and "missing" lists (in keyword order:
            tools, then skills, then domain) and an integer "score"
        """
        target_words = word_set(target_text)

        matched: list[str] = []
        missing: list[str] = []
        for keyword in self._flatten(keywords):
            if keyword in target_words:
                matched.append(keyword)
            else:
                missing.append(keyword)

        total = len(matched) + len(missing)
        score = round_half_up(len(matched) / total * self.MAX_SCORE) if total else 0

        logger.debug("Matched %d of %d keywords (score %d)", len(matched), total, score)
        return {
            "matched": matched,
            "missing": missing,
            "score": score,
        }

    def _flatten(self, keywords: dict[str, Any]) -> list[str]:
        """All bucket words in bucket order, first occurrence wins."""
        seen: dict[str, None] = {}
        for bucket in lexicon.BUCKETS:
            for word in keywords.get(bucket) or []:
                seen.setdefault(word.lower(), None)
        return list(seen)
