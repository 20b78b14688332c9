"""
Keyword Extractor — frequency-ranked ATS keywords from a job description.

Tokens are filtered through the stopword list, counted, ranked by
frequency and sorted into three buckets using the curated lexicon:

- tools:  technologies and software ("sql", "jira", "snowflake")
- skills: product / practice skills ("roadmap", "agile", "analytics")
- domain: domain seeds, plus any uncategorized word that is long
          (5+ chars) and repeated (2+ times)

No NLP library needed — ranking is plain counting.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any

from resume_scanner.ats import lexicon
from resume_scanner.ats.tokenizer import tokenize

logger = logging.getLogger(__name__)


class KeywordExtractor:
    """Extracts categorized keywords from free text."""

    MIN_TOKEN_LENGTH = 3

    # Fallback rule for words outside the curated lists
    FALLBACK_MIN_LENGTH = 5
    FALLBACK_MIN_FREQUENCY = 2

    def __init__(self, min_length: int | None = None) -> None:
        self._min_length = self.MIN_TOKEN_LENGTH if min_length is None else min_length

    def extract(self, text: str) -> dict[str, list[str]]:
        """
        Extract keywords from a job description (or any text).

        Args:
            text: Raw text, pasted or loaded from a file

        Returns:
            dict with "tools", "skills" and "domain" lists, each ordered
            by descending frequency, ties in first-seen order
        """
        freq = self._frequencies(text)

        # Counter keeps insertion order and sorted() is stable,
        # so equal counts stay in first-seen order
        ranked = sorted(freq, key=lambda w: freq[w], reverse=True)

        buckets: dict[str, list[str]] = {name: [] for name in lexicon.BUCKETS}
        for word in ranked:
            bucket = self._bucket_for(word, freq[word])
            if bucket is not None:
                buckets[bucket].append(word)

        result = self._normalise(buckets)
        logger.debug(
            "Extracted %d tools, %d skills, %d domain keywords from %d distinct tokens",
            len(result["tools"]), len(result["skills"]), len(result["domain"]), len(freq),
        )
        return result

    def _frequencies(self, text: str) -> Counter:
        """Count tokens that survive the length and stopword filters."""
        freq: Counter = Counter()
        for word in tokenize(text):
            if len(word) < self._min_length:
                continue
            if lexicon.is_stopword(word):
                continue
            freq[word] += 1
        return freq

    def _bucket_for(self, word: str, count: int) -> str | None:
        """Pick the bucket for one ranked word, or None to drop it."""
        bucket = lexicon.classify(word)
        if bucket is not None:
            return bucket
        if count >= self.FALLBACK_MIN_FREQUENCY and len(word) >= self.FALLBACK_MIN_LENGTH:
            return "domain"
        return None

    def _normalise(self, data: dict[str, Any]) -> dict[str, list[str]]:
        """Ensure every bucket exists and holds unique words in order."""
        return {
            name: list(dict.fromkeys(data.get(name, [])))
            for name in lexicon.BUCKETS
        }
