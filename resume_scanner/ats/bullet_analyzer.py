"""
Bullet Analyzer — action + impact check for resume bullet points.

A bullet is any trimmed line starting with "-", "•" or "*". It counts
as strong when it carries a metric (an ASCII digit) and either opens with a
strong action verb or at least avoids a duty-style opener such as
"Responsible for". Everything else is weak.
"""

from __future__ import annotations

import re
from typing import Any

from resume_scanner.ats.lexicon import STRONG_VERBS, WEAK_OPENERS

BULLET_MARKERS = ("-", "•", "*")

_LINE_SPLIT = re.compile(r"\r?\n")
_MARKER_PREFIX = re.compile(r"^[-•*]\s*")
_DIGIT = re.compile(r"[0-9]")


class BulletAnalyzer:
    """Counts strong and weak bullets in resume text."""

    MAX_WEAK_EXAMPLES = 3

    def analyze(self, resume_text: str) -> dict[str, Any]:
        """
        Classify every bullet line in the resume.

        Returns:
            dict with total, strong and weak counts plus up to three
            weak bullet texts (marker stripped) in "weak_examples"
        """
        bullets = self.bullet_lines(resume_text)

        strong = 0
        weak = 0
        weak_examples: list[str] = []

        for line in bullets:
            plain = self.strip_marker(line)
            if self.classify(plain) == "strong":
                strong += 1
            else:
                weak += 1
                if len(weak_examples) < self.MAX_WEAK_EXAMPLES:
                    weak_examples.append(plain)

        return {
            "total": len(bullets),
            "strong": strong,
            "weak": weak,
            "weak_examples": weak_examples,
        }

    def classify(self, plain: str) -> str:
        """Return "strong" or "weak" for one bullet with its marker removed."""
        lower = plain.lower()
        has_metric = bool(_DIGIT.search(plain))
        starts_with_verb = any(lower.startswith(verb + " ") for verb in STRONG_VERBS)
        starts_weak = lower.startswith(WEAK_OPENERS)

        if (starts_with_verb and has_metric) or (has_metric and not starts_weak):
            return "strong"
        return "weak"

    @staticmethod
    def bullet_lines(text: str) -> list[str]:
        """Trimmed, non-empty lines that begin with a bullet marker."""
        lines = (line.strip() for line in _LINE_SPLIT.split(text))
        return [line for line in lines if line and line.startswith(BULLET_MARKERS)]

    @staticmethod
    def strip_marker(line: str) -> str:
        return _MARKER_PREFIX.sub("", line, count=1)
