"""
Resume Score — single 0–100 score from the bullet and formatting reports.

Starts from a base of 50:
- minus 4 per formatting issue (at most 15)
- plus up to 35 for the share of strong bullets
- minus 5 when the word count is outside 400–1100

The result is clamped to 0–100. The same policy scores every view.
"""

from __future__ import annotations

from typing import Any

from resume_scanner.ats.rounding import round_half_up


class ResumeScore:
    """Additive, penalty-based resume score."""

    BASE_SCORE = 50
    MIN_SCORE = 0
    MAX_SCORE = 100

    # Scoring weights
    ISSUE_PENALTY = 4
    MAX_ISSUE_PENALTY = 15
    STRONG_BULLET_POINTS = 35
    LENGTH_PENALTY = 5

    # Word count window that avoids the length penalty
    IDEAL_MIN_WORDS = 400
    IDEAL_MAX_WORDS = 1100

    def score(self, bullet_report: dict[str, Any], formatting_report: dict[str, Any]) -> int:
        """
        Combine the two reports into one score.

        Args:
            bullet_report: Output from BulletAnalyzer.analyze()
            formatting_report: Output from FormatterCheck.check()

        Returns:
            Integer score between 0 and 100
        """
        score = self.BASE_SCORE

        issues = formatting_report.get("issues", [])
        score -= min(self.MAX_ISSUE_PENALTY, len(issues) * self.ISSUE_PENALTY)

        score += self._bullet_points(bullet_report)

        word_count = formatting_report.get("word_count", 0)
        if word_count < self.IDEAL_MIN_WORDS or word_count > self.IDEAL_MAX_WORDS:
            score -= self.LENGTH_PENALTY

        return max(self.MIN_SCORE, min(score, self.MAX_SCORE))

    def _bullet_points(self, bullet_report: dict[str, Any]) -> int:
        """Points for strong bullets; a resume without bullets earns none."""
        total = bullet_report.get("total", 0)
        if not total:
            return 0
        ratio = bullet_report.get("strong", 0) / total
        return round_half_up(ratio * self.STRONG_BULLET_POINTS)
