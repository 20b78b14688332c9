"""
Resume Checker Agent — orchestrates the three analysis views.

Coordinates:
- Score my resume: BulletAnalyzer + FormatterCheck → ResumeScore
- Targeted resume: KeywordExtractor + KeywordMatcher on the JD,
  plus the same bullet check and resume score
- Keyword scanner: KeywordExtractor on the JD

Every view returns structured results plus a rendered text report.
"""

from __future__ import annotations

import logging
from typing import Any

from resume_scanner.ats.bullet_analyzer import BulletAnalyzer
from resume_scanner.ats.formatter_check import FormatterCheck
from resume_scanner.ats.keyword_extractor import KeywordExtractor
from resume_scanner.ats.keyword_matcher import KeywordMatcher
from resume_scanner.ats.report import ATSReport
from resume_scanner.ats.resume_score import ResumeScore

logger = logging.getLogger(__name__)

EMPTY_RESUME_MESSAGE = "Please paste your resume first."
EMPTY_TARGET_MESSAGE = "Please paste both the job description and your resume."
EMPTY_JD_MESSAGE = "Please paste a job description first."


class ResumeCheckerAgent:
    """Runs the resume analysis views."""

    def __init__(self) -> None:
        self._extractor = KeywordExtractor()
        self._matcher = KeywordMatcher()
        self._bullets = BulletAnalyzer()
        self._formatter = FormatterCheck()
        self._scorer = ResumeScore()
        self._report = ATSReport()

    def score_resume(self, resume_text: str) -> dict[str, Any]:
        """
        Score a resume on its own.

        Args:
            resume_text: Raw resume text

        Returns:
            dict with score, grade, bullets, formatting and formatted_text,
            or an empty_input status dict when the text is blank
        """
        resume_text = (resume_text or "").strip()
        if not resume_text:
            return self._empty_input("score", EMPTY_RESUME_MESSAGE)

        bullets = self._bullets.analyze(resume_text)
        formatting = self._formatter.check(resume_text)
        score = self._scorer.score(bullets, formatting)
        _, grade = self._report.grade(score)

        return {
            "view": "score",
            "score": score,
            "grade": grade,
            "bullets": bullets,
            "formatting": formatting,
            "formatted_text": self._report.render_score(score, bullets, formatting),
        }

    def target_resume(self, jd_text: str, resume_text: str) -> dict[str, Any]:
        """
        Match a resume against a job description.

        Args:
            jd_text: Raw job description text
            resume_text: Raw resume text

        Returns:
            dict with keywords, match, bullets, resume_score and formatted_text,
            or an empty_input status dict when either text is blank
        """
        jd_text = (jd_text or "").strip()
        resume_text = (resume_text or "").strip()
        if not jd_text or not resume_text:
            return self._empty_input("target", EMPTY_TARGET_MESSAGE)

        keywords = self._extractor.extract(jd_text)
        match = self._matcher.match(keywords, resume_text)
        bullets = self._bullets.analyze(resume_text)
        formatting = self._formatter.check(resume_text)
        resume_score = self._scorer.score(bullets, formatting)

        return {
            "view": "target",
            "keywords": keywords,
            "match": match,
            "bullets": bullets,
            "formatting": formatting,
            "resume_score": resume_score,
            "formatted_text": self._report.render_target(match, bullets, resume_score),
        }

    def scan_keywords(self, jd_text: str) -> dict[str, Any]:
        """
        Extract keywords from a job description.

        Returns:
            dict with keywords and formatted_text, or an empty_input
            status dict when the text is blank
        """
        jd_text = (jd_text or "").strip()
        if not jd_text:
            return self._empty_input("keywords", EMPTY_JD_MESSAGE)

        keywords = self._extractor.extract(jd_text)
        return {
            "view": "keywords",
            "keywords": keywords,
            "formatted_text": self._report.render_keywords(keywords),
        }

    def _empty_input(self, view: str, message: str) -> dict[str, Any]:
        """Advisory result for blank input; the caller decides how to show it."""
        logger.warning("Skipping %s analysis: %s", view, message)
        return {
            "view": view,
            "status": "empty_input",
            "message": message,
        }
