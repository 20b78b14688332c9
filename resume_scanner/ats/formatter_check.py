"""
ATS Formatter Check — "Can an ATS read it?"

Plain-text checks on the pasted resume for problems that commonly trip
up ATS parsers (Workday, Taleo, Greenhouse).

Checks:
- Section headings: Experience, Education and Skills must appear
- Length: more than 900 words is flagged as too long
- Contact info: an email address must be present in plain text

Each failed check adds one human-readable issue string.
"""

from __future__ import annotations

from typing import Any

from resume_scanner.ats.tokenizer import tokenize

MISSING_EXPERIENCE = (
    "Could not find an Experience section. Use a clear heading like Experience or Work Experience."
)
MISSING_EDUCATION = (
    "Could not find an Education section. Use a clear heading like Education."
)
MISSING_SKILLS = (
    "Could not find a Skills section. Consider adding a Skills section with tools and tech."
)
TOO_LONG = (
    "Resume may be too long. Try to keep it closer to one page for early / mid level roles."
)
MISSING_EMAIL = (
    "Email address not detected. Make sure your contact info is in plain text."
)

# Section marker -> issue reported when the marker is absent
REQUIRED_SECTIONS = {
    "experience": MISSING_EXPERIENCE,
    "education": MISSING_EDUCATION,
    "skills": MISSING_SKILLS,
}


class FormatterCheck:
    """Formatting and structure analysis on raw resume text."""

    MAX_WORDS = 900

    def check(self, resume_text: str) -> dict[str, Any]:
        """
        Run all formatting checks.

        Args:
            resume_text: Raw resume text

        Returns:
            dict with "issues" (list of strings, in check order)
            and "word_count"
        """
        issues: list[str] = []

        # Check 1: Section headings
        issues.extend(self._check_sections(resume_text))

        # Check 2: Length (digits count as words, e.g. phone numbers and metrics)
        word_count = len(tokenize(resume_text))
        if word_count > self.MAX_WORDS:
            issues.append(TOO_LONG)

        # Check 3: Contact email
        if "@" not in resume_text:
            issues.append(MISSING_EMAIL)

        return {
            "issues": issues,
            "word_count": word_count,
        }

    def _check_sections(self, resume_text: str) -> list[str]:
        """Case-insensitive substring search for each required section."""
        lower = resume_text.lower()
        return [
            issue
            for marker, issue in REQUIRED_SECTIONS.items()
            if marker not in lower
        ]
