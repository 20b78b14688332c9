"""
ATS Report Formatter — renders analysis results as readable text.

One renderer per view:
- score:    overall resume score, bullets, formatting warnings
- target:   JD keyword match, bullets, resume score
- keywords: extracted JD keywords by bucket
"""

from __future__ import annotations

from typing import Any


class ATSReport:
    """Formats analysis results into report cards."""

    GRADE_THRESHOLDS = {
        75: ("🟢", "Strong"),
        60: ("🟡", "Good"),
        40: ("🟠", "Needs Work"),
        0: ("🔴", "Weak"),
    }

    RULE = "━" * 50

    def grade(self, score: int) -> tuple[str, str]:
        """Get grade icon and label for a given score."""
        for threshold, (icon, label) in self.GRADE_THRESHOLDS.items():
            if score >= threshold:
                return icon, label
        return "🔴", "Weak"

    def render_score(
        self,
        score: int,
        bullets: dict[str, Any],
        formatting: dict[str, Any],
    ) -> str:
        """Render the "Score my resume" view."""
        icon, label = self.grade(score)
        lines = [
            f"Overall Resume Score: {score} / 100   {icon}  {label}",
            self.RULE,
            f"Estimated word count: {formatting.get('word_count', 0)}",
            self._bullet_summary(bullets),
        ]

        weak_examples = bullets.get("weak_examples", [])
        if weak_examples:
            lines.append("")
            lines.append("Examples to rewrite:")
            lines.extend(f"  • {example}" for example in weak_examples)
            lines.append(
                "Try using action + impact + metric. For example: "
                '"Led X to achieve Y percent improvement in Z."'
            )

        issues = formatting.get("issues", [])
        if issues:
            lines.append("")
            lines.append("ATS formatting warnings:")
            lines.extend(f"  ⚠️ {issue}" for issue in issues)

        lines.append(self.RULE)
        return "\n".join(lines)

    def render_target(
        self,
        match: dict[str, Any],
        bullets: dict[str, Any],
        resume_score: int,
    ) -> str:
        """Render the "Targeted resume" view."""
        icon, label = self.grade(match.get("score", 0))
        lines = [
            f"Match Score: {match.get('score', 0)} / 100   {icon}  {label}",
            self.RULE,
            "This is a rough alignment score based on keyword coverage. Higher is better.",
            "",
            "Matched keywords:",
            "  " + (", ".join(match.get("matched", [])) or "None yet."),
            "",
            "Missing or weak keywords:",
            "  " + (
                ", ".join(match.get("missing", []))
                or "You cover most of the key terms in this JD."
            ),
            "",
            "Bullet strength check:",
            self._bullet_summary(bullets),
            "Consider rewriting weak bullets to include some of the missing keywords "
            "where they are true for your experience.",
            "",
            f"Resume Score: {resume_score} / 100",
            self.RULE,
        ]
        return "\n".join(lines)

    def render_keywords(self, keywords: dict[str, list[str]]) -> str:
        """Render the "Keyword scanner" view."""
        sections = (
            ("Tools and technologies:", "tools", "No specific tools detected."),
            ("Product and skill keywords:", "skills", "No specific product skills detected."),
            ("Domain and context words:", "domain", "No domain related keywords detected."),
        )

        lines = ["Extracted keywords from JD", self.RULE]
        for heading, bucket, empty_text in sections:
            lines.append(heading)
            lines.append("  " + (", ".join(keywords.get(bucket, [])) or empty_text))
            lines.append("")

        lines.append(
            "You can copy these into your Skills section and bullet points "
            "where they truthfully match your experience."
        )
        lines.append(self.RULE)
        return "\n".join(lines)

    def _bullet_summary(self, bullets: dict[str, Any]) -> str:
        return (
            f"Bullets — Strong: {bullets.get('strong', 0)} • "
            f"Weak: {bullets.get('weak', 0)} • "
            f"Total: {bullets.get('total', 0)}"
        )
