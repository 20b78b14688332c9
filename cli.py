"""
Resume Scanner — CLI Entry Point

Typer-based CLI for the three analysis views.

Usage:
    resume-scanner --help
    resume-scanner score resume.txt
    resume-scanner target resume.txt --jd-file job.txt
    resume-scanner target --text "..." --jd-text "..."
    resume-scanner keywords job.txt
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Optional

import typer
from rich.console import Console
from rich.panel import Panel

from resume_scanner.agents.resume_checker import ResumeCheckerAgent
from resume_scanner.services.logging_setup import setup_logging
from resume_scanner.services.settings import resume_path
from resume_scanner.services.text_loader import load_text

app = typer.Typer(
    name="resume-scanner",
    help="Resume keyword scanner. Score resumes, match them against job descriptions, and extract ATS keywords.",
    add_completion=False,
)
console = Console()


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@app.callback()
def main(
    log_level: Optional[LogLevel] = typer.Option(
        None, "--log-level", case_sensitive=False, help="Override LOG_LEVEL",
    ),
):
    """Resume keyword scanner."""
    setup_logging(log_level.value if log_level else None)


def _resolve_resume_path(file_path: str | None) -> str:
    """Resolve resume path from argument or RESUME_PATH env var."""
    path = file_path or resume_path()
    if not path:
        raise typer.BadParameter(
            "Provide a resume file path, pass --text, or set RESUME_PATH in .env"
        )
    return path


def _load(file_path: str) -> str:
    """Load a text file, turning guard-rail failures into an advisory exit."""
    try:
        return load_text(file_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[yellow]{e}[/]")
        raise typer.Exit(1)


def _read_resume(file_path: str | None, text: str | None) -> str:
    if text is not None:
        return text
    return _load(_resolve_resume_path(file_path))


def _finish(result: dict[str, Any], output: str | None) -> None:
    """Print the report (or the advisory message) and optionally save JSON."""
    if result.get("status") == "empty_input":
        console.print(f"[yellow]{result['message']}[/]")
        raise typer.Exit(1)

    console.print(result["formatted_text"], markup=False)

    if output:
        with open(output, "w", encoding="utf-8") as f:
            json.dump(result, f, indent=2, ensure_ascii=False)
        console.print(f"\n📄 JSON saved to {output}")


# ── Score Command ────────────────────────────────────────────

@app.command()
def score(
    file_path: str = typer.Argument(None, help="Path to resume text file. Falls back to RESUME_PATH env var."),
    text: Optional[str] = typer.Option(None, "--text", "-t", help="Pasted resume text"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Save JSON output to file"),
):
    """Score a resume on bullets, formatting and length."""
    resume_text = _read_resume(file_path, text)
    result = ResumeCheckerAgent().score_resume(resume_text)
    _finish(result, output)


# ── Target Command ───────────────────────────────────────────

@app.command()
def target(
    file_path: str = typer.Argument(None, help="Path to resume text file. Falls back to RESUME_PATH env var."),
    text: Optional[str] = typer.Option(None, "--text", "-t", help="Pasted resume text"),
    jd_file: Optional[str] = typer.Option(None, "--jd-file", "-j", help="Path to job description text file"),
    jd_text: Optional[str] = typer.Option(None, "--jd-text", help="Pasted JD text"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Save JSON output to file"),
):
    """Match a resume against a job description."""
    if jd_file is None and jd_text is None:
        console.print("[red]Provide --jd-file or --jd-text[/]")
        raise typer.Exit(1)

    resume_text = _read_resume(file_path, text)
    job_text = jd_text if jd_text is not None else _load(jd_file)

    result = ResumeCheckerAgent().target_resume(job_text, resume_text)
    _finish(result, output)


# ── Keywords Command ─────────────────────────────────────────

@app.command()
def keywords(
    file_path: str = typer.Argument(None, help="Path to job description text file"),
    text: Optional[str] = typer.Option(None, "--text", "-t", help="Pasted JD text"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Save JSON output to file"),
):
    """Extract ATS keywords from a job description."""
    if file_path is None and text is None:
        console.print(Panel("Provide a job description file or --text", title="Nothing to scan"))
        raise typer.Exit(1)

    job_text = text if text is not None else _load(file_path)
    result = ResumeCheckerAgent().scan_keywords(job_text)
    _finish(result, output)


# ── Entry Point ──────────────────────────────────────────────

if __name__ == "__main__":
    app()
