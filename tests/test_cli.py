import json
import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from typer.testing import CliRunner  # noqa: E402

from cli import app  # noqa: E402

PM_JD = "Looking for a Product Manager with SQL and Agile experience to own the roadmap."

RESUME = """Jane Doe
jane@example.com
Experience
- Led migration to reduce costs by 30%
- Responsible for reporting
Education
BSc Computer Science
Skills
SQL, Python, Agile
"""


class CliTests(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_dir = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, name, content):
        path = self.tmp_dir / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    def test_score_from_text(self):
        result = self.runner.invoke(app, ["score", "--text", RESUME])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Overall Resume Score: 63 / 100", result.output)

    def test_score_from_resume_path_env(self):
        path = self._write("resume.txt", RESUME)
        result = self.runner.invoke(app, ["score"], env={"RESUME_PATH": path})
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("63 / 100", result.output)

    def test_score_without_resume_is_usage_error(self):
        result = self.runner.invoke(app, ["score"], env={"RESUME_PATH": ""})
        self.assertEqual(result.exit_code, 2)

    def test_score_missing_file(self):
        result = self.runner.invoke(app, ["score", str(self.tmp_dir / "missing.txt")])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("File not found", result.output)

    def test_score_rejects_oversized_file(self):
        path = self._write("big.txt", "experience " * 100_000)
        result = self.runner.invoke(app, ["score", path], env={"MAX_UPLOAD_SIZE_MB": "1"})
        self.assertEqual(result.exit_code, 1)
        self.assertIn("File too large", result.output)

    def test_score_blank_text_prints_advisory(self):
        result = self.runner.invoke(app, ["score", "--text", "   "])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Please paste your resume first.", result.output)

    def test_target_requires_job_description(self):
        result = self.runner.invoke(app, ["target", "--text", RESUME])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("--jd-file", result.output)

    def test_target_with_files_writes_json(self):
        resume = self._write("resume.txt", RESUME)
        jd = self._write("jd.txt", PM_JD)
        out = self.tmp_dir / "report.json"
        result = self.runner.invoke(app, ["target", resume, "--jd-file", jd, "-o", str(out)])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Match Score: 60 / 100", result.output)

        data = json.loads(out.read_text(encoding="utf-8"))
        self.assertEqual(data["match"]["matched"], ["sql", "agile", "experience"])
        self.assertEqual(data["resume_score"], 63)

    def test_keywords_from_text(self):
        result = self.runner.invoke(app, ["keywords", "--text", PM_JD])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("agile, roadmap", result.output)

    def test_invalid_log_level_is_usage_error(self):
        result = self.runner.invoke(app, ["--log-level", "bogus", "score", "--text", RESUME])
        self.assertEqual(result.exit_code, 2)
        self.assertNotIsInstance(result.exception, ValueError)

    def test_log_level_is_case_insensitive(self):
        result = self.runner.invoke(app, ["--log-level", "debug", "score", "--text", RESUME])
        self.assertEqual(result.exit_code, 0, result.output)

    def test_empty_text_option_is_not_replaced_by_resume_path(self):
        path = self._write("resume.txt", RESUME)
        result = self.runner.invoke(app, ["score", "--text", ""], env={"RESUME_PATH": path})
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Please paste your resume first.", result.output)
        self.assertNotIn("Overall Resume Score", result.output)

    def test_empty_jd_text_prints_advisory(self):
        jd = self._write("jd.txt", PM_JD)
        result = self.runner.invoke(
            app, ["target", "--text", RESUME, "--jd-text", "", "--jd-file", jd],
        )
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Please paste both the job description and your resume.", result.output)

    def test_empty_keywords_text_prints_advisory(self):
        result = self.runner.invoke(app, ["keywords", "--text", ""])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Please paste a job description first.", result.output)

    def test_keywords_without_input(self):
        result = self.runner.invoke(app, ["keywords"])
        self.assertEqual(result.exit_code, 1)


if __name__ == "__main__":
    unittest.main()
