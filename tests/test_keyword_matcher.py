import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_scanner.ats.tokenizer import tokenize  # noqa: E402
from resume_scanner.tools.extract_keywords import extract_keywords  # noqa: E402
from resume_scanner.tools.match_keywords import match_keywords  # noqa: E402


class KeywordMatcherTests(unittest.TestCase):
    def test_matched_and_missing_keep_bucket_order(self):
        keywords = {"tools": ["sql", "python"], "skills": ["agile"], "domain": ["payments"]}
        result = match_keywords(keywords, "Built SQL pipelines for Payments")
        self.assertEqual(result["matched"], ["sql", "payments"])
        self.assertEqual(result["missing"], ["python", "agile"])
        self.assertEqual(result["score"], 50)

    def test_empty_keywords_score_zero(self):
        result = match_keywords({"tools": [], "skills": [], "domain": []}, "anything")
        self.assertEqual(result, {"matched": [], "missing": [], "score": 0})
        self.assertEqual(match_keywords({}, "anything")["score"], 0)

    def test_duplicate_across_buckets_counted_once(self):
        keywords = {"tools": ["data"], "skills": ["data"], "domain": ["data"]}
        result = match_keywords(keywords, "data team")
        self.assertEqual(result["matched"], ["data"])
        self.assertEqual(result["score"], 100)

    def test_keyword_must_match_whole_word(self):
        result = match_keywords({"tools": ["sql"]}, "MySQL expert")
        self.assertEqual(result["missing"], ["sql"])
        self.assertEqual(result["score"], 0)

    def test_score_rounds_half_up(self):
        keywords = {"tools": ["sql", "python", "excel"]}
        self.assertEqual(match_keywords(keywords, "sql python")["score"], 67)

        eight = {"tools": ["aws", "gcp", "dbt", "git", "jira", "java", "node", "spark"]}
        self.assertEqual(match_keywords(eight, "aws")["score"], 13)

    def test_resume_without_jd_keywords_scores_zero(self):
        jd = "Looking for a Product Manager with SQL and Agile experience to own the roadmap."
        result = match_keywords(extract_keywords(jd), "Gardening and cooking enthusiast")
        self.assertEqual(result["score"], 0)
        self.assertEqual(result["matched"], [])
        self.assertEqual(len(result["missing"]), 5)

    def test_matched_words_appear_in_target_and_missing_do_not(self):
        jd = (
            "Senior analyst: SQL, Tableau and Python. Own the KPIs, metrics and "
            "experimentation roadmap for payments, fraud and chargeback disputes."
        )
        resume = "Analyst using sql and TABLEAU; defined KPIs and reduced fraud by 20%."
        result = match_keywords(extract_keywords(jd), resume)
        resume_words = set(tokenize(resume))
        for word in result["matched"]:
            self.assertIn(word, resume_words)
        for word in result["missing"]:
            self.assertNotIn(word, resume_words)
        self.assertGreaterEqual(result["score"], 0)
        self.assertLessEqual(result["score"], 100)


if __name__ == "__main__":
    unittest.main()
