#!/usr/bin/env python3
import unittest

from .cleaning import clean_model_output, collapse_whitespace


class TestCleanModelOutput(unittest.TestCase):
    def test_strip_think_block(self):
        raw = "<think>先想一想</think>\n[{\"word\": \"科学\"}]"
        self.assertEqual(clean_model_output(raw), '[{"word": "科学"}]')

    def test_strip_code_fence(self):
        raw = "```json\n{\"entries\": []}\n```"
        self.assertEqual(clean_model_output(raw), '{"entries": []}')

    def test_think_and_fence_together(self):
        raw = "<think>...</think>\n```\n[]\n```\n"
        self.assertEqual(clean_model_output(raw), "[]")

    def test_unclosed_think_prefix(self):
        raw = "思考内容</think>[]"
        self.assertEqual(clean_model_output(raw), "[]")

    def test_empty(self):
        self.assertEqual(clean_model_output(""), "")
        self.assertEqual(clean_model_output("  \n "), "")


class TestCollapseWhitespace(unittest.TestCase):
    def test_collapse(self):
        self.assertEqual(collapse_whitespace("  科学\n\n很 \t重要 "), "科学 很 重要")


if __name__ == "__main__":
    unittest.main()
