# tests/test_sanitizer.py
"""
Unit tests for cleaning generated documentation.
"""

from docgen.models import Language
from docgen.sanitizer import DocstringSanitizer, clean_docstring


class TestDocstringSanitizer:
    """Tests for DocstringSanitizer.clean."""

    def test_plain_text_is_kept(self):
        assert clean_docstring("Add two numbers.") == "Add two numbers."

    def test_whole_fence_is_unwrapped(self):
        assert clean_docstring("```python\nAdd two numbers.\n```") == "Add two numbers."

    def test_inner_fences_are_removed(self):
        text = "Add two numbers.\n\n```python\nadd(1, 2)\n```"

        assert clean_docstring(text) == "Add two numbers."

    def test_triple_quotes_are_removed(self):
        assert clean_docstring('"""Add two numbers."""') == "Add two numbers."
        assert clean_docstring("'''Add two numbers.'''") == "Add two numbers."

    def test_jsdoc_delimiters_are_removed(self):
        text = "/**\n * Adds.\n * @param {number} a\n */"

        assert clean_docstring(text, Language.JAVASCRIPT) == "Adds.\n@param {number} a"

    def test_leading_stars_kept_for_python(self):
        text = "Notes:\n    * first\n    * second"

        assert clean_docstring(text, Language.PYTHON) == text

    def test_relative_indentation_survives(self):
        text = "    Summary.\n\n    Args:\n        a: First\n"

        assert clean_docstring(text) == "Summary.\n\nArgs:\n    a: First"

    def test_blank_line_runs_are_squeezed(self):
        assert clean_docstring("One.\n\n\n\nTwo.") == "One.\n\nTwo."

    def test_trailing_whitespace_is_trimmed(self):
        assert clean_docstring("One.   \nTwo.\t") == "One.\nTwo."

    def test_empty_input(self):
        assert DocstringSanitizer.clean(None) == ""
        assert clean_docstring("   ") == ""
        assert clean_docstring('""""""') == ""
