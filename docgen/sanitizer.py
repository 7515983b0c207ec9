# docgen/sanitizer.py
"""
Sanitization of LLM output before it is written into source files.

Generated documentation must arrive as bare content: no code fences, no
docstring quotes, no comment delimiters. Anything that would terminate the
surrounding block early is removed here.
"""

import re
import logging
import textwrap
from typing import List

from .models import Language

logger = logging.getLogger(__name__)


class DocstringSanitizer:
    """Cleans raw model responses into insertable documentation text."""

    _WHOLE_FENCE = re.compile(r'^```[\w+-]*[ \t]*\r?\n(?P<body>[\s\S]*?)\r?\n?```$')
    _CODE_FENCE = re.compile(r'```[\s\S]*?```')
    _TRIPLE_QUOTES = re.compile(r'"""|\'\'\'')
    _JSDOC_MARKERS = re.compile(r'/\*\*|\*/')
    _LEADING_STAR = re.compile(r'^[ \t]*\*[ \t]?', re.MULTILINE)

    @classmethod
    def clean(cls, text: str, language: Language = Language.PYTHON) -> str:
        """
        Clean a generated docstring.

        Args:
            text: Raw model response
            language: Target language; leading ``*`` markers are only
                stripped for JavaScript, where they come from JSDoc layout

        Returns:
            Cleaned text, possibly empty
        """
        raw = text or ""
        whole = cls._WHOLE_FENCE.match(raw.strip())
        cleaned = whole.group("body") if whole else raw

        cleaned = cls._CODE_FENCE.sub("", cleaned)
        cleaned = cls._TRIPLE_QUOTES.sub("", cleaned)
        cleaned = cls._JSDOC_MARKERS.sub("", cleaned)
        if language is Language.JAVASCRIPT:
            cleaned = cls._LEADING_STAR.sub("", cleaned)

        lines = [line.rstrip() for line in cleaned.splitlines()]
        lines = textwrap.dedent("\n".join(lines)).split("\n")
        return "\n".join(cls._collapse_blank_lines(lines)).strip()

    @staticmethod
    def _collapse_blank_lines(lines: List[str]) -> List[str]:
        """Squeeze runs of blank lines to one and drop blanks at either end."""
        kept: List[str] = []
        for line in lines:
            if line or (kept and kept[-1]):
                kept.append(line)
        while kept and not kept[-1]:
            kept.pop()
        return kept


def clean_docstring(text: str, language: Language = Language.PYTHON) -> str:
    """Convenience wrapper around DocstringSanitizer.clean."""
    cleaned = DocstringSanitizer.clean(text, language)
    if text and not cleaned:
        logger.debug("Generated docstring was empty after cleaning")
    return cleaned
