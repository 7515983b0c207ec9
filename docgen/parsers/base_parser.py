# docgen/parsers/base_parser.py

"""
Base class for the line-oriented extractors.
Owns line splitting and the best-effort contract: a scan that fails midway
returns the records collected before the failure instead of raising.
"""

from abc import ABC, abstractmethod
import logging
import re
from typing import List

from ..models import FunctionRecord, Language

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r'\r?\n')


def split_lines(source: str) -> List[str]:
    """Split on LF or CRLF without dropping a trailing empty line."""
    return _LINE_BREAK.split(source)


def line_endings(source: str) -> List[str]:
    """Line terminators parallel to ``split_lines(source)``; the last is empty."""
    return _LINE_BREAK.findall(source) + [""]


def leading_whitespace(line: str) -> str:
    return line[:len(line) - len(line.lstrip())]


class BaseParser(ABC):
    """Abstract base class for language-specific extractors."""

    def __init__(self):
        self.language = self._get_language()

    @abstractmethod
    def _get_language(self) -> Language:
        """
        Get the language handled by this parser.

        Returns:
            Language member
        """
        pass

    @abstractmethod
    def _scan(self, lines: List[str], records: List[FunctionRecord]) -> None:
        """
        Walk the lines top to bottom, appending one record per header found.

        Args:
            lines: Source split into lines
            records: Output list, appended to in source order
        """
        pass

    def extract(self, source: str) -> List[FunctionRecord]:
        """
        Extract function, method and class records from source text.

        Never raises for malformed input. If scanning fails unexpectedly the
        records found up to that point are returned.

        Args:
            source: Raw source text

        Returns:
            Records in the order their headers appear
        """
        records: List[FunctionRecord] = []
        if not source:
            return records

        lines = split_lines(source)
        try:
            self._scan(lines, records)
        except Exception as e:
            logger.warning(
                f"{self.language.value} scan stopped early after "
                f"{len(records)} record(s): {e}"
            )

        logger.debug(f"Extracted {len(records)} {self.language.value} record(s)")
        return records

    @staticmethod
    def _join(lines: List[str], start: int, end: int) -> str:
        """Join ``lines[start..end]`` (0-based, inclusive) with newlines."""
        return "\n".join(lines[start:end + 1])
