# docgen/inserter.py

"""
Writes generated documentation back into source text.

The source is re-extracted on every call so positions reflect the text as
it is now. Records are processed bottom-up: editing a later definition
never shifts the line numbers of an earlier one.
"""

import logging
from typing import List, Mapping, Optional, Tuple

from .models import FunctionRecord, Language
from .parsers import get_parser, split_lines
from .parsers.base_parser import leading_whitespace, line_endings
from .parsers.docstring_locator import find_jsdoc, locate_python_docstring

logger = logging.getLogger(__name__)

# Body indentation assumed one level below the header
BODY_INDENT = {
    Language.PYTHON: 4,
    Language.JAVASCRIPT: 2,
}


class DocstringInserter:
    """Replaces or adds documentation blocks for named definitions."""

    def __init__(self, language):
        """
        Initialize the inserter.

        Args:
            language: Language member or tag ('python', 'javascript', 'typescript')
        """
        self.language = Language.from_value(language)
        self.parser = get_parser(self.language)

    def insert(self, source: str, documentation: Mapping[str, str]) -> str:
        """
        Rewrite ``source`` with documentation looked up by definition name.

        Definitions without an entry are left untouched. Existing blocks are
        removed before the new one goes in, so repeated calls replace rather
        than stack documentation. Every line keeps its own line ending;
        new lines take the ending of the header they belong to.

        Args:
            source: Current source text
            documentation: Mapping of definition name to documentation text

        Returns:
            Updated source text (the input itself when nothing matched)
        """
        if not source or not documentation:
            return source

        records = self.parser.extract(source)
        lines = split_lines(source)
        endings = line_endings(source)
        default_newline = endings[0] or "\n"
        updated = 0

        for position in range(len(records) - 1, -1, -1):
            record = records[position]
            text = documentation.get(record.name)
            if not text:
                continue

            header_index = record.start_line - 1
            indent = " " * (len(leading_whitespace(lines[header_index]))
                            + BODY_INDENT[self.language])
            if self.language is Language.PYTHON:
                start, stop, block = self._plan_python(lines, record, header_index, indent, text)
            else:
                floor = records[position - 1].end_line if position > 0 else 0
                start, stop, block = self._plan_jsdoc(lines, record, header_index, indent,
                                                      text, floor)
            newline = endings[header_index] or default_newline
            _splice(lines, endings, start, stop, block, newline)
            updated += 1

        if not updated:
            return source

        logger.debug(f"Inserted documentation for {updated} definition(s)")
        return "".join(line + ending for line, ending in zip(lines, endings))

    @staticmethod
    def _plan_python(lines: List[str], record: FunctionRecord, header_index: int,
                     indent: str, text: str) -> Tuple[int, int, List[str]]:
        start = stop = header_index + 1
        if record.existing_documentation is not None:
            span = locate_python_docstring(lines, header_index)
            if span:
                start, stop = span.start, span.end + 1
        return start, stop, format_python_docstring(text, indent)

    @staticmethod
    def _plan_jsdoc(lines: List[str], record: FunctionRecord, header_index: int,
                    indent: str, text: str, floor: int) -> Tuple[int, int, List[str]]:
        start = stop = header_index
        if record.existing_documentation is not None:
            span = find_jsdoc(lines, header_index, floor)
            if span:
                start, stop = span.start, span.end + 1
        return start, stop, format_jsdoc(text, indent)


def _splice(lines: List[str], endings: List[str], start: int, stop: int,
            block: List[str], newline: str) -> None:
    """
    Replace ``lines[start:stop]`` with ``block``, keeping ``endings`` in step.

    Untouched lines keep their own line ending; new lines get ``newline``.
    The last line of the text never has one.
    """
    new_endings = [newline] * len(block)
    if stop == len(lines) and block:
        if start == stop and start > 0:
            endings[start - 1] = newline
        new_endings[-1] = ""
    lines[start:stop] = block
    endings[start:stop] = new_endings


def format_python_docstring(text: str, indent: str) -> List[str]:
    """Lay out ``text`` as a triple-double-quoted block at ``indent``."""
    body = [_indent_line(line, indent)
            for line in split_lines(text.strip().replace('"""', '\\"\\"\\"'))]
    return [f'{indent}"""', *body, f'{indent}"""']


def format_jsdoc(text: str, indent: str) -> List[str]:
    """Lay out ``text`` as a ``/** ... */`` block at ``indent``."""
    body = [_indent_line(line, indent + " * ", blank=indent + " *")
            for line in split_lines(text.strip().replace("*/", "*\\/"))]
    return [f"{indent}/**", *body, f"{indent} */"]


def _indent_line(line: str, prefix: str, blank: Optional[str] = None) -> str:
    line = line.rstrip()
    if not line:
        return blank if blank is not None else ""
    return prefix + line


def insert_docstrings(source: str, language, documentation: Mapping[str, str]) -> str:
    """Functional shortcut for ``DocstringInserter(language).insert(...)``."""
    return DocstringInserter(language).insert(source, documentation)
