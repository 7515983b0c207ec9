# docgen/parsers/docstring_locator.py

"""
Locating existing documentation blocks in source lines.

Python docstrings are found as the first statement of a body; JSDoc blocks
are found directly above a header. Both searches are bounded by the line
list, so an unterminated block reads as "no documentation".
"""

import inspect
import re
from dataclasses import dataclass
from typing import List, Optional

PY_DELIMITERS = ('"""', "'''")

_JSDOC_LEADING_STAR = re.compile(r'^\*\s?')


@dataclass(frozen=True)
class DocSpan:
    """Line span (0-based, inclusive) of a documentation block and its text."""
    start: int
    end: int
    text: str


def match_python_docstring(lines: List[str], index: int) -> Optional[DocSpan]:
    """
    Read a triple-quoted string opening at ``lines[index]``.

    Args:
        lines: Source lines
        index: Line expected to open the docstring

    Returns:
        DocSpan, or None if the line does not open one or it never closes
    """
    if index >= len(lines):
        return None
    stripped = lines[index].lstrip()
    delimiter = next((d for d in PY_DELIMITERS if stripped.startswith(d)), None)
    if delimiter is None:
        return None

    remainder = stripped[len(delimiter):]
    if delimiter in remainder:
        text = remainder[:remainder.index(delimiter)]
        return DocSpan(index, index, _clean(text))

    collected = [remainder]
    for j in range(index + 1, len(lines)):
        line = lines[j]
        if delimiter in line:
            collected.append(line[:line.index(delimiter)])
            return DocSpan(index, j, _clean("\n".join(collected)))
        collected.append(line)
    return None


def locate_python_docstring(lines: List[str], header_index: int) -> Optional[DocSpan]:
    """
    Find the docstring belonging to the definition whose header is at
    ``header_index``: the first non-blank line after the header, provided
    it is indented deeper than the header and opens a triple-quoted string.
    """
    header = lines[header_index]
    indent = header[:len(header) - len(header.lstrip())]
    for j in range(header_index + 1, len(lines)):
        line = lines[j]
        if not line.strip():
            continue
        if not is_deeper(line, indent):
            return None
        return match_python_docstring(lines, j)
    return None


def is_deeper(line: str, indent: str) -> bool:
    """True if ``line`` is indented strictly more than ``indent``."""
    return line.startswith(indent + " ") or line.startswith(indent + "\t")


def find_jsdoc(lines: List[str], header_index: int, floor: int = 0) -> Optional[DocSpan]:
    """
    Find a ``/** ... */`` block ending on the line right above a header.

    The upward walk stops at ``floor`` (first line not claimed by an
    earlier record) and at any plain ``/*`` comment opener.

    Args:
        lines: Source lines
        header_index: 0-based index of the header line
        floor: Lowest line index the block may start on

    Returns:
        DocSpan with comment markers stripped, or None
    """
    end = header_index - 1
    if end < floor or not lines[end].strip().endswith("*/"):
        return None

    for start in range(end, floor - 1, -1):
        stripped = lines[start].strip()
        if stripped.startswith("/**"):
            return DocSpan(start, end, _strip_jsdoc(lines[start:end + 1]))
        if stripped.startswith("/*"):
            return None
        if start == end and "/*" in stripped:
            # comment opened after code on the same line
            return None
        if start != end and stripped.endswith("*/"):
            return None
    return None


def _strip_jsdoc(block: List[str]) -> str:
    cleaned = []
    for line in block:
        line = line.strip()
        if line.startswith("/**"):
            line = line[3:]
        if line.endswith("*/"):
            line = line[:-2]
        cleaned.append(_JSDOC_LEADING_STAR.sub("", line.strip()).rstrip())
    return "\n".join(cleaned).strip()


def _clean(text: str) -> str:
    # cleandoc can leave a whitespace-only last line behind
    return inspect.cleandoc(text).strip()
