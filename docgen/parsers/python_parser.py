# docgen/parsers/python_parser.py

"""
Python extractor driven by header regexes and indentation.

Extraction is flat: once a definition is recorded, scanning resumes after
its body, so definitions nested inside it are never reported.
"""

import logging
import re
from typing import List, Optional, Tuple

from ..models import FunctionKind, FunctionRecord, Language
from .base_parser import BaseParser
from .docstring_locator import DocSpan, is_deeper, match_python_docstring
from .params import parse_parameters

logger = logging.getLogger(__name__)

_FUNC_PATTERN = re.compile(
    r'^(?P<indent>\s*)(?:async\s+)?def\s+(?P<name>\w+)\s*'
    r'\((?P<params>.*?)\)\s*(?:->\s*(?P<returns>[^:]+?))?\s*:'
)
_CLASS_PATTERN = re.compile(
    r'^(?P<indent>\s*)class\s+(?P<name>\w+)\s*(?:\((?P<bases>[^)]*)\))?\s*:'
)
_RECEIVERS = ("self", "cls")


class PythonParser(BaseParser):
    """Extractor for Python source."""

    def _get_language(self) -> Language:
        return Language.PYTHON

    def _scan(self, lines: List[str], records: List[FunctionRecord]) -> None:
        floor = 0
        i = 0
        while i < len(lines):
            line = lines[i]
            match = _FUNC_PATTERN.match(line)
            kind = FunctionKind.FUNCTION
            if not match:
                match = _CLASS_PATTERN.match(line)
                kind = FunctionKind.CLASS
            if not match:
                i += 1
                continue

            record = self._build_record(lines, i, match, kind, floor)
            records.append(record)
            logger.debug(f"Found {record.kind.value} `{record.name}` "
                         f"at lines {record.start_line}-{record.end_line}")
            # resume after the body; nested definitions are skipped
            i = record.end_line
            floor = i

    def _build_record(self, lines: List[str], index: int, match: re.Match,
                      kind: FunctionKind, floor: int) -> FunctionRecord:
        """
        Assemble a record for the header at ``lines[index]``.

        Args:
            lines: Source lines
            index: 0-based header index
            match: Header regex match
            kind: FUNCTION for ``def`` headers, CLASS for ``class`` headers
            floor: First line not claimed by a previous record

        Returns:
            FunctionRecord with 1-based line numbers
        """
        end, doc = self._find_body_end(lines, index, match.group("indent"))

        parameters = []
        return_type = None
        if kind is FunctionKind.FUNCTION:
            parameters = parse_parameters(match.group("params"), Language.PYTHON)
            if parameters and parameters[0].name in _RECEIVERS:
                parameters = parameters[1:]
                kind = FunctionKind.METHOD
            if match.group("returns"):
                return_type = match.group("returns").strip()

        return FunctionRecord(
            name=match.group("name"),
            kind=kind,
            start_line=index + 1,
            end_line=end + 1,
            original_code=self._join(lines, index, end),
            parameters=parameters,
            return_type=return_type,
            existing_documentation=doc.text if doc else None,
            decorators=self._collect_decorators(lines, index, floor),
        )

    @staticmethod
    def _find_body_end(lines: List[str], index: int,
                       indent: str) -> Tuple[int, Optional[DocSpan]]:
        """
        Walk the body of the definition at ``index``.

        The body runs while lines are blank or indented deeper than the
        header. Trailing blank lines are not counted. A docstring opening
        on the first statement is consumed whole, whatever the indentation
        of its inner lines.

        Returns:
            (0-based index of the last body line, docstring span or None)
        """
        end = index
        doc = None
        first_statement = True
        j = index + 1
        while j < len(lines):
            line = lines[j]
            if not line.strip():
                j += 1
                continue
            if not is_deeper(line, indent):
                break
            if first_statement:
                first_statement = False
                doc = match_python_docstring(lines, j)
                if doc:
                    end = doc.end
                    j = doc.end + 1
                    continue
            end = j
            j += 1
        return end, doc

    @staticmethod
    def _collect_decorators(lines: List[str], index: int, floor: int) -> List[str]:
        decorators = []
        j = index - 1
        while j >= floor and lines[j].strip().startswith("@"):
            decorators.insert(0, lines[j].strip())
            j -= 1
        return decorators
