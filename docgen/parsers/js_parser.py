# docgen/parsers/js_parser.py

"""
JavaScript/TypeScript extractor driven by header regexes and brace counting.

Three single-line header shapes are recognised: ``function`` declarations,
arrow functions assigned to a name, and class-method shorthand. Braces are
counted naively, so braces inside strings, template literals or comments
shift the detected body end.
"""

import logging
import re
from typing import List

from ..models import FunctionKind, FunctionRecord, Language
from .base_parser import BaseParser
from .docstring_locator import find_jsdoc
from .params import parse_parameters

logger = logging.getLogger(__name__)

_IDENT = r'[A-Za-z_$][\w$]*'

_FUNCTION_DECLARATION = re.compile(
    r'^(?P<indent>\s*)(?:export\s+)?(?:default\s+)?(?:async\s+)?function\s*\*?\s*'
    r'(?P<name>' + _IDENT + r')\s*\((?P<params>.*?)\)\s*'
    r'(?::\s*(?P<returns>[^{]+?))?\s*\{'
)
_ARROW_FUNCTION = re.compile(
    r'^(?P<indent>\s*)(?:export\s+)?(?:(?:const|let|var)\s+)?'
    r'(?P<name>' + _IDENT + r')\s*=\s*(?:async\s*)?\((?P<params>.*?)\)\s*'
    r'(?::\s*(?P<returns>[^=]+?))?\s*=>\s*\{'
)
_METHOD_SHORTHAND = re.compile(
    r'^(?P<indent>\s*)(?:async\s+)?(?P<name>' + _IDENT + r')\s*\((?P<params>.*?)\)\s*'
    r'(?::\s*(?P<returns>[^{]+?))?\s*\{'
)

_HEADER_SHAPES = (
    (_FUNCTION_DECLARATION, FunctionKind.FUNCTION),
    (_ARROW_FUNCTION, FunctionKind.FUNCTION),
    (_METHOD_SHORTHAND, FunctionKind.METHOD),
)

# Keywords that look like `name(...) {` but open a block, not a function
_RESERVED = frozenset({
    "if", "for", "while", "switch", "catch", "with", "return", "function",
    "typeof", "new", "do", "else", "try", "finally", "class", "await",
    "yield", "throw", "delete", "void", "in", "of", "instanceof",
})


def brace_balance(line: str) -> int:
    return line.count("{") - line.count("}")


class JavaScriptParser(BaseParser):
    """Extractor for JavaScript and TypeScript source."""

    def _get_language(self) -> Language:
        return Language.JAVASCRIPT

    def _scan(self, lines: List[str], records: List[FunctionRecord]) -> None:
        floor = 0
        i = 0
        while i < len(lines):
            header = self._match_header(lines[i])
            if header is None:
                i += 1
                continue

            match, kind = header
            record = self._build_record(lines, i, match, kind, floor)
            records.append(record)
            logger.debug(f"Found {record.kind.value} `{record.name}` "
                         f"at lines {record.start_line}-{record.end_line}")
            # resume after the body; nested functions are skipped
            i = record.end_line
            floor = i

    @staticmethod
    def _match_header(line: str):
        for pattern, kind in _HEADER_SHAPES:
            match = pattern.match(line)
            if match and match.group("name") not in _RESERVED:
                return match, kind
        return None

    def _build_record(self, lines: List[str], index: int, match: re.Match,
                      kind: FunctionKind, floor: int) -> FunctionRecord:
        end = self._find_body_end(lines, index)
        doc = find_jsdoc(lines, index, floor)
        returns = match.group("returns")

        return FunctionRecord(
            name=match.group("name"),
            kind=kind,
            start_line=index + 1,
            end_line=end + 1,
            original_code=self._join(lines, index, end),
            parameters=parse_parameters(match.group("params"), Language.JAVASCRIPT),
            return_type=returns.strip() if returns else None,
            existing_documentation=doc.text if doc else None,
        )

    @staticmethod
    def _find_body_end(lines: List[str], index: int) -> int:
        """
        Find the line on which the braces opened by the header balance out.

        The counter starts from the header's own balance, so a function
        written on one line ends on that line. If the braces never balance
        the body runs to the last line.

        Args:
            lines: Source lines
            index: 0-based header index

        Returns:
            0-based index of the closing line
        """
        balance = brace_balance(lines[index])
        if balance <= 0:
            return index

        for j in range(index + 1, len(lines)):
            balance += brace_balance(lines[j])
            if balance <= 0:
                return j
        return len(lines) - 1
