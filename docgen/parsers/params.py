# docgen/parsers/params.py

"""
Parameter list parsing shared by the Python and JavaScript extractors.
"""

import re
from typing import List

from ..models import Language, Parameter

# name[?][: type][= default]; the same shape serves Python hints and TS annotations
_PARAM_PATTERN = re.compile(
    r'^(?P<name>(?:\*{1,2}|\.{3})?[A-Za-z_$][\w$]*)\??'
    r'(?:\s*:\s*(?P<type>[^=]+))?'
    r'(?:\s*=\s*(?P<default>.+))?',
    re.DOTALL,
)

# Python's bare keyword-only and positional-only markers carry no name
_SEPARATOR_TOKENS = {"*", "/"}


def parse_parameters(raw: str, language: Language = Language.PYTHON) -> List[Parameter]:
    """
    Split a raw parameter list into Parameter entries.

    Splitting is done on every comma; destructured or generic-typed
    parameters that contain commas of their own come out fragmented.

    Args:
        raw: Text between the parentheses of a signature
        language: Source language (both languages share one pattern)

    Returns:
        Parameters in declaration order
    """
    if not raw or not raw.strip():
        return []

    parameters: List[Parameter] = []
    for segment in raw.split(","):
        segment = segment.strip()
        if not segment:
            continue
        if language is Language.PYTHON and segment in _SEPARATOR_TOKENS:
            continue

        match = _PARAM_PATTERN.match(segment)
        if not match:
            parameters.append(Parameter(name=segment))
            continue

        parameters.append(Parameter(
            name=match.group("name"),
            type=_clean(match.group("type")),
            default_value=_clean(match.group("default")),
        ))
    return parameters


def _clean(value):
    if value is None:
        return None
    return value.strip() or None
