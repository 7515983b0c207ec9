# docgen/__init__.py
"""
Automated Docstring Generator

Finds functions, methods and classes in Python and JavaScript/TypeScript
source, has an LLM write their documentation and inserts it back in place.
"""

from .code_parser import (
    detect_language,
    extract,
    insert,
    merge_generated,
    parse_file,
    parse_parameters,
)
from .models import DocstringStyle, FunctionKind, FunctionRecord, Language, Parameter, ParsedFile

__version__ = "1.0.0"
__author__ = "Supratik Roy"

__all__ = [
    "extract", "insert", "parse_parameters", "merge_generated", "parse_file",
    "detect_language", "Language", "FunctionKind", "DocstringStyle",
    "FunctionRecord", "Parameter", "ParsedFile",
]
