# docgen/code_parser.py

"""
Public entry points of the parsing core.

    records = extract(source, "python")
    updated = insert(source, "python", {"add": "Add two numbers."})
"""

import logging
import os
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .inserter import DocstringInserter
from .models import FunctionRecord, Language, Parameter, ParsedFile
from .parsers import get_parser
from .parsers.params import parse_parameters as _parse_parameters

logger = logging.getLogger(__name__)

PYTHON_EXTENSIONS = (".py",)
JAVASCRIPT_EXTENSIONS = (".js", ".jsx", ".mjs", ".cjs", ".ts", ".tsx")

DocumentationInput = Union[Mapping[str, str], Iterable[Dict[str, Any]]]


def extract(source: str, language) -> List[FunctionRecord]:
    """
    Extract function, method and class records from source text.

    Args:
        source: Raw source text
        language: 'python', 'javascript' or 'typescript' (or a Language)

    Returns:
        Records in source order; empty when nothing is found

    Raises:
        ValueError: If the language tag is not supported
    """
    return get_parser(language).extract(source)


def parse_parameters(raw: str, language=Language.PYTHON) -> List[Parameter]:
    """Parse a raw parameter-list string."""
    return _parse_parameters(raw, Language.from_value(language))


def insert(source: str, language, documentation: DocumentationInput) -> str:
    """
    Insert documentation into source text.

    Args:
        source: Current source text
        language: 'python', 'javascript' or 'typescript' (or a Language)
        documentation: Mapping of name to text, or an iterable of
            ``{"name": ..., "docstring": ...}`` pairs as returned by a
            generation service

    Returns:
        Updated source text
    """
    return DocstringInserter(language).insert(source, as_mapping(documentation))


def as_mapping(documentation: DocumentationInput) -> Dict[str, str]:
    """Normalize generator output into a name -> text mapping."""
    if documentation is None:
        return {}
    if isinstance(documentation, Mapping):
        return dict(documentation)
    mapping = {}
    for item in documentation:
        name = item.get("name")
        text = item.get("docstring")
        if name and text:
            mapping[name] = text
    return mapping


def merge_generated(records: List[FunctionRecord],
                    documentation: DocumentationInput) -> List[FunctionRecord]:
    """
    Attach generated documentation to records by name.

    The input records are left as they are; copies are returned.
    """
    mapping = as_mapping(documentation)
    return [r.with_generated(mapping[r.name]) if r.name in mapping else r
            for r in records]


def detect_language(file_name: str) -> Language:
    """
    Detect the language from a file name.

    ``.py`` is Python; JavaScript and TypeScript extensions, and anything
    unrecognised, are treated as JavaScript.
    """
    name = (file_name or "").lower()
    if name.endswith(PYTHON_EXTENSIONS):
        return Language.PYTHON
    return Language.JAVASCRIPT


def read_source(file_path: str) -> Optional[str]:
    """
    Read a source file as UTF-8, falling back to latin-1.

    Returns:
        File contents or None on error
    """
    try:
        with open(file_path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except UnicodeDecodeError:
        logger.warning(f"Failed to read {file_path} with UTF-8, trying latin-1")
        try:
            with open(file_path, 'r', encoding='latin-1', newline='') as f:
                return f.read()
        except OSError as e:
            logger.error(f"Failed to read {file_path}: {e}")
            return None
    except FileNotFoundError:
        logger.error(f"File not found: {file_path}")
        return None
    except OSError as e:
        logger.error(f"An unexpected error occurred while reading {file_path}: {e}")
        return None


def parse_file(file_path: str, language=None) -> Optional[ParsedFile]:
    """
    Read and parse a source file.

    Args:
        file_path: Path to the file
        language: Optional language override; detected from the name otherwise

    Returns:
        ParsedFile, or None if the file could not be read
    """
    content = read_source(file_path)
    if content is None:
        return None

    lang = Language.from_value(language) if language else detect_language(file_path)
    functions = extract(content, lang)
    logger.info(f"Parsed {os.path.basename(file_path)} as {lang.value}: "
                f"{len(functions)} definition(s)")
    return ParsedFile(
        file_name=os.path.basename(file_path),
        language=lang,
        functions=functions,
        raw_content=content,
    )
