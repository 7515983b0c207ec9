from ..models import Language
from .base_parser import BaseParser, split_lines
from .python_parser import PythonParser
from .js_parser import JavaScriptParser
from .params import parse_parameters

_PARSERS = {
    Language.PYTHON: PythonParser,
    Language.JAVASCRIPT: JavaScriptParser,
}


def get_parser(language) -> BaseParser:
    """Return a fresh extractor for a language tag or Language member."""
    return _PARSERS[Language.from_value(language)]()


__all__ = [
    "BaseParser", "PythonParser", "JavaScriptParser",
    "get_parser", "parse_parameters", "split_lines",
]
