# docgen/models.py

"""
Data model shared by the parsers, the re-inserter and the generation layer.

A FunctionRecord is created fresh on every parse call and is never mutated
by the parsers afterwards. Generated documentation is attached by building
a new record (see ``code_parser.merge_generated``).
"""

from __future__ import annotations
from dataclasses import dataclass, field, asdict, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


class Language(Enum):
    """Languages understood by the parsing core."""
    PYTHON = "python"
    JAVASCRIPT = "javascript"

    @classmethod
    def from_value(cls, value: Any) -> "Language":
        """
        Resolve a language tag.

        Args:
            value: A Language member or a tag such as 'python', 'javascript'
                or 'typescript' (treated as JavaScript)

        Returns:
            Matching Language

        Raises:
            ValueError: If the tag is not supported
        """
        if isinstance(value, cls):
            return value
        tag = str(value or "").strip().lower()
        if tag in ("typescript", "ts", "js"):
            return cls.JAVASCRIPT
        if tag == "py":
            return cls.PYTHON
        for member in cls:
            if member.value == tag:
                return member
        raise ValueError(f"Unsupported language: {value!r}")


class FunctionKind(Enum):
    """What kind of construct a header introduced."""
    FUNCTION = "function"
    METHOD = "method"
    CLASS = "class"


class DocstringStyle(Enum):
    """Documentation styles the generator can be asked for."""
    GOOGLE = "google"
    NUMPY = "numpy"
    SPHINX = "sphinx"
    JSDOC = "jsdoc"

    @classmethod
    def from_value(cls, value: Any) -> "DocstringStyle":
        if isinstance(value, cls):
            return value
        tag = str(value or "").strip().lower()
        for member in cls:
            if member.value == tag:
                return member
        raise ValueError(f"Unsupported docstring style: {value!r}")


@dataclass(frozen=True)
class Parameter:
    """A single declared parameter."""
    name: str
    type: Optional[str] = None
    default_value: Optional[str] = None


@dataclass(frozen=True)
class FunctionRecord:
    """A function, method or class found by an extractor."""
    name: str
    kind: FunctionKind
    start_line: int  # 1-based, inclusive
    end_line: int  # 1-based, inclusive
    original_code: str
    parameters: List[Parameter] = field(default_factory=list)
    return_type: Optional[str] = None
    existing_documentation: Optional[str] = None
    decorators: List[str] = field(default_factory=list)
    generated_documentation: Optional[str] = None

    # list fields make records unhashable; they compare by value only
    __hash__ = None

    @property
    def body(self) -> str:
        """Source lines after the header line."""
        _, _, rest = self.original_code.partition("\n")
        return rest

    @property
    def has_documentation(self) -> bool:
        return self.existing_documentation is not None

    def with_generated(self, text: Optional[str]) -> "FunctionRecord":
        """Return a copy carrying generated documentation."""
        return replace(self, generated_documentation=text)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation."""
        data = asdict(self)
        data["kind"] = self.kind.value
        return data

    def to_generation_request(self) -> Dict[str, Any]:
        """Payload shape consumed by the documentation generator."""
        return {
            "name": self.name,
            "parameters": [p.name for p in self.parameters],
            "body": self.body.strip(),
            "kind": self.kind.value,
        }


@dataclass
class ParsedFile:
    """Result of parsing a whole file."""
    file_name: str
    language: Language
    functions: List[FunctionRecord]
    raw_content: str
    parsed_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_name": self.file_name,
            "language": self.language.value,
            "functions": [f.to_dict() for f in self.functions],
            "raw_content": self.raw_content,
            "parsed_at": self.parsed_at.isoformat(),
        }
