# tests/test_models.py

"""
Unit tests for the shared data model.
"""

import pytest

from docgen.code_parser import extract
from docgen.models import DocstringStyle, FunctionKind, Language, Parameter


class TestFunctionRecord:
    """Test cases for record equality, hashing and serialization."""

    def test_records_compare_by_value_but_are_unhashable(self):
        source = "@cache\ndef add(a, b):\n    return a + b\n"
        first = extract(source, "python")[0]
        second = extract(source, "python")[0]

        assert first == second
        with pytest.raises(TypeError):
            hash(first)

    def test_parameters_are_hashable(self):
        assert len({Parameter(name="a"), Parameter(name="a")}) == 1

    def test_with_generated_returns_copy(self):
        record = extract("def f():\n    pass\n", "python")[0]

        updated = record.with_generated("Doc.")

        assert updated.generated_documentation == "Doc."
        assert record.generated_documentation is None

    def test_to_dict(self):
        record = extract("def f(x: int):\n    pass\n", "python")[0]

        data = record.to_dict()

        assert data["kind"] == "function"
        assert data["parameters"] == [{"name": "x", "type": "int", "default_value": None}]


class TestEnums:
    """Test cases for tag resolution."""

    def test_language_aliases(self):
        assert Language.from_value("ts") is Language.JAVASCRIPT
        assert Language.from_value("PY") is Language.PYTHON

    def test_style_from_value(self):
        assert DocstringStyle.from_value("jsdoc") is DocstringStyle.JSDOC
        assert FunctionKind("class") is FunctionKind.CLASS
