# tests/test_code_parser.py

"""
Unit tests for the public parsing entry points.
"""

import pytest

from docgen.code_parser import (
    as_mapping,
    detect_language,
    extract,
    merge_generated,
    parse_file,
    parse_parameters,
    read_source,
)
from docgen.models import FunctionKind, Language, Parameter


class TestLanguageSelection:
    """Test cases for language tags and file extensions."""

    @pytest.mark.parametrize("name,expected", [
        ("module.py", Language.PYTHON),
        ("MODULE.PY", Language.PYTHON),
        ("app.js", Language.JAVASCRIPT),
        ("app.tsx", Language.JAVASCRIPT),
        ("README", Language.JAVASCRIPT),
    ])
    def test_detect_language(self, name, expected):
        assert detect_language(name) is expected

    def test_unknown_language_tag(self):
        with pytest.raises(ValueError):
            extract("def f():\n    pass\n", "ruby")

    def test_language_member_is_accepted(self):
        assert extract("def f():\n    pass\n", Language.PYTHON)[0].name == "f"


class TestFacade:
    """Test cases for parse_parameters, merge_generated and as_mapping."""

    def test_parse_parameters_javascript(self):
        assert parse_parameters("...rest", "javascript") == [Parameter(name="...rest")]

    def test_merge_generated(self):
        records = extract("def a():\n    pass\n\ndef b():\n    pass\n", "python")

        merged = merge_generated(records, {"a": "Doc for a."})

        assert merged[0].generated_documentation == "Doc for a."
        assert merged[1].generated_documentation is None
        assert records[0].generated_documentation is None

    def test_as_mapping_from_pairs(self):
        pairs = [
            {"name": "a", "docstring": "A."},
            {"name": "b", "docstring": ""},
            {"docstring": "orphan"},
        ]

        assert as_mapping(pairs) == {"a": "A."}
        assert as_mapping(None) == {}

    def test_generation_request_payload(self):
        record = extract("def add(a, b=1):\n    return a + b\n", "python")[0]

        assert record.to_generation_request() == {
            "name": "add",
            "parameters": ["a", "b"],
            "body": "return a + b",
            "kind": "function",
        }


class TestParseFile:
    """Test cases for reading files from disk."""

    def test_parse_python_file(self, projects_dir):
        parsed = parse_file(str(projects_dir / "sample_module.py"))

        assert parsed.file_name == "sample_module.py"
        assert parsed.language is Language.PYTHON
        assert [f.name for f in parsed.functions][:2] == ["calculate_hypotenuse", "process_data"]
        assert parsed.to_dict()["language"] == "python"

    def test_language_override(self, tmp_path):
        path = tmp_path / "script.txt"
        path.write_text("function f() {\n}\n", encoding="utf-8")

        parsed = parse_file(str(path), "javascript")

        assert parsed.functions[0].kind is FunctionKind.FUNCTION

    def test_missing_file(self, tmp_path):
        assert parse_file(str(tmp_path / "missing.py")) is None

    def test_latin1_fallback(self, tmp_path):
        path = tmp_path / "legacy.py"
        path.write_bytes("# caf\xe9\ndef f():\n    pass\n".encode("latin-1"))

        assert read_source(str(path)).startswith("# caf\xe9")

    def test_line_endings_are_kept(self, tmp_path):
        path = tmp_path / "crlf.py"
        path.write_bytes(b"def f():\r\n    pass\r\n")

        assert read_source(str(path)) == "def f():\r\n    pass\r\n"
