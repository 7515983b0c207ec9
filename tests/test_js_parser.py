# tests/test_js_parser.py

"""
Unit tests for the JavaScript/TypeScript extractor.
"""

from docgen.code_parser import extract
from docgen.models import FunctionKind, Parameter


class TestJavaScriptExtraction:
    """Test cases for header shapes and brace counting."""

    def test_empty_input(self):
        assert extract("", "javascript") == []

    def test_one_line_function_with_object_literal(self):
        """Test that all four braces on one line close the body on that line."""
        records = extract("function f() { return {a:1}; }", "javascript")

        assert len(records) == 1
        assert records[0].name == "f"
        assert records[0].start_line == records[0].end_line == 1

    def test_sample_module(self, projects_dir):
        source = (projects_dir / "sample_module.js").read_text(encoding="utf-8")

        records = extract(source, "javascript")

        assert [r.name for r in records] == ["add", "multiply", "constructor", "compute", "load"]
        assert [(r.start_line, r.end_line) for r in records] == [
            (9, 11), (13, 15), (18, 20), (22, 27), (30, 33),
        ]
        assert [r.kind for r in records] == [
            FunctionKind.FUNCTION, FunctionKind.FUNCTION,
            FunctionKind.METHOD, FunctionKind.METHOD, FunctionKind.FUNCTION,
        ]

    def test_sample_module_details(self, projects_dir):
        source = (projects_dir / "sample_module.js").read_text(encoding="utf-8")
        lines = source.split("\n")

        records = {r.name: r for r in extract(source, "javascript")}

        assert records["add"].existing_documentation == (
            "Add two numbers.\n"
            "@param {number} a - First number\n"
            "@param {number} b - Second number\n"
            "@returns {number} Sum of a and b"
        )
        assert records["multiply"].existing_documentation is None
        assert records["multiply"].parameters == [
            Parameter(name="x"), Parameter(name="y", default_value="1"),
        ]
        assert records["load"].return_type == "Promise<string>"
        assert records["load"].parameters == [Parameter(name="url", type="string")]
        for record in records.values():
            assert record.original_code.split("\n") == lines[record.start_line - 1:record.end_line]

    def test_typed_arrow_function(self):
        source = (
            "export const sum = async (a: number, b = 2): Promise<number> => {\n"
            "  return a + b;\n"
            "};\n"
        )
        record = extract(source, "javascript")[0]

        assert record.name == "sum"
        assert record.return_type == "Promise<number>"
        assert record.parameters == [
            Parameter(name="a", type="number"), Parameter(name="b", default_value="2"),
        ]
        assert (record.start_line, record.end_line) == (1, 3)

    def test_typescript_is_an_alias(self):
        records = extract("function f(x: string): void {\n}\n", "typescript")

        assert records[0].return_type == "void"

    def test_control_flow_blocks_are_not_functions(self):
        source = (
            "if (ready) {\n"
            "  start();\n"
            "}\n"
            "for (let i = 0; i < 3; i++) {\n"
            "  tick(i);\n"
            "}\n"
            "while (busy) {\n"
            "}\n"
        )
        assert extract(source, "javascript") == []

    def test_nested_functions_are_not_reported(self):
        source = (
            "function outer() {\n"
            "  function inner() {\n"
            "    return 1;\n"
            "  }\n"
            "  return inner();\n"
            "}\n"
        )
        records = extract(source, "javascript")

        assert [r.name for r in records] == ["outer"]
        assert records[0].end_line == 6

    def test_unbalanced_braces_run_to_end_of_file(self):
        records = extract("function f() {\n  return 1;\n", "javascript")

        assert records[0].end_line == 3

    def test_crlf_line_endings(self):
        record = extract("function f() {\r\n  return 1;\r\n}\r\n", "javascript")[0]

        assert record.end_line == 3
        assert record.original_code == "function f() {\n  return 1;\n}"


class TestJSDocDetection:
    """Test cases for JSDoc blocks above headers."""

    def test_single_line_jsdoc(self):
        source = "/** Says hello. */\nfunction hello() {\n}\n"

        assert extract(source, "javascript")[0].existing_documentation == "Says hello."

    def test_plain_block_comment_is_ignored(self):
        source = "/* plain */\nfunction f() {}\n"

        record = extract(source, "javascript")[0]

        assert record.existing_documentation is None
        assert record.start_line == 2

    def test_detached_jsdoc_is_ignored(self):
        source = "/** Orphan. */\n\nfunction f() {\n}\n"

        assert extract(source, "javascript")[0].existing_documentation is None

    def test_trailing_comment_after_code_is_ignored(self):
        source = "let x = 1; /* note */\nfunction f() {\n}\n"

        assert extract(source, "javascript")[0].existing_documentation is None
