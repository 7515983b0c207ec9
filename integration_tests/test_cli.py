"""
End-to-end tests for the docgen command line.
"""

import json

from docgen.code_parser import extract


PYTHON_SOURCE = '''import math


def hypotenuse(a, b):
    return math.sqrt(a ** 2 + b ** 2)


class Point:
    """Old summary."""

    def __init__(self, x, y):
        self.x = x
        self.y = y
'''

JS_SOURCE = '''export function add(a, b) {
  return a + b;
}

export const twice = (x) => {
  return add(x, x);
};
'''


class TestDocumentPython:
    """Documenting a Python module."""

    def test_writes_documented_copy(self, cli, tmp_path, llm):
        source = tmp_path / "geometry.py"
        source.write_text(PYTHON_SOURCE, encoding="utf-8")

        assert cli(str(source)) == 0

        output = tmp_path / "geometry.documented.py"
        records = extract(output.read_text(encoding="utf-8"), "python")
        assert [(r.name, r.existing_documentation) for r in records] == [
            ("hypotenuse", "Does the work."),
            ("Point", "Does the work."),
        ]
        assert source.read_text(encoding="utf-8") == PYTHON_SOURCE
        assert "Google style" in llm.generate.call_args.kwargs["prompt"]

    def test_in_place_and_style(self, cli, tmp_path, llm):
        source = tmp_path / "geometry.py"
        source.write_text(PYTHON_SOURCE, encoding="utf-8")

        assert cli(str(source), "--in-place", "--style", "sphinx") == 0

        assert '    Does the work.' in source.read_text(encoding="utf-8").split("\n")
        assert ":param" in llm.generate.call_args.kwargs["prompt"]

    def test_second_run_uses_cache(self, cli, tmp_path, llm):
        source = tmp_path / "geometry.py"
        source.write_text(PYTHON_SOURCE, encoding="utf-8")

        cli(str(source))
        cli(str(source))

        assert llm.generate.call_count == 2

    def test_history_entry_is_saved(self, cli, tmp_path, capsys):
        source = tmp_path / "geometry.py"
        source.write_text(PYTHON_SOURCE, encoding="utf-8")

        cli(str(source), "--output", str(tmp_path / "out.py"))

        with open(tmp_path / "history.json", encoding="utf-8") as f:
            entries = json.load(f)
        assert len(entries) == 1
        assert entries[0]["filename"] == "geometry.py"
        assert entries[0]["content_before"] == PYTHON_SOURCE
        assert entries[0]["content_after"] == (tmp_path / "out.py").read_text(encoding="utf-8")

        capsys.readouterr()
        assert cli("--history") == 0
        assert "geometry.py" in capsys.readouterr().out


class TestDocumentJavaScript:
    """Documenting a JavaScript module."""

    def test_jsdoc_is_inserted(self, cli, tmp_path, llm):
        source = tmp_path / "math.js"
        source.write_text(JS_SOURCE, encoding="utf-8")

        assert cli(str(source), "--style", "numpy") == 0

        records = extract((tmp_path / "math.documented.js").read_text(encoding="utf-8"),
                          "javascript")
        assert [(r.name, r.existing_documentation) for r in records] == [
            ("add", "Does the work."), ("twice", "Does the work."),
        ]
        assert "JSDoc" in llm.generate.call_args.kwargs["prompt"]


class TestFailures:
    """Exit codes for runs that cannot complete."""

    def test_list_only(self, cli, tmp_path, llm, capsys):
        source = tmp_path / "geometry.py"
        source.write_text(PYTHON_SOURCE, encoding="utf-8")

        assert cli(str(source), "--list") == 0

        out = capsys.readouterr().out
        assert "hypotenuse(a, b)" in out
        assert "[documented]" in out
        llm.generate.assert_not_called()

    def test_no_functions(self, cli, tmp_path):
        source = tmp_path / "constants.py"
        source.write_text("ANSWER = 42\n", encoding="utf-8")

        assert cli(str(source)) == 1
        assert not (tmp_path / "constants.documented.py").exists()

    def test_unsupported_file(self, cli, tmp_path):
        source = tmp_path / "notes.txt"
        source.write_text("def f():\n    pass\n", encoding="utf-8")

        assert cli(str(source)) == 1

    def test_generation_failure(self, cli, tmp_path, llm):
        llm.generate.side_effect = RuntimeError("model offline")
        source = tmp_path / "geometry.py"
        source.write_text(PYTHON_SOURCE, encoding="utf-8")

        assert cli(str(source)) == 1
        assert not (tmp_path / "geometry.documented.py").exists()
