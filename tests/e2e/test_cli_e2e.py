#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/e2e/test_cli_e2e.py
"""End-to-end tests for the all2rst command line.

The CLI runs as a subprocess, from an AST JSON file on disk to text on
stdout or in an output file.
"""

import subprocess
import sys

import pytest

from all2rst.ast import Document, Emphasis, Heading, Paragraph, RawBlock, Space, Text
from all2rst.ast.serialization import ast_to_json


def sample_document() -> Document:
    return Document(
        children=[
            Heading(level=1, content=[Text(content="Title")]),
            Paragraph(content=[Text(content="Hello"), Space(), Emphasis(content=[Text(content="world")])]),
        ],
        metadata={"title": "Sample"},
    )


@pytest.fixture
def document_file(tmp_path):
    path = tmp_path / "document.json"
    path.write_text(ast_to_json(sample_document(), indent=2), encoding="utf-8")
    return path


@pytest.mark.e2e
class TestCLIEndToEnd:
    """The CLI as a user runs it."""

    def _run_cli(self, args: list[str], stdin: str | None = None) -> subprocess.CompletedProcess:
        """Run ``python -m all2rst`` with the given arguments.

        Parameters
        ----------
        args : list[str]
            Command line arguments to pass to the CLI
        stdin : str or None
            Text fed to standard input

        Returns
        -------
        subprocess.CompletedProcess
            Result of the subprocess execution

        """
        cmd = [sys.executable, "-m", "all2rst"] + args
        return subprocess.run(cmd, capture_output=True, text=True, input=stdin)

    def test_render_to_stdout(self, document_file) -> None:
        result = self._run_cli([str(document_file)])
        assert result.returncode == 0
        assert result.stdout == "Title\n=====\n\nHello *world*\n"

    def test_render_from_stdin(self) -> None:
        result = self._run_cli(["-"], stdin=ast_to_json(sample_document()))
        assert result.returncode == 0
        assert "Hello *world*" in result.stdout

    def test_render_to_file(self, document_file, tmp_path) -> None:
        out = tmp_path / "document.rst"
        result = self._run_cli([str(document_file), "--out", str(out)])
        assert result.returncode == 0
        assert result.stdout == ""
        assert out.read_text(encoding="utf-8") == "Title\n=====\n\nHello *world*\n"

    def test_standalone(self, document_file) -> None:
        result = self._run_cli([str(document_file), "--standalone", "--toc"])
        assert result.returncode == 0
        assert result.stdout.startswith("======\nSample\n======\n\n.. contents::\n   :depth: 3\n..\n")

    def test_list_tables_and_columns(self, document_file) -> None:
        result = self._run_cli([str(document_file), "--list-tables", "--columns", "40", "--wrap", "none"])
        assert result.returncode == 0

    def test_rich_output(self, document_file) -> None:
        result = self._run_cli([str(document_file), "--rich"])
        assert result.returncode == 0
        assert "Hello" in result.stdout

    def test_validate_clean_output(self, document_file) -> None:
        result = self._run_cli([str(document_file), "--validate"])
        assert result.returncode == 0
        assert result.stderr == ""

    def test_validate_reports_problems(self, tmp_path) -> None:
        path = tmp_path / "broken.json"
        doc = Document(children=[RawBlock(format="rst", content="Some *unclosed emphasis")])
        path.write_text(ast_to_json(doc), encoding="utf-8")

        result = self._run_cli([str(path), "--validate"])
        assert result.returncode == 2
        assert "all2rst: WARNING" in result.stderr
        assert "Some *unclosed emphasis" in result.stdout

    def test_version(self) -> None:
        result = self._run_cli(["--version"])
        assert result.returncode == 0
        assert result.stdout.startswith("all2rst ")


@pytest.mark.e2e
class TestExitCodes:
    """Exit codes let scripts tell failures apart."""

    def _run_cli(self, args: list[str]) -> subprocess.CompletedProcess:
        return subprocess.run([sys.executable, "-m", "all2rst"] + args, capture_output=True, text=True)

    def test_missing_file(self, tmp_path) -> None:
        result = self._run_cli([str(tmp_path / "does_not_exist.json")])
        assert result.returncode == 3
        assert "Error" in result.stderr

    def test_malformed_json(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        result = self._run_cli([str(path)])
        assert result.returncode == 3
        assert "not valid JSON" in result.stderr

    def test_root_is_not_a_document(self, tmp_path) -> None:
        path = tmp_path / "text.json"
        path.write_text(ast_to_json(Text(content="x")), encoding="utf-8")
        result = self._run_cli([str(path)])
        assert result.returncode == 3
        assert "Expected a Document" in result.stderr

    def test_invalid_option_value(self, document_file) -> None:
        result = self._run_cli([str(document_file), "--columns", "0"])
        assert result.returncode == 2
        assert "columns must be positive" in result.stderr

    def test_bad_choice_is_usage_error(self, document_file) -> None:
        result = self._run_cli([str(document_file), "--wrap", "sometimes"])
        assert result.returncode == 2
        assert "invalid choice" in result.stderr
