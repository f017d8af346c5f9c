"""Tests for error handling paths."""

import tempfile
from pathlib import Path

import graphviz
import pytest

from astprofile.config import AnalysisConfig, RenderConfig
from astprofile.core.analyzer import analyze_file
from astprofile.core.exceptions import (
    AstProfileError,
    ParseError,
    RenderError,
    TreeTooDeepError,
    UnsupportedLanguageError,
)
from astprofile.languages import get_provider
from astprofile.languages.python import PythonTreeProvider
from astprofile.render import render_graph, run_pipeline


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as td:
        yield Path(td)


class TestParserErrors:
    """Tests for tree provider error handling."""

    def test_parse_syntax_error(self, temp_dir: Path) -> None:
        """Test that syntax errors raise ParseError."""
        bad_code = """
def broken(
    # Missing closing paren and colon
"""
        file_path = temp_dir / "bad_syntax.py"
        file_path.write_text(bad_code)

        with pytest.raises(ParseError) as exc_info:
            PythonTreeProvider().parse(file_path)

        assert "Syntax error" in str(exc_info.value)

    def test_parse_encoding_error(self, temp_dir: Path) -> None:
        """Test that encoding errors raise ParseError."""
        file_path = temp_dir / "bad_encoding.py"
        file_path.write_bytes(b"\xff\xfe invalid utf-8 \x80\x81")

        with pytest.raises(ParseError) as exc_info:
            PythonTreeProvider().parse(file_path)

        assert "Cannot read" in str(exc_info.value)

    def test_parse_missing_file(self, temp_dir: Path) -> None:
        """Test that a missing file raises ParseError, not OSError."""
        with pytest.raises(ParseError) as exc_info:
            analyze_file(temp_dir / "missing.py")

        assert "Cannot read" in str(exc_info.value)

    def test_parse_empty_file(self, temp_dir: Path) -> None:
        """Test that an empty file is a tree with only a root."""
        file_path = temp_dir / "empty.py"
        file_path.write_text("")

        result = analyze_file(file_path)

        assert result.num_nodes == 1
        assert result.num_edges == 0
        assert result.metrics.cyclomatic == 1

    def test_unsupported_language(self, temp_dir: Path) -> None:
        """Test that unknown suffixes raise UnsupportedLanguageError."""
        with pytest.raises(UnsupportedLanguageError) as exc_info:
            get_provider(temp_dir / "notes.txt")

        assert ".txt" in str(exc_info.value)

    def test_parse_deeply_nested_expression(self, temp_dir: Path) -> None:
        """Test that an expression too deep for the parser is an AstProfileError."""
        file_path = temp_dir / "nested.py"
        file_path.write_text("x = " + "-" * 3000 + "1\n")

        with pytest.raises((ParseError, TreeTooDeepError)):
            analyze_file(file_path)


class TestDepthErrors:
    """Tests for the traversal depth limit."""

    def test_tree_too_deep(self, temp_dir: Path) -> None:
        """Module -> Assign -> Name needs three levels."""
        file_path = temp_dir / "shallow.py"
        file_path.write_text("x = 1\n")

        with pytest.raises(TreeTooDeepError):
            analyze_file(file_path, AnalysisConfig(max_depth=2))

        result = analyze_file(file_path, AnalysisConfig(max_depth=3))
        assert result.metrics.var_decl_count == 1


class TestRenderErrors:
    """Tests for render pipeline failures."""

    def test_missing_dot_executable(
        self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def fake_render(*args: object, **kwargs: object) -> str:
            raise graphviz.ExecutableNotFound(["dot"])

        monkeypatch.setattr(graphviz, "render", fake_render)
        config = RenderConfig(output_dir=temp_dir)

        with pytest.raises(RenderError) as exc_info:
            render_graph("digraph G {\n}\n", config)

        assert "not found" in str(exc_info.value)
        # The DOT file is written before rendering is attempted
        assert config.dot_path.exists()

    def test_viewer_failure_keeps_artifacts(
        self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def fake_render(engine: str, fmt: str, filepath: Path, **kwargs: object) -> str:
            Path(kwargs["outfile"]).write_text("<svg/>")  # type: ignore[arg-type]
            return str(kwargs["outfile"])

        def fake_view(*args: object, **kwargs: object) -> None:
            raise RuntimeError("no way to open files on this platform")

        monkeypatch.setattr(graphviz, "render", fake_render)
        monkeypatch.setattr(graphviz, "view", fake_view)
        config = RenderConfig(output_dir=temp_dir)

        with pytest.raises(RenderError) as exc_info:
            run_pipeline("digraph G {\n}\n", config)

        assert "viewer" in str(exc_info.value)
        assert config.dot_path.exists()
        assert config.image_path.exists()


class TestExceptionHierarchy:
    """Tests for exception class hierarchy."""

    @pytest.mark.parametrize(
        "error_type",
        [ParseError, UnsupportedLanguageError, TreeTooDeepError, RenderError],
    )
    def test_is_astprofile_error(self, error_type: type[Exception]) -> None:
        error = error_type("test")
        assert isinstance(error, AstProfileError)
        assert isinstance(error, Exception)
