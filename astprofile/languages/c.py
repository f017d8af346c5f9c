"""C and C++ syntax trees from libclang."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from clang import cindex
from clang.cindex import Cursor

from astprofile.core.exceptions import ParseError
from astprofile.core.models import NodeKind
from astprofile.languages.base import SyntaxTree

logger = logging.getLogger(__name__)

C_SUFFIXES = frozenset({".c", ".h", ".cc", ".cpp", ".cxx", ".c++", ".hh", ".hpp", ".hxx"})

_KINDS: dict[str, NodeKind] = {
    "IF_STMT": NodeKind.CONDITIONAL,
    "FOR_STMT": NodeKind.LOOP,
    "WHILE_STMT": NodeKind.LOOP,
    "DO_STMT": NodeKind.LOOP,
    "CXX_FOR_RANGE_STMT": NodeKind.LOOP,
    "CASE_STMT": NodeKind.CASE,
    "CONDITIONAL_OPERATOR": NodeKind.CONDITIONAL_EXPRESSION,
    "VAR_DECL": NodeKind.VARIABLE_DECLARATION,
}


class ClangTreeProvider:
    """Tree provider for C and C++ files using libclang.

    By default the translation unit's children are limited to cursors
    located in the main file, so included headers are not walked.
    """

    def __init__(self, args: Sequence[str] = (), include_headers: bool = False) -> None:
        self._args = list(args)
        self._include_headers = include_headers

    def supports(self, file: Path) -> bool:
        """Check if this provider supports the given file."""
        return file.suffix.lower() in C_SUFFIXES

    def parse(self, file: Path) -> SyntaxTree:
        """Parse a file into a translation unit and return its cursor."""
        if not file.is_file():
            raise ParseError(f"Cannot read {file}: no such file")

        try:
            index = cindex.Index.create()
            unit = index.parse(str(file), args=self._args)
        except cindex.LibclangError as e:
            raise ParseError(f"libclang is not available: {e}") from e
        except cindex.TranslationUnitLoadError as e:
            raise ParseError(f"Unable to parse translation unit {file}: {e}") from e

        for diagnostic in unit.diagnostics:
            if diagnostic.severity >= cindex.Diagnostic.Error:
                logger.warning("%s", diagnostic)

        # The cursor keeps a reference to its translation unit.
        return SyntaxTree(file=file, root=unit.cursor, provider=self)

    def children(self, node: Cursor) -> list[Cursor]:
        children = list(node.get_children())
        if self._include_headers or _kind_name(node) != "TRANSLATION_UNIT":
            return children
        return [c for c in children if _in_file(c, node.spelling)]

    def kind(self, node: Cursor) -> NodeKind:
        return _KINDS.get(_kind_name(node), NodeKind.OTHER)

    def label(self, node: Cursor) -> str:
        return str(node.spelling) or _kind_name(node)


def _kind_name(node: Cursor) -> str:
    """Cursor kind name, or UNKNOWN for kinds this binding cannot decode."""
    try:
        return str(node.kind.name)
    except ValueError:
        return "UNKNOWN"


def _in_file(cursor: Cursor, filename: str) -> bool:
    location_file = cursor.location.file
    return location_file is not None and location_file.name == filename
