"""
Tree providers: Turn source files into walkable syntax trees.

This module provides the parsing layer the traversal engine consumes through
the TreeProvider protocol; the engine never touches a parser directly.

Components:
    - TreeProvider: Protocol defining the provider interface
    - SyntaxTree: Parsed root node plus the provider that walks it
    - ClangTreeProvider: libclang-based provider for C and C++ files
    - PythonTreeProvider: ast-based provider for Python files

Adding a new language:
    1. Create a provider class implementing the TreeProvider protocol
    2. Map its node types onto NodeKind in kind()
    3. Register it in get_provider()
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from astprofile.core.exceptions import UnsupportedLanguageError
from astprofile.languages.base import SyntaxTree, TreeProvider
from astprofile.languages.python import PythonTreeProvider


def get_provider(
    file: Path,
    clang_args: Sequence[str] = (),
    include_headers: bool = False,
) -> TreeProvider:
    """Pick the provider for a file based on its suffix."""
    python = PythonTreeProvider()
    if python.supports(file):
        return python

    from astprofile.languages.c import C_SUFFIXES, ClangTreeProvider

    if file.suffix.lower() in C_SUFFIXES:
        return ClangTreeProvider(args=clang_args, include_headers=include_headers)

    raise UnsupportedLanguageError(f"No tree provider for '{file.suffix or file.name}' files")


__all__ = [
    "PythonTreeProvider",
    "SyntaxTree",
    "TreeProvider",
    "get_provider",
]
