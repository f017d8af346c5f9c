"""Protocol for syntax tree providers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from astprofile.core.models import NodeKind


class TreeProvider(Protocol):
    """Protocol for syntax tree providers."""

    def supports(self, file: Path) -> bool:
        """Check if this provider supports the given file."""
        ...

    def parse(self, file: Path) -> SyntaxTree:
        """Parse a file into a navigable syntax tree."""
        ...

    def children(self, node: Any) -> Sequence[Any]:
        """Ordered child nodes of a node."""
        ...

    def kind(self, node: Any) -> NodeKind:
        """Syntactic category of a node."""
        ...

    def label(self, node: Any) -> str:
        """Display text for a node."""
        ...


@dataclass
class SyntaxTree:
    """A parsed source file: its root node and the provider that can walk it."""

    file: Path | None
    root: Any
    provider: TreeProvider
