"""Data models for astprofile."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class NodeKind(Enum):
    """Syntactic categories the traversal distinguishes."""

    CONDITIONAL = "conditional"
    LOOP = "loop"
    CASE = "case"
    CONDITIONAL_EXPRESSION = "conditional_expression"
    VARIABLE_DECLARATION = "variable_declaration"
    OTHER = "other"


@dataclass
class Metrics:
    """Counters threaded through a single traversal."""

    cyclomatic: int = 1
    var_decl_count: int = 0
    current_loop_depth: int = 0
    max_loop_depth: int = 0


@dataclass(frozen=True)
class GraphNode:
    """A node record: one visited syntax-tree element."""

    id: int
    label: str


@dataclass(frozen=True)
class GraphEdge:
    """An edge record from a parent node to a child node."""

    parent_id: int
    child_id: int


@dataclass
class AnalysisResult:
    """Everything produced by one traversal of a source file."""

    file: Path | None
    metrics: Metrics
    nodes: list[GraphNode] = field(default_factory=list)
    edges: list[GraphEdge] = field(default_factory=list)
    dot: str = ""

    @property
    def num_nodes(self) -> int:
        return len(self.nodes)

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    def __repr__(self) -> str:
        return (
            f"AnalysisResult(file={self.file}, cyclomatic={self.metrics.cyclomatic}, "
            f"max_loop_depth={self.metrics.max_loop_depth}, "
            f"var_decls={self.metrics.var_decl_count}, "
            f"nodes={self.num_nodes}, edges={self.num_edges})"
        )
