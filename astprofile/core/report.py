"""Advisory complexity labels derived from traversal metrics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from astprofile.core.models import AnalysisResult, Metrics


@dataclass(frozen=True)
class ComplexityReport:
    """Human-readable summary of a traversal.

    The cyclomatic value is a decision-point count (1 + branches), not a
    number computed from a control-flow graph. The time and space labels
    are heuristics: loop nesting stands in for the polynomial degree and the
    raw declaration count annotates a linear space estimate.
    """

    cyclomatic: int
    max_loop_depth: int
    var_decl_count: int

    @classmethod
    def from_metrics(cls, metrics: Metrics) -> ComplexityReport:
        return cls(
            cyclomatic=metrics.cyclomatic,
            max_loop_depth=metrics.max_loop_depth,
            var_decl_count=metrics.var_decl_count,
        )

    @property
    def time_complexity(self) -> str:
        if self.max_loop_depth == 0:
            return "O(1)"
        if self.max_loop_depth == 1:
            return "O(n)"
        return f"O(n^{self.max_loop_depth})"

    @property
    def space_complexity(self) -> str:
        return f"O(n) with {self.var_decl_count} variable declarations"

    def lines(self) -> list[str]:
        """Report lines in display order."""
        return [
            f"Cyclomatic Complexity: {self.cyclomatic}",
            f"Estimated Time Complexity: {self.time_complexity} "
            "based on max loop nesting depth",
            f"Estimated Space Complexity: {self.space_complexity}",
        ]

    def to_dict(self) -> dict[str, Any]:
        return {
            "cyclomatic": self.cyclomatic,
            "max_loop_depth": self.max_loop_depth,
            "var_decl_count": self.var_decl_count,
            "time_complexity": self.time_complexity,
            "space_complexity": self.space_complexity,
        }


def summarize(result: AnalysisResult, include_graph: bool = False) -> dict[str, Any]:
    """Convert an AnalysisResult to a JSON-serializable dict."""
    summary: dict[str, Any] = {
        "file": str(result.file) if result.file else None,
        **ComplexityReport.from_metrics(result.metrics).to_dict(),
        "nodes": result.num_nodes,
        "edges": result.num_edges,
    }
    if include_graph:
        summary["dot"] = result.dot
    return summary
