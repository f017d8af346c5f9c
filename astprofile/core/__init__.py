"""
Core module: data models, exceptions, and the traversal engine.

Models (models.py):
    - NodeKind: Syntactic categories the metrics care about
    - Metrics: Counters accumulated during one traversal
    - GraphNode/GraphEdge: Records emitted for the tree graph
    - AnalysisResult: Metrics plus graph output for one file

Exceptions (exceptions.py):
    - AstProfileError: Base exception for all astprofile errors
    - ParseError: Source file could not be read or parsed
    - UnsupportedLanguageError: No tree provider for the file
    - TreeTooDeepError: Tree exceeds the traversal depth limit
    - RenderError: Graph render/view/cleanup failed

Traversal (traversal.py, dot.py, report.py):
    - visit/traverse: Fused metric accumulation and graph emission
    - DotEmitter: Sink that produces Graphviz DOT source
    - ComplexityReport: Advisory complexity labels
"""

from astprofile.core.dot import DotEmitter
from astprofile.core.exceptions import (
    AstProfileError,
    ParseError,
    RenderError,
    TreeTooDeepError,
    UnsupportedLanguageError,
)
from astprofile.core.models import AnalysisResult, GraphEdge, GraphNode, Metrics, NodeKind
from astprofile.core.report import ComplexityReport, summarize
from astprofile.core.traversal import TraversalContext, classify, traverse, visit

__all__ = [
    # Models
    "NodeKind",
    "Metrics",
    "GraphNode",
    "GraphEdge",
    "AnalysisResult",
    # Exceptions
    "AstProfileError",
    "ParseError",
    "UnsupportedLanguageError",
    "TreeTooDeepError",
    "RenderError",
    # Traversal
    "DotEmitter",
    "TraversalContext",
    "classify",
    "traverse",
    "visit",
    "ComplexityReport",
    "summarize",
]
