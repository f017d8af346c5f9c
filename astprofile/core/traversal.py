"""Single-pass DFS that accumulates metrics and emits the tree graph.

Each visit assigns the next node id, emits the node and its parent edge,
pushes itself on the ancestor stack, applies its metric contribution, then
descends. Loop depth is restored after the children return and before the
pop, so ``current_loop_depth`` always reflects ancestor loops only.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from astprofile.config import DEFAULT_MAX_DEPTH
from astprofile.core.dot import DotEmitter
from astprofile.core.exceptions import TreeTooDeepError
from astprofile.core.models import AnalysisResult, Metrics, NodeKind

if TYPE_CHECKING:
    from astprofile.languages.base import SyntaxTree, TreeProvider

logger = logging.getLogger(__name__)

_RECURSION_HEADROOM = 200


@dataclass(frozen=True)
class Contribution:
    """What visiting a node of some kind adds to the metrics."""

    decision: bool = False
    loop: bool = False
    var_decl: bool = False


def classify(kind: NodeKind) -> Contribution:
    """Map a node kind to its metric contribution."""
    match kind:
        case NodeKind.LOOP:
            return Contribution(decision=True, loop=True)
        case NodeKind.CONDITIONAL | NodeKind.CASE | NodeKind.CONDITIONAL_EXPRESSION:
            return Contribution(decision=True)
        case NodeKind.VARIABLE_DECLARATION:
            return Contribution(var_decl=True)
        case NodeKind.OTHER:
            return Contribution()


@dataclass
class TraversalContext:
    """Mutable state owned by one traversal."""

    provider: TreeProvider
    max_depth: int = DEFAULT_MAX_DEPTH
    metrics: Metrics = field(default_factory=Metrics)
    emitter: DotEmitter = field(default_factory=DotEmitter)
    stack: list[int] = field(default_factory=list)
    next_id: int = 0

    def allocate_id(self) -> int:
        node_id = self.next_id
        self.next_id += 1
        return node_id


def visit(node: Any, ctx: TraversalContext) -> bool:
    """Visit a node and its whole subtree.

    Never prunes, so the return value is always True (continue).

    Raises:
        TreeTooDeepError: If the node would sit deeper than ``ctx.max_depth``.
    """
    if len(ctx.stack) >= ctx.max_depth:
        raise TreeTooDeepError(
            f"Syntax tree is deeper than the maximum of {ctx.max_depth} levels"
        )

    provider = ctx.provider
    metrics = ctx.metrics

    node_id = ctx.allocate_id()
    ctx.emitter.emit_node(node_id, provider.label(node))
    if ctx.stack:
        ctx.emitter.emit_edge(ctx.stack[-1], node_id)
    ctx.stack.append(node_id)

    contribution = classify(provider.kind(node))
    if contribution.decision:
        metrics.cyclomatic += 1
    if contribution.var_decl:
        metrics.var_decl_count += 1
    if contribution.loop:
        metrics.current_loop_depth += 1
        metrics.max_loop_depth = max(metrics.max_loop_depth, metrics.current_loop_depth)

    for child in provider.children(node):
        visit(child, ctx)

    if contribution.loop:
        metrics.current_loop_depth -= 1
    ctx.stack.pop()
    return True


@contextmanager
def _recursion_headroom(max_depth: int) -> Iterator[None]:
    """Temporarily raise the interpreter recursion limit to fit max_depth."""
    previous = sys.getrecursionlimit()
    needed = max_depth + _RECURSION_HEADROOM
    if needed > previous:
        sys.setrecursionlimit(needed)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


def traverse(tree: SyntaxTree, max_depth: int = DEFAULT_MAX_DEPTH) -> AnalysisResult:
    """Walk a parsed tree once and collect metrics plus the DOT graph."""
    ctx = TraversalContext(provider=tree.provider, max_depth=max_depth)

    with _recursion_headroom(max_depth):
        visit(tree.root, ctx)

    logger.debug(
        "Visited %d nodes in %s (cyclomatic=%d, max_loop_depth=%d)",
        ctx.next_id,
        tree.file,
        ctx.metrics.cyclomatic,
        ctx.metrics.max_loop_depth,
    )

    return AnalysisResult(
        file=tree.file,
        metrics=ctx.metrics,
        nodes=ctx.emitter.nodes,
        edges=ctx.emitter.edges,
        dot=ctx.emitter.finalize(),
    )
