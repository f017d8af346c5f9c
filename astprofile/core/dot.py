"""Graphviz DOT emission for the traversed syntax tree."""

from __future__ import annotations

import graphviz

from astprofile.core.models import GraphEdge, GraphNode

_MAX_LABEL_DISPLAY = 40


def node_name(node_id: int) -> str:
    """DOT identifier for a node id."""
    return f"node{node_id}"


def clean_label(label: str) -> str:
    """Collapse whitespace and truncate a label for display."""
    text = " ".join(label.split())
    if len(text) > _MAX_LABEL_DISPLAY:
        text = text[: _MAX_LABEL_DISPLAY - 3] + "..."
    return text


class DotEmitter:
    """Append-only sink for node and edge records.

    Records keep their emission order; finalize() turns them into a
    directed graph named ``G``.
    """

    __slots__ = ("_records", "_name")

    def __init__(self, name: str = "G") -> None:
        self._records: list[GraphNode | GraphEdge] = []
        self._name = name

    def emit_node(self, node_id: int, label: str) -> None:
        """Record a node. O(1)."""
        self._records.append(GraphNode(id=node_id, label=clean_label(label)))

    def emit_edge(self, parent_id: int, child_id: int) -> None:
        """Record an edge. O(1)."""
        self._records.append(GraphEdge(parent_id=parent_id, child_id=child_id))

    @property
    def records(self) -> list[GraphNode | GraphEdge]:
        return list(self._records)

    @property
    def nodes(self) -> list[GraphNode]:
        return [r for r in self._records if isinstance(r, GraphNode)]

    @property
    def edges(self) -> list[GraphEdge]:
        return [r for r in self._records if isinstance(r, GraphEdge)]

    def finalize(self) -> str:
        """Return the DOT source for everything emitted so far.

        Labels come from arbitrary source text, so backslashes are escaped
        before graphviz quotes them.
        """
        graph = graphviz.Digraph(name=self._name)
        for record in self._records:
            if isinstance(record, GraphNode):
                graph.node(node_name(record.id), label=graphviz.escape(record.label))
            else:
                graph.edge(node_name(record.parent_id), node_name(record.child_id))
        return graph.source

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"DotEmitter(nodes={len(self.nodes)}, edges={len(self.edges)})"
