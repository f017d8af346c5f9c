"""Unit tests for DOT emission."""

from astprofile.core.dot import DotEmitter, clean_label, node_name
from astprofile.core.models import GraphEdge, GraphNode


class TestDotEmitter:
    """Tests for the DotEmitter sink."""

    def test_records_keep_emission_order(self) -> None:
        emitter = DotEmitter()
        emitter.emit_node(0, "root")
        emitter.emit_node(1, "child")
        emitter.emit_edge(0, 1)

        assert emitter.records == [
            GraphNode(id=0, label="root"),
            GraphNode(id=1, label="child"),
            GraphEdge(parent_id=0, child_id=1),
        ]
        assert len(emitter) == 3

    def test_nodes_and_edges_are_split(self) -> None:
        emitter = DotEmitter()
        emitter.emit_node(0, "a")
        emitter.emit_node(1, "b")
        emitter.emit_edge(0, 1)

        assert [n.id for n in emitter.nodes] == [0, 1]
        assert [(e.parent_id, e.child_id) for e in emitter.edges] == [(0, 1)]

    def test_finalize_wraps_in_digraph(self) -> None:
        emitter = DotEmitter()
        emitter.emit_node(0, "main")
        emitter.emit_node(1, "x")
        emitter.emit_edge(0, 1)

        source = emitter.finalize()

        assert source.startswith("digraph G {")
        assert source.rstrip().endswith("}")
        assert "node0 -> node1" in source
        assert "node0 [label=main]" in source

    def test_finalize_empty(self) -> None:
        source = DotEmitter().finalize()
        assert source.startswith("digraph G {")
        assert "->" not in source

    def test_quotes_are_escaped(self) -> None:
        emitter = DotEmitter()
        emitter.emit_node(0, 'say "hi"')

        source = emitter.finalize()

        assert '\\"hi\\"' in source

    def test_backslashes_are_escaped(self) -> None:
        emitter = DotEmitter()
        emitter.emit_node(0, "a\\b")

        source = emitter.finalize()

        assert '"a\\\\b"' in source

    def test_label_cannot_close_the_graph(self) -> None:
        emitter = DotEmitter()
        emitter.emit_node(0, '"]; } digraph evil {')

        source = emitter.finalize()

        assert source.count("digraph") == 2
        assert source.startswith("digraph G {")
        assert '\\"]; } digraph evil {' in source

    def test_repr(self) -> None:
        emitter = DotEmitter()
        emitter.emit_node(0, "a")
        assert repr(emitter) == "DotEmitter(nodes=1, edges=0)"


class TestLabels:
    """Tests for label cleanup."""

    def test_node_name(self) -> None:
        assert node_name(7) == "node7"

    def test_whitespace_is_collapsed(self) -> None:
        assert clean_label("a\n  b\tc") == "a b c"

    def test_long_labels_are_truncated(self) -> None:
        label = clean_label("x" * 100)
        assert len(label) == 40
        assert label.endswith("...")

    def test_short_labels_unchanged(self) -> None:
        assert clean_label("main") == "main"
