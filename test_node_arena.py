"""Tests for NodeArena."""

from node_arena import ROOT, NodeArena


class TestNodeArena:
    """Tests for node creation, edges and value flags."""

    def test_new_arena_has_only_root(self):
        """Test that a fresh arena holds just the valueless root."""
        arena = NodeArena()
        assert len(arena) == 1
        assert arena.value_count == 0
        assert not arena.has_value(ROOT)
        assert list(arena.edges(ROOT)) == []

    def test_add_child(self):
        """Test that children get fresh, stable indices."""
        arena = NodeArena()
        a = arena.add_child(ROOT, "a")
        b = arena.add_child(ROOT, "b")
        aa = arena.add_child(a, "a")

        assert (a, b, aa) == (1, 2, 3)
        assert arena.child(ROOT, "a") == a
        assert arena.child(a, "a") == aa
        assert arena.child(b, "a") is None
        assert len(arena) == 4

    def test_edges_in_creation_order(self):
        """Test that edges are reported in the order they were added."""
        arena = NodeArena()
        for part in "zya":
            arena.add_child(ROOT, part)
        assert [part for part, _ in arena.edges(ROOT)] == ["z", "y", "a"]

    def test_value_flags(self):
        """Test that set_value counts a node once and None is storable."""
        arena = NodeArena()
        v = arena.add_child(ROOT, "x")

        assert arena.value(v, "missing") == "missing"
        arena.set_value(v, None)
        assert arena.has_value(v)
        assert arena.value(v, "missing") is None
        assert arena.value_count == 1

        arena.set_value(v, 42)
        assert arena.value(v) == 42
        assert arena.value_count == 1

    def test_non_string_parts(self):
        """Test that any hashable works as an edge label."""
        arena = NodeArena()
        v = arena.add_child(ROOT, ("tok", 1))
        w = arena.add_child(v, 7)
        assert arena.child(ROOT, ("tok", 1)) == v
        assert arena.child(v, 7) == w
