"""Arena storage for trie nodes addressed by stable integer indices."""

from typing import Any, Hashable, Iterator, Optional

from bitarray import bitarray

ROOT = 0


class NodeArena:
    """Growable node store backing a trie.

    Node 0 is the root.  Every other node is created by ``add_child`` and
    keeps its index for the lifetime of the arena, so callers may hold on
    to an index across later insertions.

    A node's value lives in ``_values``; whether the node actually holds a
    value is tracked by the ``_terminal`` bit vector, so ``None`` is a
    storable value.
    """

    def __init__(self) -> None:
        self._children: list[dict[Hashable, int]] = [{}]
        self._values: list[Any] = [None]
        self._terminal: bitarray = bitarray([False])
        self._n_values = 0

    # ------------------------------------------------------------------ #
    #  Topology                                                            #
    # ------------------------------------------------------------------ #

    def child(self, v: int, part: Hashable) -> Optional[int]:
        """Return the child of *v* along edge *part*, or None."""
        return self._children[v].get(part)

    def add_child(self, v: int, part: Hashable) -> int:
        """Create a valueless child of *v* along edge *part*.

        The caller must have checked that the edge does not exist yet.
        """
        w = len(self._children)
        self._children.append({})
        self._values.append(None)
        self._terminal.append(False)
        self._children[v][part] = w
        return w

    def edges(self, v: int) -> Iterator[tuple[Hashable, int]]:
        """Yield ``(part, child)`` for every edge out of *v*, in creation order."""
        return iter(self._children[v].items())

    # ------------------------------------------------------------------ #
    #  Values                                                              #
    # ------------------------------------------------------------------ #

    def has_value(self, v: int) -> bool:
        return self._terminal[v]

    def value(self, v: int, default: Any = None) -> Any:
        if self._terminal[v]:
            return self._values[v]
        return default

    def set_value(self, v: int, value: Any) -> None:
        """Store *value* at *v*, counting the node if it held none before."""
        if not self._terminal[v]:
            self._terminal[v] = True
            self._n_values += 1
        self._values[v] = value

    @property
    def value_count(self) -> int:
        """Number of nodes holding a value."""
        return self._n_values

    def __len__(self) -> int:
        """Return the number of nodes, root included."""
        return len(self._children)
