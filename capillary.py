"""Dictionary keyed by sequences of key parts, with partial key lookup.

Useful for find-and-replace style scanning: a ``Lookup`` is fed one key
part at a time and stays at the root until some part starts a valid key.
As long as the following parts continue a valid key, the lookup moves
towards the value, and ``try_resolve()`` returns it as soon as it is hit.
"""

import logging
from typing import Any, Generic, Hashable, Iterable, Iterator, Optional, TypeVar

from node_arena import ROOT, NodeArena

log = logging.getLogger("capillary")

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class InvalidKeyPartError(KeyError):
    """A key part led the lookup off every stored key.

    The lookup that raised it has already been reset to the root.
    """

    def __init__(self, key_part: Any, depth: int) -> None:
        super().__init__(key_part)
        self.key_part = key_part
        self.depth = depth


class Dictionary(Generic[K, V]):
    """Trie-backed mapping from key-part sequences to values.

    Keys are any finite iterables of hashable key parts; a ``str`` key is
    the sequence of its characters.  Re-inserting a key that already holds
    a value keeps the first value unless the dictionary was created with
    ``overwrite=True``.
    """

    def __init__(self, items: Optional[Iterable[tuple[Iterable[K], V]]] = None,
                 *, overwrite: bool = False) -> None:
        """Create a dictionary, optionally bulk-loading *items*.

        Args:
            items: Iterable of ``(key, value)`` pairs, inserted in order.
            overwrite: When True a later insert of an existing key replaces
                its value.  When False (default) the first value wins.
        """
        self._arena = NodeArena()
        self.overwrite = overwrite
        if items is not None:
            for key, value in items:
                self.insert(key, value)
            log.debug("Loaded %d keys into %d nodes", len(self), self.node_count)

    @classmethod
    def from_iterable(cls, items: Iterable[tuple[Iterable[K], V]], *,
                      overwrite: bool = False) -> "Dictionary[K, V]":
        return cls(items, overwrite=overwrite)

    # ------------------------------------------------------------------ #
    #  Insertion                                                           #
    # ------------------------------------------------------------------ #

    def insert(self, key: Iterable[K], value: V) -> None:
        """Insert a key-value pair.

        An empty key is ignored.  Intermediate nodes are created lazily;
        the value is stored at the node where the key ends.
        """
        arena = self._arena
        v = ROOT
        for part in key:
            w = arena.child(v, part)
            v = arena.add_child(v, part) if w is None else w
        if v == ROOT:
            return
        if self.overwrite or not arena.has_value(v):
            arena.set_value(v, value)

    # ------------------------------------------------------------------ #
    #  Whole-key retrieval                                                 #
    # ------------------------------------------------------------------ #

    def _find_node(self, key: Iterable[K]) -> Optional[int]:
        """Walk *key* from the root; None if any part has no edge or key is empty."""
        arena = self._arena
        v: Optional[int] = ROOT
        for part in key:
            v = arena.child(v, part)
            if v is None:
                return None
        return None if v == ROOT else v

    def get(self, key: Iterable[K], default: Any = None) -> Any:
        """Return the value stored with *key*, or *default* if there is none."""
        v = self._find_node(key)
        if v is None:
            return default
        return self._arena.value(v, default)

    def replace(self, key: Iterable[K], value: V) -> bool:
        """Replace the value stored with *key*.

        Returns:
            True if *key* held a value and it was replaced, False otherwise
            (nothing is inserted).
        """
        v = self._find_node(key)
        if v is None or not self._arena.has_value(v):
            return False
        self._arena.set_value(v, value)
        return True

    def lookup(self) -> "Lookup[K, V]":
        """Create a ``Lookup`` positioned at the root of this dictionary."""
        return Lookup(self)

    # ------------------------------------------------------------------ #
    #  Bookkeeping                                                         #
    # ------------------------------------------------------------------ #

    def is_empty(self) -> bool:
        return self._arena.value_count == 0

    @property
    def node_count(self) -> int:
        """Number of trie nodes, not counting the root."""
        return len(self._arena) - 1

    def items(self) -> Iterator[tuple[tuple, V]]:
        """Yield ``(key, value)`` pairs depth-first.

        Keys are tuples of key parts.  Siblings are visited in the order
        their edges were created.
        """
        arena = self._arena
        stack: list[tuple[int, tuple]] = [(ROOT, ())]
        while stack:
            v, prefix = stack.pop()
            if arena.has_value(v):
                yield prefix, arena.value(v)
            children = list(arena.edges(v))
            for part, w in reversed(children):
                stack.append((w, prefix + (part,)))

    # ------------------------------------------------------------------ #
    #  Mapping-like interface                                              #
    # ------------------------------------------------------------------ #

    def __getitem__(self, key: Iterable[K]) -> V:
        v = self._find_node(key)
        if v is None or not self._arena.has_value(v):
            raise KeyError(key)
        return self._arena.value(v)

    def __contains__(self, key: Iterable[K]) -> bool:
        v = self._find_node(key)
        return v is not None and self._arena.has_value(v)

    def __iter__(self) -> Iterator[tuple]:
        for key, _ in self.items():
            yield key

    def __len__(self) -> int:
        """Return the number of stored key-value pairs."""
        return self._arena.value_count

    def __repr__(self) -> str:
        return f"Dictionary({list(self.items())!r})"


class Lookup(Generic[K, V]):
    """Incremental search cursor over a ``Dictionary``.

    Holds only a reference to the dictionary and the index of the current
    node, so any number of lookups can run over one dictionary without
    affecting it or each other.
    """

    def __init__(self, dictionary: Dictionary[K, V]) -> None:
        self.dictionary = dictionary
        self._node = ROOT
        self._depth = 0

    def partial_search(self, key_part: K) -> None:
        """Move along the edge labeled *key_part*.

        Raises:
            InvalidKeyPartError: If no such edge exists from the current
                node.  The lookup is reset to the root before raising, so
                the next call starts a fresh search.
        """
        w = self.dictionary._arena.child(self._node, key_part)
        if w is None:
            depth = self._depth
            self.reset()
            raise InvalidKeyPartError(key_part, depth)
        self._node = w
        self._depth += 1

    def try_resolve(self, default: Any = None) -> Any:
        """Return the value for the parts consumed so far, or *default*."""
        return self.dictionary._arena.value(self._node, default)

    def get(self, key: Iterable[K], default: Any = None) -> Any:
        """Whole-key lookup in the underlying dictionary; ignores the cursor."""
        return self.dictionary.get(key, default)

    def reset(self) -> None:
        """Return to the root, abandoning any partial match."""
        self._node = ROOT
        self._depth = 0

    @property
    def depth(self) -> int:
        """Number of key parts consumed since the last reset."""
        return self._depth

    @property
    def at_root(self) -> bool:
        return self._node == ROOT

    def __repr__(self) -> str:
        return f"<Lookup depth={self._depth}>"
