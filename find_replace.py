"""Streaming find-and-replace driven by a ``Lookup``."""

from collections import deque
from typing import Any, Iterable, Iterator

from capillary import Dictionary, InvalidKeyPartError

_MISSING = object()


def find_and_replace(dictionary: Dictionary, parts: Iterable[Any]) -> Iterator[Any]:
    """Yield *parts* with every stored key replaced by its value.

    Scanning is left to right.  A match fires as soon as the parts seen so
    far resolve to a value, so the shortest key at the earliest start wins.
    Parts held back for a candidate that later fails are re-scanned from
    the second one on, so a match beginning inside the abandoned prefix is
    still found.
    """
    lookup = dictionary.lookup()
    stream = iter(parts)
    backlog: deque = deque()
    pending: list = []

    while True:
        if backlog:
            part = backlog.popleft()
        else:
            part = next(stream, _MISSING)
            if part is _MISSING:
                if not pending:
                    return
                # End of input mid-candidate: emit its first part, rescan the rest.
                yield pending[0]
                backlog.extend(pending[1:])
                pending = []
                lookup.reset()
                continue

        try:
            lookup.partial_search(part)
        except InvalidKeyPartError:
            if not pending:
                yield part
                continue
            yield pending[0]
            backlog.appendleft(part)
            backlog.extendleft(reversed(pending[1:]))
            pending = []
            continue

        pending.append(part)
        value = lookup.try_resolve(_MISSING)
        if value is not _MISSING:
            yield value
            pending = []
            lookup.reset()


def replace_text(dictionary: Dictionary, text: str) -> str:
    """Apply ``find_and_replace`` to the characters of *text*.

    Values must be strings.
    """
    return "".join(find_and_replace(dictionary, text))
