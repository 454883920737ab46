from __future__ import annotations

from typing import Any, Iterable, Mapping


# PUBLIC_INTERFACE
def next_id(items: Iterable[Mapping[str, Any]], issued: int = 0) -> int:
    """
    Allocate the next integer id for a collection of lists or todos.

    Args:
        items: Entities currently in the collection, in any order.
        issued: Highest id previously handed out for this collection, so an
            id freed by deleting the current maximum is not reused.

    Returns:
        One more than the largest of the existing ids and ``issued``;
        1 for an empty collection with nothing issued.
    """
    highest = max((item["id"] for item in items), default=0)
    return max(highest, issued) + 1
