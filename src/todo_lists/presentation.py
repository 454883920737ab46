"""
Read-only projections used by the templates: counts, completion state and
the incomplete-before-complete display order.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from .models import ListEntity, TodoEntity
from .schemas import ListSummary


def total_todos(lst: ListEntity) -> int:
    return len(lst["todos"])


def completed_count(lst: ListEntity) -> int:
    return sum(1 for todo in lst["todos"] if todo["completed"])


def remaining_count(lst: ListEntity) -> int:
    return total_todos(lst) - completed_count(lst)


def is_list_complete(lst: ListEntity) -> bool:
    """True when the list has at least one todo and all of them are done."""
    return total_todos(lst) > 0 and all(todo["completed"] for todo in lst["todos"])


def list_class(lst: ListEntity) -> Optional[str]:
    return "complete" if is_list_complete(lst) else None


def sorted_lists(lists: Sequence[ListEntity]) -> List[ListEntity]:
    """
    Return lists with complete ones moved after incomplete ones.

    The partition is stable and the input sequence is not modified.
    """
    incomplete = [lst for lst in lists if not is_list_complete(lst)]
    complete = [lst for lst in lists if is_list_complete(lst)]
    return incomplete + complete


def sorted_todos(todos: Sequence[TodoEntity]) -> List[TodoEntity]:
    """Stable partition of todos placing completed ones last."""
    incomplete = [todo for todo in todos if not todo["completed"]]
    complete = [todo for todo in todos if todo["completed"]]
    return incomplete + complete


# PUBLIC_INTERFACE
def summarize_list(lst: ListEntity) -> ListSummary:
    """Build the index-page summary for a list."""
    return ListSummary(
        id=lst["id"],
        name=lst["name"],
        total=total_todos(lst),
        remaining=remaining_count(lst),
        completed=completed_count(lst),
        is_complete=is_list_complete(lst),
        css_class=list_class(lst),
    )
