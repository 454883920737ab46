from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, TypedDict

from .flash import FlashMessages


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A single todo item stored inside a list.

    Fields:
    - id: Stable integer identifier, unique within its list
    - name: Todo text (1..100 chars, stripped on input)
    - completed: Boolean completion flag
    """

    id: int
    name: str
    completed: bool


# PUBLIC_INTERFACE
class ListEntity(TypedDict):
    """
    A named list of todos.

    Fields:
    - id: Stable integer identifier, unique within the session
    - name: List name (1..100 chars, unique within the session)
    - todos: Todos in insertion order
    """

    id: int
    name: str
    todos: List[TodoEntity]


# PUBLIC_INTERFACE
@dataclass
class TodoSession:
    """
    Per-browser state: the list collection plus its one-shot flash messages.

    ``issued_ids`` records the highest id ever handed out per collection
    ("lists", or "todos:<list id>") so deleted ids are never reissued.
    """

    id: str
    lists: List[ListEntity] = field(default_factory=list)
    flash: FlashMessages = field(default_factory=FlashMessages)
    issued_ids: Dict[str, int] = field(default_factory=dict)
    last_seen: datetime = field(default_factory=datetime.now)
