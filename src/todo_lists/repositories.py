from __future__ import annotations

import logging
from typing import List, Optional

from .errors import ListNotFoundError, TodoNotFoundError
from .models import ListEntity, TodoEntity, TodoSession
from .utils import next_id
from .validation import validate_list_name, validate_todo_name

logger = logging.getLogger(__name__)

_LISTS_KEY = "lists"


def _todos_key(list_id: int) -> str:
    return f"todos:{list_id}"


# PUBLIC_INTERFACE
class SessionRepository:
    """
    List and todo operations over the collection held by one session.

    Lookups by id raise ListNotFoundError / TodoNotFoundError. Writes that
    fail validation raise the NameValidationError returned by the
    validation functions and leave the session untouched.
    """

    def __init__(self, session: TodoSession) -> None:
        self.session = session

    @property
    def lists(self) -> List[ListEntity]:
        return self.session.lists

    def _allocate_id(self, key: str, items: List) -> int:
        issued = next_id(items, self.session.issued_ids.get(key, 0))
        self.session.issued_ids[key] = issued
        return issued

    def _find_list(self, list_id: int) -> Optional[ListEntity]:
        return next((lst for lst in self.lists if lst["id"] == list_id), None)

    # Lists

    def get_list(self, list_id: int) -> ListEntity:
        """Return the list with this id or raise ListNotFoundError."""
        found = self._find_list(list_id)
        if found is None:
            logger.warning("List %s not found in session", list_id)
            raise ListNotFoundError(list_id)
        return found

    def create_list(self, name: str) -> ListEntity:
        error = validate_list_name(name, self.lists)
        if error:
            logger.info("Rejected new list: %s", type(error).__name__)
            raise error

        entity: ListEntity = {
            "id": self._allocate_id(_LISTS_KEY, self.lists),
            "name": name,
            "todos": [],
        }
        self.lists.append(entity)
        logger.info("Created list %s", entity["id"])
        return entity

    def rename_list(self, list_id: int, new_name: str) -> ListEntity:
        entity = self.get_list(list_id)
        error = validate_list_name(new_name, self.lists, exclude_id=list_id)
        if error:
            logger.info("Rejected rename of list %s: %s", list_id, type(error).__name__)
            raise error

        entity["name"] = new_name
        logger.info("Renamed list %s", list_id)
        return entity

    def delete_list(self, list_id: int) -> bool:
        """Delete a list by id. Return True if deleted, False if it was absent."""
        before = len(self.lists)
        self.lists[:] = [lst for lst in self.lists if lst["id"] != list_id]
        deleted = len(self.lists) < before
        if deleted:
            self.session.issued_ids.pop(_todos_key(list_id), None)
            logger.info("Deleted list %s", list_id)
        return deleted

    def complete_all_todos(self, list_id: int) -> ListEntity:
        entity = self.get_list(list_id)
        for todo in entity["todos"]:
            todo["completed"] = True
        logger.info("Completed all %d todos in list %s", len(entity["todos"]), list_id)
        return entity

    # Todos

    def get_todo(self, list_id: int, todo_id: int) -> TodoEntity:
        entity = self.get_list(list_id)
        found = next((t for t in entity["todos"] if t["id"] == todo_id), None)
        if found is None:
            logger.warning("Todo %s not found in list %s", todo_id, list_id)
            raise TodoNotFoundError(list_id, todo_id)
        return found

    def add_todo(self, list_id: int, text: str) -> TodoEntity:
        entity = self.get_list(list_id)
        error = validate_todo_name(text)
        if error:
            logger.info("Rejected new todo in list %s: %s", list_id, type(error).__name__)
            raise error

        todo: TodoEntity = {
            "id": self._allocate_id(_todos_key(list_id), entity["todos"]),
            "name": text,
            "completed": False,
        }
        entity["todos"].append(todo)
        logger.info("Added todo %s to list %s", todo["id"], list_id)
        return todo

    def delete_todo(self, list_id: int, todo_id: int) -> bool:
        """Delete a todo by id. Return True if deleted, False if it was absent."""
        todos = self.get_list(list_id)["todos"]
        before = len(todos)
        todos[:] = [t for t in todos if t["id"] != todo_id]
        deleted = len(todos) < before
        if deleted:
            logger.info("Deleted todo %s from list %s", todo_id, list_id)
        return deleted

    def toggle_todo(self, list_id: int, todo_id: int, completed: bool) -> TodoEntity:
        todo = self.get_todo(list_id, todo_id)
        todo["completed"] = completed
        logger.info("Set todo %s in list %s completed=%s", todo_id, list_id, completed)
        return todo
