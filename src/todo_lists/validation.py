from __future__ import annotations

from typing import Iterable, Optional

from .errors import DuplicateNameError, InvalidLengthError, NameValidationError
from .models import ListEntity

MIN_NAME_LENGTH = 1
MAX_NAME_LENGTH = 100


def _valid_length(name: str) -> bool:
    return MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH


# PUBLIC_INTERFACE
def validate_list_name(
    name: str,
    existing_lists: Iterable[ListEntity],
    exclude_id: Optional[int] = None,
) -> Optional[NameValidationError]:
    """
    Return the error for a proposed list name, or None if it is acceptable.

    The uniqueness check runs first and is an exact, case-sensitive match.
    ``exclude_id`` skips the list being renamed so it never collides with
    its own current name.
    """
    if any(lst["name"] == name and lst["id"] != exclude_id for lst in existing_lists):
        return DuplicateNameError(
            f"A list with the name: {name} was already used. Please enter a unique list name"
        )
    if not _valid_length(name):
        return InvalidLengthError("The list name must be between 1 and 100 characters")
    return None


# PUBLIC_INTERFACE
def validate_todo_name(name: str) -> Optional[NameValidationError]:
    """Return the error for a proposed todo name, or None if it is acceptable."""
    if not _valid_length(name):
        return InvalidLengthError("Todo must be between 1 and 100 characters")
    return None
