from __future__ import annotations

from typing import Any, Optional

from fastapi import Form
from pydantic import BaseModel, ConfigDict, Field, field_validator


def _strip(value: Optional[str]) -> str:
    return (value or "").strip()


# PUBLIC_INTERFACE
class ListNameForm(BaseModel):
    """
    Form body for creating or renaming a list.

    Surrounding whitespace is stripped; length and uniqueness are checked by
    the validation module so failures can be redisplayed on the form.
    """

    list_name: str = Field(default="", description="Name of the list")

    @field_validator("list_name", mode="before")
    @classmethod
    def strip_list_name(cls, v: Optional[str]) -> str:
        return _strip(v)

    @classmethod
    def as_form(cls, list_name: str = Form("")) -> "ListNameForm":
        return cls(list_name=list_name)


# PUBLIC_INTERFACE
class TodoForm(BaseModel):
    """Form body for adding a todo to a list."""

    todo: str = Field(default="", description="Text of the todo item")

    @field_validator("todo", mode="before")
    @classmethod
    def strip_todo(cls, v: Optional[str]) -> str:
        return _strip(v)

    @classmethod
    def as_form(cls, todo: str = Form("")) -> "TodoForm":
        return cls(todo=todo)


# PUBLIC_INTERFACE
class ToggleForm(BaseModel):
    """
    Form body for setting a todo's completion flag.

    Only the exact string 'true' marks the todo complete;
    anything else clears it.
    """

    completed: bool = Field(default=False, description="New completion status")

    @field_validator("completed", mode="before")
    @classmethod
    def parse_completed(cls, v: Any) -> bool:
        if isinstance(v, bool):
            return v
        return v == "true"

    @classmethod
    def as_form(cls, completed: str = Form("false")) -> "ToggleForm":
        return cls(completed=completed)


# PUBLIC_INTERFACE
class ListSummary(BaseModel):
    """
    Read-only projection of a list for the index page.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Groceries",
                "total": 3,
                "remaining": 1,
                "completed": 2,
                "is_complete": False,
                "css_class": None,
            }
        }
    )

    id: int = Field(..., description="Stable identifier of the list")
    name: str = Field(..., description="List name")
    total: int = Field(..., description="Number of todos in the list")
    remaining: int = Field(..., description="Number of incomplete todos")
    completed: int = Field(..., description="Number of completed todos")
    is_complete: bool = Field(..., description="True when the list is non-empty and every todo is done")
    css_class: Optional[str] = Field(default=None, description="'complete' for finished lists")
