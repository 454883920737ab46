from __future__ import annotations

import os
from typing import Any

from fastapi import Request, status
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from . import presentation
from .models import TodoSession

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")

templates = Jinja2Templates(directory=TEMPLATES_DIR)
templates.env.globals.update(
    total_todos=presentation.total_todos,
    remaining_count=presentation.remaining_count,
    completed_count=presentation.completed_count,
    is_list_complete=presentation.is_list_complete,
    list_class=presentation.list_class,
    sorted_lists=presentation.sorted_lists,
    sorted_todos=presentation.sorted_todos,
    summarize_list=presentation.summarize_list,
)


# PUBLIC_INTERFACE
def render(
    request: Request,
    name: str,
    session: TodoSession,
    status_code: int = status.HTTP_200_OK,
    **context: Any,
):
    """
    Render a page template, consuming the session's pending flash messages.
    """
    context["flash"] = session.flash.consume()
    return templates.TemplateResponse(request, name, context, status_code=status_code)


# PUBLIC_INTERFACE
def redirect(path: str) -> RedirectResponse:
    """Post/redirect/get: send the browser to ``path`` with a 303."""
    return RedirectResponse(path, status_code=status.HTTP_303_SEE_OTHER)


def is_ajax(request: Request) -> bool:
    return request.headers.get("X-Requested-With") == "XMLHttpRequest"
