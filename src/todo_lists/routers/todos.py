from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status

from ..errors import NameValidationError, TodoNotFoundError
from ..models import TodoSession
from ..repositories import SessionRepository
from ..schemas import TodoForm, ToggleForm
from ..sessions import get_repository, get_session
from ..views import is_ajax, redirect, render

router = APIRouter(
    prefix="/lists/{list_id}/todos",
    tags=["todos"],
)


def _get_repo(repo: SessionRepository = Depends(get_repository)) -> SessionRepository:
    """
    Dependency wrapper for repository to keep signatures clean.
    """
    return repo


# PUBLIC_INTERFACE
@router.post(
    "",
    summary="Add Todo",
    responses={
        303: {"description": "Todo added"},
        422: {"description": "Text rejected; list page redisplayed"},
    },
)
def add_todo(
    list_id: int,
    request: Request,
    form: TodoForm = Depends(TodoForm.as_form),
    session: TodoSession = Depends(get_session),
    repo: SessionRepository = Depends(_get_repo),
):
    try:
        repo.add_todo(list_id, form.todo)
    except NameValidationError as exc:
        session.flash.set_error(exc.message)
        return render(
            request,
            "list.html",
            session,
            status_code=422,
            list=repo.get_list(list_id),
            todo_text=form.todo,
        )
    session.flash.set_success("The todo has been added.")
    return redirect(f"/lists/{list_id}")


# PUBLIC_INTERFACE
@router.post(
    "/{todo_id}/destroy",
    summary="Delete Todo",
    description="Delete a todo. AJAX callers receive 204 instead of a redirect.",
)
def delete_todo(
    list_id: int,
    todo_id: int,
    request: Request,
    session: TodoSession = Depends(get_session),
    repo: SessionRepository = Depends(_get_repo),
):
    repo.delete_todo(list_id, todo_id)
    if is_ajax(request):
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    session.flash.set_success("The todo has been deleted.")
    return redirect(f"/lists/{list_id}")


# PUBLIC_INTERFACE
@router.post("/{todo_id}", summary="Toggle Todo")
def toggle_todo(
    list_id: int,
    todo_id: int,
    form: ToggleForm = Depends(ToggleForm.as_form),
    session: TodoSession = Depends(get_session),
    repo: SessionRepository = Depends(_get_repo),
):
    try:
        repo.toggle_todo(list_id, todo_id, form.completed)
    except TodoNotFoundError as exc:
        session.flash.set_error(exc.message)
    else:
        session.flash.set_success("The todo has been updated.")
    return redirect(f"/lists/{list_id}")
