from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from ..errors import NameValidationError
from ..models import TodoSession
from ..repositories import SessionRepository
from ..schemas import ListNameForm
from ..sessions import get_repository, get_session
from ..views import is_ajax, redirect, render

router = APIRouter(
    prefix="/lists",
    tags=["lists"],
)


def _get_repo(repo: SessionRepository = Depends(get_repository)) -> SessionRepository:
    """
    Dependency wrapper for repository to keep signatures clean.
    """
    return repo


# PUBLIC_INTERFACE
@router.get("", summary="View Lists", description="Render every list, finished lists last.")
def view_lists(request: Request, session: TodoSession = Depends(get_session)):
    return render(request, "lists.html", session, lists=session.lists)


# PUBLIC_INTERFACE
@router.get("/new", summary="New List Form")
def new_list_form(request: Request, session: TodoSession = Depends(get_session)):
    return render(request, "new_list.html", session)


# PUBLIC_INTERFACE
@router.post(
    "",
    summary="Create List",
    description="Create a list and redirect to the index, or redisplay the form on invalid names.",
    responses={
        303: {"description": "List created"},
        422: {"description": "Name rejected; form redisplayed"},
    },
)
def create_list(
    request: Request,
    form: ListNameForm = Depends(ListNameForm.as_form),
    session: TodoSession = Depends(get_session),
    repo: SessionRepository = Depends(_get_repo),
):
    try:
        repo.create_list(form.list_name)
    except NameValidationError as exc:
        session.flash.set_error(exc.message)
        return render(
            request,
            "new_list.html",
            session,
            status_code=422,
            list_name=form.list_name,
        )
    session.flash.set_success("The list has been created.")
    return redirect("/lists")


# PUBLIC_INTERFACE
@router.get("/{list_id}", summary="View List")
def view_list(
    list_id: int,
    request: Request,
    session: TodoSession = Depends(get_session),
    repo: SessionRepository = Depends(_get_repo),
):
    return render(request, "list.html", session, list=repo.get_list(list_id))


# PUBLIC_INTERFACE
@router.get("/{list_id}/edit", summary="Edit List Form")
def edit_list_form(
    list_id: int,
    request: Request,
    session: TodoSession = Depends(get_session),
    repo: SessionRepository = Depends(_get_repo),
):
    return render(request, "edit_list.html", session, list=repo.get_list(list_id))


# PUBLIC_INTERFACE
@router.post(
    "/{list_id}",
    summary="Rename List",
    responses={
        303: {"description": "List renamed"},
        422: {"description": "Name rejected; form redisplayed"},
    },
)
def rename_list(
    list_id: int,
    request: Request,
    form: ListNameForm = Depends(ListNameForm.as_form),
    session: TodoSession = Depends(get_session),
    repo: SessionRepository = Depends(_get_repo),
):
    try:
        repo.rename_list(list_id, form.list_name)
    except NameValidationError as exc:
        session.flash.set_error(exc.message)
        return render(
            request,
            "edit_list.html",
            session,
            status_code=422,
            list=repo.get_list(list_id),
            list_name=form.list_name,
        )
    session.flash.set_success("The list has been updated.")
    return redirect(f"/lists/{list_id}")


# PUBLIC_INTERFACE
@router.post(
    "/{list_id}/destroy",
    summary="Delete List",
    description="Delete a list. AJAX callers receive the path to navigate to instead of a redirect.",
)
def delete_list(
    list_id: int,
    request: Request,
    session: TodoSession = Depends(get_session),
    repo: SessionRepository = Depends(_get_repo),
):
    repo.delete_list(list_id)
    if is_ajax(request):
        return PlainTextResponse("/lists")
    session.flash.set_success("The list has been deleted.")
    return redirect("/lists")


# PUBLIC_INTERFACE
@router.post("/{list_id}/complete_all", summary="Complete All Todos")
def complete_all_todos(
    list_id: int,
    session: TodoSession = Depends(get_session),
    repo: SessionRepository = Depends(_get_repo),
):
    repo.complete_all_todos(list_id)
    session.flash.set_success("All todos have been marked completed.")
    return redirect(f"/lists/{list_id}")
