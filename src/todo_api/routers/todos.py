from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from ..errors import NotFoundError
from ..models import Todo
from ..repositories import TodoRepository
from ..schemas import CreateTodo, UpdateTodo

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
)

_NOT_FOUND = {404: {"description": "Todo not found (empty body)"}}


# PUBLIC_INTERFACE
def get_repository(request: Request) -> TodoRepository:
    """
    Dependency returning a handle onto the application's repository.

    Every request gets its own clone; all clones share one store.
    """
    return request.app.state.repository.clone()


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=Todo,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description="Create a new Todo item and return the created resource.",
    responses={
        201: {"description": "Todo created successfully"},
        422: {"description": "Validation error"},
    },
)
def create_todo(payload: CreateTodo, repo: TodoRepository = Depends(get_repository)) -> Todo:
    """
    Create a new Todo.
    """
    return repo.create(payload)


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[Todo],
    summary="List Todos",
    description="Return every stored Todo item. Order is unspecified.",
)
def all_todos(repo: TodoRepository = Depends(get_repository)) -> List[Todo]:
    return repo.all()


# PUBLIC_INTERFACE
@router.get(
    "/{todo_id}",
    response_model=Todo,
    summary="Get Todo",
    description="Get a single Todo item by ID.",
    responses={200: {"description": "Todo found"}, **_NOT_FOUND},
)
def find_todo(todo_id: int, repo: TodoRepository = Depends(get_repository)) -> Todo:
    """
    Retrieve a single Todo item by its ID.
    """
    todo = repo.find(todo_id)
    if todo is None:
        raise NotFoundError(todo_id)
    return todo


# PUBLIC_INTERFACE
@router.patch(
    "/{todo_id}",
    response_model=Todo,
    status_code=status.HTTP_201_CREATED,
    summary="Update Todo",
    description="Partially update fields of a Todo item. Omitted or null fields are left unchanged.",
    responses={201: {"description": "Todo updated"}, **_NOT_FOUND},
)
def update_todo(
    todo_id: int, payload: UpdateTodo, repo: TodoRepository = Depends(get_repository)
) -> Todo:
    """
    Partial update of a Todo item. NotFoundError propagates to the app handler.
    """
    return repo.update(todo_id, payload)


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete Todo",
    description="Delete a Todo item by ID.",
    responses={204: {"description": "Todo deleted"}, **_NOT_FOUND},
)
def delete_todo(todo_id: int, repo: TodoRepository = Depends(get_repository)) -> Response:
    """
    Delete a Todo. Returns 204 on success, 404 if not found.
    """
    repo.delete(todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
