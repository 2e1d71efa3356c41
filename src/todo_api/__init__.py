"""
Todo backend package.

The storage core (models, payload schemas, repository contract and the
in-memory backend) is importable from here; the FastAPI application lives in
`todo_api.main`.
"""

from .errors import NotFoundError, RepositoryError
from .models import Todo
from .repositories import InMemoryRepository, TodoRepository, build_repository
from .schemas import CreateTodo, UpdateTodo

__all__ = [
    "CreateTodo",
    "InMemoryRepository",
    "NotFoundError",
    "RepositoryError",
    "Todo",
    "TodoRepository",
    "UpdateTodo",
    "build_repository",
]
