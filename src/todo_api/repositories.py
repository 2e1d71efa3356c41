from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from .errors import NotFoundError
from .locks import ReadWriteLock
from .models import Todo
from .schemas import CreateTodo, UpdateTodo
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

ID_STRATEGIES = ("count", "sequence")


# PUBLIC_INTERFACE
class TodoRepository(ABC):
    """Abstract repository contract for todo storage backends."""

    @abstractmethod
    def create(self, payload: CreateTodo) -> Todo:
        """Store a new todo with a freshly assigned id and return it."""

    @abstractmethod
    def find(self, todo_id: int) -> Optional[Todo]:
        """Return the todo with this id, or None if there is none."""

    @abstractmethod
    def all(self) -> List[Todo]:
        """Return every stored todo. Order is unspecified."""

    @abstractmethod
    def update(self, todo_id: int, payload: UpdateTodo) -> Todo:
        """
        Apply a partial update and return the new value.

        Raises:
            NotFoundError: if no todo has this id.
        """

    @abstractmethod
    def delete(self, todo_id: int) -> None:
        """
        Remove the todo with this id.

        Raises:
            NotFoundError: if no todo has this id.
        """

    @abstractmethod
    def clone(self) -> "TodoRepository":
        """Return another handle onto the same underlying store."""

    def __copy__(self) -> "TodoRepository":
        return self.clone()


class TodoStore:
    """
    The shared state behind InMemoryRepository handles: the id -> Todo mapping,
    the lock guarding it, the id strategy and the id sequence. The strategy is
    fixed for the lifetime of the store so every handle allocates ids the same way.
    """

    def __init__(self, id_strategy: str = "count") -> None:
        if id_strategy not in ID_STRATEGIES:
            raise ValueError(
                f"Unknown id strategy {id_strategy!r}; expected one of {', '.join(ID_STRATEGIES)}"
            )
        self.id_strategy = id_strategy
        self.lock = ReadWriteLock()
        self.items: Dict[int, Todo] = {}
        self.next_id = 1


class InMemoryRepository(TodoRepository):
    """
    Thread-safe in-memory repository suitable for testing and default runtime.

    Reads (find/all) take the store lock in shared mode, writes
    (create/update/delete) in exclusive mode. Values never leave the store by
    reference; every returned Todo is a copy.

    id_strategy:
    - 'count': the new id is the number of stored todos plus one. After a
      delete this can hand out an id that is still in use, in which case the
      existing todo is overwritten.
    - 'sequence': ids come from a counter that only moves forward.
    """

    def __init__(self, id_strategy: Optional[str] = None, store: Optional[TodoStore] = None) -> None:
        if store is None:
            store = TodoStore(id_strategy or "count")
        elif id_strategy is not None and id_strategy != store.id_strategy:
            raise ValueError(
                f"Store uses id strategy {store.id_strategy!r}, cannot attach a {id_strategy!r} handle"
            )
        self._store = store

    @property
    def id_strategy(self) -> str:
        return self._store.id_strategy

    def clone(self) -> "InMemoryRepository":
        return InMemoryRepository(store=self._store)

    def _allocate_id(self) -> int:
        # Caller holds the write lock.
        if self._store.id_strategy == "count":
            return len(self._store.items) + 1
        i = self._store.next_id
        self._store.next_id += 1
        return i

    def create(self, payload: CreateTodo) -> Todo:
        with self._store.lock.write_locked():
            todo_id = self._allocate_id()
            if todo_id in self._store.items:
                logger.warning("Todo id %s already in use; overwriting existing entry", todo_id)
            todo = Todo(id=todo_id, text=payload.text, completed=False)
            self._store.items[todo_id] = todo
            created = todo.model_copy()
        logger.debug("Created todo %s", todo_id)
        return created

    def find(self, todo_id: int) -> Optional[Todo]:
        with self._store.lock.read_locked():
            item = self._store.items.get(todo_id)
            return None if item is None else item.model_copy()

    def all(self) -> List[Todo]:
        with self._store.lock.read_locked():
            return [t.model_copy() for t in self._store.items.values()]

    def update(self, todo_id: int, payload: UpdateTodo) -> Todo:
        with self._store.lock.write_locked():
            existing = self._store.items.get(todo_id)
            if existing is None:
                raise NotFoundError(todo_id)
            updated = payload.apply_to(existing)
            self._store.items[todo_id] = updated
            result = updated.model_copy()
        logger.debug("Updated todo %s", todo_id)
        return result

    def delete(self, todo_id: int) -> None:
        with self._store.lock.write_locked():
            if self._store.items.pop(todo_id, None) is None:
                raise NotFoundError(todo_id)
        logger.debug("Deleted todo %s", todo_id)


# PUBLIC_INTERFACE
def build_repository(settings: Optional[Settings] = None) -> TodoRepository:
    """
    Factory to return the configured repository based on settings.
    - memory: InMemoryRepository using settings.id_strategy
    """
    settings = settings or get_settings()
    return InMemoryRepository(id_strategy=settings.id_strategy)
