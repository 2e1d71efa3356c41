from __future__ import annotations


class RepositoryError(Exception):
    """Base class for errors raised by todo storage backends."""


# PUBLIC_INTERFACE
class NotFoundError(RepositoryError):
    """
    Raised by update/delete when no todo with the given id exists.

    Attributes:
        todo_id: The id that was looked up.
    """

    def __init__(self, todo_id: int) -> None:
        super().__init__(f"NotFound, id is {todo_id}")
        self.todo_id = todo_id
