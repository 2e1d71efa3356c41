from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .models import Todo


# PUBLIC_INTERFACE
class CreateTodo(BaseModel):
    """
    Schema for creating a new Todo item.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": "todo text",
            }
        }
    )

    text: str = Field(..., description="Task text for the new todo item")


# PUBLIC_INTERFACE
class UpdateTodo(BaseModel):
    """
    Schema for updating an existing Todo item.
    All fields are optional; only provided fields will be updated.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": "updated todo text",
                "completed": True,
            }
        }
    )

    text: Optional[str] = Field(default=None, description="Replacement task text")
    completed: Optional[bool] = Field(default=None, description="Replacement completion flag")

    def apply_to(self, todo: Todo) -> Todo:
        """
        Return a new Todo with the same id, taking text/completed from this
        payload where given and from `todo` otherwise.
        """
        return Todo(
            id=todo.id,
            text=self.text if self.text is not None else todo.text,
            completed=self.completed if self.completed is not None else todo.completed,
        )
