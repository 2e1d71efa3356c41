from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# PUBLIC_INTERFACE
class Todo(BaseModel):
    """
    A single task held by a repository.

    Fields:
    - id: Unique positive integer identifier, assigned on create and never changed
    - text: Free-form task text
    - completed: Completion flag, False for newly created todos
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "text": "todo text",
                "completed": False,
            }
        }
    )

    id: int = Field(..., description="Unique identifier of the todo item", gt=0)
    text: str = Field(..., description="Task text")
    completed: bool = Field(default=False, description="Completion status flag")
