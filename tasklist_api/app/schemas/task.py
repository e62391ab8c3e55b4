"""
Pydantic schemas for tasks.

A task is a store-assigned integer id plus a short text label.  The
only validation applied to incoming payloads is that ``text`` is a
non-empty string; the value is stored exactly as received, whitespace
included.
"""

from pydantic import BaseModel, Field, field_validator

EMPTY_TEXT_MESSAGE = "Task text must not be empty"


class TaskCreate(BaseModel):
    """Schema for creating a new task."""

    text: str = Field(..., description="Task label")

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        if not v:
            raise ValueError(EMPTY_TEXT_MESSAGE)
        return v


class TaskUpdate(TaskCreate):
    """Schema for replacing the text of an existing task."""


class TaskRead(BaseModel):
    """Schema for a task returned by the API."""

    id: int
    text: str

    model_config = {
        "from_attributes": True,
    }
