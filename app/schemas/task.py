"""Pydantic schemas for task request/response validation."""

from pydantic import BaseModel, ConfigDict


class TaskCreate(BaseModel):
    """Schema for creating a task; the TaskID is generated server side."""

    TaskName: str
    TaskDetails: str
    CompletionDate: str

    model_config = ConfigDict(extra="forbid")


class TaskUpdate(BaseModel):
    """Schema for overwriting an existing task (no partial update)."""

    TaskID: str
    TaskName: str
    TaskDetails: str
    CompletionDate: str

    model_config = ConfigDict(extra="forbid")


class TaskResponse(BaseModel):
    """Schema for task responses from API."""

    TaskID: str
    TaskName: str
    TaskDetails: str
    CompletionDate: str

    model_config = ConfigDict(from_attributes=True)
