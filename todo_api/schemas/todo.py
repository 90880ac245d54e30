"""
Pydantic schemas for Todo API.
"""
from typing import Optional
from pydantic import BaseModel, Field, StrictBool, StrictStr


class TodoCreate(BaseModel):
    """Schema for creating a task"""
    title: Optional[StrictStr] = Field(None, description="Task title", examples=["Write tests"])


class TodoUpdate(BaseModel):
    """Schema for updating a task"""
    title: Optional[StrictStr] = Field(None, description="Task title", examples=["Build an API"])
    completed: Optional[StrictBool] = Field(None, description="Whether the task is done", examples=[True])


class TodoResponse(BaseModel):
    """Schema for task response"""
    id: int = Field(..., description="Task ID")
    title: str = Field(..., description="Task title")
    completed: bool = Field(..., description="Whether the task is done")

    class Config:
        from_attributes = True
