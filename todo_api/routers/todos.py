import re
from typing import List, Optional
from fastapi import APIRouter, Depends, Path, status

from ..core.errors import TodoNotFoundError, TASK_NOT_FOUND, TITLE_REQUIRED, INVALID_DATA
from ..core.registry import TodoRegistry, get_registry
from ..models.todo import Todo
from ..schemas.todo import TodoCreate, TodoUpdate, TodoResponse

router = APIRouter()

# Leading integer of a path segment: optional sign, then hex (0x..) or decimal digits
LEADING_INTEGER = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]*))")


def plain_text_response(description: str) -> dict:
    """OpenAPI description of a plain-text error body"""
    return {
        "description": description,
        "content": {"text/plain": {"schema": {"type": "string"}, "example": description}},
    }


NOT_FOUND = {status.HTTP_404_NOT_FOUND: plain_text_response(TASK_NOT_FOUND)}


def parse_leading_integer(raw: str) -> Optional[int]:
    """
    Read the integer a path segment starts with.

    Trailing characters are ignored, so "2abc" and "1.5" give 2 and 1.
    Returns None when the segment does not start with digits.
    """
    match = LEADING_INTEGER.match(raw)
    sign, hex_digits, digits = match.groups()

    if hex_digits is not None:
        if not hex_digits:
            return None
        value = int(hex_digits, 16)
    elif digits:
        value = int(digits)
    else:
        return None

    return -value if sign == "-" else value


def parse_todo_id(
    id: str = Path(..., description="Task ID", json_schema_extra={"type": "integer"})
) -> int:
    """Path id dependency; a segment with no leading integer matches no task"""
    todo_id = parse_leading_integer(id)
    if todo_id is None:
        raise TodoNotFoundError(id)
    return todo_id


def get_existing_todo(
    todo_id: int = Depends(parse_todo_id),
    registry: TodoRegistry = Depends(get_registry)
) -> Todo:
    """Resolve the path id to a task, failing with 404 before the body is validated"""
    return registry.get(todo_id)


@router.get("", response_model=List[TodoResponse], summary="Get all tasks")
async def get_todos(registry: TodoRegistry = Depends(get_registry)):
    """Return every task in insertion order"""
    return [TodoResponse.model_validate(todo) for todo in registry.all()]


@router.get(
    "/{id}",
    response_model=TodoResponse,
    summary="Get a task by ID",
    responses=NOT_FOUND,
)
async def get_todo(todo: Todo = Depends(get_existing_todo)):
    """Get a specific task by ID"""
    return TodoResponse.model_validate(todo)


@router.post(
    "",
    response_model=TodoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
    responses={status.HTTP_400_BAD_REQUEST: plain_text_response(TITLE_REQUIRED)},
)
async def create_todo(
    todo_data: TodoCreate,
    registry: TodoRegistry = Depends(get_registry)
):
    """Create a new task; it starts out not completed"""
    todo = registry.create(todo_data.title)
    return TodoResponse.model_validate(todo)


@router.put(
    "/{id}",
    response_model=TodoResponse,
    summary="Update a task by ID",
    responses={
        **NOT_FOUND,
        status.HTTP_400_BAD_REQUEST: plain_text_response(INVALID_DATA),
    },
)
async def update_todo(
    todo_update: TodoUpdate,
    todo: Todo = Depends(get_existing_todo),
    registry: TodoRegistry = Depends(get_registry)
):
    """Replace the title and completion flag of a task"""
    updated = registry.update(todo.id, todo_update.title, todo_update.completed)
    return TodoResponse.model_validate(updated)


@router.delete(
    "/{id}",
    response_model=TodoResponse,
    summary="Delete a task by ID",
    responses=NOT_FOUND,
)
async def delete_todo(
    todo_id: int = Depends(parse_todo_id),
    registry: TodoRegistry = Depends(get_registry)
):
    """Delete a task and return it as it was before removal"""
    todo = registry.delete(todo_id)
    return TodoResponse.model_validate(todo)
