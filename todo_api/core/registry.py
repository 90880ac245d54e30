"""
In-memory task registry for Todo API.
"""
import logging
import threading
from typing import Iterable, List, Optional

from fastapi import Request

from .errors import InvalidInputError, TodoNotFoundError, TITLE_REQUIRED, INVALID_DATA
from ..models.todo import Todo

logger = logging.getLogger(__name__)

ID_STRATEGY_LENGTH = "length"
ID_STRATEGY_COUNTER = "counter"
ID_STRATEGIES = (ID_STRATEGY_LENGTH, ID_STRATEGY_COUNTER)

SEED_TODOS = (
    (1, "Learn Node.js"),
    (2, "Build an API"),
)


class TodoRegistry:
    """
    Ordered collection of tasks with CRUD operations.

    Ids are assigned by one of two policies:

    * ``length`` - the new id is the current number of tasks plus one. After
      a deletion this can hand out an id that a surviving task still holds.
    * ``counter`` - a counter that only ever grows, starting from the highest
      id present when the registry is built.
    """

    def __init__(self, todos: Optional[Iterable[Todo]] = None, id_strategy: str = ID_STRATEGY_LENGTH):
        if id_strategy not in ID_STRATEGIES:
            raise ValueError(
                f"Unknown id strategy '{id_strategy}', expected one of: {', '.join(ID_STRATEGIES)}"
            )
        self.id_strategy = id_strategy
        self._todos: List[Todo] = list(todos or [])
        self._last_id = max((todo.id for todo in self._todos), default=0)
        self._lock = threading.RLock()

    @classmethod
    def with_seed(cls, id_strategy: str = ID_STRATEGY_LENGTH) -> "TodoRegistry":
        """Create a registry holding the two starter tasks"""
        return cls(
            todos=[Todo(id=todo_id, title=title) for todo_id, title in SEED_TODOS],
            id_strategy=id_strategy,
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    def _index(self, todo_id: int) -> int:
        for index, todo in enumerate(self._todos):
            if todo.id == todo_id:
                return index
        raise TodoNotFoundError(todo_id)

    def _find(self, todo_id: int) -> Todo:
        return self._todos[self._index(todo_id)]

    def _next_id(self) -> int:
        if self.id_strategy == ID_STRATEGY_COUNTER:
            self._last_id += 1
            return self._last_id
        return len(self._todos) + 1

    def all(self) -> List[Todo]:
        """Return every task in insertion order"""
        with self._lock:
            return list(self._todos)

    def get(self, todo_id: int) -> Todo:
        """Return the task with the given id or raise TodoNotFoundError"""
        with self._lock:
            return self._find(todo_id)

    def create(self, title: Optional[str]) -> Todo:
        """Append a new, not yet completed task"""
        if not title:
            raise InvalidInputError(TITLE_REQUIRED)

        with self._lock:
            todo = Todo(id=self._next_id(), title=title, completed=False)
            self._todos.append(todo)

        logger.info(f"Created task {todo.id}")
        return todo

    def update(self, todo_id: int, title: Optional[str], completed: Optional[bool]) -> Todo:
        """Replace title and completed flag of an existing task"""
        with self._lock:
            todo = self._find(todo_id)

            if not title or not isinstance(completed, bool):
                raise InvalidInputError(INVALID_DATA)

            todo.title = title
            todo.completed = completed

        logger.info(f"Updated task {todo_id} (completed={completed})")
        return todo

    def delete(self, todo_id: int) -> Todo:
        """Remove a task and return it"""
        with self._lock:
            todo = self._todos.pop(self._index(todo_id))

        logger.info(f"Deleted task {todo_id}")
        return todo


def get_registry(request: Request) -> TodoRegistry:
    """
    Registry dependency for FastAPI

    Returns:
        TodoRegistry: Registry owned by the running application
    """
    return request.app.state.registry


def build_registry(settings) -> TodoRegistry:
    """Create the application registry from settings"""
    if settings.seed_todos:
        registry = TodoRegistry.with_seed(id_strategy=settings.id_strategy)
    else:
        registry = TodoRegistry(id_strategy=settings.id_strategy)
    logger.info(f"Registry ready with {len(registry)} tasks (id strategy: {registry.id_strategy})")
    return registry
