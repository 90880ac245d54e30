import threading

import pytest

from todo_api.core.errors import InvalidInputError, TodoNotFoundError, TITLE_REQUIRED, INVALID_DATA
from todo_api.core.registry import TodoRegistry, build_registry
from todo_api.models.todo import Todo


def test_seed_contains_two_open_tasks(registry: TodoRegistry) -> None:
    assert [todo.to_dict() for todo in registry.all()] == [
        {"id": 1, "title": "Learn Node.js", "completed": False},
        {"id": 2, "title": "Build an API", "completed": False},
    ]


def test_all_returns_snapshot(registry: TodoRegistry) -> None:
    todos = registry.all()
    todos.clear()

    assert len(registry) == 2


def test_create_assigns_fresh_id_and_open_state(registry: TodoRegistry) -> None:
    existing = {todo.id for todo in registry.all()}

    todo = registry.create("Write tests")

    assert todo.id not in existing
    assert todo.id == 3
    assert todo.completed is False
    assert registry.all()[-1] is todo


@pytest.mark.parametrize("title", [None, ""])
def test_create_requires_title(registry: TodoRegistry, title) -> None:
    with pytest.raises(InvalidInputError) as exc_info:
        registry.create(title)

    assert exc_info.value.message == TITLE_REQUIRED
    assert len(registry) == 2


def test_get_round_trips_created_task(registry: TodoRegistry) -> None:
    created = registry.create("Ship it")

    fetched = registry.get(created.id)

    assert fetched.title == "Ship it"
    assert fetched.completed is False


def test_get_unknown_id_raises_not_found(registry: TodoRegistry) -> None:
    with pytest.raises(TodoNotFoundError) as exc_info:
        registry.get(99)

    assert exc_info.value.todo_id == 99
    assert exc_info.value.status_code == 404


def test_update_replaces_both_fields(registry: TodoRegistry) -> None:
    todo = registry.update(2, "Build a better API", True)

    assert todo == Todo(id=2, title="Build a better API", completed=True)
    assert registry.get(2).completed is True


def test_update_is_idempotent(registry: TodoRegistry) -> None:
    first = registry.update(1, "Learn Python", True).to_dict()
    second = registry.update(1, "Learn Python", True).to_dict()

    assert first == second
    assert [todo.to_dict() for todo in registry.all()][0] == first


@pytest.mark.parametrize(
    "title, completed",
    [
        (None, True),
        ("", False),
        ("Valid title", None),
        ("Valid title", "true"),
        ("Valid title", 1),
    ],
)
def test_update_rejects_invalid_data(registry: TodoRegistry, title, completed) -> None:
    with pytest.raises(InvalidInputError) as exc_info:
        registry.update(1, title, completed)

    assert exc_info.value.message == INVALID_DATA
    assert registry.get(1) == Todo(id=1, title="Learn Node.js", completed=False)


def test_update_checks_existence_before_data(registry: TodoRegistry) -> None:
    with pytest.raises(TodoNotFoundError):
        registry.update(42, "", None)


def test_delete_returns_removed_task(registry: TodoRegistry) -> None:
    removed = registry.delete(1)

    assert removed == Todo(id=1, title="Learn Node.js", completed=False)
    with pytest.raises(TodoNotFoundError):
        registry.get(1)


def test_delete_unknown_id_leaves_registry_unchanged(registry: TodoRegistry) -> None:
    with pytest.raises(TodoNotFoundError):
        registry.delete(7)

    assert len(registry) == 2


def test_creates_minus_deletes(registry: TodoRegistry) -> None:
    created = [registry.create(f"Task {n}") for n in range(5)]
    for todo in created[:3]:
        registry.delete(todo.id)

    assert len(registry) == 2 + 5 - 3


def test_length_strategy_reuses_surviving_id() -> None:
    registry = TodoRegistry()
    for title in ("one", "two", "three"):
        registry.create(title)
    registry.delete(2)

    todo = registry.create("four")

    assert todo.id == 3
    assert [t.id for t in registry.all()] == [1, 3, 3]


def test_counter_strategy_never_reuses_ids() -> None:
    registry = TodoRegistry(id_strategy="counter")
    for title in ("one", "two", "three"):
        registry.create(title)
    registry.delete(2)

    todo = registry.create("four")

    assert todo.id == 4
    assert [t.id for t in registry.all()] == [1, 3, 4]


def test_counter_strategy_starts_after_seed() -> None:
    registry = TodoRegistry.with_seed(id_strategy="counter")
    registry.delete(2)

    assert registry.create("next").id == 3


def test_unknown_strategy_is_rejected() -> None:
    with pytest.raises(ValueError):
        TodoRegistry(id_strategy="uuid")


def test_build_registry_honours_settings(monkeypatch) -> None:
    monkeypatch.setenv("SEED_TODOS", "false")
    monkeypatch.setenv("ID_STRATEGY", "counter")
    from todo_api.core.config import Settings

    registry = build_registry(Settings())

    assert len(registry) == 0
    assert registry.id_strategy == "counter"


@pytest.mark.parametrize("id_strategy", ["length", "counter"])
def test_concurrent_creates_get_distinct_ids(id_strategy) -> None:
    registry = TodoRegistry(id_strategy=id_strategy)
    workers = 8
    per_worker = 50
    barrier = threading.Barrier(workers)

    def create_many(worker: int) -> None:
        barrier.wait()
        for n in range(per_worker):
            registry.create(f"worker {worker} task {n}")

    threads = [threading.Thread(target=create_many, args=(worker,)) for worker in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    ids = [todo.id for todo in registry.all()]
    assert sorted(ids) == list(range(1, workers * per_worker + 1))
    assert ids == sorted(ids)


def test_errors_fall_back_to_default_messages() -> None:
    assert InvalidInputError().message == INVALID_DATA
    assert InvalidInputError(None).status_code == 400
    assert TodoNotFoundError(5).message == "Task not found"
    assert TodoNotFoundError(5, message="Gone").message == "Gone"
