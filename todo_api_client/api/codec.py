from pydantic import TypeAdapter, ValidationError

from todo_api_client.api.types import NewTask, Task


class DecodeFault(ValueError):
    pass


_TASK_LIST = TypeAdapter(list[Task])


def _summary(err: ValidationError) -> str:
    first = err.errors()[0]
    loc = ".".join(str(p) for p in first["loc"]) or "<root>"
    return f"{err.error_count()} error(s), first at {loc}: {first['msg']}"


def decode_task(body: bytes) -> Task:
    """
    Decode one task object.
    Any missing field, wrong type or broken JSON raises DecodeFault.
    """
    try:
        return Task.model_validate_json(body)
    except ValidationError as e:
        raise DecodeFault(f"Invalid task payload: {_summary(e)}") from e


def decode_tasks(body: bytes) -> list[Task]:
    """
    Decode a JSON array of tasks, keeping server order.
    All-or-nothing: one bad element fails the whole payload.
    """
    try:
        return _TASK_LIST.validate_json(body, strict=True)
    except ValidationError as e:
        raise DecodeFault(f"Invalid task list payload: {_summary(e)}") from e


def encode_new_task(new_task: NewTask) -> bytes:
    return new_task.model_dump_json(by_alias=True).encode("utf-8")


def encode_task(task: Task) -> bytes:
    return task.model_dump_json(by_alias=True).encode("utf-8")
