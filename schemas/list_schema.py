from pydantic import Field

from schemas.base import APIModel, UtcDatetime
from schemas.task_schema import TaskResponse


class ListCreate(APIModel):
    title: str = Field(min_length=1)
    position: int = Field(ge=0)


class ListUpdate(APIModel):
    title: str | None = Field(default=None, min_length=1)
    position: int | None = Field(default=None, ge=0)


class ListResponse(APIModel):
    id: int
    board_id: int
    title: str
    position: int
    created_at: UtcDatetime


class ListWithTasks(ListResponse):
    tasks: list[TaskResponse] = []
