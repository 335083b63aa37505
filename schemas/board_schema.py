from pydantic import Field

from schemas.base import APIModel, UtcDatetime
from schemas.list_schema import ListResponse, ListWithTasks


class BoardCreate(APIModel):
    name: str = Field(min_length=1)
    project_id: int | None = Field(default=None, gt=0)


class BoardUpdate(APIModel):
    """Partial update; an explicit ``projectId: null`` detaches the board."""
    name: str | None = Field(default=None, min_length=1)
    project_id: int | None = Field(default=None, gt=0)


class BoardResponse(APIModel):
    id: int
    name: str
    owner_id: int
    project_id: int | None = None
    created_at: UtcDatetime
    updated_at: UtcDatetime


class BoardWithLists(BoardResponse):
    lists: list[ListResponse] = []


class BoardDetail(BoardResponse):
    lists: list[ListWithTasks] = []
