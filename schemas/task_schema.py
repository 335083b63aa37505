from pydantic import Field

from schemas.base import APIModel, UtcDatetime


class TaskCreate(APIModel):
    title: str = Field(min_length=1)
    description: str | None = None
    position: int = Field(ge=0)


class TaskUpdate(APIModel):
    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    list_id: int | None = Field(default=None, gt=0)
    position: int | None = Field(default=None, ge=0)


class TaskResponse(APIModel):
    id: int
    list_id: int
    title: str
    description: str | None = None
    position: int
    created_at: UtcDatetime
