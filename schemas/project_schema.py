from pydantic import Field

from schemas.base import APIModel, UtcDatetime


class ProjectCreate(APIModel):
    """Client payload for creating a project. Owner is inferred from auth."""
    name: str = Field(min_length=1)
    description: str | None = None


class ProjectUpdate(APIModel):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None


class BoardSummary(APIModel):
    id: int
    name: str


class BoardSummaryWithTimestamps(BoardSummary):
    created_at: UtcDatetime
    updated_at: UtcDatetime


class ProjectResponse(APIModel):
    id: int
    name: str
    description: str | None = None
    owner_id: int
    created_at: UtcDatetime
    updated_at: UtcDatetime


class ProjectListItem(ProjectResponse):
    boards: list[BoardSummary] = []


class ProjectDetail(ProjectResponse):
    boards: list[BoardSummaryWithTimestamps] = []
