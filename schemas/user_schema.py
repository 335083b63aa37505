from schemas.base import APIModel, UtcDatetime


class UserResponse(APIModel):
    id: int
    email: str
    name: str | None = None
    created_at: UtcDatetime
