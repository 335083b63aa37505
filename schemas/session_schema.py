from datetime import datetime
from pydantic import BaseModel


class SessionCreate(BaseModel):
    user_id: int
    token: str
    expires_at: datetime
    ip_address: str | None = None
    user_agent: str | None = None
