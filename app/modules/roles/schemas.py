from pydantic import BaseModel
from typing import Literal
from datetime import datetime

AppRole = Literal["admin", "user"]


class UserRoleResponse(BaseModel):
    id: str
    user_id: str
    role: AppRole
    created_at: datetime

    class Config:
        from_attributes = True
