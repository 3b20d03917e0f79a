from pydantic import BaseModel
from typing import List, Optional

from app.modules.travel_posts.schemas import TravelPostResponse


class DashboardResponse(BaseModel):
    recent_travel_posts: List[TravelPostResponse]
    open_errands: int
    active_carpools: int
    is_admin: bool
    open_emergencies: Optional[int] = None  # admins only
