from pydantic import BaseModel, Field, computed_field
from typing import List, Optional, Literal
from datetime import datetime

from app.core.maps import get_google_maps_url

EmergencyReason = Literal["medical", "safety", "other"]
EmergencyStatus = Literal["open", "resolved"]


class EmergencyCreate(BaseModel):
    reason: EmergencyReason
    location: str = Field(min_length=2, max_length=200)


class EmergencyResponse(BaseModel):
    id: str
    user_id: str
    reason: str
    location: str
    status: str
    resolved_at: Optional[datetime] = None
    resolved_by: Optional[str] = None
    created_at: datetime

    @computed_field
    @property
    def location_url(self) -> str:
        return get_google_maps_url(self.location)

    class Config:
        from_attributes = True


class EmergencyDashboardResponse(BaseModel):
    open_count: int
    emergencies: List[EmergencyResponse]
