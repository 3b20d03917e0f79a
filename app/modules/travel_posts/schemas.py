from pydantic import BaseModel, Field, computed_field, field_validator
from typing import Optional, Literal
from datetime import date, datetime

from app.core.maps import get_google_maps_directions_url

TravelMode = Literal["bus", "bike", "walk", "car"]

TIME_PATTERN = r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$"


class TravelPostCreate(BaseModel):
    from_location: str = Field(min_length=2, max_length=100)
    to_location: str = Field(min_length=2, max_length=100)
    travel_date: date
    travel_time: str = Field(pattern=TIME_PATTERN)
    mode: TravelMode


class TravelPostUpdate(BaseModel):
    from_location: Optional[str] = Field(default=None, min_length=2, max_length=100)
    to_location: Optional[str] = Field(default=None, min_length=2, max_length=100)
    travel_date: Optional[date] = None
    travel_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    mode: Optional[TravelMode] = None
    status: Optional[str] = None

    @field_validator("from_location", "to_location", "travel_date", "travel_time", "mode", "status")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value


class TravelPostResponse(BaseModel):
    id: str
    user_id: str
    from_location: str
    to_location: str
    travel_date: date
    travel_time: str
    mode: str
    status: str = "active"
    created_at: datetime

    @computed_field
    @property
    def directions_url(self) -> str:
        return get_google_maps_directions_url(self.from_location, self.to_location)

    class Config:
        from_attributes = True
