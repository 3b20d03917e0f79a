from pydantic import BaseModel, Field, computed_field, field_validator
from typing import Optional, Literal
from datetime import date, datetime

from app.core.maps import get_google_maps_directions_url

CarpoolStatus = Literal["active", "completed"]

TIME_PATTERN = r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9](:[0-5][0-9])?$"


class CarpoolCreate(BaseModel):
    from_location: str = Field(min_length=1, max_length=200)
    to_location: str = Field(min_length=1, max_length=200)
    departure_date: date
    departure_time: str = Field(pattern=TIME_PATTERN)
    seats_available: int = 1
    price_per_seat: Optional[float] = None
    notes: Optional[str] = None


class CarpoolUpdate(BaseModel):
    from_location: Optional[str] = Field(default=None, min_length=1, max_length=200)
    to_location: Optional[str] = Field(default=None, min_length=1, max_length=200)
    departure_date: Optional[date] = None
    departure_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    seats_available: Optional[int] = None
    # Not checked against seats_available
    seats_taken: Optional[int] = None
    price_per_seat: Optional[float] = None
    notes: Optional[str] = None

    @field_validator(
        "from_location", "to_location", "departure_date", "departure_time",
        "seats_available", "seats_taken"
    )
    @classmethod
    def not_null(cls, value):
        # Omit a field to leave it unchanged; only price_per_seat and notes can be cleared
        if value is None:
            raise ValueError("must not be null")
        return value


class CarpoolResponse(BaseModel):
    id: str
    driver_id: str
    from_location: str
    to_location: str
    departure_date: date
    departure_time: str
    seats_available: int
    seats_taken: int = 0
    price_per_seat: Optional[float] = None
    notes: Optional[str] = None
    status: str
    created_at: datetime
    completed_at: Optional[datetime] = None

    @computed_field
    @property
    def seats_left(self) -> int:
        return self.seats_available - self.seats_taken

    @computed_field
    @property
    def directions_url(self) -> str:
        return get_google_maps_directions_url(self.from_location, self.to_location)

    class Config:
        from_attributes = True
