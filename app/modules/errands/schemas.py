from pydantic import BaseModel, Field, computed_field, field_validator
from typing import Optional, Literal
from datetime import datetime

from app.core.maps import get_google_maps_directions_url

ErrandStatus = Literal["open", "completed"]


def _required_text(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value


def _optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


class ErrandCreate(BaseModel):
    title: str = Field(max_length=200)
    description: Optional[str] = None
    pickup_location: str = Field(max_length=200)
    delivery_location: str = Field(max_length=200)
    reward: Optional[str] = None

    @field_validator("title", "pickup_location", "delivery_location")
    @classmethod
    def not_blank(cls, value: str) -> str:
        return _required_text(value)

    @field_validator("description", "reward")
    @classmethod
    def blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        return _optional_text(value)


class ErrandUpdate(BaseModel):
    title: Optional[str] = Field(default=None, max_length=200)
    description: Optional[str] = None
    pickup_location: Optional[str] = Field(default=None, max_length=200)
    delivery_location: Optional[str] = Field(default=None, max_length=200)
    reward: Optional[str] = None

    @field_validator("title", "pickup_location", "delivery_location")
    @classmethod
    def not_blank(cls, value: Optional[str]) -> str:
        # Omit a field to leave it unchanged; null would clear a NOT NULL column
        if value is None:
            raise ValueError("must not be null")
        return _required_text(value)

    @field_validator("description", "reward")
    @classmethod
    def blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        return _optional_text(value)


class ErrandResponse(BaseModel):
    id: str
    user_id: str
    title: str
    description: Optional[str] = None
    pickup_location: str
    delivery_location: str
    reward: Optional[str] = None
    status: str
    created_at: datetime
    completed_at: Optional[datetime] = None
    completed_by: Optional[str] = None

    @computed_field
    @property
    def directions_url(self) -> str:
        return get_google_maps_directions_url(self.pickup_location, self.delivery_location)

    class Config:
        from_attributes = True
