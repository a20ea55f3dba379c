"""
Hub Pydantic schemas.
"""

from pydantic import BaseModel, Field, field_validator
from typing import List

from parceltrack.app.schemas.customer import strip_text


class HubCreate(BaseModel):
    """Schema for adding a hub."""
    id: str = Field(..., min_length=1, max_length=100, description="Unique hub ID")
    name: str = Field(..., min_length=1, max_length=200, description="Hub name")

    @field_validator("id", "name", mode="before")
    @classmethod
    def strip_whitespace(cls, value):
        return strip_text(value)


class HubResponse(BaseModel):
    """Schema for hub response."""
    id: str
    name: str

    class Config:
        from_attributes = True


class HubListResponse(BaseModel):
    hubs: List[HubResponse]
    total: int
