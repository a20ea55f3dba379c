"""
Customer Pydantic schemas.

Defines request and response models for customer registration.
"""

from pydantic import BaseModel, Field, field_validator
from typing import List


def strip_text(value):
    """Trim surrounding whitespace from submitted text fields."""
    if isinstance(value, str):
        return value.strip()
    return value


class CustomerCreate(BaseModel):
    """Schema for registering a customer."""
    id: str = Field(..., min_length=1, max_length=100, description="Unique customer ID")
    name: str = Field(..., min_length=1, max_length=200, description="Display name")
    address: str = Field(..., min_length=1, max_length=500, description="Postal address")

    @field_validator("id", "name", "address", mode="before")
    @classmethod
    def strip_whitespace(cls, value):
        return strip_text(value)


class CustomerResponse(BaseModel):
    """Schema for customer response."""
    id: str
    name: str
    address: str

    class Config:
        from_attributes = True


class CustomerListResponse(BaseModel):
    customers: List[CustomerResponse]
    total: int
