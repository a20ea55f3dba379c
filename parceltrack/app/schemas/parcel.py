"""
Parcel Pydantic schemas.

Defines request models for lifecycle operations and the response model that
carries a parcel's full history.
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from datetime import datetime
from typing import Optional, List

from parceltrack.app.models.parcel_enums import ParcelLifecycleStatus
from parceltrack.app.schemas.customer import CustomerResponse, strip_text
from parceltrack.app.schemas.hub import HubResponse


class ParcelCreate(BaseModel):
    """Schema for creating a new parcel between two registered customers."""
    id: str = Field(..., min_length=1, max_length=100, description="Unique parcel ID")
    sender_id: str = Field(..., min_length=1, description="Sender customer ID")
    receiver_id: str = Field(..., min_length=1, description="Receiver customer ID")
    weight_kg: float = Field(..., ge=0, description="Weight in kilograms")

    @field_validator("id", "sender_id", "receiver_id", mode="before")
    @classmethod
    def strip_whitespace(cls, value):
        return strip_text(value)


class ScanCreate(BaseModel):
    """Schema for recording a scan at a hub."""
    hub_id: str = Field(..., min_length=1, description="Registered hub ID")
    note: Optional[str] = Field(None, max_length=500, description="e.g. 'Arrived', 'Departed'")


class ProofCreate(BaseModel):
    """Schema for attaching proof of delivery."""
    receiver_name: str = Field(..., min_length=1, max_length=200)
    code: str = Field(..., min_length=1, max_length=200, description="Code or signature placeholder")

    @field_validator("receiver_name", "code", mode="before")
    @classmethod
    def strip_whitespace(cls, value):
        return strip_text(value)


class DeliveryAttemptCreate(BaseModel):
    """
    Schema for recording a delivery attempt.

    A successful attempt may carry its proof, which is attached right after
    the attempt is recorded.
    """
    success: bool
    outcome_note: Optional[str] = Field(None, max_length=500, description="e.g. 'No one home'")
    attempted_by: Optional[str] = Field(None, max_length=200, description="Courier name or ID")
    proof: Optional[ProofCreate] = None

    @model_validator(mode="after")
    def proof_requires_success(self):
        if self.proof is not None and not self.success:
            raise ValueError("Proof of delivery can only accompany a successful attempt")
        return self


class ReturnCreate(BaseModel):
    """Schema for marking a parcel returned to sender."""
    reason: Optional[str] = Field(None, max_length=500)


class ScanResponse(BaseModel):
    hub: HubResponse
    timestamp: datetime
    note: Optional[str]

    class Config:
        from_attributes = True


class DeliveryAttemptResponse(BaseModel):
    timestamp: datetime
    success: bool
    outcome_note: Optional[str]
    attempted_by: Optional[str]

    class Config:
        from_attributes = True


class ProofResponse(BaseModel):
    receiver_name: str
    code: str
    timestamp: datetime

    class Config:
        from_attributes = True


class ParcelResponse(BaseModel):
    """Schema for parcel response with its full history."""
    id: str
    sender: CustomerResponse
    receiver: CustomerResponse
    weight_kg: float
    status: ParcelLifecycleStatus
    last_known_hub_id: Optional[str]
    scans: List[ScanResponse]
    delivery_attempts: List[DeliveryAttemptResponse]
    proof: Optional[ProofResponse]

    class Config:
        from_attributes = True


class ParcelListResponse(BaseModel):
    parcels: List[ParcelResponse]
    total: int
