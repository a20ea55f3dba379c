"""
Shipment Pydantic schemas.
"""

from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import List

from parceltrack.app.models.parcel_enums import ParcelLifecycleStatus
from parceltrack.app.models.shipment import Shipment
from parceltrack.app.schemas.customer import strip_text


class ShipmentCreate(BaseModel):
    """Schema for creating a shipment, optionally with initial parcels."""
    id: str = Field(..., min_length=1, max_length=100, description="Unique shipment ID")
    parcel_ids: List[str] = Field(default_factory=list, description="Parcels to add; unknown IDs are skipped")

    @field_validator("id", mode="before")
    @classmethod
    def strip_whitespace(cls, value):
        return strip_text(value)

    @field_validator("parcel_ids")
    @classmethod
    def drop_blank_ids(cls, value: List[str]) -> List[str]:
        return [pid.strip() for pid in value if pid.strip()]


class ShipmentParcelAdd(BaseModel):
    parcel_id: str = Field(..., min_length=1)


class ShipmentMember(BaseModel):
    id: str
    status: ParcelLifecycleStatus


class ShipmentResponse(BaseModel):
    """Schema for shipment response; closability is computed at response time."""
    id: str
    created_at: datetime
    parcels: List[ShipmentMember]
    is_closable: bool
    outstanding_parcel_ids: List[str]

    @classmethod
    def from_shipment(cls, shipment: Shipment) -> "ShipmentResponse":
        return cls(
            id=shipment.id,
            created_at=shipment.created_at,
            parcels=[ShipmentMember(id=p.id, status=p.status) for p in shipment.parcels],
            is_closable=shipment.is_closable(),
            outstanding_parcel_ids=[p.id for p in shipment.outstanding_parcels()],
        )


class ShipmentCreateResponse(ShipmentResponse):
    skipped_parcel_ids: List[str] = Field(default_factory=list)


class ShipmentListResponse(BaseModel):
    shipments: List[ShipmentResponse]
    total: int
