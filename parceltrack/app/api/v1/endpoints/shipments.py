"""
Shipment API Endpoints.

Shipments group existing parcels. Closability is read from the members'
current statuses on every request and is never stored.
"""

from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import PlainTextResponse

from parceltrack.app.schemas.shipment import (
    ShipmentCreate, ShipmentCreateResponse, ShipmentParcelAdd,
    ShipmentResponse, ShipmentListResponse
)
from parceltrack.app.services.audit import log_event, AuditAction
from parceltrack.app.services.registry import Registry, get_registry
from parceltrack.app.services.timeline import render_shipment_summary

router = APIRouter(prefix="/shipments", tags=["Shipments"])


@router.post("", response_model=ShipmentCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_shipment(
    shipment_data: ShipmentCreate,
    registry: Registry = Depends(get_registry)
):
    """
    Create a shipment and add any listed parcels.

    Unknown parcel IDs are skipped and reported back rather than failing the request.
    """
    shipment = registry.new_shipment(shipment_data.id)

    skipped = []
    for parcel_id in shipment_data.parcel_ids:
        parcel = registry.parcels.get(parcel_id)
        if parcel is None:
            skipped.append(parcel_id)
            continue
        shipment.add_parcel(parcel)

    log_event(
        registry,
        AuditAction.SHIPMENT_CREATED,
        shipment.id,
        metadata={
            "parcel_ids": [p.id for p in shipment.parcels],
            "skipped_parcel_ids": skipped
        }
    )

    response = ShipmentResponse.from_shipment(shipment)
    return ShipmentCreateResponse(**response.model_dump(), skipped_parcel_ids=skipped)


@router.get("", response_model=ShipmentListResponse)
async def list_shipments(registry: Registry = Depends(get_registry)):
    shipments = registry.shipments.list()
    return ShipmentListResponse(
        shipments=[ShipmentResponse.from_shipment(s) for s in shipments],
        total=len(shipments)
    )


@router.get("/{shipment_id}", response_model=ShipmentResponse)
async def get_shipment(
    shipment_id: str = Path(..., description="Shipment ID"),
    registry: Registry = Depends(get_registry)
):
    return ShipmentResponse.from_shipment(registry.shipments.require(shipment_id))


@router.get("/{shipment_id}/summary", response_class=PlainTextResponse)
async def get_shipment_summary(
    shipment_id: str = Path(..., description="Shipment ID"),
    registry: Registry = Depends(get_registry)
):
    return render_shipment_summary(registry.shipments.require(shipment_id))


@router.post("/{shipment_id}/parcels", response_model=ShipmentResponse)
async def add_parcel_to_shipment(
    shipment_id: str = Path(..., description="Shipment ID"),
    member_data: ShipmentParcelAdd = ...,
    registry: Registry = Depends(get_registry)
):
    """
    Add an existing parcel to a shipment.

    The same parcel may be added more than once and may belong to several shipments.
    """
    shipment = registry.shipments.require(shipment_id)
    parcel = registry.parcels.require(member_data.parcel_id)

    shipment.add_parcel(parcel)

    log_event(
        registry,
        AuditAction.SHIPMENT_PARCEL_ADDED,
        shipment.id,
        metadata={"parcel_id": parcel.id}
    )

    return ShipmentResponse.from_shipment(shipment)
