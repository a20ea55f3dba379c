"""
Parcel Lifecycle API Endpoints.

Resolves identifiers through the registry and hands validated references to
the parcel state machine. The state machine itself accepts every operation in
every status; these endpoints only guarantee that referenced entities exist.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status
from fastapi.responses import PlainTextResponse

from parceltrack.app.models.parcel_enums import ParcelLifecycleStatus
from parceltrack.app.schemas.parcel import (
    ParcelCreate, ParcelResponse, ParcelListResponse,
    ScanCreate, DeliveryAttemptCreate, ProofCreate, ReturnCreate
)
from parceltrack.app.services.audit import log_event, AuditAction
from parceltrack.app.services.registry import Registry, get_registry
from parceltrack.app.services.timeline import render_parcel_timeline

router = APIRouter(prefix="/parcels", tags=["Parcels"])


@router.post("", response_model=ParcelResponse, status_code=status.HTTP_201_CREATED)
async def create_parcel(
    parcel_data: ParcelCreate,
    registry: Registry = Depends(get_registry)
):
    """
    Create a parcel in status CREATED.

    Validates:
    - Parcel ID is unique (409)
    - Sender and receiver are registered customers (404)
    """
    parcel = registry.new_parcel(
        parcel_id=parcel_data.id,
        sender_id=parcel_data.sender_id,
        receiver_id=parcel_data.receiver_id,
        weight_kg=parcel_data.weight_kg,
    )

    log_event(
        registry,
        AuditAction.PARCEL_CREATED,
        parcel.id,
        metadata={
            "sender_id": parcel.sender.id,
            "receiver_id": parcel.receiver.id,
            "weight_kg": parcel.weight_kg
        }
    )

    return ParcelResponse.model_validate(parcel)


@router.get("", response_model=ParcelListResponse)
async def list_parcels(
    status_filter: Optional[ParcelLifecycleStatus] = Query(None, alias="status", description="Only parcels in this status"),
    registry: Registry = Depends(get_registry)
):
    if status_filter is None:
        parcels = registry.parcels.list()
    else:
        parcels = registry.parcels.list(lambda p: p.status == status_filter)

    return ParcelListResponse(
        parcels=[ParcelResponse.model_validate(p) for p in parcels],
        total=len(parcels)
    )


@router.get("/{parcel_id}", response_model=ParcelResponse)
async def get_parcel(
    parcel_id: str = Path(..., description="Parcel ID"),
    registry: Registry = Depends(get_registry)
):
    """Current status plus scan history, delivery attempts and proof."""
    return ParcelResponse.model_validate(registry.parcels.require(parcel_id))


@router.get("/{parcel_id}/timeline", response_class=PlainTextResponse)
async def get_parcel_timeline(
    parcel_id: str = Path(..., description="Parcel ID"),
    registry: Registry = Depends(get_registry)
):
    return render_parcel_timeline(registry.parcels.require(parcel_id))


@router.post("/{parcel_id}/scans", response_model=ParcelResponse)
async def record_scan(
    parcel_id: str = Path(..., description="Parcel ID"),
    scan_data: ScanCreate = ...,
    registry: Registry = Depends(get_registry)
):
    """
    Record a scan of the parcel at a registered hub.

    CREATED and DELIVERY_FAILED parcels move to IN_TRANSIT; other statuses are kept.
    """
    parcel = registry.parcels.require(parcel_id)
    hub = registry.hubs.require(scan_data.hub_id)

    previous_status = parcel.status
    parcel.record_scan(hub, scan_data.note)

    log_event(
        registry,
        AuditAction.PARCEL_SCANNED,
        parcel.id,
        metadata={
            "hub_id": hub.id,
            "previous_status": previous_status.value,
            "status": parcel.status.value
        }
    )

    return ParcelResponse.model_validate(parcel)


@router.post("/{parcel_id}/delivery-attempts", response_model=ParcelResponse)
async def record_delivery_attempt(
    parcel_id: str = Path(..., description="Parcel ID"),
    attempt_data: DeliveryAttemptCreate = ...,
    registry: Registry = Depends(get_registry)
):
    """
    Record a delivery attempt.

    A successful attempt sets DELIVERED, a failed one DELIVERY_FAILED. When
    the request carries a proof it is attached immediately after the attempt.
    """
    parcel = registry.parcels.require(parcel_id)

    previous_status = parcel.status
    parcel.record_delivery_attempt(
        attempt_data.success,
        outcome_note=attempt_data.outcome_note,
        attempted_by=attempt_data.attempted_by,
    )

    log_event(
        registry,
        AuditAction.DELIVERY_ATTEMPTED,
        parcel.id,
        metadata={
            "success": attempt_data.success,
            "attempted_by": attempt_data.attempted_by,
            "previous_status": previous_status.value,
            "status": parcel.status.value
        }
    )

    if attempt_data.proof is not None:
        parcel.attach_proof(attempt_data.proof.receiver_name, attempt_data.proof.code)
        log_event(
            registry,
            AuditAction.PROOF_ATTACHED,
            parcel.id,
            metadata={"receiver_name": attempt_data.proof.receiver_name}
        )

    return ParcelResponse.model_validate(parcel)


@router.post("/{parcel_id}/proof", response_model=ParcelResponse)
async def attach_proof(
    parcel_id: str = Path(..., description="Parcel ID"),
    proof_data: ProofCreate = ...,
    registry: Registry = Depends(get_registry)
):
    """
    Attach (or replace) proof of delivery; the parcel becomes DELIVERED.

    No check is made that a successful attempt was recorded first.
    """
    parcel = registry.parcels.require(parcel_id)

    previous_status = parcel.status
    parcel.attach_proof(proof_data.receiver_name, proof_data.code)

    log_event(
        registry,
        AuditAction.PROOF_ATTACHED,
        parcel.id,
        metadata={
            "receiver_name": proof_data.receiver_name,
            "previous_status": previous_status.value
        }
    )

    return ParcelResponse.model_validate(parcel)


@router.post("/{parcel_id}/return", response_model=ParcelResponse)
async def mark_returned(
    parcel_id: str = Path(..., description="Parcel ID"),
    return_data: Optional[ReturnCreate] = None,
    registry: Registry = Depends(get_registry)
):
    """Mark the parcel RETURNED to sender, with an optional reason."""
    parcel = registry.parcels.require(parcel_id)
    reason = return_data.reason if return_data else None

    previous_status = parcel.status
    parcel.mark_returned(reason)

    log_event(
        registry,
        AuditAction.PARCEL_RETURNED,
        parcel.id,
        metadata={"reason": reason, "previous_status": previous_status.value}
    )

    return ParcelResponse.model_validate(parcel)
