"""
Audit Trail API Endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from parceltrack.app.schemas.audit import AuditEntryResponse, AuditTrailResponse
from parceltrack.app.services.audit import get_audit_trail
from parceltrack.app.services.registry import Registry, get_registry

router = APIRouter(prefix="/audit", tags=["Audit"])


@router.get("", response_model=AuditTrailResponse)
async def list_audit_entries(
    action: Optional[str] = Query(None, description="Filter by action, e.g. PARCEL_SCANNED"),
    entity_id: Optional[str] = Query(None, description="Filter by customer/hub/parcel/shipment ID"),
    limit: int = Query(100, ge=1, le=1000),
    registry: Registry = Depends(get_registry)
):
    """Lifecycle events recorded in this process, most recent first."""
    entries = get_audit_trail(registry, action=action, entity_id=entity_id, limit=limit)
    return AuditTrailResponse(
        entries=[AuditEntryResponse.model_validate(e) for e in entries],
        total=len(entries)
    )
