"""
Audit logging service for tracking parcel lifecycle events.

Every mutation requested through the API is written to the structured log and
kept in the registry's in-memory audit trail.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from parceltrack.app.core.observability import current_correlation_id

if TYPE_CHECKING:
    from parceltrack.app.services.registry import Registry

logger = logging.getLogger("parceltrack.audit")


# Audit event constants
class AuditAction:
    """Standardized audit action constants."""
    CUSTOMER_CREATED = "CUSTOMER_CREATED"
    HUB_CREATED = "HUB_CREATED"

    PARCEL_CREATED = "PARCEL_CREATED"
    PARCEL_SCANNED = "PARCEL_SCANNED"
    DELIVERY_ATTEMPTED = "DELIVERY_ATTEMPTED"
    PROOF_ATTACHED = "PROOF_ATTACHED"
    PARCEL_RETURNED = "PARCEL_RETURNED"

    SHIPMENT_CREATED = "SHIPMENT_CREATED"
    SHIPMENT_PARCEL_ADDED = "SHIPMENT_PARCEL_ADDED"


@dataclass(frozen=True)
class AuditEntry:
    action: str
    entity_id: str
    timestamp: datetime
    correlation_id: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)


def log_event(
    registry: "Registry",
    action: str,
    entity_id: str,
    metadata: Optional[Dict[str, Any]] = None
) -> AuditEntry:
    """
    Log a lifecycle event to the audit trail.

    Args:
        registry: Registry whose audit trail receives the entry
        action: Action being performed (use AuditAction constants)
        entity_id: Identifier of the customer, hub, parcel or shipment acted upon
        metadata: Additional context (status transitions, hub ids, ...)

    Returns:
        Created AuditEntry
    """
    entry = AuditEntry(
        action=action,
        entity_id=entity_id,
        timestamp=registry.clock(),
        correlation_id=current_correlation_id(),
        metadata=metadata or {},
    )
    registry.audit_trail.append(entry)

    logger.info(
        "%s %s",
        action,
        entity_id,
        extra={"correlation_id": entry.correlation_id, "audit_metadata": entry.metadata},
    )
    return entry


def get_audit_trail(
    registry: "Registry",
    action: Optional[str] = None,
    entity_id: Optional[str] = None,
    limit: int = 100
) -> List[AuditEntry]:
    """
    Retrieve the audit trail with optional filtering.

    Returns:
        Entries most recent first
    """
    entries = list(reversed(registry.audit_trail))

    if action:
        entries = [e for e in entries if e.action == action]

    if entity_id:
        entries = [e for e in entries if e.entity_id == entity_id]

    return entries[:limit]
