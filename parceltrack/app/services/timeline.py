"""
Plain-text rendering of parcel timelines and shipment summaries.
"""

from datetime import datetime
from typing import List

from parceltrack.app.core.config import settings
from parceltrack.app.models.events import DeliveryAttempt, ProofOfDelivery, ScanEvent
from parceltrack.app.models.parcel import Parcel
from parceltrack.app.models.shipment import Shipment

PARCEL_RULE = "-" * 49
SHIPMENT_RULE = "=" * 49


def format_timestamp(value: datetime) -> str:
    return value.strftime(settings.timestamp_format)


def describe_scan(scan: ScanEvent) -> str:
    line = f"{scan.hub.name} @ {format_timestamp(scan.timestamp)}"
    if scan.note:
        line += f" ({scan.note})"
    return line


def describe_attempt(attempt: DeliveryAttempt) -> str:
    outcome = "SUCCESS" if attempt.success else "FAILED"
    line = f"{outcome} at {format_timestamp(attempt.timestamp)}"
    if attempt.outcome_note:
        line += f" - {attempt.outcome_note}"
    if attempt.attempted_by:
        line += f" (by {attempt.attempted_by})"
    return line


def describe_proof(proof: ProofOfDelivery) -> str:
    return f"Received by {proof.receiver_name} @ {format_timestamp(proof.timestamp)} (Proof: {proof.code})"


def render_parcel_timeline(parcel: Parcel) -> str:
    """Full status block for one parcel: parties, status, scans, attempts, proof."""
    lines: List[str] = [
        PARCEL_RULE,
        f"Parcel ID: {parcel.id}",
        f"Sender: {parcel.sender}",
        f"Receiver: {parcel.receiver}",
        f"Weight: {parcel.weight_kg:.2f} kg",
        f"Current status: {parcel.status_summary()}",
        "",
        "Scan history:",
    ]

    if parcel.scans:
        lines.extend(f"  - {describe_scan(scan)}" for scan in parcel.scans)
    else:
        lines.append("  (no scans recorded)")

    lines += ["", "Delivery attempts:"]
    if parcel.delivery_attempts:
        lines.extend(f"  - {describe_attempt(attempt)}" for attempt in parcel.delivery_attempts)
    else:
        lines.append("  (no delivery attempts)")
    lines.append("")

    if parcel.proof is not None:
        lines += ["Proof of Delivery:", f"  - {describe_proof(parcel.proof)}"]

    lines.append(PARCEL_RULE)
    return "\n".join(lines)


def render_shipment_summary(shipment: Shipment) -> str:
    closable = shipment.is_closable()
    lines: List[str] = [
        SHIPMENT_RULE,
        f"Shipment ID: {shipment.id}",
        f"Created: {format_timestamp(shipment.created_at)}",
        "Parcels:",
    ]
    lines.extend(f"  - {parcel.id} : {parcel.status_summary()}" for parcel in shipment.parcels)
    lines += [f"Shipment closable/closed: {str(closable).lower()}", SHIPMENT_RULE]

    # Advice only makes sense once the shipment has members
    if shipment.parcels:
        if closable:
            lines.append("-> All parcels delivered or returned. Shipment can be closed.")
        else:
            lines.append("-> Shipment cannot be closed: outstanding parcels remain.")

    return "\n".join(lines)
