"""
Timestamped lifecycle records owned by a Parcel.

Each record is immutable and is created through its ``capture`` factory at the
moment the business event happens; the timestamp comes from the supplied clock.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from parceltrack.app.core.clock import Clock, utc_now
from parceltrack.app.models.hub import Hub


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    """Empty notes are stored as absent."""
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class ScanEvent:
    """A parcel's physical presence at a hub."""
    hub: Hub
    timestamp: datetime
    note: Optional[str] = None

    @classmethod
    def capture(cls, hub: Hub, note: Optional[str] = None, clock: Clock = utc_now) -> "ScanEvent":
        return cls(hub=hub, timestamp=clock(), note=_blank_to_none(note))


@dataclass(frozen=True)
class DeliveryAttempt:
    """A final-mile delivery attempt, successful or not."""
    timestamp: datetime
    success: bool
    outcome_note: Optional[str] = None  # e.g. "No one home", "Address not found"
    attempted_by: Optional[str] = None  # courier name/id

    @classmethod
    def capture(
        cls,
        success: bool,
        outcome_note: Optional[str] = None,
        attempted_by: Optional[str] = None,
        clock: Clock = utc_now,
    ) -> "DeliveryAttempt":
        return cls(
            timestamp=clock(),
            success=success,
            outcome_note=_blank_to_none(outcome_note),
            attempted_by=_blank_to_none(attempted_by),
        )


@dataclass(frozen=True)
class ProofOfDelivery:
    """Receiver confirmation; ``code`` is an opaque signature placeholder."""
    receiver_name: str
    code: str
    timestamp: datetime

    @classmethod
    def capture(cls, receiver_name: str, code: str, clock: Clock = utc_now) -> "ProofOfDelivery":
        return cls(receiver_name=receiver_name, code=code, timestamp=clock())
