"""
Parcel lifecycle state machine.

A parcel owns its scan history, delivery attempt history and proof of
delivery. Every mutating operation appends or replaces a record and then
applies its transition rule. No operation is ever rejected: terminal states
are not enforced, a proof may be attached without a preceding successful
attempt, and attempts may be recorded before any scan. Callers that need a
stricter protocol enforce it before calling in.
"""

from typing import List, Optional, Tuple

from parceltrack.app.core.clock import Clock, utc_now
from parceltrack.app.core.config import settings
from parceltrack.app.models.customer import Customer
from parceltrack.app.models.events import DeliveryAttempt, ProofOfDelivery, ScanEvent
from parceltrack.app.models.hub import Hub
from parceltrack.app.models.parcel_enums import ParcelLifecycleStatus, SCAN_ADVANCES_FROM

# Sentinel hub tagged on the synthetic scan written by mark_returned
RETURN_HUB = Hub(id=settings.return_hub_id, name=settings.return_hub_name)


class Parcel:
    """
    A single parcel moving through the network.

    Sender and receiver are registry-owned references; weight is stored as
    given (validation belongs to the caller).
    """

    def __init__(
        self,
        id: str,
        sender: Customer,
        receiver: Customer,
        weight_kg: float,
        clock: Clock = utc_now,
    ):
        self.id = id
        self.sender = sender
        self.receiver = receiver
        self.weight_kg = weight_kg
        self.status = ParcelLifecycleStatus.CREATED
        self.proof: Optional[ProofOfDelivery] = None
        self.last_known_hub_id: Optional[str] = None
        self._scans: List[ScanEvent] = []
        self._delivery_attempts: List[DeliveryAttempt] = []
        self._clock = clock

    @property
    def scans(self) -> Tuple[ScanEvent, ...]:
        """Scan history in insertion (chronological) order."""
        return tuple(self._scans)

    @property
    def delivery_attempts(self) -> Tuple[DeliveryAttempt, ...]:
        return tuple(self._delivery_attempts)

    def record_scan(self, hub: Hub, note: Optional[str] = None) -> ParcelLifecycleStatus:
        """
        Record the parcel's presence at a hub.

        A scan moves CREATED or DELIVERY_FAILED parcels into IN_TRANSIT and
        leaves every other status untouched. The last-known hub always follows
        the scanned hub.
        """
        self._scans.append(ScanEvent.capture(hub, note, clock=self._clock))
        self.last_known_hub_id = hub.id
        if self.status in SCAN_ADVANCES_FROM:
            self.status = ParcelLifecycleStatus.IN_TRANSIT
        return self.status

    def record_delivery_attempt(
        self,
        success: bool,
        outcome_note: Optional[str] = None,
        attempted_by: Optional[str] = None,
    ) -> ParcelLifecycleStatus:
        """
        Record a final-mile attempt; the outcome alone decides the new status.

        A successful attempt is expected to be followed by attach_proof.
        """
        attempt = DeliveryAttempt.capture(success, outcome_note, attempted_by, clock=self._clock)
        self._delivery_attempts.append(attempt)
        if attempt.success:
            self.status = ParcelLifecycleStatus.DELIVERED
        else:
            self.status = ParcelLifecycleStatus.DELIVERY_FAILED
        return self.status

    def attach_proof(self, receiver_name: str, code: str) -> ParcelLifecycleStatus:
        """Set or replace the proof of delivery and mark the parcel DELIVERED."""
        self.proof = ProofOfDelivery.capture(receiver_name, code, clock=self._clock)
        self.status = ParcelLifecycleStatus.DELIVERED
        return self.status

    def mark_returned(self, reason_note: Optional[str] = None) -> ParcelLifecycleStatus:
        """
        Mark the parcel RETURNED and log the return as a scan at RETURN_HUB.

        The synthetic scan does not move last_known_hub_id.
        """
        self.status = ParcelLifecycleStatus.RETURNED
        self._scans.append(ScanEvent.capture(RETURN_HUB, reason_note, clock=self._clock))
        return self.status

    def status_summary(self) -> str:
        return self.status.value

    def __repr__(self):
        return f"<Parcel(id='{self.id}', status='{self.status.value}', scans={len(self._scans)})>"
