"""
Shipment aggregation.

A shipment groups parcel references it does not own. Closability is derived
from the members' current statuses on every call, so a shipment can become
closable (or stop being closable) without any operation on the shipment
itself. Nothing is locked once a shipment is closable.
"""

from datetime import datetime
from typing import List, Tuple

from parceltrack.app.core.clock import Clock, utc_now
from parceltrack.app.models.parcel import Parcel
from parceltrack.app.models.parcel_enums import CLOSING_STATUSES


class Shipment:
    def __init__(self, id: str, clock: Clock = utc_now):
        self.id = id
        self.created_at: datetime = clock()
        self._parcels: List[Parcel] = []

    @property
    def parcels(self) -> Tuple[Parcel, ...]:
        return tuple(self._parcels)

    def add_parcel(self, parcel: Parcel) -> None:
        """Append a member reference. The same parcel may be added twice."""
        self._parcels.append(parcel)

    def is_closable(self) -> bool:
        """True when every member is DELIVERED or RETURNED (vacuously for none)."""
        return all(parcel.status in CLOSING_STATUSES for parcel in self._parcels)

    def outstanding_parcels(self) -> List[Parcel]:
        """Members that currently keep the shipment from closing."""
        return [parcel for parcel in self._parcels if parcel.status not in CLOSING_STATUSES]

    def __repr__(self):
        return f"<Shipment(id='{self.id}', parcels={len(self._parcels)}, closable={self.is_closable()})>"
