"""
Parcel lifecycle status enumeration.
"""

import enum


class ParcelLifecycleStatus(str, enum.Enum):
    """
    Parcel lifecycle status enumeration.

    Status flow:
        CREATED → IN_TRANSIT (first scan)
        any → DELIVERED (successful attempt or proof attached)
        any → DELIVERY_FAILED (failed attempt) → IN_TRANSIT (next scan)
        any → RETURNED

    DELIVERED and RETURNED are terminal by convention only; further
    operations are still accepted.
    """
    CREATED = "CREATED"
    IN_TRANSIT = "IN_TRANSIT"
    OUT_FOR_DELIVERY = "OUT_FOR_DELIVERY"
    DELIVERED = "DELIVERED"
    RETURNED = "RETURNED"
    DELIVERY_FAILED = "DELIVERY_FAILED"


# A scan in one of these states moves the parcel (back) into transit
SCAN_ADVANCES_FROM = frozenset({
    ParcelLifecycleStatus.CREATED,
    ParcelLifecycleStatus.DELIVERY_FAILED,
})

# Statuses that count as a finished business outcome for shipment closing
CLOSING_STATUSES = frozenset({
    ParcelLifecycleStatus.DELIVERED,
    ParcelLifecycleStatus.RETURNED,
})
