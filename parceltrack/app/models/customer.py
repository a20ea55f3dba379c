"""
Customer reference record.

Customers are owned by the registry; parcels only hold references to them.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    """A sender or receiver of parcels."""
    id: str
    name: str
    address: str

    def __str__(self) -> str:
        return f"{self.id} ({self.name}) - {self.address}"
