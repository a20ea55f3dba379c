"""
Hub reference record.

A hub is a physical node of the network where parcels get scanned.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Hub:
    id: str
    name: str

    def __str__(self) -> str:
        return f"{self.id} - {self.name}"
