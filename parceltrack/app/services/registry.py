"""
In-memory entity registry.

Holds customers, hubs, parcels and shipments keyed by identifier and performs
the uniqueness and existence checks the lifecycle core leaves to its callers.
State lives for the lifetime of the process only.
"""

import logging
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from parceltrack.app.core.clock import Clock, utc_now
from parceltrack.app.core.exceptions import DuplicateResourceError, ResourceNotFoundError
from parceltrack.app.services.audit import AuditEntry
from parceltrack.app.models.customer import Customer
from parceltrack.app.models.hub import Hub
from parceltrack.app.models.parcel import Parcel
from parceltrack.app.models.shipment import Shipment

logger = logging.getLogger("parceltrack.registry")

T = TypeVar("T")


class Repository(Generic[T]):
    """
    Identifier-keyed store for one entity type.

    Usage:
        hubs = Repository[Hub]("Hub")
        hubs.add(Hub("H001", "Chennai Hub"))
        hub = hubs.require("H001")
    """

    def __init__(self, resource_name: str):
        self.resource_name = resource_name
        self._items: Dict[str, T] = {}

    def add(self, item: T) -> T:
        """
        Register an entity under its ``id``.

        Raises:
            DuplicateResourceError: if the identifier is already taken
        """
        item_id = item.id
        if item_id in self._items:
            raise DuplicateResourceError(self.resource_name, item_id)
        self._items[item_id] = item
        return item

    def get(self, item_id: str) -> Optional[T]:
        return self._items.get(item_id)

    def require(self, item_id: str) -> T:
        """
        Look up an entity that must exist.

        Raises:
            ResourceNotFoundError: if no entity has this identifier
        """
        item = self._items.get(item_id)
        if item is None:
            raise ResourceNotFoundError(self.resource_name, item_id)
        return item

    def list(self, predicate: Optional[Callable[[T], bool]] = None) -> List[T]:
        items = list(self._items.values())
        if predicate is not None:
            items = [item for item in items if predicate(item)]
        return items

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._items)


class Registry:
    """Process-wide set of repositories sharing one clock and one audit trail."""

    def __init__(self, clock: Clock = utc_now):
        self.clock = clock
        self.customers: Repository[Customer] = Repository("Customer")
        self.hubs: Repository[Hub] = Repository("Hub")
        self.parcels: Repository[Parcel] = Repository("Parcel")
        self.shipments: Repository[Shipment] = Repository("Shipment")
        self.audit_trail: List[AuditEntry] = []

    def new_parcel(self, parcel_id: str, sender_id: str, receiver_id: str, weight_kg: float) -> Parcel:
        """Create and register a parcel between two registered customers."""
        if parcel_id in self.parcels:
            raise DuplicateResourceError("Parcel", parcel_id)
        sender = self.customers.require(sender_id)
        receiver = self.customers.require(receiver_id)
        return self.parcels.add(Parcel(parcel_id, sender, receiver, weight_kg, clock=self.clock))

    def new_shipment(self, shipment_id: str) -> Shipment:
        return self.shipments.add(Shipment(shipment_id, clock=self.clock))

    def bootstrap_sample_data(self) -> None:
        """Preload two customers, two hubs, one parcel and one shipment."""
        self.customers.add(Customer("C001", "Alice", "12 Park Street, Chennai"))
        self.customers.add(Customer("C002", "Bob", "45 Lake Road, Coimbatore"))
        self.hubs.add(Hub("H001", "Chennai Hub"))
        self.hubs.add(Hub("H002", "Coimbatore Hub"))

        parcel = self.new_parcel("P001", "C001", "C002", 1.2)
        shipment = self.new_shipment("S001")
        shipment.add_parcel(parcel)

        logger.info("Sample data loaded: customers C001/C002, hubs H001/H002, parcel P001, shipment S001")


_registry: Optional[Registry] = None


def get_registry() -> Registry:
    """
    FastAPI dependency returning the process-wide registry.

    Tests override this dependency with a fresh Registry per test.
    """
    global _registry
    if _registry is None:
        _registry = Registry()
    return _registry


def reset_registry(registry: Optional[Registry] = None) -> Registry:
    """Replace the process-wide registry (used at startup)."""
    global _registry
    _registry = registry or Registry()
    return _registry
