"""
API v1 Router.

Aggregates all v1 API endpoints.
"""

from fastapi import APIRouter
from parceltrack.app.api.v1.endpoints import audit, customers, hubs, parcels, shipments

router = APIRouter()

# Registry endpoints
router.include_router(customers.router)
router.include_router(hubs.router)

# Lifecycle endpoints
router.include_router(parcels.router)
router.include_router(shipments.router)

router.include_router(audit.router)
