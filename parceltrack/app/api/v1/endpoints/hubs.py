"""
Hub Registry API Endpoints.
"""

from fastapi import APIRouter, Depends, Path, status

from parceltrack.app.models.hub import Hub
from parceltrack.app.schemas.hub import HubCreate, HubResponse, HubListResponse
from parceltrack.app.services.audit import log_event, AuditAction
from parceltrack.app.services.registry import Registry, get_registry

router = APIRouter(prefix="/hubs", tags=["Hubs"])


@router.post("", response_model=HubResponse, status_code=status.HTTP_201_CREATED)
async def create_hub(
    hub_data: HubCreate,
    registry: Registry = Depends(get_registry)
):
    """
    Add a hub to the network.

    Returns 409 if the hub ID is already taken.
    """
    hub = registry.hubs.add(Hub(id=hub_data.id, name=hub_data.name))

    log_event(registry, AuditAction.HUB_CREATED, hub.id, metadata={"name": hub.name})

    return HubResponse.model_validate(hub)


@router.get("", response_model=HubListResponse)
async def list_hubs(registry: Registry = Depends(get_registry)):
    hubs = registry.hubs.list()
    return HubListResponse(hubs=[HubResponse.model_validate(h) for h in hubs], total=len(hubs))


@router.get("/{hub_id}", response_model=HubResponse)
async def get_hub(
    hub_id: str = Path(..., description="Hub ID"),
    registry: Registry = Depends(get_registry)
):
    return HubResponse.model_validate(registry.hubs.require(hub_id))
