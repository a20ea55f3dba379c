"""
Customer Registry API Endpoints.

Customers are immutable once registered; parcels reference them as sender and receiver.
"""

from fastapi import APIRouter, Depends, Path, status

from parceltrack.app.models.customer import Customer
from parceltrack.app.schemas.customer import CustomerCreate, CustomerResponse, CustomerListResponse
from parceltrack.app.services.audit import log_event, AuditAction
from parceltrack.app.services.registry import Registry, get_registry

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(
    customer_data: CustomerCreate,
    registry: Registry = Depends(get_registry)
):
    """
    Register a customer.

    Returns 409 if the customer ID is already taken.
    """
    customer = registry.customers.add(
        Customer(id=customer_data.id, name=customer_data.name, address=customer_data.address)
    )

    log_event(registry, AuditAction.CUSTOMER_CREATED, customer.id, metadata={"name": customer.name})

    return CustomerResponse.model_validate(customer)


@router.get("", response_model=CustomerListResponse)
async def list_customers(registry: Registry = Depends(get_registry)):
    customers = registry.customers.list()
    return CustomerListResponse(
        customers=[CustomerResponse.model_validate(c) for c in customers],
        total=len(customers)
    )


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(
    customer_id: str = Path(..., description="Customer ID"),
    registry: Registry = Depends(get_registry)
):
    return CustomerResponse.model_validate(registry.customers.require(customer_id))
