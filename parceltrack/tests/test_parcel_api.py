"""
Integration tests for the parcel lifecycle API.

Tests registry checks, lifecycle transitions over HTTP, and error responses.
"""

import pytest

# Note: Client and registry setup are in conftest.py (sample data preloaded)


async def create_parcel(client, parcel_id="P002", weight_kg=2.5):
    response = await client.post("/v1/parcels", json={
        "id": parcel_id,
        "sender_id": "C001",
        "receiver_id": "C002",
        "weight_kg": weight_kg
    })
    assert response.status_code == 201
    return response.json()


# TEST 1: Create Customer / Hub
@pytest.mark.asyncio
async def test_create_customer_and_hub(client):
    response = await client.post("/v1/customers", json={
        "id": "C003", "name": "  Carol ", "address": "7 Hill Road, Madurai"
    })
    assert response.status_code == 201
    assert response.json() == {"id": "C003", "name": "Carol", "address": "7 Hill Road, Madurai"}

    response = await client.post("/v1/hubs", json={"id": "H003", "name": "Madurai Hub"})
    assert response.status_code == 201

    hubs = (await client.get("/v1/hubs")).json()
    assert hubs["total"] == 3


@pytest.mark.asyncio
async def test_duplicate_customer_is_conflict(client):
    response = await client.post("/v1/customers", json={
        "id": "C001", "name": "Someone", "address": "Elsewhere"
    })

    assert response.status_code == 409
    body = response.json()
    assert body["error_code"] == "ERR_CONFLICT_001"
    assert "already exists" in body["message"]


@pytest.mark.asyncio
async def test_blank_fields_are_rejected(client):
    response = await client.post("/v1/customers", json={"id": "C009", "name": "   ", "address": "x"})

    assert response.status_code == 422
    assert response.json()["error_code"] == "ERR_VALIDATION"


# TEST 2: Create Parcel
@pytest.mark.asyncio
async def test_create_parcel_success(client):
    data = await create_parcel(client)

    assert data["id"] == "P002"
    assert data["status"] == "CREATED"
    assert data["sender"]["id"] == "C001"
    assert data["receiver"]["id"] == "C002"
    assert data["weight_kg"] == 2.5
    assert data["scans"] == []
    assert data["delivery_attempts"] == []
    assert data["proof"] is None
    assert data["last_known_hub_id"] is None


@pytest.mark.asyncio
async def test_create_parcel_unknown_receiver(client):
    response = await client.post("/v1/parcels", json={
        "id": "P002", "sender_id": "C001", "receiver_id": "C404", "weight_kg": 1.0
    })

    assert response.status_code == 404
    assert response.json()["details"] == {"resource": "Customer", "id": "C404"}


@pytest.mark.asyncio
async def test_create_parcel_duplicate_id(client):
    response = await client.post("/v1/parcels", json={
        "id": "P001", "sender_id": "C001", "receiver_id": "C002", "weight_kg": 1.0
    })

    assert response.status_code == 409


@pytest.mark.asyncio
@pytest.mark.parametrize("weight", [-1, "heavy"])
async def test_create_parcel_invalid_weight(client, weight):
    response = await client.post("/v1/parcels", json={
        "id": "P002", "sender_id": "C001", "receiver_id": "C002", "weight_kg": weight
    })

    assert response.status_code == 422


# TEST 3: Lifecycle scenario over HTTP
@pytest.mark.asyncio
async def test_full_lifecycle_scenario(client):
    """Scan, failed attempt, rescan, successful attempt with proof."""
    response = await client.post("/v1/parcels/P001/scans", json={"hub_id": "H001", "note": "Arrived"})
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "IN_TRANSIT"
    assert data["last_known_hub_id"] == "H001"
    assert data["scans"][0]["hub"] == {"id": "H001", "name": "Chennai Hub"}
    assert data["scans"][0]["note"] == "Arrived"

    response = await client.post("/v1/parcels/P001/delivery-attempts", json={
        "success": False, "outcome_note": "No one home", "attempted_by": "courier-7"
    })
    data = response.json()
    assert data["status"] == "DELIVERY_FAILED"
    assert data["delivery_attempts"][0]["attempted_by"] == "courier-7"

    response = await client.post("/v1/parcels/P001/scans", json={"hub_id": "H001", "note": "Re-attempt scheduled"})
    assert response.json()["status"] == "IN_TRANSIT"

    response = await client.post("/v1/parcels/P001/delivery-attempts", json={
        "success": True,
        "proof": {"receiver_name": "Bob", "code": "XYZ123"}
    })
    data = response.json()
    assert data["status"] == "DELIVERED"
    assert data["proof"]["receiver_name"] == "Bob"
    assert data["proof"]["code"] == "XYZ123"
    assert len(data["scans"]) == 2
    assert len(data["delivery_attempts"]) == 2

    detail = (await client.get("/v1/parcels/P001")).json()
    assert detail == data


@pytest.mark.asyncio
async def test_scan_at_unknown_hub(client):
    response = await client.post("/v1/parcels/P001/scans", json={"hub_id": "H404"})

    assert response.status_code == 404
    parcel = (await client.get("/v1/parcels/P001")).json()
    assert parcel["scans"] == []


@pytest.mark.asyncio
async def test_unknown_parcel(client):
    response = await client.get("/v1/parcels/P404")

    assert response.status_code == 404
    assert response.json()["message"] == "Parcel with ID P404 not found"


@pytest.mark.asyncio
async def test_proof_with_failed_attempt_is_rejected(client, seeded_registry):
    response = await client.post("/v1/parcels/P001/delivery-attempts", json={
        "success": False,
        "proof": {"receiver_name": "Bob", "code": "XYZ123"}
    })

    assert response.status_code == 422
    parcel = seeded_registry.parcels.require("P001")
    assert parcel.delivery_attempts == ()
    assert parcel.status.value == "CREATED"


@pytest.mark.asyncio
async def test_attach_proof_directly(client):
    response = await client.post("/v1/parcels/P001/proof", json={"receiver_name": "Bob", "code": "SIG-1"})

    assert response.status_code == 200
    assert response.json()["status"] == "DELIVERED"
    assert response.json()["delivery_attempts"] == []


@pytest.mark.asyncio
async def test_mark_returned(client):
    response = await client.post("/v1/parcels/P001/return", json={"reason": "Address not found"})

    data = response.json()
    assert data["status"] == "RETURNED"
    assert data["scans"][-1]["hub"] == {"id": "RETURN", "name": "Returned to Sender"}
    assert data["scans"][-1]["note"] == "Address not found"


@pytest.mark.asyncio
async def test_mark_returned_without_body(client):
    response = await client.post("/v1/parcels/P001/return")

    assert response.status_code == 200
    assert response.json()["scans"][-1]["note"] is None


@pytest.mark.asyncio
async def test_list_parcels_by_status(client):
    await create_parcel(client, "P002")
    await client.post("/v1/parcels/P002/scans", json={"hub_id": "H002"})

    all_parcels = (await client.get("/v1/parcels")).json()
    in_transit = (await client.get("/v1/parcels", params={"status": "IN_TRANSIT"})).json()

    assert all_parcels["total"] == 2
    assert [p["id"] for p in in_transit["parcels"]] == ["P002"]


@pytest.mark.asyncio
async def test_parcel_timeline_text(client):
    await client.post("/v1/parcels/P001/scans", json={"hub_id": "H001", "note": "Arrived"})

    response = await client.get("/v1/parcels/P001/timeline")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert "Parcel ID: P001" in response.text
    assert "Chennai Hub @" in response.text
    assert "(Arrived)" in response.text


# TEST 4: Audit trail and observability
@pytest.mark.asyncio
async def test_lifecycle_operations_are_audited(client):
    await client.post(
        "/v1/parcels/P001/scans",
        json={"hub_id": "H001"},
        headers={"X-Correlation-ID": "corr-123"}
    )

    response = await client.get("/v1/audit", params={"entity_id": "P001"})

    entry = response.json()["entries"][0]
    assert entry["action"] == "PARCEL_SCANNED"
    assert entry["correlation_id"] == "corr-123"
    assert entry["metadata"] == {"hub_id": "H001", "previous_status": "CREATED", "status": "IN_TRANSIT"}


@pytest.mark.asyncio
async def test_correlation_id_header(client):
    response = await client.get("/health", headers={"X-Correlation-ID": "abc"})

    assert response.status_code == 200
    assert response.headers["X-Correlation-ID"] == "abc"
    assert "X-Process-Time" in response.headers
