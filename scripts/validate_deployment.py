"""
Pre-Deploy and Smoke Test Script.

Runs the application in-process (startup included, so sample data is loaded)
and walks one parcel through its whole lifecycle:
1. Health Check
2. Scan -> Failed Attempt -> Rescan -> Delivery with Proof
3. Shipment Closability Verification
"""

import sys

from fastapi.testclient import TestClient
from parceltrack.app.core.config import settings
from parceltrack.app.main import app

API = f"/{settings.api_version}"


def print_step(step, msg):
    print(f"[{step}] {msg}")


def fail(msg):
    print(f"❌ FAILURE: {msg}")
    sys.exit(1)


def success(msg):
    print(f"✅ {msg}")


def expect_status(response, expected_code, expected_status=None):
    if response.status_code != expected_code:
        fail(f"{response.request.method} {response.request.url.path}: {response.status_code} {response.text}")
    if expected_status is not None:
        actual = response.json()["status"]
        if actual != expected_status:
            fail(f"Expected parcel status {expected_status}, got {actual}")
    return response


def main():
    print("🚀 Starting Deployment Validation...")

    with TestClient(app) as client:
        # 1. Health Check
        print_step("PRE-DEPLOY", "Checking /health...")
        expect_status(client.get("/health"), 200)
        success("Health check passed")

        if not settings.load_sample_data:
            fail("Smoke test needs LOAD_SAMPLE_DATA=true (parcel P001, shipment S001)")

        # 2. Parcel lifecycle
        print_step("SMOKE", "Running parcel P001 through its lifecycle...")
        expect_status(
            client.post(f"{API}/parcels/P001/scans", json={"hub_id": "H001", "note": "Arrived"}),
            200, "IN_TRANSIT"
        )
        expect_status(
            client.post(f"{API}/parcels/P001/delivery-attempts", json={"success": False, "outcome_note": "No one home"}),
            200, "DELIVERY_FAILED"
        )
        expect_status(
            client.post(f"{API}/parcels/P001/scans", json={"hub_id": "H001", "note": "Re-attempt scheduled"}),
            200, "IN_TRANSIT"
        )

        shipment = client.get(f"{API}/shipments/S001").json()
        if shipment["is_closable"]:
            fail("Shipment S001 reported closable while P001 is in transit")

        expect_status(
            client.post(f"{API}/parcels/P001/delivery-attempts", json={
                "success": True,
                "proof": {"receiver_name": "Bob", "code": "XYZ123"}
            }),
            200, "DELIVERED"
        )
        success("Parcel lifecycle transitions verified")

        # 3. Shipment closability
        print_step("VERIFY", "Checking shipment S001...")
        shipment = client.get(f"{API}/shipments/S001").json()
        if not shipment["is_closable"]:
            fail(f"Shipment S001 should be closable: {shipment}")
        success("Shipment closability verified")

        print(client.get(f"{API}/parcels/P001/timeline").text)

    success("Deployment Validation Passed!")


if __name__ == "__main__":
    main()
