# This file tests service listing endpoints for JSON and multipart creation, reads and deletes.

from __future__ import annotations

from pathlib import Path

from tests.api.support import SERVICE_PAYLOAD, api_test_client, create_service, create_vendor


def test_create_service_from_json_without_image() -> None:
    with api_test_client() as client:
        vendor_id = create_vendor(client)
        response = client.post(
            "/api/services",
            json={"vendor_id": vendor_id, "name": "Tailoring", "category": "Clothing", "price": 12.0},
        )
        services = client.get(f"/api/vendors/{vendor_id}/services").json()

    assert response.status_code == 200
    assert response.json()["message"] == "Service created successfully"
    assert len(services) == 1
    assert services[0]["id"] == response.json()["id"]
    assert services[0]["duration"] == 0
    assert services[0]["image_url"] is None


def test_create_service_from_multipart_with_image(upload_dir: Path) -> None:
    with api_test_client() as client:
        vendor_id = create_vendor(client)
        response = client.post(
            "/api/services",
            data={
                "vendor_id": str(vendor_id),
                "name": "Henna Art",
                "category": "Beauty",
                "price": "30.5",
                "duration": "45",
            },
            files={"image": ("henna.jpg", b"henna-photo", "image/jpeg")},
        )
        service = client.get(f"/api/vendors/{vendor_id}/services").json()[0]
        served = client.get(service["image_url"])

    assert response.status_code == 200
    assert service["price"] == 30.5
    assert service["duration"] == 45
    assert service["image_url"].startswith("/uploads/")
    assert service["image_url"].endswith(".jpg")
    assert served.content == b"henna-photo"
    assert len(list(upload_dir.iterdir())) == 1


def test_create_service_from_multipart_without_image() -> None:
    with api_test_client() as client:
        vendor_id = create_vendor(client)
        response = client.post(
            "/api/services",
            data={"vendor_id": str(vendor_id), "name": "Shoe Repair", "category": "Repairs", "price": "5"},
        )
        service = client.get(f"/api/vendors/{vendor_id}/services").json()[0]

    assert response.status_code == 200
    assert service["image_url"] is None


def test_invalid_form_price_is_rejected_without_storing_image(upload_dir: Path) -> None:
    with api_test_client() as client:
        vendor_id = create_vendor(client)
        response = client.post(
            "/api/services",
            data={"vendor_id": str(vendor_id), "name": "X", "category": "Y", "price": "lots"},
            files={"image": ("x.png", b"x", "image/png")},
        )

    assert response.status_code == 422
    assert response.json()["error_code"] == "VALIDATION_ERROR"
    assert not upload_dir.exists() or list(upload_dir.iterdir()) == []


def test_malformed_json_body_is_a_client_error() -> None:
    with api_test_client() as client:
        response = client.post(
            "/api/services",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )

    assert response.status_code == 400
    assert response.json()["error"] == "Malformed JSON body"


def test_service_with_unknown_vendor_fails_at_storage_layer() -> None:
    with api_test_client() as client:
        response = client.post("/api/services", json={**SERVICE_PAYLOAD, "vendor_id": 404})

    assert response.status_code == 500
    assert response.json()["error"] == "FOREIGN KEY constraint failed"


def test_list_services_includes_vendor_contact_newest_first() -> None:
    with api_test_client() as client:
        vendor_id = create_vendor(client, name="Salon Ya Amani", phone="0722333444", location="Upper Floor")
        older = create_service(client, vendor_id)
        newer = create_service(client, vendor_id, name="Manicure")
        services = client.get("/api/services").json()

    assert [service["id"] for service in services] == [newer, older]
    assert services[0]["vendor_name"] == "Salon Ya Amani"
    assert services[0]["vendor_phone"] == "0722333444"
    assert services[0]["vendor_location"] == "Upper Floor"


def test_list_vendor_services_only_returns_that_vendor() -> None:
    with api_test_client() as client:
        vendor_id = create_vendor(client)
        other_vendor_id = create_vendor(client, name="Other")
        mine = create_service(client, vendor_id)
        create_service(client, other_vendor_id)
        services = client.get(f"/api/vendors/{vendor_id}/services").json()

    assert [service["id"] for service in services] == [mine]


def test_delete_service_reports_changes() -> None:
    with api_test_client() as client:
        vendor_id = create_vendor(client)
        service_id = create_service(client, vendor_id)
        first = client.delete(f"/api/services/{service_id}")
        second = client.delete(f"/api/services/{service_id}")

    assert first.json() == {"message": "Service deleted successfully", "changes": 1}
    assert second.status_code == 200
    assert second.json()["changes"] == 0
