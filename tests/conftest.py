import os
from datetime import date, timedelta
from typing import Generator

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("SEED_DEMO_USERS", "true")
os.environ.setdefault("RATE_LIMITING_ENABLED", "false")

from hotel_common.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from hotel_app.main import app  # noqa: E402
from hotel_common.services import HotelServices, get_services, reset_services_cache  # noqa: E402

ADMIN = ("admin@gmail.com", "admin123")
STAFF = ("staff@gmail.com", "staff123")
CUSTOMER = ("customer@gmail.com", "customer123")

ROOM_PAYLOAD = {
    "number": "101",
    "type": "deluxe",
    "capacity": 3,
    "price_per_night": 2000,
    "description": "Sea view deluxe room",
    "amenities": ["wifi", "tv"],
}


@pytest.fixture(autouse=True)
def _fresh_store() -> Generator[None, None, None]:
    reset_services_cache()
    yield
    reset_services_cache()


@pytest.fixture()
def services() -> HotelServices:
    return get_services()


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


def auth_header(client: TestClient, email: str, password: str) -> dict[str, str]:
    response = client.post(
        "/login",
        data={"username": email, "password": password},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def admin_headers(client: TestClient) -> dict[str, str]:
    return auth_header(client, *ADMIN)


@pytest.fixture()
def staff_headers(client: TestClient) -> dict[str, str]:
    return auth_header(client, *STAFF)


@pytest.fixture()
def customer_headers(client: TestClient) -> dict[str, str]:
    return auth_header(client, *CUSTOMER)


@pytest.fixture()
def room_id(client: TestClient, admin_headers: dict[str, str]) -> int:
    response = client.post("/admin/rooms", json=ROOM_PAYLOAD, headers=admin_headers)
    assert response.status_code == 201
    return response.json()["id"]


def stay(days_ahead: int = 10, nights: int = 3) -> tuple[str, str]:
    check_in = date.today() + timedelta(days=days_ahead)
    return check_in.isoformat(), (check_in + timedelta(days=nights)).isoformat()


@pytest.fixture()
def booking(client: TestClient, customer_headers: dict[str, str], room_id: int) -> dict:
    check_in, check_out = stay()
    response = client.post(
        f"/customer/reserve/{room_id}",
        json={
            "guest_name": "Juan Dela Cruz",
            "check_in_date": check_in,
            "check_out_date": check_out,
            "guest_count": 2,
            "payment_method": "gcash",
            "gcash_number": "09171234567",
        },
        headers=customer_headers,
    )
    assert response.status_code == 201
    return response.json()
