def test_staff_dashboard_counts(client, staff_headers, booking):
    response = client.get("/staff", headers=staff_headers)
    assert response.status_code == 200
    stats = response.json()
    assert stats["total_bookings"] == 1
    assert stats["pending_bookings"] == 1
    assert stats["pending_payments"] == 1
    assert stats["total_rooms"] == 1
    assert stats["available_rooms"] == 1
    assert stats["recent_bookings"][0]["id"] == booking["id"]


def test_customer_cannot_open_staff_area(client, customer_headers):
    response = client.get("/staff/reservations", headers=customer_headers)
    assert response.status_code == 403
    assert response.json()["redirect"] == "/unauthorized"


def test_booking_status_lifecycle(client, staff_headers, booking):
    url = f"/staff/manage-bookings/{booking['id']}"

    confirmed = client.patch(url, json={"status": "confirmed"}, headers=staff_headers)
    assert confirmed.status_code == 200
    assert confirmed.json()["status"] == "confirmed"

    completed = client.patch(url, json={"status": "completed"}, headers=staff_headers)
    assert completed.json()["status"] == "completed"

    response = client.post(f"{url}/cancel", headers=staff_headers)
    assert response.status_code == 409


def test_pending_booking_cannot_skip_to_completed(client, staff_headers, booking):
    response = client.patch(
        f"/staff/manage-bookings/{booking['id']}",
        json={"status": "completed"},
        headers=staff_headers,
    )
    assert response.status_code == 409
    assert "pending to completed" in response.json()["detail"]


def test_update_booking_details_keeps_total(client, staff_headers, booking):
    response = client.put(
        f"/staff/manage-bookings/{booking['id']}/details",
        json={"guest_name": "Pedro Penduko", "total_amount": 1},
        headers=staff_headers,
    )
    assert response.status_code == 200
    assert response.json()["guest_name"] == "Pedro Penduko"
    assert response.json()["total_amount"] == booking["total_amount"]


def test_update_booking_details_ignores_nulls(client, staff_headers, booking):
    response = client.put(
        f"/staff/manage-bookings/{booking['id']}/details",
        json={"guest_name": None, "guest_count": None, "special_requests": None},
        headers=staff_headers,
    )
    assert response.status_code == 200
    assert response.json()["guest_name"] == booking["guest_name"]
    assert response.json()["guest_count"] == booking["guest_count"]
    assert response.json()["special_requests"] is None


def test_update_booking_details_respects_room_capacity(client, staff_headers, booking):
    url = f"/staff/manage-bookings/{booking['id']}/details"

    too_many = client.put(url, json={"guest_count": 50}, headers=staff_headers)
    assert too_many.status_code == 400
    assert "at most 3 guests" in too_many.json()["detail"]

    assert client.put(url, json={"guest_count": 3}, headers=staff_headers).json()["guest_count"] == 3


def test_payment_lifecycle(client, staff_headers, booking):
    url = f"/staff/manage-payments/{booking['id']}"

    assert client.patch(url, json={"payment_status": "refunded"}, headers=staff_headers).status_code == 409

    paid = client.patch(url, json={"payment_status": "paid"}, headers=staff_headers)
    assert paid.json()["payment_status"] == "paid"

    refunded = client.patch(url, json={"payment_status": "refunded"}, headers=staff_headers)
    assert refunded.status_code == 200
    assert refunded.json()["payment_status"] == "refunded"


def test_refund_blocked_after_cancellation(client, staff_headers, booking):
    client.patch(f"/staff/manage-payments/{booking['id']}", json={"payment_status": "paid"}, headers=staff_headers)
    client.post(f"/staff/manage-bookings/{booking['id']}/cancel", headers=staff_headers)

    response = client.patch(
        f"/staff/manage-payments/{booking['id']}",
        json={"payment_status": "refunded"},
        headers=staff_headers,
    )
    assert response.status_code == 409


def test_reservation_filters(client, staff_headers, booking):
    by_status = client.get("/staff/reservations", params={"status": "pending"}, headers=staff_headers)
    assert [b["id"] for b in by_status.json()] == [booking["id"]]

    confirmed_only = client.get("/staff/reservations", params={"status": "confirmed"}, headers=staff_headers)
    assert confirmed_only.json() == []

    by_name = client.get("/staff/reservations", params={"search": "dela cruz"}, headers=staff_headers)
    assert len(by_name.json()) == 1

    this_month = client.get("/staff/reservations", params={"date_range": "month"}, headers=staff_headers)
    assert len(this_month.json()) == 1

    today = client.get("/staff/reservations", params={"date_range": "today"}, headers=staff_headers)
    assert today.json() == []

    bad_range = client.get("/staff/reservations", params={"date_range": "decade"}, headers=staff_headers)
    assert bad_range.status_code == 422


def test_payment_filter(client, staff_headers, booking):
    pending = client.get("/staff/manage-payments", params={"payment_status": "pending"}, headers=staff_headers)
    assert len(pending.json()) == 1
    paid = client.get("/staff/manage-payments", params={"payment_status": "paid"}, headers=staff_headers)
    assert paid.json() == []


def test_available_rooms_view(client, staff_headers, admin_headers, room_id):
    client.post(
        "/admin/rooms",
        json={"number": "B12", "status": "maintenance", "description": "Garden wing"},
        headers=admin_headers,
    )

    available = client.get("/staff/available-rooms", headers=staff_headers).json()
    assert [room["id"] for room in available] == [room_id]

    everything = client.get("/staff/available-rooms", params={"all_statuses": True}, headers=staff_headers).json()
    assert len(everything) == 2

    garden = client.get(
        "/staff/available-rooms",
        params={"all_statuses": True, "search": "garden"},
        headers=staff_headers,
    ).json()
    assert [room["number"] for room in garden] == ["B12"]


def test_missing_booking_is_not_found(client, staff_headers):
    response = client.patch("/staff/manage-bookings/999", json={"status": "confirmed"}, headers=staff_headers)
    assert response.status_code == 404
    assert response.json()["detail"] == "Booking not found"
