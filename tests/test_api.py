"""Tests for the HTTP API."""

from fastapi.testclient import TestClient

API = "/api/v1"


def init_station(client: TestClient, name: str, admin_id: int = 1, funds: int = 0) -> dict:
    response = client.post(
        f"{API}/admin/init", json={"admin_id": admin_id, "name": name, "funds": funds}
    )
    assert response.status_code == 200
    return response.json()


def create_train(client: TestClient, admin_id: int = 1, **overrides):
    payload = {
        "departure_station": "Central",
        "arrival_station": "North",
        "seat_count": 2,
        "price": 50,
        "schedule": 9999,
    }
    payload.update(overrides)
    return client.post(f"{API}/trains/", params={"admin_id": admin_id}, json=payload)


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "healthy"}


def test_init_system_reports_ids(client: TestClient) -> None:
    body = init_station(client, "Central", funds=1000)

    assert body == {
        "message": "System initialized with admin 1 and station 1",
        "admin_id": 1,
        "station_id": 1,
    }
    station = client.get(f"{API}/stations/1").json()
    assert station == {"id": 1, "name": "Central", "funds": 1000, "train_ids": []}


def test_booking_flow(client: TestClient) -> None:
    init_station(client, "Central", funds=1000)
    init_station(client, "North")

    response = create_train(client)
    assert response.status_code == 200
    train = response.json()
    assert train["seats"] == {"1": "Available", "2": "Available"}

    response = client.post(
        f"{API}/bookings/tickets",
        json={"train_id": train["id"], "owner": "alice", "seat_number": 1},
    )
    assert response.status_code == 200
    ticket = response.json()
    assert ticket["seat_number"] == 1
    assert client.get(f"{API}/trains/{train['id']}").json()["seats"] == {
        "1": "Booked",
        "2": "Available",
    }
    assert client.get(f"{API}/bookings/tickets/{ticket['id']}").json() == ticket

    response = client.post(
        f"{API}/bookings/tickets",
        json={"train_id": train["id"], "owner": "bob", "seat_number": 1},
    )
    assert response.status_code == 409
    assert response.json()["detail"] == "Seat already booked"

    response = client.post(f"{API}/trains/{train['id']}/close", params={"admin_id": 1})
    assert response.status_code == 200
    assert response.json() == {"message": f"Train {train['id']} closed successfully"}
    assert client.get(f"{API}/stations/1").json()["train_ids"] == []
    assert client.get(f"{API}/trains/{train['id']}").status_code == 404

    # Ticket outlives its train
    assert client.get(f"{API}/bookings/tickets/{ticket['id']}").status_code == 200


def test_refund_after_purchase_is_rejected(client: TestClient) -> None:
    init_station(client, "Central")
    train = create_train(client, arrival_station="Central").json()
    ticket = client.post(
        f"{API}/bookings/tickets",
        json={"train_id": train["id"], "owner": "alice", "seat_number": 2},
    ).json()

    response = client.post(f"{API}/bookings/tickets/{ticket['id']}/refund")

    assert response.status_code == 409
    assert response.json()["detail"] == "Train has already departed"


def test_error_responses(client: TestClient) -> None:
    init_station(client, "Central")

    response = create_train(client, admin_id=42)
    assert response.status_code == 401
    assert response.json()["detail"] == "Unauthorized access"

    response = create_train(client)
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid station name(s)"

    response = client.post(f"{API}/trains/404/close", params={"admin_id": 1})
    assert response.status_code == 404

    response = client.post(f"{API}/trains/404/close", params={"admin_id": 42})
    assert response.status_code == 401

    response = client.post(
        f"{API}/bookings/tickets", json={"train_id": 404, "owner": "alice", "seat_number": 1}
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Train not found"

    response = client.post(f"{API}/bookings/tickets/404/refund")
    assert response.status_code == 404
    assert response.json()["detail"] == "Ticket not found"

    assert client.get(f"{API}/stations/404").json() == {"detail": "Station not found"}


def test_oversized_station_is_a_server_error(client: TestClient) -> None:
    response = client.post(
        f"{API}/admin/init", json={"admin_id": 1, "name": "x" * 600, "funds": 0}
    )

    assert response.status_code == 500
    assert client.get(f"{API}/stations/1").status_code == 404


def test_ids_beyond_int64_are_rejected(client: TestClient) -> None:
    """Given a u64 value no column can hold, then the request fails validation."""
    init_station(client, "Central")
    huge = 2**64 - 1

    assert client.get(f"{API}/trains/{huge}").status_code == 422
    assert client.get(f"{API}/stations/{huge}").status_code == 422
    assert client.get(f"{API}/bookings/tickets/{huge}").status_code == 422
    assert client.post(f"{API}/bookings/tickets/{huge}/refund").status_code == 422
    assert client.post(f"{API}/trains/1/close", params={"admin_id": huge}).status_code == 422

    response = client.post(
        f"{API}/bookings/tickets", json={"train_id": 2**63, "owner": "alice", "seat_number": 1}
    )
    assert response.status_code == 422

    response = create_train(client, seat_count=2**63)
    assert response.status_code == 422


def test_huge_seat_count_is_a_server_error(client: TestClient) -> None:
    init_station(client, "Central")

    response = create_train(client, arrival_station="Central", seat_count=10**9)

    assert response.status_code == 500
    assert "exceeds the record size limit" in response.json()["detail"]


def test_list_train_tickets(client: TestClient) -> None:
    init_station(client, "Central")
    train = create_train(client, arrival_station="Central").json()
    sold = [
        client.post(
            f"{API}/bookings/tickets",
            json={"train_id": train["id"], "owner": owner, "seat_number": seat},
        ).json()
        for owner, seat in [("alice", 1), ("bob", 2)]
    ]

    assert client.get(f"{API}/trains/{train['id']}/tickets").json() == sold

    client.post(f"{API}/trains/{train['id']}/close", params={"admin_id": 1})
    assert client.get(f"{API}/trains/{train['id']}/tickets").json() == sold
    assert client.get(f"{API}/trains/404/tickets").json() == []
