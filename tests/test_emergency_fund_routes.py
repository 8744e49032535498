"""HTTP tests for the emergency fund endpoints."""

from __future__ import annotations


def test_missing_fund_is_not_found(client, auth_headers):
    response = client.get("/api/emergency-fund", headers=auth_headers)
    assert response.status_code == 404
    assert response.get_json()["message"] == "Emergency fund not found"


def test_upsert_defaults_target_from_expenses(client, auth_headers):
    response = client.post(
        "/api/emergency-fund", json={"monthly_expenses": 3000}, headers=auth_headers
    )
    data = response.get_json()["data"]

    assert response.status_code == 200
    assert data["target_amount"] == 18000
    assert data["progress_percentage"] == 0
    assert data["months_covered"] == "0.0"
    assert data["recommended_target"] == 18000


def test_upsert_uses_configured_months(app, client, auth_headers):
    app.config["EMERGENCY_FUND_MONTHS"] = 3
    response = client.post(
        "/api/emergency-fund", json={"monthly_expenses": 3000}, headers=auth_headers
    )
    assert response.get_json()["data"]["target_amount"] == 9000


def test_upsert_requires_a_field(client, auth_headers):
    response = client.post("/api/emergency-fund", json={}, headers=auth_headers)
    assert response.status_code == 400
    assert "monthly_expenses" in response.get_json()["errors"]


def test_upsert_merges_existing(client, auth_headers):
    client.post(
        "/api/emergency-fund",
        json={"monthly_expenses": 3000, "current_amount": 5000},
        headers=auth_headers,
    )
    response = client.post(
        "/api/emergency-fund", json={"target_amount": 20000}, headers=auth_headers
    )
    data = response.get_json()["data"]

    assert data["target_amount"] == 20000
    assert data["current_amount"] == 5000
    assert data["progress_percentage"] == 25


def test_amount_deltas_floor_at_zero(client, auth_headers):
    client.post(
        "/api/emergency-fund",
        json={"monthly_expenses": 3000, "current_amount": 500},
        headers=auth_headers,
    )

    response = client.put("/api/emergency-fund/amount", json={"amount": 1000}, headers=auth_headers)
    assert response.get_json()["data"]["current_amount"] == 1500

    response = client.put("/api/emergency-fund/amount", json={"amount": -2000}, headers=auth_headers)
    assert response.get_json()["data"]["current_amount"] == 0


def test_amount_without_fund_is_not_found(client, auth_headers):
    response = client.put("/api/emergency-fund/amount", json={"amount": 100}, headers=auth_headers)
    assert response.status_code == 404


def test_amount_must_be_numeric(client, auth_headers):
    response = client.put(
        "/api/emergency-fund/amount", json={"amount": "lots"}, headers=auth_headers
    )
    assert response.status_code == 400
    assert response.get_json()["message"] == "Enter a valid number."


def test_delete(client, auth_headers):
    client.post("/api/emergency-fund", json={"target_amount": 1000}, headers=auth_headers)

    assert client.delete("/api/emergency-fund", headers=auth_headers).status_code == 200
    assert client.delete("/api/emergency-fund", headers=auth_headers).status_code == 404
