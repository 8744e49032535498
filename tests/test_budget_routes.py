"""HTTP tests for the budget endpoints."""

from __future__ import annotations

from datetime import date

import pytest

FOOD_MARCH = {"category": "Food", "limit": 300, "month": 3, "year": 2024}


@pytest.fixture
def budget_id(client, auth_headers):
    response = client.post("/api/budgets", json=FOOD_MARCH, headers=auth_headers)
    assert response.status_code == 201
    return response.get_json()["data"]["id"]


def test_create_is_an_upsert(client, auth_headers, budget_id):
    response = client.post(
        "/api/budgets", json={**FOOD_MARCH, "category": "food", "limit": 400}, headers=auth_headers
    )
    body = response.get_json()

    assert response.status_code == 201
    assert body["message"] == "Budget saved successfully"
    assert body["data"]["id"] == budget_id
    assert body["data"]["limit"] == 400


@pytest.mark.parametrize(
    "overrides,message",
    [
        ({"month": 13}, "Month must be between 1 and 12"),
        ({"year": 2019}, "Year must be between 2020 and 2100"),
        ({"limit": -5}, "Value cannot be less than 0."),
        ({"category": "x" * 51}, "Cannot exceed 50 characters."),
    ],
)
def test_create_validates(client, auth_headers, overrides, message):
    response = client.post("/api/budgets", json={**FOOD_MARCH, **overrides}, headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json()["message"] == message


def test_month_listing(client, auth_headers, budget_id):
    body = client.get("/api/budgets/month?month=3&year=2024", headers=auth_headers).get_json()

    assert body["count"] == 1
    assert body["data"][0]["category"] == "Food"
    assert body["data"][0]["is_current_month"] is False


def test_month_listing_requires_both_params(client, auth_headers):
    response = client.get("/api/budgets/month?month=3", headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json()["message"] == "Please provide both month and year"


def test_current_month(client, auth_headers):
    today = date.today()
    client.post(
        "/api/budgets",
        json={"category": "Rent", "limit": 1000, "month": today.month, "year": today.year},
        headers=auth_headers,
    )
    body = client.get("/api/budgets/current", headers=auth_headers).get_json()

    assert (body["month"], body["year"]) == (today.month, today.year)
    assert body["data"][0]["is_current_month"] is True


def test_status_reports_spending(client, auth_headers, budget_id):
    for amount, day in ((150.5, "2024-03-05"), (75.25, "2024-03-20")):
        client.post(
            "/api/transactions",
            json={"amount": amount, "category": "food", "kind": "expense", "occurred_on": day},
            headers=auth_headers,
        )

    body = client.get("/api/budgets/status?month=3&year=2024", headers=auth_headers).get_json()
    item = body["data"][0]

    assert item["spent"] == 225.75
    assert item["percentage"] == 75
    assert item["status"] == "warning"
    assert item["remaining"] == 74.25
    assert body["total_utilization"] == 75


def test_update_conflict(client, auth_headers, budget_id):
    response = client.post(
        "/api/budgets", json={**FOOD_MARCH, "category": "Rent"}, headers=auth_headers
    )
    rent_id = response.get_json()["data"]["id"]

    response = client.put(
        f"/api/budgets/{rent_id}", json={"category": "Food"}, headers=auth_headers
    )
    assert response.status_code == 400
    assert response.get_json()["message"] == (
        "Budget already exists for this category, month, and year"
    )


def test_update_and_delete(client, auth_headers, budget_id):
    response = client.put(f"/api/budgets/{budget_id}", json={"limit": 350}, headers=auth_headers)
    assert response.get_json()["data"]["limit"] == 350

    assert client.delete(f"/api/budgets/{budget_id}", headers=auth_headers).status_code == 200
    assert client.get(f"/api/budgets/{budget_id}", headers=auth_headers).status_code == 404
