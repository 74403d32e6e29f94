"""Tests for the profile endpoints and slug derivation."""

import pytest

from scheduling_admin_api.app.services.profile_service import slugify


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Barbearia do João", "barbearia-do-joao"),
        ("  Salão   Bela & Cia!  ", "salao-bela-cia"),
        ("Studio -- Hair", "studio-hair"),
        ("Café 24h", "cafe-24h"),
        ("!!!", "business"),
        ("x" * 80, "x" * 50),
    ],
)
def test_slugify(name, expected):
    assert slugify(name) == expected


def test_get_profile_before_save_is_404(client, headers_a):
    response = client.get("/api/profile", headers=headers_a)
    assert response.status_code == 404


def test_first_save_creates_profile(client, headers_a):
    response = client.put("/api/profile", json={"business_name": "  Barbearia do João "}, headers=headers_a)
    assert response.status_code == 200
    profile = response.json()["profile"]
    assert profile["business_name"] == "Barbearia do João"
    assert profile["unique_slug"] == "barbearia-do-joao"

    fetched = client.get("/api/profile", headers=headers_a).json()["profile"]
    assert fetched == profile


def test_second_save_updates_name_and_keeps_slug(client, headers_a, profile_a):
    response = client.put("/api/profile", json={"business_name": "Barbearia Omega"}, headers=headers_a)
    assert response.status_code == 200
    profile = response.json()["profile"]
    assert profile["id"] == profile_a["id"]
    assert profile["business_name"] == "Barbearia Omega"
    assert profile["unique_slug"] == profile_a["unique_slug"]


def test_slug_collisions_get_a_counter(client, headers_a, headers_b):
    from .conftest import auth_headers

    a = client.put("/api/profile", json={"business_name": "Salão Bela"}, headers=headers_a).json()["profile"]
    b = client.put("/api/profile", json={"business_name": "salao bela"}, headers=headers_b).json()["profile"]
    c = client.put("/api/profile", json={"business_name": "SALÃO BELA"}, headers=auth_headers("user-c")).json()["profile"]
    assert [a["unique_slug"], b["unique_slug"], c["unique_slug"]] == ["salao-bela", "salao-bela-1", "salao-bela-2"]


def test_invalid_name_returns_400_with_issues(client, headers_a):
    response = client.put("/api/profile", json={"business_name": " a "}, headers=headers_a)
    assert response.status_code == 400
    body = response.json()
    assert body["detail"] == "Invalid data"
    assert [issue["field"] for issue in body["issues"]] == ["business_name"]
    assert client.get("/api/profile", headers=headers_a).status_code == 404


def test_malformed_json_returns_400(client, headers_a):
    response = client.put(
        "/api/profile",
        content=b"{not json",
        headers={**headers_a, "Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid data"


def test_unauthenticated_save_does_not_write(client, headers_a):
    response = client.put("/api/profile", json={"business_name": "Intruso"})
    assert response.status_code == 401
    assert client.get("/api/profile", headers=headers_a).status_code == 404


def test_profiles_are_isolated(client, headers_a, headers_b, profile_a, profile_b):
    assert client.get("/api/profile", headers=headers_a).json()["profile"]["business_name"] == "Barbearia Alfa"
    assert client.get("/api/profile", headers=headers_b).json()["profile"]["business_name"] == "Studio Beta"
