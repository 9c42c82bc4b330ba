# ==============================================================================
# USER PROFILE TESTS
# ==============================================================================

import pytest
from httpx import AsyncClient

API = "/api/v1"


class TestOwnProfile:

    @pytest.mark.asyncio
    async def test_artist_profile_has_commission_stats(self, artist):
        artist_client, user = artist
        response = await artist_client.get(f"{API}/users/profile")
        assert response.status_code == 200

        data = response.json()["data"]
        assert data["id"] == user["id"]
        assert data["commission_stats"] == {"total": 0, "completed": 0, "in_progress": 0}

    @pytest.mark.asyncio
    async def test_buyer_profile_stats_have_no_in_progress(self, buyer):
        buyer_client, _ = buyer
        data = (await buyer_client.get(f"{API}/users/profile")).json()["data"]
        assert data["commission_stats"]["in_progress"] is None

    @pytest.mark.asyncio
    async def test_buyer_cannot_set_artist_fields(self, buyer):
        buyer_client, _ = buyer
        response = await buyer_client.put(
            f"{API}/users/profile",
            json={
                "bio": "Collector",
                "skills": ["oil"],
                "shipping_address": {"city": "Lisbon", "country": "PT"},
            },
        )
        assert response.status_code == 200

        profile = response.json()["data"]["profile"]
        assert profile["bio"] == "Collector"
        assert profile["skills"] == []
        assert profile["shipping_address"]["city"] == "Lisbon"

    @pytest.mark.asyncio
    async def test_artist_updates_skills(self, artist):
        artist_client, _ = artist
        response = await artist_client.put(
            f"{API}/users/profile",
            json={
                "skills": ["ink", "watercolor"],
                "commission_rates": [{"kind": "portrait", "price": 120}],
            },
        )
        profile = response.json()["data"]["profile"]
        assert profile["skills"] == ["ink", "watercolor"]
        assert profile["commission_rates"][0]["kind"] == "portrait"

    @pytest.mark.asyncio
    async def test_update_picture(self, buyer):
        buyer_client, _ = buyer
        response = await buyer_client.put(
            f"{API}/users/profile/picture",
            json={"avatar": "https://img.example.com/me.png"},
        )
        assert response.status_code == 200
        assert response.json()["data"]["profile"]["avatar"] == "https://img.example.com/me.png"


class TestPublicProfiles:

    @pytest.mark.asyncio
    async def test_artist_directory(self, client: AsyncClient, artist, buyer):
        _, artist_user = artist
        _, buyer_user = buyer

        response = await client.get(f"{API}/users/artists")
        assert response.status_code == 200
        ids = [entry["id"] for entry in response.json()["data"]]
        assert artist_user["id"] in ids
        assert buyer_user["id"] not in ids

    @pytest.mark.asyncio
    async def test_get_artist_rejects_non_artist(self, client: AsyncClient, buyer):
        _, buyer_user = buyer
        response = await client.get(f"{API}/users/artists/{buyer_user['id']}")
        assert response.status_code == 404
        assert response.json()["error"] == "Artist not found"

    @pytest.mark.asyncio
    async def test_public_profile_hides_email(self, client: AsyncClient, buyer):
        _, buyer_user = buyer
        response = await client.get(f"{API}/users/{buyer_user['id']}")
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["profile"]["name"] == buyer_user["profile"]["name"]
        assert "email" not in data

    @pytest.mark.asyncio
    async def test_malformed_id(self, client: AsyncClient):
        response = await client.get(f"{API}/users/not-an-id")
        assert response.status_code == 400
