# ==============================================================================
# ARTWORK TESTS
# ==============================================================================

import pytest
from bson import ObjectId
from httpx import AsyncClient

API = "/api/v1"


async def notifications_of(adapter, user_id: str, notification_type: str):
    return await adapter.get_all(
        "notifications",
        filters={"user_id": ObjectId(user_id), "type": notification_type},
    )


class TestSubmitArtwork:

    @pytest.mark.asyncio
    async def test_numeric_strings_are_coerced(self, artist, admin, adapter, artwork_payload):
        artist_client, _ = artist
        _, admin_user = admin

        response = await artist_client.post(f"{API}/artworks", json=artwork_payload)
        assert response.status_code == 201

        data = response.json()["data"]
        assert data["status"] == "pending"
        assert data["price"] == 10.5
        assert data["stock"] == 3
        assert data["tags"] == ["sea", "dawn", "harbour"]
        assert data["stats"] == {"views": 0, "likes": 0}

        pending = await notifications_of(adapter, admin_user["id"], "approval")
        assert len(pending) == 1
        assert pending[0]["metadata"]["artwork_id"] == data["id"]

    @pytest.mark.asyncio
    async def test_buyer_cannot_submit(self, buyer, artwork_payload):
        buyer_client, _ = buyer
        response = await buyer_client.post(f"{API}/artworks", json=artwork_payload)
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_requires_an_image(self, artist, artwork_payload):
        artist_client, _ = artist
        artwork_payload["images"] = []
        response = await artist_client.post(f"{API}/artworks", json=artwork_payload)
        assert response.status_code == 400


class TestModeration:

    @pytest.mark.asyncio
    async def test_approve(self, artist, admin, adapter, seed_artwork):
        _, artist_user = artist
        admin_client, _ = admin
        artwork = await seed_artwork(artist_user["id"], status="pending")

        response = await admin_client.patch(f"{API}/artworks/{artwork['id']}/approve")
        assert response.status_code == 200

        data = response.json()["data"]
        assert data["status"] == "approved"
        assert data["approved_at"] is not None

        approved = await notifications_of(adapter, artist_user["id"], "artwork_approved")
        assert len(approved) == 1

    @pytest.mark.asyncio
    async def test_reject_with_reason(self, artist, admin, adapter, seed_artwork):
        _, artist_user = artist
        admin_client, _ = admin
        artwork = await seed_artwork(artist_user["id"], status="pending")

        response = await admin_client.patch(
            f"{API}/artworks/{artwork['id']}/reject",
            json={"reason": "low_quality"},
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "rejected"
        assert data["rejection_reason"] == "low_quality"

        rejected = await notifications_of(adapter, artist_user["id"], "artwork_rejected")
        assert "low quality" in rejected[0]["message"]

    @pytest.mark.asyncio
    async def test_reject_without_body(self, artist, admin, seed_artwork):
        _, artist_user = artist
        admin_client, _ = admin
        artwork = await seed_artwork(artist_user["id"], status="pending")

        response = await admin_client.patch(f"{API}/artworks/{artwork['id']}/reject")
        assert response.status_code == 200
        assert response.json()["data"]["rejection_reason"] is None

    @pytest.mark.asyncio
    async def test_only_admin_moderates(self, artist, seed_artwork):
        artist_client, artist_user = artist
        artwork = await seed_artwork(artist_user["id"], status="pending")

        response = await artist_client.patch(f"{API}/artworks/{artwork['id']}/approve")
        assert response.status_code == 403


class TestVisibility:

    @pytest.mark.asyncio
    async def test_pending_artwork_hidden_from_public(self, client: AsyncClient, artist, admin, seed_artwork):
        artist_client, artist_user = artist
        admin_client, _ = admin
        artwork = await seed_artwork(artist_user["id"], status="pending")

        anonymous = await client.get(f"{API}/artworks/{artwork['id']}")
        assert anonymous.status_code == 403
        assert anonymous.json()["error"] == "This artwork is not publicly available"

        assert (await artist_client.get(f"{API}/artworks/{artwork['id']}")).status_code == 200
        assert (await admin_client.get(f"{API}/artworks/{artwork['id']}")).status_code == 200

    @pytest.mark.asyncio
    async def test_views_are_counted(self, client: AsyncClient, artist, seed_artwork):
        _, artist_user = artist
        artwork = await seed_artwork(artist_user["id"])

        await client.get(f"{API}/artworks/{artwork['id']}")
        response = await client.get(f"{API}/artworks/{artwork['id']}")

        data = response.json()["data"]
        assert data["stats"]["views"] == 2
        assert data["artist"]["id"] == artist_user["id"]

    @pytest.mark.asyncio
    async def test_missing_artwork(self, client: AsyncClient):
        response = await client.get(f"{API}/artworks/{ObjectId()}")
        assert response.status_code == 404


class TestEditArtwork:

    @pytest.mark.asyncio
    async def test_edit_resets_to_pending_and_drops_old_images(self, artist, storage, seed_artwork):
        artist_client, artist_user = artist
        artwork = await seed_artwork(artist_user["id"])

        response = await artist_client.put(
            f"{API}/artworks/{artwork['id']}",
            json={
                "title": "Sunset Study II",
                "images": [{"url": "https://img.example.com/b.jpg", "public_id": "art/b"}],
            },
        )
        assert response.status_code == 200

        data = response.json()["data"]
        assert data["title"] == "Sunset Study II"
        assert data["status"] == "pending"
        assert storage.deleted == ["art/a"]

    @pytest.mark.asyncio
    async def test_edit_by_other_artist(self, artist, make_user, seed_artwork):
        _, owner = artist
        other_client, _ = await make_user("artist")
        artwork = await seed_artwork(owner["id"])

        response = await other_client.put(
            f"{API}/artworks/{artwork['id']}",
            json={"title": "Mine now"},
        )
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_sold_artwork_is_frozen(self, artist, seed_artwork):
        artist_client, artist_user = artist
        artwork = await seed_artwork(artist_user["id"], status="sold", stock=0)

        response = await artist_client.put(
            f"{API}/artworks/{artwork['id']}",
            json={"price": 99},
        )
        assert response.status_code == 400
        assert response.json()["code"] == "BUSINESS_RULE_ERROR"


class TestDeleteArtwork:

    @pytest.mark.asyncio
    async def test_owner_deletes(self, client: AsyncClient, artist, storage, seed_artwork):
        artist_client, artist_user = artist
        artwork = await seed_artwork(artist_user["id"])

        response = await artist_client.delete(f"{API}/artworks/{artwork['id']}")
        assert response.status_code == 200
        assert storage.deleted == ["art/a"]
        assert (await client.get(f"{API}/artworks/{artwork['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_admin_deletes(self, artist, admin, seed_artwork):
        _, artist_user = artist
        admin_client, _ = admin
        artwork = await seed_artwork(artist_user["id"])

        response = await admin_client.delete(f"{API}/artworks/{artwork['id']}")
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_buyer_cannot_delete(self, artist, buyer, seed_artwork):
        _, artist_user = artist
        buyer_client, _ = buyer
        artwork = await seed_artwork(artist_user["id"])

        response = await buyer_client.delete(f"{API}/artworks/{artwork['id']}")
        assert response.status_code == 403


class TestListArtworks:

    @pytest.mark.asyncio
    async def test_only_approved_are_public(self, client: AsyncClient, artist, seed_artwork):
        _, artist_user = artist
        approved = await seed_artwork(artist_user["id"])
        await seed_artwork(artist_user["id"], status="pending", title="Draft")

        response = await client.get(f"{API}/artworks")
        assert response.status_code == 200

        body = response.json()
        assert body["success"] is True
        assert [item["id"] for item in body["data"]] == [approved["id"]]
        assert body["pagination"] == {"total": 1, "page": 1, "pages": 1, "limit": 20}

    @pytest.mark.asyncio
    async def test_status_filter_ignored_for_public(self, client: AsyncClient, artist, seed_artwork):
        _, artist_user = artist
        await seed_artwork(artist_user["id"], status="pending")

        response = await client.get(f"{API}/artworks", params={"status": "pending"})
        assert response.json()["data"] == []

    @pytest.mark.asyncio
    async def test_artist_sees_own_pending(self, artist, seed_artwork):
        artist_client, artist_user = artist
        pending = await seed_artwork(artist_user["id"], status="pending")

        response = await artist_client.get(
            f"{API}/artworks",
            params={"status": "pending", "artist_id": artist_user["id"]},
        )
        assert [item["id"] for item in response.json()["data"]] == [pending["id"]]

    @pytest.mark.asyncio
    async def test_admin_filters_by_status(self, artist, admin, seed_artwork):
        _, artist_user = artist
        admin_client, _ = admin
        await seed_artwork(artist_user["id"])
        pending = await seed_artwork(artist_user["id"], status="pending")

        response = await admin_client.get(f"{API}/artworks", params={"status": "pending"})
        assert [item["id"] for item in response.json()["data"]] == [pending["id"]]

    @pytest.mark.asyncio
    async def test_price_range_and_sort(self, client: AsyncClient, artist, seed_artwork):
        _, artist_user = artist
        for price in (30.0, 10.0, 20.0, 80.0):
            await seed_artwork(artist_user["id"], price=price)

        response = await client.get(
            f"{API}/artworks",
            params={"min_price": 10, "max_price": 30, "sort": "price-low"},
        )
        assert [item["price"] for item in response.json()["data"]] == [10.0, 20.0, 30.0]

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive(self, client: AsyncClient, artist, seed_artwork):
        _, artist_user = artist
        match = await seed_artwork(artist_user["id"], title="Blue Harbour")
        await seed_artwork(artist_user["id"], title="Red Field", description="Fields")

        response = await client.get(f"{API}/artworks", params={"search": "harbour"})
        assert [item["id"] for item in response.json()["data"]] == [match["id"]]

    @pytest.mark.asyncio
    async def test_category_filter_and_pages(self, client: AsyncClient, artist, seed_artwork):
        _, artist_user = artist
        for _ in range(3):
            await seed_artwork(artist_user["id"], category="Sketch")
        await seed_artwork(artist_user["id"], category="Digital")

        response = await client.get(
            f"{API}/artworks",
            params={"category": "Sketch", "limit": 2, "page": 2},
        )
        body = response.json()
        assert len(body["data"]) == 1
        assert body["pagination"] == {"total": 3, "page": 2, "pages": 2, "limit": 2}
