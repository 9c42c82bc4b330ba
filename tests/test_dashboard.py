# ==============================================================================
# ARTIST DASHBOARD TESTS
# ==============================================================================

from datetime import datetime, timezone

import pytest
from bson import ObjectId

API = "/api/v1"


class TestDashboard:

    @pytest.mark.asyncio
    async def test_empty_dashboard(self, artist):
        artist_client, _ = artist
        response = await artist_client.get(f"{API}/artists/dashboard")
        assert response.status_code == 200

        data = response.json()["data"]
        assert data["artworks"] == []
        assert data["recent_orders"] == []
        assert data["stats"]["total_sales"] == 0
        assert len(data["stats"]["monthly_earnings"]) == 12
        assert data["stats"]["monthly_earnings"][0]["month"] == "Jan"

    @pytest.mark.asyncio
    async def test_sales_limited_to_current_year(self, artist, buyer, adapter, seed_artwork):
        artist_client, artist_user = artist
        buyer_client, buyer_user = buyer
        old = await seed_artwork(artist_user["id"], title="Old Harbour", status="sold")
        current = await seed_artwork(artist_user["id"], price=40.0)

        last_year = datetime.now(timezone.utc).year - 1
        await adapter.create(
            "orders",
            {
                "buyer_id": ObjectId(buyer_user["id"]),
                "items": [
                    {
                        "item_type": "artwork",
                        "item_id": ObjectId(old["id"]),
                        "title": old["title"],
                        "price": 500.0,
                        "artist_id": ObjectId(artist_user["id"]),
                    }
                ],
                "total": 500.0,
                "payment_id": "pay_last_year",
                "status": "completed",
                "payout_status": "pending",
                "created_at": datetime(last_year, 6, 1, tzinfo=timezone.utc),
            },
        )
        await buyer_client.post(
            f"{API}/orders",
            json={
                "items": [{"item_type": "artwork", "item_id": current["id"]}],
                "payment_id": "pay_this_year",
            },
        )

        stats = (await artist_client.get(f"{API}/artists/dashboard")).json()["data"]["stats"]
        assert stats["total_sales"] == 40.0
        assert sum(month["earnings"] for month in stats["monthly_earnings"]) == 40.0

    @pytest.mark.asyncio
    async def test_sections_after_activity(self, artist, buyer, seed_artwork, seed_course):
        artist_client, artist_user = artist
        buyer_client, buyer_user = buyer
        sold = await seed_artwork(artist_user["id"], price=25.0)
        await seed_artwork(artist_user["id"], status="pending", title="Unreviewed")
        course = await seed_course(artist_user["id"])

        placed = await buyer_client.post(
            f"{API}/orders",
            json={
                "items": [{"item_type": "artwork", "item_id": sold["id"]}],
                "payment_id": "pay_dash",
            },
        )
        assert placed.status_code == 201
        await buyer_client.post(f"{API}/courses/{course['id']}/enroll")
        await buyer_client.post(
            f"{API}/commissions/{artist_user['id']}",
            json={"title": "Pet portrait", "description": "My cat", "budget": 90},
        )

        response = await artist_client.get(f"{API}/artists/dashboard")
        assert response.status_code == 200
        data = response.json()["data"]

        stats = data["stats"]
        assert stats["total_artworks"] == 2
        assert stats["total_sales"] == 25.0
        assert stats["artworks_by_status"] == {"sold": 1, "pending": 1}
        assert stats["commissions_by_status"] == {"pending": 1}
        assert sum(month["earnings"] for month in stats["monthly_earnings"]) == 25.0

        assert [order["id"] for order in data["recent_orders"]] == [placed.json()["data"]["id"]]
        assert data["commissions"]["pending"][0]["buyer"]["id"] == buyer_user["id"]
        assert sold["id"] in [entry["id"] for entry in data["popular_artworks"]]

        assert data["courses"][0]["students"][0]["id"] == buyer_user["id"]
        assert stats["unread_notifications"] == len(data["notifications"]["unread"])
        assert len(data["notifications"]["all"]) >= 3

    @pytest.mark.asyncio
    async def test_other_artists_sales_not_counted(self, artist, buyer, make_user, seed_artwork):
        artist_client, artist_user = artist
        buyer_client, _ = buyer
        _, other_artist = await make_user("artist")
        theirs = await seed_artwork(other_artist["id"], price=300.0)

        await buyer_client.post(
            f"{API}/orders",
            json={
                "items": [{"item_type": "artwork", "item_id": theirs["id"]}],
                "payment_id": "pay_other",
            },
        )

        data = (await artist_client.get(f"{API}/artists/dashboard")).json()["data"]
        assert data["stats"]["total_sales"] == 0
        assert data["recent_orders"] == []

    @pytest.mark.asyncio
    async def test_artists_only(self, buyer):
        buyer_client, _ = buyer
        response = await buyer_client.get(f"{API}/artists/dashboard")
        assert response.status_code == 403
