# ==============================================================================
# ORDER TESTS
# ==============================================================================

import pytest
from bson import ObjectId

API = "/api/v1"


def order_body(*lines, payment_id: str = "pay_001", **extra):
    return {
        "items": [{"item_type": item_type, "item_id": item_id} for item_type, item_id in lines],
        "payment_id": payment_id,
        **extra,
    }


async def notification_types(adapter, user_id: str):
    docs = await adapter.get_all("notifications", filters={"user_id": ObjectId(user_id)})
    return sorted(doc["type"] for doc in docs)


class TestPlaceOrder:

    @pytest.mark.asyncio
    async def test_artwork_and_course(self, artist, buyer, adapter, seed_artwork, seed_course):
        _, artist_user = artist
        buyer_client, buyer_user = buyer
        artwork = await seed_artwork(artist_user["id"], price=25.0)
        course = await seed_course(artist_user["id"], price=4999)

        response = await buyer_client.post(
            f"{API}/orders",
            json=order_body(
                ("artwork", artwork["id"]),
                ("course", course["id"]),
                shipping_address={"street": "1 Rua Nova", "city": "Porto", "country": "PT"},
            ),
        )
        assert response.status_code == 201

        order = response.json()["data"]
        assert order["status"] == "completed"
        assert order["payout_status"] == "pending"
        assert order["total"] == 5024
        assert order["buyer_id"] == buyer_user["id"]
        assert order["shipping_address"]["city"] == "Porto"
        assert [line["title"] for line in order["items"]] == ["Sunset Study", "Watercolor Basics"]
        assert order["items"][0]["artist_id"] == artist_user["id"]

        sold = await adapter.get_by_id("artworks", ObjectId(artwork["id"]))
        assert sold["status"] == "sold"
        assert sold["sold_at"] is not None

        enrolled = await adapter.get_by_id("courses", ObjectId(course["id"]))
        assert enrolled["students"] == [buyer_user["id"]]
        assert enrolled["student_count"] == 1

        assert await notification_types(adapter, buyer_user["id"]) == ["order_confirmation"]
        assert await notification_types(adapter, artist_user["id"]) == [
            "artwork_sold",
            "course_enrollment",
        ]

    @pytest.mark.asyncio
    async def test_prices_come_from_catalog(self, artist, buyer, seed_artwork):
        _, artist_user = artist
        buyer_client, _ = buyer
        artwork = await seed_artwork(artist_user["id"], price=80.0)

        body = order_body(("artwork", artwork["id"]))
        body["items"][0]["price"] = 1
        response = await buyer_client.post(f"{API}/orders", json=body)
        assert response.status_code == 201
        assert response.json()["data"]["total"] == 80.0

    @pytest.mark.asyncio
    async def test_one_bad_line_refuses_order(self, artist, buyer, adapter, seed_artwork):
        _, artist_user = artist
        buyer_client, _ = buyer
        artwork = await seed_artwork(artist_user["id"])
        missing = str(ObjectId())

        response = await buyer_client.post(
            f"{API}/orders",
            json=order_body(("artwork", artwork["id"]), ("artwork", missing)),
        )
        assert response.status_code == 400
        assert response.json()["error"] == f"Artwork {missing} not found"

        assert await adapter.count("orders") == 0
        untouched = await adapter.get_by_id("artworks", ObjectId(artwork["id"]))
        assert untouched["status"] == "approved"
        assert await adapter.count("notifications") == 0

    @pytest.mark.asyncio
    async def test_unapproved_line(self, artist, buyer, seed_artwork):
        _, artist_user = artist
        buyer_client, _ = buyer
        artwork = await seed_artwork(artist_user["id"], status="pending")

        response = await buyer_client.post(
            f"{API}/orders",
            json=order_body(("artwork", artwork["id"])),
        )
        assert response.status_code == 400
        assert response.json()["error"] == f"Artwork {artwork['id']} is not available for purchase"

    @pytest.mark.asyncio
    async def test_wrong_item_type(self, artist, buyer, seed_artwork):
        _, artist_user = artist
        buyer_client, _ = buyer
        artwork = await seed_artwork(artist_user["id"])

        response = await buyer_client.post(
            f"{API}/orders",
            json=order_body(("course", artwork["id"])),
        )
        assert response.status_code == 400
        assert response.json()["code"] == "NOT_AVAILABLE"

    @pytest.mark.asyncio
    async def test_payment_used_once(self, artist, buyer, seed_course):
        _, artist_user = artist
        buyer_client, _ = buyer
        course = await seed_course(artist_user["id"])

        first = await buyer_client.post(f"{API}/orders", json=order_body(("course", course["id"])))
        assert first.status_code == 201

        again = await buyer_client.post(f"{API}/orders", json=order_body(("course", course["id"])))
        assert again.status_code == 400
        assert again.json()["code"] == "ALREADY_EXISTS"

    @pytest.mark.asyncio
    async def test_empty_order(self, buyer):
        buyer_client, _ = buyer
        response = await buyer_client.post(f"{API}/orders", json=order_body())
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_same_item_twice_refused(self, artist, buyer, adapter, seed_artwork):
        _, artist_user = artist
        buyer_client, _ = buyer
        artwork = await seed_artwork(artist_user["id"], price=25.0)

        response = await buyer_client.post(
            f"{API}/orders",
            json=order_body(("artwork", artwork["id"]), ("artwork", artwork["id"])),
        )
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
        assert response.json()["error"] == "Each item can appear only once per order"
        assert await adapter.count("orders") == 0


class TestFulfillmentFailures:

    @pytest.mark.asyncio
    async def test_notification_failure_keeps_order(
        self, artist, buyer, adapter, seed_artwork, monkeypatch
    ):
        _, artist_user = artist
        buyer_client, buyer_user = buyer
        artwork = await seed_artwork(artist_user["id"])
        create = adapter.create

        async def create_without_notifications(collection, data):
            if collection == "notifications":
                raise RuntimeError("notification store unavailable")
            return await create(collection, data)

        monkeypatch.setattr(adapter, "create", create_without_notifications)

        response = await buyer_client.post(
            f"{API}/orders",
            json=order_body(("artwork", artwork["id"])),
        )
        assert response.status_code == 201

        assert await adapter.count("orders", {"buyer_id": ObjectId(buyer_user["id"])}) == 1
        sold = await adapter.get_by_id("artworks", ObjectId(artwork["id"]))
        assert sold["status"] == "sold"
        assert await adapter.count("notifications") == 0

    @pytest.mark.asyncio
    async def test_sold_mark_failure_keeps_order(
        self, artist, buyer, adapter, seed_artwork, seed_course, monkeypatch
    ):
        _, artist_user = artist
        buyer_client, buyer_user = buyer
        artwork = await seed_artwork(artist_user["id"])
        course = await seed_course(artist_user["id"])

        async def failing_update(collection, entity_id, data):
            raise RuntimeError("write rejected")

        monkeypatch.setattr(adapter, "update", failing_update)

        response = await buyer_client.post(
            f"{API}/orders",
            json=order_body(("artwork", artwork["id"]), ("course", course["id"])),
        )
        assert response.status_code == 201

        assert await adapter.count("orders") == 1
        unchanged = await adapter.get_by_id("artworks", ObjectId(artwork["id"]))
        assert unchanged["status"] == "approved"

        enrolled = await adapter.get_by_id("courses", ObjectId(course["id"]))
        assert enrolled["students"] == [buyer_user["id"]]
        assert await notification_types(adapter, artist_user["id"]) == [
            "artwork_sold",
            "course_enrollment",
        ]


class TestOrderReads:

    @pytest.mark.asyncio
    async def test_history_is_per_buyer(self, artist, buyer, make_user, seed_course):
        _, artist_user = artist
        buyer_client, _ = buyer
        other_client, _ = await make_user("buyer")
        course = await seed_course(artist_user["id"])

        placed = (
            await buyer_client.post(f"{API}/orders", json=order_body(("course", course["id"])))
        ).json()["data"]

        history = (await buyer_client.get(f"{API}/orders/history")).json()["data"]
        assert [order["id"] for order in history] == [placed["id"]]
        assert (await other_client.get(f"{API}/orders/history")).json()["data"] == []

    @pytest.mark.asyncio
    async def test_admin_listing(self, artist, buyer, admin, seed_course):
        _, artist_user = artist
        buyer_client, buyer_user = buyer
        admin_client, _ = admin
        course = await seed_course(artist_user["id"])
        await buyer_client.post(f"{API}/orders", json=order_body(("course", course["id"])))

        response = await admin_client.get(f"{API}/orders")
        assert response.status_code == 200
        body = response.json()
        assert body["pagination"] == {"total": 1, "page": 1, "pages": 1, "limit": 50}
        assert body["data"][0]["buyer"]["id"] == buyer_user["id"]

        filtered = await admin_client.get(f"{API}/orders", params={"status": "refunded"})
        assert filtered.json()["data"] == []

    @pytest.mark.asyncio
    async def test_listing_is_admin_only(self, buyer):
        buyer_client, _ = buyer
        response = await buyer_client.get(f"{API}/orders")
        assert response.status_code == 403


class TestOrderAdministration:

    @pytest.mark.asyncio
    async def test_update_status_notifies_buyer(self, artist, buyer, admin, adapter, seed_course):
        _, artist_user = artist
        buyer_client, buyer_user = buyer
        admin_client, _ = admin
        course = await seed_course(artist_user["id"])
        order = (
            await buyer_client.post(f"{API}/orders", json=order_body(("course", course["id"])))
        ).json()["data"]

        response = await admin_client.patch(
            f"{API}/orders/{order['id']}/status",
            json={"status": "refunded", "payout_status": "failed"},
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "refunded"
        assert data["payout_status"] == "failed"

        assert "order_update" in await notification_types(adapter, buyer_user["id"])

    @pytest.mark.asyncio
    async def test_update_needs_a_field(self, admin):
        admin_client, _ = admin
        response = await admin_client.patch(f"{API}/orders/{ObjectId()}/status", json={})
        assert response.status_code == 400
        assert response.json()["error"] == "Provide status or payout_status"

    @pytest.mark.asyncio
    async def test_update_missing_order(self, admin):
        admin_client, _ = admin
        response = await admin_client.patch(
            f"{API}/orders/{ObjectId()}/status",
            json={"status": "shipped"},
        )
        assert response.status_code == 404
