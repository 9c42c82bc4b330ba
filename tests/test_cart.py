# ==============================================================================
# CART TESTS
# ==============================================================================

import pytest
from bson import ObjectId

API = "/api/v1"


class TestAddToCart:

    @pytest.mark.asyncio
    async def test_empty_cart(self, buyer):
        buyer_client, _ = buyer
        response = await buyer_client.get(f"{API}/cart")
        assert response.status_code == 200
        assert response.json()["data"] == {
            "items": [],
            "total": 0,
            "item_count": 0,
            "unique_items": 0,
        }

    @pytest.mark.asyncio
    async def test_stock_limit(self, artist, buyer, seed_artwork):
        _, artist_user = artist
        buyer_client, _ = buyer
        artwork = await seed_artwork(artist_user["id"], stock=1, price=25.0)

        response = await buyer_client.post(
            f"{API}/cart",
            json={"item_id": artwork["id"], "quantity": 2},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Only 1 available in stock"

        response = await buyer_client.post(
            f"{API}/cart",
            json={"item_id": artwork["id"], "quantity": 1},
        )
        assert response.status_code == 201

        cart = response.json()["data"]
        assert cart["total"] == 25.0
        assert cart["item_count"] == 1
        assert cart["unique_items"] == 1
        line = cart["items"][0]
        assert line["item_type"] == "artwork"
        assert line["item_id"] == artwork["id"]
        assert line["title"] == "Sunset Study"
        assert line["thumbnail"] == "https://img.example.com/a.jpg"
        assert line["subtotal"] == 25.0

    @pytest.mark.asyncio
    async def test_lines_are_merged(self, artist, buyer, seed_artwork):
        _, artist_user = artist
        buyer_client, _ = buyer
        artwork = await seed_artwork(artist_user["id"], stock=3, price=10.0)

        await buyer_client.post(f"{API}/cart", json={"item_id": artwork["id"]})
        response = await buyer_client.post(
            f"{API}/cart",
            json={"item_id": artwork["id"], "quantity": 2},
        )
        cart = response.json()["data"]
        assert cart["unique_items"] == 1
        assert cart["items"][0]["quantity"] == 3
        assert cart["total"] == 30.0

        response = await buyer_client.post(f"{API}/cart", json={"item_id": artwork["id"]})
        assert response.status_code == 400
        assert response.json()["code"] == "INSUFFICIENT_STOCK"

    @pytest.mark.asyncio
    async def test_course_line(self, artist, buyer, seed_course):
        _, artist_user = artist
        buyer_client, _ = buyer
        course = await seed_course(artist_user["id"], price=4999)

        response = await buyer_client.post(f"{API}/cart", json={"item_id": course["id"]})
        assert response.status_code == 201
        cart = response.json()["data"]
        assert cart["items"][0]["item_type"] == "course"
        assert cart["items"][0]["thumbnail"] == "https://img.example.com/c.jpg"
        assert cart["total"] == 4999

    @pytest.mark.asyncio
    async def test_unapproved_artwork(self, artist, buyer, seed_artwork):
        _, artist_user = artist
        buyer_client, _ = buyer
        artwork = await seed_artwork(artist_user["id"], status="pending")

        response = await buyer_client.post(f"{API}/cart", json={"item_id": artwork["id"]})
        assert response.status_code == 400
        assert response.json()["code"] == "NOT_AVAILABLE"

    @pytest.mark.asyncio
    async def test_unknown_item(self, buyer):
        buyer_client, _ = buyer
        response = await buyer_client.post(f"{API}/cart", json={"item_id": str(ObjectId())})
        assert response.status_code == 404
        assert response.json()["error"] == "Item not found"

    @pytest.mark.asyncio
    async def test_malformed_item_id(self, buyer):
        buyer_client, _ = buyer
        response = await buyer_client.post(f"{API}/cart", json={"item_id": "abc"})
        assert response.status_code == 400


class TestEditCart:

    @pytest.mark.asyncio
    async def test_update_quantity(self, artist, buyer, seed_artwork):
        _, artist_user = artist
        buyer_client, _ = buyer
        artwork = await seed_artwork(artist_user["id"], stock=3, price=10.0)
        cart = (await buyer_client.post(f"{API}/cart", json={"item_id": artwork["id"]})).json()["data"]
        line_id = cart["items"][0]["id"]

        response = await buyer_client.put(f"{API}/cart/{line_id}", json={"quantity": 2})
        assert response.status_code == 200
        assert response.json()["data"]["items"][0]["quantity"] == 2

        response = await buyer_client.put(f"{API}/cart/{line_id}", json={"quantity": 5})
        assert response.status_code == 400
        assert response.json()["error"] == "Only 3 available in stock"

    @pytest.mark.asyncio
    async def test_update_unknown_line(self, buyer):
        buyer_client, _ = buyer
        response = await buyer_client.put(f"{API}/cart/{ObjectId()}", json={"quantity": 1})
        assert response.status_code == 404
        assert response.json()["error"] == "Item not found in cart"

    @pytest.mark.asyncio
    async def test_quantity_must_be_positive(self, buyer):
        buyer_client, _ = buyer
        response = await buyer_client.put(f"{API}/cart/{ObjectId()}", json={"quantity": 0})
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_remove_line(self, artist, buyer, seed_artwork, seed_course):
        _, artist_user = artist
        buyer_client, _ = buyer
        artwork = await seed_artwork(artist_user["id"])
        course = await seed_course(artist_user["id"])
        await buyer_client.post(f"{API}/cart", json={"item_id": artwork["id"]})
        cart = (await buyer_client.post(f"{API}/cart", json={"item_id": course["id"]})).json()["data"]
        artwork_line = next(line for line in cart["items"] if line["item_type"] == "artwork")

        response = await buyer_client.delete(f"{API}/cart/{artwork_line['id']}")
        assert response.status_code == 200
        remaining = response.json()["data"]["items"]
        assert [line["item_type"] for line in remaining] == ["course"]

        again = await buyer_client.delete(f"{API}/cart/{artwork_line['id']}")
        assert again.status_code == 200
        assert again.json()["data"]["unique_items"] == 1

    @pytest.mark.asyncio
    async def test_clear(self, artist, buyer, seed_artwork):
        _, artist_user = artist
        buyer_client, _ = buyer
        artwork = await seed_artwork(artist_user["id"])
        await buyer_client.post(f"{API}/cart", json={"item_id": artwork["id"]})

        response = await buyer_client.delete(f"{API}/cart")
        assert response.status_code == 200
        assert (await buyer_client.get(f"{API}/cart")).json()["data"]["items"] == []
