# ==============================================================================
# COURSE TESTS
# ==============================================================================

import pytest
from bson import ObjectId
from httpx import AsyncClient

API = "/api/v1"


async def stored_course(adapter, course_id: str):
    return await adapter.get_by_id("courses", ObjectId(course_id))


class TestAuthoring:

    @pytest.mark.asyncio
    async def test_create_stores_cents(self, artist, course_payload):
        artist_client, artist_user = artist
        response = await artist_client.post(f"{API}/courses", json=course_payload)
        assert response.status_code == 201

        data = response.json()["data"]
        assert data["status"] == "draft"
        assert data["is_approved"] is False
        assert data["price"] == 2999
        assert data["price_display"] == "29.99"
        assert data["artist_id"] == artist_user["id"]
        assert data["lessons"] == []
        assert data["average_rating"] == 0.0

    @pytest.mark.asyncio
    async def test_buyer_cannot_create(self, buyer, course_payload):
        buyer_client, _ = buyer
        response = await buyer_client.post(f"{API}/courses", json=course_payload)
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_publish_without_lessons_fails(self, artist, adapter, course_payload):
        artist_client, _ = artist
        course = (await artist_client.post(f"{API}/courses", json=course_payload)).json()["data"]

        response = await artist_client.patch(f"{API}/courses/{course['id']}/publish")
        assert response.status_code == 400
        assert response.json()["error"] == "Course must have at least one lesson to publish"
        assert (await stored_course(adapter, course["id"]))["status"] == "draft"

    @pytest.mark.asyncio
    async def test_add_lesson_then_publish(self, artist, admin, adapter, course_payload, lesson_payload):
        artist_client, _ = artist
        _, admin_user = admin
        course = (await artist_client.post(f"{API}/courses", json=course_payload)).json()["data"]

        response = await artist_client.post(
            f"{API}/courses/{course['id']}/lessons",
            json=lesson_payload,
        )
        assert response.status_code == 201
        lessons = response.json()["data"]["lessons"]
        assert len(lessons) == 1
        assert lessons[0]["id"]
        assert lessons[0]["resources"][0]["name"] == "Worksheet"

        response = await artist_client.patch(f"{API}/courses/{course['id']}/publish")
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "published"

        waiting = await adapter.get_all(
            "notifications",
            filters={"user_id": ObjectId(admin_user["id"]), "type": "course_approval"},
        )
        assert len(waiting) == 1

    @pytest.mark.asyncio
    async def test_edit_returns_to_draft(self, artist, storage, seed_course):
        artist_client, artist_user = artist
        course = await seed_course(artist_user["id"])

        response = await artist_client.put(
            f"{API}/courses/{course['id']}",
            json={
                "price": 10,
                "thumbnail": {"url": "https://img.example.com/n.jpg", "public_id": "course/n"},
            },
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "draft"
        assert data["price"] == 1000
        assert storage.deleted == ["course/c"]

    @pytest.mark.asyncio
    async def test_other_artist_cannot_add_lessons(self, artist, make_user, seed_course, lesson_payload):
        _, owner = artist
        other_client, _ = await make_user("artist")
        course = await seed_course(owner["id"])

        response = await other_client.post(
            f"{API}/courses/{course['id']}/lessons",
            json=lesson_payload,
        )
        assert response.status_code == 403


class TestModeration:

    @pytest.mark.asyncio
    async def test_approve_requires_published(self, artist, admin, seed_course):
        _, artist_user = artist
        admin_client, _ = admin
        course = await seed_course(artist_user["id"], status="draft", is_approved=False)

        response = await admin_client.patch(f"{API}/courses/{course['id']}/approve")
        assert response.status_code == 400
        assert response.json()["error"] == "Only published courses can be approved"

    @pytest.mark.asyncio
    async def test_approve_makes_course_public(self, client: AsyncClient, artist, admin, seed_course):
        _, artist_user = artist
        admin_client, _ = admin
        course = await seed_course(artist_user["id"], is_approved=False)

        assert (await client.get(f"{API}/courses/{course['id']}")).status_code == 404

        response = await admin_client.patch(f"{API}/courses/{course['id']}/approve")
        assert response.status_code == 200
        assert response.json()["data"]["is_approved"] is True

        public = await client.get(f"{API}/courses/{course['id']}")
        assert public.status_code == 200
        assert public.json()["data"]["artist"]["id"] == artist_user["id"]

    @pytest.mark.asyncio
    async def test_reject_requires_reason(self, artist, admin, seed_course):
        _, artist_user = artist
        admin_client, _ = admin
        course = await seed_course(artist_user["id"], is_approved=False)

        response = await admin_client.patch(f"{API}/courses/{course['id']}/reject", json={})
        assert response.status_code == 400
        assert response.json()["error"] == "Rejection reason is required"

        response = await admin_client.patch(
            f"{API}/courses/{course['id']}/reject",
            json={"reason": "Audio is missing"},
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "rejected"
        assert data["rejection_reason"] == "Audio is missing"


class TestBrowsing:

    @pytest.mark.asyncio
    async def test_list_only_public(self, client: AsyncClient, artist, seed_course):
        _, artist_user = artist
        public = await seed_course(artist_user["id"])
        await seed_course(artist_user["id"], is_approved=False)
        await seed_course(artist_user["id"], status="draft")

        response = await client.get(f"{API}/courses")
        body = response.json()
        assert [item["id"] for item in body["data"]] == [public["id"]]
        assert body["pagination"]["total"] == 1

    @pytest.mark.asyncio
    async def test_price_bounds_in_major_units(self, client: AsyncClient, artist, seed_course):
        _, artist_user = artist
        cheap = await seed_course(artist_user["id"], price=1500)
        await seed_course(artist_user["id"], price=9000)

        response = await client.get(f"{API}/courses", params={"max_price": 20})
        assert [item["id"] for item in response.json()["data"]] == [cheap["id"]]

    @pytest.mark.asyncio
    async def test_sort_by_rating(self, client: AsyncClient, artist, seed_course):
        _, artist_user = artist
        top = await seed_course(artist_user["id"], title="Ink Wash", average_rating=4.8)
        await seed_course(artist_user["id"], title="Gouache", average_rating=3.1)
        await seed_course(artist_user["id"], title="Charcoal", average_rating=4.2)

        response = await client.get(f"{API}/courses", params={"sort": "rating"})
        assert response.status_code == 200
        titles = [item["title"] for item in response.json()["data"]]
        assert titles == ["Ink Wash", "Charcoal", "Gouache"]
        assert response.json()["data"][0]["average_rating"] == top["average_rating"]


class TestEnrollment:

    @pytest.mark.asyncio
    async def test_enroll_once(self, artist, buyer, adapter, seed_course):
        _, artist_user = artist
        buyer_client, _ = buyer
        course = await seed_course(artist_user["id"])

        check = await buyer_client.get(f"{API}/courses/{course['id']}/enrollment")
        assert check.json()["data"]["is_enrolled"] is False

        response = await buyer_client.post(f"{API}/courses/{course['id']}/enroll")
        assert response.status_code == 200
        assert response.json()["data"] == {"course_id": course["id"], "is_enrolled": True}

        again = await buyer_client.post(f"{API}/courses/{course['id']}/enroll")
        assert again.status_code == 400
        assert again.json()["error"] == "Already enrolled in this course"

        stored = await stored_course(adapter, course["id"])
        assert stored["student_count"] == 1

        check = await buyer_client.get(f"{API}/courses/{course['id']}/enrollment")
        assert check.json()["data"]["is_enrolled"] is True

        enrolled = await adapter.get_all(
            "notifications",
            filters={"user_id": ObjectId(artist_user["id"]), "type": "new_enrollment"},
        )
        assert len(enrolled) == 1

    @pytest.mark.asyncio
    async def test_cannot_enroll_in_unapproved(self, artist, buyer, seed_course):
        _, artist_user = artist
        buyer_client, _ = buyer
        course = await seed_course(artist_user["id"], is_approved=False)

        response = await buyer_client.post(f"{API}/courses/{course['id']}/enroll")
        assert response.status_code == 404
        assert response.json()["error"] == "Course not found or not approved"

    @pytest.mark.asyncio
    async def test_artist_cannot_enroll(self, artist, seed_course):
        artist_client, artist_user = artist
        course = await seed_course(artist_user["id"])

        response = await artist_client.post(f"{API}/courses/{course['id']}/enroll")
        assert response.status_code == 403
