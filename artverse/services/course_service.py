# ==============================================================================
# COURSE SERVICE - Lesson Sequences & Enrollment
# ==============================================================================
# Draft -> published -> approved workflow, lessons and enrollments
# ==============================================================================

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId

from artverse.core.constants import (
    APIConstants,
    CatalogConstants,
    DatabaseConstants,
    ErrorMessages,
)
from artverse.core.exceptions import (
    AuthorizationError,
    BusinessRuleError,
    NotFoundError,
    ValidationError,
)
from artverse.database.adapters.base_adapter import BaseDatabaseAdapter
from artverse.domain_models.course import CourseStatus
from artverse.domain_models.notification import NotificationType
from artverse.domain_models.user import CurrentUser
from artverse.schemas.course import (
    CourseCreate,
    CourseResponse,
    CourseUpdate,
    EnrollmentStatus,
    LessonCreate,
)
from artverse.services.base_service import BaseService
from artverse.services.lookups import resolve_users
from artverse.services.notification_service import NotificationService
from artverse.storage import ImageStorage, discard_images
from artverse.utils.helpers import escape_search, to_object_id

logger = logging.getLogger(__name__)


def to_cents(amount: float) -> int:
    """Convert a major-unit price to integer cents."""
    return int(round(amount * CatalogConstants.CENTS_PER_UNIT))


class CourseService(BaseService[CourseResponse]):
    """
    Course catalog, authoring and enrollment.

    A course is public only while ``status == published`` and
    ``is_approved``. Every authoring change sends it back to ``draft``.
    """

    def __init__(
        self,
        adapter: BaseDatabaseAdapter,
        storage: ImageStorage,
        notifications: NotificationService,
    ) -> None:
        """Initialize course service."""
        super().__init__(adapter, DatabaseConstants.COURSES_COLLECTION)
        self._storage = storage
        self._notifications = notifications

    def _to_response(self, entity: Dict[str, Any]) -> CourseResponse:
        """Convert course document to response schema."""
        return CourseResponse.model_validate(entity)

    @staticmethod
    def _public_filter() -> Dict[str, Any]:
        return {"status": CourseStatus.PUBLISHED.value, "is_approved": True}

    async def _get_course(self, course_id: str) -> Dict[str, Any]:
        return await self._get_document(course_id, ErrorMessages.COURSE_NOT_FOUND, "course")

    async def _get_owned(self, course_id: str, user: CurrentUser) -> Dict[str, Any]:
        course = await self._get_course(course_id)
        if not user.owns(course.get("artist_id")):
            raise AuthorizationError(message=ErrorMessages.NOT_COURSE_OWNER)
        return course

    async def _get_public(self, course_id: str) -> Dict[str, Any]:
        course = await self._adapter.find_one(
            self._collection_name,
            {"_id": to_object_id(course_id, "course"), **self._public_filter()},
        )
        if not course:
            raise NotFoundError(
                message=ErrorMessages.COURSE_NOT_AVAILABLE,
                resource_type="course",
                resource_id=course_id,
            )
        return course

    async def _with_artists(self, documents: List[Dict[str, Any]]) -> List[CourseResponse]:
        artists = await resolve_users(self._adapter, (d.get("artist_id") for d in documents))
        return [
            self._to_response({**doc, "artist": artists.get(doc.get("artist_id"))})
            for doc in documents
        ]

    # ==========================================================================
    # AUTHORING
    # ==========================================================================

    async def create(self, artist_id: str, schema: CourseCreate) -> CourseResponse:
        """Create a draft course."""
        data = schema.model_dump()
        data.update(
            {
                "artist_id": to_object_id(artist_id, "artist"),
                "price": to_cents(schema.price),
                "lessons": [],
                "status": CourseStatus.DRAFT.value,
                "is_approved": False,
                "students": [],
                "student_count": 0,
                "average_rating": 0.0,
                "rejection_reason": None,
            }
        )
        result = await self._adapter.create(self._collection_name, data)
        logger.info(f"Course {result['id']} created by {artist_id}")
        return self._to_response(result)

    async def update(
        self,
        course_id: str,
        user: CurrentUser,
        schema: CourseUpdate,
    ) -> CourseResponse:
        """Edit an owned course; it returns to draft."""
        course = await self._get_owned(course_id, user)

        changes = schema.model_dump(exclude_unset=True, exclude_none=True)
        if "price" in changes:
            changes["price"] = to_cents(changes["price"])
        changes["status"] = CourseStatus.DRAFT.value

        result = await self._adapter.update(self._collection_name, course["id"], changes)

        old_thumbnail = (course.get("thumbnail") or {}).get("public_id")
        if "thumbnail" in changes and old_thumbnail != changes["thumbnail"]["public_id"]:
            await discard_images(self._storage, [old_thumbnail])

        logger.info(f"Course {course_id} edited, back to draft")
        return self._to_response(result)

    async def add_lesson(
        self,
        course_id: str,
        user: CurrentUser,
        schema: LessonCreate,
    ) -> CourseResponse:
        """Append a lesson; the course returns to draft."""
        course = await self._get_owned(course_id, user)

        lesson = {"_id": ObjectId(), **schema.model_dump()}
        result = await self._adapter.update_one(
            self._collection_name,
            {"_id": to_object_id(course["id"])},
            {
                "$push": {"lessons": lesson},
                "$set": {"status": CourseStatus.DRAFT.value},
            },
        )
        if not result:
            raise NotFoundError(message=ErrorMessages.COURSE_NOT_FOUND, resource_id=course_id)
        return self._to_response(result)

    async def publish(self, course_id: str, user: CurrentUser) -> CourseResponse:
        """
        Publish an owned course and ask an admin to approve it.

        Raises:
            BusinessRuleError: If the course has no lessons
        """
        course = await self._get_owned(course_id, user)
        if not course.get("lessons"):
            raise BusinessRuleError(
                message=ErrorMessages.PUBLISH_WITHOUT_LESSONS,
                rule="publish_requires_lessons",
            )

        result = await self._adapter.update(
            self._collection_name,
            course["id"],
            {"status": CourseStatus.PUBLISHED.value},
        )
        logger.info(f"Course {course_id} published")

        await self._notifications.notify_first_admin(
            NotificationType.COURSE_APPROVAL,
            f'Course "{course["title"]}" is waiting for approval',
            {"course_id": course["id"], "artist_id": user.id},
        )
        return self._to_response(result)

    # ==========================================================================
    # MODERATION
    # ==========================================================================

    async def approve(self, course_id: str) -> CourseResponse:
        """Approve a published course and tell its artist."""
        course = await self._get_course(course_id)
        if course.get("status") != CourseStatus.PUBLISHED.value:
            raise BusinessRuleError(
                message=ErrorMessages.APPROVE_UNPUBLISHED,
                rule="approve_requires_published",
            )

        result = await self._adapter.update(
            self._collection_name,
            course["id"],
            {"is_approved": True, "rejection_reason": None},
        )
        logger.info(f"Course {course_id} approved")

        await self._notifications.notify(
            course["artist_id"],
            NotificationType.COURSE_APPROVED,
            f'Your course "{course["title"]}" has been approved',
            {"course_id": course["id"]},
        )
        return self._to_response(result)

    async def reject(self, course_id: str, reason: Optional[str]) -> CourseResponse:
        """
        Reject a course.

        Raises:
            ValidationError: If no reason is given
        """
        if not reason or not reason.strip():
            raise ValidationError(message=ErrorMessages.REJECTION_REASON_REQUIRED)

        course = await self._get_course(course_id)
        result = await self._adapter.update(
            self._collection_name,
            course["id"],
            {
                "status": CourseStatus.REJECTED.value,
                "is_approved": False,
                "rejection_reason": reason.strip(),
            },
        )
        logger.info(f"Course {course_id} rejected")

        await self._notifications.notify(
            course["artist_id"],
            NotificationType.COURSE_REJECTED,
            f'Your course "{course["title"]}" has been rejected: {reason.strip()}',
            {"course_id": course["id"], "reason": reason.strip()},
        )
        return self._to_response(result)

    # ==========================================================================
    # BROWSING
    # ==========================================================================

    async def list_courses(
        self,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        search: Optional[str] = None,
        sort: Optional[str] = None,
        page: int = 1,
        limit: int = APIConstants.DEFAULT_PAGE_SIZE,
    ) -> Dict[str, Any]:
        """
        Paginate public courses.

        Price bounds are given in major units.
        """
        filters = self._public_filter()

        price: Dict[str, int] = {}
        if min_price is not None:
            price["$gte"] = to_cents(min_price)
        if max_price is not None:
            price["$lte"] = to_cents(max_price)
        if price:
            filters["price"] = price

        if search and search.strip():
            pattern = {"$regex": escape_search(search), "$options": "i"}
            filters["$or"] = [{"title": pattern}, {"description": pattern}]

        sort_by, sort_order = CatalogConstants.COURSE_SORTS.get(
            sort or CatalogConstants.DEFAULT_SORT,
            CatalogConstants.COURSE_SORTS[CatalogConstants.DEFAULT_SORT],
        )
        limit = min(max(limit, 1), APIConstants.MAX_PAGE_SIZE)

        page_data = await self._get_page(page, limit, filters, sort_by, sort_order)
        return {
            "items": await self._with_artists(page_data["documents"]),
            "pagination": page_data["pagination"],
        }

    async def get(self, course_id: str) -> CourseResponse:
        """Public course detail."""
        course = await self._get_public(course_id)
        return (await self._with_artists([course]))[0]

    # ==========================================================================
    # ENROLLMENT
    # ==========================================================================

    async def enroll(self, course_id: str, user: CurrentUser) -> EnrollmentStatus:
        """
        Enroll the caller in a public course.

        Raises:
            NotFoundError: If the course is not public
            BusinessRuleError: If already enrolled
        """
        course = await self._get_public(course_id)
        student = to_object_id(user.id, "user")

        result = await self._adapter.update_one(
            self._collection_name,
            {"_id": to_object_id(course["id"]), "students": {"$ne": student}},
            {"$push": {"students": student}, "$inc": {"student_count": 1}},
        )
        if not result:
            raise BusinessRuleError(
                message=ErrorMessages.ALREADY_ENROLLED,
                rule="single_enrollment",
            )
        logger.info(f"User {user.id} enrolled in course {course_id}")

        await self._notifications.notify(
            course["artist_id"],
            NotificationType.NEW_ENROLLMENT,
            f'A new student enrolled in "{course["title"]}"',
            {"course_id": course["id"], "student_id": user.id},
        )
        return EnrollmentStatus(course_id=course["id"], is_enrolled=True)

    async def check_enrollment(self, course_id: str, user: CurrentUser) -> EnrollmentStatus:
        """Whether the caller is enrolled."""
        course = await self._get_course(course_id)
        enrolled = await self._adapter.exists(
            self._collection_name,
            {
                "_id": to_object_id(course["id"]),
                "students": to_object_id(user.id, "user"),
            },
        )
        return EnrollmentStatus(course_id=course["id"], is_enrolled=enrolled)
