# ==============================================================================
# COURSE ENDPOINTS - Authoring, Moderation & Enrollment
# ==============================================================================

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, status

from artverse.api.dependencies import (
    AdminUser,
    ArtistUser,
    BuyerUser,
    CourseServiceDep,
)
from artverse.core.constants import APIConstants, CatalogConstants, SuccessMessages
from artverse.schemas.base import APIResponse, PaginatedResponse
from artverse.schemas.course import (
    CourseCreate,
    CourseReject,
    CourseResponse,
    CourseUpdate,
    EnrollmentStatus,
    LessonCreate,
)

router = APIRouter(prefix="/courses", tags=["Courses"])


@router.post(
    "",
    response_model=APIResponse[CourseResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create course",
    description="Create a draft course. Price is given in major units.",
)
async def create_course(
    schema: CourseCreate,
    user: ArtistUser,
    service: CourseServiceDep,
) -> APIResponse[CourseResponse]:
    """Create a course."""
    course = await service.create(user.id, schema)
    return APIResponse.ok(data=course, message=SuccessMessages.COURSE_CREATED)


@router.get(
    "",
    response_model=PaginatedResponse[CourseResponse],
    summary="List courses",
    description="Browse published and approved courses.",
)
async def list_courses(
    service: CourseServiceDep,
    min_price: Optional[float] = Query(None, ge=0),
    max_price: Optional[float] = Query(None, ge=0),
    search: Optional[str] = None,
    sort: str = CatalogConstants.DEFAULT_SORT,
    page: int = Query(1, ge=1),
    limit: int = Query(APIConstants.DEFAULT_PAGE_SIZE, ge=1),
) -> PaginatedResponse[CourseResponse]:
    """Paginated course listing."""
    result = await service.list_courses(
        min_price=min_price,
        max_price=max_price,
        search=search,
        sort=sort,
        page=page,
        limit=limit,
    )
    return PaginatedResponse.ok(data=result["items"], pagination=result["pagination"])


@router.get(
    "/{course_id}",
    response_model=APIResponse[CourseResponse],
    summary="Get course",
)
async def get_course(
    course_id: str,
    service: CourseServiceDep,
) -> APIResponse[CourseResponse]:
    """Public course detail."""
    return APIResponse.ok(data=await service.get(course_id))


@router.put(
    "/{course_id}",
    response_model=APIResponse[CourseResponse],
    summary="Update course",
    description="Edit an owned course; it returns to draft.",
)
async def update_course(
    course_id: str,
    schema: CourseUpdate,
    user: ArtistUser,
    service: CourseServiceDep,
) -> APIResponse[CourseResponse]:
    """Edit a course."""
    course = await service.update(course_id, user, schema)
    return APIResponse.ok(data=course, message=SuccessMessages.COURSE_UPDATED)


@router.post(
    "/{course_id}/lessons",
    response_model=APIResponse[CourseResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Add lesson",
)
async def add_lesson(
    course_id: str,
    schema: LessonCreate,
    user: ArtistUser,
    service: CourseServiceDep,
) -> APIResponse[CourseResponse]:
    """Append a lesson."""
    course = await service.add_lesson(course_id, user, schema)
    return APIResponse.ok(data=course, message=SuccessMessages.LESSON_ADDED)


@router.patch(
    "/{course_id}/publish",
    response_model=APIResponse[CourseResponse],
    summary="Publish course",
    description="Publish an owned course with at least one lesson.",
)
async def publish_course(
    course_id: str,
    user: ArtistUser,
    service: CourseServiceDep,
) -> APIResponse[CourseResponse]:
    """Publish a course."""
    course = await service.publish(course_id, user)
    return APIResponse.ok(data=course, message=SuccessMessages.COURSE_PUBLISHED)


@router.patch(
    "/{course_id}/approve",
    response_model=APIResponse[CourseResponse],
    summary="Approve course",
)
async def approve_course(
    course_id: str,
    admin: AdminUser,
    service: CourseServiceDep,
) -> APIResponse[CourseResponse]:
    """Approve a published course."""
    course = await service.approve(course_id)
    return APIResponse.ok(data=course, message=SuccessMessages.COURSE_APPROVED)


@router.patch(
    "/{course_id}/reject",
    response_model=APIResponse[CourseResponse],
    summary="Reject course",
    description="Reject a course. A reason is required.",
)
async def reject_course(
    course_id: str,
    admin: AdminUser,
    service: CourseServiceDep,
    schema: Optional[CourseReject] = None,
) -> APIResponse[CourseResponse]:
    """Reject a course."""
    course = await service.reject(course_id, schema.reason if schema else None)
    return APIResponse.ok(data=course, message=SuccessMessages.COURSE_REJECTED)


@router.post(
    "/{course_id}/enroll",
    response_model=APIResponse[EnrollmentStatus],
    summary="Enroll in course",
)
async def enroll(
    course_id: str,
    user: BuyerUser,
    service: CourseServiceDep,
) -> APIResponse[EnrollmentStatus]:
    """Enroll the caller."""
    enrollment = await service.enroll(course_id, user)
    return APIResponse.ok(data=enrollment, message=SuccessMessages.ENROLLED)


@router.get(
    "/{course_id}/enrollment",
    response_model=APIResponse[EnrollmentStatus],
    summary="Check enrollment",
)
async def check_enrollment(
    course_id: str,
    user: BuyerUser,
    service: CourseServiceDep,
) -> APIResponse[EnrollmentStatus]:
    """Whether the caller is enrolled."""
    return APIResponse.ok(data=await service.check_enrollment(course_id, user))
