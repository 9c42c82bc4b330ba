# ==============================================================================
# COURSE SCHEMAS - Lesson Sequences
# ==============================================================================
# Request/Response schemas for courses, lessons and enrollment
# ==============================================================================

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, computed_field

from artverse.domain_models.course import CourseStatus
from artverse.schemas.base import BaseSchema, ImageAsset, TimestampSchema
from artverse.schemas.user import UserSummary


class LessonResource(BaseSchema):
    """Downloadable material attached to a lesson."""

    name: str = Field(..., min_length=1, max_length=200)
    url: str = Field(..., min_length=1, max_length=1000)


class LessonCreate(BaseSchema):
    """Schema for appending a lesson to a course."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Lesson title",
    )
    youtube_url: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Video URL",
    )
    duration: int = Field(
        ...,
        ge=1,
        description="Duration in minutes",
    )
    resources: List[LessonResource] = Field(default_factory=list)


class LessonResponse(BaseSchema):
    """Schema for lesson response."""

    id: str
    title: str
    youtube_url: str
    duration: int
    resources: List[LessonResource] = Field(default_factory=list)


class CourseCreate(BaseSchema):
    """
    Schema for creating a course.

    ``price`` is given in major units and stored in cents.
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Course title",
    )
    description: str = Field(
        ...,
        min_length=1,
        max_length=5000,
        description="Course overview",
    )
    price: float = Field(
        ...,
        gt=0,
        description="Price in major currency units",
    )
    thumbnail: ImageAsset = Field(
        ...,
        description="Cover image",
    )


class CourseUpdate(BaseSchema):
    """Schema for editing a course. Any edit sends it back to draft."""

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1, max_length=5000)
    price: Optional[float] = Field(None, gt=0)
    thumbnail: Optional[ImageAsset] = None


class CourseReject(BaseSchema):
    """Schema for rejecting a course."""

    reason: Optional[str] = Field(
        None,
        max_length=1000,
        description="Why the course was rejected (required)",
    )


class CourseResponse(TimestampSchema):
    """Schema for course response."""

    id: str = Field(
        ...,
        description="Course unique identifier",
    )
    artist_id: str
    artist: Optional[UserSummary] = None
    title: str
    description: str
    price: int = Field(
        ...,
        description="Price in cents",
    )
    thumbnail: ImageAsset
    lessons: List[LessonResponse] = Field(default_factory=list)
    status: CourseStatus
    is_approved: bool = False
    student_count: int = 0
    average_rating: float = Field(
        0.0,
        description="Mean learner rating (0 until rated)",
    )
    rejection_reason: Optional[str] = None

    @computed_field
    @property
    def price_display(self) -> str:
        """Price formatted in major units."""
        return f"{self.price / 100:.2f}"


class EnrollmentStatus(BaseSchema):
    """Whether the caller is enrolled in a course."""

    course_id: str
    is_enrolled: bool
