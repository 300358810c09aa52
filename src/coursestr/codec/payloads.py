"""
Creation payloads consumed by the encoder.

Pydantic models that coerce and type-check caller input. They deliberately
carry no length or emptiness constraints: semantic rules live in
[coursestr.codec.validator][], which reports every violated rule at once
instead of stopping at the first.

See Also:
    [encode_course_list()][coursestr.codec.encoder.encode_course_list],
    [encode_resource()][coursestr.codec.encoder.encode_resource]: Consumers.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from coursestr.models.address import AddressRef


class ResourceType(StrEnum):
    """Kind of resource being created; selects encoder and validator rules."""

    LESSON = "lesson"
    DOCUMENT = "document"
    VIDEO = "video"


class PricedData(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    is_premium: bool = False
    price: int | None = None
    currency: str | None = None

    @property
    def payable(self) -> bool:
        """True when the content is premium and carries a positive price."""
        return self.is_premium and (self.price or 0) > 0


class LessonCreationData(PricedData):
    """A lesson inside a course creation payload.

    Attributes:
        identifier: ``d`` tag value; defaults to the slug of the title.
    """

    title: str
    description: str
    content: str
    identifier: str | None = None


class CourseCreationData(PricedData):
    """Payload for a new course list event.

    Attributes:
        author_key: Hex public key of the course author; also the author of
            every referenced lesson.
        category: Primary category, written as the first ``l`` value.
        topics: Extra topics, written as further ``l`` values.
        lessons: Lessons in display order; this order is authoritative.
        identifier: ``d`` tag value; defaults to the slug of the title.
    """

    title: str
    description: str
    author_key: str
    category: str = ""
    image: str | None = None
    topics: tuple[str, ...] = ()
    lessons: tuple[LessonCreationData, ...] = ()
    identifier: str | None = None


class ResourceCreationData(PricedData):
    """Payload for a new lesson, document or video event.

    Attributes:
        description: Short summary, written as the ``summary`` tag.
        content: Markdown body.
        duration: Display duration (``"15 min"``); required for videos.
        video_url: Video file URL, written as the first ``r`` tag.
        additional_links: Further ``r`` links, in order.
        author: Display name written as the ``author`` tag.
        course_ref: Owning course, written as a trailing ``a`` tag.
        identifier: ``d`` tag value; defaults to the slug of the title.
    """

    title: str
    description: str
    content: str
    author_key: str
    topics: tuple[str, ...] = ()
    image: str | None = None
    duration: str | None = None
    video_url: str | None = None
    additional_links: tuple[str, ...] = Field(default=())
    author: str | None = None
    course_ref: AddressRef | None = None
    identifier: str | None = None


__all__ = ["CourseCreationData", "LessonCreationData", "ResourceCreationData", "ResourceType"]
