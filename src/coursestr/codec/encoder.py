"""
Encoders: creation payloads to unsigned wire envelopes.

The encoders are the exact inverse of [coursestr.codec.decoder][] for every
field the parsed records carry. Tag order is fixed and significant: in
particular a course writes one ``a`` tag per lesson in payload order, which
is the only record of lesson ordering.

Envelopes leave here with an empty ``id`` and ``signature``; signing and
publishing happen outside the codec. Encoders never validate: run
[coursestr.codec.validator][] first.
"""

from __future__ import annotations

import re
import time

from coursestr.models.address import AddressRef
from coursestr.models.constants import DEFAULT_CURRENCY, VIDEO_TOPIC, EventKind, TagKey
from coursestr.models.envelope import Envelope

from .kinds import resource_kind
from .payloads import (
    CourseCreationData,
    LessonCreationData,
    PricedData,
    ResourceCreationData,
    ResourceType,
)


_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Lower-case *text* and collapse every non-alphanumeric run to one hyphen.

    Leading and trailing hyphens are trimmed as well, so punctuation at the
    edges of a title never ends up in the ``d`` tag or in lesson addresses.

    Examples:
        ```python
        slugify("Intro to X!")  # "intro-to-x"
        slugify("  C++ / Rust ")  # "c-rust"
        ```
    """
    return _NON_ALNUM.sub("-", text.lower()).strip("-")


def _now() -> int:
    return int(time.time())


def _price_tag(payload: PricedData, default_currency: str) -> list[str] | None:
    if not payload.payable:
        return None
    return [TagKey.PRICE, str(payload.price), payload.currency or default_currency]


def _lesson_address(lesson: LessonCreationData, author_key: str) -> str:
    identifier = lesson.identifier or slugify(lesson.title)
    return str(AddressRef(int(resource_kind(lesson.payable)), author_key, identifier))


# =============================================================================
# Courses
# =============================================================================


def encode_course_list(
    payload: CourseCreationData,
    *,
    created_at: int | None = None,
    kind: int = EventKind.COURSE_LIST,
    default_currency: str = DEFAULT_CURRENCY,
) -> Envelope:
    """Build an unsigned course list envelope.

    Tag order: ``d``, ``title``, ``description``, ``l`` (category, then extra
    topics), ``published_at``, optional ``image``, optional ``price``, then
    one ``a`` per lesson in payload order. Lessons are never reordered or
    deduplicated.

    Args:
        payload: Course to encode.
        created_at: Envelope timestamp; defaults to now.
        kind: Course list kind to publish under (30004 or legacy 30001).
        default_currency: Currency written when the payload has none.
    """
    timestamp = _now() if created_at is None else created_at
    tags: list[list[str]] = [
        [TagKey.D, payload.identifier or slugify(payload.title)],
        [TagKey.TITLE, payload.title],
        [TagKey.DESCRIPTION, payload.description],
        [TagKey.LABEL, payload.category, *payload.topics],
        [TagKey.PUBLISHED_AT, str(timestamp)],
    ]
    if payload.image:
        tags.append([TagKey.IMAGE, payload.image])
    if (price := _price_tag(payload, default_currency)) is not None:
        tags.append(price)
    tags.extend([TagKey.ADDRESS, _lesson_address(lesson, payload.author_key)] for lesson in payload.lessons)

    return Envelope(
        author_key=payload.author_key,
        created_at=timestamp,
        kind=int(kind),
        tags=tags,
    )


# =============================================================================
# Resources
# =============================================================================


def encode_resource(
    payload: ResourceCreationData,
    resource_type: ResourceType,
    *,
    created_at: int | None = None,
    default_currency: str = DEFAULT_CURRENCY,
) -> Envelope:
    """Build an unsigned lesson, document or video envelope.

    The kind is the paid listing kind when the payload is premium with a
    positive price, otherwise the free article kind.

    Tag order: ``d``, ``title``, ``summary``, optional ``duration``,
    ``published_at``, optional ``price``, one ``t`` per topic, the ``video``
    marker for videos, optional ``image``, ``r`` links (video URL first),
    optional ``author``, optional ``a`` back-reference to the course.
    """
    timestamp = _now() if created_at is None else created_at
    resource_type = ResourceType(resource_type)
    tags: list[list[str]] = [
        [TagKey.D, payload.identifier or slugify(payload.title)],
        [TagKey.TITLE, payload.title],
        [TagKey.SUMMARY, payload.description],
    ]
    if payload.duration:
        tags.append([TagKey.DURATION, payload.duration])
    tags.append([TagKey.PUBLISHED_AT, str(timestamp)])
    if (price := _price_tag(payload, default_currency)) is not None:
        tags.append(price)
    tags.extend([TagKey.TOPIC, topic] for topic in payload.topics)
    if resource_type is ResourceType.VIDEO and VIDEO_TOPIC not in payload.topics:
        tags.append([TagKey.TOPIC, VIDEO_TOPIC])
    if payload.image:
        tags.append([TagKey.IMAGE, payload.image])

    links = list(payload.additional_links)
    if resource_type is ResourceType.VIDEO and payload.video_url:
        links.insert(0, payload.video_url)
    tags.extend([TagKey.REFERENCE, link] for link in links)

    if payload.author:
        tags.append([TagKey.AUTHOR, payload.author])
    if payload.course_ref is not None:
        tags.append([TagKey.ADDRESS, str(payload.course_ref)])

    return Envelope(
        author_key=payload.author_key,
        created_at=timestamp,
        kind=int(resource_kind(payload.payable)),
        tags=tags,
        body=payload.content,
    )


def encode_lesson(payload: ResourceCreationData, **kwargs: int | str | None) -> Envelope:
    return encode_resource(payload, ResourceType.LESSON, **kwargs)  # type: ignore[arg-type]


def encode_document(payload: ResourceCreationData, **kwargs: int | str | None) -> Envelope:
    return encode_resource(payload, ResourceType.DOCUMENT, **kwargs)  # type: ignore[arg-type]


def encode_video(payload: ResourceCreationData, **kwargs: int | str | None) -> Envelope:
    """Encode a video; ``video_url`` becomes the first ``r`` tag."""
    return encode_resource(payload, ResourceType.VIDEO, **kwargs)  # type: ignore[arg-type]


__all__ = [
    "encode_course_list",
    "encode_document",
    "encode_lesson",
    "encode_resource",
    "encode_video",
    "slugify",
]
