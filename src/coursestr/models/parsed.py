"""
Typed records decoded from wire envelopes.

[ParsedCourse][coursestr.models.parsed.ParsedCourse] comes from a course
list event; [ParsedResource][coursestr.models.parsed.ParsedResource] covers
lessons, documents and videos, which share the same wire shape and differ
only by the sub-type inferred from their topics.

Both records are derived and stateless: they are recomputed on every decode
and never mutated in place.
"""

from __future__ import annotations

from dataclasses import dataclass

from .address import AddressRef
from .constants import DEFAULT_CURRENCY, DEFAULT_DIFFICULTY, DEFAULT_DOCUMENT_TYPE, EventKind, SubType


@dataclass(frozen=True, slots=True, kw_only=True)
class ParsedCourse:
    """A course decoded from a course list event.

    Attributes:
        id: ``course-{identifier}``, or ``""`` when the event has no ``d`` tag.
        identifier: Raw ``d`` tag value.
        event_id: Envelope id.
        author_key: Envelope author key.
        kind: Envelope kind.
        name: From ``title``/``name`` (last wins).
        description: From ``description``/``about``/``summary`` (last wins).
        image: From ``image``/``picture`` (last wins).
        category: First value of the last ``l`` tag.
        published_at: ``published_at`` tag, else the envelope timestamp.
        created_at: Envelope timestamp.
        topics: Every ``l`` value and ``t`` value, first occurrence order.
        price_sats: Positive price, or ``None`` when absent or unparseable.
        currency: Currency accompanying the price.
        lesson_references: One entry per valid ``a`` tag, in tag order.
    """

    id: str
    identifier: str
    event_id: str
    author_key: str
    kind: int
    name: str = ""
    description: str = ""
    image: str = ""
    category: str = ""
    published_at: str = ""
    created_at: int = 0
    topics: tuple[str, ...] = ()
    price_sats: int | None = None
    currency: str = DEFAULT_CURRENCY
    lesson_references: tuple[AddressRef, ...] = ()

    @property
    def is_premium(self) -> bool:
        return self.price_sats is not None

    @property
    def address(self) -> AddressRef:
        """Address other events use to reference this course."""
        return AddressRef(self.kind, self.author_key, self.identifier)


@dataclass(frozen=True, slots=True, kw_only=True)
class ParsedResource:
    """A lesson, document or video decoded from an article or listing event.

    Attributes:
        id: Raw ``d`` tag value, ``""`` when absent.
        event_id: Envelope id.
        author_key: Envelope author key.
        kind: Envelope kind.
        title: From ``title``/``name`` (last wins).
        summary: From ``summary``/``description``/``about`` (last wins).
        image: From ``image``/``picture`` (last wins).
        published_at: ``published_at`` tag, else the envelope timestamp.
        created_at: Envelope timestamp.
        topics: ``l`` and ``t`` values minus housekeeping markers.
        sub_type: ``video`` when a ``t`` tag says so, else ``document``.
        category: First of ``bitcoin``, ``lightning``, ``nostr``, ``frontend``,
            ``security`` found among the topics, else ``""``.
        document_type: First of ``cheatsheet``, ``reference``, ``tutorial``,
            ``documentation`` found among the topics, else ``guide``.
        difficulty: ``beginner`` or ``advanced`` when a topic says so, else
            ``intermediate``.
        author: ``author`` tag (display name), if any.
        duration: ``duration`` tag, if any.
        price_sats: Positive price, or ``None``.
        currency: Currency accompanying the price.
        additional_links: ``r`` tag values in tag order.
        course_ref: Last valid ``a`` tag, pointing at the owning course.
        content: Envelope body.
    """

    id: str
    event_id: str
    author_key: str
    kind: int
    title: str = ""
    summary: str = ""
    image: str = ""
    published_at: str = ""
    created_at: int = 0
    topics: tuple[str, ...] = ()
    sub_type: SubType = SubType.DOCUMENT
    category: str = ""
    document_type: str = DEFAULT_DOCUMENT_TYPE
    difficulty: str = DEFAULT_DIFFICULTY
    author: str | None = None
    duration: str | None = None
    price_sats: int | None = None
    currency: str = DEFAULT_CURRENCY
    additional_links: tuple[str, ...] = ()
    course_ref: AddressRef | None = None
    content: str = ""

    @property
    def is_premium(self) -> bool:
        """True when a price was decoded or the event is a paid listing."""
        return self.price_sats is not None or self.kind == EventKind.CLASSIFIED_LISTING

    @property
    def address(self) -> AddressRef:
        return AddressRef(self.kind, self.author_key, self.id)

    @property
    def video_url(self) -> str | None:
        """Video file URL: the first ``r`` link of a video resource.

        The encoder always writes the video URL as the first ``r`` tag; no
        URL-substring guessing is applied.
        """
        if self.sub_type is SubType.VIDEO and self.additional_links:
            return self.additional_links[0]
        return None
