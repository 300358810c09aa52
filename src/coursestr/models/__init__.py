"""Pure frozen dataclasses and enumerations for wire events and decoded content.

The models layer is the foundation of the layering. It has no dependencies
on any other Coursestr package. Every model uses
``@dataclass(frozen=True, slots=True)``; validation happens in
``__post_init__`` so invalid instances never escape the constructor.

Attributes:
    Envelope: Immutable wire event with NIP-01 JSON and ``nostr_sdk``
        conversions.
    AddressRef: ``(kind, author_key, identifier)`` reference to another
        replaceable event.
    ParsedCourse: Course decoded from a course list event.
    ParsedResource: Lesson, document or video decoded from an article or
        listing event.
    EventKind, KindFamily, SubType, TagKey: Shared enumerations.
"""

from .address import AddressRef
from .constants import (
    COURSE_LIST_KINDS,
    DEFAULT_CURRENCY,
    EVENT_KIND_MAX,
    HOUSEKEEPING_TOPICS,
    EventKind,
    KindFamily,
    SubType,
    TagKey,
)
from .envelope import Envelope
from .parsed import ParsedCourse, ParsedResource


__all__ = [
    "COURSE_LIST_KINDS",
    "DEFAULT_CURRENCY",
    "EVENT_KIND_MAX",
    "HOUSEKEEPING_TOPICS",
    "AddressRef",
    "Envelope",
    "EventKind",
    "KindFamily",
    "ParsedCourse",
    "ParsedResource",
    "SubType",
    "TagKey",
]
