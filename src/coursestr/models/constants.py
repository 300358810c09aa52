"""Shared constants for the models layer.

Defines the closed tag vocabulary, the event kinds the platform publishes,
and the small enumerations used across the codec. Placing them here keeps
the codec and core layers free of circular imports.

See Also:
    [coursestr.codec.kinds][]: Maps [EventKind][coursestr.models.constants.EventKind]
        values onto [KindFamily][coursestr.models.constants.KindFamily].
    [coursestr.codec.tags][]: Walks tag sequences using
        [TagKey][coursestr.models.constants.TagKey].
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class EventKind(IntEnum):
    """Nostr event kinds carrying platform content.

    Attributes:
        LEGACY_COURSE_LIST: Kind 30001 -- list kind used by early course
            events; still decoded as a course list.
        COURSE_LIST: Kind 30004 -- NIP-51 curation set, one ``a`` tag per
            lesson. Written by the course encoder by default.
        LONG_FORM: Kind 30023 -- NIP-23 long-form article (free content).
        CLASSIFIED_LISTING: Kind 30402 -- NIP-99 classified listing (paid
            content, carries a ``price`` tag).
    """

    LEGACY_COURSE_LIST = 30_001
    COURSE_LIST = 30_004
    LONG_FORM = 30_023
    CLASSIFIED_LISTING = 30_402


class KindFamily(StrEnum):
    """Content family an event kind belongs to."""

    COURSE_LIST = "course_list"
    FREE_ARTICLE = "free_article"
    PAID_LISTING = "paid_listing"


class SubType(StrEnum):
    """Resource sub-type inferred from ``t`` tags at decode time."""

    DOCUMENT = "document"
    VIDEO = "video"


class TagKey(StrEnum):
    """Closed vocabulary of tag keys the codec understands.

    Several keys feed the same logical field (``title``/``name``,
    ``summary``/``description``/``about``, ``image``/``picture``); the
    decoders resolve them with last-wins precedence.

    ``UNRECOGNIZED`` stands for any key outside the vocabulary. Use
    [lookup()][coursestr.models.constants.TagKey.lookup] to map raw keys,
    which never raises.
    """

    D = "d"
    TITLE = "title"
    NAME = "name"
    SUMMARY = "summary"
    DESCRIPTION = "description"
    ABOUT = "about"
    IMAGE = "image"
    PICTURE = "picture"
    PUBLISHED_AT = "published_at"
    PRICE = "price"
    LABEL = "l"
    TOPIC = "t"
    REFERENCE = "r"
    ADDRESS = "a"
    DURATION = "duration"
    AUTHOR = "author"
    UNRECOGNIZED = "*"

    @classmethod
    def lookup(cls, key: str) -> TagKey:
        """Map a raw tag key onto the vocabulary."""
        try:
            return cls(key)
        except ValueError:
            return cls.UNRECOGNIZED


TITLE_KEYS = frozenset({TagKey.TITLE, TagKey.NAME})
SUMMARY_KEYS = frozenset({TagKey.SUMMARY, TagKey.DESCRIPTION, TagKey.ABOUT})
IMAGE_KEYS = frozenset({TagKey.IMAGE, TagKey.PICTURE})

COURSE_LIST_KINDS = frozenset({EventKind.COURSE_LIST, EventKind.LEGACY_COURSE_LIST})

# Marks platform-internal listings; never shown as a topic.
HOUSEKEEPING_TOPICS = frozenset({"plebdevs"})

VIDEO_TOPIC = "video"
DEFAULT_CURRENCY = "sats"
COURSE_ID_PREFIX = "course-"

EVENT_KIND_MAX = 65_535

# Resource facets inferred from topics. Order is priority: the first listed
# value present among the topics wins, whatever the tag order.
RESOURCE_CATEGORIES = ("bitcoin", "lightning", "nostr", "frontend", "security")
DOCUMENT_TYPES = ("cheatsheet", "reference", "tutorial", "documentation")
DIFFICULTIES = ("beginner", "advanced")
DEFAULT_DOCUMENT_TYPE = "guide"
DEFAULT_DIFFICULTY = "intermediate"
