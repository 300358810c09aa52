"""
Immutable Nostr event envelope.

[Envelope][coursestr.models.envelope.Envelope] is the wire record every
other component consumes or produces: an opaque id, the author key, a
creation timestamp, the numeric kind, the ordered tag sequence, a free-text
body, and an opaque signature. The codec never checks ids or signatures;
they pass through untouched.

Conversions are provided to and from the NIP-01 JSON shape and to and from
``nostr_sdk`` objects, so envelopes can arrive from relays and leave for
external signing without the codec touching the network.

See Also:
    [coursestr.codec.decoder][]: Folds an envelope's tags into typed records.
    [coursestr.codec.encoder][]: Builds envelopes from creation payloads.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Self

from nostr_sdk import Event as NostrEvent
from nostr_sdk import EventBuilder, Kind, Tag, Timestamp

from ._validation import freeze_tags, validate_int, validate_str_no_null
from .constants import TagKey


Tags = tuple[tuple[str, ...], ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class Envelope:
    """Immutable wire event.

    Tags are stored as nested tuples so the envelope stays hashable and
    cannot be mutated after construction. Lists passed in are frozen by
    ``__post_init__``; tag order is preserved exactly.

    Attributes:
        id: Content-addressed event id, ``""`` before signing.
        author_key: Author public key (hex).
        created_at: Unix timestamp in seconds.
        kind: Event kind (non-negative). Any value is accepted here;
            unregistered kinds are rejected when decoding.
        tags: Ordered ``(key, *values)`` records; keys may repeat.
        body: Markdown or plain-text content.
        signature: Opaque signature, ``""`` before signing.

    Raises:
        TypeError: If a field has the wrong type.
        ValueError: If the kind or timestamp is negative, or a string field
            contains null bytes.

    Examples:
        ```python
        envelope = Envelope.from_dict({
            "pubkey": "ab" * 32,
            "created_at": 1705315200,
            "kind": 30023,
            "tags": [["d", "intro"], ["title", "Intro"]],
            "content": "# Intro",
        })
        envelope.identifier        # "intro"
        envelope.first_value("title")  # "Intro"
        ```
    """

    author_key: str
    created_at: int
    kind: int
    tags: Tags = ()
    body: str = ""
    id: str = ""
    signature: str = ""

    def __post_init__(self) -> None:
        validate_str_no_null(self.id, "id")
        validate_str_no_null(self.author_key, "author_key")
        validate_int(self.created_at, "created_at")
        validate_int(self.kind, "kind")
        validate_str_no_null(self.body, "body")
        validate_str_no_null(self.signature, "signature")
        object.__setattr__(self, "tags", freeze_tags(self.tags))

    # -------------------------------------------------------------------------
    # Tag access
    # -------------------------------------------------------------------------

    def values(self, key: str) -> list[tuple[str, ...]]:
        """Return the values of every tag named *key*, in tag order."""
        return [tag[1:] for tag in self.tags if tag and tag[0] == key]

    def first_value(self, key: str) -> str | None:
        """Return the first value of the first well-formed tag named *key*."""
        for tag in self.tags:
            if len(tag) >= 2 and tag[0] == key:  # noqa: PLR2004
                return tag[1]
        return None

    @property
    def identifier(self) -> str:
        """The ``d`` tag value, or ``""`` when the event has none."""
        return self.first_value(TagKey.D) or ""

    # -------------------------------------------------------------------------
    # JSON
    # -------------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Build an envelope from the NIP-01 JSON object shape.

        ``id``, ``content`` and ``sig`` are optional (unsigned events).

        Raises:
            KeyError: If ``pubkey``, ``created_at`` or ``kind`` is missing.
        """
        return cls(
            id=data.get("id", ""),
            author_key=data["pubkey"],
            created_at=data["created_at"],
            kind=data["kind"],
            tags=data.get("tags", ()),
            body=data.get("content", ""),
            signature=data.get("sig", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the NIP-01 JSON object shape."""
        return {
            "id": self.id,
            "pubkey": self.author_key,
            "created_at": self.created_at,
            "kind": self.kind,
            "tags": [list(tag) for tag in self.tags],
            "content": self.body,
            "sig": self.signature,
        }

    @classmethod
    def from_json(cls, raw: str) -> Self:
        """Parse a JSON-encoded event."""
        return cls.from_dict(json.loads(raw))

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    # -------------------------------------------------------------------------
    # nostr_sdk interop
    # -------------------------------------------------------------------------

    @classmethod
    def from_nostr_event(cls, event: NostrEvent) -> Self:
        """Convert a ``nostr_sdk.Event`` received from a relay."""
        return cls(
            id=event.id().to_hex(),
            author_key=event.author().to_hex(),
            created_at=event.created_at().as_secs(),
            kind=event.kind().as_u16(),
            tags=[list(tag.as_vec()) for tag in event.tags().to_vec()],
            body=event.content(),
            signature=event.signature(),
        )

    def to_event_builder(self) -> EventBuilder:
        """Return an unsigned ``nostr_sdk.EventBuilder`` with the same content.

        Empty tags are dropped; they carry no key and cannot be represented
        by ``nostr_sdk.Tag``.
        """
        tags = [Tag.parse(list(tag)) for tag in self.tags if tag]
        return (
            EventBuilder(Kind(self.kind), self.body)
            .tags(tags)
            .custom_created_at(Timestamp.from_secs(self.created_at))
        )
