"""Codec layer: wire envelopes to and from typed course records.

Depends on [coursestr.models][coursestr.models] and
[coursestr.core][coursestr.core]. Every function here is pure and
synchronous; [EventCodec][coursestr.codec.event_codec.EventCodec] binds them
to a configuration.

Attributes:
    decode: Decode any registered event kind.
    encode_course_list: Build a course list envelope.
    encode_resource: Build a lesson, document or video envelope.
    parse_address: Parse an ``a`` tag token.
    encode_naddr: NIP-19 shareable identifier.
    validate_course_creation: Pre-publication rules.
"""

from .address import (
    NaddrPointer,
    build_address,
    decode_naddr,
    encode_naddr,
    format_note_identifier,
    parse_address,
)
from .decoder import (
    DecodeBatchResult,
    DecodeFailure,
    decode,
    decode_batch,
    decode_course_list,
    decode_resource,
)
from .encoder import (
    encode_course_list,
    encode_document,
    encode_lesson,
    encode_resource,
    encode_video,
    slugify,
)
from .event_codec import EventCodec
from .kinds import KindClass, classify, is_course_kind, registered_kinds, resource_kind
from .payloads import (
    CourseCreationData,
    LessonCreationData,
    PricedData,
    ResourceCreationData,
    ResourceType,
)
from .tags import check_tag, iter_tags
from .validator import (
    Rule,
    Violation,
    ensure_valid_course,
    ensure_valid_resource,
    is_valid_course,
    is_valid_resource,
    validate_course_creation,
    validate_resource_creation,
)


__all__ = [
    "CourseCreationData",
    "DecodeBatchResult",
    "DecodeFailure",
    "EventCodec",
    "KindClass",
    "LessonCreationData",
    "NaddrPointer",
    "PricedData",
    "ResourceCreationData",
    "ResourceType",
    "Rule",
    "Violation",
    "build_address",
    "check_tag",
    "classify",
    "decode",
    "decode_batch",
    "decode_course_list",
    "decode_naddr",
    "decode_resource",
    "encode_course_list",
    "encode_document",
    "encode_lesson",
    "encode_naddr",
    "encode_resource",
    "encode_video",
    "ensure_valid_course",
    "ensure_valid_resource",
    "format_note_identifier",
    "is_course_kind",
    "is_valid_course",
    "is_valid_resource",
    "iter_tags",
    "parse_address",
    "registered_kinds",
    "resource_kind",
    "slugify",
    "validate_course_creation",
    "validate_resource_creation",
]
