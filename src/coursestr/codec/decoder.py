"""
Decoders: wire envelopes to typed course and resource records.

Each decoder is a single left-to-right fold over the envelope's tag
sequence into a private accumulator, followed by a freeze into the
immutable result record. No state is shared between calls, so decoders may
run concurrently without coordination.

Fold rules:

* Single-value fields (``d``, ``title``/``name``, ``summary``/``description``/
  ``about``, ``image``/``picture``, ``published_at``, ``duration``,
  ``author``): the last occurrence wins, whichever alias it uses.
* Repeatable fields (``l``, ``t``, ``r``, ``a``): every occurrence appends.
  Every value of an ``l`` tag is appended individually.
* ``price``: the first value must parse to an integer ``> 0``; anything
  else is "no price" and leaves earlier valid prices in place.
* Malformed tags are skipped; unrecognized keys are ignored. Empty values
  are kept for single-value fields and never appended to collections.
* Resource facets (category, document type, difficulty) are inferred from
  the collected topics after the fold. Candidate order decides, not tag
  order.

See Also:
    [coursestr.codec.tags][]: Tag classification and skipping.
    [coursestr.codec.kinds][]: Kind registry used for dispatch.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, NamedTuple

from coursestr.core.exceptions import AddressParseError, DecodeError, KindMismatchError
from coursestr.core.logger import Logger
from coursestr.models.constants import (
    COURSE_ID_PREFIX,
    DEFAULT_CURRENCY,
    DEFAULT_DIFFICULTY,
    DEFAULT_DOCUMENT_TYPE,
    DIFFICULTIES,
    DOCUMENT_TYPES,
    HOUSEKEEPING_TOPICS,
    IMAGE_KEYS,
    RESOURCE_CATEGORIES,
    SUMMARY_KEYS,
    TITLE_KEYS,
    VIDEO_TOPIC,
    KindFamily,
    SubType,
    TagKey,
)
from coursestr.models.envelope import Envelope
from coursestr.models.parsed import ParsedCourse, ParsedResource

from .address import parse_address
from .kinds import classify
from .tags import dedupe, iter_tags, parse_price


if TYPE_CHECKING:
    from collections.abc import Iterable

    from coursestr.models.address import AddressRef


_logger = Logger("coursestr.codec.decoder")


# =============================================================================
# Accumulators
# =============================================================================


@dataclass(slots=True)
class _Common:
    """Fields shared by both families, filled during the fold."""

    event_id: str
    identifier: str = ""
    title: str = ""
    summary: str = ""
    image: str = ""
    published_at: str = ""
    topics: list[str] = field(default_factory=list)
    price_sats: int | None = None
    currency: str = DEFAULT_CURRENCY


@dataclass(slots=True)
class _CourseAcc(_Common):
    category: str = ""
    lesson_references: list[AddressRef] = field(default_factory=list)


@dataclass(slots=True)
class _ResourceAcc(_Common):
    housekeeping: frozenset[str] = frozenset()
    sub_type: SubType = SubType.DOCUMENT
    author: str | None = None
    duration: str | None = None
    additional_links: list[str] = field(default_factory=list)
    course_ref: AddressRef | None = None


# =============================================================================
# Tag handlers
# =============================================================================


def _set_identifier(acc: _Common, values: tuple[str, ...]) -> None:
    acc.identifier = values[0]


def _set_title(acc: _Common, values: tuple[str, ...]) -> None:
    acc.title = values[0]


def _set_summary(acc: _Common, values: tuple[str, ...]) -> None:
    acc.summary = values[0]


def _set_image(acc: _Common, values: tuple[str, ...]) -> None:
    acc.image = values[0]


def _set_published_at(acc: _Common, values: tuple[str, ...]) -> None:
    acc.published_at = values[0]


def _set_price(acc: _Common, values: tuple[str, ...]) -> None:
    price = parse_price(values)
    if price is None:
        _logger.debug("price_ignored", event_id=acc.event_id, value=values[0])
        return
    acc.price_sats = price
    acc.currency = values[1] if len(values) > 1 and values[1] else DEFAULT_CURRENCY


def _parse_reference(acc: _Common, values: tuple[str, ...]) -> AddressRef | None:
    try:
        return parse_address(values[0])
    except AddressParseError as e:
        _logger.warning("reference_skipped", event_id=acc.event_id, error=str(e))
        return None


def _course_label(acc: _CourseAcc, values: tuple[str, ...]) -> None:
    acc.category = values[0]
    acc.topics.extend(v for v in values if v)


def _course_topic(acc: _CourseAcc, values: tuple[str, ...]) -> None:
    if values[0]:
        acc.topics.append(values[0])


def _course_lesson(acc: _CourseAcc, values: tuple[str, ...]) -> None:
    ref = _parse_reference(acc, values)
    if ref is not None:
        acc.lesson_references.append(ref)


def _resource_label(acc: _ResourceAcc, values: tuple[str, ...]) -> None:
    acc.topics.extend(v for v in values if v and v not in acc.housekeeping)


def _resource_topic(acc: _ResourceAcc, values: tuple[str, ...]) -> None:
    value = values[0]
    if not value:
        return
    if value == VIDEO_TOPIC:
        acc.sub_type = SubType.VIDEO
        acc.topics.append(value)
    elif value not in acc.housekeeping:
        acc.topics.append(value)


def _resource_link(acc: _ResourceAcc, values: tuple[str, ...]) -> None:
    if values[0]:
        acc.additional_links.append(values[0])


def _resource_author(acc: _ResourceAcc, values: tuple[str, ...]) -> None:
    acc.author = values[0]


def _resource_duration(acc: _ResourceAcc, values: tuple[str, ...]) -> None:
    acc.duration = values[0]


def _resource_course(acc: _ResourceAcc, values: tuple[str, ...]) -> None:
    ref = _parse_reference(acc, values)
    if ref is not None:
        acc.course_ref = ref


_Handler = Callable[[Any, tuple[str, ...]], None]

_COMMON_HANDLERS: dict[TagKey, _Handler] = {
    TagKey.D: _set_identifier,
    **dict.fromkeys(TITLE_KEYS, _set_title),
    **dict.fromkeys(SUMMARY_KEYS, _set_summary),
    **dict.fromkeys(IMAGE_KEYS, _set_image),
    TagKey.PUBLISHED_AT: _set_published_at,
    TagKey.PRICE: _set_price,
}

_COURSE_HANDLERS: dict[TagKey, _Handler] = {
    **_COMMON_HANDLERS,
    TagKey.LABEL: _course_label,
    TagKey.TOPIC: _course_topic,
    TagKey.ADDRESS: _course_lesson,
}

_RESOURCE_HANDLERS: dict[TagKey, _Handler] = {
    **_COMMON_HANDLERS,
    TagKey.LABEL: _resource_label,
    TagKey.TOPIC: _resource_topic,
    TagKey.REFERENCE: _resource_link,
    TagKey.AUTHOR: _resource_author,
    TagKey.DURATION: _resource_duration,
    TagKey.ADDRESS: _resource_course,
}


def _fold(envelope: Envelope, acc: _Common, handlers: dict[TagKey, _Handler]) -> None:
    for key, values in iter_tags(envelope.tags, event_id=envelope.id):
        handler = handlers.get(key)
        if handler is not None:
            handler(acc, values)


def _first_present(candidates: tuple[str, ...], topics: tuple[str, ...], default: str) -> str:
    return next((c for c in candidates if c in topics), default)


def _require_family(envelope: Envelope, *families: KindFamily) -> None:
    family = classify(envelope.kind).family
    if family not in families:
        expected = ", ".join(families)
        raise KindMismatchError(f"kind {envelope.kind} is {family}, expected {expected}")


# =============================================================================
# Decoders
# =============================================================================


def decode_course_list(envelope: Envelope) -> ParsedCourse:
    """Decode a course list event.

    Raises:
        UnknownKindError: If the envelope kind is not registered.
        KindMismatchError: If the kind is not a course list kind.
    """
    _require_family(envelope, KindFamily.COURSE_LIST)
    acc = _CourseAcc(event_id=envelope.id)
    _fold(envelope, acc, _COURSE_HANDLERS)

    return ParsedCourse(
        id=f"{COURSE_ID_PREFIX}{acc.identifier}" if acc.identifier else "",
        identifier=acc.identifier,
        event_id=envelope.id,
        author_key=envelope.author_key,
        kind=envelope.kind,
        name=acc.title,
        description=acc.summary,
        image=acc.image,
        category=acc.category,
        published_at=acc.published_at or str(envelope.created_at),
        created_at=envelope.created_at,
        topics=dedupe(acc.topics),
        price_sats=acc.price_sats,
        currency=acc.currency,
        lesson_references=tuple(acc.lesson_references),
    )


def decode_resource(
    envelope: Envelope,
    *,
    housekeeping_topics: frozenset[str] = HOUSEKEEPING_TOPICS,
) -> ParsedResource:
    """Decode a lesson, document or video event (free article or paid listing).

    Args:
        envelope: The wire event.
        housekeeping_topics: Topic markers dropped from the decoded topics.

    Raises:
        UnknownKindError: If the envelope kind is not registered.
        KindMismatchError: If the kind is a course list kind.
    """
    _require_family(envelope, KindFamily.FREE_ARTICLE, KindFamily.PAID_LISTING)
    acc = _ResourceAcc(event_id=envelope.id, housekeeping=frozenset(housekeeping_topics))
    _fold(envelope, acc, _RESOURCE_HANDLERS)
    topics = dedupe(acc.topics)

    return ParsedResource(
        id=acc.identifier,
        event_id=envelope.id,
        author_key=envelope.author_key,
        kind=envelope.kind,
        title=acc.title,
        summary=acc.summary,
        image=acc.image,
        published_at=acc.published_at or str(envelope.created_at),
        created_at=envelope.created_at,
        topics=topics,
        sub_type=acc.sub_type,
        category=_first_present(RESOURCE_CATEGORIES, topics, ""),
        document_type=_first_present(DOCUMENT_TYPES, topics, DEFAULT_DOCUMENT_TYPE),
        difficulty=_first_present(DIFFICULTIES, topics, DEFAULT_DIFFICULTY),
        author=acc.author,
        duration=acc.duration,
        price_sats=acc.price_sats,
        currency=acc.currency,
        additional_links=tuple(acc.additional_links),
        course_ref=acc.course_ref,
        content=envelope.body,
    )


def decode(
    envelope: Envelope,
    *,
    housekeeping_topics: frozenset[str] = HOUSEKEEPING_TOPICS,
) -> ParsedCourse | ParsedResource:
    """Decode any registered event, dispatching on its kind family.

    Raises:
        UnknownKindError: If the envelope kind is not registered.
    """
    if classify(envelope.kind).family is KindFamily.COURSE_LIST:
        return decode_course_list(envelope)
    return decode_resource(envelope, housekeeping_topics=housekeeping_topics)


# =============================================================================
# Batch decoding
# =============================================================================


class DecodeFailure(NamedTuple):
    """One event that could not be decoded."""

    event_id: str
    error: DecodeError


class DecodeBatchResult(NamedTuple):
    """Outcome of [decode_batch()][coursestr.codec.decoder.decode_batch]."""

    decoded: tuple[ParsedCourse | ParsedResource, ...]
    failures: tuple[DecodeFailure, ...]


def _to_envelope(item: Envelope | dict[str, Any]) -> Envelope:
    if isinstance(item, Envelope):
        return item
    try:
        return Envelope.from_dict(item)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise DecodeError(f"malformed event: {e!r}") from e


def decode_batch(
    items: Iterable[Envelope | dict[str, Any]],
    *,
    housekeeping_topics: frozenset[str] = HOUSEKEEPING_TOPICS,
) -> DecodeBatchResult:
    """Decode many events, isolating failures per event.

    Items may be envelopes or raw NIP-01 JSON objects. A failing item is
    logged and reported in ``failures``; it never aborts the batch.
    Successful results keep input order.
    """
    decoded: list[ParsedCourse | ParsedResource] = []
    failures: list[DecodeFailure] = []
    for item in items:
        event_id = item.id if isinstance(item, Envelope) else str(_safe_get(item, "id"))
        try:
            decoded.append(decode(_to_envelope(item), housekeeping_topics=housekeeping_topics))
        except DecodeError as e:
            _logger.warning("event_skipped", event_id=event_id, error=str(e))
            failures.append(DecodeFailure(event_id, e))
    _logger.debug("batch_decoded", decoded=len(decoded), failed=len(failures))
    return DecodeBatchResult(tuple(decoded), tuple(failures))


def _safe_get(item: Any, key: str) -> Any:
    return item.get(key, "") if isinstance(item, dict) else ""


__all__ = [
    "DecodeBatchResult",
    "DecodeFailure",
    "decode",
    "decode_batch",
    "decode_course_list",
    "decode_resource",
]
