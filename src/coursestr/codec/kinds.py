"""
Kind registry: numeric event kinds to content family and payment tier.

The registry is closed. Kinds outside it raise
[UnknownKindError][coursestr.core.exceptions.UnknownKindError] and are never
coerced into a default family; callers that want to support another kind
must register it here.

See Also:
    [coursestr.codec.decoder.decode][]: Dispatches on
        [classify()][coursestr.codec.kinds.classify].
"""

from __future__ import annotations

from types import MappingProxyType
from typing import NamedTuple

from coursestr.core.exceptions import UnknownKindError
from coursestr.models.constants import COURSE_LIST_KINDS, EventKind, KindFamily


class KindClass(NamedTuple):
    """Classification of one event kind."""

    family: KindFamily
    payable: bool


_REGISTRY: MappingProxyType[int, KindClass] = MappingProxyType(
    {
        EventKind.LEGACY_COURSE_LIST: KindClass(KindFamily.COURSE_LIST, payable=False),
        EventKind.COURSE_LIST: KindClass(KindFamily.COURSE_LIST, payable=False),
        EventKind.LONG_FORM: KindClass(KindFamily.FREE_ARTICLE, payable=False),
        EventKind.CLASSIFIED_LISTING: KindClass(KindFamily.PAID_LISTING, payable=True),
    }
)


def classify(kind: int) -> KindClass:
    """Return the family and payment tier of *kind*.

    Raises:
        UnknownKindError: If *kind* is not registered.
    """
    try:
        return _REGISTRY[kind]
    except KeyError:
        raise UnknownKindError(kind) from None


def is_course_kind(kind: int) -> bool:
    return kind in COURSE_LIST_KINDS


def resource_kind(payable: bool) -> EventKind:  # noqa: FBT001
    """Kind used to publish a resource of the given payment tier."""
    return EventKind.CLASSIFIED_LISTING if payable else EventKind.LONG_FORM


def registered_kinds() -> frozenset[int]:
    return frozenset(_REGISTRY)


__all__ = ["KindClass", "classify", "is_course_kind", "registered_kinds", "resource_kind"]
