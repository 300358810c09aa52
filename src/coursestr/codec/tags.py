"""
Tag sequence walking and value coercion shared by the decoders.

Tags arrive as loosely-typed ``[key, *values]`` records. This module maps
each key onto the closed [TagKey][coursestr.models.constants.TagKey]
vocabulary and drops structurally invalid tags, so the decoders only ever
see ``(TagKey, values)`` pairs with at least one value. That value may be
the empty string; the decoders decide what an empty value means per field.

Note:
    Parsing here never fails a whole event. A malformed tag raises
    [MalformedTagError][coursestr.core.exceptions.MalformedTagError] from
    [check_tag()][coursestr.codec.tags.check_tag];
    [iter_tags()][coursestr.codec.tags.iter_tags] turns that into a logged
    skip and continues with the next tag.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from coursestr.core.exceptions import MalformedTagError
from coursestr.core.logger import Logger
from coursestr.models.constants import TagKey


if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


_logger = Logger("coursestr.codec.tags")


def check_tag(tag: Sequence[str]) -> tuple[TagKey, tuple[str, ...]]:
    """Classify one tag, returning its vocabulary key and values.

    Unrecognized keys are returned as ``TagKey.UNRECOGNIZED`` rather than
    rejected; callers ignore them.

    Raises:
        MalformedTagError: If the tag is empty or a recognized key carries
            no value.
    """
    if not tag:
        raise MalformedTagError("empty tag")
    key = TagKey.lookup(tag[0])
    values = tuple(tag[1:])
    if key is not TagKey.UNRECOGNIZED and not values:
        raise MalformedTagError(f"tag {tag[0]!r} has no value")
    return key, values


def iter_tags(tags: Sequence[Sequence[str]], *, event_id: str = "") -> Iterator[tuple[TagKey, tuple[str, ...]]]:
    """Yield ``(key, values)`` for every well-formed, recognized tag, in order.

    Malformed tags are skipped and logged at DEBUG; unrecognized keys are
    skipped silently.
    """
    for index, tag in enumerate(tags):
        try:
            key, values = check_tag(tag)
        except MalformedTagError as e:
            _logger.debug("tag_skipped", event_id=event_id, index=index, reason=str(e))
            continue
        if key is TagKey.UNRECOGNIZED:
            continue
        yield key, values


def parse_price(values: Sequence[str]) -> int | None:
    """Return the price in the first value when it is a positive integer.

    Non-numeric, zero and negative values yield ``None``; they mean "no
    price", not an error.
    """
    try:
        price = int(values[0].strip())
    except (IndexError, ValueError):
        return None
    return price if price > 0 else None


def dedupe(items: Sequence[str]) -> tuple[str, ...]:
    """Drop repeated items, keeping first-occurrence order."""
    return tuple(dict.fromkeys(items))


__all__ = ["check_tag", "dedupe", "iter_tags", "parse_price"]
