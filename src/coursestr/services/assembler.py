"""
Course assembly: a decoded course plus its decoded lessons.

A course list event only references its lessons by address. This service
fetches every referenced lesson concurrently through an injected async
``fetch`` callable (the transport is the caller's concern), decodes each
result independently and joins them back in the course's lesson order.

Failure isolation: a lesson whose fetch raises, returns nothing, or fails
to decode is reported in
[CourseWithLessons.failures][coursestr.services.assembler.CourseWithLessons]
and never affects the other lessons.

Examples:
    ```python
    async def fetch(ref: AddressRef) -> Envelope | None:
        ...  # query relays for ref.kind / ref.author_key / #d=ref.identifier

    view = await assemble_course(course, fetch, max_concurrency=8)
    for lesson in view.lessons:
        print(lesson.title, lesson.duration)
    print(total_duration(view.lessons))
    ```
"""

from __future__ import annotations

import asyncio
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from coursestr.codec.decoder import decode_resource
from coursestr.core.exceptions import LessonNotFoundError
from coursestr.core.logger import Logger
from coursestr.models.constants import HOUSEKEEPING_TOPICS


if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

    from coursestr.models.address import AddressRef
    from coursestr.models.envelope import Envelope
    from coursestr.models.parsed import ParsedCourse, ParsedResource

    Fetch = Callable[[AddressRef], Awaitable[Envelope | None]]


_logger = Logger("coursestr.services.assembler")

DEFAULT_MAX_CONCURRENCY = 10

_DURATION_PATTERN = re.compile(r"(\d+)\s*(min|minutes|hour|hours|h)")
_MINUTES_PER_HOUR = 60


@dataclass(frozen=True, slots=True)
class LessonFailure:
    """A lesson reference that could not be assembled.

    Attributes:
        position: Index of the reference in the course's lesson order.
        ref: The lesson address.
        error: The fetch, lookup or decode error.
    """

    position: int
    ref: AddressRef
    error: Exception


@dataclass(frozen=True, slots=True)
class CourseWithLessons:
    """A course joined with the lessons that could be resolved.

    Attributes:
        course: The decoded course.
        lessons: Decoded lessons, in the course's lesson order.
        failures: One entry per lesson that could not be resolved.
    """

    course: ParsedCourse
    lessons: tuple[ParsedResource, ...]
    failures: tuple[LessonFailure, ...] = ()

    @property
    def complete(self) -> bool:
        return not self.failures


async def _resolve(
    ref: AddressRef,
    fetch: Fetch,
    semaphore: asyncio.Semaphore,
    housekeeping_topics: frozenset[str],
) -> ParsedResource:
    async with semaphore:
        envelope = await fetch(ref)
    if envelope is None:
        raise LessonNotFoundError(f"no event for {ref}")
    return decode_resource(envelope, housekeeping_topics=housekeeping_topics)


async def assemble_course(
    course: ParsedCourse,
    fetch: Fetch,
    *,
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
    housekeeping_topics: frozenset[str] = HOUSEKEEPING_TOPICS,
) -> CourseWithLessons:
    """Fetch and decode every lesson of *course* concurrently.

    Args:
        course: Decoded course whose ``lesson_references`` are resolved.
        fetch: Async callable returning the envelope for an address, or
            ``None`` when the relay has no such event.
        max_concurrency: Upper bound on in-flight fetches.
        housekeeping_topics: Passed through to the lesson decoder.

    Raises:
        ValueError: If *max_concurrency* is less than 1.
        asyncio.CancelledError: Propagated if the assembly is cancelled.
    """
    if max_concurrency < 1:
        raise ValueError(f"max_concurrency must be >= 1, got {max_concurrency}")

    refs = course.lesson_references
    semaphore = asyncio.Semaphore(max_concurrency)
    results = await asyncio.gather(
        *(_resolve(ref, fetch, semaphore, housekeeping_topics) for ref in refs),
        return_exceptions=True,
    )

    # gather(return_exceptions=True) captures cancellation as a result
    for r in results:
        if isinstance(r, asyncio.CancelledError):
            raise r

    lessons: list[ParsedResource] = []
    failures: list[LessonFailure] = []
    for position, (ref, result) in enumerate(zip(refs, results, strict=True)):
        if isinstance(result, BaseException):
            if not isinstance(result, Exception):
                raise result
            _logger.warning("lesson_failed", course=course.id, ref=str(ref), error=str(result))
            failures.append(LessonFailure(position, ref, result))
        else:
            lessons.append(result)

    _logger.debug("course_assembled", course=course.id, lessons=len(lessons), failed=len(failures))
    return CourseWithLessons(course, tuple(lessons), tuple(failures))


def duration_minutes(duration: str | None) -> int:
    """Minutes in a display duration such as ``"15 min"`` or ``"2 hours"``.

    Unrecognized strings count as zero.
    """
    match = _DURATION_PATTERN.search((duration or "").lower())
    if match is None:
        return 0
    value, unit = int(match.group(1)), match.group(2)
    return value * _MINUTES_PER_HOUR if unit.startswith("h") else value


def total_duration(lessons: Iterable[ParsedResource]) -> str:
    """Sum lesson durations into a display string.

    Examples:
        ``"45 min"``, ``"1 hour"``, ``"3 hours"``, ``"1h 30m"``.
    """
    total = sum(duration_minutes(lesson.duration) for lesson in lessons)
    if total < _MINUTES_PER_HOUR:
        return f"{total} min"
    hours, minutes = divmod(total, _MINUTES_PER_HOUR)
    if minutes == 0:
        return f"{hours} {'hour' if hours == 1 else 'hours'}"
    return f"{hours}h {minutes}m"


__all__ = [
    "DEFAULT_MAX_CONCURRENCY",
    "CourseWithLessons",
    "LessonFailure",
    "LessonNotFoundError",
    "assemble_course",
    "duration_minutes",
    "total_duration",
]
