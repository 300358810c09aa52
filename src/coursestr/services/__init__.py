"""Services layer: asynchronous work built on top of the codec.

Services are the top layer of the layering, depending on
[coursestr.codec][coursestr.codec], [coursestr.core][coursestr.core] and
[coursestr.models][coursestr.models]. They never talk to relays themselves;
transports are injected as async callables.

Attributes:
    assemble_course: Resolve a course's lesson references concurrently.
    CourseWithLessons: A course joined with its resolved lessons.
    total_duration: Sum lesson durations into a display string.
"""

from .assembler import (
    DEFAULT_MAX_CONCURRENCY,
    CourseWithLessons,
    LessonFailure,
    LessonNotFoundError,
    assemble_course,
    duration_minutes,
    total_duration,
)


__all__ = [
    "DEFAULT_MAX_CONCURRENCY",
    "CourseWithLessons",
    "LessonFailure",
    "LessonNotFoundError",
    "assemble_course",
    "duration_minutes",
    "total_duration",
]
