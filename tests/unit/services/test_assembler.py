"""Tests for coursestr.services.assembler."""

from __future__ import annotations

import asyncio

import pytest

from coursestr.codec.decoder import decode_course_list
from coursestr.codec.encoder import encode_course_list, encode_lesson
from coursestr.codec.payloads import ResourceCreationData
from coursestr.core.exceptions import CoursestrError, UnknownKindError
from coursestr.models import AddressRef, Envelope, ParsedResource
from coursestr.services.assembler import (
    CourseWithLessons,
    LessonNotFoundError,
    assemble_course,
    duration_minutes,
    total_duration,
)


AUTHOR_KEY = "ab" * 32


def _lesson_envelope(ref: AddressRef, duration: str = "30 min") -> Envelope:
    payload = ResourceCreationData(
        title=ref.identifier,
        description="lesson summary",
        content="body",
        author_key=ref.author_key,
        duration=duration,
        identifier=ref.identifier,
        is_premium=ref.kind == 30402,
        price=1000 if ref.kind == 30402 else None,
    )
    return encode_lesson(payload, created_at=1)


@pytest.fixture
def course(course_payload):
    return decode_course_list(encode_course_list(course_payload, created_at=1))


# =============================================================================
# assemble_course
# =============================================================================


class TestAssembleCourse:
    @pytest.mark.asyncio
    async def test_all_lessons_resolved_in_order(self, course) -> None:
        delays = {"lesson-one": 0.02, "lesson-two": 0.0}

        async def fetch(ref: AddressRef) -> Envelope:
            await asyncio.sleep(delays[ref.identifier])
            return _lesson_envelope(ref)

        view = await assemble_course(course, fetch)

        assert isinstance(view, CourseWithLessons)
        assert view.complete
        assert [lesson.id for lesson in view.lessons] == ["lesson-one", "lesson-two"]
        assert all(isinstance(lesson, ParsedResource) for lesson in view.lessons)

    @pytest.mark.asyncio
    async def test_missing_lesson_isolated(self, course) -> None:
        async def fetch(ref: AddressRef) -> Envelope | None:
            return None if ref.identifier == "lesson-one" else _lesson_envelope(ref)

        view = await assemble_course(course, fetch)

        assert [lesson.id for lesson in view.lessons] == ["lesson-two"]
        assert len(view.failures) == 1
        failure = view.failures[0]
        assert failure.position == 0
        assert failure.ref.identifier == "lesson-one"
        assert isinstance(failure.error, LessonNotFoundError)
        assert isinstance(failure.error, CoursestrError)
        assert not view.complete

    @pytest.mark.asyncio
    async def test_fetch_error_isolated(self, course) -> None:
        async def fetch(ref: AddressRef) -> Envelope:
            if ref.identifier == "lesson-two":
                raise ConnectionError("relay down")
            return _lesson_envelope(ref)

        view = await assemble_course(course, fetch)

        assert [lesson.id for lesson in view.lessons] == ["lesson-one"]
        assert isinstance(view.failures[0].error, ConnectionError)

    @pytest.mark.asyncio
    async def test_decode_error_isolated(self, course) -> None:
        async def fetch(ref: AddressRef) -> Envelope:
            if ref.identifier == "lesson-one":
                return Envelope(author_key=AUTHOR_KEY, created_at=1, kind=1)
            return _lesson_envelope(ref)

        view = await assemble_course(course, fetch)

        assert len(view.lessons) == 1
        assert isinstance(view.failures[0].error, UnknownKindError)

    @pytest.mark.asyncio
    async def test_concurrency_bounded(self, course_payload) -> None:
        lessons = tuple(
            course_payload.lessons[1].model_copy(update={"title": f"Lesson {i}"}) for i in range(6)
        )
        course = decode_course_list(encode_course_list(course_payload.model_copy(update={"lessons": lessons})))
        in_flight = 0
        peak = 0

        async def fetch(ref: AddressRef) -> Envelope:
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return _lesson_envelope(ref)

        view = await assemble_course(course, fetch, max_concurrency=2)

        assert len(view.lessons) == 6
        assert peak == 2

    @pytest.mark.asyncio
    async def test_no_lessons(self, course) -> None:
        async def fetch(ref: AddressRef) -> Envelope:
            raise AssertionError("not called")

        empty = type(course)(id=course.id, identifier=course.identifier, event_id="", author_key=AUTHOR_KEY, kind=30004)
        view = await assemble_course(empty, fetch)
        assert view.lessons == ()
        assert view.complete

    @pytest.mark.asyncio
    async def test_invalid_concurrency(self, course) -> None:
        async def fetch(ref: AddressRef) -> Envelope:
            return _lesson_envelope(ref)

        with pytest.raises(ValueError, match="max_concurrency"):
            await assemble_course(course, fetch, max_concurrency=0)


# =============================================================================
# Durations
# =============================================================================


class TestDurations:
    @pytest.mark.parametrize(
        ("text", "minutes"),
        [
            ("15 min", 15),
            ("45 minutes", 45),
            ("1 hour", 60),
            ("2 hours", 120),
            ("3h", 180),
            ("10MIN", 10),
            ("soon", 0),
            ("", 0),
            (None, 0),
        ],
    )
    def test_duration_minutes(self, text: str | None, minutes: int) -> None:
        assert duration_minutes(text) == minutes

    @pytest.mark.parametrize(
        ("durations", "expected"),
        [
            ([], "0 min"),
            (["15 min", "30 min"], "45 min"),
            (["30 min", "30 min"], "1 hour"),
            (["1 hour", "2 hours"], "3 hours"),
            (["1 hour", "30 min"], "1h 30m"),
        ],
    )
    def test_total_duration(self, durations: list[str], expected: str) -> None:
        lessons = [
            ParsedResource(id=str(i), event_id="", author_key=AUTHOR_KEY, kind=30023, duration=d)
            for i, d in enumerate(durations)
        ]
        assert total_duration(lessons) == expected
