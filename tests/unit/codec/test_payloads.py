"""Tests for coursestr.codec.payloads."""

from __future__ import annotations

import pydantic
import pytest

from coursestr.codec.payloads import CourseCreationData, LessonCreationData, ResourceCreationData, ResourceType


AUTHOR_KEY = "ab" * 32


class TestPayable:
    @pytest.mark.parametrize(
        ("is_premium", "price", "expected"),
        [
            (True, 100, True),
            (True, 0, False),
            (True, None, False),
            (False, 100, False),
        ],
    )
    def test_payable(self, is_premium: bool, price: int | None, expected: bool) -> None:
        lesson = LessonCreationData(title="T", description="d", content="c", is_premium=is_premium, price=price)
        assert lesson.payable is expected


class TestFields:
    def test_lesson_fields_are_the_ones_encoded_or_validated(self) -> None:
        assert set(LessonCreationData.model_fields) == {
            "title",
            "description",
            "content",
            "identifier",
            "is_premium",
            "price",
            "currency",
        }

    def test_course_has_no_unused_fields(self) -> None:
        assert "instructor" not in CourseCreationData.model_fields

    def test_frozen(self) -> None:
        payload = ResourceCreationData(title="T", description="d", content="c", author_key=AUTHOR_KEY)
        with pytest.raises(pydantic.ValidationError):
            payload.title = "other"  # type: ignore[misc]


class TestResourceType:
    def test_values(self) -> None:
        assert [t.value for t in ResourceType] == ["lesson", "document", "video"]

    def test_from_string(self) -> None:
        assert ResourceType("video") is ResourceType.VIDEO
