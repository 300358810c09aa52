"""Tests for coursestr.models.parsed."""

from __future__ import annotations

import dataclasses

import pytest

from coursestr.models import AddressRef, EventKind, ParsedCourse, ParsedResource, SubType


def _resource(**overrides) -> ParsedResource:
    fields = {"id": "r1", "event_id": "e1", "author_key": "abc", "kind": EventKind.LONG_FORM}
    fields.update(overrides)
    return ParsedResource(**fields)


class TestParsedCourse:
    def test_premium_follows_price(self) -> None:
        course = ParsedCourse(id="course-x", identifier="x", event_id="e", author_key="abc", kind=30004)
        assert course.is_premium is False
        priced = dataclasses.replace(course, price_sats=5000)
        assert priced.is_premium is True

    def test_address(self) -> None:
        course = ParsedCourse(id="course-x", identifier="x", event_id="e", author_key="abc", kind=30004)
        assert course.address == AddressRef(30004, "abc", "x")

    def test_frozen(self) -> None:
        course = ParsedCourse(id="course-x", identifier="x", event_id="e", author_key="abc", kind=30004)
        with pytest.raises(dataclasses.FrozenInstanceError):
            course.name = "changed"  # type: ignore[misc]


class TestParsedResource:
    def test_free_article_not_premium(self) -> None:
        assert _resource().is_premium is False

    def test_paid_kind_is_premium_without_price(self) -> None:
        assert _resource(kind=EventKind.CLASSIFIED_LISTING).is_premium is True

    def test_price_makes_premium(self) -> None:
        assert _resource(price_sats=100).is_premium is True

    def test_video_url_is_first_link(self) -> None:
        resource = _resource(sub_type=SubType.VIDEO, additional_links=("https://v/1.mp4", "https://x"))
        assert resource.video_url == "https://v/1.mp4"

    def test_document_has_no_video_url(self) -> None:
        assert _resource(additional_links=("https://v/1.mp4",)).video_url is None

    def test_video_without_links(self) -> None:
        assert _resource(sub_type=SubType.VIDEO).video_url is None

    def test_address_uses_identifier(self) -> None:
        assert _resource().address == AddressRef(30023, "abc", "r1")
