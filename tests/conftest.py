"""
Pytest configuration and shared fixtures for Coursestr tests.

Provides:
- Author keys and raw NIP-01 event dictionaries
- Envelope factories for course lists and resources
- Valid creation payloads for courses, lessons, documents and videos
"""

from __future__ import annotations

import logging
from typing import Any

import pytest

from coursestr.codec.payloads import CourseCreationData, LessonCreationData, ResourceCreationData
from coursestr.models import Envelope, EventKind


AUTHOR_KEY = "ab" * 32
OTHER_KEY = "cd" * 32
CREATED_AT = 1_705_315_200

LONG_CONTENT = "# Heading\n\n" + "Lorem ipsum dolor sit amet, consectetur adipiscing. " * 3


# ============================================================================
# Logging Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


# ============================================================================
# Envelope Fixtures
# ============================================================================


@pytest.fixture
def author_key() -> str:
    return AUTHOR_KEY


@pytest.fixture
def make_envelope():
    """Factory building an envelope of any kind from a tag list."""

    def _make(
        kind: int = EventKind.LONG_FORM,
        tags: list[list[str]] | None = None,
        body: str = "",
        event_id: str = "e" * 64,
        created_at: int = CREATED_AT,
    ) -> Envelope:
        return Envelope(
            id=event_id,
            author_key=AUTHOR_KEY,
            created_at=created_at,
            kind=int(kind),
            tags=tags or [],
            body=body,
            signature="f" * 128,
        )

    return _make


@pytest.fixture
def course_event_dict() -> dict[str, Any]:
    """A signed course list event as it arrives from a relay."""
    return {
        "id": "1" * 64,
        "pubkey": AUTHOR_KEY,
        "created_at": CREATED_AT,
        "kind": 30004,
        "tags": [
            ["d", "intro-to-x"],
            ["title", "Intro to X"],
            ["description", "A first course on X"],
            ["l", "bitcoin", "lightning"],
            ["image", "https://example.com/cover.png"],
            ["price", "5000", "sats"],
            ["a", f"30402:{AUTHOR_KEY}:lesson-one"],
            ["a", f"30023:{AUTHOR_KEY}:lesson-two"],
        ],
        "content": "",
        "sig": "2" * 128,
    }


@pytest.fixture
def video_event_dict() -> dict[str, Any]:
    """A free video resource event."""
    return {
        "id": "3" * 64,
        "pubkey": AUTHOR_KEY,
        "created_at": CREATED_AT,
        "kind": 30023,
        "tags": [
            ["d", "setup-video"],
            ["title", "Setting up"],
            ["summary", "How to set up your node"],
            ["duration", "15 min"],
            ["published_at", "1705315100"],
            ["t", "plebdevs"],
            ["t", "video"],
            ["t", "nodes"],
            ["r", "https://cdn.example.com/setup.mp4"],
            ["r", "https://example.com/notes"],
        ],
        "content": "Watch the video.",
        "sig": "4" * 128,
    }


# ============================================================================
# Payload Fixtures
# ============================================================================


@pytest.fixture
def lessons() -> tuple[LessonCreationData, ...]:
    return (
        LessonCreationData(
            title="Lesson One",
            description="The first lesson",
            content="Body of lesson one",
            is_premium=True,
            price=1000,
        ),
        LessonCreationData(
            title="Lesson Two",
            description="The second lesson",
            content="Body of lesson two",
        ),
    )


@pytest.fixture
def course_payload(lessons: tuple[LessonCreationData, ...]) -> CourseCreationData:
    return CourseCreationData(
        title="Intro to X",
        description="Ten+ chars here",
        author_key=AUTHOR_KEY,
        category="bitcoin",
        topics=("lightning", "nodes"),
        image="https://example.com/cover.png",
        lessons=lessons,
        is_premium=True,
        price=5000,
    )


@pytest.fixture
def document_payload() -> ResourceCreationData:
    return ResourceCreationData(
        title="Reading List",
        description="Books worth reading",
        content=LONG_CONTENT,
        author_key=AUTHOR_KEY,
        topics=("books", "learning"),
        image="https://example.com/books.png",
        additional_links=("https://example.com/one", "https://example.com/two"),
        author="Satoshi",
    )


@pytest.fixture
def video_payload() -> ResourceCreationData:
    return ResourceCreationData(
        title="Setting Up",
        description="How to set up your node",
        content=LONG_CONTENT,
        author_key=AUTHOR_KEY,
        topics=("nodes",),
        duration="15 min",
        video_url="https://cdn.example.com/setup.mp4",
        additional_links=("https://example.com/notes",),
        is_premium=True,
        price=2100,
        currency="sats",
    )
