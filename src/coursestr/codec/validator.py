"""
Pre-publication rules for creation payloads.

The ``validate_*`` functions are pure and never raise: they return every
violated rule in check order, so a caller can report all problems at once.
The ``ensure_*`` variants raise
[ValidationFailure][coursestr.core.exceptions.ValidationFailure] carrying
the same list, for pipelines that must abort a single publish attempt.

Rules:

| Payload  | Field          | Rule                                   |
|----------|----------------|----------------------------------------|
| course   | title          | at least 3 characters                  |
| course   | description    | at least 10 characters                 |
| course   | author_key     | non-empty                              |
| course   | lessons        | at least one                           |
| lesson   | title/description/content | non-empty                   |
| resource | title          | at least 3 characters                  |
| resource | description    | at least 10 characters                 |
| resource | content        | at least 50 characters                 |
| resource | author_key     | non-empty                              |
| video    | duration       | non-empty                              |
| any      | price          | positive when marked premium           |

Lengths are measured after stripping surrounding whitespace.
"""

from __future__ import annotations

from enum import StrEnum
from typing import NamedTuple

from coursestr.core.exceptions import ValidationFailure

from .payloads import CourseCreationData, PricedData, ResourceCreationData, ResourceType


MIN_TITLE_LENGTH = 3
MIN_DESCRIPTION_LENGTH = 10
MIN_CONTENT_LENGTH = 50


class Rule(StrEnum):
    """Rule codes reported in [Violation][coursestr.codec.validator.Violation]."""

    MIN_LENGTH = "min_length"
    REQUIRED = "required"
    NO_LESSONS = "no_lessons"
    PRICE_REQUIRED = "price_required"


class Violation(NamedTuple):
    """One violated rule.

    Attributes:
        field: Dotted path of the offending field (``lessons[1].title``).
        rule: Rule code.
        message: Human-readable explanation.
    """

    field: str
    rule: Rule
    message: str


def _min_length(value: str | None, field: str, minimum: int) -> Violation | None:
    if len((value or "").strip()) < minimum:
        return Violation(field, Rule.MIN_LENGTH, f"must be at least {minimum} characters")
    return None


def _required(value: str | None, field: str) -> Violation | None:
    if not (value or "").strip():
        return Violation(field, Rule.REQUIRED, "must not be empty")
    return None


def _priced(payload: PricedData, field: str) -> Violation | None:
    if payload.is_premium and not payload.payable:
        return Violation(field, Rule.PRICE_REQUIRED, "premium content needs a positive price")
    return None


def validate_course_creation(payload: CourseCreationData) -> list[Violation]:
    """Return every rule the course payload violates; empty when valid."""
    checks = [
        _min_length(payload.title, "title", MIN_TITLE_LENGTH),
        _min_length(payload.description, "description", MIN_DESCRIPTION_LENGTH),
        _required(payload.author_key, "author_key"),
        _priced(payload, "price"),
    ]
    if not payload.lessons:
        checks.append(Violation("lessons", Rule.NO_LESSONS, "a course needs at least one lesson"))
    for i, lesson in enumerate(payload.lessons):
        prefix = f"lessons[{i}]"
        checks.extend(
            [
                _required(lesson.title, f"{prefix}.title"),
                _required(lesson.description, f"{prefix}.description"),
                _required(lesson.content, f"{prefix}.content"),
                _priced(lesson, f"{prefix}.price"),
            ]
        )
    return [v for v in checks if v is not None]


def validate_resource_creation(
    payload: ResourceCreationData,
    resource_type: ResourceType = ResourceType.DOCUMENT,
) -> list[Violation]:
    """Return every rule the resource payload violates; empty when valid."""
    checks = [
        _min_length(payload.title, "title", MIN_TITLE_LENGTH),
        _min_length(payload.description, "description", MIN_DESCRIPTION_LENGTH),
        _min_length(payload.content, "content", MIN_CONTENT_LENGTH),
        _required(payload.author_key, "author_key"),
        _priced(payload, "price"),
    ]
    if ResourceType(resource_type) is ResourceType.VIDEO:
        checks.append(_required(payload.duration, "duration"))
    return [v for v in checks if v is not None]


def is_valid_course(payload: CourseCreationData) -> bool:
    return not validate_course_creation(payload)


def is_valid_resource(payload: ResourceCreationData, resource_type: ResourceType = ResourceType.DOCUMENT) -> bool:
    return not validate_resource_creation(payload, resource_type)


def ensure_valid_course(payload: CourseCreationData) -> None:
    """Raise [ValidationFailure][coursestr.core.exceptions.ValidationFailure] if invalid."""
    if violations := validate_course_creation(payload):
        raise ValidationFailure(violations)


def ensure_valid_resource(payload: ResourceCreationData, resource_type: ResourceType = ResourceType.DOCUMENT) -> None:
    """Raise [ValidationFailure][coursestr.core.exceptions.ValidationFailure] if invalid."""
    if violations := validate_resource_creation(payload, resource_type):
        raise ValidationFailure(violations)


__all__ = [
    "Rule",
    "Violation",
    "ensure_valid_course",
    "ensure_valid_resource",
    "is_valid_course",
    "is_valid_resource",
    "validate_course_creation",
    "validate_resource_creation",
]
