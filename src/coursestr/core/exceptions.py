"""Coursestr exception hierarchy.

Provides typed exceptions for every failure category of the event codec,
so callers can distinguish per-event decode failures (skip and report)
from creation failures (abort that single publish attempt).

Exception hierarchy:

```text
CoursestrError (base -- never raised directly)
├── ConfigurationError       -- config validation, missing file, bad YAML
├── DecodeError              -- structurally invalid wire input
│   ├── UnknownKindError     -- kind not in the registry (fatal to one event)
│   ├── KindMismatchError    -- known kind handed to the wrong decoder
│   ├── MalformedTagError    -- tag without values (skipped, never fatal)
│   └── AddressParseError    -- unparseable address or naddr token
├── ValidationFailure        -- creation payload broke one or more rules
└── LessonNotFoundError      -- a lesson fetch returned no event (also a LookupError)
```

See Also:
    [classify()][coursestr.codec.kinds.classify]: Raises
        [UnknownKindError][coursestr.core.exceptions.UnknownKindError].
    [parse_address()][coursestr.codec.address.parse_address]: Raises
        [AddressParseError][coursestr.core.exceptions.AddressParseError].
    [ensure_valid_course()][coursestr.codec.validator.ensure_valid_course]:
        Raises [ValidationFailure][coursestr.core.exceptions.ValidationFailure].
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Sequence

    from coursestr.codec.validator import Violation


class CoursestrError(Exception):
    """Base exception for all Coursestr errors.

    Never raised directly -- always use a specific subclass.
    """


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigurationError(CoursestrError):
    """Invalid or missing configuration (YAML file, unknown keys, bad values).

    See Also:
        [CodecConfig.from_yaml()][coursestr.core.config.CodecConfig.from_yaml]:
            Wraps file and schema errors into this exception.
    """


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


class DecodeError(CoursestrError):
    """Base for errors raised while turning wire events into domain records.

    Decode errors are isolated to one event (or one tag, or one reference):
    [decode_batch()][coursestr.codec.decoder.decode_batch] reports them and
    carries on with the remaining events.
    """


class UnknownKindError(DecodeError):
    """The event kind is not registered in the kind registry.

    Attributes:
        kind: The offending kind value.
    """

    def __init__(self, kind: int) -> None:
        super().__init__(f"unknown event kind: {kind}")
        self.kind = kind


class KindMismatchError(DecodeError):
    """A registered kind was handed to a decoder for a different family."""


class MalformedTagError(DecodeError):
    """A tag is structurally invalid (empty, or a key with no value).

    Never escapes the decoders: the offending tag is skipped and the rest
    of the event decodes normally.
    """


class AddressParseError(DecodeError):
    """An address token (``kind:author:identifier``) or ``naddr`` is unparseable."""


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class ValidationFailure(CoursestrError):  # noqa: N818
    """A creation payload violated one or more pre-publication rules.

    Attributes:
        violations: Every violated rule, in check order. Never empty.
    """

    def __init__(self, violations: Sequence[Violation]) -> None:
        self.violations: tuple[Violation, ...] = tuple(violations)
        summary = "; ".join(f"{v.field}: {v.message}" for v in self.violations)
        super().__init__(f"validation failed: {summary}")


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------


class LessonNotFoundError(CoursestrError, LookupError):
    """The fetch callable returned no event for a lesson reference.

    See Also:
        [assemble_course()][coursestr.services.assembler.assemble_course]:
            Reports it per lesson in ``CourseWithLessons.failures``.
    """
