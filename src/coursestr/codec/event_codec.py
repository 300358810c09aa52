"""
Configured facade over the codec functions.

[EventCodec][coursestr.codec.event_codec.EventCodec] binds a
[CodecConfig][coursestr.core.config.CodecConfig] (course list kind,
housekeeping topics, default currency, relay hints) to the pure decode,
encode and address functions, and runs the validator before every encode.
It holds no mutable state and can be shared across threads and tasks.
Global logging is only touched through
[configure_logging()][coursestr.codec.event_codec.EventCodec.configure_logging].

Examples:
    ```python
    codec = EventCodec.from_yaml("config/codec.yaml")
    codec.configure_logging()
    envelope = codec.encode_course(payload)     # raises ValidationFailure
    course = codec.decode(envelope)
    share = codec.naddr_for(envelope)
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from coursestr.core.config import CodecConfig
from coursestr.core.logger import Logger, setup_logging

from .address import format_note_identifier
from .decoder import DecodeBatchResult, decode, decode_batch
from .encoder import encode_course_list, encode_resource
from .payloads import CourseCreationData, ResourceCreationData, ResourceType
from .validator import ensure_valid_course, ensure_valid_resource


if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from coursestr.models.envelope import Envelope
    from coursestr.models.parsed import ParsedCourse, ParsedResource


class EventCodec:
    """Decode, validate, encode and share course platform events.

    Args:
        config: Codec settings. Uses defaults if not provided.
    """

    def __init__(self, config: CodecConfig | None = None) -> None:
        self._config = config or CodecConfig()
        self._logger = Logger("coursestr.event_codec")

    @property
    def config(self) -> CodecConfig:
        """The codec configuration (read-only)."""
        return self._config

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> Self:
        """Create a codec from a YAML configuration file.

        Raises:
            ConfigurationError: If the file is missing or invalid.
        """
        return cls(CodecConfig.from_yaml(config_path))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a codec from a configuration dictionary.

        Raises:
            ConfigurationError: If any field is unknown or invalid.
        """
        return cls(CodecConfig.from_dict(data))

    def configure_logging(self) -> None:
        """Apply the configured level and output format process-wide.

        Constructing a codec never touches global logging state; call this
        once at startup from the application that owns the process.
        """
        setup_logging(self._config.logging.level, json_output=self._config.logging.json_output)

    # -------------------------------------------------------------------------
    # Decoding
    # -------------------------------------------------------------------------

    def decode(self, envelope: Envelope) -> ParsedCourse | ParsedResource:
        """Decode one envelope; see [decode()][coursestr.codec.decoder.decode].

        Raises:
            UnknownKindError: If the envelope kind is not registered.
        """
        return decode(envelope, housekeeping_topics=self._config.housekeeping_topics)

    def decode_batch(self, items: Iterable[Envelope | dict[str, Any]]) -> DecodeBatchResult:
        """Decode many events; failures are reported, never raised."""
        result = decode_batch(items, housekeeping_topics=self._config.housekeeping_topics)
        if result.failures:
            self._logger.warning(
                "batch_partial", decoded=len(result.decoded), failed=len(result.failures)
            )
        return result

    # -------------------------------------------------------------------------
    # Encoding
    # -------------------------------------------------------------------------

    def encode_course(self, payload: CourseCreationData, *, created_at: int | None = None) -> Envelope:
        """Validate and encode a course under the configured course list kind.

        Raises:
            ValidationFailure: If the payload violates any creation rule.
        """
        ensure_valid_course(payload)
        envelope = encode_course_list(
            payload,
            created_at=created_at,
            kind=self._config.course_list_kind,
            default_currency=self._config.default_currency,
        )
        self._logger.debug("course_encoded", identifier=envelope.identifier, lessons=len(payload.lessons))
        return envelope

    def encode_resource(
        self,
        payload: ResourceCreationData,
        resource_type: ResourceType,
        *,
        created_at: int | None = None,
    ) -> Envelope:
        """Validate and encode a lesson, document or video.

        Raises:
            ValidationFailure: If the payload violates any creation rule.
        """
        ensure_valid_resource(payload, resource_type)
        envelope = encode_resource(
            payload,
            resource_type,
            created_at=created_at,
            default_currency=self._config.default_currency,
        )
        self._logger.debug("resource_encoded", identifier=envelope.identifier, kind=envelope.kind)
        return envelope

    # -------------------------------------------------------------------------
    # Sharing
    # -------------------------------------------------------------------------

    def naddr_for(self, envelope: Envelope) -> str | None:
        """Shareable identifier carrying the configured relay hints."""
        return format_note_identifier(envelope, self._config.relay_hints)


__all__ = ["EventCodec"]
