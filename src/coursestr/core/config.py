"""Pydantic configuration models for the event codec.

Every field has a default, so an empty YAML file (or no file at all) yields
a working configuration; partial files override only what they name.

Examples:
    ```yaml
    course_list_kind: 30004
    housekeeping_topics:
      - plebdevs
    default_currency: sats
    relay_hints:
      - wss://relay.damus.io
    logging:
      level: DEBUG
      json_output: false
    ```

See Also:
    [EventCodec][coursestr.codec.event_codec.EventCodec]: The facade that
        consumes [CodecConfig][coursestr.core.config.CodecConfig].
    [load_yaml()][coursestr.core.yaml.load_yaml]: Safe YAML loading.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Self

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from coursestr.models.constants import COURSE_LIST_KINDS, DEFAULT_CURRENCY, HOUSEKEEPING_TOPICS, EventKind

from .exceptions import ConfigurationError
from .yaml import load_yaml


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    json_output: bool = False


class CodecConfig(BaseModel):
    """Configuration for [EventCodec][coursestr.codec.event_codec.EventCodec].

    Attributes:
        course_list_kind: Kind written by the course encoder. Either the
            NIP-51 curation set (30004) or the legacy list kind (30001).
        housekeeping_topics: ``t`` values dropped from decoded resource topics.
        default_currency: Currency written next to a price when the payload
            names none.
        relay_hints: Relay URLs embedded in shareable ``naddr`` identifiers.
        logging: Logging output settings.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    course_list_kind: int = Field(default=int(EventKind.COURSE_LIST))
    housekeeping_topics: frozenset[str] = Field(default=HOUSEKEEPING_TOPICS)
    default_currency: str = Field(default=DEFAULT_CURRENCY, min_length=1)
    relay_hints: tuple[str, ...] = ()
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("course_list_kind")
    @classmethod
    def _check_course_list_kind(cls, value: int) -> int:
        if value not in COURSE_LIST_KINDS:
            allowed = ", ".join(str(k) for k in sorted(COURSE_LIST_KINDS))
            raise ValueError(f"course_list_kind must be one of {allowed}, got {value}")
        return value

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Validate a configuration dictionary.

        Raises:
            ConfigurationError: If any field is unknown or invalid.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"invalid codec configuration: {e}") from e

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> Self:
        """Load and validate a YAML configuration file.

        Raises:
            ConfigurationError: If the file is missing, is not valid YAML,
                or fails validation.
        """
        try:
            data = load_yaml(config_path)
        except (FileNotFoundError, yaml.YAMLError) as e:
            raise ConfigurationError(str(e)) from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"config root must be a mapping: {config_path}")
        return cls.from_dict(data)
