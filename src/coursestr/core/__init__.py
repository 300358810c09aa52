"""Core layer: configuration, structured logging, and the exception hierarchy.

Depends only on [coursestr.models][coursestr.models] and is depended upon by
[coursestr.codec][coursestr.codec] and [coursestr.services][coursestr.services].

Attributes:
    CodecConfig: Pydantic configuration for the codec facade, loadable from
        YAML. See [CodecConfig][coursestr.core.config.CodecConfig].
    Logger: Structured logger supporting key=value and JSON output modes.
        See [Logger][coursestr.core.logger.Logger].
    load_yaml: Safe YAML loading with ``yaml.safe_load``.
"""

from .config import CodecConfig, LoggingConfig
from .exceptions import (
    AddressParseError,
    ConfigurationError,
    CoursestrError,
    DecodeError,
    KindMismatchError,
    LessonNotFoundError,
    MalformedTagError,
    UnknownKindError,
    ValidationFailure,
)
from .logger import Logger, StructuredFormatter, format_kv_pairs, setup_logging
from .yaml import load_yaml


__all__ = [
    "AddressParseError",
    "CodecConfig",
    "ConfigurationError",
    "CoursestrError",
    "DecodeError",
    "KindMismatchError",
    "LessonNotFoundError",
    "Logger",
    "LoggingConfig",
    "MalformedTagError",
    "StructuredFormatter",
    "UnknownKindError",
    "ValidationFailure",
    "format_kv_pairs",
    "load_yaml",
    "setup_logging",
]
