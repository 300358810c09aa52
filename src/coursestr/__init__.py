r"""Coursestr -- Nostr event codec for a course and content platform.

Courses, lessons, documents and videos are published as replaceable Nostr
events. This package converts between those wire events and typed records,
validates creation payloads before publishing, and assembles courses with
their lessons.

Architecture follows a **diamond** dependency structure where imports flow
strictly downward:

```text
              services         Async course assembly
             /   |
          core  codec          Config, logging, errors / the event codec
             \   |
              models           Pure frozen dataclasses (zero I/O)
```

Attributes:
    models: Envelope, AddressRef, ParsedCourse, ParsedResource, enums.
    core: Configuration, structured logging, exception hierarchy.
    codec: Decoders, encoders, address and ``naddr`` helpers, validator,
        and the [EventCodec][coursestr.codec.event_codec.EventCodec] facade.
    services: Concurrent lesson resolution for a decoded course.

Note:
    For lightweight usage, import directly from subpackages::

        from coursestr.models import Envelope
        from coursestr.codec import decode

    Top-level imports (``from coursestr import EventCodec``) use lazy loading
    and resolve on first access.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("coursestr")

__all__ = [
    "AddressRef",
    "CodecConfig",
    "CourseCreationData",
    "CourseWithLessons",
    "Envelope",
    "EventCodec",
    "EventKind",
    "LessonCreationData",
    "Logger",
    "ParsedCourse",
    "ParsedResource",
    "ResourceCreationData",
    "ResourceType",
    "assemble_course",
    "decode",
    "encode_course_list",
    "encode_resource",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "CodecConfig": ("coursestr.core", "CodecConfig"),
    "Logger": ("coursestr.core", "Logger"),
    "AddressRef": ("coursestr.models", "AddressRef"),
    "Envelope": ("coursestr.models", "Envelope"),
    "EventKind": ("coursestr.models", "EventKind"),
    "ParsedCourse": ("coursestr.models", "ParsedCourse"),
    "ParsedResource": ("coursestr.models", "ParsedResource"),
    "CourseCreationData": ("coursestr.codec", "CourseCreationData"),
    "EventCodec": ("coursestr.codec", "EventCodec"),
    "LessonCreationData": ("coursestr.codec", "LessonCreationData"),
    "ResourceCreationData": ("coursestr.codec", "ResourceCreationData"),
    "ResourceType": ("coursestr.codec", "ResourceType"),
    "decode": ("coursestr.codec", "decode"),
    "encode_course_list": ("coursestr.codec", "encode_course_list"),
    "encode_resource": ("coursestr.codec", "encode_resource"),
    "CourseWithLessons": ("coursestr.services", "CourseWithLessons"),
    "assemble_course": ("coursestr.services", "assemble_course"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'coursestr' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
