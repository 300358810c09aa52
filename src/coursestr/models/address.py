"""
Weak cross-event reference by identity.

An [AddressRef][coursestr.models.address.AddressRef] names a replaceable
event by its ``(kind, author_key, identifier)`` triple, the same triple that
downstream storage uses for "latest wins" replacement. It never embeds the
referenced content; resolving it is a lookup elsewhere.

See Also:
    [build_address()][coursestr.codec.address.build_address],
    [parse_address()][coursestr.codec.address.parse_address]: Token codec.
"""

from __future__ import annotations

from dataclasses import dataclass

from ._validation import validate_int, validate_str_no_null
from .constants import EVENT_KIND_MAX


@dataclass(frozen=True, slots=True)
class AddressRef:
    """Composite key resolving to one replaceable event.

    ``str(ref)`` yields the ``"{kind}:{author_key}:{identifier}"`` token used
    verbatim inside ``a`` tag values.

    Attributes:
        kind: Kind of the referenced event.
        author_key: Author public key of the referenced event.
        identifier: ``d`` tag value of the referenced event (may be empty).
    """

    kind: int
    author_key: str
    identifier: str

    def __post_init__(self) -> None:
        validate_int(self.kind, "kind", maximum=EVENT_KIND_MAX)
        validate_str_no_null(self.author_key, "author_key")
        validate_str_no_null(self.identifier, "identifier")

    def __str__(self) -> str:
        return f"{self.kind}:{self.author_key}:{self.identifier}"
