"""
Address tokens and shareable ``naddr`` identifiers.

Two encodings of the same [AddressRef][coursestr.models.address.AddressRef]:

* The colon-joined token ``"{kind}:{author_key}:{identifier}"`` used
  verbatim inside ``a`` tag values. Built and parsed here.
* The NIP-19 ``naddr`` bech32 string (TLV-encoded identifier, author, kind
  and optional relay hints) used for sharing outside the platform. Its bit
  layout is owned by ``nostr_sdk``; this module only adapts types and errors.

Resolution (fetching the referenced event) is not done here; see
[coursestr.services.assembler][].

Note:
    Author keys are not validated when building or parsing colon tokens.
    ``naddr`` encoding does require a valid public key, since the key is
    stored as raw bytes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from nostr_sdk import Coordinate, Kind, Nip19Coordinate, NostrSdkError, PublicKey, RelayUrl

from coursestr.core.exceptions import AddressParseError
from coursestr.core.logger import Logger
from coursestr.models.address import AddressRef


if TYPE_CHECKING:
    from collections.abc import Iterable

    from coursestr.models.envelope import Envelope


_logger = Logger("coursestr.codec.address")

_ADDRESS_SEGMENTS = 3


class NaddrPointer(NamedTuple):
    """Decoded ``naddr``: the address plus any relay hints it carried."""

    ref: AddressRef
    relays: tuple[str, ...] = ()


def build_address(kind: int, author_key: str, identifier: str) -> str:
    """Build the ``a`` tag token for a replaceable event.

    Raises:
        TypeError: If *kind* is not an int or the strings are not str.
        ValueError: If *kind* is out of range.
    """
    return str(AddressRef(kind, author_key, identifier))


def parse_address(token: str) -> AddressRef:
    """Parse an ``a`` tag token into an [AddressRef][coursestr.models.address.AddressRef].

    The token is split into at most three segments, so an identifier may
    itself contain colons. An empty identifier is accepted.

    Raises:
        AddressParseError: If the token has fewer than three segments, the
            kind is not a non-negative integer in range, or the author key
            is empty.
    """
    if not isinstance(token, str):
        raise AddressParseError(f"address must be a str, got {type(token).__name__}")
    parts = token.split(":", _ADDRESS_SEGMENTS - 1)
    if len(parts) < _ADDRESS_SEGMENTS:
        raise AddressParseError(f"address needs kind:author:identifier, got {token!r}")
    kind_text, author_key, identifier = parts
    if not author_key:
        raise AddressParseError(f"address has an empty author key: {token!r}")
    try:
        return AddressRef(int(kind_text), author_key, identifier)
    except (TypeError, ValueError) as e:
        raise AddressParseError(f"invalid address {token!r}: {e}") from e


def encode_naddr(ref: AddressRef, relays: Iterable[str] = ()) -> str:
    """Encode *ref* and optional relay hints as a NIP-19 ``naddr`` string.

    Raises:
        AddressParseError: If the author key is not a valid public key or a
            relay hint is not a valid relay URL.
    """
    try:
        coordinate = Coordinate(Kind(ref.kind), PublicKey.parse(ref.author_key), ref.identifier)
        relay_urls = [RelayUrl.parse(url) for url in relays]
        return Nip19Coordinate(coordinate, relay_urls).to_bech32()
    except NostrSdkError as e:
        raise AddressParseError(f"cannot encode naddr for {ref}: {e}") from e


def decode_naddr(value: str) -> NaddrPointer:
    """Decode a NIP-19 ``naddr`` string.

    Raises:
        AddressParseError: If *value* is not a valid ``naddr``.
    """
    try:
        decoded = Nip19Coordinate.from_bech32(value.strip())
    except NostrSdkError as e:
        raise AddressParseError(f"invalid naddr {value!r}: {e}") from e
    coordinate = decoded.coordinate()
    ref = AddressRef(
        coordinate.kind().as_u16(),
        coordinate.public_key().to_hex(),
        coordinate.identifier(),
    )
    return NaddrPointer(ref, tuple(str(url) for url in decoded.relays()))


def format_note_identifier(envelope: Envelope, relays: Iterable[str] = ()) -> str | None:
    """Shareable identifier for an event.

    Returns an ``naddr`` when the event has a ``d`` tag, otherwise (or when
    the ``naddr`` cannot be encoded) the raw event id, or ``None`` for an
    unsigned event without an identifier.
    """
    if envelope.identifier:
        ref = AddressRef(envelope.kind, envelope.author_key, envelope.identifier)
        try:
            return encode_naddr(ref, relays)
        except AddressParseError as e:
            _logger.warning("naddr_encode_failed", event_id=envelope.id, error=str(e))
    return envelope.id or None


__all__ = [
    "NaddrPointer",
    "build_address",
    "decode_naddr",
    "encode_naddr",
    "format_note_identifier",
    "parse_address",
]
