"""Tests for coursestr.models.envelope."""

from __future__ import annotations

import dataclasses
import json
from unittest.mock import MagicMock

import pytest
from nostr_sdk import Keys

from coursestr.models import Envelope


AUTHOR_KEY = "ab" * 32


def _envelope(**overrides) -> Envelope:
    fields = {"author_key": AUTHOR_KEY, "created_at": 1_700_000_000, "kind": 30023}
    fields.update(overrides)
    return Envelope(**fields)


class TestConstruction:
    def test_defaults(self) -> None:
        envelope = _envelope()
        assert envelope.id == ""
        assert envelope.signature == ""
        assert envelope.body == ""
        assert envelope.tags == ()

    def test_tags_frozen(self) -> None:
        envelope = _envelope(tags=[["d", "x"], ["t", "a", "b"]])
        assert envelope.tags == (("d", "x"), ("t", "a", "b"))

    def test_immutable(self) -> None:
        envelope = _envelope()
        with pytest.raises(dataclasses.FrozenInstanceError):
            envelope.kind = 1  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert hash(_envelope(tags=[["d", "x"]])) == hash(_envelope(tags=[["d", "x"]]))

    def test_unregistered_large_kind_accepted(self) -> None:
        assert _envelope(kind=99_999).kind == 99_999

    def test_negative_kind(self) -> None:
        with pytest.raises(ValueError, match="kind must be >= 0"):
            _envelope(kind=-1)

    def test_negative_timestamp(self) -> None:
        with pytest.raises(ValueError, match="created_at"):
            _envelope(created_at=-1)

    def test_null_byte_in_body(self) -> None:
        with pytest.raises(ValueError, match="body contains null bytes"):
            _envelope(body="a\x00")

    def test_non_string_tag_value(self) -> None:
        with pytest.raises(TypeError):
            _envelope(tags=[["price", 10]])


class TestTagAccess:
    def test_identifier(self) -> None:
        assert _envelope(tags=[["t", "x"], ["d", "intro"]]).identifier == "intro"

    def test_identifier_missing(self) -> None:
        assert _envelope().identifier == ""

    def test_first_value(self) -> None:
        envelope = _envelope(tags=[["title", "A"], ["title", "B"]])
        assert envelope.first_value("title") == "A"

    def test_first_value_skips_bare_keys(self) -> None:
        envelope = _envelope(tags=[["title"], ["title", "B"]])
        assert envelope.first_value("title") == "B"

    def test_first_value_missing(self) -> None:
        assert _envelope().first_value("title") is None

    def test_values(self) -> None:
        envelope = _envelope(tags=[["a", "1"], ["t", "x"], ["a", "2", "wss://r"]])
        assert envelope.values("a") == [("1",), ("2", "wss://r")]


class TestJson:
    def test_from_dict(self) -> None:
        envelope = Envelope.from_dict(
            {
                "id": "1" * 64,
                "pubkey": AUTHOR_KEY,
                "created_at": 1,
                "kind": 30023,
                "tags": [["d", "x"]],
                "content": "hello",
                "sig": "2" * 128,
            }
        )
        assert envelope.id == "1" * 64
        assert envelope.author_key == AUTHOR_KEY
        assert envelope.body == "hello"
        assert envelope.signature == "2" * 128
        assert envelope.tags == (("d", "x"),)

    def test_from_dict_unsigned(self) -> None:
        envelope = Envelope.from_dict({"pubkey": AUTHOR_KEY, "created_at": 1, "kind": 30023})
        assert envelope.id == ""
        assert envelope.signature == ""

    def test_from_dict_missing_pubkey(self) -> None:
        with pytest.raises(KeyError):
            Envelope.from_dict({"created_at": 1, "kind": 30023})

    def test_to_dict_uses_wire_keys(self) -> None:
        data = _envelope(tags=[["d", "x"]], body="hi").to_dict()
        assert set(data) == {"id", "pubkey", "created_at", "kind", "tags", "content", "sig"}
        assert data["tags"] == [["d", "x"]]

    def test_json_round_trip(self) -> None:
        envelope = _envelope(tags=[["d", "x"], ["t", "y"]], body="body", id="9" * 64)
        assert Envelope.from_json(envelope.to_json()) == envelope

    def test_to_json_is_valid_json(self) -> None:
        assert json.loads(_envelope().to_json())["kind"] == 30023


class TestNostrSdkInterop:
    def test_from_nostr_event(self) -> None:
        event = MagicMock()
        event.id.return_value.to_hex.return_value = "a" * 64
        event.author.return_value.to_hex.return_value = "b" * 64
        event.created_at.return_value.as_secs.return_value = 1_700_000_000
        event.kind.return_value.as_u16.return_value = 30023
        tag = MagicMock()
        tag.as_vec.return_value = ["d", "intro"]
        event.tags.return_value.to_vec.return_value = [tag]
        event.content.return_value = "# Intro"
        event.signature.return_value = "c" * 128

        envelope = Envelope.from_nostr_event(event)

        assert envelope.id == "a" * 64
        assert envelope.author_key == "b" * 64
        assert envelope.kind == 30023
        assert envelope.tags == (("d", "intro"),)
        assert envelope.body == "# Intro"
        assert envelope.signature == "c" * 128

    def test_to_event_builder(self) -> None:
        keys = Keys.generate()
        envelope = _envelope(
            author_key=keys.public_key().to_hex(),
            tags=[["d", "intro"], [], ["title", "Intro"]],
            body="# Intro",
        )
        unsigned = envelope.to_event_builder().finalize_unsigned(keys.public_key())

        assert unsigned.kind().as_u16() == 30023
        assert unsigned.content() == "# Intro"
        assert unsigned.created_at().as_secs() == 1_700_000_000
        assert [tag.as_vec() for tag in unsigned.tags().to_vec()] == [["d", "intro"], ["title", "Intro"]]
