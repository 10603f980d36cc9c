"""
Tests for JSON encoding (tribool.canon).

Test Coverage:
- encode_value / to_json produce the canonical token
- decode_value / from_json accept strings and booleans, everything else is MAYBE
- Malformed documents never raise
- decode_into writes into a slot and rejects a missing destination
- canonical_json for structures embedding TriBool
"""
import json
import logging
from dataclasses import dataclass

import pytest

from tribool import (
    DecodeTargetError,
    TriBool,
    TriBoolSlot,
    canonical_json,
    decode_into,
    decode_value,
    encode_value,
    from_json,
    to_json,
)

from conftest import STATES


# =============================================================================
# Encoding
# =============================================================================

class TestEncode:
    """TriBool -> token / JSON."""

    def test_encode_value(self):
        assert [encode_value(s) for s in STATES] == ["no", "maybe", "yes"]

    def test_to_json(self):
        assert to_json(TriBool.TRUE) == '"yes"'
        assert to_json(TriBool.FALSE) == '"no"'
        assert to_json(TriBool.MAYBE) == '"maybe"'

    def test_aliases_encode_identically(self):
        assert to_json(TriBool.ON) == to_json(TriBool.TRUE)
        assert to_json(TriBool.UNKNOWN) == to_json(TriBool.MAYBE)

    def test_round_trip(self, state):
        assert from_json(to_json(state)) is state


# =============================================================================
# Decoding
# =============================================================================

class TestDecode:
    """JSON -> TriBool."""

    @pytest.mark.parametrize("data,expected", [
        ('"yes"', TriBool.TRUE),
        ('"OFF"', TriBool.FALSE),
        ('"maybe"', TriBool.MAYBE),
        ('"huh?"', TriBool.MAYBE),
        ('""', TriBool.MAYBE),
        ("true", TriBool.TRUE),
        ("false", TriBool.FALSE),
        (b'"on"', TriBool.TRUE),
        (b"false", TriBool.FALSE),
    ])
    def test_strings_and_booleans(self, data, expected):
        assert from_json(data) is expected

    @pytest.mark.parametrize("data", [
        "1", "0", "2.5", "null", "{}", '{"value": "yes"}', "[]", '["yes"]',
    ])
    def test_other_shapes_are_maybe(self, data):
        assert from_json(data) is TriBool.MAYBE

    @pytest.mark.parametrize("data", [
        "", "   ", "yes", "{", '"yes', "tru", "[1,", b"\xff\xfe\x00", b"\x80",
    ])
    def test_malformed_is_maybe(self, data):
        assert from_json(data) is TriBool.MAYBE

    def test_deeply_nested_is_maybe(self):
        assert from_json("[" * 100_000) is TriBool.MAYBE
        assert from_json("[" * 100_000 + "]" * 100_000) is TriBool.MAYBE

    def test_malformed_logs_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="tribool.canon"):
            from_json("{")
        assert any("Malformed" in r.message for r in caplog.records)

    @pytest.mark.parametrize("obj,expected", [
        ("YES", TriBool.TRUE),
        (b"n", TriBool.FALSE),
        (bytearray(b"ON"), TriBool.TRUE),
        (True, TriBool.TRUE),
        (False, TriBool.FALSE),
        (TriBool.MAYBE, TriBool.MAYBE),
        (1, TriBool.MAYBE),
        (0, TriBool.MAYBE),
        (None, TriBool.MAYBE),
        ({"a": 1}, TriBool.MAYBE),
        ([True], TriBool.MAYBE),
    ])
    def test_decode_value(self, obj, expected):
        assert decode_value(obj) is expected


# =============================================================================
# Decode into a slot
# =============================================================================

class TestDecodeInto:
    """Addressable decode destination."""

    def test_slot_defaults_to_false(self):
        assert TriBoolSlot().value is TriBool.FALSE

    def test_decode_into_slot(self):
        slot = TriBoolSlot()
        assert decode_into(slot, '"yes"') is TriBool.TRUE
        assert slot.value is TriBool.TRUE

    def test_decode_into_overwrites(self):
        slot = TriBoolSlot(TriBool.TRUE)
        decode_into(slot, "42")
        assert slot.value is TriBool.MAYBE

    def test_decode_into_none_raises(self):
        with pytest.raises(DecodeTargetError) as excinfo:
            decode_into(None, '"yes"')
        assert excinfo.value.code == "TB_DECODE_TARGET"

    def test_decode_into_none_raises_even_for_malformed_data(self):
        with pytest.raises(DecodeTargetError):
            decode_into(None, "{")

    def test_decode_target_error_is_type_error(self):
        with pytest.raises(TypeError):
            decode_into(None, "true")


# =============================================================================
# Canonical JSON
# =============================================================================

@dataclass
class Flags:
    beta: TriBool
    name: str


class TestCanonicalJson:
    """Structures embedding TriBool values."""

    def test_dict(self):
        assert canonical_json({"b": TriBool.MAYBE, "a": True}) == '{"a":true,"b":"maybe"}'

    def test_nested(self):
        data = {"flags": [TriBool.TRUE, TriBool.OFF], "n": 1}
        assert json.loads(canonical_json(data)) == {"flags": ["yes", "no"], "n": 1}

    def test_dataclass(self):
        assert canonical_json(Flags(TriBool.TRUE, "x")) == '{"beta":"yes","name":"x"}'

    def test_slot(self):
        assert canonical_json(TriBoolSlot()) == '{"value":"no"}'

    def test_decodes_back(self):
        encoded = json.loads(canonical_json({"flag": TriBool.MAYBE}))
        assert decode_value(encoded["flag"]) is TriBool.MAYBE

    def test_unsupported_type_raises(self):
        with pytest.raises(TypeError):
            canonical_json({"x": object()})
