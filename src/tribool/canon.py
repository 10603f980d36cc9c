"""
JSON Encoding for TriBool

A TriBool encodes as its canonical token string ("no", "maybe", "yes").
Decoding is lenient and total:
- JSON string: parsed with TriBool.from_string
- JSON boolean: converted with TriBool.from_bool
- anything else (number, null, object, array, malformed document): MAYBE

The only decode failure is writing into a missing destination, which is
a caller bug and raises DecodeTargetError.
"""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, is_dataclass
from enum import Enum
from typing import Any, Optional, Union

from .exceptions import DecodeTargetError
from .tribool import TriBool

logger = logging.getLogger(__name__)


# =============================================================================
# Value-level hooks
# =============================================================================

def encode_value(value: TriBool) -> str:
    """Encode a TriBool as its canonical token."""
    return value.value


def decode_value(obj: Any) -> TriBool:
    """
    Decode an already-parsed value into a TriBool.

    Strings and bytes go through the parser, bools through from_bool.
    Every other shape resolves to MAYBE; this function never raises.
    """
    if isinstance(obj, TriBool):
        return obj
    if isinstance(obj, bool):
        return TriBool.from_bool(obj)
    if isinstance(obj, (str, bytes, bytearray)):
        return TriBool.from_string(obj)
    logger.debug("Cannot decode %s as TriBool, using maybe", type(obj).__name__)
    return TriBool.MAYBE


# =============================================================================
# JSON documents
# =============================================================================

def _default_serializer(obj: Any) -> Any:
    """
    Custom JSON serializer for non-standard types.

    Handles:
    - TriBool: canonical token
    - other Enum: value
    - dataclass: dict
    - set/frozenset: sorted list
    """
    if isinstance(obj, TriBool):
        return encode_value(obj)
    if isinstance(obj, Enum):
        return obj.value
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, (set, frozenset)):
        return sorted(obj, key=str)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(value: TriBool) -> str:
    """
    Encode a TriBool as a JSON document.

    Example:
        >>> to_json(TriBool.TRUE)
        '"yes"'
    """
    return json.dumps(encode_value(value))


def from_json(data: Union[str, bytes, bytearray]) -> TriBool:
    """
    Decode a JSON document into a TriBool.

    Malformed JSON, undecodable bytes and pathologically nested input all
    resolve to MAYBE.
    """
    try:
        obj = json.loads(data)
    except (ValueError, TypeError, RecursionError) as e:
        logger.debug("Malformed TriBool JSON, using maybe: %s", e)
        return TriBool.MAYBE
    return decode_value(obj)


def canonical_json(obj: Any) -> str:
    """
    Serialize a structure that may embed TriBool values.

    The output is deterministic: sorted keys, no whitespace.

    Example:
        >>> canonical_json({"b": TriBool.MAYBE, "a": True})
        '{"a":true,"b":"maybe"}'
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        default=_default_serializer,
        ensure_ascii=False,
    )


# =============================================================================
# Decode into a destination
# =============================================================================

@dataclass
class TriBoolSlot:
    """Mutable holder for a decoded TriBool. Defaults to FALSE."""
    value: TriBool = TriBool.FALSE


def decode_into(target: Optional[TriBoolSlot], data: Union[str, bytes, bytearray]) -> TriBool:
    """
    Decode a JSON document and store the result in target.

    Args:
        target: Destination slot
        data: JSON document

    Returns:
        The decoded value (also written to target.value)

    Raises:
        DecodeTargetError: If target is None
    """
    if target is None:
        raise DecodeTargetError(
            "decode_into called with no target",
            details={"target": None},
        )
    target.value = from_json(data)
    return target.value


__all__ = [
    "TriBoolSlot",
    "canonical_json",
    "decode_into",
    "decode_value",
    "encode_value",
    "from_json",
    "to_json",
]
