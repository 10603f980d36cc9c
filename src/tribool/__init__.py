"""
tribool - Three-Valued Boolean Logic

A boolean with an extra indeterminate state, MAYBE, for values that are
either true or false but not known to be which.

Key Features:
- TriBool enumeration: FALSE < MAYBE < TRUE, with synonyms
  (NO/OFF, PERHAPS/INDETERMINATE/UNKNOWN, YES/ON)
- and/or/nand/nor/xor/implies/equiv, each with a bool-mixed variant
- not/upgrade/downgrade, plus &, |, ^ and ~ operators
- Explicit collapse to bool: with_maybe_as_true() / with_maybe_as_false()
- Lenient flag parsing: t/y/1/on/yes/true and f/n/0/no/off/false
- JSON, pydantic and YAML hooks that never fail on bad data

Quick Start:
    from tribool import TriBool

    flag = TriBool.from_string(os_value)          # unknown text is MAYBE
    enabled = flag.with_maybe_as_false()

    can_vote = (
        user.is_older_than(18)
        .or_bool(user.is_dev)
        .and_bool(not user.is_contest_judge)
        .with_maybe_as_false()
    )

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

from .tribool import TriBool, all_of, any_of
from .exceptions import (
    TriboolError,
    IndeterminateValueError,
    DecodeTargetError,
    InvalidOperandError,
)
from .canon import (
    TriBoolSlot,
    canonical_json,
    decode_into,
    decode_value,
    encode_value,
    from_json,
    to_json,
)
from .schema import TriBoolField
from .yaml_support import TriBoolDumper, dump_yaml, from_yaml

__all__ = [
    "__version__",
    # Core
    "TriBool",
    "all_of",
    "any_of",
    # Errors
    "TriboolError",
    "IndeterminateValueError",
    "DecodeTargetError",
    "InvalidOperandError",
    # JSON
    "TriBoolSlot",
    "canonical_json",
    "decode_into",
    "decode_value",
    "encode_value",
    "from_json",
    "to_json",
    # pydantic
    "TriBoolField",
    # YAML
    "TriBoolDumper",
    "dump_yaml",
    "from_yaml",
]
