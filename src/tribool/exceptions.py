"""
Tribool Exception Hierarchy

Parsing and decoding never raise: unrecognized input degrades to MAYBE.
The errors below signal programming mistakes, not bad data.

Error Codes:
- TB_INDETERMINATE: MAYBE used where a plain bool is required
- TB_DECODE_TARGET: decode asked to populate an absent destination
- TB_INVALID_OPERAND: logical operator given something other than TriBool/bool
- TB_INTERNAL_ERROR: catch-all (base class default)
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional

__all__ = [
    'TriboolError',
    'IndeterminateValueError',
    'DecodeTargetError',
    'InvalidOperandError',
]


class TriboolError(Exception):
    """
    Base exception for all tribool errors.

    Attributes:
        code: Deterministic error code (TB_*)
        message: Human-readable error description
        details: Additional context as a dictionary
    """

    code: str = "TB_INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details if details is not None else {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize error for logging."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"details={self.details!r})"
        )


class IndeterminateValueError(TriboolError, ValueError):
    """
    MAYBE was converted with bool().

    Callers must pick a collapse direction explicitly with
    with_maybe_as_true() or with_maybe_as_false().
    """

    code: str = "TB_INDETERMINATE"


class DecodeTargetError(TriboolError, TypeError):
    """Decode was invoked with no destination (None) to write into."""

    code: str = "TB_DECODE_TARGET"


class InvalidOperandError(TriboolError, TypeError):
    """A logical operator received an operand that is not TriBool or bool."""

    code: str = "TB_INVALID_OPERAND"
