"""
Three-Valued Boolean Logic (TriBool).

A boolean extended with an explicit indeterminate state. MAYBE models a
value that is either true or false but not known to be which: a request
whose connection dropped after it was sent, a flag the user never set,
a fact missing from a record.

Ordering:
    FALSE < MAYBE < TRUE

AND and OR are the min and max of that order; NOT mirrors it.

Truth Tables:

    a b | and  or  nand  nor  xor  equiv  implies
    ----+-----------------------------------------
    N N |  N   N    Y     Y    N     Y      Y
    N ? |  N   ?    Y     ?    ?     ?      Y
    N Y |  N   Y    Y     N    Y     N      Y
    ? N |  N   ?    Y     ?    ?     ?      ?
    ? ? |  ?   ?    ?     ?    ?     ?      ?
    ? Y |  ?   Y    ?     N    ?     ?      Y
    Y N |  N   Y    Y     N    Y     N      N
    Y ? |  ?   Y    ?     N    ?     ?      ?
    Y Y |  Y   Y    N     N    N     Y      Y

    a | not  upgrade  downgrade
    --+-------------------------
    N |  Y      N         N
    ? |  ?      Y         N
    Y |  N      Y         Y

Parsing (case insensitive, anything else is MAYBE):

    t y 1 on yes true  -> TRUE
    f n 0 no off false -> FALSE
"""
from __future__ import annotations

from enum import Enum
from functools import total_ordering
from typing import Any, Iterable, Optional, Union

from .exceptions import IndeterminateValueError, InvalidOperandError


Operand = Union["TriBool", bool]


@total_ordering
class TriBool(Enum):
    """
    Three-valued Boolean.

    Members:
    - FALSE: definitely false (aliases NO, OFF)
    - MAYBE: indeterminate (aliases PERHAPS, INDETERMINATE, UNKNOWN)
    - TRUE: definitely true (aliases YES, ON)

    FALSE is declared first so it is the zero member: anything that needs
    a default uses FALSE, just like a plain bool.

    The member value is the canonical token, so ``TriBool.TRUE.value`` and
    ``str(TriBool.TRUE)`` are both ``"yes"``. Calling ``TriBool(x)`` never
    fails: strings are parsed, bools converted, anything else is MAYBE.
    """
    FALSE = "no"
    MAYBE = "maybe"
    TRUE = "yes"

    # Synonyms
    NO = "no"
    OFF = "no"
    PERHAPS = "maybe"
    INDETERMINATE = "maybe"
    UNKNOWN = "maybe"
    YES = "yes"
    ON = "yes"

    @classmethod
    def _missing_(cls, value: object) -> TriBool:
        if isinstance(value, bool):
            return cls.from_bool(value)
        if isinstance(value, (str, bytes, bytearray)):
            return cls.from_string(value)
        return cls.MAYBE

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_bool(cls, value: Optional[bool]) -> TriBool:
        """Convert Python bool/None to TriBool. Only None gives MAYBE."""
        if value is None:
            return cls.MAYBE
        return cls.TRUE if value else cls.FALSE

    @classmethod
    def from_string(cls, text: Union[str, bytes, bytearray]) -> TriBool:
        """
        Parse a human-written flag.

            case insensitive | result
            -----------------+-------
                  t y 1      | TRUE
                  on yes     | TRUE
                  true       | TRUE
                  f n 0      | FALSE
                  no off     | FALSE
                  false      | FALSE
             <anything else> | MAYBE

        The empty string is MAYBE. Each character is compared against the
        lower and upper ASCII form of the expected letter, so a single
        wrong character turns the whole token into MAYBE. Bytes and bytearray
        are compared byte by byte; input that is not text at all is MAYBE.
        """
        if isinstance(text, (bytes, bytearray)):
            # latin-1 maps each byte to one character and cannot fail
            text = bytes(text).decode("latin-1")
        elif not isinstance(text, str):
            return cls.MAYBE

        # Most flags are set to true; this is the fast path.
        if text == "true":
            return cls.TRUE

        length = len(text)
        if length == 1:
            if text in "tTyY1":
                return cls.TRUE
            if text in "fFnN0":
                return cls.FALSE
        elif length == 2:
            if _spells(text, "on"):
                return cls.TRUE
            if _spells(text, "no"):
                return cls.FALSE
        elif length == 3:
            if _spells(text, "yes"):
                return cls.TRUE
            if _spells(text, "off"):
                return cls.FALSE
        elif length == 4:
            if _spells(text, "true"):
                return cls.TRUE
        elif length == 5:
            if _spells(text, "false"):
                return cls.FALSE

        return cls.MAYBE

    # ------------------------------------------------------------------
    # Representation
    # ------------------------------------------------------------------

    @property
    def ordinal(self) -> int:
        """Position in the order FALSE(0) < MAYBE(1) < TRUE(2)."""
        return _ORDINALS[self]

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TriBool):
            return NotImplemented
        return self.ordinal < other.ordinal

    def __bool__(self) -> bool:
        """
        Convert to bool for Python if statements.

        Raises IndeterminateValueError for MAYBE to force an explicit
        collapse via with_maybe_as_true() or with_maybe_as_false().
        """
        if self is TriBool.MAYBE:
            raise IndeterminateValueError(
                "Cannot convert TriBool.MAYBE to bool. "
                "Use with_maybe_as_true() or with_maybe_as_false()."
            )
        return self is TriBool.TRUE

    # ------------------------------------------------------------------
    # Collapse to bool
    # ------------------------------------------------------------------

    def with_maybe_as_true(self) -> bool:
        """Optimistic collapse: MAYBE and TRUE are True."""
        return self is not TriBool.FALSE

    def with_maybe_as_false(self) -> bool:
        """Pessimistic collapse: MAYBE and FALSE are False."""
        return self is TriBool.TRUE

    def is_true(self) -> bool:
        return self is TriBool.TRUE

    def is_false(self) -> bool:
        return self is TriBool.FALSE

    def is_maybe(self) -> bool:
        return self is TriBool.MAYBE

    def is_known(self) -> bool:
        """Check if value is known (not MAYBE)."""
        return self is not TriBool.MAYBE

    # ------------------------------------------------------------------
    # Unary operators
    # ------------------------------------------------------------------

    def not_(self) -> TriBool:
        """
        Logical not.

            a | ~a
            --+---
            N | Y
            ? | ?
            Y | N
        """
        return _STATES[2 - self.ordinal]

    def upgrade(self) -> TriBool:
        """Resolve MAYBE to TRUE."""
        return TriBool.from_bool(self.with_maybe_as_true())

    def downgrade(self) -> TriBool:
        """Resolve MAYBE to FALSE."""
        return TriBool.from_bool(self.with_maybe_as_false())

    # ------------------------------------------------------------------
    # Binary operators
    # ------------------------------------------------------------------

    def and_(self, other: Operand) -> TriBool:
        """
        Logical and: FALSE dominates, MAYBE propagates.

        Examples:
            TRUE.and_(MAYBE) = MAYBE
            FALSE.and_(MAYBE) = FALSE
        """
        other = _operand(other, "and_")
        return _STATES[min(self.ordinal, other.ordinal)]

    def or_(self, other: Operand) -> TriBool:
        """
        Logical inclusive-or: TRUE dominates, MAYBE propagates.

        Examples:
            TRUE.or_(MAYBE) = TRUE
            FALSE.or_(MAYBE) = MAYBE
        """
        other = _operand(other, "or_")
        return _STATES[max(self.ordinal, other.ordinal)]

    def nand(self, other: Operand) -> TriBool:
        """Logical nand, i.e. not (a and b)."""
        other = _operand(other, "nand")
        return _STATES[2 - min(self.ordinal, other.ordinal)]

    def nor(self, other: Operand) -> TriBool:
        """Logical nor, i.e. not (a or b)."""
        other = _operand(other, "nor")
        return _STATES[2 - max(self.ordinal, other.ordinal)]

    def xor(self, other: Operand) -> TriBool:
        """Logical exclusive-or. Any MAYBE operand gives MAYBE."""
        other = _operand(other, "xor")
        return self.or_(other).and_(self.nand(other))

    def implies(self, other: Operand) -> TriBool:
        """
        Logical implication, a => b.

        Not commutative: TRUE.implies(FALSE) is FALSE while
        FALSE.implies(TRUE) is TRUE.

            a b | a => b
            ----+-------
            N * | Y
            ? N | ?
            ? ? | ?
            ? Y | Y
            Y N | N
            Y ? | ?
            Y Y | Y
        """
        other = _operand(other, "implies")
        return other.or_(self.not_())

    def equiv(self, other: Operand) -> TriBool:
        """Logical equivalence. Any MAYBE operand gives MAYBE."""
        other = _operand(other, "equiv")
        return self.and_(other).or_(self.nor(other))

    # Mixed TriBool/bool variants

    def and_bool(self, other: bool) -> TriBool:
        return self.and_(TriBool.from_bool(other))

    def or_bool(self, other: bool) -> TriBool:
        return self.or_(TriBool.from_bool(other))

    def nand_bool(self, other: bool) -> TriBool:
        return self.nand(TriBool.from_bool(other))

    def nor_bool(self, other: bool) -> TriBool:
        return self.nor(TriBool.from_bool(other))

    def xor_bool(self, other: bool) -> TriBool:
        return self.xor(TriBool.from_bool(other))

    def implies_bool(self, other: bool) -> TriBool:
        return self.implies(TriBool.from_bool(other))

    def equiv_bool(self, other: bool) -> TriBool:
        return self.equiv(TriBool.from_bool(other))

    # ------------------------------------------------------------------
    # Python operators
    # ------------------------------------------------------------------

    def __and__(self, other: Any) -> TriBool:
        if not isinstance(other, (TriBool, bool)):
            return NotImplemented
        return self.and_(other)

    __rand__ = __and__

    def __or__(self, other: Any) -> TriBool:
        if not isinstance(other, (TriBool, bool)):
            return NotImplemented
        return self.or_(other)

    __ror__ = __or__

    def __xor__(self, other: Any) -> TriBool:
        if not isinstance(other, (TriBool, bool)):
            return NotImplemented
        return self.xor(other)

    __rxor__ = __xor__

    def __invert__(self) -> TriBool:
        return self.not_()


_STATES = (TriBool.FALSE, TriBool.MAYBE, TriBool.TRUE)
_ORDINALS = {state: index for index, state in enumerate(_STATES)}


def _spells(text: str, word: str) -> bool:
    """Compare equal-length text to a lowercase ASCII word, ignoring case."""
    for actual, expected in zip(text, word):
        if actual != expected and actual != expected.upper():
            return False
    return True


def _operand(value: Any, operation: str) -> TriBool:
    if isinstance(value, TriBool):
        return value
    if isinstance(value, bool):
        return TriBool.from_bool(value)
    raise InvalidOperandError(
        f"TriBool.{operation} expects a TriBool or bool, "
        f"got {type(value).__name__}",
        details={"operation": operation, "operand_type": type(value).__name__},
    )


# =============================================================================
# Reducers
# =============================================================================

def all_of(values: Iterable[Operand]) -> TriBool:
    """
    Fold ``and_`` over values.

    Empty input is TRUE. Stops at the first FALSE, so an infinite
    iterable containing a FALSE still terminates.
    """
    result = TriBool.TRUE
    for value in values:
        result = result.and_(_operand(value, "all_of"))
        if result is TriBool.FALSE:
            break
    return result


def any_of(values: Iterable[Operand]) -> TriBool:
    """
    Fold ``or_`` over values.

    Empty input is FALSE. Stops at the first TRUE.
    """
    result = TriBool.FALSE
    for value in values:
        result = result.or_(_operand(value, "any_of"))
        if result is TriBool.TRUE:
            break
    return result


__all__ = ["TriBool", "all_of", "any_of"]
