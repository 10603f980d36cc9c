"""
Pydantic Field Type for TriBool

Use TriBoolField as a model field annotation to get the same lenient
decoding as tribool.canon: strings are parsed, booleans converted, every
other input becomes MAYBE instead of a validation error. Dumps emit the
canonical token.

Example:
    class FeatureFlags(BaseModel):
        beta: TriBoolField = TriBool.FALSE

    FeatureFlags.model_validate({"beta": "ON"}).beta   # TriBool.TRUE
    FeatureFlags(beta=TriBool.MAYBE).model_dump()      # {"beta": "maybe"}
"""
from __future__ import annotations

from typing import Annotated

from pydantic import PlainSerializer, PlainValidator

from .canon import decode_value, encode_value
from .tribool import TriBool

TriBoolField = Annotated[
    TriBool,
    PlainValidator(decode_value),
    PlainSerializer(encode_value, return_type=str),
]

__all__ = ["TriBoolField"]
