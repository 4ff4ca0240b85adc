"""Codec error models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class CodecOperation(str, Enum):
    """Codec operation that produced an error."""

    DECODE = "decode"
    ENCODE = "encode"
    DECODE_VALUE = "decode_value"
    ENCODE_VALUE = "encode_value"


class CodecError(BaseModel):
    """Failure translating between bytes, the document tree and typed values."""

    model_config = ConfigDict(extra="forbid")

    operation: CodecOperation
    message: str
    line: int | None = None
    column: int | None = None
