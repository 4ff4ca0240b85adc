"""YAML codec settings."""

from __future__ import annotations

import codecs

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CodecSettings(BaseModel):
    """How documents are rendered to and read from bytes.

    Attributes:
        encoding: Text encoding of the persisted file
        sort_keys: Sort mapping keys on output instead of keeping insertion order
        indent: Indentation width for nested blocks
        default_flow_style: Render nested collections inline (`{a: 1}`) instead of as blocks
        allow_unicode: Write non-ASCII characters as-is instead of escaping them
    """

    model_config = ConfigDict(extra="forbid")

    encoding: str = "utf-8"
    sort_keys: bool = False
    indent: int = Field(default=2, ge=2, le=9)
    default_flow_style: bool = False
    allow_unicode: bool = True

    @field_validator("encoding")
    @classmethod
    def _validate_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown text encoding: {value}") from exc
        return value
