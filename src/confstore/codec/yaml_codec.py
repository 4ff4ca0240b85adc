"""YAML document codec.

PyYAML handles bytes <-> document tree, pydantic `TypeAdapter`s handle
document tree <-> typed values. Typed values are dumped in JSON mode so the tree
only ever contains YAML-native scalars, lists and string-keyed mappings. JSON mode
turns non-finite floats into null, so values carrying them are rejected instead.
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Any

import yaml
from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError
from result import Err, Ok, Result

from confstore.document import DocumentValue

from .models import CodecError, CodecOperation
from .settings import CodecSettings


class YamlCodec:
    """YAML implementation of the DocumentCodec protocol."""

    def __init__(self, settings: CodecSettings | None = None) -> None:
        self.settings = settings or CodecSettings()

    def decode(self, data: bytes) -> Result[DocumentValue, CodecError]:
        try:
            text = data.decode(self.settings.encoding)
        except UnicodeDecodeError as exc:
            return Err(CodecError(operation=CodecOperation.DECODE, message=str(exc)))

        try:
            return Ok(yaml.safe_load(text))
        except yaml.YAMLError as exc:
            mark = getattr(exc, "problem_mark", None)
            line = getattr(mark, "line", None)
            column = getattr(mark, "column", None)
            return Err(
                CodecError(
                    operation=CodecOperation.DECODE,
                    line=(line + 1) if line is not None else None,
                    column=(column + 1) if column is not None else None,
                    message=str(exc),
                )
            )

    def encode(self, value: DocumentValue) -> Result[bytes, CodecError]:
        try:
            text = yaml.safe_dump(
                value,
                sort_keys=self.settings.sort_keys,
                indent=self.settings.indent,
                default_flow_style=self.settings.default_flow_style,
                allow_unicode=self.settings.allow_unicode,
            )
        except yaml.YAMLError as exc:
            return Err(CodecError(operation=CodecOperation.ENCODE, message=str(exc)))

        try:
            return Ok(text.encode(self.settings.encoding))
        except UnicodeEncodeError as exc:
            return Err(CodecError(operation=CodecOperation.ENCODE, message=str(exc)))

    def encode_value(self, value: object) -> Result[DocumentValue, CodecError]:
        try:
            adapter = _adapter_for(type(value))
            encoded = adapter.dump_python(value, mode="json")
            non_finite = _find_non_finite(adapter.dump_python(value))
        except (PydanticSchemaGenerationError, PydanticSerializationError) as exc:
            return Err(CodecError(operation=CodecOperation.ENCODE_VALUE, message=str(exc)))

        if non_finite is not None:
            return Err(
                CodecError(
                    operation=CodecOperation.ENCODE_VALUE,
                    message=f"Non-finite float {non_finite!r} cannot be stored",
                )
            )

        return Ok(encoded)

    def decode_value[T](self, value: DocumentValue, type_: type[T]) -> Result[T, CodecError]:
        try:
            return Ok(_adapter_for(type_).validate_python(value))
        except PydanticSchemaGenerationError as exc:
            return Err(CodecError(operation=CodecOperation.DECODE_VALUE, message=str(exc)))
        except ValidationError as exc:
            return Err(CodecError(operation=CodecOperation.DECODE_VALUE, message=_describe_validation_error(exc)))


@lru_cache(maxsize=256)
def _adapter_for(type_: Any) -> TypeAdapter[Any]:  # noqa: ANN401
    return TypeAdapter(type_)


def _find_non_finite(value: object) -> float | None:
    match value:
        case float() if not math.isfinite(value):
            return value
        case dict():
            items = list(value.values())
        case list() | tuple() | set() | frozenset():
            items = list(value)
        case _:
            return None

    for item in items:
        found = _find_non_finite(item)
        if found is not None:
            return found
    return None


def _describe_validation_error(exc: ValidationError) -> str:
    error_details = exc.errors()
    if not error_details:
        return str(exc)

    first = error_details[0]
    loc = first.get("loc") or ()
    field = ".".join(str(part) for part in loc)
    message = first.get("msg", str(exc))
    return f"{field}: {message}" if field else message
