"""YAML-native document value tree.

The tree is made of plain Python values as produced by `yaml.safe_load`:
`None`, `bool`, `int`, `float`, `str`, `list` and `dict`. `kind_of` tags a value
with its variant and the `expect_*` helpers narrow it, returning `Err` instead of
casting when the variant does not match.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from result import Err, Ok, Result

type DocumentValue = None | bool | int | float | str | list[DocumentValue] | dict[str, DocumentValue]
type DocumentMapping = dict[str, DocumentValue]
type DocumentSequence = list[DocumentValue]
type DocumentScalar = None | bool | int | float | str


class ValueKind(str, Enum):
    """Variants of the document value tree."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


SCALAR_KINDS = frozenset({ValueKind.NULL, ValueKind.BOOL, ValueKind.NUMBER, ValueKind.STRING})


class ValueKindError(BaseModel):
    """A document value was not of the expected variant."""

    model_config = ConfigDict(extra="forbid")

    expected: str
    actual: ValueKind | None = None
    message: str


def kind_of(value: object) -> ValueKind | None:
    """Return the variant of `value`, or None when it is not a document value."""
    match value:
        case None:
            return ValueKind.NULL
        # bool is an int subclass, so it must be matched first
        case bool():
            return ValueKind.BOOL
        case int() | float():
            return ValueKind.NUMBER
        case str():
            return ValueKind.STRING
        case list():
            return ValueKind.SEQUENCE
        case dict():
            return ValueKind.MAPPING
        case _:
            return None


def expect_mapping(value: object) -> Result[DocumentMapping, ValueKindError]:
    """Narrow `value` to a mapping whose keys are all strings."""
    actual = kind_of(value)
    if actual is not ValueKind.MAPPING:
        return Err(_kind_mismatch(ValueKind.MAPPING, actual))

    assert isinstance(value, dict)
    bad_keys = [key for key in value if not isinstance(key, str)]
    if bad_keys:
        return Err(
            ValueKindError(
                expected=ValueKind.MAPPING.value,
                actual=actual,
                message=f"Mapping keys must be strings, got {bad_keys[0]!r}",
            )
        )

    return Ok(value)


def expect_sequence(value: object) -> Result[DocumentSequence, ValueKindError]:
    actual = kind_of(value)
    if actual is not ValueKind.SEQUENCE:
        return Err(_kind_mismatch(ValueKind.SEQUENCE, actual))

    assert isinstance(value, list)
    return Ok(value)


def expect_scalar(value: object) -> Result[DocumentScalar, ValueKindError]:
    actual = kind_of(value)
    if actual not in SCALAR_KINDS:
        return Err(
            ValueKindError(
                expected="scalar",
                actual=actual,
                message=f"Expected a scalar value, got {_describe(actual)}",
            )
        )

    assert value is None or isinstance(value, bool | int | float | str)
    return Ok(value)


def _kind_mismatch(expected: ValueKind, actual: ValueKind | None) -> ValueKindError:
    return ValueKindError(
        expected=expected.value,
        actual=actual,
        message=f"Expected a {expected.value}, got {_describe(actual)}",
    )


def _describe(kind: ValueKind | None) -> str:
    return kind.value if kind is not None else "a non-document value"
