"""Document value tree used as the in-memory representation of a config."""

from .value import (
    DocumentMapping,
    DocumentScalar,
    DocumentSequence,
    DocumentValue,
    ValueKind,
    ValueKindError,
    expect_mapping,
    expect_scalar,
    expect_sequence,
    kind_of,
)

__all__ = [
    "DocumentMapping",
    "DocumentScalar",
    "DocumentSequence",
    "DocumentValue",
    "ValueKind",
    "ValueKindError",
    "expect_mapping",
    "expect_scalar",
    "expect_sequence",
    "kind_of",
]
