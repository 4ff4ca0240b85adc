"""Document codec protocol."""

from __future__ import annotations

from typing import Protocol

from result import Result

from confstore.document import DocumentValue

from .models import CodecError


class DocumentCodec(Protocol):
    """Translates between bytes, the document value tree and typed values."""

    def decode(self, data: bytes) -> Result[DocumentValue, CodecError]:
        """Parse a whole document into a value tree."""
        ...

    def encode(self, value: DocumentValue) -> Result[bytes, CodecError]:
        """Render a value tree as a whole document.

        Must be a left-inverse of `decode` for any tree produced by `encode_value`.
        """
        ...

    def encode_value(self, value: object) -> Result[DocumentValue, CodecError]: ...

    def decode_value[T](self, value: DocumentValue, type_: type[T]) -> Result[T, CodecError]: ...
