"""Document codecs translating between bytes, value trees and typed values."""

from .models import CodecError, CodecOperation
from .protocol import DocumentCodec
from .settings import CodecSettings
from .yaml_codec import YamlCodec

__all__ = [
    "CodecError",
    "CodecOperation",
    "CodecSettings",
    "DocumentCodec",
    "YamlCodec",
]
