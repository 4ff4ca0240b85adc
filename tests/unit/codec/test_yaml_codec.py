from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

import pytest
import yaml
from pydantic import BaseModel, ValidationError
from result import Ok, is_err, is_ok

from confstore.codec import CodecError, CodecOperation, CodecSettings, YamlCodec


class Endpoint(BaseModel):
    host: str
    port: int
    tags: list[str] = []


@dataclass
class Retry:
    attempts: int
    backoff: float


class Opaque:
    pass


def test_decode_parses_mapping_document() -> None:
    codec = YamlCodec()

    result = codec.decode(b"server:\n  host: localhost\n  port: 8080\n")

    assert is_ok(result)
    assert result.unwrap() == {"server": {"host": "localhost", "port": 8080}}


def test_decode_returns_none_for_empty_document() -> None:
    result = YamlCodec().decode(b"")

    assert result == Ok(None)


def test_decode_reports_parse_position() -> None:
    result = YamlCodec().decode(b"server:\n  host: [unclosed\n")

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, CodecError)
    assert error.operation is CodecOperation.DECODE
    assert error.line is not None
    assert error.column is not None


def test_decode_rejects_bytes_in_wrong_encoding() -> None:
    result = YamlCodec().decode(b"key: \xff\xfe")

    assert is_err(result)
    assert result.unwrap_err().operation is CodecOperation.DECODE


def test_decode_rejects_multiple_documents() -> None:
    result = YamlCodec().decode(b"a: 1\n---\nb: 2\n")

    assert is_err(result)


def test_encode_keeps_insertion_order_by_default() -> None:
    result = YamlCodec().encode({"zeta": 1, "alpha": {"nested": [1, 2]}})

    assert is_ok(result)
    assert result.unwrap() == b"zeta: 1\nalpha:\n  nested:\n  - 1\n  - 2\n"


def test_encode_honours_codec_settings() -> None:
    codec = YamlCodec(CodecSettings(sort_keys=True, indent=4))

    text = codec.encode({"zeta": 1, "alpha": {"nested": True}}).unwrap().decode("utf-8")

    assert text == "alpha:\n    nested: true\nzeta: 1\n"


def test_encode_writes_unicode_as_is() -> None:
    result = YamlCodec().encode({"greeting": "héllo"})

    assert result.unwrap() == "greeting: héllo\n".encode()


def test_encode_rejects_values_outside_the_document_tree() -> None:
    result = YamlCodec().encode({"bad": Opaque()})

    assert is_err(result)
    assert result.unwrap_err().operation is CodecOperation.ENCODE


def test_encode_value_dumps_models_to_plain_tree() -> None:
    result = YamlCodec().encode_value(Endpoint(host="localhost", port=80, tags=["a"]))

    assert result == Ok({"host": "localhost", "port": 80, "tags": ["a"]})


def test_encode_value_dumps_dataclasses_and_datetimes() -> None:
    codec = YamlCodec()

    assert codec.encode_value(Retry(attempts=3, backoff=0.5)) == Ok({"attempts": 3, "backoff": 0.5})
    assert codec.encode_value(datetime(2024, 1, 2, 3, 4, 5)) == Ok("2024-01-02T03:04:05")


def test_encode_value_rejects_unserializable_payload() -> None:
    result = YamlCodec().encode_value({"value": object()})

    assert is_err(result)
    assert result.unwrap_err().operation is CodecOperation.ENCODE_VALUE


def test_encode_value_rejects_types_without_schema() -> None:
    result = YamlCodec().encode_value(Opaque())

    assert is_err(result)
    assert result.unwrap_err().operation is CodecOperation.ENCODE_VALUE


def test_decode_value_validates_into_requested_type() -> None:
    result = YamlCodec().decode_value({"host": "example.org", "port": "443"}, Endpoint)

    assert result == Ok(Endpoint(host="example.org", port=443))


def test_decode_value_reports_failing_field() -> None:
    result = YamlCodec().decode_value({"host": "example.org", "port": "not-a-port"}, Endpoint)

    assert is_err(result)
    error = result.unwrap_err()
    assert error.operation is CodecOperation.DECODE_VALUE
    assert error.message.startswith("port:")


def test_decode_value_reports_missing_field() -> None:
    result = YamlCodec().decode_value({"host": "example.org"}, Endpoint)

    assert is_err(result)
    assert result.unwrap_err().message.startswith("port: Field required")


def test_decode_value_rejects_types_without_schema() -> None:
    result = YamlCodec().decode_value({}, Opaque)

    assert is_err(result)
    assert result.unwrap_err().operation is CodecOperation.DECODE_VALUE


def test_encoded_document_decodes_back_to_same_tree() -> None:
    codec = YamlCodec()
    tree = {
        "endpoint": codec.encode_value(Endpoint(host="h", port=1, tags=["x", "y"])).unwrap(),
        "retry": codec.encode_value(Retry(attempts=2, backoff=1.25)).unwrap(),
        "enabled": True,
        "nothing": None,
    }

    data = codec.encode(tree).unwrap()

    assert codec.decode(data) == Ok(tree)
    assert yaml.safe_load(data) == tree


def test_encode_value_rejects_non_finite_dataclass_field() -> None:
    result = YamlCodec().encode_value(Retry(attempts=1, backoff=float("nan")))

    assert is_err(result)
    error = result.unwrap_err()
    assert error.operation is CodecOperation.ENCODE_VALUE
    assert error.message == "Non-finite float nan cannot be stored"


def test_non_finite_floats_read_from_documents_survive_encode() -> None:
    codec = YamlCodec()

    tree = codec.decode(b"limit: .inf\n").unwrap()

    assert tree == {"limit": float("inf")}
    assert codec.encode(tree) == Ok(b"limit: .inf\n")


def test_codec_settings_reject_unknown_encoding() -> None:
    with pytest.raises(ValidationError, match="Unknown text encoding: utf-99"):
        CodecSettings(encoding="utf-99")


def test_codec_settings_accept_known_encoding() -> None:
    codec = YamlCodec(CodecSettings(encoding="utf-16"))

    data = codec.encode({"greeting": "héllo"}).unwrap()

    assert codec.decode(data) == Ok({"greeting": "héllo"})
