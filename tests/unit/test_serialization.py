"""Payload encoding/decoding tests."""

from __future__ import annotations

from datetime import date
import json

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError
import pytest

from tagresult import (
    Failure,
    PublicError,
    Success,
    error,
    from_payload,
    normalize_error,
    ok,
    to_payload,
)

pytestmark = pytest.mark.unit


def test_success_payload() -> None:
    assert to_payload(ok({"id": 1, "name": "Ada"})) == {
        "status": "success",
        "data": {"id": 1, "name": "Ada"},
    }


def test_empty_success_payload() -> None:
    assert to_payload(ok()) == {"status": "success", "data": None}


def test_error_payload_exposes_only_the_public_message() -> None:
    internal = ConnectionError("password=hunter2")
    result = error(PublicError("Service unavailable", cause=internal), "UPSTREAM")

    payload = to_payload(result)

    assert payload == {
        "status": "error",
        "error": {"type": "PublicError", "message": "Service unavailable"},
        "tag": "UPSTREAM",
    }
    assert "hunter2" not in json.dumps(payload)


def test_coerced_value_payload() -> None:
    payload = to_payload(error(normalize_error("raw-string"), "Y"))

    assert payload["error"] == {"type": "ThrownValueError", "message": "raw-string"}


def test_decode_success() -> None:
    assert from_payload({"status": "success", "data": [1, 2]}) == Success([1, 2])


def test_decode_error_builds_public_error() -> None:
    result = from_payload(
        {
            "status": "error",
            "error": {"type": "KeyError", "message": "missing"},
            "tag": "NOT_FOUND",
        }
    )

    assert isinstance(result, Failure)
    assert result.tag == "NOT_FOUND"
    assert isinstance(result.error, PublicError)
    assert result.error.message == "missing"


def test_payload_survives_json_round_trip() -> None:
    original = error(ValueError("bad value"), "VALIDATION")

    decoded = from_payload(json.loads(json.dumps(to_payload(original))))

    assert to_payload(decoded)["error"]["message"] == "bad value"
    assert decoded.status == "error"


@pytest.mark.parametrize(
    "payload",
    [
        {"status": "pending"},
        {"status": "error", "error": {"type": "E", "message": "m"}},
        {"status": "success", "data": 1, "extra": True},
        {"data": 1},
    ],
)
def test_invalid_payloads_are_rejected(payload: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        from_payload(payload)


def test_non_result_is_rejected() -> None:
    with pytest.raises(TypeError):
        to_payload("not a result")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "payload",
    [
        {"status": "success", "data": {"items": [1, 2], "next": None}},
        {
            "status": "error",
            "error": {"type": "KeyError", "message": "missing"},
            "tag": "NOT_FOUND",
        },
        {"status": "error", "error": {"type": "E", "message": ""}, "tag": ""},
    ],
)
def test_decoded_payload_re_encodes_unchanged(payload: dict[str, object]) -> None:
    assert to_payload(from_payload(payload)) == payload


def test_decoded_error_keeps_type_name() -> None:
    result = from_payload(
        {"status": "error", "error": {"type": "KeyError", "message": "k"}, "tag": "T"}
    )

    assert isinstance(result, Failure)
    assert result.error.type_name == "KeyError"


def test_empty_tag_is_encoded() -> None:
    payload = to_payload(error(ValueError("bad"), ""))

    assert payload["tag"] == ""


def test_data_without_json_form_is_rejected() -> None:
    with pytest.raises(PydanticSerializationError):
        to_payload(ok(object()))


def test_data_is_encoded_in_json_form() -> None:
    payload = to_payload(ok({"day": date(2024, 1, 2)}))

    assert payload == {"status": "success", "data": {"day": "2024-01-02"}}
    assert from_payload(payload) == ok({"day": "2024-01-02"})
