"""Tests for the result envelope and response decoding."""

import json

import pytest

from lemmy_client.exceptions import LemmyApiError, LemmyOtherError
from lemmy_client.models import (
    GetUnreadCountResponse,
    LoginResponse,
    LoginToken,
    SuccessResponse,
)
from lemmy_client.models.errors import ErrorKind
from lemmy_client.response import Err, Ok, decode_response


class TestOkErr:
    """Tests for the Ok and Err helpers."""

    def test_ok(self):
        """Ok should expose and unwrap its value."""
        result = Ok(5)
        assert result.is_ok() is True
        assert result.is_err() is False
        assert result.unwrap() == 5
        assert result.unwrap_or(0) == 5

    def test_err(self):
        """Err should raise its error when unwrapped."""
        error = LemmyApiError("not_logged_in")
        result = Err(error)
        assert result.is_ok() is False
        assert result.is_err() is True
        assert result.unwrap_or(0) == 0
        with pytest.raises(LemmyApiError) as exc_info:
            result.unwrap()
        assert exc_info.value is error

    @pytest.mark.parametrize("cls", [Ok, Err])
    def test_public_methods_documented(self, cls):
        """Ok and Err should document their public helpers."""
        assert cls.__doc__
        for name in ("is_ok", "is_err", "unwrap", "unwrap_or"):
            assert getattr(cls, name).__doc__, name


class TestDecodeSuccess:
    """Tests for decoding success payloads."""

    def test_login_success(self):
        """Should decode a login response into Ok."""
        result = decode_response(b'{"jwt": "abc"}', LoginResponse)
        assert isinstance(result, Ok)
        assert result.value.jwt == "abc"
        assert result.value.registration_created is False
        assert result.value.verify_email_sent is False

    def test_full_payload(self):
        """Should decode every field of a success payload."""
        body = json.dumps({"replies": 1, "mentions": 2, "private_messages": 3})
        result = decode_response(body, GetUnreadCountResponse)
        assert result == Ok(GetUnreadCountResponse(replies=1, mentions=2, private_messages=3))

    def test_unknown_fields_kept(self):
        """Should keep fields added by newer instances."""
        result = decode_response(b'{"success": true, "extra": 1}', SuccessResponse)
        assert isinstance(result, Ok)
        assert result.value.success is True
        assert result.value.model_extra == {"extra": 1}

    def test_list_response(self):
        """Should decode a list of models."""
        body = b'[{"user_id": 1, "published": "2024-01-01T00:00:00Z"}]'
        result = decode_response(body, list[LoginToken])
        assert isinstance(result, Ok)
        assert result.value[0].user_id == 1

    def test_string_response(self):
        """Should decode a plain string response."""
        assert decode_response(b'"pong"', str) == Ok("pong")

    def test_success_with_error_field_and_more(self):
        """Should not treat an object with extra keys beside error as an error."""
        body = b'{"error": "x", "success": true}'
        result = decode_response(body, SuccessResponse)
        assert isinstance(result, Ok)
        assert result.value.success is True


class TestDecodeError:
    """Tests for decoding structured API errors."""

    def test_error_shape(self):
        """Should decode an error payload into LemmyApiError."""
        result = decode_response(b'{"error": "incorrect_login"}', LoginResponse, status_code=400)
        assert isinstance(result, Err)
        assert isinstance(result.error, LemmyApiError)
        assert result.error.kind is ErrorKind.INCORRECT_LOGIN
        assert result.error.status_code == 400

    def test_error_before_permissive_success(self):
        """Should prefer the error shape over a success type it also satisfies."""
        result = decode_response(b'{"error": "not_logged_in"}', LoginResponse)
        assert isinstance(result, Err)
        assert result.error == LemmyApiError("not_logged_in")

    def test_error_with_message(self):
        """Should keep the message attached to an error."""
        body = b'{"error": "email_send_failed", "message": "smtp"}'
        result = decode_response(body, SuccessResponse)
        assert isinstance(result, Err)
        assert result.error.message == "smtp"

    def test_unknown_error_code(self):
        """Should decode error codes the client does not know."""
        result = decode_response(b'{"error": "brand_new_error"}', SuccessResponse)
        assert isinstance(result, Err)
        assert result.error.error == "brand_new_error"
        assert result.error.kind is None

    def test_status_code_does_not_select_variant(self):
        """A success payload with an error status should still be Ok."""
        result = decode_response(b'{"success": true}', SuccessResponse, status_code=500)
        assert isinstance(result, Ok)


class TestDecodeFailure:
    """Tests for bodies matching neither shape."""

    def test_invalid_json(self):
        """Should wrap a JSON parse error in LemmyOtherError."""
        result = decode_response(b"<html>Bad Gateway</html>", SuccessResponse, status_code=502)
        assert isinstance(result, Err)
        assert isinstance(result.error, LemmyOtherError)
        assert result.error.status_code == 502
        assert isinstance(result.error.cause, ValueError)

    def test_empty_body(self):
        """Should treat an empty body as a decode failure."""
        result = decode_response(b"", SuccessResponse)
        assert isinstance(result, Err)
        assert isinstance(result.error, LemmyOtherError)

    def test_shape_mismatch(self):
        """Should wrap a validation error in LemmyOtherError."""
        result = decode_response(b'{"unexpected": 1}', SuccessResponse)
        assert isinstance(result, Err)
        assert isinstance(result.error, LemmyOtherError)
        assert "SuccessResponse" in str(result.error)

    def test_non_string_error_field(self):
        """Should not accept a non-string error code as a structured error."""
        result = decode_response(b'{"error": 5}', SuccessResponse)
        assert isinstance(result, Err)
        assert isinstance(result.error, LemmyOtherError)
