"""Tests for the request envelope."""

import pytest

from lemmy_client.models import GetPosts, Login
from lemmy_client.request import LemmyRequest, as_request


class TestLemmyRequest:
    """Tests for LemmyRequest."""

    def test_defaults(self):
        """Should carry no form and no token by default."""
        request = LemmyRequest()
        assert request.body is None
        assert request.jwt is None

    def test_empty_with_token(self):
        """Should build a form-less request with a token."""
        request = LemmyRequest.empty("abc")
        assert request.body is None
        assert request.jwt == "abc"


class TestAsRequest:
    """Tests for as_request()."""

    def test_bare_form(self):
        """Should wrap a bare form without a token."""
        form = Login(username_or_email="me", password="pw")
        request = as_request(form)
        assert request.body is form
        assert request.jwt is None

    def test_request_passthrough(self):
        """Should return an existing request unchanged."""
        request = LemmyRequest(body=GetPosts(), jwt="abc")
        assert as_request(request) is request

    def test_none(self):
        """Should build an empty request from None."""
        request = as_request(None)
        assert request.body is None
        assert request.jwt is None

    def test_rejects_non_model(self):
        """Should reject forms that are not pydantic models."""
        with pytest.raises(TypeError):
            as_request({"username_or_email": "me"})  # type: ignore[arg-type]
