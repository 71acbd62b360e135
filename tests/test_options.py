"""Tests for ClientOptions."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from lemmy_client.exceptions import LemmyConfigError
from lemmy_client.options import ClientOptions


class TestClientOptions:
    """Tests for ClientOptions construction."""

    def test_defaults(self):
        """Should default to HTTPS without a token."""
        options = ClientOptions(domain="lemmy.ml")
        assert options.domain == "lemmy.ml"
        assert options.secure is True
        assert options.jwt is None

    def test_with_jwt(self):
        """Should set the default token in place."""
        options = ClientOptions(domain="lemmy.ml", secure=False)
        options.with_jwt("abc")
        assert options.jwt == "abc"

        options.with_jwt(None)
        assert options.jwt is None

    def test_assignment_is_validated(self):
        """Should reject a non-string token."""
        options = ClientOptions(domain="lemmy.ml")
        with pytest.raises(ValidationError):
            options.jwt = 123  # type: ignore[assignment]

    def test_domain_not_validated(self):
        """Should accept any domain string; bad ones fail at call time."""
        options = ClientOptions(domain="https://lemmy.ml")
        assert options.domain == "https://lemmy.ml"


class TestClientOptionsFromEnv:
    """Tests for ClientOptions.from_env()."""

    def test_from_env_with_all_vars(self):
        """Should read domain, scheme and token."""
        env = {
            "LEMMY_DOMAIN": "lemmy.example",
            "LEMMY_SECURE": "false",
            "LEMMY_JWT": "token-123",
        }
        with patch.dict(os.environ, env, clear=True):
            options = ClientOptions.from_env()
        assert options.domain == "lemmy.example"
        assert options.secure is False
        assert options.jwt == "token-123"

    def test_from_env_defaults(self):
        """Should default to HTTPS without a token."""
        with patch.dict(os.environ, {"LEMMY_DOMAIN": "lemmy.example"}, clear=True):
            options = ClientOptions.from_env()
        assert options.secure is True
        assert options.jwt is None

    @pytest.mark.parametrize("value", ["0", "false", "FALSE", "no"])
    def test_from_env_insecure_values(self, value):
        """Should select HTTP for falsy LEMMY_SECURE values."""
        env = {"LEMMY_DOMAIN": "lemmy.example", "LEMMY_SECURE": value}
        with patch.dict(os.environ, env, clear=True):
            assert ClientOptions.from_env().secure is False

    def test_from_env_empty_jwt(self):
        """Should treat an empty token as unset."""
        env = {"LEMMY_DOMAIN": "lemmy.example", "LEMMY_JWT": ""}
        with patch.dict(os.environ, env, clear=True):
            assert ClientOptions.from_env().jwt is None

    def test_from_env_missing_domain_raises(self):
        """Should raise LemmyConfigError when LEMMY_DOMAIN is missing."""
        with patch.dict(os.environ, {}, clear=True), pytest.raises(LemmyConfigError):
            ClientOptions.from_env()
