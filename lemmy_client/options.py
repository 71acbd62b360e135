"""Configuration for a Lemmy client."""

import os

from pydantic import BaseModel, ConfigDict

from lemmy_client.exceptions import LemmyConfigError

_FALSE_VALUES = frozenset({"0", "false", "no"})


class ClientOptions(BaseModel):
    """Options for instantiating a ``LemmyClient``.

    Attributes:
        domain: Domain of the instance requests are sent to, without the
            scheme (``"lemmy.ml"``, not ``"https://lemmy.ml"``).
        secure: Use HTTPS when True, HTTP otherwise.
        jwt: Token sent with every request. Ignored for a request that
            carries its own token.
    """

    domain: str
    secure: bool = True
    jwt: str | None = None

    model_config = ConfigDict(validate_assignment=True)

    def with_jwt(self, jwt: str | None) -> None:
        """Set the default token used by every request."""
        self.jwt = jwt

    @classmethod
    def from_env(cls) -> "ClientOptions":
        """Create options from environment variables.

        Required environment variables:
            LEMMY_DOMAIN: Domain of the instance.

        Optional environment variables:
            LEMMY_SECURE: "0", "false" or "no" to use plain HTTP.
            LEMMY_JWT: Default token for every request.

        Raises:
            LemmyConfigError: If LEMMY_DOMAIN is missing or empty.
        """
        domain = os.environ.get("LEMMY_DOMAIN")
        if not domain:
            raise LemmyConfigError("LEMMY_DOMAIN is not set")

        secure = os.environ.get("LEMMY_SECURE", "1").strip().lower() not in _FALSE_VALUES
        jwt = os.environ.get("LEMMY_JWT") or None

        return cls(domain=domain, secure=secure, jwt=jwt)
