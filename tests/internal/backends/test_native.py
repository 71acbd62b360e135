"""Tests for HttpxBackend and the shared request path."""

import json

import httpx
import pytest
import respx

from lemmy_client._internal.backends.native import HttpxBackend
from lemmy_client._internal.http import USER_AGENT
from lemmy_client.exceptions import LemmyApiError, LemmyOtherError
from lemmy_client.models import (
    CreatePost,
    GetPosts,
    GetPostsResponse,
    PostResponse,
    SavePost,
    SuccessResponse,
)
from lemmy_client.options import ClientOptions
from lemmy_client.request import LemmyRequest
from lemmy_client.response import Err, Ok

BASE = "https://lemmy.example/api/v3"

POST_VIEW = {
    "post": {"id": 1, "name": "Hello", "creator_id": 2, "community_id": 3},
    "creator": {"id": 2, "name": "alice"},
    "community": {"id": 3, "name": "python", "title": "Python"},
}


@pytest.fixture
def options():
    return ClientOptions(domain="lemmy.example", secure=True)


@pytest.fixture
async def backend(options):
    backend = HttpxBackend(options)
    yield backend
    await backend.aclose()


class TestHttpxBackendGet:
    """Tests for GET requests."""

    @respx.mock
    async def test_form_sent_as_query(self, backend):
        """Should encode the form as a query string and send no body."""
        route = respx.get(f"{BASE}/post/list").mock(
            return_value=httpx.Response(200, json={"posts": [POST_VIEW]})
        )

        result = await backend.make_request(
            "GET",
            "post/list",
            LemmyRequest(GetPosts(sort="New", limit=5, saved_only=False)),
            {},
            GetPostsResponse,
        )

        assert isinstance(result, Ok)
        assert result.value.posts[0].post.name == "Hello"
        request = route.calls.last.request
        assert request.url.params["sort"] == "New"
        assert request.url.params["limit"] == "5"
        assert request.url.params["saved_only"] == "false"
        assert "type_" not in request.url.params
        assert request.content == b""

    @respx.mock
    async def test_no_form(self, backend):
        """Should send no query string without a form."""
        route = respx.get(f"{BASE}/user/validate_auth").mock(
            return_value=httpx.Response(200, json={"success": True})
        )

        result = await backend.make_request(
            "GET", "user/validate_auth", LemmyRequest(), {}, SuccessResponse
        )

        assert result == Ok(SuccessResponse(success=True))
        assert route.calls.last.request.url.query == b""


class TestHttpxBackendBody:
    """Tests for POST and PUT requests."""

    @respx.mock
    async def test_post_json_body(self, backend):
        """Should send the form as JSON and append no query string."""
        route = respx.post(f"{BASE}/post").mock(
            return_value=httpx.Response(200, json={"post_view": POST_VIEW})
        )

        result = await backend.make_request(
            "POST",
            "post",
            LemmyRequest(CreatePost(name="Hello", community_id=3)),
            {},
            PostResponse,
        )

        assert isinstance(result, Ok)
        assert result.value.post_view.post.id == 1

        request = route.calls.last.request
        assert request.url.query == b""
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.content) == {"name": "Hello", "community_id": 3}

    @respx.mock
    async def test_put_json_body(self, backend):
        """Should send PUT forms as JSON."""
        route = respx.put(f"{BASE}/post/save").mock(
            return_value=httpx.Response(200, json={"success": True})
        )

        await backend.make_request(
            "PUT", "post/save", LemmyRequest(SavePost(post_id=1, save=True)), {}, SuccessResponse
        )

        assert json.loads(route.calls.last.request.content) == {"post_id": 1, "save": True}

    @respx.mock
    async def test_post_without_form(self, backend):
        """Should send no body for a form-less POST."""
        route = respx.post(f"{BASE}/user/logout").mock(
            return_value=httpx.Response(200, json={"success": True})
        )

        result = await backend.make_request(
            "POST", "user/logout", LemmyRequest(), {}, SuccessResponse
        )

        assert isinstance(result, Ok)
        assert route.calls.last.request.content == b""


class TestHttpxBackendHeaders:
    """Tests for header and token handling."""

    @respx.mock
    async def test_default_user_agent(self, backend):
        """Should send the default user agent."""
        route = respx.get(f"{BASE}/site").mock(
            return_value=httpx.Response(200, json={"success": True})
        )

        await backend.make_request("GET", "site", LemmyRequest(), {}, SuccessResponse)

        request = route.calls.last.request
        assert request.headers.get_list("user-agent") == [USER_AGENT]

    @respx.mock
    async def test_caller_user_agent(self, backend):
        """Should send only the caller's user agent."""
        route = respx.get(f"{BASE}/site").mock(
            return_value=httpx.Response(200, json={"success": True})
        )

        await backend.make_request(
            "GET", "site", LemmyRequest(), {"User-Agent": "my-app/1.0"}, SuccessResponse
        )

        request = route.calls.last.request
        assert request.headers.get_list("user-agent") == ["my-app/1.0"]

    @respx.mock
    async def test_request_token_overrides_default(self, options):
        """Should prefer the per-call token over the client default."""
        options.with_jwt("client-token")
        backend = HttpxBackend(options)
        route = respx.get(f"{BASE}/site").mock(
            return_value=httpx.Response(200, json={"success": True})
        )

        await backend.make_request(
            "GET", "site", LemmyRequest.empty("call-token"), {}, SuccessResponse
        )
        assert route.calls.last.request.headers["authorization"] == "Bearer call-token"

        await backend.make_request("GET", "site", LemmyRequest(), {}, SuccessResponse)
        assert route.calls.last.request.headers["authorization"] == "Bearer client-token"
        await backend.aclose()

    @respx.mock
    async def test_no_token(self, backend):
        """Should send no Authorization header without any token."""
        route = respx.get(f"{BASE}/site").mock(
            return_value=httpx.Response(200, json={"success": True})
        )

        await backend.make_request("GET", "site", LemmyRequest(), {}, SuccessResponse)

        assert "authorization" not in route.calls.last.request.headers

    @respx.mock
    async def test_extra_headers(self, backend):
        """Should send caller headers."""
        route = respx.get(f"{BASE}/site").mock(
            return_value=httpx.Response(200, json={"success": True})
        )

        await backend.make_request(
            "GET", "site", LemmyRequest(), {"Accept-Language": "fr"}, SuccessResponse
        )

        assert route.calls.last.request.headers["accept-language"] == "fr"


class TestHttpxBackendErrors:
    """Tests for error outcomes."""

    @respx.mock
    async def test_structured_error(self, backend):
        """Should return the server's error as LemmyApiError."""
        respx.get(f"{BASE}/site").mock(
            return_value=httpx.Response(400, json={"error": "not_logged_in"})
        )

        result = await backend.make_request("GET", "site", LemmyRequest(), {}, SuccessResponse)

        assert isinstance(result, Err)
        assert isinstance(result.error, LemmyApiError)
        assert result.error.error == "not_logged_in"
        assert result.error.status_code == 400

    @respx.mock
    async def test_connection_error(self, backend):
        """Should wrap a connection failure in LemmyOtherError."""
        respx.get(f"{BASE}/site").mock(side_effect=httpx.ConnectError("connection failed"))

        result = await backend.make_request("GET", "site", LemmyRequest(), {}, SuccessResponse)

        assert isinstance(result, Err)
        assert isinstance(result.error, LemmyOtherError)
        assert isinstance(result.error.cause, httpx.ConnectError)

    @respx.mock
    async def test_timeout(self, backend):
        """Should wrap a timeout in LemmyOtherError."""
        respx.get(f"{BASE}/site").mock(side_effect=httpx.ReadTimeout("timeout"))

        result = await backend.make_request("GET", "site", LemmyRequest(), {}, SuccessResponse)

        assert isinstance(result, Err)
        assert isinstance(result.error, LemmyOtherError)
        assert "timed out" in str(result.error)

    @respx.mock
    async def test_non_ascii_token(self, backend):
        """Should return an unencodable token as LemmyOtherError."""
        route = respx.get(f"{BASE}/site").mock(
            return_value=httpx.Response(200, json={"success": True})
        )

        result = await backend.make_request(
            "GET", "site", LemmyRequest(jwt="tök"), {}, SuccessResponse
        )

        assert isinstance(result, Err)
        assert isinstance(result.error, LemmyOtherError)
        assert "Invalid header value" in str(result.error)
        assert isinstance(result.error.cause, UnicodeEncodeError)
        assert route.call_count == 0

    @respx.mock
    async def test_non_ascii_header(self, backend):
        """Should return an unencodable caller header as LemmyOtherError."""
        respx.get(f"{BASE}/site").mock(return_value=httpx.Response(200, json={"success": True}))

        result = await backend.make_request(
            "GET", "site", LemmyRequest(), {"X-Name": "Zoë"}, SuccessResponse
        )

        assert isinstance(result, Err)
        assert isinstance(result.error, LemmyOtherError)
        assert isinstance(result.error.cause, UnicodeEncodeError)

    @respx.mock
    async def test_undecodable_body(self, backend):
        """Should wrap a non-JSON body in LemmyOtherError."""
        respx.get(f"{BASE}/site").mock(return_value=httpx.Response(502, text="Bad Gateway"))

        result = await backend.make_request("GET", "site", LemmyRequest(), {}, SuccessResponse)

        assert isinstance(result, Err)
        assert isinstance(result.error, LemmyOtherError)
        assert result.error.status_code == 502

    @respx.mock
    async def test_one_round_trip(self, backend):
        """Should not retry a failed request."""
        route = respx.get(f"{BASE}/site").mock(return_value=httpx.Response(500, text="oops"))

        await backend.make_request("GET", "site", LemmyRequest(), {}, SuccessResponse)

        assert route.call_count == 1


class TestHttpxBackendContract:
    """Tests for programming-time contract violations."""

    async def test_unsupported_method(self, backend):
        """Should refuse methods other than GET, POST and PUT."""
        with pytest.raises(AssertionError):
            await backend.make_request(
                "DELETE", "post", LemmyRequest(), {}, SuccessResponse  # type: ignore[arg-type]
            )

    async def test_unregistered_response_type(self, backend):
        """Should refuse response types that were not registered."""
        with pytest.raises(TypeError):
            await backend.make_request("GET", "site", LemmyRequest(), {}, dict)


class TestHttpxBackendLifecycle:
    """Tests for client ownership."""

    async def test_closes_owned_client(self, options):
        """Should close a client it created."""
        backend = HttpxBackend(options)
        await backend.aclose()
        assert backend._client.is_closed

    async def test_leaves_borrowed_client_open(self, options):
        """Should leave a caller-supplied client open."""
        client = httpx.AsyncClient()
        async with HttpxBackend(options, client=client):
            pass
        assert not client.is_closed
        await client.aclose()
