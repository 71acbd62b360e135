"""Tests for FetchBackend, driven by a fake fetch callable."""

import json

import pytest

from lemmy_client._internal.backends.fetch import FetchBackend
from lemmy_client.exceptions import LemmyApiError, LemmyOtherError
from lemmy_client.models import CreateComment, GetComments, GetCommentsResponse, SuccessResponse
from lemmy_client.options import ClientOptions
from lemmy_client.request import LemmyRequest
from lemmy_client.response import Err, Ok


class FakeResponse:
    def __init__(self, status, body):
        self.status = status
        self._body = body

    async def string(self):
        return self._body


class FakeFetch:
    """Records calls and answers with a fixed response or error."""

    def __init__(self, response=None, error=None, during=None):
        self.calls = []
        self._response = response
        self._error = error
        self._during = during

    async def __call__(self, url, **init):
        self.calls.append((url, init))
        if self._during is not None:
            self._during()
        if self._error is not None:
            raise self._error
        return self._response


class FakeSignal:
    def __init__(self):
        self.aborted = False


class FakeAbortController:
    def __init__(self):
        self.signal = FakeSignal()

    def abort(self):
        self.signal.aborted = True


@pytest.fixture
def options():
    return ClientOptions(domain="lemmy.example", secure=False, jwt="client-token")


class TestFetchBackendRequests:
    """Tests for request encoding."""

    async def test_get_query_string(self, options):
        """Should append the form to the URL and send no body."""
        fetch = FakeFetch(FakeResponse(200, json.dumps({"comments": []})))
        backend = FetchBackend(options, fetch=fetch)

        result = await backend.make_request(
            "GET", "comment/list", LemmyRequest(GetComments(post_id=7)), {}, GetCommentsResponse
        )

        assert result == Ok(GetCommentsResponse(comments=[]))
        url, init = fetch.calls[0]
        assert url == "http://lemmy.example/api/v3/comment/list?post_id=7"
        assert init["method"] == "GET"
        assert "body" not in init

    async def test_post_json_body(self, options):
        """Should send the form as a JSON body."""
        fetch = FakeFetch(FakeResponse(200, '{"success": true}'))
        backend = FetchBackend(options, fetch=fetch)

        await backend.make_request(
            "POST",
            "comment",
            LemmyRequest(CreateComment(content="hi", post_id=7)),
            {},
            SuccessResponse,
        )

        url, init = fetch.calls[0]
        assert url == "http://lemmy.example/api/v3/comment"
        assert json.loads(init["body"]) == {"content": "hi", "post_id": 7}
        assert init["headers"]["Content-Type"] == "application/json"

    async def test_headers_and_token(self, options):
        """Should send caller headers and the per-call token, with no user agent."""
        fetch = FakeFetch(FakeResponse(200, '{"success": true}'))
        backend = FetchBackend(options, fetch=fetch)

        await backend.make_request(
            "GET", "site", LemmyRequest.empty("call-token"), {"X-Test": "1"}, SuccessResponse
        )

        headers = fetch.calls[0][1]["headers"]
        assert headers["X-Test"] == "1"
        assert headers["Authorization"] == "Bearer call-token"
        assert not any(name.lower() == "user-agent" for name in headers)

    async def test_unsupported_method(self, options):
        """Should refuse methods other than GET, POST and PUT."""
        backend = FetchBackend(options, fetch=FakeFetch())
        with pytest.raises(AssertionError):
            await backend.make_request(
                "PATCH", "site", LemmyRequest(), {}, SuccessResponse  # type: ignore[arg-type]
            )


class TestFetchBackendResults:
    """Tests for response handling."""

    async def test_structured_error(self, options):
        """Should decode an error body into LemmyApiError."""
        fetch = FakeFetch(FakeResponse(400, '{"error": "couldnt_find_post"}'))
        backend = FetchBackend(options, fetch=fetch)

        result = await backend.make_request("GET", "site", LemmyRequest(), {}, SuccessResponse)

        assert isinstance(result, Err)
        assert isinstance(result.error, LemmyApiError)
        assert result.error.status_code == 400

    async def test_fetch_failure(self, options):
        """Should wrap a fetch failure in LemmyOtherError."""
        fetch = FakeFetch(error=OSError("Failed to fetch"))
        backend = FetchBackend(options, fetch=fetch)

        result = await backend.make_request("GET", "site", LemmyRequest(), {}, SuccessResponse)

        assert isinstance(result, Err)
        assert isinstance(result.error, LemmyOtherError)
        assert isinstance(result.error.cause, OSError)


class TestFetchBackendCancellation:
    """Tests for abort on component teardown."""

    async def test_no_signal_without_hook(self, options):
        """Should not create an abort controller without a cleanup hook."""
        fetch = FakeFetch(FakeResponse(200, '{"success": true}'))
        backend = FetchBackend(options, fetch=fetch)

        await backend.make_request("GET", "site", LemmyRequest(), {}, SuccessResponse)

        assert "signal" not in fetch.calls[0][1]

    async def test_registers_abort_on_cleanup(self, options):
        """Should pass a signal and register the abort callback."""
        cleanups = []
        controller = FakeAbortController()
        fetch = FakeFetch(FakeResponse(200, '{"success": true}'))
        backend = FetchBackend(
            options,
            fetch=fetch,
            on_cleanup=cleanups.append,
            abort_controller_factory=lambda: controller,
        )

        result = await backend.make_request("GET", "site", LemmyRequest(), {}, SuccessResponse)

        assert isinstance(result, Ok)
        assert fetch.calls[0][1]["signal"] is controller.signal
        assert len(cleanups) == 1

    async def test_cleanup_after_completion_is_noop(self, options):
        """Should not abort a request that already finished."""
        cleanups = []
        controllers = []

        def new_controller():
            controllers.append(FakeAbortController())
            return controllers[-1]

        fetch = FakeFetch(FakeResponse(200, '{"success": true}'))
        backend = FetchBackend(
            options,
            fetch=fetch,
            on_cleanup=cleanups.append,
            abort_controller_factory=new_controller,
        )

        for _ in range(3):
            await backend.make_request("GET", "site", LemmyRequest(), {}, SuccessResponse)
        for cleanup in cleanups:
            cleanup()

        assert len(controllers) == 3
        assert all(c.signal.aborted is False for c in controllers)

    async def test_response_after_teardown_discarded(self, options):
        """Should discard a response that arrives after teardown."""
        cleanups = []
        fetch = FakeFetch(
            FakeResponse(200, '{"success": true}'),
            during=lambda: cleanups[0](),
        )
        backend = FetchBackend(
            options,
            fetch=fetch,
            on_cleanup=cleanups.append,
            abort_controller_factory=FakeAbortController,
        )

        result = await backend.make_request("GET", "site", LemmyRequest(), {}, SuccessResponse)

        assert isinstance(result, Err)
        assert isinstance(result.error, LemmyOtherError)
        assert "aborted" in str(result.error)

    async def test_aborted_fetch(self, options):
        """Should report an aborted fetch as aborted."""
        cleanups = []
        fetch = FakeFetch(error=RuntimeError("AbortError"), during=lambda: cleanups[0]())
        backend = FetchBackend(
            options,
            fetch=fetch,
            on_cleanup=cleanups.append,
            abort_controller_factory=FakeAbortController,
        )

        result = await backend.make_request("GET", "site", LemmyRequest(), {}, SuccessResponse)

        assert isinstance(result, Err)
        assert str(result.error).startswith("Request aborted")
