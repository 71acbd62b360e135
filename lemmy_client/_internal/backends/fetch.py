"""Browser transport backend built on the Pyodide fetch bridge.

Only usable inside a Pyodide runtime, where ``pyodide.http.pyfetch`` and the
``js`` module exist. Both are imported when first needed.
"""

import json
from collections.abc import Awaitable, Callable
from typing import Any

from lemmy_client._internal.backends.base import LemmyBackend, Method
from lemmy_client.exceptions import LemmyOtherError
from lemmy_client.options import ClientOptions

Fetch = Callable[..., Awaitable[Any]]
CleanupHook = Callable[[Callable[[], None]], None]


class FetchBackend(LemmyBackend):
    """Backend sending requests through the browser's ``fetch``.

    Args:
        options: Client options.
        fetch: A ``pyfetch`` compatible callable. Defaults to
            ``pyodide.http.pyfetch``.
        on_cleanup: Hook of the owning UI component; it receives a callback
            to run when the component is torn down. When given, each request
            gets an ``AbortController`` and is aborted on teardown. The
            callback does nothing once its request has finished, and it
            drops its controller then. Without the hook requests cannot be
            cancelled.
        abort_controller_factory: Builds abort controllers. Defaults to
            ``js.AbortController.new``.
        debug: Enable debug logging to stderr.
    """

    # The browser owns the User-Agent header.
    user_agent = None

    def __init__(
        self,
        options: ClientOptions,
        *,
        fetch: Fetch | None = None,
        on_cleanup: CleanupHook | None = None,
        abort_controller_factory: Callable[[], Any] | None = None,
        debug: bool = False,
    ) -> None:
        super().__init__(options, debug=debug)
        self._fetch = fetch
        self._on_cleanup = on_cleanup
        self._abort_controller_factory = abort_controller_factory

    def _get_fetch(self) -> Fetch:
        if self._fetch is None:
            from pyodide.http import pyfetch

            self._fetch = pyfetch
        return self._fetch

    def _new_abort_controller(self) -> Any:
        if self._abort_controller_factory is None:
            from js import AbortController

            self._abort_controller_factory = AbortController.new
        return self._abort_controller_factory()

    async def _send(
        self,
        method: Method,
        url: str,
        headers: dict[str, str],
        json_body: dict[str, Any] | None,
    ) -> tuple[int, str]:
        fetch = self._get_fetch()
        init: dict[str, Any] = {"method": method, "headers": headers}
        if json_body is not None:
            init["body"] = json.dumps(json_body)
            if not any(name.lower() == "content-type" for name in headers):
                headers["Content-Type"] = "application/json"

        controller = None
        # Controllers still in flight; the cleanup callback ignores finished ones.
        pending: list[Any] = []
        if self._on_cleanup is not None:
            controller = self._new_abort_controller()
            init["signal"] = controller.signal
            pending.append(controller)
            self._on_cleanup(lambda: _abort_all(pending))

        try:
            response = await fetch(url, **init)
            content = await response.string()
        except Exception as e:
            if _aborted(controller):
                raise LemmyOtherError("Request aborted", cause=e) from e
            raise LemmyOtherError("Request failed", cause=e) from e
        finally:
            pending.clear()

        # A response that lands after teardown is discarded.
        if _aborted(controller):
            raise LemmyOtherError("Request aborted")
        return response.status, content


def _abort_all(controllers: list[Any]) -> None:
    for controller in controllers:
        controller.abort()


def _aborted(controller: Any) -> bool:
    return controller is not None and bool(controller.signal.aborted)
