"""HTTP route handlers for the state endpoints.

Each handler translates one request into a single store call and maps the
outcome to a plain-text response via ``write_response``.
"""

import functools
from collections.abc import Awaitable, Callable

from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Route

from state_proxy.observability import RequestContext, Timer
from state_proxy.protocols import Failed, Found, NotFound, StateStore
from state_proxy.server.responses import write_response

REQUEST_ID_HEADER = "X-Request-ID"

Handler = Callable[[Request], Awaitable[Response]]


def handler(name: str) -> Callable[[Handler], Handler]:
    """Decorator giving a handler its request context.

    Sets the request id (from the X-Request-ID header, or generated) for
    every log line of the request, starts the request timer and records the
    handler name for the access log.
    """

    def decorator(func: Handler) -> Handler:
        @functools.wraps(func)
        async def wrapper(request: Request) -> Response:
            request.state.handler = name
            async with RequestContext(request_id=request.headers.get(REQUEST_ID_HEADER)) as ctx:
                with Timer() as timer:
                    request.state.timer = timer
                    response = await func(request)
            response.headers[REQUEST_ID_HEADER] = ctx.request_id
            return response

        return wrapper

    return decorator


def respond(
    request: Request,
    status_code: int,
    body: str,
    error: BaseException | None = None,
) -> Response:
    """Send a response through the access-logging writer."""
    return write_response(
        request,
        status_code,
        body,
        handler=request.state.handler,
        timer=request.state.timer,
        error=error,
    )


def create_routes(store: StateStore) -> list[Route]:
    """Create HTTP routes backed by a state store.

    Args:
        store: The connected store shared by all requests

    Returns:
        List of Starlette routes
    """

    @handler("health")
    async def health(request: Request) -> Response:
        """Health check endpoint."""
        result = await store.ping()
        if isinstance(result, Failed):
            return respond(request, 500, "Failed to connect to store", result.error)
        return respond(request, 200, "Service is up")

    @handler("retrieve")
    async def retrieve(request: Request) -> Response:
        """Return the value stored under a key."""
        key = request.path_params["key"]
        result = await store.get(key)

        if isinstance(result, NotFound):
            return respond(request, 404, "Key not found")
        if isinstance(result, Found):
            return respond(request, 200, result.value)
        return respond(request, 500, f"Failed to retrieve {key}", result.error)

    @handler("store")
    async def store_value(request: Request) -> Response:
        """Store a value under a key and echo the value."""
        key = request.path_params["key"]
        value = request.path_params["value"]
        result = await store.set(key, value)

        if isinstance(result, Failed):
            return respond(request, 500, f"Failed to store {key}", result.error)
        return respond(request, 200, value)

    return [
        Route("/health", health, methods=["GET"]),
        Route("/state/{key}", retrieve, methods=["GET"]),
        Route("/state/{key}/", retrieve, methods=["GET"]),
        Route("/state/{key}/{value}", store_value, methods=["POST"]),
    ]
