"""Plain-text response writer with access logging."""

from starlette.requests import Request
from starlette.responses import Response

from state_proxy.observability import (
    LogLevel,
    Timer,
    emit_counter,
    emit_timer,
    get_logger,
)

logger = get_logger("state_proxy.access")


def remote_address(request: Request) -> str:
    """Format the client address as host:port."""
    if request.client is None:
        return "-"
    return f"{request.client.host}:{request.client.port}"


def protocol_version(request: Request) -> str:
    """Protocol string such as HTTP/1.1."""
    return f"HTTP/{request.scope.get('http_version', '1.1')}"


def write_response(
    request: Request,
    status_code: int,
    body: str,
    *,
    handler: str,
    timer: Timer | None = None,
    error: BaseException | None = None,
) -> Response:
    """Build the response for a handled request and log it.

    Every handler returns through here, so every handled request produces
    exactly one access log line.

    Args:
        request: The incoming request
        status_code: HTTP status code
        body: Response body, sent followed by a newline
        handler: Handler name used in logs and metric labels
        timer: Timer started when the request arrived
        error: Store error behind a 500 response

    Returns:
        text/plain response
    """
    remote = remote_address(request)
    proto = protocol_version(request)
    path = request.url.path
    duration_ms = timer.duration_ms if timer is not None else None

    context = {
        "remote_addr": remote,
        "method": request.method,
        "path": path,
        "protocol": proto,
        "status": status_code,
        "handler": handler,
    }
    level = LogLevel.ERROR if status_code >= 500 else LogLevel.INFO
    logger.log(
        level,
        f"{remote} {request.method} {path} {proto} {status_code}",
        context=context,
        error=error,
        duration_ms=duration_ms,
    )

    labels = {"handler": handler, "status": status_code}
    emit_counter("state_proxy.responses", labels)
    if duration_ms is not None:
        emit_timer("state_proxy.request_duration_ms", duration_ms, labels)

    # Bare media type, without the charset parameter Starlette appends to text/*.
    return Response(
        body + "\n",
        status_code=status_code,
        headers={"Content-Type": "text/plain"},
    )
