"""Per-thread request context used to correlate log records."""

import threading

_local = threading.local()


def set_request_id(request_id: str) -> None:
    """Bind the request ID to the current thread."""
    _local.request_id = request_id


def get_request_id() -> str | None:
    """Return the request ID bound to the current thread, if any."""
    return getattr(_local, "request_id", None)


def clear_request_id() -> None:
    """Unbind the request ID; called when a request finishes."""
    _local.__dict__.pop("request_id", None)
