"""Production entry point: serve the review analytics API with gunicorn."""

import os
import sys

from gunicorn.app.wsgiapp import run

DEFAULT_PORT = "8000"
DEFAULT_WORKERS = "4"
DEFAULT_THREADS = "2"
# Analytics aggregates over the full reviews table can be slow
DEFAULT_TIMEOUT = "120"


def gunicorn_argv() -> list[str]:
    """Build the gunicorn command line from the environment.

    Environment Variables:
    - PORT: Port to bind on 0.0.0.0 (default: 8000)
    - WEB_CONCURRENCY: Worker processes (default: 4)
    - GUNICORN_THREADS: Threads per worker (default: 2)
    - GUNICORN_TIMEOUT: Worker timeout in seconds (default: 120)
    """
    return [
        "gunicorn",
        "review_analytics.wsgi:application",
        "--bind",
        f"0.0.0.0:{os.getenv('PORT', DEFAULT_PORT)}",
        "--workers",
        os.getenv("WEB_CONCURRENCY", DEFAULT_WORKERS),
        "--threads",
        os.getenv("GUNICORN_THREADS", DEFAULT_THREADS),
        "--timeout",
        os.getenv("GUNICORN_TIMEOUT", DEFAULT_TIMEOUT),
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]


def main():
    """Start gunicorn; logs go to stdout/stderr for the container runtime."""
    sys.argv = gunicorn_argv()
    run()


if __name__ == "__main__":
    main()
