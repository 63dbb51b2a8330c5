"""Observability package.

Request-scoped resolver context, the per-context metrics accumulator,
structured logging, and the ASGI middleware that wires them per request.
"""

__all__ = [
    "middleware",
    "metrics",
    "logger",
    "context",
]
