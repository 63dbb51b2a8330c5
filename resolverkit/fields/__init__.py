"""Field declarations and the output formatter built on them."""

__all__ = [
    "definition",
    "format",
]
