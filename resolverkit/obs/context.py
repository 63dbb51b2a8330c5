"""Request context helpers.

``ResolverContext`` is the mutable bag passed explicitly to every resolver.
One is created per request (or per logical operation) by the caller and
dropped afterwards; nothing here is shared between requests.
"""

from contextvars import ContextVar
from typing import Any, Dict, Optional

from resolverkit.obs.metrics import ResolverMetrics


# Public ContextVars (names are stable API)
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


class ResolverContext:
    """Resolver metrics plus any extra request properties."""

    def __init__(self, resolver_metrics: Optional[ResolverMetrics] = None, **props: Any):
        self.resolver_metrics = resolver_metrics if resolver_metrics is not None else ResolverMetrics()
        self.props: Dict[str, Any] = dict(props)

    def get(self, key: str, default: Any = None) -> Any:
        return self.props.get(key, default)

    def __repr__(self) -> str:
        return f"ResolverContext(props={self.props!r}, resolvers={self.resolver_metrics.names()!r})"


def make_context(**props: Any) -> ResolverContext:
    """Create a fresh context with an empty metrics accumulator."""
    return ResolverContext(**props)

