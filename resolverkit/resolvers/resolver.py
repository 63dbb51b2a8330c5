"""Timed resolvers.

A resolver wraps a data-fetch function ``resolve(args, context)`` and an
optional ``transform(result, args, context)``. Each call appends the elapsed
milliseconds to ``context.resolver_metrics``:

- ``<name>``: time spent in ``resolve``
- ``<name>.transform``: time spent in ``transform``

Both functions may be plain or ``async``.
"""

from typing import Any, Callable, Optional
import inspect
import time

from resolverkit.obs.context import ResolverContext
from resolverkit.obs.logger import log_event


ResolveFunc = Callable[[Any, ResolverContext], Any]
TransformFunc = Callable[[Any, Any, ResolverContext], Any]


async def _maybe_await(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


class Resolver:
    def __init__(self, name: str, resolve: ResolveFunc, transform: Optional[TransformFunc] = None):
        self.name = name
        self.resolve = resolve
        self.transform = transform

    @property
    def transform_name(self) -> str:
        return f"{self.name}.transform"

    async def _timed(self, metric: str, func: Callable, context: ResolverContext, *args: Any) -> Any:
        start = time.monotonic()
        try:
            result = await _maybe_await(func(*args))
        except Exception as e:
            log_event("resolver_failed", level="ERROR", resolver=metric, error=str(e))
            raise
        context.resolver_metrics.record(metric, (time.monotonic() - start) * 1000.0)
        return result

    async def __call__(self, args: Any, context: ResolverContext) -> Any:
        result = await self._timed(self.name, self.resolve, context, args, context)
        if self.transform is None:
            return result
        return await self._timed(self.transform_name, self.transform, context, result, args, context)

    def with_transform(self, transform: TransformFunc) -> "Resolver":
        """Same name and resolve function, with ``transform`` applied to results."""
        return Resolver(self.name, self.resolve, transform)

    def __repr__(self) -> str:
        return f"Resolver(name={self.name!r}, transform={self.transform is not None})"


def resolver(name: str, resolve: Optional[ResolveFunc] = None, transform: Optional[TransformFunc] = None):
    """Create a Resolver, or use as ``@resolver("name")`` on the resolve function."""
    if resolve is not None:
        return Resolver(name, resolve, transform)

    def decorator(func: ResolveFunc) -> Resolver:
        return Resolver(name, func, transform)

    return decorator


def with_transform(base: Resolver, transform: TransformFunc) -> Resolver:
    return base.with_transform(transform)
