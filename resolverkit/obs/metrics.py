"""Per-context resolver timings.

Durations are appended under the resolver name (and ``<name>.transform`` for
transforms) and never cleared for the lifetime of the owning context.
"""

from typing import Any, Dict, List, Optional

from resolverkit.config import settings


class ResolverMetrics:
    def __init__(self) -> None:
        self._series: Dict[str, List[float]] = {}

    def record(self, name: str, duration_ms: float) -> None:
        self._series.setdefault(name, []).append(float(duration_ms))

    def durations(self, name: str) -> List[float]:
        return list(self._series.get(name, []))

    def names(self) -> List[str]:
        return list(self._series)

    def __contains__(self, name: str) -> bool:
        return name in self._series

    def as_dict(self, series_field: Optional[str] = None) -> Dict[str, Dict[str, List[float]]]:
        """``{name: {series_field: [ms, ...]}}``, defaulting to RESOLVER_METRICS_FIELD."""
        key = series_field or settings.RESOLVER_METRICS_FIELD
        return {name: {key: list(values)} for name, values in self._series.items()}

    def summary(self) -> List[Dict[str, Any]]:
        out: List[Dict[str, Any]] = []
        for name, values in self._series.items():
            out.append(
                {
                    "name": name,
                    "count": len(values),
                    "sum_ms": round(sum(values), 3),
                    "max_ms": round(max(values), 3),
                }
            )
        return out
