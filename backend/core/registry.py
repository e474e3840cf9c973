"""
Fixed set of known metrics and their generation profiles.
Built once at startup; read-only afterwards.
"""
from collections.abc import ItemsView, Iterator, Mapping
from types import MappingProxyType

from core.errors import UnknownMetric
from models.metric import MetricProfile

DEFAULT_PROFILES: dict[str, MetricProfile] = {
    "total-revenue": MetricProfile(baseline=20_000.0, spread=5_000.0),
    "total-pax": MetricProfile(baseline=1_000.0, spread=250.0),
}


class MetricRegistry:
    def __init__(self, profiles: Mapping[str, MetricProfile]) -> None:
        self._profiles = MappingProxyType(dict(profiles))

    def lookup(self, metric_id: str) -> MetricProfile:
        """Return the profile for metric_id or raise UnknownMetric."""
        try:
            return self._profiles[metric_id]
        except KeyError:
            raise UnknownMetric(metric_id) from None

    def items(self) -> ItemsView[str, MetricProfile]:
        return self._profiles.items()

    def __contains__(self, metric_id: object) -> bool:
        return metric_id in self._profiles

    def __iter__(self) -> Iterator[str]:
        return iter(self._profiles)

    def __len__(self) -> int:
        return len(self._profiles)


def build_registry() -> MetricRegistry:
    return MetricRegistry(DEFAULT_PROFILES)
