"""Capture counters, mirrored to Prometheus when the client library is installed."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

try:
    from prometheus_client import CollectorRegistry, Counter
except ImportError:  # pragma: no cover - optional dependency
    CollectorRegistry = None
    Counter = None

LabelKey = tuple[tuple[str, str], ...]


def _labels_key(labels: dict[str, str] | None) -> LabelKey:
    if not labels:
        return ()
    return tuple(sorted((str(k), str(v)) for k, v in labels.items()))


@dataclass
class MetricsCollector:
    """
    Count capture decisions in memory.

    When ``prometheus_client`` is importable every counter is mirrored into
    ``registry``. Pass ``prometheus_client.REGISTRY`` to expose the counters on
    the default endpoint; by default each collector gets its own registry so
    several collectors can coexist in one process.
    """

    registry: Any = None
    counters: dict[tuple[str, LabelKey], float] = field(default_factory=dict)
    _prom_counters: dict[tuple[str, tuple[str, ...]], Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.registry is None and CollectorRegistry is not None:
            self.registry = CollectorRegistry()

    def increment(self, name: str, value: float = 1.0, labels: dict[str, str] | None = None) -> None:
        key = (name, _labels_key(labels))
        self.counters[key] = self.counters.get(key, 0.0) + float(value)
        counter = self._prom_counter(name, labels)
        if counter is not None:
            counter.inc(value)

    def value(self, name: str, labels: dict[str, str] | None = None) -> float:
        return self.counters.get((name, _labels_key(labels)), 0.0)

    def snapshot(self) -> dict[str, float]:
        return {self._render_key(name, labels): value for (name, labels), value in self.counters.items()}

    @staticmethod
    def _render_key(name: str, labels: LabelKey) -> str:
        if not labels:
            return name
        rendered = ",".join(f"{k}={v}" for k, v in labels)
        return f"{name}{{{rendered}}}"

    def _prom_counter(self, name: str, labels: dict[str, str] | None) -> Any:
        if Counter is None:
            return None
        label_names = tuple(sorted(labels)) if labels else ()
        key = (name, label_names)
        if key not in self._prom_counters:
            self._prom_counters[key] = Counter(
                name,
                f"{name} counter",
                list(label_names),
                registry=self.registry,
            )
        metric = self._prom_counters[key]
        return metric.labels(**labels) if labels else metric
