# src/digitalocean_exporter/models/metrics.py
"""
Static metric declarations and the per-scrape observations made against them.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from prometheus_client.core import CounterMetricFamily, GaugeMetricFamily
from prometheus_client.metrics_core import Metric
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_METRIC_NAME_RE = re.compile(r"^[a-zA-Z_:][a-zA-Z0-9_:]*$")
_LABEL_NAME_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


class MetricKind(str, Enum):
    GAUGE = "gauge"
    COUNTER = "counter"


class MetricDescriptor(BaseModel):
    """
    Immutable declaration of one metric: name, help text, label names and kind.

    When `states` is set the metric is enum-encoded: every item yields one
    sample per state, distinguished by `state_label`, with value 1 for the
    item's current state and 0 for the others. A current state outside the
    declared ones is reported as `fallback_state` when one is set. Without
    states the metric carries a plain numeric value.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    documentation: str
    labels: Tuple[str, ...] = ()
    kind: MetricKind = MetricKind.GAUGE
    states: Tuple[str, ...] = ()
    state_label: str = "status"
    fallback_state: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not _METRIC_NAME_RE.match(value):
            raise ValueError(f"invalid metric name '{value}'")
        return value

    @field_validator("labels")
    @classmethod
    def _check_labels(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        for label in value:
            if not _LABEL_NAME_RE.match(label) or label.startswith("__"):
                raise ValueError(f"invalid label name '{label}'")
        if len(set(value)) != len(value):
            raise ValueError(f"duplicate label names in {value}")
        return value

    @model_validator(mode="after")
    def _check_states(self) -> "MetricDescriptor":
        if self.states:
            if self.state_label in self.labels:
                raise ValueError(f"state label '{self.state_label}' clashes with labels of {self.name}")
            if len(set(self.states)) != len(self.states):
                raise ValueError(f"duplicate states in {self.name}")
            if self.fallback_state is not None and self.fallback_state not in self.states:
                raise ValueError(f"fallback state '{self.fallback_state}' is not a state of {self.name}")
        elif self.fallback_state is not None:
            raise ValueError(f"{self.name} declares a fallback state without states")
        return self

    @property
    def label_names(self) -> Tuple[str, ...]:
        """All label names carried by samples, including the state label for enum metrics."""
        if self.states:
            return self.labels + (self.state_label,)
        return self.labels

    def family(self) -> Metric:
        """Returns an empty metric family for this descriptor."""
        if self.kind is MetricKind.COUNTER:
            return CounterMetricFamily(self.name, self.documentation, labels=list(self.label_names))
        return GaugeMetricFamily(self.name, self.documentation, labels=list(self.label_names))

    def observe(self, label_values: Sequence[str], value: float) -> "Observation":
        return Observation(descriptor=self, label_values=tuple(str(v) for v in label_values), value=float(value))

    def observe_state(self, label_values: Sequence[str], current: str) -> List["Observation"]:
        """Emits one observation per declared state, 1 for `current` and 0 for the rest."""
        if not self.states:
            raise ValueError(f"{self.name} does not declare any states")
        if current not in self.states and self.fallback_state is not None:
            current = self.fallback_state
        return [
            self.observe(tuple(label_values) + (state,), 1.0 if state == current else 0.0) for state in self.states
        ]


@dataclass(frozen=True)
class Observation:
    """One data point produced during a single scrape."""

    descriptor: MetricDescriptor
    label_values: Tuple[str, ...]
    value: float

    def __post_init__(self):
        expected = len(self.descriptor.label_names)
        if len(self.label_values) != expected:
            raise ValueError(
                f"{self.descriptor.name} expects {expected} label values, got {len(self.label_values)}"
            )


class BuildInfo(BaseModel):
    """Version metadata of the running exporter."""

    version: str
    revision: str = Field("unknown")
    build_date: str = Field("unknown")
    python_version: str
