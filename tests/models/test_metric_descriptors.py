# tests/models/test_metric_descriptors.py

import pytest
from pydantic import ValidationError

from digitalocean_exporter.models.metrics import MetricDescriptor, MetricKind, Observation


def _status_descriptor():
    return MetricDescriptor(
        name="test_status",
        documentation="status",
        labels=("id",),
        states=("new", "active", "off"),
    )


class TestMetricDescriptorValidation:
    def test_rejects_invalid_metric_name(self):
        with pytest.raises(ValidationError):
            MetricDescriptor(name="bad-name", documentation="x")

    def test_rejects_invalid_label_name(self):
        with pytest.raises(ValidationError):
            MetricDescriptor(name="ok", documentation="x", labels=("bad label",))

    def test_rejects_reserved_label_name(self):
        with pytest.raises(ValidationError):
            MetricDescriptor(name="ok", documentation="x", labels=("__name__",))

    def test_rejects_duplicate_labels(self):
        with pytest.raises(ValidationError):
            MetricDescriptor(name="ok", documentation="x", labels=("id", "id"))

    def test_rejects_state_label_clash(self):
        with pytest.raises(ValidationError):
            MetricDescriptor(name="ok", documentation="x", labels=("status",), states=("a", "b"))

    def test_is_immutable(self):
        descriptor = MetricDescriptor(name="ok", documentation="x")
        with pytest.raises(ValidationError):
            descriptor.name = "other"

    def test_equal_descriptors_compare_equal(self):
        assert _status_descriptor() == _status_descriptor()


class TestEnumEncoding:
    def test_label_names_include_state_label(self):
        assert _status_descriptor().label_names == ("id", "status")

    def test_exactly_one_state_is_active(self):
        observations = _status_descriptor().observe_state(("d1",), "active")

        assert [o.label_values for o in observations] == [("d1", "new"), ("d1", "active"), ("d1", "off")]
        assert [o.value for o in observations] == [0.0, 1.0, 0.0]
        assert sum(o.value for o in observations) == 1.0

    def test_unlisted_state_maps_to_fallback(self):
        descriptor = MetricDescriptor(
            name="test_status",
            documentation="status",
            labels=("id",),
            states=("active", "off", "unknown"),
            fallback_state="unknown",
        )

        observations = descriptor.observe_state(("d1",), "melted")

        assert {o.label_values[-1]: o.value for o in observations} == {"active": 0.0, "off": 0.0, "unknown": 1.0}

    def test_fallback_must_be_a_declared_state(self):
        with pytest.raises(ValidationError):
            MetricDescriptor(name="ok", documentation="x", states=("a", "b"), fallback_state="c")

    def test_fallback_requires_states(self):
        with pytest.raises(ValidationError):
            MetricDescriptor(name="ok", documentation="x", fallback_state="unknown")

    def test_observe_state_requires_states(self):
        descriptor = MetricDescriptor(name="ok", documentation="x", labels=("id",))
        with pytest.raises(ValueError):
            descriptor.observe_state(("d1",), "active")


class TestObservation:
    def test_label_values_are_stringified(self):
        descriptor = MetricDescriptor(name="ok", documentation="x", labels=("id",))
        observation = descriptor.observe((42,), 3)
        assert observation.label_values == ("42",)
        assert observation.value == 3.0

    def test_label_count_must_match(self):
        descriptor = MetricDescriptor(name="ok", documentation="x", labels=("id", "name"))
        with pytest.raises(ValueError):
            Observation(descriptor=descriptor, label_values=("only-one",), value=1.0)


class TestFamilies:
    def test_gauge_family(self):
        family = MetricDescriptor(name="ok", documentation="help", labels=("id",)).family()
        assert family.type == "gauge"
        assert family.name == "ok"
        assert family.documentation == "help"
        assert family.samples == []

    def test_counter_family(self):
        family = MetricDescriptor(name="requests_total", documentation="help", kind=MetricKind.COUNTER).family()
        assert family.type == "counter"
        # prometheus_client strips the suffix and re-adds it on exposition.
        assert family.name == "requests"
