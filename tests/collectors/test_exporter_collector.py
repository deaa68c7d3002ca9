# tests/collectors/test_exporter_collector.py

from digitalocean_exporter.collectors.exporter_collector import ExporterCollector
from digitalocean_exporter.models.metrics import BuildInfo

BUILD_INFO = BuildInfo(version="0.1.0", revision="abc123", build_date="2026-01-01", python_version="3.12.1")


def _values(collector):
    return {o.descriptor.name: (o.label_values, o.value) for o in collector.observe()}


def test_uptime_is_clock_minus_start_time():
    collector = ExporterCollector(BUILD_INFO, start_time=1000.0, clock=lambda: 1042.5)

    values = _values(collector)

    assert values["digitalocean_exporter_uptime_seconds"] == ((), 42.5)
    assert values["digitalocean_exporter_start_time"] == ((), 1000.0)


def test_uptime_grows_between_scrapes():
    ticks = iter([1010.0, 1020.0])
    collector = ExporterCollector(BUILD_INFO, start_time=1000.0, clock=lambda: next(ticks))

    first = _values(collector)["digitalocean_exporter_uptime_seconds"][1]
    second = _values(collector)["digitalocean_exporter_uptime_seconds"][1]

    assert (first, second) == (10.0, 20.0)


def test_build_info_labels():
    collector = ExporterCollector(BUILD_INFO, start_time=0.0, clock=lambda: 1.0)

    families = {f.name: f for f in collector.collect()}
    sample = families["digitalocean_exporter_build_info"].samples[0]

    assert sample.value == 1.0
    assert sample.labels == {
        "version": "0.1.0",
        "revision": "abc123",
        "builddate": "2026-01-01",
        "pythonversion": "3.12.1",
    }
