"""
DigitalOcean Exporter

Republishes a DigitalOcean account's inventory as Prometheus metrics,
querying the API afresh on every scrape.
"""

__version__ = "0.1.0"
