"""Prometheus counters for a single analysis run.

The counters live in a dedicated registry so that repeated runs inside one
process (tests, the CLI) never collide with the global default registry.
"""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, write_to_textfile

REGISTRY = CollectorRegistry(auto_describe=True)

files_analyzed_total = Counter(
    "tfchanges_files_analyzed_total",
    "Changed files run through a classification strategy.",
    ["mode"],
    registry=REGISTRY,
)

changes_total = Counter(
    "tfchanges_changes_total",
    "Change records emitted, by action.",
    ["action"],
    registry=REGISTRY,
)

retrieval_failures_total = Counter(
    "tfchanges_retrieval_failures_total",
    "Revision store calls that failed and degraded to no data.",
    ["operation"],
    registry=REGISTRY,
)


def export_textfile(path: str) -> None:
    """Write every counter in the Prometheus text format to *path*."""
    write_to_textfile(path, REGISTRY)


def retrieval_failure_count() -> float:
    """Sum of ``tfchanges_retrieval_failures_total`` across all operations."""
    total = 0.0
    for metric in retrieval_failures_total.collect():
        for sample in metric.samples:
            if sample.name.endswith("_total"):
                total += sample.value
    return total
