"""Dependency evaluation and metric computation over a TypeSet."""

from .calculator import (
    MetricsCalculator,
    compute_metrics,
    in_depth,
    instability,
    responsibility,
    workload,
)
from .dependencies import (
    ReferenceKind,
    Relation,
    clients,
    inbound_relations,
    providers,
    references,
)

__all__ = [
    "MetricsCalculator",
    "compute_metrics",
    "in_depth",
    "instability",
    "responsibility",
    "workload",
    "ReferenceKind",
    "Relation",
    "clients",
    "inbound_relations",
    "providers",
    "references",
]
