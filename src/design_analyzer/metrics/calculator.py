"""Per-type design metrics.

For a package of N types:

- in_depth: supertypes above a type, excluding ``java.lang.Object``
- instability: |providers| / N
- responsibility: sum over every type of its inbound relations to the type, / N
- workload: declared methods of the type / declared methods of the package
"""

from typing import List

from ..exceptions import EmptyProjectError, HierarchyCycleError
from ..logging_config import get_logger
from ..models import ROOT_TYPE, MetricRecord, TypeDescriptor, TypeSet
from .dependencies import inbound_relations, providers

logger = get_logger(__name__)


class MetricsCalculator:
    """Computes metrics for the members of a single, unchanging TypeSet."""

    def __init__(self, types: TypeSet, symmetric_interfaces: bool = False):
        if len(types) == 0:
            raise EmptyProjectError(types.package or None)
        self.types = types
        self.symmetric_interfaces = symmetric_interfaces
        self._type_count = len(types)
        self._total_methods = sum(t.method_count for t in types)

    @property
    def total_methods(self) -> int:
        return self._total_methods

    def in_depth(self, descriptor: TypeDescriptor) -> int:
        depth = 0
        chain = [descriptor.name]
        current = descriptor.supertype
        while current is not None and current != ROOT_TYPE:
            if current in chain:
                raise HierarchyCycleError(descriptor.name, chain + [current])
            chain.append(current)
            depth += 1
            current = self.types.supertype_of(current)
        return depth

    def instability(self, descriptor: TypeDescriptor) -> float:
        return len(providers(descriptor, self.types)) / self._type_count

    def responsibility(self, descriptor: TypeDescriptor) -> float:
        count = sum(
            len(inbound_relations(descriptor, other, self.symmetric_interfaces))
            for other in self.types
        )
        return count / self._type_count

    def workload(self, descriptor: TypeDescriptor) -> float:
        # No methods anywhere: every share is zero.
        if self._total_methods == 0:
            return 0.0
        return descriptor.method_count / self._total_methods

    def record(self, descriptor: TypeDescriptor) -> MetricRecord:
        return MetricRecord(
            name=descriptor.name,
            simple_name=descriptor.simple_name,
            in_depth=self.in_depth(descriptor),
            instability=self.instability(descriptor),
            responsibility=self.responsibility(descriptor),
            workload=self.workload(descriptor),
        )

    def compute(self) -> List[MetricRecord]:
        """Metric records for every type, ordered by qualified name."""
        if self._total_methods == 0:
            logger.warning("Package declares no methods; workload is 0 for every type")
        records = [self.record(t) for t in self.types.sorted()]
        logger.debug("Computed metrics for %d types", len(records))
        return records


def compute_metrics(types: TypeSet, symmetric_interfaces: bool = False) -> List[MetricRecord]:
    """Compute the metric records of every type in ``types``.

    Raises:
        EmptyProjectError: If ``types`` is empty
        HierarchyCycleError: If a supertype chain is cyclic
    """
    return MetricsCalculator(types, symmetric_interfaces).compute()


def in_depth(descriptor: TypeDescriptor, types: TypeSet) -> int:
    return MetricsCalculator(types).in_depth(descriptor)


def instability(descriptor: TypeDescriptor, types: TypeSet) -> float:
    return MetricsCalculator(types).instability(descriptor)


def responsibility(
    descriptor: TypeDescriptor, types: TypeSet, symmetric_interfaces: bool = False
) -> float:
    return MetricsCalculator(types, symmetric_interfaces).responsibility(descriptor)


def workload(descriptor: TypeDescriptor, types: TypeSet) -> float:
    return MetricsCalculator(types).workload(descriptor)
