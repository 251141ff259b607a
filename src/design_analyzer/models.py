"""Data models for Design Analyzer.

Type names follow the JVM's ``Class.getName()`` format: ``pkg.Name`` for
classes and interfaces, ``pkg.Outer$Inner`` for nested types, ``int`` for
primitives and ``[Lpkg.Name;`` / ``[I`` for arrays.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

# Universal root of every class hierarchy; never counted as a level.
ROOT_TYPE = "java.lang.Object"


@dataclass(frozen=True)
class TypeDescriptor:
    """Structural summary of one compiled type."""

    name: str
    simple_name: Optional[str] = None
    supertype: Optional[str] = None
    interfaces: Tuple[str, ...] = ()
    field_types: Tuple[str, ...] = ()
    method_signatures: Tuple[Tuple[str, ...], ...] = ()
    method_count: Optional[int] = None
    is_interface: bool = False

    def __post_init__(self) -> None:
        # Accept lists from callers but store tuples
        object.__setattr__(self, "interfaces", tuple(self.interfaces))
        object.__setattr__(self, "field_types", tuple(self.field_types))
        object.__setattr__(
            self, "method_signatures", tuple(tuple(sig) for sig in self.method_signatures)
        )
        if self.simple_name is None:
            object.__setattr__(self, "simple_name", simple_name_of(self.name))
        if self.method_count is None:
            object.__setattr__(self, "method_count", len(self.method_signatures))
        elif self.method_count < 0:
            raise ValueError(f"method_count must be non-negative, got {self.method_count}")

    @property
    def parameter_types(self) -> Iterator[str]:
        """Parameter types of every declared method, in declaration order."""
        for signature in self.method_signatures:
            yield from signature


def simple_name_of(qualified_name: str) -> str:
    """Display name for a qualified name: ``pkg.Outer$Inner`` -> ``Inner``."""
    tail = qualified_name.rsplit(".", 1)[-1]
    return tail.rsplit("$", 1)[-1]


class TypeSet:
    """Read-only collection of the type descriptors of one package.

    Descriptors are keyed by qualified name. ``ancestry`` maps the names of
    resolved ancestors that live outside the package to their own supertype,
    so inheritance depth can follow a chain past the package boundary.
    """

    def __init__(
        self,
        types: Iterable[TypeDescriptor] = (),
        ancestry: Optional[Mapping[str, Optional[str]]] = None,
        package: str = "",
    ):
        by_name: Dict[str, TypeDescriptor] = {}
        for descriptor in types:
            if descriptor.name in by_name:
                raise ValueError(f"Duplicate type in set: {descriptor.name}")
            by_name[descriptor.name] = descriptor
        self._types = MappingProxyType(by_name)
        self._ancestry = MappingProxyType(dict(ancestry or {}))
        self.package = package

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self) -> Iterator[TypeDescriptor]:
        return iter(self._types.values())

    def __contains__(self, item: Union[str, TypeDescriptor]) -> bool:
        name = item.name if isinstance(item, TypeDescriptor) else item
        return name in self._types

    def __repr__(self) -> str:
        return f"TypeSet(package={self.package!r}, types={len(self)})"

    @property
    def names(self) -> List[str]:
        return list(self._types)

    @property
    def ancestry(self) -> Mapping[str, Optional[str]]:
        return self._ancestry

    def get(self, name: str) -> Optional[TypeDescriptor]:
        return self._types.get(name)

    def sorted(self) -> List[TypeDescriptor]:
        """Descriptors ordered by qualified name."""
        return [self._types[name] for name in sorted(self._types)]

    def supertype_of(self, name: str) -> Optional[str]:
        """Supertype of a member or a resolved outside ancestor, else None."""
        descriptor = self._types.get(name)
        if descriptor is not None:
            return descriptor.supertype
        return self._ancestry.get(name)


@dataclass(frozen=True)
class MetricRecord:
    """The four metrics of one type."""

    name: str
    simple_name: str
    in_depth: int
    instability: float
    responsibility: float
    workload: float

    def to_dict(self) -> Dict[str, Union[str, int, float]]:
        return {
            "name": self.name,
            "simple_name": self.simple_name,
            "in_depth": self.in_depth,
            "instability": self.instability,
            "responsibility": self.responsibility,
            "workload": self.workload,
        }


@dataclass
class AnalysisResult:
    """Output of a full load-and-compute run."""

    package: str
    types: TypeSet
    records: List[MetricRecord] = field(default_factory=list)
