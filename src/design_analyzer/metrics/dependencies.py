"""Structural dependency relation between the types of one package.

A type depends on (is a client of) a provider when its supertype, a field
type, an implemented interface or a method parameter type names that
provider. Matching is by qualified-name equality and a type never depends
on itself.
"""

from enum import Enum
from typing import FrozenSet, Iterator, Tuple

from ..models import TypeDescriptor, TypeSet


class ReferenceKind(str, Enum):
    """Where in a type's declaration a reference appears."""

    SUPERTYPE = "supertype"
    FIELD = "field"
    INTERFACE = "interface"
    PARAMETER = "parameter"


class Relation(str, Enum):
    """Inbound relation a client holds to a type.

    Field and parameter references both count as ``ASSOCIATION``, so a client
    that mentions a type in several members still contributes one entry.
    """

    INHERITANCE = "inheritance"
    ASSOCIATION = "association"
    REALIZATION = "realization"


def references(descriptor: TypeDescriptor) -> Iterator[Tuple[ReferenceKind, str]]:
    """Yield every structural reference of a type in declaration order."""
    if descriptor.supertype is not None:
        yield ReferenceKind.SUPERTYPE, descriptor.supertype
    for field_type in descriptor.field_types:
        yield ReferenceKind.FIELD, field_type
    for interface in descriptor.interfaces:
        yield ReferenceKind.INTERFACE, interface
    for param_type in descriptor.parameter_types:
        yield ReferenceKind.PARAMETER, param_type


def providers(descriptor: TypeDescriptor, types: TypeSet) -> FrozenSet[str]:
    """Names of the types in ``types`` that ``descriptor`` references."""
    return frozenset(
        name
        for _, name in references(descriptor)
        if name != descriptor.name and name in types
    )


def inbound_relations(
    target: TypeDescriptor,
    client: TypeDescriptor,
    symmetric_interfaces: bool = False,
) -> FrozenSet[Relation]:
    """Relations through which ``client`` references ``target``.

    By default the realization check compares ``target``'s own interfaces
    against ``target``'s name rather than asking whether ``client``
    implements ``target``. Well-formed types never implement themselves, so
    interface implementation does not make a client. Pass
    ``symmetric_interfaces=True`` to count implementors as clients.

    A type is never its own client, so a malformed type that lists itself
    among its own interfaces gains no realization relation from itself.
    """
    if client.name == target.name:
        return frozenset()

    relations = set()
    if client.supertype == target.name:
        relations.add(Relation.INHERITANCE)
    if target.name in client.field_types or any(
        param_type == target.name for param_type in client.parameter_types
    ):
        relations.add(Relation.ASSOCIATION)

    realizer = client if symmetric_interfaces else target
    if target.name in realizer.interfaces:
        relations.add(Relation.REALIZATION)
    return frozenset(relations)


def clients(
    descriptor: TypeDescriptor,
    types: TypeSet,
    symmetric_interfaces: bool = False,
) -> FrozenSet[str]:
    """Names of the types in ``types`` that reference ``descriptor``."""
    return frozenset(
        other.name
        for other in types
        if inbound_relations(descriptor, other, symmetric_interfaces)
    )
