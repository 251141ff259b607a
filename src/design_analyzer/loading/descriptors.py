"""Decoding of JVM field and method descriptors into type names.

Names use the ``Class.getName()`` format, so ``Ljava/lang/String;`` becomes
``java.lang.String``, ``I`` becomes ``int`` and ``[Ljava/lang/String;``
becomes ``[Ljava.lang.String;``.
"""

from typing import Tuple

_PRIMITIVES = {
    "B": "byte",
    "C": "char",
    "D": "double",
    "F": "float",
    "I": "int",
    "J": "long",
    "S": "short",
    "Z": "boolean",
}


def binary_name(internal_name: str) -> str:
    """``java/util/Map$Entry`` -> ``java.util.Map$Entry``."""
    return internal_name.replace("/", ".")


def _read_type(descriptor: str, pos: int) -> Tuple[str, int]:
    if pos >= len(descriptor):
        raise ValueError(f"Truncated descriptor: {descriptor!r}")

    tag = descriptor[pos]
    if tag in _PRIMITIVES:
        return _PRIMITIVES[tag], pos + 1

    if tag == "L":
        end = descriptor.find(";", pos)
        if end <= pos + 1:
            raise ValueError(f"Malformed class type in descriptor: {descriptor!r}")
        return binary_name(descriptor[pos + 1 : end]), end + 1

    if tag == "[":
        end = pos
        while end < len(descriptor) and descriptor[end] == "[":
            end += 1
        # Validate the component type; array names keep the descriptor form
        _, end = _read_type(descriptor, end)
        return binary_name(descriptor[pos:end]), end

    raise ValueError(f"Unknown type tag {tag!r} in descriptor: {descriptor!r}")


def parse_field_descriptor(descriptor: str) -> str:
    """Type name of a field descriptor."""
    name, end = _read_type(descriptor, 0)
    if end != len(descriptor):
        raise ValueError(f"Trailing characters in field descriptor: {descriptor!r}")
    return name


def parse_method_descriptor(descriptor: str) -> Tuple[Tuple[str, ...], str]:
    """Parameter type names and return type name of a method descriptor."""
    if not descriptor.startswith("("):
        raise ValueError(f"Method descriptor must start with '(': {descriptor!r}")

    params = []
    pos = 1
    while pos < len(descriptor) and descriptor[pos] != ")":
        name, pos = _read_type(descriptor, pos)
        params.append(name)
    if pos >= len(descriptor):
        raise ValueError(f"Unterminated parameter list: {descriptor!r}")

    pos += 1
    if descriptor[pos:] == "V":
        return tuple(params), "void"
    return_type, end = _read_type(descriptor, pos)
    if end != len(descriptor):
        raise ValueError(f"Trailing characters in method descriptor: {descriptor!r}")
    return tuple(params), return_type
