"""Shared test fixtures for Design Analyzer tests."""

import struct
from pathlib import Path
from typing import Dict, Optional, Sequence, Tuple

import pytest

from design_analyzer.models import TypeDescriptor, TypeSet

ACC_PUBLIC_SUPER = 0x0021
ACC_INTERFACE_ABSTRACT = 0x0601


def build_class_file(
    name: str,
    super_name: Optional[str] = "java/lang/Object",
    interfaces: Sequence[str] = (),
    fields: Sequence[Tuple[str, str]] = (),
    methods: Sequence[Tuple[str, str]] = (),
    access_flags: int = ACC_PUBLIC_SUPER,
    inner_names: Optional[Dict[str, str]] = None,
    major_version: int = 52,
) -> bytes:
    """Assemble a minimal class file.

    Names are internal (``pkg/Name``). Every method carries a small ``Code``
    attribute and the pool holds a long constant, so readers must skip
    attributes and honor two-slot constants.
    """
    pool = []
    utf8_index: Dict[str, int] = {}
    class_index: Dict[str, int] = {}
    next_index = [1]

    def add(entry: bytes, slots: int = 1) -> int:
        index = next_index[0]
        pool.append(entry)
        next_index[0] += slots
        return index

    def utf8(text: str) -> int:
        if text not in utf8_index:
            raw = text.encode("utf-8")
            utf8_index[text] = add(struct.pack(">BH", 1, len(raw)) + raw)
        return utf8_index[text]

    def cls(internal: str) -> int:
        if internal not in class_index:
            class_index[internal] = add(struct.pack(">BH", 7, utf8(internal)))
        return class_index[internal]

    this_index = cls(name)
    super_index = cls(super_name) if super_name else 0
    interface_indexes = [cls(i) for i in interfaces]
    add(struct.pack(">Bq", 5, 42), slots=2)
    field_entries = [(utf8(n), utf8(d)) for n, d in fields]
    method_entries = [(utf8(n), utf8(d)) for n, d in methods]
    code_index = utf8("Code")

    inner_entries = []
    if inner_names:
        inner_attr_index = utf8("InnerClasses")
        for inner, simple in inner_names.items():
            inner_entries.append((cls(inner), utf8(simple) if simple else 0))

    out = bytearray()
    out += struct.pack(">IHH", 0xCAFEBABE, 0, major_version)
    out += struct.pack(">H", next_index[0])
    for entry in pool:
        out += entry
    out += struct.pack(">HHH", access_flags, this_index, super_index)
    out += struct.pack(">H", len(interface_indexes))
    for index in interface_indexes:
        out += struct.pack(">H", index)

    out += struct.pack(">H", len(field_entries))
    for name_index, desc_index in field_entries:
        out += struct.pack(">HHHH", 0x0002, name_index, desc_index, 0)

    out += struct.pack(">H", len(method_entries))
    for name_index, desc_index in method_entries:
        out += struct.pack(">HHHH", 0x0001, name_index, desc_index, 1)
        out += struct.pack(">HI", code_index, 4) + b"\x00\x01\x02\x03"

    if inner_entries:
        out += struct.pack(">H", 1)
        out += struct.pack(">HIH", inner_attr_index, 2 + 8 * len(inner_entries), len(inner_entries))
        for inner_index, simple_index in inner_entries:
            out += struct.pack(">HHHH", inner_index, 0, simple_index, 0)
    else:
        out += struct.pack(">H", 0)

    return bytes(out)


@pytest.fixture
def make_class():
    """The class-file assembler."""
    return build_class_file


@pytest.fixture
def package_dir(tmp_path):
    """Empty package directory named ``shapes`` inside a classpath root."""
    directory = tmp_path / "classes" / "shapes"
    directory.mkdir(parents=True)
    return directory


@pytest.fixture
def write_class(package_dir):
    """Write an assembled class into the ``shapes`` package.

    The file name is taken from the last segment of the internal name.
    """

    def _write(name: str, directory: Optional[Path] = None, **kwargs) -> Path:
        target = (directory or package_dir) / (name.rsplit("/", 1)[-1] + ".class")
        target.write_bytes(build_class_file(name, **kwargs))
        return target

    return _write


@pytest.fixture
def scenario_a():
    """Base (no supertype, no members); Derived extends Base, holds a Base, one method."""
    base = TypeDescriptor(name="p.Base")
    derived = TypeDescriptor(
        name="p.Derived",
        supertype="p.Base",
        field_types=("p.Base",),
        method_signatures=((),),
    )
    return TypeSet([base, derived], package="p")


@pytest.fixture
def unrelated_types():
    """Three types with no references among them."""
    return TypeSet(
        [
            TypeDescriptor(name="p.A", supertype="java.lang.Object", method_signatures=(("int",),)),
            TypeDescriptor(name="p.B", supertype="java.lang.Object", field_types=("java.lang.String",)),
            TypeDescriptor(name="p.C", supertype="java.lang.Object", method_signatures=((), ())),
        ],
        package="p",
    )


@pytest.fixture
def shapes():
    """A small hierarchy with an interface, association and self references."""
    drawable = TypeDescriptor(
        name="shapes.Drawable",
        is_interface=True,
        method_signatures=(("shapes.Canvas",),),
    )
    canvas = TypeDescriptor(
        name="shapes.Canvas",
        supertype="java.lang.Object",
        field_types=("[Lshapes.Shape;", "int"),
        method_signatures=(("shapes.Shape",), ("shapes.Shape", "shapes.Shape"), ()),
    )
    shape = TypeDescriptor(
        name="shapes.Shape",
        supertype="java.lang.Object",
        interfaces=("shapes.Drawable",),
        field_types=("shapes.Canvas",),
        method_signatures=(("shapes.Canvas",), ("shapes.Shape",)),
    )
    circle = TypeDescriptor(
        name="shapes.Circle",
        supertype="shapes.Shape",
        field_types=("shapes.Canvas", "shapes.Circle", "double"),
        method_signatures=(("shapes.Circle",), ()),
    )
    return TypeSet([drawable, canvas, shape, circle], package="shapes")
