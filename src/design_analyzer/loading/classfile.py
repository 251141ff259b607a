"""Minimal reader for the JVM class-file format (JVMS chapter 4).

Only the structural parts the metrics need are kept: the class and super
class names, interfaces, field and method names with their descriptors,
and the ``InnerClasses`` attribute. Code and other attributes are skipped.
"""

import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .descriptors import binary_name

MAGIC = 0xCAFEBABE

ACC_INTERFACE = 0x0200
ACC_MODULE = 0x8000

# Constant pool tags
CONSTANT_UTF8 = 1
CONSTANT_INTEGER = 3
CONSTANT_FLOAT = 4
CONSTANT_LONG = 5
CONSTANT_DOUBLE = 6
CONSTANT_CLASS = 7
CONSTANT_STRING = 8
CONSTANT_FIELDREF = 9
CONSTANT_METHODREF = 10
CONSTANT_INTERFACE_METHODREF = 11
CONSTANT_NAME_AND_TYPE = 12
CONSTANT_METHOD_HANDLE = 15
CONSTANT_METHOD_TYPE = 16
CONSTANT_DYNAMIC = 17
CONSTANT_INVOKE_DYNAMIC = 18
CONSTANT_MODULE = 19
CONSTANT_PACKAGE = 20

# Payload size of constant pool entries other than UTF8
_FIXED_SIZES = {
    CONSTANT_INTEGER: 4,
    CONSTANT_FLOAT: 4,
    CONSTANT_LONG: 8,
    CONSTANT_DOUBLE: 8,
    CONSTANT_CLASS: 2,
    CONSTANT_STRING: 2,
    CONSTANT_FIELDREF: 4,
    CONSTANT_METHODREF: 4,
    CONSTANT_INTERFACE_METHODREF: 4,
    CONSTANT_NAME_AND_TYPE: 4,
    CONSTANT_METHOD_HANDLE: 3,
    CONSTANT_METHOD_TYPE: 2,
    CONSTANT_DYNAMIC: 4,
    CONSTANT_INVOKE_DYNAMIC: 4,
    CONSTANT_MODULE: 2,
    CONSTANT_PACKAGE: 2,
}


class ClassFormatError(ValueError):
    """Raised when bytes are not a well-formed class file."""


@dataclass(frozen=True)
class MemberInfo:
    """A declared field or method."""

    name: str
    descriptor: str
    access_flags: int = 0


@dataclass
class ClassFile:
    """Structural content of one parsed class file."""

    name: str
    super_name: Optional[str]
    access_flags: int
    interfaces: List[str] = field(default_factory=list)
    fields: List[MemberInfo] = field(default_factory=list)
    methods: List[MemberInfo] = field(default_factory=list)
    # Binary name -> simple name ("" for anonymous classes)
    inner_names: Dict[str, str] = field(default_factory=dict)
    major_version: int = 0

    @property
    def is_interface(self) -> bool:
        return bool(self.access_flags & ACC_INTERFACE)

    @property
    def is_module(self) -> bool:
        return bool(self.access_flags & ACC_MODULE)

    @property
    def simple_name(self) -> Optional[str]:
        """Simple name recorded by the compiler for nested classes, else None."""
        return self.inner_names.get(self.name)


class _Reader:
    def __init__(self, data: bytes):
        self.data = data
        self.pos = 0

    def take(self, size: int) -> bytes:
        end = self.pos + size
        if end > len(self.data):
            raise ClassFormatError(
                f"Truncated class file: needed {size} bytes at offset {self.pos}"
            )
        chunk = self.data[self.pos : end]
        self.pos = end
        return chunk

    def u1(self) -> int:
        return self.take(1)[0]

    def u2(self) -> int:
        return struct.unpack(">H", self.take(2))[0]

    def u4(self) -> int:
        return struct.unpack(">I", self.take(4))[0]


def decode_modified_utf8(raw: bytes) -> str:
    """Decode the JVM's modified UTF-8 (encoded NUL, surrogate pairs)."""
    text = raw.replace(b"\xc0\x80", b"\x00").decode("utf-8", errors="surrogatepass")
    if any("\ud800" <= ch <= "\udfff" for ch in text):
        text = text.encode("utf-16-le", errors="surrogatepass").decode(
            "utf-16-le", errors="surrogatepass"
        )
    return text


class _ConstantPool:
    def __init__(self, reader: _Reader):
        count = reader.u2()
        self._entries: List[Optional[Tuple[int, object]]] = [None] * count
        index = 1
        while index < count:
            tag = reader.u1()
            if tag == CONSTANT_UTF8:
                length = reader.u2()
                try:
                    value: object = decode_modified_utf8(reader.take(length))
                except UnicodeDecodeError as e:
                    raise ClassFormatError(f"Invalid UTF8 constant at #{index}: {e}")
            elif tag in (CONSTANT_CLASS, CONSTANT_MODULE, CONSTANT_PACKAGE):
                value = reader.u2()
            elif tag in _FIXED_SIZES:
                value = reader.take(_FIXED_SIZES[tag])
            else:
                raise ClassFormatError(f"Unknown constant pool tag {tag} at #{index}")
            self._entries[index] = (tag, value)
            # Long and double occupy two slots
            index += 2 if tag in (CONSTANT_LONG, CONSTANT_DOUBLE) else 1

    def _entry(self, index: int, expected: int) -> object:
        entry = self._entries[index] if 0 < index < len(self._entries) else None
        if entry is None or entry[0] != expected:
            raise ClassFormatError(f"Constant #{index} is not of tag {expected}")
        return entry[1]

    def utf8(self, index: int) -> str:
        return self._entry(index, CONSTANT_UTF8)  # type: ignore[return-value]

    def class_name(self, index: int) -> str:
        name_index = self._entry(index, CONSTANT_CLASS)
        return binary_name(self.utf8(name_index))  # type: ignore[arg-type]


def _skip_attributes(reader: _Reader) -> None:
    for _ in range(reader.u2()):
        reader.u2()
        reader.take(reader.u4())


def _read_members(reader: _Reader, pool: _ConstantPool) -> List[MemberInfo]:
    members = []
    for _ in range(reader.u2()):
        access_flags = reader.u2()
        name = pool.utf8(reader.u2())
        descriptor = pool.utf8(reader.u2())
        _skip_attributes(reader)
        members.append(MemberInfo(name=name, descriptor=descriptor, access_flags=access_flags))
    return members


def _read_inner_classes(reader: _Reader, pool: _ConstantPool) -> Dict[str, str]:
    inner_names = {}
    for _ in range(reader.u2()):
        inner_index = reader.u2()
        reader.u2()  # outer_class_info_index
        name_index = reader.u2()
        reader.u2()  # inner_class_access_flags
        inner_names[pool.class_name(inner_index)] = pool.utf8(name_index) if name_index else ""
    return inner_names


def parse_class_file(data: bytes) -> ClassFile:
    """Parse the bytes of a ``.class`` file.

    Raises:
        ClassFormatError: If the data is not a well-formed class file
    """
    reader = _Reader(data)
    if reader.u4() != MAGIC:
        raise ClassFormatError("Bad magic number, not a class file")
    reader.u2()  # minor_version
    major_version = reader.u2()

    pool = _ConstantPool(reader)
    access_flags = reader.u2()
    name = pool.class_name(reader.u2())
    super_index = reader.u2()
    super_name = pool.class_name(super_index) if super_index else None
    interfaces = [pool.class_name(reader.u2()) for _ in range(reader.u2())]
    fields = _read_members(reader, pool)
    methods = _read_members(reader, pool)

    inner_names: Dict[str, str] = {}
    for _ in range(reader.u2()):
        attribute_name = pool.utf8(reader.u2())
        length = reader.u4()
        if attribute_name == "InnerClasses":
            inner_names = _read_inner_classes(_Reader(reader.take(length)), pool)
        else:
            reader.take(length)

    return ClassFile(
        name=name,
        super_name=super_name,
        access_flags=access_flags,
        interfaces=interfaces,
        fields=fields,
        methods=methods,
        inner_names=inner_names,
        major_version=major_version,
    )


def read_class_file(path: Path) -> ClassFile:
    """Read and parse a class file from disk."""
    with open(path, "rb") as f:
        return parse_class_file(f.read())
