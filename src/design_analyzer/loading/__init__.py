"""Loading of compiled JVM types into a TypeSet."""

from .classfile import ClassFile, ClassFormatError, MemberInfo, parse_class_file, read_class_file
from .classpath import Classpath, jdk_entries
from .descriptors import parse_field_descriptor, parse_method_descriptor
from .loader import load_types, to_descriptor

__all__ = [
    "ClassFile",
    "ClassFormatError",
    "MemberInfo",
    "parse_class_file",
    "read_class_file",
    "Classpath",
    "jdk_entries",
    "parse_field_descriptor",
    "parse_method_descriptor",
    "load_types",
    "to_descriptor",
]
