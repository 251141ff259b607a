"""Load the compiled types of one package directory into a TypeSet."""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from ..exceptions import FileAccessError, ResolutionError
from ..logging_config import get_logger
from ..models import ROOT_TYPE, TypeDescriptor, TypeSet
from .classfile import ClassFile, ClassFormatError, parse_class_file
from .classpath import Classpath, jdk_entries
from .descriptors import parse_field_descriptor, parse_method_descriptor

logger = get_logger(__name__)

CLASS_SUFFIX = ".class"

# Not types: module and package metadata
_SKIPPED_STEMS = {"module-info", "package-info"}

# Not declared methods in the reflective sense
_INITIALIZERS = {"<init>", "<clinit>"}


def to_descriptor(class_file: ClassFile) -> TypeDescriptor:
    """Build the structural descriptor of a parsed class.

    Interfaces report no supertype. Constructors and static initializers are
    not declared methods; synthetic and bridge members are kept.

    Raises:
        ValueError: If a field or method descriptor is malformed
    """
    return TypeDescriptor(
        name=class_file.name,
        simple_name=class_file.simple_name,
        supertype=None if class_file.is_interface else class_file.super_name,
        interfaces=tuple(class_file.interfaces),
        field_types=tuple(parse_field_descriptor(f.descriptor) for f in class_file.fields),
        method_signatures=tuple(
            parse_method_descriptor(m.descriptor)[0]
            for m in class_file.methods
            if m.name not in _INITIALIZERS
        ),
        is_interface=class_file.is_interface,
    )


def _parse(data: bytes, expected_name: str, filepath: Optional[Path] = None) -> ClassFile:
    try:
        class_file = parse_class_file(data)
    except ClassFormatError as e:
        raise ResolutionError(expected_name, str(e), filepath)
    if class_file.name != expected_name:
        raise ResolutionError(
            expected_name, f"class file declares {class_file.name}", filepath
        )
    return class_file


def _load_member(filepath: Path, package: str) -> TypeDescriptor:
    expected_name = f"{package}.{filepath.stem}" if package else filepath.stem
    try:
        data = filepath.read_bytes()
    except OSError as e:
        raise FileAccessError(filepath, str(e))

    class_file = _parse(data, expected_name, filepath)
    try:
        descriptor = to_descriptor(class_file)
    except ValueError as e:
        raise ResolutionError(expected_name, str(e), filepath)
    logger.debug(
        "Loaded %s (%d fields, %d methods)",
        descriptor.name,
        len(descriptor.field_types),
        descriptor.method_count,
    )
    return descriptor


def _resolve_ancestry(
    members: List[TypeDescriptor],
    classpath: Classpath,
    strict: bool,
) -> Dict[str, Optional[str]]:
    """Supertype links for every ancestor of ``members`` outside the package."""
    member_names = {m.name for m in members}
    ancestry: Dict[str, Optional[str]] = {}

    for member in members:
        current = member.supertype
        while (
            current is not None
            and current != ROOT_TYPE
            and current not in member_names
            and current not in ancestry
        ):
            data = classpath.find(current)
            if data is None:
                if strict:
                    raise ResolutionError(
                        current, f"supertype of {member.name} not found on classpath"
                    )
                logger.warning(
                    "Supertype %s of %s not found on classpath; depth stops there",
                    current,
                    member.name,
                )
                ancestry[current] = None
                break
            class_file = _parse(data, current)
            ancestry[current] = None if class_file.is_interface else class_file.super_name
            current = ancestry[current]

    return ancestry


def load_types(
    path: Union[str, Path],
    classpath: Iterable[Union[str, Path]] = (),
    strict: bool = False,
) -> TypeSet:
    """Load every class file of a package directory.

    The package name is the final segment of ``path``. The parent of
    ``path`` is searched first when resolving supertypes outside the
    package, followed by ``classpath`` entries in order and finally the
    JDK modules under ``$JAVA_HOME``.

    Args:
        path: Directory holding the package's ``.class`` files
        classpath: Extra directories or jar archives for supertype lookup
        strict: Fail instead of warning when a supertype cannot be found

    Returns:
        TypeSet of the package's types

    Raises:
        FileAccessError: If ``path`` is missing, not a directory or unreadable
        ResolutionError: If a class file cannot be resolved into a descriptor
    """
    root = Path(path)
    if not root.exists():
        raise FileAccessError(root, "path does not exist")
    if not root.is_dir():
        raise FileAccessError(root, "path is not a directory")

    root = root.resolve()
    package = root.name

    try:
        class_files = sorted(
            p
            for p in root.iterdir()
            if p.suffix == CLASS_SUFFIX and p.is_file() and p.stem not in _SKIPPED_STEMS
        )
    except OSError as e:
        raise FileAccessError(root, str(e))

    logger.debug("Found %d class files in %s", len(class_files), root)
    members = [_load_member(p, package) for p in class_files]

    with Classpath([root.parent, *classpath, *jdk_entries()]) as search_path:
        ancestry = _resolve_ancestry(members, search_path, strict)

    types = TypeSet(members, ancestry=ancestry, package=package)
    logger.info("Loaded %d types from package %s", len(types), package)
    return types
