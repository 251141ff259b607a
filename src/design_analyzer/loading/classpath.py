"""Lookup of compiled classes in directories, jar archives and JDK modules."""

import os
import zipfile
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from ..logging_config import get_logger

logger = get_logger(__name__)

ARCHIVE_SUFFIXES = (".jar", ".zip")
JMOD_SUFFIX = ".jmod"

# Class entries of a .jmod archive live under this prefix
JMOD_CLASSES = "classes/"


def jdk_entries(java_home: Optional[Union[str, Path]] = None) -> List[Path]:
    """Archives holding the JDK's own classes.

    Looks under ``java_home`` (default ``$JAVA_HOME``) for ``jmods/*.jmod``,
    with ``java.base.jmod`` first, and falls back to ``jre/lib/rt.jar`` for
    pre-module JDKs. Returns an empty list when no JDK is found.
    """
    if java_home is None:
        java_home = os.environ.get("JAVA_HOME")
    if not java_home:
        return []

    home = Path(java_home)
    jmods = home / "jmods"
    if jmods.is_dir():
        modules = sorted(jmods.glob("*" + JMOD_SUFFIX))
        return sorted(modules, key=lambda p: p.name != "java.base" + JMOD_SUFFIX)

    rt_jar = home / "jre" / "lib" / "rt.jar"
    if rt_jar.is_file():
        return [rt_jar]
    return []


class Classpath:
    """Ordered class search path.

    Entries are directories laid out by package (``java/lang/Object.class``),
    ``.jar``/``.zip`` archives, or JDK ``.jmod`` modules. Archives are opened
    on first use and closed by :meth:`close` or on leaving a ``with`` block.
    """

    def __init__(self, entries: Iterable[Union[str, Path]] = ()):
        self.entries: List[Path] = [Path(e) for e in entries]
        self._archives: Dict[Path, Optional[zipfile.ZipFile]] = {}

    def __enter__(self) -> "Classpath":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        for archive in self._archives.values():
            if archive is not None:
                archive.close()
        self._archives.clear()

    def find(self, name: str) -> Optional[bytes]:
        """Bytes of the class with binary name ``name``, or None if absent."""
        relative = name.replace(".", "/") + ".class"
        for entry in self.entries:
            if entry.is_dir():
                candidate = entry / relative
                if candidate.is_file():
                    logger.debug("Found %s in %s", name, entry)
                    return candidate.read_bytes()
                continue

            suffix = entry.suffix.lower()
            if suffix in ARCHIVE_SUFFIXES:
                member = relative
            elif suffix == JMOD_SUFFIX:
                member = JMOD_CLASSES + relative
            else:
                continue

            archive = self._archive(entry)
            if archive is None:
                continue
            try:
                data = archive.read(member)
            except KeyError:
                continue
            logger.debug("Found %s in %s", name, entry)
            return data
        return None

    def _archive(self, path: Path) -> Optional[zipfile.ZipFile]:
        # A .jmod is a zip preceded by a short magic header, which
        # zipfile tolerates as prepended data.
        if path not in self._archives:
            try:
                self._archives[path] = zipfile.ZipFile(path)
            except (OSError, zipfile.BadZipFile) as e:
                logger.warning("Skipping unreadable classpath entry %s: %s", path, e)
                self._archives[path] = None
        return self._archives[path]
