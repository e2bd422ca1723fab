"""
Resolution oracles: answer "does (package, class) exist, and where is its source?"
"""

import os
import re
import zipfile
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Protocol, Set, Tuple, Union

from loguru import logger

from .jdk_classes import binary_names
from .models import ResolveResult

# Multi-release jars keep alternative class files under this prefix
_VERSIONED_ENTRY = re.compile(r"^META-INF/versions/\d+/")

_SKIPPED_CLASSES = ("module-info", "package-info")

# Class files inside a .jmod live under this prefix
_JMOD_CLASSES = "classes/"

JAVA_HOME_ENV = "JAVA_HOME"

# java.base of a modular JDK first, then the rt.jar of a JDK 8 or a bare JRE
_RUNTIME_ARCHIVES = ("jmods/java.base.jmod", "jre/lib/rt.jar", "lib/rt.jar")


def find_runtime_archive(java_home: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """Locate the archive holding the core runtime classes of a JDK, by default the one in $JAVA_HOME"""
    home = java_home if java_home is not None else os.getenv(JAVA_HOME_ENV)
    if not home:
        return None
    for relative in _RUNTIME_ARCHIVES:
        candidate = Path(home) / relative
        if candidate.is_file():
            return candidate
    return None


def _archive_class_names(archive: zipfile.ZipFile, is_jmod: bool) -> List[str]:
    names = []
    for member in archive.namelist():
        if is_jmod:
            if not member.startswith(_JMOD_CLASSES):
                continue
            member = member[len(_JMOD_CLASSES) :]
        member = _VERSIONED_ENTRY.sub("", member)
        if member.endswith(".class"):
            names.append(member[: -len(".class")].replace("/", "."))
    return names


class ResolutionOracle(Protocol):
    """Protocol for a (package, class) lookup"""

    description: str

    def resolve(self, package_name: str, class_name: str) -> ResolveResult: ...


class ClasspathOracle:
    """Answers from an index of binary class names; never reports a path.

    The index starts with the bundled JDK classes, plus the runtime archive of
    the JDK in $JAVA_HOME when there is one. It grows with every classpath
    entry added (directories of .class files, .jar/.zip/.jmod archives).
    """

    description = "CLASSPATH"

    def __init__(self, entries: Iterable[Union[str, Path]] = (), include_jdk: bool = True):
        self._classes: Set[str] = set(binary_names()) if include_jdk else set()
        if include_jdk:
            runtime = find_runtime_archive()
            if runtime is not None:
                self.add_entry(runtime)
        for entry in entries:
            self.add_entry(entry)

    def add_class(self, qualified_name: str):
        """Register one class, e.g. 'com.acme.Widget' or 'com.acme.Widget$Part'"""
        self._classes.add(qualified_name)

    def add_entry(self, entry: Union[str, Path]) -> int:
        """
        Index a classpath entry

        Returns:
            Number of classes found in the entry
        """
        path = Path(entry)
        if path.is_dir():
            names = [
                ".".join(class_file.relative_to(path).with_suffix("").parts)
                for class_file in path.rglob("*.class")
            ]
        elif path.is_file() and path.suffix.lower() in (".jar", ".zip", ".jmod"):
            try:
                with zipfile.ZipFile(path) as archive:
                    names = _archive_class_names(archive, path.suffix.lower() == ".jmod")
            except (OSError, zipfile.BadZipFile) as e:
                logger.warning(f"Cannot read classpath archive {path}: {e}")
                return 0
        else:
            logger.warning(f"Ignoring classpath entry {path}: not a directory or archive")
            return 0

        count = 0
        for name in names:
            if name.rsplit(".", 1)[-1] in _SKIPPED_CLASSES:
                continue
            self._classes.add(name)
            count += 1

        logger.debug(f"Indexed {count} classes from {path}")
        return count

    def resolve(self, package_name: str, class_name: str) -> ResolveResult:
        if not class_name:
            return ResolveResult.not_found()

        # Nested classes are indexed by binary name
        binary = class_name.replace(".", "$")
        qualified = f"{package_name}.{binary}" if package_name else binary
        if qualified in self._classes:
            return ResolveResult.found()
        return ResolveResult.not_found()

    def __len__(self) -> int:
        return len(self._classes)


class SourcePathOracle:
    """Locates <root>/<package path>/<TopLevel>.java under a list of source roots"""

    description = "SOURCE"

    def __init__(self, roots: Iterable[Union[str, Path]]):
        self.roots = [Path(root).resolve() for root in roots]
        self._cache: Dict[Tuple[str, str], ResolveResult] = {}

    def resolve(self, package_name: str, class_name: str) -> ResolveResult:
        key = (package_name, class_name)
        if key not in self._cache:
            self._cache[key] = self._locate(package_name, class_name)
        return self._cache[key]

    def _locate(self, package_name: str, class_name: str) -> ResolveResult:
        top_level = class_name.split(".", 1)[0]
        segments = package_name.split(".") if package_name else []
        if not top_level or any(not segment for segment in segments):
            return ResolveResult.not_found()

        for root in self.roots:
            candidate = root.joinpath(*segments, f"{top_level}.java")
            if candidate.is_file():
                logger.debug(f"Found source for {package_name}.{class_name}: {candidate}")
                return ResolveResult.found(str(candidate))
        return ResolveResult.not_found()


OracleAnswer = Union[ResolveResult, str, Path, bool, None]


class CallbackOracle:
    """Adapts a plain function into an oracle.

    The callback may return a ResolveResult, a source path, True (exists,
    location unknown) or None/False (not found).
    """

    def __init__(self, callback: Callable[[str, str], OracleAnswer], description: str = "CALLBACK"):
        self.callback = callback
        self.description = description

    def resolve(self, package_name: str, class_name: str) -> ResolveResult:
        answer = self.callback(package_name, class_name)
        if isinstance(answer, ResolveResult):
            return answer
        if answer is None or answer is False:
            return ResolveResult.not_found()
        if answer is True:
            return ResolveResult.found()
        return ResolveResult.found(str(answer))
