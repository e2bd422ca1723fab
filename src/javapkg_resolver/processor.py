"""
Processor
Drives extraction and resolution over a worklist of files until no oracle
discovers anything new, then aggregates the packages involved
"""

from collections import deque
from pathlib import Path
from typing import Deque, FrozenSet, List, Optional, Set, Tuple, Union

from loguru import logger

from .extractor import ReferenceExtractor
from .models import SourceUnit
from .oracles import ResolutionOracle
from .resolver import PackageResolver


class Processor:
    """Depth-first transitive closure over Java source files.

    Every path is queued at most once per run (tracked in the seen-set),
    which is what makes cyclic discovery terminate.
    """

    def __init__(self, extractor: Optional[ReferenceExtractor] = None, resolver: Optional[PackageResolver] = None):
        self.extractor = extractor or ReferenceExtractor()
        self.resolver = resolver or PackageResolver()

        self._pending: Deque[str] = deque()  # used as a stack
        self._seen: Set[str] = set()
        self._units: List[SourceUnit] = []

    def set_source_oracle(self, oracle: Optional[ResolutionOracle]):
        """Oracle consulted before the classpath; may point at more files to process"""
        self.resolver.source_oracle = oracle

    def add_file(self, path: Union[str, Path]) -> bool:
        """Queue a file unless it was queued before. Returns True if queued."""
        key = str(Path(path).resolve())
        if key in self._seen:
            return False
        self._seen.add(key)
        self._pending.append(key)
        return True

    def clear_files(self):
        self._pending.clear()
        self._seen.clear()

    def process(self) -> List[str]:
        """
        Process queued files and everything they lead to

        Returns:
            Sorted distinct package names of the processed files and of
            every resolved reference
        """
        self._units = []

        while self._pending:
            path = self._pending.pop()
            unit = self.extractor.extract(path)
            if unit is None:
                continue

            discovered = self.resolver.resolve(unit)
            self._units.append(unit)
            self._log_unit(unit)

            for new_path in discovered:
                if self.add_file(new_path):
                    logger.debug(f"Queued {new_path} (referenced from {unit.path})")

        packages: Set[str] = set()
        for unit in self._units:
            if unit.package_name:
                packages.add(unit.package_name)
            for reference in unit.references:
                if not reference.is_resolved:
                    logger.warning(f"Failed to resolve {reference.class_name} in {unit.path}")
                elif reference.package_name:
                    packages.add(reference.package_name)

        logger.info(f"Processed {len(self._units)} files, {len(packages)} packages")
        return sorted(packages)

    def _log_unit(self, unit: SourceUnit):
        logger.debug(
            f"{unit.path}: package={unit.package_name}, primary={unit.primary_type_name}, "
            f"secondary={sorted(unit.secondary_type_names)}"
        )
        for reference in unit.references:
            logger.debug(
                f"  {reference.class_name}: package={reference.package_name}, "
                f"state={reference.state.value}, strategy={reference.strategy}"
            )

    @property
    def pending(self) -> List[str]:
        """Queued paths, next to be processed last"""
        return list(self._pending)

    @property
    def seen(self) -> FrozenSet[str]:
        return frozenset(self._seen)

    @property
    def units(self) -> List[SourceUnit]:
        """Units produced by the last process() run, in processing order"""
        return list(self._units)

    def unresolved(self) -> List[Tuple[str, str]]:
        """(path, class name) of every reference the last run could not resolve"""
        return [(unit.path, ref.class_name) for unit in self._units for ref in unit.unresolved_references()]
