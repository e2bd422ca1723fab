"""
Package Resolver
Assigns a package to every type reference of a SourceUnit
"""

from typing import List, Optional, Sequence, Tuple

from loguru import logger

from .models import ResolveResult, SourceUnit, TypeReference
from .oracles import ClasspathOracle, ResolutionOracle
from .strategies import DEFAULT_LANGUAGE_PACKAGE, ResolutionStrategy, local_strategies, oracle_strategies


class PackageResolver:
    """Runs the strategy cascade over the references of one unit at a time.

    Pass order:
        1. oracle strategies against the source oracle (if any)
        2. oracle strategies against the classpath oracle
        3. local declarations, then the default language package
    """

    def __init__(
        self,
        classpath_oracle: Optional[ResolutionOracle] = None,
        source_oracle: Optional[ResolutionOracle] = None,
        default_package: str = DEFAULT_LANGUAGE_PACKAGE,
    ):
        self.classpath_oracle = classpath_oracle if classpath_oracle is not None else ClasspathOracle()
        self.source_oracle = source_oracle
        self.default_package = default_package
        self._oracle_strategies = oracle_strategies()
        self._local_strategies = local_strategies(default_package)

    def passes(self) -> List[Tuple[Sequence[ResolutionStrategy], ResolutionOracle]]:
        passes: List[Tuple[Sequence[ResolutionStrategy], ResolutionOracle]] = []
        if self.source_oracle is not None:
            passes.append((self._oracle_strategies, self.source_oracle))
        passes.append((self._oracle_strategies, self.classpath_oracle))
        passes.append((self._local_strategies, self.classpath_oracle))
        return passes

    def resolve(self, unit: SourceUnit) -> List[str]:
        """
        Resolve every unresolved reference of the unit in place

        Returns:
            Source paths discovered by the oracles, unique, in discovery order
        """
        discovered: List[str] = []
        for reference in unit.references:
            if reference.is_resolved:
                continue
            result = self.resolve_reference(reference, unit)
            if result is None or not result.path or not result.path.strip():
                continue
            if result.path not in discovered:
                discovered.append(result.path)

        # Renaming strategies can turn 'Outer.Inner' into an already referenced 'Outer'
        unit.merge_duplicate_references()
        resolved = len(unit.resolved_references())
        logger.info(f"Resolved {resolved}/{len(unit.references)} references in {unit.path}")
        return discovered

    def resolve_reference(self, reference: TypeReference, unit: SourceUnit) -> Optional[ResolveResult]:
        """Try each pass in turn; the first successful strategy wins"""
        for strategies, oracle in self.passes():
            for strategy in strategies:
                result = strategy.apply(reference, unit, oracle if strategy.uses_oracle else None)
                if result is not None and result.success:
                    logger.debug(
                        f"{reference.qualified_name} resolved by {strategy.name} ({oracle.description})"
                    )
                    return result
        return None
