"""
Package resolution strategies, in the order the resolver tries them.

Each strategy either resolves the reference (mutating it and returning the
successful ResolveResult) or returns None so the next one gets a turn.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from loguru import logger

from .models import ResolveResult, SourceUnit, TypeReference
from .oracles import ResolutionOracle

DEFAULT_LANGUAGE_PACKAGE = "java.lang"


class ResolutionStrategy(ABC):
    """Abstract base class for all resolution strategies."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier recorded on resolved references (e.g. 'exact-import')."""
        pass

    @property
    def uses_oracle(self) -> bool:
        """Strategies that answer from the unit alone are handed no oracle."""
        return True

    @abstractmethod
    def apply(
        self, reference: TypeReference, unit: SourceUnit, oracle: Optional[ResolutionOracle]
    ) -> Optional[ResolveResult]:
        """Try to resolve the reference; None when this strategy does not apply or fails."""
        pass

    def _resolved(
        self,
        reference: TypeReference,
        package_name: Optional[str],
        result: ResolveResult,
        class_name: Optional[str] = None,
    ) -> ResolveResult:
        reference.mark_resolved(package_name, class_name, strategy=self.name)
        return result


class DottedNameStrategy(ResolutionStrategy):
    """'a.b.C' may be class C in package a.b, or nested class b.C in package a"""

    name = "dotted-name"

    @staticmethod
    def split_candidates(class_name: str) -> List[Tuple[str, str]]:
        """(package, class) splits at each dot, rightmost dot first"""
        candidates = []
        position = class_name.rfind(".")
        while position > 0:
            candidates.append((class_name[:position], class_name[position + 1 :]))
            position = class_name.rfind(".", 0, position)
        return candidates

    def apply(self, reference, unit, oracle):
        for package_name, class_name in self.split_candidates(reference.class_name):
            if not class_name:
                continue
            result = oracle.resolve(package_name, class_name)
            if result.success:
                return self._resolved(reference, package_name, result, class_name)
        return None


class ExactImportStrategy(ResolutionStrategy):
    """'import a.b.C;' settles C: the author said where it lives"""

    name = "exact-import"

    def apply(self, reference, unit, oracle):
        suffix = "." + reference.class_name
        for imported in unit.exact_imports():
            # Static imports name members, not classes
            if imported.is_static or not imported.name.endswith(suffix):
                continue

            package_name = imported.name[: -len(suffix)]
            # The oracle can only tell us where the source is
            answer = oracle.resolve(package_name, reference.class_name)
            path = answer.path if answer.success else None
            return self._resolved(reference, package_name, ResolveResult.found(path))
        return None


class WildcardImportStrategy(ResolutionStrategy):
    name = "wildcard-import"

    def apply(self, reference, unit, oracle):
        for imported in unit.wildcard_imports():
            result = oracle.resolve(imported.name, reference.class_name)
            if result.success:
                return self._resolved(reference, imported.name, result)
        return None


class DefaultPackageStrategy(ResolutionStrategy):
    """Same-package classes need no import ('Outer.Inner' is looked up as Outer)"""

    name = "default-package"

    def apply(self, reference, unit, oracle):
        primary_segment = reference.class_name.split(".", 1)[0]
        if not primary_segment:
            return None
        result = oracle.resolve(unit.package_name or "", primary_segment)
        if result.success:
            return self._resolved(reference, unit.package_name, result, primary_segment)
        return None


class LocalDeclarationStrategy(ResolutionStrategy):
    """Types declared at the top level of the same file"""

    name = "local-declaration"

    @property
    def uses_oracle(self) -> bool:
        return False

    def apply(self, reference, unit, oracle):
        if unit.declares(reference.class_name):
            return self._resolved(reference, unit.package_name, ResolveResult.found())
        return None


class DefaultLanguageStrategy(ResolutionStrategy):
    """Last resort: the implicitly imported java.lang"""

    name = "default-language"

    def __init__(self, default_package: str = DEFAULT_LANGUAGE_PACKAGE):
        self.default_package = default_package

    def apply(self, reference, unit, oracle):
        result = oracle.resolve(self.default_package, reference.class_name)
        if result.success:
            return self._resolved(reference, self.default_package, result)
        logger.debug(f"{reference.class_name} is not in {self.default_package}")
        return None


def oracle_strategies() -> List[ResolutionStrategy]:
    """Strategies run once per configured oracle, in priority order"""
    return [DottedNameStrategy(), ExactImportStrategy(), WildcardImportStrategy(), DefaultPackageStrategy()]


def local_strategies(default_package: str = DEFAULT_LANGUAGE_PACKAGE) -> List[ResolutionStrategy]:
    """Fallbacks run after every oracle pass failed"""
    return [LocalDeclarationStrategy(), DefaultLanguageStrategy(default_package)]
