from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Set

WILDCARD_SUFFIX = ".*"


class ImportKind(str, Enum):
    EXACT = "exact"
    WILDCARD = "wildcard"


class ResolveState(str, Enum):
    UNKNOWN = "unknown"
    SUCCESS = "success"


@dataclass(frozen=True)
class Import:
    """An import declaration: 'a.b.C' (exact) or 'a.b.*' (wildcard, stored as 'a.b')"""

    name: str
    kind: ImportKind
    is_static: bool = False

    @classmethod
    def from_text(cls, text: str, is_static: bool = False) -> "Import":
        text = text.strip()
        if text.endswith(WILDCARD_SUFFIX):
            return cls(text[: -len(WILDCARD_SUFFIX)], ImportKind.WILDCARD, is_static)
        return cls(text, ImportKind.EXACT, is_static)


@dataclass
class TypeReference:
    """A type name used by a source file and the package it was resolved to"""

    class_name: str  # may be dotted when taken from a qualified name
    package_name: Optional[str] = None
    state: ResolveState = ResolveState.UNKNOWN
    strategy: Optional[str] = None  # which resolution strategy succeeded

    @property
    def is_resolved(self) -> bool:
        return self.state is ResolveState.SUCCESS

    @property
    def qualified_name(self) -> str:
        if self.package_name:
            return f"{self.package_name}.{self.class_name}"
        return self.class_name

    def mark_resolved(
        self, package_name: Optional[str], class_name: Optional[str] = None, strategy: Optional[str] = None
    ):
        self.package_name = package_name
        if class_name is not None:
            self.class_name = class_name
        self.state = ResolveState.SUCCESS
        self.strategy = strategy


@dataclass
class ResolveResult:
    """Answer of a resolution oracle for one (package, class) pair"""

    success: bool
    path: Optional[str] = None  # source file to queue for processing, if known

    @classmethod
    def found(cls, path: Optional[str] = None) -> "ResolveResult":
        return cls(True, path)

    @classmethod
    def not_found(cls) -> "ResolveResult":
        return cls(False, None)


@dataclass
class SourceUnit:
    """Declarations and type references extracted from one Java source file"""

    path: str
    package_name: Optional[str] = None
    primary_type_name: Optional[str] = None
    secondary_type_names: Set[str] = field(default_factory=set)
    generics: Set[str] = field(default_factory=set)
    imports: List[Import] = field(default_factory=list)
    references: List[TypeReference] = field(default_factory=list)

    def add_import(self, imported: Import):
        self.imports.append(imported)

    def add_generic(self, name: str):
        """Record a type parameter name; it can never be a type reference"""
        self.generics.add(name)
        self.references = [ref for ref in self.references if ref.class_name != name]

    def add_reference(self, class_name: str) -> Optional[TypeReference]:
        """Add a type reference unless it names a type parameter.

        Adding a name twice is a no-op returning the existing reference.
        """
        if class_name in self.generics:
            return None
        existing = self.find_reference(class_name)
        if existing:
            return existing
        reference = TypeReference(class_name)
        self.references.append(reference)
        return reference

    def find_reference(self, class_name: str) -> Optional[TypeReference]:
        for ref in self.references:
            if ref.class_name == class_name:
                return ref
        return None

    def merge_duplicate_references(self):
        """Fold references renamed onto an existing name back into one, preferring the resolved one"""
        merged: Dict[str, TypeReference] = {}
        for ref in self.references:
            kept = merged.get(ref.class_name)
            if kept is None or (not kept.is_resolved and ref.is_resolved):
                merged[ref.class_name] = ref
        self.references = list(merged.values())

    def declares(self, type_name: str) -> bool:
        """True if type_name is a top-level type of this file"""
        return type_name == self.primary_type_name or type_name in self.secondary_type_names

    def resolved_references(self) -> List[TypeReference]:
        return [ref for ref in self.references if ref.is_resolved]

    def unresolved_references(self) -> List[TypeReference]:
        return [ref for ref in self.references if not ref.is_resolved]

    def wildcard_imports(self) -> List[Import]:
        return [imp for imp in self.imports if imp.kind is ImportKind.WILDCARD]

    def exact_imports(self) -> List[Import]:
        return [imp for imp in self.imports if imp.kind is ImportKind.EXACT]
