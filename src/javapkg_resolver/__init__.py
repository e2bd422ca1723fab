"""
javapkg resolver core
Extracts type references from Java files and resolves the packages they live in
"""

from .extractor import ReferenceExtractor
from .logging_config import setup_logging
from .models import Import, ImportKind, ResolveResult, ResolveState, SourceUnit, TypeReference
from .oracles import CallbackOracle, ClasspathOracle, ResolutionOracle, SourcePathOracle
from .processor import Processor
from .resolver import PackageResolver
from .strategies import DEFAULT_LANGUAGE_PACKAGE, ResolutionStrategy

__version__ = "0.1.0"

__all__ = [
    "CallbackOracle",
    "ClasspathOracle",
    "DEFAULT_LANGUAGE_PACKAGE",
    "Import",
    "ImportKind",
    "PackageResolver",
    "Processor",
    "ReferenceExtractor",
    "ResolutionOracle",
    "ResolutionStrategy",
    "ResolveResult",
    "ResolveState",
    "SourceUnit",
    "SourcePathOracle",
    "TypeReference",
    "setup_logging",
]
