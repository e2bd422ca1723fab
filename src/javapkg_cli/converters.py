from javapkg_resolver import Import, ImportKind, Processor, SourceUnit, TypeReference

from .models import ReferenceReport, ResolveReport, UnitReport


def import_to_text(imported: Import) -> str:
    """Render an import the way it was written, minus 'import' and ';'"""
    text = imported.name + ".*" if imported.kind is ImportKind.WILDCARD else imported.name
    return f"static {text}" if imported.is_static else text


def reference_to_report(reference: TypeReference) -> ReferenceReport:
    return ReferenceReport(
        class_name=reference.class_name,
        package_name=reference.package_name,
        resolved=reference.is_resolved,
        strategy=reference.strategy,
    )


def unit_to_report(unit: SourceUnit) -> UnitReport:
    """Convert an internal dataclass unit to an external Pydantic report"""
    return UnitReport(
        path=unit.path,
        package_name=unit.package_name,
        primary_type=unit.primary_type_name,
        secondary_types=sorted(unit.secondary_type_names),
        generics=sorted(unit.generics),
        imports=[import_to_text(imported) for imported in unit.imports],
        references=[reference_to_report(ref) for ref in unit.references],
    )


def processor_to_report(packages: list[str], processor: Processor) -> ResolveReport:
    units = processor.units
    parsed = {unit.path for unit in units}
    return ResolveReport(
        packages=packages,
        units=[unit_to_report(unit) for unit in units],
        unresolved=[f"{path}: {class_name}" for path, class_name in processor.unresolved()],
        failed_files=sorted(path for path in processor.seen if path not in parsed),
    )
