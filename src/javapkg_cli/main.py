from pathlib import Path
from typing import Optional

import typer
from javapkg_resolver import (
    ClasspathOracle,
    PackageResolver,
    Processor,
    ReferenceExtractor,
    SourcePathOracle,
    setup_logging,
)
from javapkg_tree_sitter import JavaParseError, JavaParser

from .config import ConfigError, ResolverConfig
from .converters import import_to_text, processor_to_report, unit_to_report
from .models import LogLevel, ResolverSettings

app = typer.Typer(help="javapkg - Resolve the packages Java source files depend on")


def _load_settings(config_file: Optional[Path]) -> ResolverSettings:
    try:
        return ResolverConfig(config_file).settings
    except ConfigError as e:
        raise typer.BadParameter(str(e), param_hint="--config")


def _build_processor(settings: ResolverSettings) -> Processor:
    classpath_oracle = ClasspathOracle(settings.classpath)
    source_oracle = SourcePathOracle(settings.source_roots) if settings.source_roots else None
    resolver = PackageResolver(classpath_oracle, source_oracle, settings.default_package)
    extractor = ReferenceExtractor(JavaParser(strict=settings.strict_parse))
    return Processor(extractor, resolver)


@app.command()
def resolve(
    files: list[Path] = typer.Argument(..., help="Java files to start from"),
    source_root: list[Path] = typer.Option(None, "--source-root", "-s", help="Source root to search for referenced classes"),
    classpath: list[Path] = typer.Option(None, "--classpath", "-c", help="Directory or jar with compiled classes"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="Path to config file"),
    json_output: bool = typer.Option(False, "--json", help="Print a JSON report"),
    log_level: Optional[LogLevel] = typer.Option(None, "--log-level", case_sensitive=False, help="Logging level"),
):
    """Resolve the packages used by FILES and every source file they lead to"""
    settings = _load_settings(config_file)
    settings.source_roots.extend(str(root) for root in source_root or [])
    settings.classpath.extend(str(entry) for entry in classpath or [])
    level = log_level or settings.log_level
    setup_logging(level.value if level else None)

    processor = _build_processor(settings)
    for file_path in files:
        if not file_path.is_file():
            typer.echo(f"Warning: {file_path} not found, skipping", err=True)
            continue
        processor.add_file(file_path)

    packages = processor.process()

    if not processor.units:
        typer.echo("Error: no file could be parsed", err=True)
        raise typer.Exit(code=1)

    if json_output:
        typer.echo(processor_to_report(packages, processor).model_dump_json(indent=2))
        return

    for package_name in packages:
        typer.echo(package_name)


@app.command()
def extract(
    file: Path = typer.Argument(..., help="Java file to extract"),
    json_output: bool = typer.Option(False, "--json", help="Print a JSON report"),
    lenient: bool = typer.Option(False, help="Accept files with syntax errors"),
):
    """Show declarations and type references of one file, without resolving"""
    setup_logging()
    extractor = ReferenceExtractor(JavaParser(strict=not lenient))
    try:
        unit = extractor.extract_tree(extractor.parser.parse_file(file), str(file))
    except JavaParseError as e:
        typer.echo(f"Error: {e}", err=True)
        for error in e.errors:
            typer.echo(f"  {error}", err=True)
        raise typer.Exit(code=1)

    if json_output:
        typer.echo(unit_to_report(unit).model_dump_json(indent=2))
        return

    typer.echo(f"package: {unit.package_name or '(default)'}")
    typer.echo(f"primary: {unit.primary_type_name or '-'}")
    for name in sorted(unit.secondary_type_names):
        typer.echo(f"secondary: {name}")
    for name in sorted(unit.generics):
        typer.echo(f"generic: {name}")
    for imported in unit.imports:
        typer.echo(f"import: {import_to_text(imported)} ({imported.kind.value})")
    for reference in unit.references:
        typer.echo(f"reference: {reference.class_name}")


@app.command("dump-ast")
def dump_ast(
    file: Path = typer.Argument(..., help="Java file to dump"),
):
    """Print the tree-sitter syntax tree of a file"""
    try:
        result = JavaParser(strict=False).parse_file(file)
    except JavaParseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    def dump_tree(node, indent=0):
        line = "  " * indent + f"{node.type} [{node.start_point[0] + 1}:{node.start_point[1] + 1}]"
        if node.type == "ERROR" or node.is_missing:
            line += " <error>"
        elif not node.children:
            line += f" {node.text.decode('utf8', errors='replace')!r}"
        typer.echo(line)
        for child in node.named_children:
            dump_tree(child, indent + 1)

    dump_tree(result.root)


if __name__ == "__main__":
    app()
