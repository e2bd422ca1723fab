from conftest import RecordingOracle

from javapkg_resolver import Import, SourceUnit, TypeReference
from javapkg_resolver.strategies import (
    DefaultLanguageStrategy,
    DefaultPackageStrategy,
    DottedNameStrategy,
    ExactImportStrategy,
    LocalDeclarationStrategy,
    WildcardImportStrategy,
    local_strategies,
    oracle_strategies,
)


def make_unit(package="app", imports=(), primary=None, secondary=()):
    unit = SourceUnit(path="App.java", package_name=package, primary_type_name=primary)
    unit.secondary_type_names.update(secondary)
    for text in imports:
        unit.add_import(Import.from_text(text))
    return unit


class TestDottedName:
    def test_split_order_is_rightmost_first(self):
        assert DottedNameStrategy.split_candidates("a.b.C") == [("a.b", "C"), ("a", "b.C")]

    def test_no_dot_no_candidates(self):
        assert DottedNameStrategy.split_candidates("C") == []

    def test_oracle_asked_in_split_order(self):
        oracle = RecordingOracle()
        reference = TypeReference("a.b.C")
        assert DottedNameStrategy().apply(reference, make_unit(), oracle) is None
        assert oracle.calls == [("a.b", "C"), ("a", "b.C")]
        assert not reference.is_resolved

    def test_nested_class_split(self):
        oracle = RecordingOracle(known={("java.util", "Map.Entry")})
        reference = TypeReference("java.util.Map.Entry")
        result = DottedNameStrategy().apply(reference, make_unit(), oracle)
        assert result.success
        assert reference.package_name == "java.util"
        assert reference.class_name == "Map.Entry"
        assert reference.strategy == "dotted-name"
        assert oracle.calls == [("java.util.Map", "Entry"), ("java.util", "Map.Entry")]


class TestExactImport:
    def test_match_without_oracle_confirmation(self):
        oracle = RecordingOracle()
        reference = TypeReference("B")
        result = ExactImportStrategy().apply(reference, make_unit(imports=["b.B"]), oracle)
        assert result.success
        assert result.path is None
        assert reference.package_name == "b"
        assert f"{reference.package_name}.{reference.class_name}" == "b.B"

    def test_oracle_supplies_path(self):
        oracle = RecordingOracle(paths={("b", "B"): "/src/b/B.java"})
        reference = TypeReference("B")
        result = ExactImportStrategy().apply(reference, make_unit(imports=["b.B"]), oracle)
        assert result.path == "/src/b/B.java"

    def test_suffix_must_be_whole_segment(self):
        reference = TypeReference("B")
        assert ExactImportStrategy().apply(reference, make_unit(imports=["b.AB"]), RecordingOracle()) is None

    def test_static_imports_ignored(self):
        unit = make_unit()
        unit.add_import(Import.from_text("a.Util.max", is_static=True))
        assert ExactImportStrategy().apply(TypeReference("max"), unit, RecordingOracle()) is None


class TestWildcardImport:
    def test_first_confirmed_import_wins(self):
        oracle = RecordingOracle(known={("c", "Y"), ("d", "Y")})
        reference = TypeReference("Y")
        unit = make_unit(imports=["x.*", "c.*", "d.*"])
        assert WildcardImportStrategy().apply(reference, unit, oracle).success
        assert reference.package_name == "c"
        assert oracle.calls == [("x", "Y"), ("c", "Y")]

    def test_exact_imports_not_consulted(self):
        oracle = RecordingOracle(known={("c", "Y")})
        assert WildcardImportStrategy().apply(TypeReference("Y"), make_unit(imports=["c.Y"]), oracle) is None
        assert oracle.calls == []


class TestDefaultPackage:
    def test_same_package_class(self):
        oracle = RecordingOracle(known={("app", "Outer")})
        reference = TypeReference("Outer.Inner")
        assert DefaultPackageStrategy().apply(reference, make_unit(), oracle).success
        assert reference.package_name == "app"
        assert reference.class_name == "Outer"
        assert oracle.calls == [("app", "Outer")]

    def test_unit_without_package(self):
        oracle = RecordingOracle()
        DefaultPackageStrategy().apply(TypeReference("Thing"), make_unit(package=None), oracle)
        assert oracle.calls == [("", "Thing")]


class TestLocalDeclaration:
    def test_secondary_type_without_oracle_calls(self):
        reference = TypeReference("W")
        unit = make_unit(package="z", primary="Z", secondary={"W"})
        strategy = LocalDeclarationStrategy()
        assert not strategy.uses_oracle
        assert strategy.apply(reference, unit, None).success
        assert reference.package_name == "z"

    def test_unknown_type(self):
        assert LocalDeclarationStrategy().apply(TypeReference("Q"), make_unit(primary="Z"), None) is None


class TestDefaultLanguage:
    def test_default_package_lookup(self):
        oracle = RecordingOracle(known={("java.lang", "String")})
        reference = TypeReference("String")
        assert DefaultLanguageStrategy().apply(reference, make_unit(), oracle).success
        assert reference.package_name == "java.lang"

    def test_configurable_package(self):
        oracle = RecordingOracle()
        DefaultLanguageStrategy("kotlin").apply(TypeReference("Any"), make_unit(), oracle)
        assert oracle.calls == [("kotlin", "Any")]


def test_strategy_order():
    assert [s.name for s in oracle_strategies()] == [
        "dotted-name",
        "exact-import",
        "wildcard-import",
        "default-package",
    ]
    assert [s.name for s in local_strategies()] == ["local-declaration", "default-language"]
