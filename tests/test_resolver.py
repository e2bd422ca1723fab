import pytest
from conftest import RecordingOracle

from javapkg_resolver import ClasspathOracle, PackageResolver, ReferenceExtractor


@pytest.fixture
def extractor():
    return ReferenceExtractor()


def reference(unit, class_name):
    found = unit.find_reference(class_name)
    assert found is not None, f"{class_name} not referenced"
    return found


class TestResolveExamples:
    def test_exact_import(self, extractor):
        unit = extractor.extract_string("package a; import b.B; class A { B b; }")
        PackageResolver(RecordingOracle()).resolve(unit)
        ref = reference(unit, "B")
        assert ref.is_resolved
        assert ref.package_name == "b"
        assert ref.strategy == "exact-import"

    def test_wildcard_import(self, extractor):
        unit = extractor.extract_string("package a; import c.*; class A { Y y; }")
        PackageResolver(RecordingOracle(known={("c", "Y")})).resolve(unit)
        ref = reference(unit, "Y")
        assert ref.package_name == "c"
        assert ref.strategy == "wildcard-import"

    def test_sibling_type(self, extractor):
        unit = extractor.extract_string("package z; public class Z { W w; } class W {}")
        oracle = RecordingOracle()
        PackageResolver(oracle).resolve(unit)
        ref = reference(unit, "W")
        assert ref.package_name == "z"
        assert ref.strategy == "local-declaration"
        # Only the oracle strategies that ran before the local lookup asked anything
        assert ("java.lang", "W") not in oracle.calls

    def test_default_language_fallback(self, extractor):
        unit = extractor.extract_string("package a; import b.B; class A { String s; }")
        PackageResolver(ClasspathOracle()).resolve(unit)
        ref = reference(unit, "String")
        assert ref.package_name == "java.lang"
        assert ref.strategy == "default-language"

    def test_unresolved_reference_stays_unknown(self, extractor):
        unit = extractor.extract_string("package a; class A { Mystery m; }")
        PackageResolver(ClasspathOracle()).resolve(unit)
        assert not reference(unit, "Mystery").is_resolved
        assert [ref.class_name for ref in unit.unresolved_references()] == ["Mystery"]


class TestPasses:
    def test_source_oracle_tried_first(self, extractor):
        unit = extractor.extract_string("package a; import c.*; class A { Y y; }")
        source = RecordingOracle(known={("c", "Y")}, paths={("c", "Y"): "/src/c/Y.java"}, description="SOURCE")
        classpath = RecordingOracle(description="CLASSPATH")
        discovered = PackageResolver(classpath, source).resolve(unit)
        assert discovered == ["/src/c/Y.java"]
        assert classpath.calls == []

    def test_classpath_pass_after_source_pass(self, extractor):
        unit = extractor.extract_string("package a; import c.*; class A { Y y; }")
        source = RecordingOracle(description="SOURCE")
        classpath = RecordingOracle(known={("c", "Y")}, description="CLASSPATH")
        PackageResolver(classpath, source).resolve(unit)
        assert reference(unit, "Y").package_name == "c"
        assert source.calls == [("c", "Y"), ("a", "Y")]
        assert classpath.calls == [("c", "Y")]

    def test_full_cascade_call_order(self, extractor):
        unit = extractor.extract_string("package a; import c.*; class A { Q q; }")
        oracle = RecordingOracle()
        PackageResolver(oracle).resolve(unit)
        assert oracle.calls == [("c", "Q"), ("a", "Q"), ("java.lang", "Q")]

    def test_discovered_paths_unique(self, extractor):
        unit = extractor.extract_string("package a; import c.*; class A { Y y; Z z; }")
        source = RecordingOracle(paths={("c", "Y"): "/src/c/Y.java", ("c", "Z"): "/src/c/Y.java"})
        assert PackageResolver(RecordingOracle(), source).resolve(unit) == ["/src/c/Y.java"]

    def test_blank_paths_ignored(self, extractor):
        unit = extractor.extract_string("package a; import c.*; class A { Y y; }")
        source = RecordingOracle(paths={("c", "Y"): "  "})
        assert PackageResolver(RecordingOracle(), source).resolve(unit) == []
        assert reference(unit, "Y").is_resolved


class TestProperties:
    def test_idempotent(self, extractor):
        unit = extractor.extract_string(
            """
            package a;
            import b.B;
            import java.util.*;
            class A { B b; List<String> items; java.util.Map.Entry<String, B> entry; }
            """
        )
        resolver = PackageResolver(ClasspathOracle())
        resolver.resolve(unit)
        before = [(ref.class_name, ref.package_name, ref.state) for ref in unit.references]
        oracle = RecordingOracle()
        PackageResolver(oracle).resolve(unit)
        after = [(ref.class_name, ref.package_name, ref.state) for ref in unit.references]
        assert after == before
        resolved = {ref.class_name for ref in unit.resolved_references()}
        assert all(call[1] not in resolved for call in oracle.calls)

    def test_exact_import_reconstructs_import(self, extractor):
        unit = extractor.extract_string(
            "package a; import x.y.Alpha; import q.Beta; class A { Alpha a; Beta b; }"
        )
        PackageResolver(RecordingOracle()).resolve(unit)
        imported = {imp.name for imp in unit.imports}
        for ref in unit.references:
            assert ref.strategy == "exact-import"
            assert f"{ref.package_name}.{ref.class_name}" in imported

    def test_dotted_reference_rewritten(self, extractor):
        unit = extractor.extract_string("package a; class A { java.util.Map.Entry<String, String> e; }")
        PackageResolver(ClasspathOracle()).resolve(unit)
        ref = reference(unit, "Map.Entry")
        assert ref.package_name == "java.util"
        assert ref.strategy == "dotted-name"

    def test_renamed_references_merged(self, extractor):
        unit = extractor.extract_string(
            "package app; import java.util.*; class A { Outer.Inner i; Outer o; java.util.List l; List m; }"
        )
        PackageResolver(RecordingOracle(known={("app", "Outer"), ("java.util", "List")})).resolve(unit)
        assert [ref.class_name for ref in unit.references] == ["Outer", "List"]
        assert reference(unit, "Outer").package_name == "app"
        assert reference(unit, "List").package_name == "java.util"

    def test_language_types_resolved(self, extractor):
        unit = extractor.extract_string(
            """
            package a;
            class A {
                StackWalker w; ProcessHandle p; Module m; NoSuchMethodError e;
                IllegalCallerException i; ClassValue<String> v;
            }
            """
        )
        PackageResolver(ClasspathOracle()).resolve(unit)
        assert unit.unresolved_references() == []
        assert {ref.package_name for ref in unit.references} == {"java.lang"}


class TestOracleHandOff:
    def test_local_strategies_get_no_oracle(self, extractor, monkeypatch):
        unit = extractor.extract_string("package z; public class Z { W w; } class W {}")
        resolver = PackageResolver(RecordingOracle())
        local = resolver._local_strategies[0]
        received = []
        original_apply = local.apply

        def spy(reference, unit, oracle):
            received.append(oracle)
            return original_apply(reference, unit, oracle)

        monkeypatch.setattr(local, "apply", spy)
        resolver.resolve(unit)
        assert received == [None]
        assert reference(unit, "W").strategy == "local-declaration"
