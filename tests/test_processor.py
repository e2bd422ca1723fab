from javapkg_resolver import (
    CallbackOracle,
    ClasspathOracle,
    PackageResolver,
    Processor,
    SourcePathOracle,
)


class TestWorklist:
    def test_add_file_is_idempotent(self, tmp_path):
        processor = Processor()
        assert processor.add_file(tmp_path / "A.java")
        size = len(processor.pending)
        assert not processor.add_file(tmp_path / "A.java")
        assert not processor.add_file(str(tmp_path / "sub" / ".." / "A.java"))
        assert len(processor.pending) == size

    def test_clear_files(self, tmp_path):
        processor = Processor()
        processor.add_file(tmp_path / "A.java")
        processor.clear_files()
        assert processor.pending == []
        assert processor.seen == frozenset()
        assert processor.add_file(tmp_path / "A.java")

    def test_stack_order(self, write_java, tmp_path):
        first = write_java("First.java", "package one; class First {}")
        second = write_java("Second.java", "package two; class Second {}")
        processor = Processor()
        processor.add_file(first)
        processor.add_file(second)
        processor.process()
        assert [unit.primary_type_name for unit in processor.units] == ["Second", "First"]

    def test_empty_run(self):
        assert Processor().process() == []


class TestProcess:
    def test_single_file(self, write_java):
        path = write_java(
            "app/Main.java",
            """
            package app;

            import java.util.List;
            import java.io.*;

            public class Main {
                List<String> names;
                File file;
            }
            """,
        )
        processor = Processor()
        processor.add_file(path)
        assert processor.process() == ["app", "java.io", "java.lang", "java.util"]

    def test_transitive_closure(self, write_java, tmp_path):
        main = write_java(
            "src/app/Main.java",
            """
            package app;

            import lib.Helper;

            public class Main {
                Helper helper;
            }
            """,
        )
        write_java(
            "src/lib/Helper.java",
            """
            package lib;

            import java.util.concurrent.*;

            public class Helper {
                Executor executor;
                Util util;
            }
            """,
        )
        write_java("src/lib/Util.java", "package lib; class Util { Main back; }")

        resolver = PackageResolver(ClasspathOracle(), SourcePathOracle([tmp_path / "src"]))
        processor = Processor(resolver=resolver)
        processor.add_file(main)
        packages = processor.process()

        assert packages == ["app", "java.util.concurrent", "lib"]
        assert sorted(unit.primary_type_name for unit in processor.units) == ["Helper", "Main", "Util"]

    def test_cycle_terminates(self, write_java, tmp_path):
        a = write_java("src/p/A.java", "package p; public class A { B b; }")
        write_java("src/p/B.java", "package p; public class B { A a; }")
        processor = Processor()
        processor.set_source_oracle(SourcePathOracle([tmp_path / "src"]))
        processor.add_file(a)
        assert processor.process() == ["p"]
        assert len(processor.units) == 2

    def test_callback_oracle_feeds_worklist(self, write_java):
        other = write_java("elsewhere/Other.java", "package q; public class Other {}")
        main = write_java("Main.java", "package p; import q.Other; class Main { Other other; }")

        def locate(package_name, class_name):
            if (package_name, class_name) == ("q", "Other"):
                return other
            return None

        processor = Processor()
        processor.set_source_oracle(CallbackOracle(locate))
        processor.add_file(main)
        assert processor.process() == ["p", "q"]
        assert str(other.resolve()) in processor.seen

    def test_parse_failure_skipped(self, write_java, log_messages):
        good = write_java("Good.java", "package good; class Good {}")
        bad = write_java("Bad.java", "package bad; class Bad {")
        processor = Processor()
        processor.add_file(good)
        processor.add_file(bad)
        assert processor.process() == ["good"]
        assert any(m.startswith("WARNING") and "Bad.java" in m for m in log_messages)

    def test_unresolved_references_reported(self, write_java, log_messages):
        path = write_java("A.java", "package a; class A { Mystery m; }")
        processor = Processor()
        processor.add_file(path)
        assert processor.process() == ["a"]
        assert processor.unresolved() == [(str(path.resolve()), "Mystery")]
        assert any(m.startswith("WARNING") and "Mystery" in m for m in log_messages)

    def test_default_package_contributes_nothing(self, write_java):
        path = write_java("Script.java", "class Script { String s; }")
        processor = Processor()
        processor.add_file(path)
        assert processor.process() == ["java.lang"]
