"""End-to-end tests for analyze() and render()."""

import pytest

from class_insight import AnalysisConfig, analyze, render
from class_insight.exceptions import RetrievalError
from class_insight.scanning.models import TypeKind


class TestScenarios:
    """Small programs with known metrics."""

    def test_independent_concrete_and_interface(self, memory_loader):
        loader = memory_loader({"A.java": "class A { }", "B.java": "interface B { }"})
        result = analyze(["A.java", "B.java"], loader)
        assert result.abstractness == pytest.approx(0.5)
        for name in ("A", "B"):
            metrics = result.types[name].metrics
            assert metrics.instability == 0.0
            assert metrics.distance == pytest.approx(0.5)

    def test_extends(self, memory_loader):
        loader = memory_loader({"C.java": "class C extends D { }", "D.java": "class D { }"})
        result = analyze(["C.java", "D.java"], loader)
        c, d = result.types["C"], result.types["D"]
        assert c.metrics.ce == 1
        assert d.metrics.ca == 1
        assert c.metrics.instability == 1.0
        assert d.metrics.instability == 0.0
        assert c.relationships.extends == {"D"}

    def test_composition(self, memory_loader):
        loader = memory_loader(
            {"E.java": "class E { private F f = new F(); }", "F.java": "class F { }"}
        )
        result = analyze(["E.java", "F.java"], loader)
        rels = result.types["E"].relationships
        assert rels.compositions == {"F"}
        assert rels.associations == frozenset()

    def test_singleton_usage_is_association(self, memory_loader):
        loader = memory_loader(
            {
                "Logger.java": (
                    "class Logger { private static Logger inst; "
                    "public static Logger getInstance() { return inst; } }"
                ),
                "App.java": "class App { void run() { Logger.getInstance(); } }",
            }
        )
        result = analyze(["Logger.java", "App.java"], loader)
        app = result.types["App"].relationships
        assert app.associations == {"Logger"}
        assert app.dependencies == frozenset()
        assert result.types["Logger"].singleton

    def test_all_relationship_kinds(self, memory_loader, shapes_sources):
        result = analyze(sorted(shapes_sources), memory_loader(shapes_sources))
        square = result.types["Square"].relationships
        assert square.extends == {"Base"}
        assert square.compositions == {"Color"}
        assert square.aggregations == {"Pen"}
        assert result.types["Base"].relationships.implements == {"Shape"}
        assert result.types["Base"].kind == TypeKind.ABSTRACT_CLASS
        assert result.abstractness == pytest.approx(2 / 5)


class TestAnalyzeInputs:
    """Test file selection and failure handling."""

    def test_non_matching_paths_kept_but_not_analyzed(self, memory_loader):
        loader = memory_loader({"A.java": "class A { }", "notes.txt": "class Ghost { }"})
        result = analyze(["A.java", "notes.txt"], loader)
        assert set(result.types) == {"A"}
        assert result.file_paths == ("A.java", "notes.txt")
        assert "notes.txt" not in loader.calls

    def test_failed_file_skipped(self, memory_loader):
        loader = memory_loader({"A.java": "class A { }"}, failing={"B.java"})
        result = analyze(["A.java", "B.java"], loader)
        assert set(result.types) == {"A"}
        assert result.failed_files == ("B.java",)

    def test_os_error_skipped(self):
        def loader(path):
            if path == "bad.java":
                raise OSError("boom")
            return "class Ok { }"

        result = analyze(["bad.java", "ok.java"], loader)
        assert set(result.types) == {"Ok"}
        assert result.failed_files == ("bad.java",)

    def test_all_failed_raises(self, memory_loader):
        loader = memory_loader({}, failing={"A.java", "B.java"})
        with pytest.raises(RetrievalError) as exc_info:
            analyze(["A.java", "B.java"], loader)
        assert exc_info.value.failed == ["A.java", "B.java"]

    def test_no_candidates_is_empty_result(self, memory_loader):
        result = analyze(["README.md"], memory_loader({"README.md": "hello"}))
        assert not result.has_types
        assert len(result.files) == 0
        assert result.abstractness == 0.0

    def test_files_without_types(self, memory_loader):
        result = analyze(["a.java"], memory_loader({"a.java": "// nothing here\n"}))
        assert not result.has_types
        assert result.files["a.java"].size == 1

    def test_malformed_declaration_counted(self, memory_loader):
        loader = memory_loader({"A.java": "class A { } class Broken { int x;"})
        result = analyze(["A.java"], loader)
        assert set(result.types) == {"A"}
        assert result.skipped_declarations == 1

    def test_custom_extensions(self, memory_loader):
        config = AnalysisConfig(extensions=[".jav"])
        result = analyze(["A.jav"], memory_loader({"A.jav": "class A { }"}), config)
        assert set(result.types) == {"A"}

    def test_parallel_workers_same_result(self, memory_loader, shapes_sources):
        paths = sorted(shapes_sources)
        sequential = analyze(paths, memory_loader(shapes_sources))
        parallel = analyze(paths, memory_loader(shapes_sources), AnalysisConfig(workers=4))
        assert sequential.to_dict() == parallel.to_dict()


class TestResultInvariants:
    """Properties that hold for every result."""

    def test_metric_bounds(self, memory_loader, shapes_sources):
        result = analyze(sorted(shapes_sources), memory_loader(shapes_sources))
        for report in result.types.values():
            m = report.metrics
            assert 0.0 <= m.instability <= 1.0
            assert m.distance == pytest.approx(abs(result.abstractness + m.instability - 1))

    def test_result_is_immutable(self, memory_loader):
        result = analyze(["A.java"], memory_loader({"A.java": "class A { }"}))
        with pytest.raises(TypeError):
            result.types["B"] = result.types["A"]

    def test_scatter_points(self, memory_loader):
        loader = memory_loader({"C.java": "class C extends D { }", "D.java": "interface D { }"})
        result = analyze(["C.java", "D.java"], loader)
        assert result.scatter_points() == [("C", 1.0, 0.0), ("D", 0.0, 1.0)]

    def test_to_dict(self, memory_loader):
        loader = memory_loader({"C.java": "class C extends D { }", "D.java": "class D { }"})
        data = analyze(["C.java", "D.java"], loader).to_dict()
        assert data["types"]["C"]["relationships"]["extends"] == ["D"]
        assert data["types"]["C"]["kind"] == "class"
        assert data["files"]["C.java"] == {"size": 1, "complexity": 0}


class TestRender:
    """Test render() on analyzed sources."""

    def test_no_dependency_edge_for_related_pair(self, memory_loader):
        loader = memory_loader(
            {
                "A.java": "class A { private B b; void use(B other) { } }",
                "B.java": "class B { }",
            }
        )
        text = render(analyze(["A.java", "B.java"], loader))
        assert "A o-- B" in text
        assert "A ..> B" not in text

    def test_singleton_rendering(self, memory_loader):
        loader = memory_loader(
            {
                "S.java": (
                    "class S { private static S one = new S(); "
                    "public static S instance() { return one; } }"
                )
            }
        )
        text = render(analyze(["S.java"], loader))
        assert "class S << (S,#FF7700) singleton >> {" in text
        assert "S o-- S : -instance" in text
        assert "S *-- S" not in text

    def test_self_referential_field_edge(self, memory_loader):
        loader = memory_loader(
            {"Node.java": "class Node { private Node next; Node(Node n) { this.next = n; } }"}
        )
        result = analyze(["Node.java"], loader)
        assert result.types["Node"].relationships.aggregations == {"Node"}
        assert "Node o-- Node\n" in render(result)

    def test_layout_from_config(self, memory_loader):
        result = analyze(["A.java"], memory_loader({"A.java": "class A { }"}))
        assert "!pragma layout elk" in render(result, AnalysisConfig(diagram_layout="elk"))


class TestPathologicalInput:
    """Degenerate inputs finish quickly."""

    @pytest.mark.slow
    def test_many_keywords_without_bodies(self, memory_loader):
        text = "class A " * 50_000
        result = analyze(["A.java"], memory_loader({"A.java": text}))
        assert not result.has_types

    @pytest.mark.slow
    def test_deeply_nested_types(self, memory_loader):
        depth = 300
        text = "".join(f"class T{i} {{ " for i in range(depth)) + "}" * depth
        result = analyze(["T.java"], memory_loader({"T.java": text}))
        assert len(result.types) == depth

    @pytest.mark.slow
    def test_repeated_unbalanced_generics(self, memory_loader):
        text = "class A { " + "Foo<" * 50_000 + " }\nclass Foo { }\n"
        result = analyze(["A.java"], memory_loader({"A.java": text}))
        assert set(result.types) == {"A", "Foo"}

    @pytest.mark.slow
    def test_huge_unterminated_comment(self, memory_loader):
        text = "class A { }\n/* " + "class B { " * 100_000
        result = analyze(["A.java"], memory_loader({"A.java": text}))
        assert set(result.types) == {"A"}
