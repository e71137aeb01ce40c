"""Analysis of the sample Java project on disk."""

import pytest

from class_insight import analyze, render
from class_insight.scanning.models import TypeKind
from class_insight.sources import DirectoryLoader


@pytest.fixture
def project_result(java_project):
    loader = DirectoryLoader(java_project)
    return analyze(loader.list_files(), loader)


class TestSampleProject:
    """Relationships and metrics of tests/fixtures/java_project."""

    def test_declared_types(self, project_result):
        assert set(project_result.types) == {
            "Shape",
            "AbstractShape",
            "Circle",
            "Logger",
            "Canvas",
            "Palette",
            "Renderer",
        }

    def test_kinds(self, project_result):
        types = project_result.types
        assert types["Shape"].kind == TypeKind.INTERFACE
        assert types["AbstractShape"].kind == TypeKind.ABSTRACT_CLASS
        assert types["Circle"].kind == TypeKind.CLASS
        assert project_result.abstractness == pytest.approx(2 / 7)

    def test_canvas_relationships(self, project_result):
        canvas = project_result.types["Canvas"].relationships
        assert canvas.compositions == {"Palette"}
        assert canvas.aggregations == {"Shape"}
        assert canvas.associations == {"Circle", "Logger"}
        assert canvas.dependencies == {"Renderer"}

    def test_inheritance(self, project_result):
        types = project_result.types
        assert types["Circle"].relationships.extends == {"AbstractShape"}
        assert types["AbstractShape"].relationships.implements == {"Shape", "Serializable"}

    def test_singleton(self, project_result):
        assert project_result.types["Logger"].singleton
        assert not project_result.types["Canvas"].singleton

    def test_coupling(self, project_result):
        types = project_result.types
        assert types["Canvas"].metrics.ce == 5
        assert types["Canvas"].metrics.instability == 1.0
        assert types["Shape"].metrics.ca == 2
        assert types["Shape"].metrics.instability == 0.0
        assert types["Circle"].metrics.instability == pytest.approx(0.5)

    def test_file_metrics(self, project_result):
        files = project_result.files
        assert files["com/example/model/Shape.java"].size == 7
        assert files["com/example/service/Renderer.java"].complexity == 1
        assert "README.txt" not in files
        assert "README.txt" in project_result.file_paths

    def test_diagram(self, project_result):
        text = render(project_result)
        assert "interface Serializable << (I,#87CEEB) >> {" in text
        assert "Canvas *-- Palette" in text
        assert "Canvas o-- Shape" in text
        assert "Canvas -- Logger" in text
        assert "Canvas ..> Renderer" in text
        assert "Circle --|> AbstractShape" in text
        assert "AbstractShape ..|> Shape" in text
        assert "Logger o-- Logger : -instance" in text
        assert "Fake" not in text
