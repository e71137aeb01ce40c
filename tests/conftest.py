"""Shared test fixtures for Class Insight tests."""

from pathlib import Path

import pytest

from class_insight.exceptions import FileAccessError

FIXTURES = Path(__file__).parent / "fixtures"


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


class MemoryLoader:
    """Content loader over an in-memory {path: text} mapping.

    Paths listed in ``failing`` raise FileAccessError, like an unreachable
    remote file.
    """

    def __init__(self, files, failing=()):
        self.files = dict(files)
        self.failing = set(failing)
        self.calls = []

    def __call__(self, path):
        self.calls.append(path)
        if path in self.failing or path not in self.files:
            raise FileAccessError(path, "unavailable")
        return self.files[path]


@pytest.fixture
def memory_loader():
    """Factory for in-memory content loaders."""
    return MemoryLoader


@pytest.fixture
def java_project():
    """Path to the sample Java project."""
    return FIXTURES / "java_project"


@pytest.fixture
def shapes_sources():
    """Small set of sources covering every relationship kind."""
    return {
        "Shape.java": "public interface Shape { double area(); }\n",
        "Base.java": "public abstract class Base implements Shape { }\n",
        "Square.java": (
            "public class Square extends Base {\n"
            "    private Color color = new Color();\n"
            "    private Pen pen;\n"
            "    public Square(Pen pen) { this.pen = pen; }\n"
            "    public double area() { return 1; }\n"
            "}\n"
        ),
        "Color.java": "class Color { }\n",
        "Pen.java": "class Pen { }\n",
    }
