"""Tests for body reference coupling."""

from class_insight.relations.body import find_body_references, resolve_bodies
from class_insight.relations.models import TypeRegistry
from class_insight.scanning.declarations import erase_nested_types, extract_declarations
from class_insight.scanning.models import SourceFile
from class_insight.scanning.sanitizer import sanitize


def _registry(text):
    registry = TypeRegistry()
    sanitized = sanitize(text)
    decls, _ = extract_declarations(SourceFile("F.java", text), sanitized)
    erase_nested_types(decls, sanitized)
    for decl in decls:
        registry.register(decl)
    return registry


class TestFindBodyReferences:
    """Test find_body_references()."""

    def test_whole_words_only(self):
        registry = _registry("class A { Bee b; B x; } class B { } class Bee { }")
        decl = registry.states["A"].declaration
        assert find_body_references(decl, registry.names()) == ["B", "Bee"]

    def test_self_excluded(self):
        registry = _registry("class A { A next; }")
        assert find_body_references(registry.states["A"].declaration, ["A"]) == []

    def test_nested_contents_not_counted(self):
        registry = _registry("class A { class Inner { B b; } } class B { }")
        refs = find_body_references(registry.states["A"].declaration, registry.names())
        assert "B" not in refs


class TestResolveBodies:
    """Test resolve_bodies()."""

    def test_one_increment_per_pair(self):
        registry = _registry("class A { B b1; B b2; B b3; } class B { }")
        assert resolve_bodies(registry) == 1
        assert registry.states["A"].ce == 1
        assert registry.states["B"].ca == 1

    def test_parallel_matches_sequential(self):
        text = (
            "class A { B b; C c; } class B { C c; A a; } class C { D d; } "
            "class D { } class E { A a; B b; C c; D d; }"
        )
        sequential = _registry(text)
        parallel = _registry(text)
        resolve_bodies(sequential)
        resolve_bodies(parallel, workers=4)
        for name in sequential.names():
            assert sequential.states[name].ca == parallel.states[name].ca
            assert sequential.states[name].ce == parallel.states[name].ce
