"""Scanning data models: source files, declared types and file metrics."""

from dataclasses import dataclass
from enum import Enum


class TypeKind(Enum):
    """Kind of a declared type."""

    CLASS = "class"
    ABSTRACT_CLASS = "abstract"
    INTERFACE = "interface"

    @property
    def is_abstract(self) -> bool:
        return self is not TypeKind.CLASS


@dataclass(frozen=True)
class SourceFile:
    """A loaded source file. The text is never modified after loading."""

    name: str
    text: str


@dataclass(frozen=True)
class FileMetrics:
    """File-level metrics feeding the grid visualization.

    size: non-empty line count of the raw text
    complexity: occurrences of if/switch/for/while outside strings and comments
    """

    name: str
    size: int
    complexity: int


@dataclass
class TypeDeclaration:
    """A class or interface declaration found in a source file.

    ``start``/``end`` are the offsets of the body's opening and closing
    braces in the owning file. ``body`` is the sanitized body including both
    braces; ``denested_body`` is the same text with nested declarations
    blanked, attached by :func:`erase_nested_types`.
    """

    name: str
    heritage: str
    kind: TypeKind
    file: str
    start: int
    end: int
    body: str
    denested_body: str = ""

    def contains(self, other: "TypeDeclaration") -> bool:
        """True if *other* lies strictly inside this declaration's body."""
        return (
            other.file == self.file
            and other.start > self.start
            and other.end < self.end
        )
