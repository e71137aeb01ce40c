"""Lexical scanning: sanitizing, brace matching, declaration extraction."""

from .declarations import erase_nested_types, extract_declarations
from .file_metrics import measure_file
from .models import FileMetrics, SourceFile, TypeDeclaration, TypeKind
from .sanitizer import find_closing_brace, match_braces, sanitize

__all__ = [
    "FileMetrics",
    "SourceFile",
    "TypeDeclaration",
    "TypeKind",
    "erase_nested_types",
    "extract_declarations",
    "find_closing_brace",
    "match_braces",
    "measure_file",
    "sanitize",
]
