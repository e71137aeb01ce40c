"""Relationship resolution between declared types."""

from .body import find_body_references, resolve_bodies
from .fields import FieldInfo, classify_field, extract_fields, field_region, resolve_fields
from .methods import find_singleton_usages, find_transient_usages, resolve_method_usages
from .models import RelationKind, TypeRegistry, TypeState
from .signature import parse_heritage, resolve_signatures
from .singleton import detect_singletons, is_singleton, singleton_instance_field

__all__ = [
    "FieldInfo",
    "RelationKind",
    "TypeRegistry",
    "TypeState",
    "classify_field",
    "detect_singletons",
    "extract_fields",
    "field_region",
    "find_body_references",
    "find_singleton_usages",
    "find_transient_usages",
    "is_singleton",
    "parse_heritage",
    "resolve_bodies",
    "resolve_fields",
    "resolve_method_usages",
    "resolve_signatures",
    "singleton_instance_field",
]
