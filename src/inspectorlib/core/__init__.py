"""
Inspector Core

Value kinds, literal parsing, type registry and member discovery.
"""

from .types import Color, ValueKind
from .parsing import ParseError, UnsupportedTypeError, parse_literal, format_literal
from .type_registry import DEFAULT_REGISTRY, Registration, TypeRegistry, default_registry
from .members import MemberDescriptor, discover_members

__all__ = [
    "Color",
    "ValueKind",
    "ParseError",
    "UnsupportedTypeError",
    "parse_literal",
    "format_literal",
    "DEFAULT_REGISTRY",
    "Registration",
    "TypeRegistry",
    "default_registry",
    "MemberDescriptor",
    "discover_members",
]
