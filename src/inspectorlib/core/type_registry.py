"""
Type Registry

Maps Python value types to the value kind used to render them. Lookups
follow the type's MRO, so registering a base class covers its subclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np

from .types import Color, ValueKind


@dataclass(frozen=True)
class Registration:
    """How a value type is edited."""

    kind: ValueKind
    editor: Optional[str] = None  # Sub-editor key for COLOR / COMPOSITE kinds


class TypeRegistry:
    """
    Registry of supported value types.

    Scalars and colors are registered by type. numpy arrays (including
    pyrr vectors) are classified by shape: float arrays of shape (2,) are
    VECTOR2 and (3,) are VECTOR3.
    """

    def __init__(self):
        self._types: Dict[type, Registration] = {}

    def register(self, value_type: type, kind: ValueKind, editor: Optional[str] = None) -> None:
        """
        Register a value type.

        Args:
            value_type: Type to register (covers its subclasses)
            kind: Value kind rendered for the type
            editor: Sub-editor key, required for COLOR and COMPOSITE kinds
        """
        if kind.uses_sub_editor and not editor:
            raise ValueError(f"Kind {kind.name} needs a sub-editor key")
        self._types[value_type] = Registration(kind, editor)

    def register_composite(self, value_type: type, editor: str) -> None:
        """Register an opaque type edited by the named sub-editor."""
        self.register(value_type, ValueKind.COMPOSITE, editor)

    def unregister(self, value_type: type) -> None:
        self._types.pop(value_type, None)

    def lookup(self, value_type: type) -> Optional[Registration]:
        """
        Get the registration for a type, following its MRO.

        Returns:
            Registration, or None if neither the type nor a base is registered
        """
        for cls in value_type.__mro__:
            if cls in self._types:
                return self._types[cls]
        return None

    def classify(self, value_type: type, value: Any = None) -> Optional[Registration]:
        """
        Classify a member by its declared type and current value.

        Args:
            value_type: Declared (or runtime) type of the member
            value: Current value, used for shape-based vector detection

        Returns:
            Registration, or None if the member is not editable
        """
        registration = self.lookup(value_type)
        if registration is not None:
            return registration

        if issubclass(value_type, np.ndarray) and isinstance(value, np.ndarray):
            return _classify_array(value)
        return None

    def __contains__(self, value_type: type) -> bool:
        return self.lookup(value_type) is not None


def _classify_array(value: np.ndarray) -> Optional[Registration]:
    if not np.issubdtype(value.dtype, np.floating):
        return None
    if value.shape == (2,):
        return Registration(ValueKind.VECTOR2)
    if value.shape == (3,):
        return Registration(ValueKind.VECTOR3)
    return None


def default_registry() -> TypeRegistry:
    """Create a registry with every built-in supported type."""
    registry = TypeRegistry()
    registry.register(str, ValueKind.STRING)
    registry.register(bool, ValueKind.BOOLEAN)
    registry.register(np.bool_, ValueKind.BOOLEAN)
    registry.register(int, ValueKind.INTEGER)
    registry.register(np.integer, ValueKind.INTEGER)
    registry.register(float, ValueKind.FLOAT)
    registry.register(np.floating, ValueKind.FLOAT)
    registry.register(Color, ValueKind.COLOR, editor="color")
    return registry


DEFAULT_REGISTRY = default_registry()
