"""
Member Discovery

Finds the editable members of an arbitrary object: public instance
attributes and public read/write properties whose type is supported by
the type registry.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
import typing
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from .type_registry import DEFAULT_REGISTRY, TypeRegistry
from .types import ValueKind


logger = logging.getLogger(__name__)


@dataclass
class MemberDescriptor:
    """A single editable member of a target object."""

    target: Any
    name: str
    kind: ValueKind
    value_type: type
    editor: Optional[str] = None  # Sub-editor key for COLOR / COMPOSITE

    def get(self) -> Any:
        """Read the live value from the target."""
        return getattr(self.target, self.name)

    def set(self, value: Any) -> None:
        """Write a value back into the target."""
        setattr(self.target, self.name, value)


def discover_members(target: Any, registry: Optional[TypeRegistry] = None) -> List[MemberDescriptor]:
    """
    Discover the editable members of an object.

    Order is deterministic for a given object shape: dataclass fields (or
    instance attributes in insertion order), then __slots__, then read/write
    properties sorted by name.

    Args:
        target: Object to inspect
        registry: Type registry deciding which types are editable

    Returns:
        List of member descriptors

    Raises:
        Any exception raised by a member getter (schema errors propagate)
    """
    registry = registry or DEFAULT_REGISTRY
    cls = type(target)
    hints = _class_hints(cls)

    members = []
    for name in _field_names(target):
        if name.startswith("_") or _is_constant(hints.get(name)):
            continue
        if not hasattr(target, name):
            continue  # Declared slot that was never assigned
        member = _describe(target, name, hints.get(name), registry)
        if member is not None:
            members.append(member)

    seen = {member.name for member in members}
    for name, prop in inspect.getmembers(cls, lambda attr: isinstance(attr, property)):
        if name.startswith("_") or name in seen:
            continue
        if prop.fget is None or prop.fset is None:
            continue
        member = _describe(target, name, _return_hint(prop), registry)
        if member is not None:
            members.append(member)

    return members


def _describe(
    target: Any,
    name: str,
    annotation: Any,
    registry: TypeRegistry,
) -> Optional[MemberDescriptor]:
    value = getattr(target, name)
    if callable(value):
        return None

    value_type = annotation if isinstance(annotation, type) else type(value)
    registration = registry.classify(value_type, value)
    if registration is None:
        return None

    # Annotated numpy arrays are classified by their live value
    if registration.kind.is_vector:
        value_type = type(value)

    return MemberDescriptor(
        target=target,
        name=name,
        kind=registration.kind,
        value_type=value_type,
        editor=registration.editor,
    )


def _field_names(target: Any) -> Iterator[str]:
    """Yield instance attribute names in declaration order, without duplicates."""
    seen = set()

    names: List[str] = []
    if dataclasses.is_dataclass(target):
        names.extend(field.name for field in dataclasses.fields(target))
    names.extend(getattr(target, "__dict__", {}).keys())
    for klass in reversed(type(target).__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(slots)

    for name in names:
        if name not in seen and name not in ("__dict__", "__weakref__"):
            seen.add(name)
            yield name


def _class_hints(cls: type) -> Dict[str, Any]:
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError) as exc:
        logger.debug("Falling back to runtime types for %s: %s", cls.__name__, exc)
        return {}


def _return_hint(prop: property) -> Any:
    try:
        return typing.get_type_hints(prop.fget).get("return")
    except (NameError, TypeError):
        return None


def _is_constant(annotation: Any) -> bool:
    """ClassVar and Final annotated names are never edited."""
    if annotation is None:
        return False
    if annotation in (typing.ClassVar, typing.Final):
        return True
    return typing.get_origin(annotation) in (typing.ClassVar, typing.Final)
