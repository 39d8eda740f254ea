"""
Value Types

Value kinds understood by the inspector and the small value types it
provides for members that have no natural Python representation.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import NamedTuple, Sequence


class ValueKind(Enum):
    """
    Closed set of member kinds the inspector can render.

    Each kind maps to exactly one member renderer.
    """

    STRING = auto()
    BOOLEAN = auto()
    INTEGER = auto()      # int, numpy signed/unsigned integers
    FLOAT = auto()        # float, numpy floating types
    VECTOR2 = auto()
    VECTOR3 = auto()
    COLOR = auto()
    COMPOSITE = auto()    # Opaque value edited by an external sub-editor

    @property
    def is_scalar(self) -> bool:
        return self in _SCALAR_KINDS

    @property
    def is_vector(self) -> bool:
        return self in (ValueKind.VECTOR2, ValueKind.VECTOR3)

    @property
    def uses_sub_editor(self) -> bool:
        return self in (ValueKind.COLOR, ValueKind.COMPOSITE)


_SCALAR_KINDS = frozenset({
    ValueKind.STRING,
    ValueKind.BOOLEAN,
    ValueKind.INTEGER,
    ValueKind.FLOAT,
})


class Color(NamedTuple):
    """RGBA color with float channels in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> Color:
        """
        Build a color from an RGB or RGBA sequence.

        Args:
            values: 3 or 4 channel values

        Returns:
            Color with alpha defaulting to 1.0
        """
        if len(values) not in (3, 4):
            raise ValueError(f"Color needs 3 or 4 channels, got {len(values)}")
        return cls(*(float(v) for v in values))

    @property
    def rgb(self):
        return (self.r, self.g, self.b)
