"""
Reflective Object Renderer

Renders an editor for any object by discovering its members and
dispatching each one to the renderer registered for its value kind.
"""

from typing import Any, Callable, Dict, Optional

from ...config import settings
from ...core.members import MemberDescriptor, discover_members
from ...core.type_registry import TypeRegistry
from ...core.types import ValueKind
from ..render_state import RenderState
from ..sub_editors import EditRequest, SubEditorRouter
from ..surface import DrawingSurface
from .primitives import button, label
from .text_field import text_field


MemberRenderer = Callable[
    [DrawingSurface, RenderState, MemberDescriptor, Optional[SubEditorRouter], Any],
    None,
]

_MEMBER_RENDERERS: Dict[ValueKind, MemberRenderer] = {}


def register_member_renderer(*kinds: ValueKind):
    """
    [DECORATOR] Register a function as the renderer of the given kinds.

    The function receives (surface, state, member, router, window) and must
    advance the cursor at least once.
    """
    def decorator(func: MemberRenderer) -> MemberRenderer:
        for kind in kinds:
            _MEMBER_RENDERERS[kind] = func
        return func
    return decorator


def get_member_renderer(kind: ValueKind) -> Optional[MemberRenderer]:
    return _MEMBER_RENDERERS.get(kind)


def render_object(
    surface: DrawingSurface,
    state: RenderState,
    target: Any,
    router: Optional[SubEditorRouter] = None,
    registry: Optional[TypeRegistry] = None,
    window: Any = None,
) -> int:
    """
    Render one editor row per editable member of target.

    Members are discovered fresh on every call. The cursor is not reset
    here; the host resets it at the start of the pass.

    Args:
        surface: Drawing surface
        state: Window render state
        target: Object to edit in place
        router: Receives sub-editor hand-offs for colors and composites
        registry: Type registry (defaults to the built-in types)
        window: Token identifying the calling window, passed to sub-editors

    Returns:
        Number of members rendered
    """
    rendered = 0
    for member in discover_members(target, registry):
        renderer = _MEMBER_RENDERERS.get(member.kind)
        if renderer is None:
            continue
        renderer(surface, state, member, router, window)
        rendered += 1
    return rendered


@register_member_renderer(ValueKind.STRING, ValueKind.BOOLEAN, ValueKind.INTEGER, ValueKind.FLOAT)
def render_scalar(surface, state, member, router, window) -> None:
    """Label + typed text field on one row."""
    row = label(surface, state, member.name, advance=False)
    text_field(
        surface,
        state,
        member.get(),
        member.set,
        rect=state.cursor.paired_rect(row),
        value_type=member.value_type,
    )


@register_member_renderer(ValueKind.VECTOR2, ValueKind.VECTOR3)
def render_vector(surface, state, member, router, window) -> None:
    """Label + one text field per coordinate, side by side."""
    row = label(surface, state, member.name, advance=False)
    offsets = settings.VECTOR3_FIELD_OFFSETS if member.kind is ValueKind.VECTOR3 else settings.VECTOR2_FIELD_OFFSETS

    value = member.get()
    for axis, offset in enumerate(offsets):
        text_field(
            surface,
            state,
            value.dtype.type(value[axis]),
            _coordinate_setter(member, axis),
            rect=state.cursor.paired_rect(row, settings.VECTOR_FIELD_WIDTH, offset=offset),
        )


def _coordinate_setter(member: MemberDescriptor, axis: int) -> Callable[[Any], None]:
    """Commit one coordinate into a copy of the live vector."""
    def commit(coordinate):
        vector = member.get().copy()
        vector[axis] = coordinate
        member.set(vector)
    return commit


@register_member_renderer(ValueKind.COLOR, ValueKind.COMPOSITE)
def render_sub_editor(surface, state, member, router, window) -> None:
    """Label + "Edit" button handing the value to an external sub-editor."""
    row = label(surface, state, member.name, advance=False)

    on_click = None
    if router is not None:
        def on_click():
            router.submit(EditRequest(
                editor=member.editor,
                initial_value=member.get(),
                on_complete=member.set,
                window=window,
                member=member.name,
            ))

    button(
        surface,
        state,
        settings.EDIT_BUTTON_TEXT,
        on_click,
        rect=state.cursor.paired_rect(row, settings.EDIT_BUTTON_WIDTH),
    )
