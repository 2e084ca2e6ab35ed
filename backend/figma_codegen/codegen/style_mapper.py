"""Style mapper — Figma node properties to Tailwind utility classes.

Deterministic, best-effort discretization: numeric values snap to the
nearest entry of a fixed Tailwind scale, colors resolve to a small named
palette or an arbitrary-value class. Every rule has a fallback, so mapping
never raises for a valid node.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from figma_codegen.errors import MalformedNodeError
from figma_codegen.integrations.figma_models import (
    DesignNode,
    DropShadowEffect,
    NodeType,
    TextStyle,
)
from figma_codegen.integrations.figma_parser import get_primary_fill, has_auto_layout

Scale = Sequence[Tuple[float, str]]

# ---------------------------------------------------------------------------
# Scales (ascending; order decides ties)
# ---------------------------------------------------------------------------

SPACING_SCALE: Scale = (
    (0, "0"),
    (4, "1"),
    (8, "2"),
    (12, "3"),
    (16, "4"),
    (20, "5"),
    (24, "6"),
    (32, "8"),
    (40, "10"),
    (48, "12"),
    (64, "16"),
)

RADIUS_SCALE: Scale = (
    (4, "rounded"),
    (8, "rounded-lg"),
    (12, "rounded-xl"),
    (16, "rounded-2xl"),
    (9999, "rounded-full"),
)

FONT_SIZE_SCALE: Scale = (
    (12, "text-xs"),
    (14, "text-sm"),
    (16, "text-base"),
    (18, "text-lg"),
    (20, "text-xl"),
    (24, "text-2xl"),
    (30, "text-3xl"),
    (36, "text-4xl"),
)

NAMED_COLORS = {
    "#ffffff": "white",
    "#000000": "black",
    "#f3f4f6": "gray-100",
    "#e5e7eb": "gray-200",
    "#d1d5db": "gray-300",
    "#9ca3af": "gray-400",
    "#6b7280": "gray-500",
    "#3b82f6": "blue-500",
    "#10b981": "green-500",
    "#ef4444": "red-500",
}

LAYOUT_CLASSES = {
    "HORIZONTAL": ["flex", "flex-row"],
    "VERTICAL": ["flex", "flex-col"],
}

JUSTIFY_CLASSES = {
    "CENTER": "justify-center",
    "MAX": "justify-end",
    "SPACE_BETWEEN": "justify-between",
}

ITEMS_CLASSES = {
    "CENTER": "items-center",
    "MAX": "items-end",
}

TEXT_ALIGN_CLASSES = {
    "LEFT": "text-left",
    "CENTER": "text-center",
    "RIGHT": "text-right",
}

DEFAULT_RADIUS_CLASS = "rounded"
SHADOW_CLASS = "shadow-lg"


def map_styles_to_tailwind(node: DesignNode) -> List[str]:
    """Map a node's visual properties to an ordered list of Tailwind classes.

    Raises:
        MalformedNodeError: the node's properties failed validation.
    """
    if node.facet_error is not None:
        raise MalformedNodeError(node.name, node.facet_error)

    classes: List[str] = []

    # Layout (Auto Layout)
    if has_auto_layout(node):
        classes.extend(LAYOUT_CLASSES[node.layout_mode])

    # Alignment
    classes.append(JUSTIFY_CLASSES.get(node.primary_axis_align_items or "", ""))
    classes.append(ITEMS_CLASSES.get(node.counter_axis_align_items or "", ""))

    # Gap (itemSpacing)
    if node.item_spacing:
        classes.append(f"gap-{snap_to_scale(node.item_spacing, SPACING_SCALE)}")

    classes.extend(map_padding(node))

    # Background color
    fill = get_primary_fill(node)
    if fill:
        classes.append(f"bg-{map_color(fill)}")

    if node.corner_radius:
        classes.append(map_border_radius(node.corner_radius) or "")

    if node.type == NodeType.TEXT.value:
        classes.extend(map_text_styles(node.style))

    classes.append(map_shadow(node) or "")

    if node.absolute_bounding_box is not None:
        classes.extend(map_sizing(node))

    return [c for c in classes if c]


def snap_to_scale(value: float, scale: Scale) -> str:
    """Return the token of the scale entry closest to ``value``.

    Scans in table order and only moves on a strictly smaller distance,
    so equidistant values resolve to the earlier entry (10 → 8, not 12).
    """
    best_value, best_token = scale[0]
    for ref, token in scale[1:]:
        if abs(ref - value) < abs(best_value - value):
            best_value, best_token = ref, token
    return best_token


def map_padding(node: DesignNode) -> List[str]:
    """Collapse uniform padding to ``p-*``; otherwise one class per non-zero side."""
    top = node.padding_top or 0
    right = node.padding_right or 0
    bottom = node.padding_bottom or 0
    left = node.padding_left or 0

    if top == right == bottom == left and top > 0:
        return [f"p-{snap_to_scale(top, SPACING_SCALE)}"]

    classes = []
    for prefix, value in (("pt", top), ("pr", right), ("pb", bottom), ("pl", left)):
        if value > 0:
            classes.append(f"{prefix}-{snap_to_scale(value, SPACING_SCALE)}")
    return classes


def map_color(hex_color: str) -> str:
    """Named Tailwind color for a known hex, else an arbitrary ``[#hex]`` value."""
    return NAMED_COLORS.get(hex_color, f"[{hex_color}]")


def map_border_radius(radius: float) -> Optional[str]:
    if radius == 0:
        return None
    return snap_to_scale(radius, RADIUS_SCALE) or DEFAULT_RADIUS_CLASS


def map_text_styles(style: Optional[TextStyle]) -> List[str]:
    if style is None:
        return []

    classes: List[str] = []
    if style.font_size:
        classes.append(snap_to_scale(style.font_size, FONT_SIZE_SCALE))
    if style.font_weight:
        classes.append(map_font_weight(style.font_weight) or "")
    if style.text_align_horizontal:
        classes.append(TEXT_ALIGN_CLASSES.get(style.text_align_horizontal, ""))
    return [c for c in classes if c]


def map_font_weight(weight: float) -> Optional[str]:
    if weight >= 700:
        return "font-bold"
    if weight >= 600:
        return "font-semibold"
    if weight >= 500:
        return "font-medium"
    return None


def map_shadow(node: DesignNode) -> Optional[str]:
    """Any drop shadow becomes one generic shadow class; blur/offset/color are dropped."""
    if any(isinstance(effect, DropShadowEffect) for effect in node.effects):
        return SHADOW_CLASS
    return None


def map_sizing(node: DesignNode) -> List[str]:
    # Reserved for width/height mapping; sizes are left to the layout for now.
    return []
