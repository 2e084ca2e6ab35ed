"""Figma document parsing — frame extraction and node helpers.

Pure data-processing functions over Figma node trees. No I/O.

Raw JSON becomes a ``DesignNode`` tree through ``build_design_tree``, which
validates one node at a time with an explicit stack.

Figma structure: DOCUMENT -> CANVAS (pages) -> FRAME/COMPONENT (top-level).
Two extraction modes are supported:
- top_level: only direct children of pages (one component per screen)
- recursive: every FRAME/COMPONENT in the tree, nested ones included
"""

from __future__ import annotations

import logging
import math
import re
from enum import Enum
from typing import Any, List, Optional

from pydantic import ValidationError

from figma_codegen.errors import StructuralError
from figma_codegen.integrations.figma_models import (
    DesignNode,
    FrameKind,
    NodeType,
    ParsedFrame,
    SolidPaint,
)

logger = logging.getLogger(__name__)


class ExtractionMode(str, Enum):
    RECURSIVE = "recursive"
    TOP_LEVEL = "top_level"


PAGE_TYPES = frozenset({NodeType.CANVAS.value, NodeType.PAGE.value})
RECURSIVE_FRAME_TYPES = frozenset({NodeType.FRAME.value, NodeType.COMPONENT.value})
TOP_LEVEL_FRAME_TYPES = frozenset({
    NodeType.FRAME.value,
    NodeType.COMPONENT.value,
    NodeType.COMPONENT_SET.value,
    NodeType.INSTANCE.value,
})

_NON_IDENTIFIER_RE = re.compile(r"[^a-zA-Z0-9]")
COMPONENT_NAME_PREFIX = "Component"

# Fields that position a node in the tree; everything else is a facet
STRUCTURAL_FIELDS = ("id", "name", "type", "visible")


# =====================================================================
# Tree building
# =====================================================================


def build_design_tree(raw: Any) -> DesignNode:
    """Validate a raw Figma node tree one node at a time.

    Each node is validated without its children, which are attached
    afterwards, so tree depth is limited only by memory. A node whose own
    properties (fills, style, radius, ...) do not validate keeps its place
    in the tree with ``facet_error`` set; rendering it fails only the frame
    that contains it.

    Raises:
        StructuralError: a node is not an object, ``children`` is not a
            list, or a structural field has the wrong type.
    """
    root = _build_node(raw)
    stack = [(raw, root)]
    while stack:
        raw_node, node = stack.pop()
        for raw_child in raw_node.get("children") or []:
            child = _build_node(raw_child)
            node.children.append(child)
            stack.append((raw_child, child))
    return root


def _build_node(raw: Any) -> DesignNode:
    if not isinstance(raw, dict):
        raise StructuralError(f"Figma node must be an object, got {type(raw).__name__}")
    children = raw.get("children")
    if children is not None and not isinstance(children, list):
        raise StructuralError(f"Children of node '{raw.get('name', '')}' must be a list")

    own = {k: v for k, v in raw.items() if k not in ("children", "facet_error")}
    try:
        return DesignNode.model_validate(own)
    except ValidationError as e:
        facet_error = e

    try:
        node = DesignNode.model_validate({k: own[k] for k in STRUCTURAL_FIELDS if k in own})
    except ValidationError as e:
        raise StructuralError(f"Figma node is malformed: {e}") from e

    logger.warning(
        "Node %s has %d invalid properties", node.name or node.id, facet_error.error_count(),
    )
    return node.model_copy(update={"facet_error": str(facet_error)})


# =====================================================================
# Frame extraction
# =====================================================================


def extract_frames(
    document: Optional[DesignNode],
    mode: ExtractionMode = ExtractionMode.TOP_LEVEL,
) -> List[ParsedFrame]:
    """Extract the nodes that become generated components.

    Raises:
        StructuralError: no document, or no candidate frames found.
    """
    if ExtractionMode(mode) is ExtractionMode.RECURSIVE:
        return extract_all_frames(document)
    return extract_top_level_frames(document)


def extract_all_frames(document: Optional[DesignNode]) -> List[ParsedFrame]:
    """Extract every visible FRAME and COMPONENT, depth-first in document order.

    Matched nodes are descended into as well, so a frame nested inside
    another frame is returned as its own entry.
    """
    if document is None:
        raise StructuralError("No document node found in Figma data")

    frames: List[ParsedFrame] = []
    stack = [document]
    while stack:
        node = stack.pop()
        if not node.is_visible:
            continue

        if node.type in RECURSIVE_FRAME_TYPES:
            frames.append(ParsedFrame(
                name=node.name,
                node=node,
                kind=FrameKind(node.type),
            ))

        stack.extend(reversed(node.children))

    if not frames:
        raise StructuralError("No frames or components found in design")
    return frames


def extract_top_level_frames(document: Optional[DesignNode]) -> List[ParsedFrame]:
    """Extract only the direct children of each page.

    Documents without CANVAS/PAGE nodes have their children treated as
    top-level candidates directly.
    """
    if document is None:
        raise StructuralError("No document node found in Figma data")

    frames: List[ParsedFrame] = []
    for page in document.children:
        if not page.is_visible:
            continue

        if page.type not in PAGE_TYPES:
            frame = _as_top_level_frame(page)
            if frame is not None:
                frames.append(frame)
            continue

        for child in page.children:
            if not child.is_visible:
                continue
            frame = _as_top_level_frame(child)
            if frame is not None:
                frames.append(frame)

    if not frames:
        raise StructuralError("No frames or components found in design")

    logger.debug("Extracted %d top-level frames", len(frames))
    return frames


def _as_top_level_frame(node: DesignNode) -> Optional[ParsedFrame]:
    if node.type not in TOP_LEVEL_FRAME_TYPES:
        return None
    return ParsedFrame(name=node.name, node=node, kind=normalize_frame_kind(node.type))


def normalize_frame_kind(node_type: str) -> FrameKind:
    """FRAME/INSTANCE → FRAME, COMPONENT/COMPONENT_SET → COMPONENT."""
    if node_type in (NodeType.COMPONENT.value, NodeType.COMPONENT_SET.value):
        return FrameKind.COMPONENT
    return FrameKind.FRAME


# =====================================================================
# Naming
# =====================================================================


def sanitize_component_name(name: str) -> str:
    """Convert a Figma layer name to a React component name.

    Examples:
        "Header Bar / Main" → "HeaderBarMain"
        "404 page" → "Component404page"
        "card" → "Card"

    Names are not deduplicated; two frames may sanitize to the same name.
    """
    sanitized = _NON_IDENTIFIER_RE.sub("", name or "")
    if not sanitized:
        return COMPONENT_NAME_PREFIX
    if sanitized[0].isdigit():
        sanitized = COMPONENT_NAME_PREFIX + sanitized
    return sanitized[0].upper() + sanitized[1:]


# =====================================================================
# Node helpers
# =====================================================================


def _to_byte(channel: float) -> int:
    # Half-up rounding, not Python's round-half-even
    return max(0, min(255, math.floor(channel * 255 + 0.5)))


def rgba_to_hex(r: float, g: float, b: float, a: float = 1.0) -> str:
    """Convert normalized RGBA (0-1 range) to a lowercase hex color string.

    The alpha byte is appended only for translucent colors.
    """
    hex_color = f"#{_to_byte(r):02x}{_to_byte(g):02x}{_to_byte(b):02x}"
    if a < 1:
        hex_color += f"{_to_byte(a):02x}"
    return hex_color


def has_auto_layout(node: DesignNode) -> bool:
    return node.layout_mode in ("HORIZONTAL", "VERTICAL")


def get_primary_fill(node: DesignNode) -> Optional[str]:
    """Hex color of the first fill, if that fill is a solid color."""
    if not node.fills:
        return None

    fill = node.fills[0]
    if not isinstance(fill, SolidPaint) or fill.color is None:
        return None

    color = fill.color
    return rgba_to_hex(color.r, color.g, color.b, color.a)


def visible_children(node: DesignNode) -> List[DesignNode]:
    """Children that render, in document order."""
    return [child for child in node.children if child.is_visible]
