"""Typed views over Figma REST API node trees.

The Figma payload is camelCase JSON. Models accept those names as aliases,
expose snake_case attributes, ignore fields we never interpret, and are
frozen: the pipeline only ever reads them.

Whole documents are not validated with ``DesignNode.model_validate``; they go
through ``figma_parser.build_design_tree``, which validates one node at a
time.

Paints and effects are closed tagged unions. A discriminator function routes
each entry to a specific variant (``SolidPaint`` / ``DropShadowEffect``) or to
a catch-all (``OtherPaint`` / ``OtherEffect``) so unknown kinds still
validate.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag


class NodeType(str, Enum):
    DOCUMENT = "DOCUMENT"
    CANVAS = "CANVAS"
    PAGE = "PAGE"
    FRAME = "FRAME"
    GROUP = "GROUP"
    COMPONENT = "COMPONENT"
    COMPONENT_SET = "COMPONENT_SET"
    INSTANCE = "INSTANCE"
    TEXT = "TEXT"
    RECTANGLE = "RECTANGLE"
    ELLIPSE = "ELLIPSE"


class FrameKind(str, Enum):
    """Normalized kind of an extracted frame."""
    FRAME = "FRAME"
    COMPONENT = "COMPONENT"


class _FigmaModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


# --- Geometry ---


class BoundingBox(_FigmaModel):
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0


# --- Paint ---


class Color(_FigmaModel):
    """RGBA color, channels normalized to 0..1."""
    r: float = 0
    g: float = 0
    b: float = 0
    a: float = 1.0


class SolidPaint(_FigmaModel):
    type: str = "SOLID"
    color: Optional[Color] = None
    opacity: Optional[float] = None


class OtherPaint(_FigmaModel):
    """Gradient, image, or any paint kind the classifier ignores."""
    type: str = ""


def _tag_of(value: Any) -> Any:
    if isinstance(value, dict):
        return value.get("type")
    return getattr(value, "type", None)


def _paint_kind(value: Any) -> str:
    return "solid" if _tag_of(value) == "SOLID" else "other"


Paint = Annotated[
    Union[
        Annotated[SolidPaint, Tag("solid")],
        Annotated[OtherPaint, Tag("other")],
    ],
    Discriminator(_paint_kind),
]


# --- Effects ---


class Vector(_FigmaModel):
    x: float = 0
    y: float = 0


class DropShadowEffect(_FigmaModel):
    type: str = "DROP_SHADOW"
    radius: Optional[float] = None
    color: Optional[Color] = None
    offset: Optional[Vector] = None
    visible: Optional[bool] = None


class OtherEffect(_FigmaModel):
    type: str = ""


def _effect_kind(value: Any) -> str:
    return "drop_shadow" if _tag_of(value) == "DROP_SHADOW" else "other"


Effect = Annotated[
    Union[
        Annotated[DropShadowEffect, Tag("drop_shadow")],
        Annotated[OtherEffect, Tag("other")],
    ],
    Discriminator(_effect_kind),
]


# --- Text ---


class TextStyle(_FigmaModel):
    font_family: Optional[str] = Field(default=None, alias="fontFamily")
    font_weight: Optional[float] = Field(default=None, alias="fontWeight")
    font_size: Optional[float] = Field(default=None, alias="fontSize")
    letter_spacing: Optional[float] = Field(default=None, alias="letterSpacing")
    line_height_px: Optional[float] = Field(default=None, alias="lineHeightPx")
    text_align_horizontal: Optional[str] = Field(default=None, alias="textAlignHorizontal")


# --- Node ---


class DesignNode(_FigmaModel):
    """One node of a Figma document tree.

    ``type`` stays a plain string so unrecognized node types still parse;
    compare against ``NodeType`` members.
    """

    id: str = ""
    name: str = ""
    type: str = ""
    visible: Optional[bool] = None
    children: List[DesignNode] = Field(default_factory=list)

    # Layout
    absolute_bounding_box: Optional[BoundingBox] = Field(default=None, alias="absoluteBoundingBox")

    # Auto layout
    layout_mode: Optional[str] = Field(default=None, alias="layoutMode")
    primary_axis_sizing_mode: Optional[str] = Field(default=None, alias="primaryAxisSizingMode")
    counter_axis_sizing_mode: Optional[str] = Field(default=None, alias="counterAxisSizingMode")
    primary_axis_align_items: Optional[str] = Field(default=None, alias="primaryAxisAlignItems")
    counter_axis_align_items: Optional[str] = Field(default=None, alias="counterAxisAlignItems")
    padding_left: Optional[float] = Field(default=None, alias="paddingLeft")
    padding_right: Optional[float] = Field(default=None, alias="paddingRight")
    padding_top: Optional[float] = Field(default=None, alias="paddingTop")
    padding_bottom: Optional[float] = Field(default=None, alias="paddingBottom")
    item_spacing: Optional[float] = Field(default=None, alias="itemSpacing")

    # Styles
    fills: List[Paint] = Field(default_factory=list)
    strokes: List[Dict[str, Any]] = Field(default_factory=list)
    stroke_weight: Optional[float] = Field(default=None, alias="strokeWeight")
    corner_radius: Optional[float] = Field(default=None, alias="cornerRadius")

    # Text
    characters: Optional[str] = None
    style: Optional[TextStyle] = None

    # Effects
    effects: List[Effect] = Field(default_factory=list)

    # Set by the tree builder when the node's own properties failed
    # validation; the node then carries only its structural fields
    facet_error: Optional[str] = Field(default=None, exclude=True)

    @property
    def is_visible(self) -> bool:
        return self.visible is not False


DesignNode.model_rebuild()


@dataclass(frozen=True)
class ParsedFrame:
    """A node selected to become an independent generated component."""
    name: str
    node: DesignNode
    kind: FrameKind


@dataclass(frozen=True)
class GeneratedComponent:
    """Source text of one generated component."""
    name: str
    code: str
    language: str = "tsx"
