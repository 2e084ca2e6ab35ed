"""Shared fixtures for codegen tests.

Nodes are written as raw Figma JSON (camelCase) and built with
build_design_tree, the same way the pipeline receives them.
"""

from __future__ import annotations

from typing import Any, Callable, Dict

import pytest

from figma_codegen.integrations.figma_models import DesignNode
from figma_codegen.integrations.figma_parser import build_design_tree

WHITE = {"r": 1, "g": 1, "b": 1, "a": 1}


def make_node(**fields: Any) -> DesignNode:
    """Build a DesignNode from camelCase Figma fields."""
    fields.setdefault("id", "1:1")
    fields.setdefault("name", "Node")
    fields.setdefault("type", "FRAME")
    return build_design_tree(fields)


@pytest.fixture
def node() -> Callable[..., DesignNode]:
    return make_node


@pytest.fixture
def card_frame() -> Dict[str, Any]:
    """Vertical auto-layout card: padding 16, radius 12, white fill, two texts."""
    return {
        "id": "10:1",
        "name": "Profile Card",
        "type": "FRAME",
        "layoutMode": "VERTICAL",
        "paddingTop": 16,
        "paddingRight": 16,
        "paddingBottom": 16,
        "paddingLeft": 16,
        "cornerRadius": 12,
        "fills": [{"type": "SOLID", "color": WHITE}],
        "children": [
            {
                "id": "10:2",
                "name": "Title",
                "type": "TEXT",
                "characters": "Jane Doe",
                "style": {"fontFamily": "Inter", "fontWeight": 700, "fontSize": 24},
            },
            {
                "id": "10:3",
                "name": "Subtitle",
                "type": "TEXT",
                "characters": "Designer",
                "style": {"fontFamily": "Inter", "fontWeight": 400, "fontSize": 16},
            },
        ],
    }


@pytest.fixture
def sample_document(card_frame) -> Dict[str, Any]:
    """DOCUMENT with two pages, nested frames and hidden nodes."""
    return {
        "id": "0:0",
        "name": "Document",
        "type": "DOCUMENT",
        "children": [
            {
                "id": "0:1",
                "name": "Page 1",
                "type": "CANVAS",
                "children": [
                    card_frame,
                    {
                        "id": "20:1",
                        "name": "Screen",
                        "type": "FRAME",
                        "children": [
                            {"id": "20:2", "name": "Inner", "type": "FRAME", "children": []},
                        ],
                    },
                    {"id": "20:3", "name": "Hidden Frame", "type": "FRAME", "visible": False},
                    {"id": "20:4", "name": "Loose Text", "type": "TEXT", "characters": "x"},
                ],
            },
            {
                "id": "0:2",
                "name": "Page 2",
                "type": "CANVAS",
                "children": [
                    {"id": "30:1", "name": "Button", "type": "COMPONENT_SET", "children": []},
                    {"id": "30:2", "name": "Button Instance", "type": "INSTANCE", "children": []},
                ],
            },
            {
                "id": "0:3",
                "name": "Archive",
                "type": "CANVAS",
                "visible": False,
                "children": [
                    {"id": "40:1", "name": "Old Screen", "type": "FRAME"},
                ],
            },
        ],
    }
