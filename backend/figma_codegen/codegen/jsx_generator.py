"""JSX generator — converts Figma nodes to React + Tailwind components.

Rendering rules:
- TEXT → ``<p>`` with escaped characters
- RECTANGLE / ELLIPSE → empty ``<div>``
- everything else (including unknown types) → ``<div>`` container holding
  its visible children, each indented one level
"""

from __future__ import annotations

from typing import List, Tuple

from figma_codegen import settings
from figma_codegen.codegen.style_mapper import map_styles_to_tailwind
from figma_codegen.integrations.figma_models import (
    DesignNode,
    GeneratedComponent,
    NodeType,
    ParsedFrame,
)
from figma_codegen.integrations.figma_parser import (
    sanitize_component_name,
    visible_children,
)

SHAPE_TYPES = frozenset({NodeType.RECTANGLE.value, NodeType.ELLIPSE.value})

# Characters that JSX would read as markup or an expression in text position
_JSX_ESCAPES = str.maketrans({
    "{": "{'{'}",
    "}": "{'}'}",
    "<": "{'<'}",
    ">": "{'>'}",
})

COMPONENT_TEMPLATE = """\
import React from 'react'

export default function {name}() {{
  return (
{body}
  )
}}
"""


def generate_react_component(node: DesignNode) -> GeneratedComponent:
    """Generate a default-exported React component from a frame root."""
    component_name = sanitize_component_name(node.name)
    jsx = generate_jsx(node, 0)

    code = COMPONENT_TEMPLATE.format(
        name=component_name,
        body=indent(jsx, settings.COMPONENT_BODY_INDENT),
    )
    return GeneratedComponent(
        name=component_name,
        code=code,
        language=settings.COMPONENT_LANGUAGE,
    )


def generate_components(frames: List[ParsedFrame]) -> List[GeneratedComponent]:
    """Generate one component per extracted frame, in order."""
    return [generate_react_component(frame.node) for frame in frames]


def generate_jsx(node: DesignNode, depth: int = 0) -> str:
    """Render a node subtree as JSX.

    Walks the tree with an explicit stack instead of recursion, so deeply
    nested designs cannot exhaust the interpreter stack. Lines are emitted
    already indented for their level relative to ``depth``; a container
    pushes a closing marker below its children.
    """
    stack: List[Tuple[DesignNode, int, bool]] = [(node, depth, False)]
    lines: List[str] = []

    while stack:
        current, level, closing = stack.pop()
        padding = " " * ((level - depth) * settings.JSX_INDENT)

        if closing:
            lines.append(f"{padding}</div>")
            continue

        if current.type == NodeType.TEXT.value:
            markup = f"<p{_class_attr(current)}>{escape_jsx(current.characters or '')}</p>"
            lines.extend(padding + line for line in markup.split("\n"))
            continue

        children = [] if current.type in SHAPE_TYPES else visible_children(current)
        if not children:
            lines.append(f"{padding}<div{_class_attr(current)}></div>")
            continue

        lines.append(f"{padding}<div{_class_attr(current)}>")
        stack.append((current, level, True))
        for child in reversed(children):
            stack.append((child, level + 1, False))

    return "\n".join(lines)


def _class_attr(node: DesignNode) -> str:
    classes = map_styles_to_tailwind(node)
    if not classes:
        return ""
    return f' className="{" ".join(classes)}"'


def indent(text: str, spaces: int) -> str:
    """Prefix every line of ``text`` with ``spaces`` spaces."""
    padding = " " * spaces
    return "\n".join(padding + line for line in text.split("\n"))


def escape_jsx(text: str) -> str:
    """Escape ``{ } < >`` as JSX string expressions, in a single pass."""
    return text.translate(_JSX_ESCAPES)
