"""Exception types raised by the generation pipeline."""

from __future__ import annotations

from typing import Optional


class CodegenError(Exception):
    """Base class for pipeline errors."""


class StructuralError(CodegenError):
    """Raised when a run cannot produce any output.

    Covers a missing document root, a node tree with invalid structure
    (ids, types, visibility, children), an extraction with zero candidate
    frames, and a run where every frame failed to generate.
    """


class DesignNotFoundError(CodegenError):
    """Raised when the store has no design for the requested id."""


class PerFrameError(CodegenError):
    """Raised for a single frame's failure under the ``stop`` failure policy."""

    def __init__(self, frame_name: str, cause: Optional[BaseException] = None):
        self.frame_name = frame_name
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to generate component for frame '{frame_name}'{detail}")


class MalformedNodeError(CodegenError):
    """Raised when a node whose properties failed validation is rendered.

    Fails only the frame containing the node.
    """

    def __init__(self, node_name: str, detail: str):
        self.node_name = node_name
        self.detail = detail
        super().__init__(f"Node '{node_name}' has invalid properties: {detail}")
