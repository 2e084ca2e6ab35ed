"""Code generation orchestrator.

Sequences extraction → generation → persistence for one design:

1. ``generate_components_for_document`` — pure stage. Extracts frames and
   generates one component per frame. A frame that fails (for example one
   containing a node with invalid properties) is reported to the
   injected ``on_frame_error`` callback and skipped (policy ``skip``) or
   aborts the run (policy ``stop``).
2. ``generate_code_from_design`` — async stage against a ``DesignStore``.
   Loads the design, runs the pure stage, replaces previously stored
   components and returns a summary.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Protocol, Tuple

from figma_codegen import settings
from figma_codegen.codegen.jsx_generator import generate_react_component
from figma_codegen.errors import (
    DesignNotFoundError,
    PerFrameError,
    StructuralError,
)
from figma_codegen.integrations.figma_models import (
    DesignNode,
    GeneratedComponent,
    ParsedFrame,
)
from figma_codegen.integrations.figma_parser import (
    ExtractionMode,
    build_design_tree,
    extract_frames,
)

logger = logging.getLogger(__name__)

FrameErrorHandler = Callable[[ParsedFrame, Exception], None]

FAILURE_POLICIES = ("skip", "stop")


@dataclass(frozen=True)
class StoredComponent:
    id: str
    name: str
    code: str
    language: str


@dataclass(frozen=True)
class GenerationStats:
    frames_found: int
    components_generated: int


@dataclass(frozen=True)
class GenerationResult:
    design_id: str
    components: List[StoredComponent]
    stats: GenerationStats


class DesignStore(Protocol):
    """Persistence boundary used by the orchestrator."""

    async def fetch_design(self, design_id: str) -> Optional[Dict[str, Any]]:
        """Return the stored Figma payload (``{"document": ...}``) or None."""
        ...

    async def delete_components(self, design_id: str) -> None:
        ...

    async def insert_component(
        self, design_id: str, component: GeneratedComponent,
    ) -> StoredComponent:
        ...


def log_frame_error(frame: ParsedFrame, exc: Exception) -> None:
    """Default failure reporter: log and move on."""
    logger.error(
        "Failed to generate component for frame: %s", frame.name, exc_info=exc,
    )


def parse_document(figma_data: Optional[Dict[str, Any]]) -> DesignNode:
    """Build the node tree of a stored Figma payload's ``document``.

    Only the tree structure is checked here. A node with invalid properties
    fails its own frame later, during generation.

    Raises:
        StructuralError: no document, or the tree structure is invalid.
    """
    document = figma_data.get("document") if isinstance(figma_data, dict) else None
    if not document:
        raise StructuralError("No document node found in Figma data")
    return build_design_tree(document)


def generate_components_for_document(
    document: Optional[DesignNode],
    mode: Optional[ExtractionMode] = None,
    on_frame_error: Optional[FrameErrorHandler] = None,
    failure_policy: Optional[str] = None,
) -> Tuple[List[ParsedFrame], List[GeneratedComponent]]:
    """Extract frames and generate a component for each.

    Returns:
        (frames, components) — frames that failed under ``skip`` are absent
        from components.

    Raises:
        StructuralError: no frames found, or no component could be generated.
        PerFrameError: a frame failed and the policy is ``stop``.
    """
    mode = ExtractionMode(mode or settings.CODEGEN_EXTRACTION_MODE)
    policy = failure_policy or settings.FAILURE_POLICY
    if policy not in FAILURE_POLICIES:
        raise ValueError(f"Unknown failure policy '{policy}', expected one of {FAILURE_POLICIES}")
    report = on_frame_error or log_frame_error

    frames = extract_frames(document, mode)

    components: List[GeneratedComponent] = []
    for frame in frames:
        try:
            components.append(generate_react_component(frame.node))
        except Exception as e:
            report(frame, e)
            if policy == "stop":
                raise PerFrameError(frame.name, e) from e

    if not components:
        raise StructuralError("Failed to generate any components from the design")

    return frames, components


async def generate_code_from_design(
    design_id: str,
    store: DesignStore,
    mode: Optional[ExtractionMode] = None,
    on_frame_error: Optional[FrameErrorHandler] = None,
    failure_policy: Optional[str] = None,
) -> GenerationResult:
    """Regenerate and store all components of one design.

    Raises:
        DesignNotFoundError: the store has no such design.
        StructuralError: see ``parse_document`` and
            ``generate_components_for_document``.
        PerFrameError: a frame failed under the ``stop`` policy.
    """
    figma_data = await store.fetch_design(design_id)
    if figma_data is None:
        raise DesignNotFoundError(f"Design not found (id: {design_id})")

    document = parse_document(figma_data)
    frames, generated = generate_components_for_document(
        document,
        mode=mode,
        on_frame_error=on_frame_error,
        failure_policy=failure_policy,
    )

    try:
        await store.delete_components(design_id)
    except Exception as e:
        # Non-fatal: there may simply be nothing stored yet
        logger.warning("Failed to delete existing components for design %s: %s", design_id, e)

    stored: List[StoredComponent] = []
    for component in generated:
        try:
            stored.append(await store.insert_component(design_id, component))
        except Exception as e:
            logger.error("Failed to store component %s: %s", component.name, e)

    logger.info(
        "Generated %d/%d components for design %s",
        len(stored), len(frames), design_id,
    )

    return GenerationResult(
        design_id=design_id,
        components=stored,
        stats=GenerationStats(
            frames_found=len(frames),
            components_generated=len(stored),
        ),
    )
