"""Command-line entry point: Figma JSON file → .tsx component files.

Usage:
    figma-codegen --design-file design.json --output-dir out/components

    # Every nested frame, not just page-level ones:
    figma-codegen --design-file design.json --output-dir out --mode recursive

The design file is either a Figma file response (``{"document": ...}``) or a
bare DOCUMENT node.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from figma_codegen import settings
from figma_codegen.errors import CodegenError
from figma_codegen.integrations.figma_models import GeneratedComponent
from figma_codegen.integrations.figma_parser import ExtractionMode
from figma_codegen.logging_config import get_codegen_logger
from figma_codegen.pipeline.orchestrator import (
    FAILURE_POLICIES,
    generate_components_for_document,
    parse_document,
)

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate React + Tailwind components from a Figma document")
    parser.add_argument(
        "--design-file", required=True,
        help="Path to the Figma document JSON",
    )
    parser.add_argument(
        "--output-dir", required=True,
        help="Directory the generated .tsx files are written to",
    )
    parser.add_argument(
        "--mode", choices=[m.value for m in ExtractionMode],
        default=settings.CODEGEN_EXTRACTION_MODE,
        help=f"Frame extraction mode (default: {settings.CODEGEN_EXTRACTION_MODE})",
    )
    parser.add_argument(
        "--failure-policy", choices=FAILURE_POLICIES,
        default=settings.FAILURE_POLICY,
        help=f"What to do when one frame fails (default: {settings.FAILURE_POLICY})",
    )
    return parser.parse_args(argv)


def load_figma_data(path: Path) -> Dict:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict) and "document" not in data and data.get("type") == "DOCUMENT":
        return {"document": data}
    return data


def component_filenames(components: List[GeneratedComponent]) -> List[str]:
    """File name per component; repeated names get _2, _3, ... suffixes."""
    seen: Dict[str, int] = {}
    filenames = []
    for component in components:
        count = seen.get(component.name, 0) + 1
        seen[component.name] = count
        stem = component.name if count == 1 else f"{component.name}_{count}"
        if count > 1:
            logger.warning("Duplicate component name %s, writing %s", component.name, stem)
        filenames.append(f"{stem}.{component.language}")
    return filenames


def write_components(components: List[GeneratedComponent], output_dir: Path) -> List[Path]:
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for component, filename in zip(components, component_filenames(components)):
        path = output_dir / filename
        path.write_text(component.code, encoding="utf-8")
        written.append(path)
    return written


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    get_codegen_logger()

    try:
        figma_data = load_figma_data(Path(args.design_file))
    except (OSError, ValueError) as e:
        # ValueError covers JSONDecodeError and UnicodeDecodeError
        print(f"Error: cannot read design file: {e}", file=sys.stderr)
        return 1

    try:
        document = parse_document(figma_data)
        frames, components = generate_components_for_document(
            document,
            mode=ExtractionMode(args.mode),
            failure_policy=args.failure_policy,
        )
    except CodegenError as e:
        logger.error("Generation failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        written = write_components(components, Path(args.output_dir))
    except OSError as e:
        logger.error("Writing components failed: %s", e)
        print(f"Error: cannot write components: {e}", file=sys.stderr)
        return 1

    print(f"Frames found: {len(frames)}, components generated: {len(components)}")
    for path in written:
        print(f"  {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
