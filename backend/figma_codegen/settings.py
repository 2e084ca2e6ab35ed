"""Codegen runtime settings — tunable parameters for pipeline execution.

All values read from environment variables with sensible defaults.
Import from here instead of hardcoding.
"""

from __future__ import annotations

import os


def _int(key: str, default: int) -> int:
    return int(os.getenv(key, str(default)))


def _str(key: str, default: str) -> str:
    return os.getenv(key, default)


# =====================================================================
# Frame extraction
# =====================================================================

# extraction_mode: "top_level" (default) | "recursive"
#   top_level: only direct children of pages become components
#   recursive: every FRAME/COMPONENT in the tree, nested ones included
CODEGEN_EXTRACTION_MODE = _str("CODEGEN_EXTRACTION_MODE", "top_level")


# =====================================================================
# Code emission
# =====================================================================

# Language tag attached to every generated component
COMPONENT_LANGUAGE = _str("COMPONENT_LANGUAGE", "tsx")

# Spaces added per nesting level inside a container element
JSX_INDENT = _int("JSX_INDENT", 2)

# Spaces the JSX body is indented by inside `return (...)`
COMPONENT_BODY_INDENT = _int("COMPONENT_BODY_INDENT", 4)


# =====================================================================
# Pipeline Policies
# =====================================================================

# failure_policy: "skip" (default) | "stop"
#   skip: log the failing frame and continue with the remaining frames
#   stop: abort the run on the first frame that fails to generate
FAILURE_POLICY = _str("FAILURE_POLICY", "skip")


# =====================================================================
# Logging
# =====================================================================

# Level for the package logger's file and console handlers
LOG_LEVEL = _str("LOG_LEVEL", "INFO")
