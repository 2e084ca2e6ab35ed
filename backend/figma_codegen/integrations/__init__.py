"""Figma document models, frame extraction and naming."""
