"""Figma → React + Tailwind component generator.

Subpackages:
- integrations: Figma document models, frame extraction, naming helpers
- codegen: Tailwind style mapping and JSX/TSX emission
- pipeline: Extraction → generation → persistence orchestration
"""
