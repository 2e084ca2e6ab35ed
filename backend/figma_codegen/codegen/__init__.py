"""Tailwind style mapping and JSX emission."""
