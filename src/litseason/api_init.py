"""Attribute registration (import side-effect)."""
from .attributes import standard as _standard  # noqa: F401
