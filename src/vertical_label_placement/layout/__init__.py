"""Rendering-side helpers built on top of placement."""

from .label_layout import LabelLayoutEngine, LabelSpec

__all__ = ["LabelLayoutEngine", "LabelSpec"]
