#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option bundles for the all2rst renderers."""

from all2rst.options.base import BaseRendererOptions, CloneFrozenMixin
from all2rst.options.rst import RstRendererOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "RstRendererOptions",
]
