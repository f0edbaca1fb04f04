"""
Summary: Expose context window computation and line rendering.
Why: Share one rendering path between the hint and reveal phases.
"""

from .renderer import format_line, render_window
from .window import ContextWindow, compute_window

__all__ = ["ContextWindow", "compute_window", "format_line", "render_window"]
