"""Report rendering.

- table: Aligned terminal table with optional ANSI highlighting
"""

from signgrid.report.table import RenderOptions, default_use_colors, format_table, render

__all__ = [
    "RenderOptions",
    "default_use_colors",
    "format_table",
    "render",
]
