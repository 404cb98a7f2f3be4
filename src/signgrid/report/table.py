"""Aligned text table for a grid and its per-row analysis.

Layout (one line each)::

    <blank>
         |   c0   c1   c2 | minPos | replace
    ----------------------------------------
    *r 0 |    3   -7    5 |      3 |       0
     r 1 |   12    4    — |      4 |       0
    ----------------------------------------
    Global minimum: -7 found at positions: (r0,c1)
    <blank>

``format_table`` builds the lines and has no side effects; ``render``
writes them to a stream. Whether to emit ANSI colors is always an
explicit option: the caller decides, typically with
``default_use_colors(stream)``.
"""

import logging
import sys
from typing import Optional

from pydantic import BaseModel, ConfigDict

from signgrid.grid.cells import ABSENT, cell_at, is_numeric, iter_rows
from signgrid.grid.minimum import find_global_min, min_positive
from signgrid.grid.sign_runs import min_replacements

__all__ = [
    'RenderOptions',
    'default_use_colors',
    'compute_col_width',
    'format_cell',
    'format_table',
    'render',
]

logger = logging.getLogger(__name__)

COLORS = {
    "reset": "\x1b[0m",
    "bold": "\x1b[1m",
    "red": "\x1b[31m",
    "yellow": "\x1b[43m",
}

EMPTY_CELL = "—"
ROW_MARKER = "*"
MIN_CELL_WIDTH = 4
CELL_PADDING = 1
MIN_POS_LABEL = "minPos"
REPLACE_LABEL = "replace"

EMPTY_GRID_NOTICE = "Grid is empty."
NO_MIN_NOTICE = "Global minimum not found (no numeric values)."


class RenderOptions(BaseModel):
    """Options for one render pass."""
    model_config = ConfigDict(frozen=True, extra='forbid')

    use_colors: bool = False


def default_use_colors(stream=None) -> bool:
    """True when ``stream`` (stdout by default) is an interactive terminal."""
    stream = sys.stdout if stream is None else stream
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _cell_text(value) -> str:
    if value is ABSENT:
        return EMPTY_CELL
    return str(value)


def compute_col_width(grid) -> int:
    """Uniform cell column width: longest cell text (at least 4) plus padding."""
    longest = 0
    for _, row in iter_rows(grid):
        for col_index in range(len(row)):
            value = cell_at(row, col_index)
            if value is not ABSENT:
                longest = max(longest, len(str(value)))
    return max(MIN_CELL_WIDTH, longest) + CELL_PADDING


def format_cell(value, width: int, highlight: bool = False, use_colors: bool = False) -> str:
    """Right-align ``value`` to ``width``; wrap in highlight codes if asked.

    The escape codes sit outside the padding so the visible width is
    ``width`` either way.
    """
    text = _cell_text(value).rjust(width)
    if highlight and use_colors:
        return f"{COLORS['yellow']}{COLORS['bold']}{text}{COLORS['reset']}"
    return text


def _summary_line(result, use_colors: bool) -> str:
    if not result.found:
        return NO_MIN_NOTICE
    value = str(result.value)
    if use_colors:
        value = f"{COLORS['red']}{value}{COLORS['reset']}"
    positions = ", ".join(str(pos) for pos in result.positions)
    return f"Global minimum: {value} found at positions: {positions}"


def format_table(grid, options: Optional[RenderOptions] = None) -> list:
    """Build the report lines for ``grid``.

    Parameters
    ----------
    grid : sequence of rows
        Possibly ragged; missing cells show as ``—``.
    options : RenderOptions, optional
        Colors are off when omitted.

    Returns
    -------
    list of str
        Lines without trailing newlines. An empty grid yields only the
        empty-grid notice.
    """
    options = options or RenderOptions()
    use_colors = options.use_colors

    rows = list(iter_rows(grid))
    if not rows:
        return [EMPTY_GRID_NOTICE]

    result = find_global_min(grid)
    total_cols = max(len(row) for _, row in rows)
    col_width = compute_col_width(grid)

    min_pos_texts = []
    replace_texts = []
    for _, row in rows:
        smallest = min_positive(row)
        min_pos_texts.append(EMPTY_CELL if smallest is None else str(smallest))
        replace_texts.append(str(min_replacements(row)))

    index_width = max(2, len(str(len(rows) - 1)))
    min_pos_width = max(len(MIN_POS_LABEL), *(len(t) for t in min_pos_texts))
    replace_width = max(len(REPLACE_LABEL), *(len(t) for t in replace_texts))

    header = (
        " " * (len(ROW_MARKER) + 1 + index_width) + " |"
        + "".join(f"c{c}".rjust(col_width) for c in range(total_cols))
        + f" | {MIN_POS_LABEL:>{min_pos_width}} | {REPLACE_LABEL:>{replace_width}}"
    )
    separator = "-" * len(header)

    lines = ["", header, separator]

    for (row_index, row), min_pos_text, replace_text in zip(rows, min_pos_texts, replace_texts):
        marker = ROW_MARKER if row_index in result.rows_with_min else " " * len(ROW_MARKER)
        cells = []
        for col_index in range(total_cols):
            value = cell_at(row, col_index)
            is_min = result.found and is_numeric(value) and value == result.value
            cells.append(format_cell(value, col_width, is_min, use_colors))
        lines.append(
            f"{marker}r{row_index:>{index_width}} |"
            + "".join(cells)
            + f" | {min_pos_text:>{min_pos_width}} | {replace_text:>{replace_width}}"
        )

    lines.append(separator)
    lines.append(_summary_line(result, use_colors))
    lines.append("")

    logger.debug("Formatted table: %d rows x %d cols, col_width=%d",
                 len(rows), total_cols, col_width)
    return lines


def render(grid, options: Optional[RenderOptions] = None, stream=None) -> None:
    """Write the report for ``grid`` to ``stream`` (stdout by default).

    When ``options`` is omitted, colors follow ``default_use_colors(stream)``.
    """
    stream = sys.stdout if stream is None else stream
    if options is None:
        options = RenderOptions(use_colors=default_use_colors(stream))
    for line in format_table(grid, options):
        stream.write(line + "\n")
