"""
Plain-text table rendering for management command output.
"""
from typing import List, Sequence


def render_table(headers: Sequence[str], rows: List[Sequence[str]]) -> str:
    """
    Render rows as a bordered, left-aligned text table.

    Args:
        headers: Column titles
        rows: Row values, one string per column

    Returns:
        Table text without a trailing newline
    """
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    border = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def line(cells):
        return "| " + " | ".join(c.ljust(w) for c, w in zip(cells, widths)) + " |"

    lines = [border, line(headers), border]
    lines.extend(line(row) for row in rows)
    lines.append(border)
    return "\n".join(lines)
