"""Whitespace-aligned table, the default output."""

from __future__ import annotations

from gitfame_render.base import BaseRenderer
from gitfame_render.models import HEADER, AuthorRow

_PADDING = 1


class TabularRenderer(BaseRenderer):
    """Columns padded to the widest cell plus one space; the last column is not padded."""

    def render(self, rows: list[AuthorRow]) -> str:
        table = [HEADER, *(row.cells() for row in rows)]
        widths = [max(len(line[col]) for line in table) + _PADDING for col in range(len(HEADER) - 1)]

        out = []
        for line in table:
            padded = [cell.ljust(width) for cell, width in zip(line, widths)]
            out.append("".join(padded) + line[-1] + "\n")
        return "".join(out)
