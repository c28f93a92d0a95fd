"""Comma-separated output."""

from __future__ import annotations

import csv
import io

from gitfame_render.base import BaseRenderer
from gitfame_render.models import HEADER, AuthorRow


class CsvRenderer(BaseRenderer):
    """Header row then one record per author, LF line endings."""

    def render(self, rows: list[AuthorRow]) -> str:
        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        writer.writerow(HEADER)
        writer.writerows(row.cells() for row in rows)
        return buf.getvalue()
