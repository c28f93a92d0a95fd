"""JSON and JSON Lines output.

Both emit compact objects with keys name, lines, commits, files in ranked
order. Non-ASCII names are written as-is.
"""

from __future__ import annotations

import json

from gitfame_render.base import BaseRenderer
from gitfame_render.models import AuthorRow

_SEPARATORS = (",", ":")


def _dumps(value) -> str:
    return json.dumps(value, ensure_ascii=False, separators=_SEPARATORS)


class JsonRenderer(BaseRenderer):
    """A single array holding every row."""

    def render(self, rows: list[AuthorRow]) -> str:
        return _dumps([row.to_dict() for row in rows]) + "\n"


class JsonLinesRenderer(BaseRenderer):
    """One object per line."""

    def render(self, rows: list[AuthorRow]) -> str:
        return "".join(_dumps(row.to_dict()) + "\n" for row in rows)
