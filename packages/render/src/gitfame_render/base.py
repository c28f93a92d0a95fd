"""Abstract renderer interface.

Each output format implements this interface. The CLI depends on
BaseRenderer, not on a concrete format, so formats are swappable without
touching CLI code.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gitfame_render.models import AuthorRow


class BaseRenderer(ABC):
    """Turns ranked rows into the complete text written to stdout.

    Renderers return a string instead of writing to a stream so nothing is
    emitted until the whole result is ready.
    """

    @abstractmethod
    def render(self, rows: list[AuthorRow]) -> str:
        """Return the rendered output for rows, in the given order."""
