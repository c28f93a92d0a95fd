"""Output row model.

Decoupled from gitfame_core so renderers can be used independently and the
core has no knowledge of presentation concerns.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

HEADER = ("Name", "Lines", "Commits", "Files")


@dataclass(frozen=True)
class AuthorRow:
    """One ranked contributor as displayed.

    Created by the CLI layer from the (identity, AuthorRecord) pairs that
    run_fame() returns.
    """

    name: str
    lines: int
    commits: int
    files: int

    def to_dict(self) -> dict:
        return asdict(self)

    def cells(self) -> tuple[str, str, str, str]:
        return (self.name, str(self.lines), str(self.commits), str(self.files))
