"""Attribution data models.

Decoupled from gitfame_render so the core never knows how results are
displayed. The CLI maps ranked AuthorRecords to output rows.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AttributionEvent:
    """One contiguous block of lines in one file attributed to one commit.

    Empty files produce a single synthetic event with ``lines == 0`` so the
    author still gets credit for the file and the commit.
    """

    author: str
    commit: str
    file: str
    lines: int


@dataclass
class AuthorRecord:
    """Running totals for one contributor.

    ``lines`` is a sum; commits and files are sets so replaying an event never
    inflates the distinct counters.
    """

    lines: int = 0
    commits: set[str] = field(default_factory=set)
    files: set[str] = field(default_factory=set)

    @property
    def commit_count(self) -> int:
        return len(self.commits)

    @property
    def file_count(self) -> int:
        return len(self.files)

    def counters(self) -> dict[str, int]:
        return {"lines": self.lines, "commits": self.commit_count, "files": self.file_count}
