"""Parser for `git blame --porcelain` output.

Porcelain output is a sequence of hunks. Each hunk opens with a header line:

    <sha> <orig-line> <final-line> [<group-size>]

The group size is only present on the first line of a group; a header
without it reuses the size last recorded for the same commit. The first time
a commit appears, metadata lines follow its header (``author``,
``committer``, ``summary``, ``filename`` ...). Every line of the file itself
is emitted once, prefixed with a TAB. Within a group, every content line is
preceded by its own three-field header; those are skipped here because the
group size already tells us how many content lines belong to the hunk.
"""

from __future__ import annotations

import logging

from gitfame_core.errors import BlameParseError
from gitfame_core.models import AttributionEvent

logger = logging.getLogger(__name__)

_CONTENT_PREFIX = "\t"


def identity_keyword(use_committer: bool) -> str:
    """Metadata keyword whose value identifies the contributor."""
    return "committer" if use_committer else "author"


def split_metadata_line(line: str) -> tuple[str, str]:
    """Split a metadata line into (keyword, value).

    The value is everything after the first whitespace run, kept verbatim
    otherwise: identities are compared by exact string equality.
    """
    parts = line.split(None, 1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1]


def split_report_lines(text: str) -> list[str]:
    """Split git output into records on LF only, dropping the final empty record.

    Content lines may hold carriage returns, form feeds or Unicode line
    separators, which str.splitlines() would treat as record boundaries.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _parse_header(
    line: str,
    line_number: int,
    file_path: str,
    group_sizes: dict[str, int],
) -> tuple[str, int]:
    fields = line.split()
    if len(fields) not in (3, 4):
        raise BlameParseError(file_path, line_number, f"expected 3 or 4 header fields, got {len(fields)}")

    commit = fields[0]
    if not (fields[1].isdigit() and fields[2].isdigit()):
        raise BlameParseError(file_path, line_number, f"non-numeric line numbers in header {line!r}")

    if len(fields) == 4:
        if not fields[3].isdigit() or int(fields[3]) == 0:
            raise BlameParseError(file_path, line_number, f"invalid line count {fields[3]!r}")
        group_sizes[commit] = int(fields[3])

    size = group_sizes.get(commit)
    if size is None:
        raise BlameParseError(file_path, line_number, f"no line count recorded for commit {commit}")
    return commit, size


def parse_blame(text: str, file_path: str, use_committer: bool = False) -> list[AttributionEvent]:
    """Convert one file's porcelain blame report into attribution events.

    Returns one event per hunk, in report order. An empty report yields no
    events; the caller is expected to fall back to the file's history.

    Raises BlameParseError on any structural problem. There is no partial
    recovery: a half-parsed file would silently misreport the totals.
    """
    keyword = identity_keyword(use_committer)

    # Per-commit state survives across hunks: metadata is only printed the
    # first time a commit appears in the report.
    identities: dict[str, str] = {}
    group_sizes: dict[str, int] = {}

    events: list[AttributionEvent] = []
    commit = ""
    size = 0
    remaining = 0

    lines = split_report_lines(text)
    for line_number, line in enumerate(lines, 1):
        if line.startswith(_CONTENT_PREFIX):
            if remaining == 0:
                raise BlameParseError(file_path, line_number, "content line outside of a hunk")
            remaining -= 1
            if remaining == 0:
                events.append(
                    AttributionEvent(
                        author=identities.get(commit, ""),
                        commit=commit,
                        file=file_path,
                        lines=size,
                    )
                )
            continue

        if remaining == 0:
            commit, size = _parse_header(line, line_number, file_path, group_sizes)
            remaining = size
            continue

        # Metadata or an intermediate per-line header inside the current hunk.
        key, value = split_metadata_line(line)
        if key == keyword:
            identities[commit] = value

    if remaining:
        raise BlameParseError(
            file_path,
            len(lines),
            f"report ended with {remaining} content line(s) missing from hunk {commit}",
        )

    logger.debug("Parsed %d hunk(s) from %s", len(events), file_path)
    return events
