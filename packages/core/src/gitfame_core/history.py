"""Attribution for files whose blame report is empty.

A zero-byte file has no lines to blame, but its last commit still counts
towards the author's commits and files. The history entry is requested in
the same ``<keyword> <value>`` shape as blame metadata (see
git.HISTORY_FORMAT), so identities match the blame path exactly.
"""

from __future__ import annotations

import logging
from pathlib import Path

from gitfame_core import git
from gitfame_core.blame import identity_keyword, split_metadata_line, split_report_lines
from gitfame_core.models import AttributionEvent

logger = logging.getLogger(__name__)


def parse_history_entry(text: str, file_path: str, use_committer: bool = False) -> AttributionEvent | None:
    """Build the zero-line event for file_path from one history entry.

    Returns None when the entry is empty or has no commit line.
    """
    keyword = identity_keyword(use_committer)
    commit = ""
    identity = ""
    for line in split_report_lines(text):
        key, value = split_metadata_line(line)
        if key == "commit" and not commit:
            commit = value.strip()
        elif key == keyword and not identity:
            identity = value

    if not commit:
        return None
    return AttributionEvent(author=identity, commit=commit, file=file_path, lines=0)


def resolve_empty_file(
    repository: str | Path,
    revision: str,
    file_path: str,
    use_committer: bool = False,
) -> list[AttributionEvent]:
    """Return the single zero-line event for an empty file, or nothing on a miss."""
    text = git.last_commit(repository, revision, file_path)
    if not text:
        logger.debug("No history for empty file %s; it contributes nothing.", file_path)
        return []

    event = parse_history_entry(text, file_path, use_committer)
    if event is None:
        logger.debug("Unrecognised history entry for %s; it contributes nothing.", file_path)
        return []
    return [event]
