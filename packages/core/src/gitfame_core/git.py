"""Thin wrappers around the git binary.

Every function returns git's text output unparsed (or minimally split) so the
parsing code can be tested without a repository on disk.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from gitfame_core.errors import GitCommandError

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT_S = 300

# Shaped like blame metadata so both attribution paths read identities with
# the same rule.
HISTORY_FORMAT = "commit %H%nauthor %an%ncommitter %cn"


def run_git(args: list[str], cwd: str | Path, timeout_s: int = _DEFAULT_TIMEOUT_S) -> str:
    """Run ``git <args>`` in cwd and return stdout.

    Raises GitCommandError when git is missing, times out, or exits non-zero.
    """
    try:
        proc = subprocess.run(
            ["git", *args],
            cwd=str(cwd),
            capture_output=True,
            timeout=timeout_s,
        )
    except FileNotFoundError as e:
        raise GitCommandError(args, f"git executable not found ({e})") from e
    except subprocess.TimeoutExpired as e:
        raise GitCommandError(args, f"timed out after {timeout_s}s") from e

    # Decoded by hand: text mode would turn a lone \r inside a file line into \n.
    stdout = proc.stdout.decode("utf-8", errors="replace")
    if proc.returncode != 0:
        stderr = proc.stderr.decode("utf-8", errors="replace")
        raise GitCommandError(args, stderr.strip(), returncode=proc.returncode)
    return stdout


def is_repository(path: str | Path) -> bool:
    return (Path(path) / ".git").exists()


def list_files(repository: str | Path, revision: str) -> list[str]:
    """Return every tracked file path at revision.

    Parses NUL-separated ``git ls-tree -r`` entries (``<mode> <type> <sha>\\t<path>``)
    and keeps blobs only; submodule entries have nothing to blame.
    """
    out = run_git(["ls-tree", "-r", "-z", revision], cwd=repository)
    paths: list[str] = []
    for entry in out.split("\0"):
        if not entry:
            continue
        meta, _, path = entry.partition("\t")
        fields = meta.split()
        if len(fields) != 3 or not path:
            raise GitCommandError(["ls-tree", "-r", "-z", revision], f"unexpected entry {entry!r}")
        if fields[1] != "blob":
            logger.debug("Skipping non-blob entry %s (%s)", path, fields[1])
            continue
        paths.append(path)
    return paths


def blame(repository: str | Path, revision: str, path: str) -> str:
    return run_git(["blame", "--porcelain", revision, "--", path], cwd=repository)


def last_commit(repository: str | Path, revision: str, path: str) -> str | None:
    """Return the most recent history entry for path, or None if git can't produce one."""
    try:
        return run_git(["log", "-1", f"--format={HISTORY_FORMAT}", revision, "--", path], cwd=repository)
    except GitCommandError as e:
        logger.debug("History lookup for %s failed: %s", path, e)
        return None
