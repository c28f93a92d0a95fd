"""Core attribution run: list, filter, blame, aggregate, rank."""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from gitfame_core import git
from gitfame_core.aggregate import Aggregator
from gitfame_core.blame import parse_blame
from gitfame_core.errors import ConfigError
from gitfame_core.filters import select_files
from gitfame_core.history import resolve_empty_file
from gitfame_core.models import AttributionEvent, AuthorRecord
from gitfame_core.ranking import rank

logger = logging.getLogger(__name__)


@dataclass
class FameSummary:
    """Result returned by run_fame.

    Decoupled from gitfame_render so the core has no dependency on output
    formats. The CLI converts ``ranked`` into rows before rendering.
    """

    repository: str
    revision: str
    order_by: str
    ranked: list[tuple[str, AuthorRecord]] = field(default_factory=list)
    files: list[str] = field(default_factory=list)
    empty_files: list[str] = field(default_factory=list)


def attribute_file(
    repository: str | Path,
    revision: str,
    path: str,
    use_committer: bool = False,
) -> list[AttributionEvent]:
    """Return the attribution events for one file at revision.

    Falls back to the file's last commit when blame has nothing to say
    (zero-byte files).
    """
    text = git.blame(repository, revision, path)
    if text == "":
        return resolve_empty_file(repository, revision, path, use_committer)
    return parse_blame(text, path, use_committer)


def _aggregate_file(repository: str, revision: str, path: str, use_committer: bool) -> tuple[Aggregator, bool]:
    partial = Aggregator()
    events = attribute_file(repository, revision, path, use_committer)
    partial.extend(events)
    is_empty = all(event.lines == 0 for event in events)
    return partial, is_empty


def run_fame(config: dict, on_progress: Callable[[int, int, str], None] | None = None) -> FameSummary:
    """Run the full attribution pipeline and return a ranked FameSummary.

    ``config`` must already have passed config.validate_config. Per-file work
    runs on ``config["jobs"]`` threads; partial results are merged in file
    order, so the outcome is identical to a serial run.

    Any git or parse failure propagates: a partial result would silently
    misreport the statistics.
    """
    repository = config["repository"]
    revision = config["revision"]
    use_committer = config["use_committer"]

    if not git.is_repository(repository):
        raise ConfigError(f"{repository!r} is not a git repository.")

    tracked = git.list_files(repository, revision)
    selected = select_files(
        tracked,
        extensions=config.get("extensions"),
        languages=config.get("languages"),
        exclude=config.get("exclude"),
        restrict_to=config.get("restrict_to"),
    )
    logger.debug("Selected %d of %d tracked file(s) at %s", len(selected), len(tracked), revision)

    summary = FameSummary(repository=str(repository), revision=revision, order_by=config["order_by"], files=selected)
    aggregator = Aggregator()
    total = len(selected)

    def work(path: str) -> tuple[Aggregator, bool]:
        return _aggregate_file(repository, revision, path, use_committer)

    def fold(results) -> None:
        for i, (path, (partial, is_empty)) in enumerate(zip(selected, results), 1):
            if on_progress is not None:
                on_progress(i, total, path)
            aggregator.merge(partial)
            if is_empty:
                summary.empty_files.append(path)

    jobs = config.get("jobs", 1)
    if jobs > 1 and total > 1:
        with ThreadPoolExecutor(max_workers=jobs) as executor:
            try:
                fold(executor.map(work, selected))
            except BaseException:
                # Queued files would otherwise all be blamed before the error surfaces.
                executor.shutdown(wait=True, cancel_futures=True)
                raise
    else:
        fold(map(work, selected))

    summary.ranked = rank(aggregator.records(), config["order_by"])
    return summary
