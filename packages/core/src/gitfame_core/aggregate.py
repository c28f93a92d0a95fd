"""Fold attribution events into per-author totals."""

from __future__ import annotations

from collections.abc import Iterable

from gitfame_core.models import AttributionEvent, AuthorRecord


class Aggregator:
    """Per-run accumulation of AuthorRecords keyed by identity.

    Commits and files are counted through set insertion, so delivering the
    same event twice leaves the distinct counters unchanged. Lines are summed:
    each hunk must be delivered exactly once.
    """

    def __init__(self):
        self._records: dict[str, AuthorRecord] = {}

    def add(self, event: AttributionEvent) -> None:
        record = self._records.get(event.author)
        if record is None:
            record = self._records[event.author] = AuthorRecord()
        record.lines += event.lines
        record.commits.add(event.commit)
        record.files.add(event.file)

    def extend(self, events: Iterable[AttributionEvent]) -> None:
        for event in events:
            self.add(event)

    def merge(self, other: Aggregator) -> None:
        """Absorb another aggregator's partial totals.

        Sets are unioned rather than counters re-summed, so a commit seen by
        two partial aggregators is still counted once.
        """
        for identity, theirs in other._records.items():
            mine = self._records.get(identity)
            if mine is None:
                mine = self._records[identity] = AuthorRecord()
            mine.lines += theirs.lines
            mine.commits |= theirs.commits
            mine.files |= theirs.files

    def records(self) -> dict[str, AuthorRecord]:
        """Return the totals, without the empty identity.

        An empty identity means the blame report never named an author for a
        commit; it must not show up in any displayed total.
        """
        return {identity: record for identity, record in self._records.items() if identity != ""}

    def __len__(self) -> int:
        return len(self.records())
