"""Merging of per-team record batches."""

from __future__ import annotations

from collections.abc import Iterable

from dartcal import MatchRecord


def merge_batches(batches: Iterable[Iterable[MatchRecord]]) -> list[MatchRecord]:
    """Concatenate batches in order.

    A match between two tracked teams shows up in both teams' batches.
    Those copies are kept here and dropped by the sequencer.
    """
    merged: list[MatchRecord] = []
    for batch in batches:
        merged.extend(batch)
    return merged
