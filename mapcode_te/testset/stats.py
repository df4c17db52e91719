# -*- coding: utf-8 -*-
"""
Statistics Aggregator — running totals for one test-set run.

Counts points and aliases, remembers the point with the most aliases
and prints the end-of-run summary to the diagnostic stream.

Author
------
Ava Courtney

License
-------
MIT License
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

# Standard library
import sys
from typing import List, Optional, TextIO

# Internal
from mapcode_te.testset.models import RunStatistics, SamplePoint


class StatisticsAggregator:
    """Accumulate ``RunStatistics`` over the points of a run.

    A fresh aggregator is created per command run; ``statistics`` is
    returned to the caller when the run ends.
    """

    def __init__(self) -> None:
        self._stats = RunStatistics()

    @property
    def statistics(self) -> RunStatistics:
        return self._stats

    def record(self, point: SamplePoint, nr_of_aliases: int) -> None:
        """Add one processed point.

        Parameters
        ----------
        point : SamplePoint
            The (normalized) point as it was encoded.
        nr_of_aliases : int
            Aliases produced for it; 0 when encoding failed.
        """
        stats = self._stats
        stats.total_points += 1
        stats.total_aliases += nr_of_aliases
        if nr_of_aliases > stats.max_aliases:
            stats.max_aliases = nr_of_aliases
            stats.lat_at_max = point.lat
            stats.lon_at_max = point.lon

    def record_mismatch(self) -> None:
        """Count one non-fatal round-trip mismatch."""
        self._stats.mismatches += 1

    def summary_lines(self) -> List[str]:
        """Render the end-of-run summary."""
        s = self._stats
        lines = [
            "",
            "Statistics:",
            f"Total number of 3D points generated     = {s.total_points}",
            f"Total number of mapcodes generated      = {s.total_aliases}",
            f"Average number of mapcodes per 3D point = "
            f"{s.average_aliases:.12g}",
            f"Largest number of results for 1 mapcode = {s.max_aliases} "
            f"at ({s.lat_at_max:.12g}, {s.lon_at_max:.12g})",
        ]
        if s.mismatches:
            lines.append(
                f"Round-trip mismatches (non-fatal)       = {s.mismatches}"
            )
        return lines

    def emit_summary(self, stream: Optional[TextIO] = None) -> None:
        """Print the summary to *stream* (default ``sys.stderr``)."""
        stream = stream if stream is not None else sys.stderr
        for line in self.summary_lines():
            print(line, file=stream)
