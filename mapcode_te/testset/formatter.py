# -*- coding: utf-8 -*-
"""
Record Formatter — textual test-set output.

Writes one block per sample point to the record stream::

    <number-of-aliases> <lat> <lon> [<x> <y> <z>]
    <territory> <code>          (repeated number-of-aliases times)
    <empty line>

Progress goes to a separate diagnostic stream so that the record
stream can be redirected to a file on its own.  Numbers use ``%.12g``.

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
from typing import Optional, Sequence, TextIO

# Internal
from mapcode_te.testset.models import EncodingAlias, SamplePoint


def _g(value: float) -> str:
    return f"{value:.12g}"


class RecordFormatter:
    """Write records and progress to two text streams.

    Parameters
    ----------
    out : TextIO, optional
        Record stream.  Default ``sys.stdout``.
    err : TextIO, optional
        Diagnostic stream.  Default ``sys.stderr``.
    """

    def __init__(self, out: Optional[TextIO] = None,
                 err: Optional[TextIO] = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._err = err if err is not None else sys.stderr

    @property
    def diagnostics(self) -> TextIO:
        return self._err

    def write_record(self, point: SamplePoint,
                     aliases: Sequence[EncodingAlias]) -> None:
        """Write the block for one sample point.

        The header carries ``x y z`` only when the point has them.
        """
        fields = [str(len(aliases)), _g(point.lat), _g(point.lon)]
        if point.xyz is not None:
            fields.extend(_g(v) for v in point.xyz)
        lines = [" ".join(fields)]
        lines.extend(f"{a.territory} {a.code}" for a in aliases)
        lines.append("")
        self._out.write("\n".join(lines) + "\n")

    def write_alias(self, alias: EncodingAlias) -> None:
        """Write one ``<territory> <code>`` line (encode command)."""
        print(f"{alias.territory} {alias.code}", file=self._out)

    def write_decoded(self, lat: float, lon: float) -> None:
        """Write one ``<lat> <lon>`` line (decode command)."""
        print(f"{_g(lat)} {_g(lon)}", file=self._out)

    def write_progress(self, processed: int, total: int,
                       total_aliases: int) -> None:
        """Overwrite the progress line on the diagnostic stream."""
        pct = int((processed / total) * 100.0 + 0.5) if total else 100
        self._err.write(
            f"[{pct}%] Processed {processed} of {total} points "
            f"(generated {total_aliases} mapcodes)...\r"
        )
        self._err.flush()
