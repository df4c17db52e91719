# -*- coding: utf-8 -*-
"""
Shared pytest fixtures for the mapcode-te test suite.

Provides a deterministic fake codec so the pipeline can be exercised
without the reference mapcode package, a small boundary catalog, and
helpers for parsing the textual test-set output.

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
import io
import re
from typing import List, Optional, Tuple

# Third-party
import numpy as np
import pytest

# Internal
from mapcode_te.testset.base import Codec
from mapcode_te.testset.catalog import ArrayBoundaryCatalog
from mapcode_te.testset.formatter import RecordFormatter

_CODE_RE = re.compile(r"^([IL])([NS])(\d+)([EW])(\d+)(?:-(X+))?$")


def _same_territory(a: str, b: str) -> bool:
    return a == b or a.partition("-")[2] == b or b.partition("-")[2] == a


class FakeCodec(Codec):
    """Deterministic stand-in for a mapcode library.

    Every coordinate gets an international code in territory ``AAA``.
    Coordinates inside ``LOCAL_BOX`` also get a local code in
    ``LOCAL_TERRITORY``, listed first.  Codes store the coordinate at
    ``10**-(4 + extra_digits)`` degrees; high-precision codes end in
    ``-`` followed by one ``X`` per extra digit.

    Parameters
    ----------
    decode_shift : float
        Added to every decoded longitude, to provoke decode mismatches.
    fail_above_lat : float, optional
        Refuse to encode coordinates with ``|lat|`` above this value.
    forget_local : bool
        Drop local aliases when re-encoding with a territory hint, to
        provoke encode mismatches.
    """

    LOCAL_BOX = (50.0, 3.0, 54.0, 8.0)
    LOCAL_TERRITORY = "EUR-NLD"

    def __init__(
        self,
        decode_shift: float = 0.0,
        fail_above_lat: Optional[float] = None,
        forget_local: bool = False,
    ) -> None:
        self.decode_shift = decode_shift
        self.fail_above_lat = fail_above_lat
        self.forget_local = forget_local
        self.encode_calls: List[tuple] = []
        self.decode_calls: List[tuple] = []

    @staticmethod
    def make_code(prefix: str, lat: float, lon: float,
                  extra_digits: int = 0) -> str:
        scale = 10 ** (4 + extra_digits)
        code = "%s%s%d%s%d" % (
            prefix,
            "N" if lat >= 0 else "S", round(abs(lat) * scale),
            "E" if lon >= 0 else "W", round(abs(lon) * scale),
        )
        if extra_digits:
            code += "-" + "X" * extra_digits
        return code

    def encode(self, lat, lon, territory=None, extra_digits=0):
        self.encode_calls.append((lat, lon, territory, extra_digits))
        if self.fail_above_lat is not None and abs(lat) > self.fail_above_lat:
            return []

        results = []
        min_lat, min_lon, max_lat, max_lon = self.LOCAL_BOX
        if min_lat <= lat <= max_lat and min_lon <= lon <= max_lon:
            results.append((self.make_code("L", lat, lon, extra_digits),
                            self.LOCAL_TERRITORY))
        results.append((self.make_code("I", lat, lon, extra_digits), "AAA"))

        if territory is not None:
            results = [r for r in results if _same_territory(territory, r[1])]
            if self.forget_local:
                results = [r for r in results if r[1] == "AAA"]
        return results

    def decode(self, code, territory=None) -> Tuple[float, float]:
        self.decode_calls.append((code, territory))
        match = _CODE_RE.match(code)
        if match is None:
            raise ValueError(f"unparseable mapcode {code!r}")
        prefix, ns, lat_digits, ew, lon_digits, suffix = match.groups()
        if prefix == "L" and territory and \
                not _same_territory(territory, self.LOCAL_TERRITORY):
            raise ValueError(f"unknown territory {territory!r}")

        scale = 10 ** (4 + len(suffix or ""))
        lat = int(lat_digits) / scale * (1 if ns == "N" else -1)
        lon = int(lon_digits) / scale * (1 if ew == "E" else -1)
        return lat, lon + self.decode_shift


def parse_records(text: str) -> List[Tuple[List[str], List[Tuple[str, str]]]]:
    """Split test-set output into ``(header_fields, aliases)`` blocks."""
    blocks = []
    lines = text.split("\n")
    i = 0
    while i < len(lines):
        if not lines[i]:
            i += 1
            continue
        header = lines[i].split()
        count = int(header[0])
        aliases = [tuple(line.split(" ", 1))
                   for line in lines[i + 1:i + 1 + count]]
        blocks.append((header, aliases))
        assert lines[i + 1 + count] == ""
        i += count + 2
    return blocks


@pytest.fixture
def fake_codec():
    """A fresh, well-behaved fake codec."""
    return FakeCodec()


@pytest.fixture
def catalog():
    """Two boundary records: one inside the local box, one at 180 E."""
    return ArrayBoundaryCatalog(np.array([
        [50.5, 3.5, 53.5, 7.5],
        [-10.0, 170.0, 10.0, 180.0],
    ]))


@pytest.fixture
def streams():
    """``(formatter, out, err)`` writing to in-memory streams."""
    out = io.StringIO()
    err = io.StringIO()
    return RecordFormatter(out, err), out, err
