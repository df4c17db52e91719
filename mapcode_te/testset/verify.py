# -*- coding: utf-8 -*-
"""
Round-Trip Verifier — cross-check the codec in both directions.

Two independent checks, both point-local and stateless:

- **encode then decode**: an alias produced for a coordinate must decode
  back to within ``DELTA`` degrees of that coordinate.
- **decode then encode**: re-encoding a coordinate with an alias's
  territory as hint must reproduce that alias.

A failed check raises ``DecodeMismatch`` or ``EncodeMismatch``.  The
caller decides whether that ends the run or is only reported; some
mismatches are expected near territory borders, where one coordinate
is legitimately ambiguous.

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
import logging
from typing import Optional, Tuple

# Internal
from mapcode_te.testset.codec import CodecInvoker
from mapcode_te.testset.errors import (
    DecodeFailure,
    DecodeMismatch,
    EncodeMismatch,
)
from mapcode_te.testset.models import DELTA, EncodingAlias

logger = logging.getLogger(__name__)


def minimal_territory(territory: str) -> Optional[str]:
    """Strip the parent prefix from a qualified territory code.

    Only the segment before the first ``-`` is removed, so ``"US-IN"``
    gives ``"IN"``.  Returns ``None`` for codes without a ``-``.
    """
    _, sep, child = territory.partition("-")
    return child if sep else None


def territories_match(expected: str, found: str) -> bool:
    """Whether two territory codes name the same territory.

    True when the codes are equal, or when one is the minimal form of
    the other (``"IN"`` matches ``"US-IN"`` and ``"RU-IN"``).
    """
    if expected == found:
        return True
    return (expected == minimal_territory(found)
            or found == minimal_territory(expected))


def coordinate_deltas(
    lat: float, lon: float, found_lat: float, found_lon: float,
) -> Tuple[float, float]:
    """Absolute lat/lon differences in degrees.

    A longitude difference larger than 180 degrees is measured the
    other way round the globe.
    """
    delta_lat = abs(found_lat - lat)
    delta_lon = abs(found_lon - lon)
    if delta_lon > 180.0:
        delta_lon = 360.0 - delta_lon
    return delta_lat, delta_lon


def precision_of(code: str) -> int:
    """Number of high-precision digits in a code (after its first ``-``)."""
    _, sep, suffix = code.partition("-")
    return len(suffix) if sep else 0


class RoundTripVerifier:
    """Bidirectional consistency checks against a codec.

    Parameters
    ----------
    invoker : CodecInvoker
        Wrapped codec used for the re-encode and decode calls.
    tolerance : float
        Accepted error in degrees.  Default ``DELTA``.
    """

    def __init__(self, invoker: CodecInvoker, tolerance: float = DELTA) -> None:
        self._invoker = invoker
        self._tolerance = tolerance

    def verify_encode_then_decode(
        self, lat: float, lon: float, alias: EncodingAlias,
    ) -> Tuple[float, float]:
        """Decode *alias* and compare with the coordinate it came from.

        Parameters
        ----------
        lat, lon : float
            The original coordinate; clamped and wrapped before the
            comparison.
        alias : EncodingAlias
            An alias the codec produced for ``(lat, lon)``.

        Returns
        -------
        Tuple[float, float]
            ``(delta_lat, delta_lon)`` of the successful round trip.

        Raises
        ------
        DecodeMismatch
            If the alias cannot be decoded, or decodes further than the
            tolerance from the original.
        """
        lat, lon = self._invoker.normalize(lat, lon)
        try:
            found_lat, found_lon = self._invoker.decode_one(
                alias.code, alias.territory
            )
        except DecodeFailure as exc:
            raise DecodeMismatch(
                f"decoding mapcode to lat/lon failure; {exc}, "
                f"expected lat={lat:.12g}, lon={lon:.12g}"
            ) from exc

        delta_lat, delta_lon = coordinate_deltas(lat, lon, found_lat, found_lon)
        if delta_lat > self._tolerance or delta_lon > self._tolerance:
            raise DecodeMismatch(
                f"decoding mapcode to lat/lon failure; "
                f"lat={lat:.12g}, lon={lon:.12g} produces mapcode {alias}, "
                f"which decodes to lat={found_lat:.12g} "
                f"(delta={delta_lat:.12g}), lon={found_lon:.12g} "
                f"(delta={delta_lon:.12g})"
            )
        logger.debug("decode check ok for %s (%.3g, %.3g)",
                     alias, delta_lat, delta_lon)
        return delta_lat, delta_lon

    def verify_decode_then_encode(
        self,
        alias: EncodingAlias,
        lat: float,
        lon: float,
        precision: int = 0,
    ) -> EncodingAlias:
        """Re-encode a coordinate and look for *alias* among the results.

        Parameters
        ----------
        alias : EncodingAlias
            The alias that must come back.
        lat, lon : float
            Coordinate *alias* represents.
        precision : int
            Extra digits used to produce *alias*.

        Returns
        -------
        EncodingAlias
            The matching alias from the re-encode.

        Raises
        ------
        EncodeMismatch
            If re-encoding yields nothing, or no alias with the same
            code and an equivalent territory.
        """
        norm_lat, norm_lon = self._invoker.normalize(lat, lon)
        results = self._invoker.encode_all(
            lat, lon, territory_hint=alias.territory, precision=precision
        )
        if not results:
            raise EncodeMismatch(
                f"encoding lat/lon to mapcode failure; cannot encode "
                f"lat={lat:.12g}, lon={lon:.12g} "
                f"(default territory={alias.territory})"
            )

        for found in results:
            if found.code == alias.code and \
                    territories_match(alias.territory, found.territory):
                return found

        raise EncodeMismatch(
            f"encoding lat/lon to mapcode failure; mapcode '{alias}' "
            f"decodes to lat={lat:.12g}({norm_lat:.12g}), "
            f"lon={lon:.12g}({norm_lon:.12g}), which does not encode "
            f"back to '{alias}'"
        )
