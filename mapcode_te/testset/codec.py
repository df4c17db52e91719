# -*- coding: utf-8 -*-
"""
Codec Invoker — normalized, structured access to the codec under test.

``CodecInvoker`` is the only place the harness calls a ``Codec``.  It
clamps and wraps coordinates before encoding, turns the raw
``(code, territory)`` tuples into ``EncodingAlias`` objects and
converts decoder problems into ``DecodeFailure``.

``MapcodeCodec`` adapts the reference ``mapcode`` Python package to the
``Codec`` contract.

Dependencies
------------
mapcode (optional, for ``MapcodeCodec``)

Author
------
Steven Siebert

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
import math
from typing import List, Optional, Tuple

# Optional: reference mapcode implementation
try:
    import mapcode
    _HAS_MAPCODE = True
except ImportError:
    _HAS_MAPCODE = False

# Internal
from mapcode_te.testset.base import Codec
from mapcode_te.testset.errors import DecodeFailure
from mapcode_te.testset.models import (
    EncodingAlias,
    SamplePoint,
    INTERNATIONAL_TERRITORY,
    check_precision,
)

logger = logging.getLogger(__name__)

class MapcodeCodec(Codec):
    """``Codec`` backed by the ``mapcode`` package.

    Raises
    ------
    ImportError
        If the ``mapcode`` package is not installed.

    Examples
    --------
    >>> codec = MapcodeCodec()
    >>> codec.encode(52.376514, 4.908543)[0]
    ('49.4V', 'NLD')
    """

    def __init__(self) -> None:
        if not _HAS_MAPCODE:
            raise ImportError(
                "MapcodeCodec requires the mapcode package. "
                "Install it with: pip install mapcode"
            )

    def encode(
        self,
        lat: float,
        lon: float,
        territory: Optional[str] = None,
        extra_digits: int = 0,
    ) -> List[Tuple[str, str]]:
        if territory is None and extra_digits == 0:
            results = mapcode.encode(lat, lon)
        elif territory is None:
            results = mapcode.encode(lat, lon, extra_digits=extra_digits)
        else:
            results = mapcode.encode(lat, lon, territory, extra_digits)
        return [(str(code), str(terr)) for code, terr in results or []]

    def decode(
        self,
        code: str,
        territory: Optional[str] = None,
    ) -> Tuple[float, float]:
        if territory:
            lat, lon = mapcode.decode(code, territory)
        else:
            lat, lon = mapcode.decode(code)
        return float(lat), float(lon)


class CodecInvoker:
    """Invoke a ``Codec`` with normalized inputs and structured outputs.

    Parameters
    ----------
    codec : Codec
        The encoder/decoder under test.
    limit_to_microdegrees : bool
        Truncate coordinates to microdegrees before encoding.
    """

    def __init__(self, codec: Codec,
                 limit_to_microdegrees: bool = False) -> None:
        self._codec = codec
        self._limit_to_microdegrees = limit_to_microdegrees

    def normalize(self, lat: float, lon: float) -> Tuple[float, float]:
        """Return the coordinate exactly as the codec will receive it."""
        point = SamplePoint(lat, lon).normalized(self._limit_to_microdegrees)
        return point.lat, point.lon

    def encode_all(
        self,
        lat: float,
        lon: float,
        territory_hint: Optional[str] = None,
        precision: int = 0,
    ) -> List[EncodingAlias]:
        """Encode a coordinate to every alias the codec offers.

        Parameters
        ----------
        lat, lon : float
            Coordinate in degrees; clamped and wrapped before use.
        territory_hint : str, optional
            Only return aliases for this territory.
        precision : int
            Extra digits, 0 to 8.

        Returns
        -------
        List[EncodingAlias]
            In codec order.  Empty when the coordinate cannot be
            encoded.

        Raises
        ------
        ValueError
            If *precision* is out of range.
        """
        check_precision(precision)
        lat, lon = self.normalize(lat, lon)
        try:
            results = self._codec.encode(lat, lon, territory_hint, precision)
        except Exception as exc:
            logger.warning(
                "codec raised while encoding lat=%.12g, lon=%.12g "
                "(territory=%s, precision=%d): %s",
                lat, lon, territory_hint or INTERNATIONAL_TERRITORY,
                precision, exc,
            )
            return []
        return [EncodingAlias(code, territory) for code, territory in results]

    def decode_one(
        self,
        code: str,
        territory_context: Optional[str] = None,
    ) -> Tuple[float, float]:
        """Decode a single code.

        Parameters
        ----------
        code : str
            The mapcode.
        territory_context : str, optional
            Territory used to resolve local codes.

        Returns
        -------
        Tuple[float, float]
            ``(lat, lon)`` in degrees.

        Raises
        ------
        DecodeFailure
            If the codec raises, or returns a non-finite or out-of-range
            coordinate.
        """
        territory = territory_context or INTERNATIONAL_TERRITORY
        try:
            lat, lon = self._codec.decode(code, territory_context)
        except Exception as exc:
            raise DecodeFailure(code, territory, str(exc)) from exc

        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise DecodeFailure(code, territory, "no coordinate returned")
        if abs(lat) > 90.0 or abs(lon) > 180.0:
            raise DecodeFailure(
                code, territory,
                f"coordinate out of range: lat={lat:.12g}, lon={lon:.12g}",
            )
        return lat, lon
