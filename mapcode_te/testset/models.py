# -*- coding: utf-8 -*-
"""
Test Set Data Models — value types flowing through the test-set pipeline.

Provides the dataclasses shared by the samplers, the codec invoker, the
round-trip verifier and the output stages.  ``SamplePoint`` is one
coordinate on the sphere, ``EncodingAlias`` is one ``(code, territory)``
pair returned by the codec, and ``RunStatistics`` holds the running
totals of a single command run.

Also hosts the coordinate helpers every stage agrees on: latitude
clamping, longitude wrapping and the unit-sphere conversion.

Dependencies
------------
numpy

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
import math
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

# Third-party
import numpy as np

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
DELTA = 0.001
"""Maximum accepted round-trip error, in degrees, on both axes."""

MIN_PRECISION = 0
MAX_PRECISION = 8

MICRODEGREES = 1.0e6

INTERNATIONAL_TERRITORY = "AAA"
"""Territory of the international (worldwide) codes."""


def clamp_lat(lat: float) -> float:
    """Clamp a latitude into ``[-90, 90]``."""
    return max(-90.0, min(90.0, lat))


def normalize_lon(lon: float) -> float:
    """Wrap a longitude into ``[-180, 180]``.

    Values already inside the range are returned untouched, so both
    ``-180`` and ``180`` survive.
    """
    while lon > 180.0:
        lon -= 360.0
    while lon < -180.0:
        lon += 360.0
    return lon


def truncate_to_microdegrees(value: float) -> float:
    """Truncate a coordinate toward zero at microdegree resolution.

    Values already on a microdegree are kept, so truncating twice is a
    no-op despite float rounding in the scaling.
    """
    scaled = value * MICRODEGREES
    nearest = round(scaled)
    if abs(scaled - nearest) < 1.0e-6:
        return nearest / MICRODEGREES
    return math.trunc(scaled) / MICRODEGREES


def lat_lon_to_xyz(lat: float, lon: float) -> Tuple[float, float, float]:
    """Convert a lat/lon pair in degrees to a point on the unit sphere.

    Parameters
    ----------
    lat, lon : float
        Coordinate in degrees.

    Returns
    -------
    Tuple[float, float, float]
        ``(x, y, z)`` with radius 1.
    """
    lat_rad = np.radians(lat)
    lon_rad = np.radians(lon)
    return (
        float(np.cos(lat_rad) * np.cos(lon_rad)),
        float(np.cos(lat_rad) * np.sin(lon_rad)),
        float(np.sin(lat_rad)),
    )


def check_precision(precision: int) -> int:
    """Validate an extra-digits precision level.

    Raises
    ------
    ValueError
        If *precision* is outside ``[MIN_PRECISION, MAX_PRECISION]``.
    """
    if not MIN_PRECISION <= precision <= MAX_PRECISION:
        raise ValueError(
            f"precision must be in [{MIN_PRECISION}..{MAX_PRECISION}], "
            f"got {precision}"
        )
    return precision


@dataclass(frozen=True)
class SamplePoint:
    """A single coordinate produced by a sample source.

    Attributes
    ----------
    lat : float
        Latitude in degrees.
    lon : float
        Longitude in degrees.
    xyz : Optional[Tuple[float, float, float]]
        Unit-sphere Cartesian triple, only set when the caller asked
        for XYZ output.
    """

    lat: float
    lon: float
    xyz: Optional[Tuple[float, float, float]] = None

    @classmethod
    def create(cls, lat: float, lon: float,
               with_xyz: bool = False) -> 'SamplePoint':
        """Build a point, computing the Cartesian triple on request."""
        xyz = lat_lon_to_xyz(lat, lon) if with_xyz else None
        return cls(lat=float(lat), lon=float(lon), xyz=xyz)

    def normalized(self, limit_to_microdegrees: bool = False) -> 'SamplePoint':
        """Return the point as handed to the codec.

        Latitude is clamped to ``[-90, 90]`` and longitude wrapped into
        ``[-180, 180]``.  When *limit_to_microdegrees* is set both are
        truncated to microdegrees afterwards.  The Cartesian triple is
        recomputed if the point carries one.

        Returns
        -------
        SamplePoint
        """
        lat = clamp_lat(self.lat)
        lon = normalize_lon(self.lon)
        if limit_to_microdegrees:
            lat = truncate_to_microdegrees(lat)
            lon = truncate_to_microdegrees(lon)
        if lat == self.lat and lon == self.lon:
            return self
        xyz = lat_lon_to_xyz(lat, lon) if self.xyz is not None else None
        return replace(self, lat=lat, lon=lon, xyz=xyz)


@dataclass(frozen=True)
class EncodingAlias:
    """One ``(code, territory)`` pair representing a coordinate.

    Attributes
    ----------
    code : str
        The mapcode proper, e.g. ``"49.4V"``.
    territory : str
        Territory the code is relative to, minimal (``"NLD"``) or
        qualified (``"US-IN"``).  International codes use ``"AAA"``.
    """

    code: str
    territory: str

    def __str__(self) -> str:
        return f"{self.territory} {self.code}"


@dataclass
class RunStatistics:
    """Running totals of a single command run.

    Attributes
    ----------
    total_points : int
        Points processed, including those that failed to encode.
    total_aliases : int
        Aliases produced over all points.
    max_aliases : int
        Largest alias count seen for one point.
    lat_at_max, lon_at_max : float
        Coordinate of the first point that reached ``max_aliases``.
    mismatches : int
        Round-trip checks that failed without ending the run.
    """

    total_points: int = 0
    total_aliases: int = 0
    max_aliases: int = 0
    lat_at_max: float = 0.0
    lon_at_max: float = 0.0
    mismatches: int = 0

    @property
    def average_aliases(self) -> float:
        """Mean number of aliases per processed point (0 when empty)."""
        if self.total_points == 0:
            return 0.0
        return self.total_aliases / self.total_points

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary.

        Returns
        -------
        Dict[str, Any]
        """
        return {
            "total_points": self.total_points,
            "total_aliases": self.total_aliases,
            "average_aliases": self.average_aliases,
            "max_aliases": self.max_aliases,
            "lat_at_max": self.lat_at_max,
            "lon_at_max": self.lon_at_max,
            "mismatches": self.mismatches,
        }
