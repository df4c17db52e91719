# -*- coding: utf-8 -*-
"""
Sphere Sampler — grid and random coordinate sources over the Earth.

Produces ``SamplePoint`` sequences spread over the surface of a unit
sphere.  Both modes map a pair of unit values ``(u1, u2)`` in ``[0, 1]``
onto the sphere with the area-preserving construction::

    theta0 = 2 * pi * u1
    theta1 = acos(1 - 2 * u2)
    (x, y, z) = (sin(theta0) sin(theta1), cos(theta0) sin(theta1), cos(theta1))

so a uniform ``(u1, u2)`` gives a uniform distribution of points.  Grid
mode walks a regular lattice of unit values, random mode draws them from
a seeded ``numpy.random.Generator``.

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
from typing import Iterator, Optional, Tuple

# Third-party
import numpy as np

# Internal
from mapcode_te.testset.models import SamplePoint, lat_lon_to_xyz

MODES = ("grid", "random")

# Substituted when the sphere mapping degenerates to NaN at the poles.
POLE_LAT = 90.0
POLE_LON = 180.0


def unit_to_sphere(
    unit1: float, unit2: float,
) -> Tuple[float, float, float, float, float]:
    """Map two unit values onto the sphere.

    Parameters
    ----------
    unit1, unit2 : float
        Unit values, nominally in ``[0, 1]``.

    Returns
    -------
    Tuple[float, float, float, float, float]
        ``(lat, lon, x, y, z)`` with lat/lon in degrees.  If either
        angle is NaN, latitude falls back to ``POLE_LAT`` and longitude
        to ``POLE_LON``; the Cartesian triple then follows the fallback.
    """
    theta0 = 2.0 * np.pi * unit1
    with np.errstate(invalid="ignore"):
        theta1 = np.arccos(1.0 - 2.0 * unit2)
    x = float(np.sin(theta0) * np.sin(theta1))
    y = float(np.cos(theta0) * np.sin(theta1))
    z = float(np.cos(theta1))

    with np.errstate(invalid="ignore"):
        lat = float(np.degrees(np.arcsin(z)))
    lon = float(np.degrees(np.arctan2(y, x)))

    degenerate = False
    if math.isnan(lat):
        lat = POLE_LAT
        degenerate = True
    if math.isnan(lon):
        lon = POLE_LON
        degenerate = True
    if degenerate:
        x, y, z = lat_lon_to_xyz(lat, lon)
    return lat, lon, x, y, z


def grid_line(count: int) -> int:
    """Number of grid steps per lattice row for *count* points.

    ``round(sqrt(count))`` with halves rounded up.
    """
    return int(math.floor(math.sqrt(count) + 0.5))


class SphereSampler:
    """Finite, single-use source of points on the sphere.

    Parameters
    ----------
    mode : str
        ``"grid"`` (deterministic lattice) or ``"random"`` (uniform).
    count : int
        Number of points to produce.  Must be >= 1.
    seed : int, optional
        Random-mode seed.  ``None`` or ``0`` seeds from OS entropy, any
        other value makes the sequence reproducible.  Ignored in grid
        mode.
    with_xyz : bool
        Attach the Cartesian triple to every point.

    Raises
    ------
    ValueError
        If *mode* is unknown or *count* < 1.

    Examples
    --------
    >>> sampler = SphereSampler("random", 1000, seed=42)
    >>> points = list(sampler)
    >>> len(points)
    1000
    """

    def __init__(
        self,
        mode: str,
        count: int,
        seed: Optional[int] = None,
        with_xyz: bool = False,
    ) -> None:
        if mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {mode!r}")
        if count < 1:
            raise ValueError(
                f"total number of points to generate must be >= 1, "
                f"got {count}"
            )

        self._mode = mode
        self._count = count
        self._seed = seed
        self._with_xyz = with_xyz
        self._consumed = False

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[SamplePoint]:
        if self._consumed:
            raise RuntimeError("SphereSampler can only be iterated once")
        self._consumed = True

        for unit1, unit2 in self._units():
            lat, lon, x, y, z = unit_to_sphere(unit1, unit2)
            yield SamplePoint(
                lat=lat,
                lon=lon,
                xyz=(x, y, z) if self._with_xyz else None,
            )

    def _units(self) -> Iterator[Tuple[float, float]]:
        """Yield the ``(u1, u2)`` pairs for the configured mode."""
        if self._mode == "random":
            rng = np.random.default_rng(self._seed or None)
            for _ in range(self._count):
                unit1, unit2 = rng.random(2)
                yield float(unit1), float(unit2)
            return

        line = grid_line(self._count)
        grid_x = 0
        grid_y = 0
        for _ in range(self._count):
            yield grid_x / line, grid_y / line
            if grid_x < line:
                grid_x += 1
            else:
                grid_x = 0
                grid_y += 1
