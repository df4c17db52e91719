# -*- coding: utf-8 -*-
"""
Tests for SphereSampler and the unit-to-sphere mapping.

Validates grid determinism, seeded reproducibility of random mode,
coordinate ranges, the pole fallback and the single-use contract.

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

# Third-party
import numpy as np
import pytest

# Internal
from mapcode_te.testset.sampler import (
    POLE_LAT,
    POLE_LON,
    SphereSampler,
    grid_line,
    unit_to_sphere,
)


class TestUnitToSphere:
    """Tests for unit_to_sphere()."""

    def test_north_pole(self):
        """u2 = 0 maps to the north pole."""
        lat, lon, x, y, z = unit_to_sphere(0.0, 0.0)
        assert lat == pytest.approx(90.0)
        assert z == pytest.approx(1.0)

    def test_south_pole(self):
        """u2 = 1 maps to the south pole."""
        lat, _, _, _, z = unit_to_sphere(0.3, 1.0)
        assert lat == pytest.approx(-90.0)
        assert z == pytest.approx(-1.0)

    def test_equator(self):
        """u2 = 0.5 lies on the equator; u1 = 0.25 gives x = 1."""
        lat, lon, x, y, z = unit_to_sphere(0.25, 0.5)
        assert lat == pytest.approx(0.0, abs=1e-12)
        assert lon == pytest.approx(0.0, abs=1e-12)
        assert x == pytest.approx(1.0)

    def test_cartesian_consistent_with_lat_lon(self):
        """The returned triple is the unit vector of the returned lat/lon."""
        lat, lon, x, y, z = unit_to_sphere(0.1234, 0.789)
        lat_r, lon_r = math.radians(lat), math.radians(lon)
        assert x == pytest.approx(math.cos(lat_r) * math.cos(lon_r))
        assert y == pytest.approx(math.cos(lat_r) * math.sin(lon_r))
        assert z == pytest.approx(math.sin(lat_r))

    def test_nan_falls_back_to_pole(self):
        """An out-of-range unit value degenerates to the fixed pole."""
        lat, lon, x, y, z = unit_to_sphere(0.5, 1.5)
        assert lat == POLE_LAT
        assert lon == POLE_LON
        assert z == pytest.approx(1.0)
        assert not any(math.isnan(v) for v in (x, y, z))


class TestGridLine:
    """Tests for grid_line()."""

    @pytest.mark.parametrize("count, expected", [
        (1, 1), (2, 1), (3, 2), (100, 10), (110, 10), (111, 11),
    ])
    def test_round_half_up(self, count, expected):
        assert grid_line(count) == expected


class TestSphereSampler:
    """Tests for SphereSampler."""

    @pytest.mark.parametrize("count", [1, 2, 7, 100, 1000])
    def test_exact_count(self, count):
        """Both modes produce exactly N points."""
        assert len(list(SphereSampler("grid", count))) == count
        assert len(list(SphereSampler("random", count, seed=3))) == count

    @pytest.mark.parametrize("count", [1, 50, 999])
    def test_grid_deterministic(self, count):
        """Grid mode yields the same sequence on every run."""
        first = list(SphereSampler("grid", count))
        second = list(SphereSampler("grid", count, seed=12345))
        assert first == second

    def test_grid_walks_lattice(self):
        """gridX runs 0..line inclusive before gridY advances."""
        points = list(SphereSampler("grid", 4))
        # line = 2: (0,0) (1/2,0) (1,0) (0,1/2)
        expected = [unit_to_sphere(u1, u2)[:2] for u1, u2 in
                    [(0.0, 0.0), (0.5, 0.0), (1.0, 0.0), (0.0, 0.5)]]
        assert [(p.lat, p.lon) for p in points] == expected

    def test_random_seed_reproducible(self):
        """The same non-zero seed reproduces the same sequence."""
        first = list(SphereSampler("random", 200, seed=42))
        second = list(SphereSampler("random", 200, seed=42))
        assert first == second

    def test_random_seeds_differ(self):
        """Different seeds give different sequences."""
        a = list(SphereSampler("random", 20, seed=1))
        b = list(SphereSampler("random", 20, seed=2))
        assert a != b

    @pytest.mark.parametrize("seed", [None, 0])
    def test_arbitrary_seed(self, seed):
        """Seed 0 or None still yields valid points."""
        points = list(SphereSampler("random", 10, seed=seed))
        assert len(points) == 10

    @pytest.mark.parametrize("mode", ["grid", "random"])
    def test_ranges(self, mode):
        """Every sample lies within [-90, 90] x [-180, 180]."""
        points = list(SphereSampler(mode, 2000, seed=7))
        lats = np.array([p.lat for p in points])
        lons = np.array([p.lon for p in points])
        assert np.all((lats >= -90.0) & (lats <= 90.0))
        assert np.all((lons >= -180.0) & (lons <= 180.0))

    def test_random_roughly_uniform(self):
        """About half of a uniform sample lies in the northern hemisphere."""
        points = list(SphereSampler("random", 4000, seed=99))
        north = sum(1 for p in points if p.lat > 0)
        assert 0.45 < north / len(points) < 0.55

    def test_xyz_on_unit_sphere(self):
        """With XYZ, every point carries a unit vector."""
        points = list(SphereSampler("random", 100, seed=5, with_xyz=True))
        norms = np.array([np.linalg.norm(p.xyz) for p in points])
        np.testing.assert_allclose(norms, 1.0, atol=1e-12)

    def test_no_xyz_by_default(self):
        points = list(SphereSampler("grid", 10))
        assert all(p.xyz is None for p in points)

    def test_single_use(self):
        """A sampler cannot be iterated twice."""
        sampler = SphereSampler("grid", 5)
        list(sampler)
        with pytest.raises(RuntimeError, match="only be iterated once"):
            list(sampler)

    def test_count_below_one_raises(self):
        with pytest.raises(ValueError, match=">= 1"):
            SphereSampler("grid", 0)

    def test_unknown_mode_raises(self):
        with pytest.raises(ValueError, match="mode must be one of"):
            SphereSampler("spiral", 10)
