# -*- coding: utf-8 -*-
"""
Boundary Case Generator — edge-case coordinates around territory boxes.

Territory edges are where neighbouring territories have to be told
apart, so the boundary test set samples exactly there.  For every
record in a ``BoundaryCatalog`` it yields 13 points:

- the center of the box,
- the four corners,
- the four corners moved ``EPSILON`` degrees into the box,
- the four corners moved ``EPSILON`` degrees out of the box.

Points are not deduplicated; each one runs through the full pipeline.

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
from typing import Iterator, List

# Internal
from mapcode_te.testset.base import BoundaryCatalog
from mapcode_te.testset.models import SamplePoint

EPSILON = 1.0e-6
POINTS_PER_RECORD = 13


class BoundaryCaseGenerator:
    """Derive edge-case sample points from a boundary catalog.

    Parameters
    ----------
    catalog : BoundaryCatalog
        Source of territory bounding boxes.
    with_xyz : bool
        Attach the Cartesian triple to every point.
    """

    def __init__(self, catalog: BoundaryCatalog,
                 with_xyz: bool = False) -> None:
        self._catalog = catalog
        self._with_xyz = with_xyz

    def __len__(self) -> int:
        return POINTS_PER_RECORD * len(self._catalog)

    def __iter__(self) -> Iterator[SamplePoint]:
        for index in range(len(self._catalog)):
            yield from self.cases_for(index)

    def cases_for(self, index: int) -> List[SamplePoint]:
        """Return the 13 edge cases of one catalog record.

        Parameters
        ----------
        index : int
            Catalog record index.

        Returns
        -------
        List[SamplePoint]
            Center, corners, just-inside and just-outside points, in
            that order.
        """
        min_lat, min_lon, max_lat, max_lon = self._catalog.bounding_box(index)
        d = EPSILON

        coords = [((min_lat + max_lat) / 2.0, (min_lon + max_lon) / 2.0)]
        coords += self._corners(min_lat, min_lon, max_lat, max_lon)
        coords += self._corners(min_lat + d, min_lon + d,
                                max_lat - d, max_lon - d)
        coords += self._corners(min_lat - d, min_lon - d,
                                max_lat + d, max_lon + d)

        return [
            SamplePoint.create(lat, lon, with_xyz=self._with_xyz)
            for lat, lon in coords
        ]

    @staticmethod
    def _corners(min_lat, min_lon, max_lat, max_lon):
        return [
            (min_lat, min_lon),
            (min_lat, max_lon),
            (max_lat, min_lon),
            (max_lat, max_lon),
        ]
