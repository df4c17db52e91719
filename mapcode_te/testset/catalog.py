# -*- coding: utf-8 -*-
"""
Array Boundary Catalog — in-memory territory bounding boxes.

Holds boundary records in a ``(R, 4)`` float array of
``(min_lat, min_lon, max_lat, max_lon)`` degrees.  Catalogs can be built
directly from an array or loaded from a text export of the mapcode
boundary database.

File layout (one record per line, ``#`` starts a comment, separators
may be whitespace or commas)::

    # min_lon  min_lat  max_lon  max_lat   (integer microdegrees)
    3358000  50750000  7227000  53555000

Dependencies
------------
numpy

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
from pathlib import Path
from typing import Tuple, Union

# Third-party
import numpy as np

# Internal
from mapcode_te.testset.base import BoundaryCatalog
from mapcode_te.testset.models import MICRODEGREES

logger = logging.getLogger(__name__)


class ArrayBoundaryCatalog(BoundaryCatalog):
    """Boundary catalog backed by a numpy array.

    Parameters
    ----------
    boxes : array_like
        Shape ``(R, 4)``; columns ``min_lat, min_lon, max_lat, max_lon``
        in degrees.

    Raises
    ------
    ValueError
        If *boxes* does not have shape ``(R, 4)`` or holds non-finite
        values.
    """

    def __init__(self, boxes) -> None:
        arr = np.asarray(boxes, dtype=np.float64)
        if arr.size == 0:
            arr = arr.reshape(0, 4)
        if arr.ndim != 2 or arr.shape[1] != 4:
            raise ValueError(
                f"boundary records must have shape (R, 4), got {arr.shape}"
            )
        if not np.all(np.isfinite(arr)):
            raise ValueError("boundary records contain non-finite values")
        self._boxes = arr

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'ArrayBoundaryCatalog':
        """Load a catalog from a microdegree text export.

        Parameters
        ----------
        path : str or Path
            Text file with ``min_lon min_lat max_lon max_lat`` rows in
            integer microdegrees.

        Returns
        -------
        ArrayBoundaryCatalog

        Raises
        ------
        FileNotFoundError
            If *path* does not exist.
        ValueError
            If the file cannot be parsed as four numeric columns.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Boundary catalog not found: {path}")

        lines = [
            line.split("#", 1)[0].replace(",", " ").strip()
            for line in path.read_text(encoding="utf-8").splitlines()
        ]
        rows = [line.split() for line in lines if line]
        try:
            raw = np.array(rows, dtype=np.float64)
        except ValueError as exc:
            raise ValueError(
                f"Malformed boundary catalog {path}: {exc}"
            ) from exc
        if raw.size and (raw.ndim != 2 or raw.shape[1] != 4):
            raise ValueError(
                f"Malformed boundary catalog {path}: expected 4 columns"
            )

        raw = raw.reshape(-1, 4)
        # microdegrees (lon, lat, lon, lat) -> degrees (lat, lon, lat, lon)
        boxes = raw[:, [1, 0, 3, 2]] / MICRODEGREES
        logger.info("Loaded %d boundary records from %s", len(boxes), path)
        return cls(boxes)

    def __len__(self) -> int:
        return int(self._boxes.shape[0])

    def bounding_box(self, index: int) -> Tuple[float, float, float, float]:
        if not 0 <= index < len(self):
            raise IndexError(
                f"boundary record {index} out of range [0, {len(self)})"
            )
        min_lat, min_lon, max_lat, max_lon = self._boxes[index]
        return float(min_lat), float(min_lon), float(max_lat), float(max_lon)
