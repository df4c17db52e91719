# -*- coding: utf-8 -*-
"""
Test Set ABCs — contracts for the external collaborators.

Defines ``Codec`` (the encoder/decoder under test) and
``BoundaryCatalog`` (the territory bounding-box records the boundary
test set is derived from).  The harness only ever talks to these
interfaces; concrete implementations live in ``codec.py`` and
``catalog.py`` or are supplied by the caller.

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
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple


class Codec(ABC):
    """Abstract base class for a mapcode encoder/decoder.

    Implementations wrap a real mapcode library.  The harness treats
    the codec as opaque: it never looks at how codes are built.
    """

    @abstractmethod
    def encode(
        self,
        lat: float,
        lon: float,
        territory: Optional[str] = None,
        extra_digits: int = 0,
    ) -> List[Tuple[str, str]]:
        """Encode a coordinate to all of its mapcodes.

        Parameters
        ----------
        lat, lon : float
            Coordinate in degrees, already clamped and wrapped.
        territory : str, optional
            Restrict results to this territory.  ``None`` returns
            aliases in every territory plus the international code.
        extra_digits : int
            High-precision digits to append, 0 to 8.

        Returns
        -------
        List[Tuple[str, str]]
            ``(code, territory)`` pairs in codec order.  Empty when the
            coordinate cannot be encoded.
        """
        ...

    @abstractmethod
    def decode(
        self,
        code: str,
        territory: Optional[str] = None,
    ) -> Tuple[float, float]:
        """Decode a mapcode to a coordinate.

        Parameters
        ----------
        code : str
            The mapcode, without territory prefix.
        territory : str, optional
            Territory context used for local codes.

        Returns
        -------
        Tuple[float, float]
            ``(lat, lon)`` in degrees.

        Raises
        ------
        Exception
            Any error when the code or territory cannot be resolved.
        """
        ...


class BoundaryCatalog(ABC):
    """Abstract base class for a territory bounding-box catalog.

    Records are addressed by index ``0 .. len(catalog) - 1``.
    """

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of boundary records."""
        ...

    @abstractmethod
    def bounding_box(self, index: int) -> Tuple[float, float, float, float]:
        """Return one record's box in degrees.

        Parameters
        ----------
        index : int
            Record index.

        Returns
        -------
        Tuple[float, float, float, float]
            ``(min_lat, min_lon, max_lat, max_lon)``.

        Raises
        ------
        IndexError
            If *index* is out of range.
        """
        ...
