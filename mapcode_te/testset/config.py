# -*- coding: utf-8 -*-
"""
Run Configuration — per-run switches for the test-set driver.

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
from dataclasses import dataclass

# Internal
from mapcode_te.testset.models import check_precision

# ---------------------------------------------------------------------------
# Configuration defaults
# ---------------------------------------------------------------------------
DEFAULT_PRECISION = 0
SHOW_PROGRESS = 125


@dataclass(frozen=True)
class RunConfig:
    """Switches controlling one driver run.

    Attributes
    ----------
    precision : int
        Extra digits requested from the codec, 0 to 8.
    use_xyz : bool
        Add ``x y z`` to every record header.
    verify : bool
        Run the round-trip checks on every alias.
    self_check : bool
        Treat round-trip mismatches as fatal.  Implies ``verify``.
    strict : bool
        Treat encode failures in bulk runs as fatal.
    limit_to_microdegrees : bool
        Truncate coordinates to microdegrees before encoding.
    show_progress : int
        Report progress every this many points; 0 disables it.

    Raises
    ------
    ValueError
        If *precision* or *show_progress* is out of range.
    """

    precision: int = DEFAULT_PRECISION
    use_xyz: bool = False
    verify: bool = False
    self_check: bool = False
    strict: bool = False
    limit_to_microdegrees: bool = False
    show_progress: int = SHOW_PROGRESS

    def __post_init__(self) -> None:
        check_precision(self.precision)
        if self.show_progress < 0:
            raise ValueError(
                f"show_progress must be >= 0, got {self.show_progress}"
            )

    @property
    def verifying(self) -> bool:
        """Whether round-trip checks run at all."""
        return self.verify or self.self_check
