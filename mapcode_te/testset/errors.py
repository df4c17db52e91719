# -*- coding: utf-8 -*-
"""
Test Set Errors — exception taxonomy and process exit codes.

Every failure the harness can report derives from ``MapcodeTEError`` and
carries the exit code the CLI terminates with when the failure is fatal.
Whether a failure is fatal is decided by the driver, not here.

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

# Internal
from mapcode_te.testset.models import INTERNATIONAL_TERRITORY

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_INTERNAL_ERROR = 2


class MapcodeTEError(Exception):
    """Base class for all harness failures."""

    exit_code = EXIT_INPUT_ERROR


class InputError(MapcodeTEError, ValueError):
    """Malformed command-line input."""


class EncodeFailure(MapcodeTEError):
    """The codec returned no aliases for a coordinate."""

    def __init__(self, lat: float, lon: float,
                 territory: str = INTERNATIONAL_TERRITORY) -> None:
        self.lat = lat
        self.lon = lon
        self.territory = territory
        super().__init__(
            f"cannot encode lat={lat:.12g}, lon={lon:.12g} "
            f"(default territory={territory})"
        )


class DecodeFailure(MapcodeTEError):
    """The codec could not decode a code in a territory context."""

    def __init__(self, code: str, territory: str, reason: str = "") -> None:
        self.code = code
        self.territory = territory
        message = f"cannot decode '{territory} {code}'"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class VerificationError(MapcodeTEError):
    """A round-trip check did not hold."""

    exit_code = EXIT_INTERNAL_ERROR


class DecodeMismatch(VerificationError):
    """Decoding an alias did not land near the coordinate it came from."""


class EncodeMismatch(VerificationError):
    """Re-encoding a coordinate did not reproduce an alias."""
