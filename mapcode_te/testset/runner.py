# -*- coding: utf-8 -*-
"""
Corpus Runner — drive points through encode, verify, output and stats.

``CorpusRunner`` implements the three kinds of command:

- ``decode``: decode codes against a default territory,
- ``encode``: encode a single coordinate,
- ``generate``: push every point of a sample source (sphere grid,
  random sphere, territory boundaries) through the pipeline and
  return the run statistics.

The runner does not know which source produced a point.  Each point is
normalized, encoded, written, optionally verified and counted before
the next one is drawn.

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
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

# Internal
from mapcode_te.testset.base import Codec
from mapcode_te.testset.codec import CodecInvoker
from mapcode_te.testset.config import RunConfig
from mapcode_te.testset.errors import (
    DecodeFailure,
    EncodeFailure,
    VerificationError,
)
from mapcode_te.testset.formatter import RecordFormatter
from mapcode_te.testset.models import (
    INTERNATIONAL_TERRITORY,
    MAX_PRECISION,
    EncodingAlias,
    RunStatistics,
    SamplePoint,
)
from mapcode_te.testset.stats import StatisticsAggregator
from mapcode_te.testset.verify import RoundTripVerifier, precision_of

logger = logging.getLogger(__name__)


class CorpusRunner:
    """Pipeline driver for the decode, encode and generate commands.

    Parameters
    ----------
    codec : Codec
        The encoder/decoder under test.
    config : RunConfig, optional
        Run switches.  Defaults to ``RunConfig()``.
    formatter : RecordFormatter, optional
        Output sink.  Defaults to stdout/stderr.

    Raises
    ------
    VerificationError
        From any command, when a round trip fails in self-check mode.
    """

    def __init__(
        self,
        codec: Codec,
        config: Optional[RunConfig] = None,
        formatter: Optional[RecordFormatter] = None,
    ) -> None:
        self._config = config or RunConfig()
        self._invoker = CodecInvoker(
            codec, limit_to_microdegrees=self._config.limit_to_microdegrees
        )
        self._verifier = RoundTripVerifier(self._invoker)
        self._formatter = formatter or RecordFormatter()

    def decode(self, territory: str,
               codes: Sequence[str]) -> List[Tuple[float, float]]:
        """Decode each code and write ``<lat> <lon>`` per code.

        Parameters
        ----------
        territory : str
            Default territory context for local codes.
        codes : Sequence[str]
            Codes to decode, in order.

        Returns
        -------
        List[Tuple[float, float]]

        Raises
        ------
        DecodeFailure
            On the first code that cannot be decoded, or, when verifying,
            that carries more high-precision digits than can be re-encoded.
        """
        decoded = []
        for code in codes:
            lat, lon = self._invoker.decode_one(code, territory)
            self._formatter.write_decoded(lat, lon)
            decoded.append((lat, lon))

            if self._config.verifying:
                precision = precision_of(code)
                if precision > MAX_PRECISION:
                    raise DecodeFailure(
                        code, territory,
                        f"{precision} high-precision digits, at most "
                        f"{MAX_PRECISION} can be re-encoded",
                    )
                self._check(
                    self._verifier.verify_decode_then_encode,
                    EncodingAlias(code, territory), lat, lon, precision,
                )
        return decoded

    def encode(self, lat: float, lon: float,
               territory: Optional[str] = None) -> List[EncodingAlias]:
        """Encode one coordinate and write ``<territory> <code>`` lines.

        Parameters
        ----------
        lat, lon : float
            Coordinate in degrees.
        territory : str, optional
            Only return codes for this territory.

        Returns
        -------
        List[EncodingAlias]

        Raises
        ------
        EncodeFailure
            If the codec produced no aliases.
        """
        aliases = self._invoker.encode_all(
            lat, lon, territory, self._config.precision
        )
        if not aliases:
            raise EncodeFailure(lat, lon, territory or INTERNATIONAL_TERRITORY)

        for alias in aliases:
            self._formatter.write_alias(alias)
            if self._config.verifying:
                self._check(
                    self._verifier.verify_encode_then_decode, lat, lon, alias
                )
        return aliases

    def generate(self, points: Iterable[SamplePoint],
                 total: int) -> RunStatistics:
        """Run every point of a sample source through the pipeline.

        Parameters
        ----------
        points : Iterable[SamplePoint]
            The sample source; consumed once.
        total : int
            Expected number of points, for progress reporting.

        Returns
        -------
        RunStatistics
            Totals for this run only.

        Raises
        ------
        EncodeFailure
            If a point cannot be encoded and ``config.strict`` is set.
        """
        aggregator = StatisticsAggregator()
        every = self._config.show_progress
        logger.info(
            "Generating %d points (precision=%d, xyz=%s, verify=%s)",
            total, self._config.precision, self._config.use_xyz,
            self._config.verifying,
        )

        for i, point in enumerate(points):
            self.process_point(point, aggregator)
            if every and i % every == 0:
                self._formatter.write_progress(
                    i, total, aggregator.statistics.total_aliases
                )

        aggregator.emit_summary(self._formatter.diagnostics)
        logger.debug("Run statistics: %s", aggregator.statistics.to_dict())
        return aggregator.statistics

    def process_point(self, point: SamplePoint,
                      aggregator: StatisticsAggregator) -> List[EncodingAlias]:
        """Encode, write, verify and count a single point.

        Returns
        -------
        List[EncodingAlias]
            Aliases produced; empty when encoding failed.
        """
        point = point.normalized(self._config.limit_to_microdegrees)
        if self._config.use_xyz and point.xyz is None:
            point = SamplePoint.create(point.lat, point.lon, with_xyz=True)
        precision = self._config.precision
        aliases = self._invoker.encode_all(
            point.lat, point.lon, None, precision
        )
        if not aliases:
            failure = EncodeFailure(point.lat, point.lon)
            if self._config.strict:
                raise failure
            logger.warning("%s", failure)

        self._formatter.write_record(point, aliases)

        if self._config.verifying:
            for alias in aliases:
                if not self._check(
                    self._verifier.verify_decode_then_encode,
                    alias, point.lat, point.lon, precision,
                ):
                    aggregator.record_mismatch()
                if not self._check(
                    self._verifier.verify_encode_then_decode,
                    point.lat, point.lon, alias,
                ):
                    aggregator.record_mismatch()

        aggregator.record(point, len(aliases))
        return aliases

    def _check(self, verification: Callable[..., object], *args) -> bool:
        """Run one verification; fatal in self-check mode, else a warning.

        Returns
        -------
        bool
            ``True`` if the check passed.
        """
        try:
            verification(*args)
        except VerificationError as exc:
            if self._config.self_check:
                logger.error("%s", exc)
                raise
            logger.warning("%s", exc)
            return False
        return True
