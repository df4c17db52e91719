# -*- coding: utf-8 -*-
"""
Mapcode Testing & Evaluation — test-set generation and self-checks.

Generates reproducible mapcode test sets (sphere grid, random sphere and
territory-boundary edge cases) against a mapcode codec, and cross-checks
the codec's encode and decode results in both directions.

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

__version__ = "0.1.0"

from mapcode_te.testset import (
    ArrayBoundaryCatalog,
    BoundaryCaseGenerator,
    BoundaryCatalog,
    Codec,
    CodecInvoker,
    CorpusRunner,
    EncodingAlias,
    MapcodeCodec,
    RecordFormatter,
    RoundTripVerifier,
    RunConfig,
    RunStatistics,
    SamplePoint,
    SphereSampler,
    StatisticsAggregator,
)

__all__ = [
    "ArrayBoundaryCatalog",
    "BoundaryCaseGenerator",
    "BoundaryCatalog",
    "Codec",
    "CodecInvoker",
    "CorpusRunner",
    "EncodingAlias",
    "MapcodeCodec",
    "RecordFormatter",
    "RoundTripVerifier",
    "RunConfig",
    "RunStatistics",
    "SamplePoint",
    "SphereSampler",
    "StatisticsAggregator",
]
