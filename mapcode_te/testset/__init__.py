# -*- coding: utf-8 -*-
"""
Test set subpackage — sampling and round-trip verification pipeline.

Provides the sample sources (sphere grid, random sphere, territory
boundaries), the codec invoker and round-trip verifier, and the output
stages that turn a run into a reproducible mapcode test corpus.

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

from mapcode_te.testset.models import (
    DELTA,
    EncodingAlias,
    RunStatistics,
    SamplePoint,
)
from mapcode_te.testset.base import BoundaryCatalog, Codec
from mapcode_te.testset.errors import (
    DecodeFailure,
    DecodeMismatch,
    EncodeFailure,
    EncodeMismatch,
    InputError,
    MapcodeTEError,
    VerificationError,
)
from mapcode_te.testset.sampler import SphereSampler
from mapcode_te.testset.catalog import ArrayBoundaryCatalog
from mapcode_te.testset.boundaries import BoundaryCaseGenerator
from mapcode_te.testset.codec import CodecInvoker, MapcodeCodec
from mapcode_te.testset.verify import RoundTripVerifier, territories_match
from mapcode_te.testset.stats import StatisticsAggregator
from mapcode_te.testset.formatter import RecordFormatter
from mapcode_te.testset.config import RunConfig
from mapcode_te.testset.runner import CorpusRunner

__all__ = [
    "ArrayBoundaryCatalog",
    "BoundaryCaseGenerator",
    "BoundaryCatalog",
    "Codec",
    "CodecInvoker",
    "CorpusRunner",
    "DELTA",
    "DecodeFailure",
    "DecodeMismatch",
    "EncodeFailure",
    "EncodeMismatch",
    "EncodingAlias",
    "InputError",
    "MapcodeCodec",
    "MapcodeTEError",
    "RecordFormatter",
    "RoundTripVerifier",
    "RunConfig",
    "RunStatistics",
    "SamplePoint",
    "SphereSampler",
    "StatisticsAggregator",
    "VerificationError",
    "territories_match",
]
