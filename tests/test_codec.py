# -*- coding: utf-8 -*-
"""
Tests for CodecInvoker and the MapcodeCodec adapter.

CodecInvoker is exercised against the fake codec from ``conftest.py``;
the ``codec`` marked tests run the reference ``mapcode`` package and
are skipped when it is not installed.

Dependencies
------------
pytest
mapcode (optional)

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

# Third-party
import pytest

try:
    import mapcode  # noqa: F401
    _HAS_MAPCODE = True
except ImportError:
    _HAS_MAPCODE = False

# Internal
from conftest import FakeCodec
from mapcode_te.testset.codec import CodecInvoker, MapcodeCodec
from mapcode_te.testset.errors import DecodeFailure
from mapcode_te.testset.models import DELTA, EncodingAlias
from mapcode_te.testset.verify import RoundTripVerifier


class _RaisingCodec(FakeCodec):
    def encode(self, lat, lon, territory=None, extra_digits=0):
        raise RuntimeError("territory database unavailable")


class _FixedDecodeCodec(FakeCodec):
    def __init__(self, result):
        super().__init__()
        self._result = result

    def decode(self, code, territory=None):
        return self._result


class TestCodecInvokerEncode:
    """Tests for CodecInvoker.encode_all()."""

    def test_aliases_in_codec_order(self, fake_codec):
        """Local alias first, international last, as the codec returns."""
        aliases = CodecInvoker(fake_codec).encode_all(52.0, 5.0)
        assert [a.territory for a in aliases] == ["EUR-NLD", "AAA"]
        assert all(isinstance(a, EncodingAlias) for a in aliases)

    def test_latitude_clamped(self, fake_codec):
        CodecInvoker(fake_codec).encode_all(95.0, 10.0)
        lat, lon, _, _ = fake_codec.encode_calls[-1]
        assert lat == 90.0
        assert lon == 10.0

    @pytest.mark.parametrize("lon, expected", [
        (190.0, -170.0), (-190.0, 170.0), (540.0, 180.0),
        (180.0, 180.0), (-180.0, -180.0),
    ])
    def test_longitude_wrapped(self, fake_codec, lon, expected):
        CodecInvoker(fake_codec).encode_all(0.0, lon)
        assert fake_codec.encode_calls[-1][1] == pytest.approx(expected)

    def test_microdegree_truncation(self, fake_codec):
        invoker = CodecInvoker(fake_codec, limit_to_microdegrees=True)
        invoker.encode_all(52.3765149, -4.9085439)
        lat, lon, _, _ = fake_codec.encode_calls[-1]
        assert lat == pytest.approx(52.376514, abs=1e-12)
        assert lon == pytest.approx(-4.908543, abs=1e-12)

    def test_truncation_is_idempotent(self, fake_codec):
        invoker = CodecInvoker(fake_codec, limit_to_microdegrees=True)
        once = invoker.normalize(52.376514, 4.908543)
        assert invoker.normalize(*once) == once

    def test_hint_and_precision_forwarded(self, fake_codec):
        aliases = CodecInvoker(fake_codec).encode_all(
            52.0, 5.0, territory_hint="NLD", precision=3
        )
        assert fake_codec.encode_calls[-1][2:] == ("NLD", 3)
        assert [a.territory for a in aliases] == ["EUR-NLD"]
        assert aliases[0].code.endswith("-XXX")

    def test_zero_aliases_is_not_an_error(self):
        codec = FakeCodec(fail_above_lat=80.0)
        assert CodecInvoker(codec).encode_all(85.0, 0.0) == []

    def test_codec_exception_reported_as_failure(self, caplog):
        with caplog.at_level(logging.WARNING):
            aliases = CodecInvoker(_RaisingCodec()).encode_all(1.0, 2.0)
        assert aliases == []
        assert "territory database unavailable" in caplog.text

    @pytest.mark.parametrize("precision", [-1, 9])
    def test_precision_out_of_range(self, fake_codec, precision):
        with pytest.raises(ValueError, match="precision"):
            CodecInvoker(fake_codec).encode_all(0.0, 0.0, precision=precision)


class TestCodecInvokerDecode:
    """Tests for CodecInvoker.decode_one()."""

    def test_decode(self, fake_codec):
        code = FakeCodec.make_code("I", -33.8688, 151.2093)
        lat, lon = CodecInvoker(fake_codec).decode_one(code, "AAA")
        assert lat == pytest.approx(-33.8688)
        assert lon == pytest.approx(151.2093)

    def test_unparseable_code(self, fake_codec):
        with pytest.raises(DecodeFailure, match="cannot decode 'NLD 49.4V'"):
            CodecInvoker(fake_codec).decode_one("49.4V", "NLD")

    def test_unknown_territory(self, fake_codec):
        code = FakeCodec.make_code("L", 52.0, 5.0)
        with pytest.raises(DecodeFailure, match="unknown territory"):
            CodecInvoker(fake_codec).decode_one(code, "USA")

    def test_missing_context_reported_as_international(self, fake_codec):
        with pytest.raises(DecodeFailure, match="'AAA bogus'"):
            CodecInvoker(fake_codec).decode_one("bogus")

    @pytest.mark.parametrize("result", [
        (float("nan"), 0.0), (0.0, float("inf")), (91.0, 0.0), (0.0, -181.0),
    ])
    def test_invalid_coordinate(self, result):
        invoker = CodecInvoker(_FixedDecodeCodec(result))
        with pytest.raises(DecodeFailure):
            invoker.decode_one("IN0E0", "AAA")


@pytest.mark.codec
@pytest.mark.skipif(not _HAS_MAPCODE, reason="mapcode not installed")
class TestMapcodeCodec:
    """End-to-end checks against the reference mapcode package."""

    AMSTERDAM = (52.376514, 4.908543)

    def test_amsterdam_round_trip(self):
        """Amsterdam encodes, and every alias decodes back within DELTA."""
        invoker = CodecInvoker(MapcodeCodec())
        aliases = invoker.encode_all(*self.AMSTERDAM)
        assert len(aliases) >= 1

        verifier = RoundTripVerifier(invoker)
        for alias in aliases:
            delta_lat, delta_lon = verifier.verify_encode_then_decode(
                *self.AMSTERDAM, alias
            )
            assert delta_lat <= DELTA
            assert delta_lon <= DELTA


@pytest.mark.skipif(_HAS_MAPCODE, reason="mapcode is installed")
def test_mapcode_codec_requires_package():
    with pytest.raises(ImportError, match="pip install mapcode"):
        MapcodeCodec()
