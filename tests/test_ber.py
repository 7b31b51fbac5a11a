import math

import pytest

from yans_error.ber import bpsk_ber, eb_no, qam_ber, raw_ber
from yans_error.errors import InvalidInputError


def test_eb_no_scales_with_width_over_rate():
    assert eb_no(10.0, 20.0, 6e6) == pytest.approx(10.0 * 20e6 / 6e6)


def test_bpsk_zero_snr_is_half():
    assert bpsk_ber(0.0, 20.0, 6e6) == 0.5


def test_bpsk_matches_closed_form():
    ebno = 2.0 * 20e6 / 12e6
    assert bpsk_ber(2.0, 20.0, 12e6) == pytest.approx(0.5 * math.erfc(math.sqrt(ebno)), rel=1e-15)


@pytest.mark.parametrize("m", [4, 16, 64, 256, 1024, 4096])
def test_qam_zero_snr(m):
    expected = (1.0 - 1.0 / m) / math.log2(m)
    assert qam_ber(0.0, m, 20.0, 1e6) == pytest.approx(expected, rel=1e-12)


def test_qam_matches_closed_form():
    snr, m, w, r = 30.0, 16, 20.0, 24e6
    ebno = snr * w * 1e6 / r
    z = math.sqrt(1.5 * math.log2(m) * ebno / (m - 1))
    z1 = (1 - 1 / math.sqrt(m)) * math.erfc(z)
    expected = (1 - (1 - z1) ** 2) / math.log2(m)
    assert qam_ber(snr, m, w, r) == pytest.approx(expected, rel=1e-15)


@pytest.mark.parametrize("m", [2, 4, 64, 4096])
def test_infinite_snr_gives_zero_ber(m):
    ber = raw_ber(float("inf"), m, 20.0, 6e6)
    assert ber == 0.0


@pytest.mark.parametrize("m", [2, 4, 64, 4096])
def test_near_zero_ber_is_finite(m):
    for snr in (1e3, 1e6, 1e12, 1e300):
        ber = raw_ber(snr, m, 160.0, 6e6)
        assert math.isfinite(ber)
        assert 0.0 <= ber <= 0.5


def test_ber_decreases_with_snr():
    prev = 1.0
    for snr in (0.0, 0.5, 1.0, 2.0, 5.0, 10.0):
        ber = qam_ber(snr, 64, 20.0, 72e6)
        assert ber <= prev
        prev = ber


@pytest.mark.parametrize("snr", [-1.0, -1e-12, float("nan")])
def test_negative_or_nan_snr_rejected(snr):
    with pytest.raises(InvalidInputError):
        bpsk_ber(snr, 20.0, 6e6)
    with pytest.raises(InvalidInputError):
        qam_ber(snr, 16, 20.0, 6e6)


def test_bad_width_rate_and_constellation():
    with pytest.raises(InvalidInputError):
        bpsk_ber(1.0, 0.0, 6e6)
    with pytest.raises(InvalidInputError):
        bpsk_ber(1.0, 20.0, 0.0)
    with pytest.raises(InvalidInputError):
        qam_ber(1.0, 8, 20.0, 6e6)
    with pytest.raises(InvalidInputError):
        qam_ber(1.0, 2, 20.0, 6e6)
