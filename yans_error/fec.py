"""Union-bound performance of a Viterbi-decoded convolutional code.

Given the raw channel BER, the probability that the decoder prefers a wrong
path at Hamming distance d is

    odd d:   Pd = sum_{i=(d+1)/2}^{d-1} B(i; d, ber)
    even d:  Pd = sum_{i=d/2+1}^{d-1} B(i; d, ber) + 0.5 B(d/2; d, ber)

and the first-event error probability per bit is bounded by

    pmu = min(ad_free Pd(d_free) + ad_free_plus_one Pd(d_free + 1), 1)

so a chunk of nbits survives with probability (1 - pmu)^nbits.
"""

import logging
import math
import sys
from typing import Optional

from .ber import bpsk_ber, qam_ber
from .errors import InvalidInputError
from .spectrum import CodeCoefficients

logger = logging.getLogger(__name__)


def binomial(k: int, p: float, n: int) -> float:
    """B(k; n, p) = C(n, k) p^k (1 - p)^(n - k).

    The coefficient is an exact integer; when the direct product under- or
    overflows the term is evaluated in the log domain instead.
    """
    if not 0 <= k <= n:
        raise InvalidInputError(f"binomial needs 0 <= k <= n, got k={k}, n={n}")
    if not 0.0 <= p <= 1.0:
        raise InvalidInputError(f"probability out of range: {p}")
    if p == 0.0:
        return 1.0 if k == 0 else 0.0
    if p == 1.0:
        return 1.0 if k == n else 0.0
    coeff = math.comb(n, k)
    try:
        value = float(coeff) * p**k * (1.0 - p) ** (n - k)
    except OverflowError:
        value = 0.0
    if sys.float_info.min <= value and math.isfinite(value):
        return value
    log_value = math.log(coeff) + k * math.log(p) + (n - k) * math.log1p(-p)
    return math.exp(log_value)


def pd_odd(ber: float, d: int) -> float:
    if d % 2 != 1:
        raise InvalidInputError(f"pd_odd needs an odd distance, got {d}")
    return sum(binomial(i, ber, d) for i in range((d + 1) // 2, d))


def pd_even(ber: float, d: int) -> float:
    if d % 2 != 0:
        raise InvalidInputError(f"pd_even needs an even distance, got {d}")
    pd = sum(binomial(i, ber, d) for i in range(d // 2 + 1, d))
    return pd + 0.5 * binomial(d // 2, ber, d)


def pairwise_error_probability(ber: float, d: int) -> float:
    if d < 1:
        raise InvalidInputError(f"distance must be positive, got {d}")
    pd = pd_even(ber, d) if d % 2 == 0 else pd_odd(ber, d)
    logger.debug("pd ber=%g d=%d pd=%g", ber, d, pd)
    return pd


def chunk_success_from_ber(ber: float, nbits: int, coefficients: CodeCoefficients) -> float:
    """Success probability of nbits coded bits given the raw channel BER."""
    if ber == 0.0:
        return 1.0
    pmu = coefficients.ad_free * pairwise_error_probability(ber, coefficients.d_free)
    if coefficients.two_term:
        pmu += coefficients.ad_free_plus_one * pairwise_error_probability(ber, coefficients.d_free + 1)
    pmu = min(pmu, 1.0)
    return (1.0 - pmu) ** nbits


def fec_bpsk_success(
    snr: float,
    nbits: int,
    signal_spread_mhz: float,
    phy_rate_bps: float,
    d_free: int,
    ad_free: int,
) -> float:
    ber = bpsk_ber(snr, signal_spread_mhz, phy_rate_bps)
    return chunk_success_from_ber(ber, nbits, CodeCoefficients(d_free, ad_free))


def fec_qam_success(
    snr: float,
    nbits: int,
    signal_spread_mhz: float,
    phy_rate_bps: float,
    m: int,
    d_free: int,
    ad_free: int,
    ad_free_plus_one: Optional[int] = 0,
) -> float:
    ber = qam_ber(snr, m, signal_spread_mhz, phy_rate_bps)
    return chunk_success_from_ber(ber, nbits, CodeCoefficients(d_free, ad_free, ad_free_plus_one))
