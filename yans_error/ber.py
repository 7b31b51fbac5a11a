"""Raw bit error rate of BPSK and square M-QAM over AWGN.

Both functions take the linear SNR measured over the signal spread (channel
width) and convert it to Eb/No using the PHY rate:

    Eb/No = SNR * W[Hz] / R[bit/s]

BPSK:   BER = 0.5 erfc(sqrt(Eb/No))
M-QAM:  z  = sqrt(1.5 log2(M) Eb/No / (M - 1))
        z1 = (1 - 1/sqrt(M)) erfc(z)
        BER = (1 - (1 - z1)^2) / log2(M)

SNR = 0 is valid (BPSK BER = 0.5); negative or NaN SNR is rejected.
"""

import logging
import math

from .errors import InvalidInputError
from .modes import SUPPORTED_CONSTELLATIONS

logger = logging.getLogger(__name__)


def eb_no(snr: float, signal_spread_mhz: float, phy_rate_bps: float) -> float:
    if math.isnan(snr) or snr < 0:
        raise InvalidInputError(f"SNR must be a non-negative linear ratio, got {snr}")
    if signal_spread_mhz <= 0:
        raise InvalidInputError("signal spread must be positive")
    if phy_rate_bps <= 0:
        raise InvalidInputError("PHY rate must be positive")
    return snr * signal_spread_mhz * 1e6 / phy_rate_bps


def bpsk_ber(snr: float, signal_spread_mhz: float, phy_rate_bps: float) -> float:
    ebno = eb_no(snr, signal_spread_mhz, phy_rate_bps)
    ber = 0.5 * math.erfc(math.sqrt(ebno))
    logger.debug("bpsk snr=%g ber=%g", snr, ber)
    return ber


def qam_ber(snr: float, m: int, signal_spread_mhz: float, phy_rate_bps: float) -> float:
    if m not in SUPPORTED_CONSTELLATIONS or m == 2:
        raise InvalidInputError(f"unsupported QAM constellation size: {m}")
    ebno = eb_no(snr, signal_spread_mhz, phy_rate_bps)
    log2m = math.log2(m)
    z = math.sqrt((1.5 * log2m * ebno) / (m - 1.0))
    z1 = (1.0 - 1.0 / math.sqrt(m)) * math.erfc(z)
    z2 = 1.0 - (1.0 - z1) ** 2
    ber = z2 / log2m
    logger.debug("qam m=%d rate=%g snr=%g ber=%g", m, phy_rate_bps, snr, ber)
    return ber


def raw_ber(snr: float, m: int, signal_spread_mhz: float, phy_rate_bps: float) -> float:
    """Pick the binary or M-ary formula by constellation size."""
    if m == 2:
        return bpsk_ber(snr, signal_spread_mhz, phy_rate_bps)
    return qam_ber(snr, m, signal_spread_mhz, phy_rate_bps)
