"""Chunk success probability for coded OFDM Wi‑Fi modes.

Implements the dispatch from a (mode, tx parameters, SNR, nbits) query to the
BER and union-bound layers:

1. Modes outside the coded-OFDM family (DSSS/HR-DSSS) yield ``Unmodeled``.
2. The distance spectrum entry for (constellation, code rate) is looked up;
   a missing entry is a caller bug and raises.
3. PHY rate: fields evaluated at a mode other than the station's payload mode
   (headers, common fields of an MU PPDU) use the rate at the header width
   (20 MHz, one stream, 800 ns GI); otherwise the payload rate at the full width.
4. BER over the full channel width, then (1 - pmu)^nbits.

The result is a success probability, not an error rate.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Union

from .ber import raw_ber
from .config import DEFAULT_CONFIG, EstimatorConfig
from .errors import InvalidInputError
from .fec import chunk_success_from_ber
from .modes import ModulationClass, WifiMode
from .spectrum import lookup_coefficients
from .tx_params import SU_STA_ID, PpduField, TxParameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Modeled:
    probability: float


@dataclass(frozen=True)
class Unmodeled:
    """The mode is outside the coded-OFDM model; no estimate is available."""

    modulation_class: ModulationClass


ChunkSuccess = Union[Modeled, Unmodeled]


def _validate(snr: float, nbits: int) -> None:
    if math.isnan(snr) or snr < 0:
        raise InvalidInputError(f"SNR must be a non-negative linear ratio, got {snr}")
    if isinstance(nbits, bool) or not isinstance(nbits, int):
        raise InvalidInputError(f"nbits must be an integer, got {nbits!r}")
    if nbits < 0:
        raise InvalidInputError(f"nbits must be >= 0, got {nbits}")


def effective_phy_rate_bps(
    mode: WifiMode,
    tx: TxParameters,
    sta_id: int = SU_STA_ID,
    config: Optional[EstimatorConfig] = None,
) -> float:
    """PHY rate used to turn SNR into Eb/No for this field."""
    if config is None:
        config = DEFAULT_CONFIG
    if (tx.is_mu and sta_id == SU_STA_ID) or mode != tx.mode_for(sta_id):
        width = min(tx.channel_width_mhz, config.header_width_mhz)
        logger.debug("header rate for %s at %g MHz", mode.name, width)
        return mode.phy_rate_bps(width)
    return tx.phy_rate_bps(sta_id)


def estimate_chunk_success_probability(
    mode: WifiMode,
    tx: TxParameters,
    snr: float,
    nbits: int,
    field: PpduField = PpduField.DATA,
    sta_id: int = SU_STA_ID,
    config: Optional[EstimatorConfig] = None,
) -> ChunkSuccess:
    """Probability that nbits sent with ``mode`` arrive without uncorrectable error.

    Args:
        mode: mode the chunk is modulated with
        tx: transmission parameters of the PPDU
        snr: linear SNR over the channel width (not dB)
        nbits: chunk length in bits; 0 always succeeds
        field: PPDU field the chunk belongs to
        sta_id: receiving station (SU_STA_ID for SU or common fields)
    Returns:
        Modeled(probability) or Unmodeled(modulation_class)
    """
    _validate(snr, nbits)
    if not mode.is_coded_ofdm:
        logger.debug("mode %s (%s) is not modeled", mode.name, mode.modulation_class.name)
        return Unmodeled(mode.modulation_class)
    coefficients = lookup_coefficients(mode.constellation_size, mode.code_rate)
    phy_rate = effective_phy_rate_bps(mode, tx, sta_id, config)
    ber = raw_ber(snr, mode.constellation_size, tx.channel_width_mhz, phy_rate)
    probability = chunk_success_from_ber(ber, nbits, coefficients)
    logger.debug(
        "mode=%s field=%s sta=%d snr=%g nbits=%d ber=%g psr=%g",
        mode.name, field.value, sta_id, snr, nbits, ber, probability,
    )
    return Modeled(probability)


def chunk_success_rate(
    mode: WifiMode,
    tx: TxParameters,
    snr: float,
    nbits: int,
    field: PpduField = PpduField.DATA,
    sta_id: int = SU_STA_ID,
    config: Optional[EstimatorConfig] = None,
) -> float:
    """Float-only variant; unmodeled modes report 0.0."""
    result = estimate_chunk_success_probability(mode, tx, snr, nbits, field, sta_id, config)
    if isinstance(result, Unmodeled):
        return 0.0
    return result.probability


def calculate_snr(tx: TxParameters, ber: float, config: Optional[EstimatorConfig] = None) -> float:
    """Linear SNR at which a single bit of the payload mode fails with probability ``ber``.

    Simple bisection over [snr_search_low, snr_search_high]. Raises InvalidInputError
    when the bracket is still wider than snr_search_precision after snr_search_max_iter steps.
    """
    if config is None:
        config = DEFAULT_CONFIG
    if not 0.0 < ber < 1.0:
        raise InvalidInputError(f"target BER must be in (0, 1), got {ber}")
    mode = tx.mode_for()
    if not mode.is_coded_ofdm:
        raise InvalidInputError(f"mode {mode.name} is not modeled")
    low, high = config.snr_search_low, config.snr_search_high
    for _ in range(config.snr_search_max_iter):
        if high - low <= config.snr_search_precision:
            return low
        middle = low + (high - low) / 2
        if 1.0 - chunk_success_rate(mode, tx, middle, 1, config=config) > ber:
            low = middle
        else:
            high = middle
    if high - low <= config.snr_search_precision:
        return low
    raise InvalidInputError(
        f"SNR search did not converge in {config.snr_search_max_iter} iterations (gap {high - low:g})"
    )
