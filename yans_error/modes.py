"""Wi‑Fi transmission modes: modulation class, constellation, code rate and PHY rate.

This module provides a reference table of the standard Wi‑Fi modes (DSSS through
EHT) and the bitrate-at-width function the error model needs.

Notes:
- The PHY rate is the *coded* bit rate, i.e. the data rate divided by the code
  rate: n_data_subcarriers * log2(M) * nss / symbol_duration.
- Non-HT OFDM is a 20 MHz format; narrower channels (10/5 MHz) scale the rate
  down, wider channels carry 20 MHz duplicates.
- DSSS/HR-DSSS modes are listed so callers can hand them to the error model and
  get an explicit "unmodeled" answer back.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from fractions import Fraction
from typing import Dict, List, Tuple
import math

from .errors import InvalidInputError


class ModulationClass(IntEnum):
    """Modulation families, ordered by PHY generation."""

    DSSS = 1
    HR_DSSS = 2
    ERP_OFDM = 3
    OFDM = 4
    HT = 5
    VHT = 6
    HE = 7
    EHT = 8


class CodeRate(Enum):
    UNDEFINED = "undefined"
    RATE_1_2 = "1/2"
    RATE_2_3 = "2/3"
    RATE_3_4 = "3/4"
    RATE_5_6 = "5/6"

    @property
    def ratio(self) -> Fraction:
        if self is CodeRate.UNDEFINED:
            return Fraction(1)
        return Fraction(self.value)


SUPPORTED_CONSTELLATIONS = (2, 4, 16, 64, 256, 1024, 4096)

# Data subcarriers per channel width (MHz).
_HT_SUBCARRIERS: Dict[float, int] = {20: 52, 40: 108}
_VHT_SUBCARRIERS: Dict[float, int] = {20: 52, 40: 108, 80: 234, 160: 468}
_HE_EHT_SUBCARRIERS: Dict[float, int] = {20: 234, 40: 468, 80: 980, 160: 1960, 320: 3920}

_NON_HT_SUBCARRIERS = 48
_NON_HT_SYMBOL_S = 4e-6
_HT_SYMBOL_NO_GI_S = 3.2e-6
_HE_SYMBOL_NO_GI_S = 12.8e-6


@dataclass(frozen=True)
class WifiMode:
    name: str
    modulation_class: ModulationClass
    constellation_size: int
    code_rate: CodeRate
    dsss_rate_bps: float = 0.0  # fixed rate for DSSS/HR-DSSS only

    @property
    def is_coded_ofdm(self) -> bool:
        """True when the convolutional-code OFDM error model applies."""
        return self.modulation_class >= ModulationClass.ERP_OFDM

    @property
    def bits_per_symbol(self) -> int:
        return int(math.log2(self.constellation_size))

    def phy_rate_bps(self, channel_width_mhz: float, nss: int = 1, guard_interval_ns: int = 800) -> float:
        """Coded bit rate (bits/s) of this mode at the given channel width."""
        if channel_width_mhz <= 0:
            raise InvalidInputError("channel width must be positive")
        if nss < 1:
            raise InvalidInputError("number of spatial streams must be >= 1")
        mc = self.modulation_class
        if mc in (ModulationClass.DSSS, ModulationClass.HR_DSSS):
            return self.dsss_rate_bps
        if mc in (ModulationClass.OFDM, ModulationClass.ERP_OFDM):
            scale = min(channel_width_mhz, 20.0) / 20.0
            return _NON_HT_SUBCARRIERS * self.bits_per_symbol * scale / _NON_HT_SYMBOL_S
        if mc == ModulationClass.HT:
            table, symbol_s = _HT_SUBCARRIERS, _HT_SYMBOL_NO_GI_S
        elif mc == ModulationClass.VHT:
            table, symbol_s = _VHT_SUBCARRIERS, _HT_SYMBOL_NO_GI_S
        else:
            table, symbol_s = _HE_EHT_SUBCARRIERS, _HE_SYMBOL_NO_GI_S
        nsd = _subcarriers_for_width(table, channel_width_mhz)
        symbol_s += guard_interval_ns * 1e-9
        return nsd * self.bits_per_symbol * nss / symbol_s

    def data_rate_bps(self, channel_width_mhz: float, nss: int = 1, guard_interval_ns: int = 800) -> float:
        """Information bit rate: PHY rate times code rate."""
        rate = self.phy_rate_bps(channel_width_mhz, nss, guard_interval_ns)
        return rate * float(self.code_rate.ratio)


def _subcarriers_for_width(table: Dict[float, int], channel_width_mhz: float) -> int:
    # Widths below the smallest entry (e.g. 2 MHz, 10 MHz) scale down from 20 MHz.
    if channel_width_mhz in table:
        return table[channel_width_mhz]
    if channel_width_mhz < 20:
        return max(1, int(table[20] * channel_width_mhz / 20.0))
    raise InvalidInputError(f"unsupported channel width: {channel_width_mhz} MHz")


# (constellation, code rate) ladder shared by HT/VHT/HE/EHT MCS indices.
_MCS_LADDER: List[Tuple[int, CodeRate]] = [
    (2, CodeRate.RATE_1_2),
    (4, CodeRate.RATE_1_2),
    (4, CodeRate.RATE_3_4),
    (16, CodeRate.RATE_1_2),
    (16, CodeRate.RATE_3_4),
    (64, CodeRate.RATE_2_3),
    (64, CodeRate.RATE_3_4),
    (64, CodeRate.RATE_5_6),
    (256, CodeRate.RATE_3_4),
    (256, CodeRate.RATE_5_6),
    (1024, CodeRate.RATE_3_4),
    (1024, CodeRate.RATE_5_6),
    (4096, CodeRate.RATE_3_4),
    (4096, CodeRate.RATE_5_6),
]

_NON_HT_LADDER: List[Tuple[int, int, CodeRate]] = [
    (6, 2, CodeRate.RATE_1_2),
    (9, 2, CodeRate.RATE_3_4),
    (12, 4, CodeRate.RATE_1_2),
    (18, 4, CodeRate.RATE_3_4),
    (24, 16, CodeRate.RATE_1_2),
    (36, 16, CodeRate.RATE_3_4),
    (48, 64, CodeRate.RATE_2_3),
    (54, 64, CodeRate.RATE_3_4),
]


def default_mode_table() -> List[WifiMode]:
    modes = [
        WifiMode("DsssRate1Mbps", ModulationClass.DSSS, 2, CodeRate.UNDEFINED, 1e6),
        WifiMode("DsssRate2Mbps", ModulationClass.DSSS, 4, CodeRate.UNDEFINED, 2e6),
        WifiMode("DsssRate5_5Mbps", ModulationClass.HR_DSSS, 16, CodeRate.UNDEFINED, 5.5e6),
        WifiMode("DsssRate11Mbps", ModulationClass.HR_DSSS, 256, CodeRate.UNDEFINED, 11e6),
    ]
    for prefix, mc in (("ErpOfdmRate", ModulationClass.ERP_OFDM), ("OfdmRate", ModulationClass.OFDM)):
        for mbps, m, rate in _NON_HT_LADDER:
            modes.append(WifiMode(f"{prefix}{mbps}Mbps", mc, m, rate))
    for prefix, mc, n_mcs in (
        ("HtMcs", ModulationClass.HT, 8),
        ("VhtMcs", ModulationClass.VHT, 10),
        ("HeMcs", ModulationClass.HE, 12),
        ("EhtMcs", ModulationClass.EHT, 14),
    ):
        for idx, (m, rate) in enumerate(_MCS_LADDER[:n_mcs]):
            modes.append(WifiMode(f"{prefix}{idx}", mc, m, rate))
    return modes


def get_mode(name: str) -> WifiMode:
    for mode in default_mode_table():
        if mode.name == name:
            return mode
    raise InvalidInputError(f"unknown mode: {name}")
