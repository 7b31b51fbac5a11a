"""Transmission parameters of one PPDU, as seen by the error model.

Fields:
- channel_width_mhz: occupied channel width (the BER "signal spread")
- modes: station id -> mode; single-user PPDUs hold one entry under SU_STA_ID
- is_mu: multi-user (OFDMA / MU-MIMO) PPDU
- nss, guard_interval_ns: feed the per-mode PHY rate
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .errors import InvalidInputError
from .modes import WifiMode

SU_STA_ID = 65535


class PpduField(Enum):
    PREAMBLE = "preamble"
    NON_HT_HEADER = "non-ht-header"
    HT_SIG = "ht-sig"
    TRAINING = "training"
    SIG_A = "sig-a"
    SIG_B = "sig-b"
    U_SIG = "u-sig"
    EHT_SIG = "eht-sig"
    DATA = "data"


@dataclass(frozen=True)
class TxParameters:
    channel_width_mhz: float
    modes: Mapping[int, WifiMode]
    is_mu: bool = False
    nss: int = 1
    guard_interval_ns: int = 800

    def __post_init__(self):
        if self.channel_width_mhz <= 0:
            raise InvalidInputError("channel width must be positive")
        if not self.modes:
            raise InvalidInputError("at least one mode is required")
        object.__setattr__(self, "modes", MappingProxyType(dict(self.modes)))

    @classmethod
    def single_user(cls, mode: WifiMode, channel_width_mhz: float, nss: int = 1, guard_interval_ns: int = 800) -> "TxParameters":
        return cls(channel_width_mhz, {SU_STA_ID: mode}, False, nss, guard_interval_ns)

    @classmethod
    def multi_user(cls, modes: Mapping[int, WifiMode], channel_width_mhz: float, nss: int = 1, guard_interval_ns: int = 800) -> "TxParameters":
        return cls(channel_width_mhz, modes, True, nss, guard_interval_ns)

    def mode_for(self, sta_id: int = SU_STA_ID) -> WifiMode:
        """Mode used for the given station's payload.

        Single-user PPDUs ignore the station id.
        """
        if not self.is_mu:
            return next(iter(self.modes.values()))
        try:
            return self.modes[sta_id]
        except KeyError:
            raise InvalidInputError(f"station {sta_id} is not part of this MU transmission") from None

    def phy_rate_bps(self, sta_id: int = SU_STA_ID) -> float:
        return self.mode_for(sta_id).phy_rate_bps(self.channel_width_mhz, self.nss, self.guard_interval_ns)
