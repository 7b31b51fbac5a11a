"""Distance spectrum of the punctured K=7 convolutional codes used by Wi‑Fi.

Each entry gives the free distance d_free of the code at a given rate and the
number of error events (weights) at d_free and, for QAM, at d_free + 1. These
values drive the union bound in :mod:`yans_error.fec`.

References:
- Rate 5/6 row: Table B.32 in Pål Frenger et al., "Multi-rate Convolutional Codes".

The table is read-only and shared process-wide.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from .errors import InvalidInputError
from .modes import CodeRate


@dataclass(frozen=True)
class CodeCoefficients:
    d_free: int
    ad_free: int
    ad_free_plus_one: Optional[int] = None  # None for single-term (BPSK) entries

    @property
    def two_term(self) -> bool:
        return self.ad_free_plus_one is not None


_R12 = CodeRate.RATE_1_2
_R23 = CodeRate.RATE_2_3
_R34 = CodeRate.RATE_3_4
_R56 = CodeRate.RATE_5_6

_BPSK_1_2 = CodeCoefficients(10, 11)
_BPSK_3_4 = CodeCoefficients(5, 8)
_QAM_1_2 = CodeCoefficients(10, 11, 0)
_QAM_2_3 = CodeCoefficients(6, 1, 16)
_QAM_3_4 = CodeCoefficients(5, 8, 31)
_QAM_5_6 = CodeCoefficients(4, 14, 69)

_TABLE = {
    (2, _R12): _BPSK_1_2,
    (2, _R34): _BPSK_3_4,
    (4, _R12): _QAM_1_2,
    (4, _R34): _QAM_3_4,
    (16, _R12): _QAM_1_2,
    (16, _R34): _QAM_3_4,
    (64, _R23): _QAM_2_3,
    (64, _R34): _QAM_3_4,
    (64, _R56): _QAM_5_6,
}
for _m in (256, 1024, 4096):
    _TABLE[(_m, _R34)] = _QAM_3_4
    _TABLE[(_m, _R56)] = _QAM_5_6

DISTANCE_SPECTRUM: Mapping[Tuple[int, CodeRate], CodeCoefficients] = MappingProxyType(_TABLE)
del _m


def lookup_coefficients(constellation_size: int, code_rate: CodeRate) -> CodeCoefficients:
    try:
        return DISTANCE_SPECTRUM[(constellation_size, code_rate)]
    except KeyError:
        raise InvalidInputError(
            f"no distance spectrum entry for M={constellation_size}, code rate {code_rate!r}"
        ) from None


def distance_spectrum_table() -> Mapping[Tuple[int, CodeRate], CodeCoefficients]:
    """Read-only view of the full table (diagnostics/testing)."""
    return DISTANCE_SPECTRUM


def distance_spectrum_rows() -> List[list]:
    """Table as rows with a header, ready for printing or CSV export."""
    rows: List[list] = [["constellation", "code_rate", "d_free", "ad_free", "ad_free_plus_one"]]
    for (m, rate), c in sorted(DISTANCE_SPECTRUM.items(), key=lambda kv: (kv[0][0], kv[0][1].ratio)):
        rows.append([m, rate.value, c.d_free, c.ad_free, "" if c.ad_free_plus_one is None else c.ad_free_plus_one])
    return rows
