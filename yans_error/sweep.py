"""SNR sweeps of the chunk success probability.

Evaluates a set of modes over an SNR grid (dB) for one channel width and chunk
length, and exports the result as a table/CSV or a PNG of the curves. Useful to
eyeball the waterfall of each MCS and to compare against link-level results.
"""

import csv
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

import numpy as np
import matplotlib.pyplot as plt

from .ber import raw_ber
from .chunk import Modeled, effective_phy_rate_bps, estimate_chunk_success_probability
from .config import EstimatorConfig
from .modes import get_mode
from .tx_params import TxParameters


@dataclass
class SweepScenario:
    """Sweep definition.

    Fields:
    - mode_names: names from the reference mode table (e.g. "HeMcs7")
    - channel_width_mhz: channel width of every transmission
    - nbits: chunk length in bits
    - snr_db_start/stop/step: SNR grid in dB, stop inclusive
    """
    mode_names: List[str]
    channel_width_mhz: float = 20.0
    nbits: int = 12000
    snr_db_start: float = -5.0
    snr_db_stop: float = 40.0
    snr_db_step: float = 1.0
    nss: int = 1
    guard_interval_ns: int = 800
    config: Optional[EstimatorConfig] = field(default=None, repr=False)


@dataclass
class SweepRow:
    mode: str
    snr_db: float
    ber: float
    success_probability: Optional[float]  # None for unmodeled modes


def snr_db_grid(start: float, stop: float, step: float) -> np.ndarray:
    if step <= 0:
        raise ValueError("step must be positive")
    if stop < start:
        raise ValueError("stop must be >= start")
    n = int(np.floor((stop - start) / step + 1e-9)) + 1
    return start + step * np.arange(n)


def db_to_linear(values_db) -> np.ndarray:
    return np.power(10.0, np.asarray(values_db, dtype=float) / 10.0)


def run_sweep(scn: SweepScenario) -> List[SweepRow]:
    rows: List[SweepRow] = []
    grid_db = snr_db_grid(scn.snr_db_start, scn.snr_db_stop, scn.snr_db_step)
    grid_lin = db_to_linear(grid_db)
    for name in scn.mode_names:
        mode = get_mode(name)
        tx = TxParameters.single_user(mode, scn.channel_width_mhz, scn.nss, scn.guard_interval_ns)
        rate = effective_phy_rate_bps(mode, tx, config=scn.config)
        for snr_db, snr in zip(grid_db, grid_lin):
            result = estimate_chunk_success_probability(mode, tx, float(snr), scn.nbits, config=scn.config)
            if isinstance(result, Modeled):
                ber = raw_ber(float(snr), mode.constellation_size, tx.channel_width_mhz, rate)
                rows.append(SweepRow(name, float(snr_db), ber, result.probability))
            else:
                rows.append(SweepRow(name, float(snr_db), float("nan"), None))
    return rows


def rows_to_table(rows: Iterable[SweepRow]) -> List[list]:
    table = [["mode", "snr_db", "ber", "success_probability"]]
    for r in rows:
        psr = "" if r.success_probability is None else f"{r.success_probability:.6g}"
        table.append([r.mode, f"{r.snr_db:.2f}", f"{r.ber:.6g}", psr])
    return table


def save_sweep_csv(rows: Iterable[SweepRow], path: str | Path) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerows(rows_to_table(rows))
    return p


def render_success_curves(rows: Iterable[SweepRow], outfile: str | Path = "success_curves.png", title: str = "") -> Path:
    by_mode: dict[str, list[SweepRow]] = {}
    for r in rows:
        if r.success_probability is not None:
            by_mode.setdefault(r.mode, []).append(r)

    fig, ax = plt.subplots(figsize=(7, 4.5), dpi=150)
    for name, mode_rows in by_mode.items():
        xs = np.array([r.snr_db for r in mode_rows])
        ys = np.array([r.success_probability for r in mode_rows])
        ax.plot(xs, ys, label=name)
    ax.set_xlabel("SNR (dB)")
    ax.set_ylabel("Chunk success probability")
    ax.set_ylim(-0.02, 1.02)
    ax.grid(True, alpha=0.3)
    if title:
        ax.set_title(title)
    if by_mode:
        ax.legend(loc="lower right", fontsize="small")
    outp = Path(outfile)
    outp.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(outp)
    plt.close(fig)
    return outp
