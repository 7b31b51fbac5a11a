import csv

import numpy as np
import pytest

from yans_error.sweep import (
    SweepScenario,
    db_to_linear,
    render_success_curves,
    rows_to_table,
    run_sweep,
    save_sweep_csv,
    snr_db_grid,
)


def test_snr_grid_inclusive():
    grid = snr_db_grid(0.0, 10.0, 2.5)
    assert np.allclose(grid, [0.0, 2.5, 5.0, 7.5, 10.0])
    with pytest.raises(ValueError):
        snr_db_grid(0.0, 10.0, 0.0)


def test_db_to_linear():
    assert np.allclose(db_to_linear([0.0, 10.0, 20.0]), [1.0, 10.0, 100.0])


def test_run_sweep_rows_and_waterfall():
    scn = SweepScenario(mode_names=["OfdmRate6Mbps", "OfdmRate54Mbps"], snr_db_start=-5.0, snr_db_stop=30.0, snr_db_step=5.0, nbits=8000)
    rows = run_sweep(scn)
    assert len(rows) == 2 * 8
    low = [r for r in rows if r.mode == "OfdmRate6Mbps"]
    high = [r for r in rows if r.mode == "OfdmRate54Mbps"]
    assert low[-1].success_probability == pytest.approx(1.0)
    # At every SNR the robust mode does at least as well as 64-QAM 3/4
    for a, b in zip(low, high):
        assert a.success_probability >= b.success_probability
    table = rows_to_table(rows)
    assert table[0] == ["mode", "snr_db", "ber", "success_probability"]


def test_unmodeled_rows_have_no_probability():
    rows = run_sweep(SweepScenario(mode_names=["DsssRate1Mbps"], channel_width_mhz=22.0, snr_db_start=0.0, snr_db_stop=2.0))
    assert all(r.success_probability is None for r in rows)
    assert rows_to_table(rows)[1][3] == ""


def test_save_csv_and_plot(tmp_path):
    rows = run_sweep(SweepScenario(mode_names=["HeMcs0", "HeMcs7"], channel_width_mhz=40.0, snr_db_start=0.0, snr_db_stop=30.0, snr_db_step=3.0))
    out = save_sweep_csv(rows, tmp_path / "out" / "curves.csv")
    with out.open(newline="", encoding="utf-8") as f:
        lines = list(csv.reader(f))
    assert len(lines) == len(rows) + 1
    png = render_success_curves(rows, tmp_path / "curves.png", title="HE 40 MHz")
    assert png.exists() and png.stat().st_size > 0
