"""CLI to query the chunk success model, print the distance spectrum, or sweep SNR.

Usage:
    python -m yans_error.cli --mode HeMcs7 --width 80 --snr-db 25 --nbits 12000
    python -m yans_error.cli --table
    python -m yans_error.cli --sweep OfdmRate6Mbps,OfdmRate54Mbps --out curves.csv --plot curves.png
"""

import argparse
import logging
from pathlib import Path

from . import (
    DEFAULT_CONFIG,
    Modeled,
    PpduField,
    SU_STA_ID,
    SweepScenario,
    TxParameters,
    distance_spectrum_rows,
    estimate_chunk_success_probability,
    get_mode,
    load_config_from_text_file,
    render_success_curves,
    run_sweep,
    save_sweep_csv,
)
from .sweep import db_to_linear, rows_to_table


def _print_rows(rows):
    widths = [max(len(str(r[i])) for r in rows) for i in range(len(rows[0]))]
    for r in rows:
        print("  ".join(str(v).rjust(w) for v, w in zip(r, widths)))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Wi-Fi chunk success probability (YANS error model)")
    parser.add_argument("--mode", type=str, default="OfdmRate6Mbps", help="mode name, e.g. OfdmRate6Mbps, HeMcs7")
    parser.add_argument("--width", type=float, default=20.0, help="channel width (MHz)")
    parser.add_argument("--snr-db", type=float, default=10.0)
    parser.add_argument("--nbits", type=int, default=1000)
    parser.add_argument("--nss", type=int, default=1)
    parser.add_argument("--gi", type=int, default=800, help="guard interval (ns)")
    parser.add_argument("--field", type=str, default="data", choices=[f.value for f in PpduField])
    parser.add_argument("--payload-mode", type=str, default=None, help="payload mode when --mode is a header mode")
    parser.add_argument("--table", action="store_true", help="print the distance spectrum table and exit")
    parser.add_argument("--sweep", type=str, default=None, help="comma-separated mode names to sweep over SNR")
    parser.add_argument("--snr-range", type=str, default="-5:40:1", help="start:stop:step in dB for --sweep")
    parser.add_argument("--out", type=Path, default=None, help="CSV output for --sweep")
    parser.add_argument("--plot", type=Path, default=None, help="PNG output for --sweep")
    parser.add_argument("--config", type=Path, default=None, help="estimator settings file (key: value)")
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    config = load_config_from_text_file(args.config) if args.config else DEFAULT_CONFIG

    if args.table:
        _print_rows(distance_spectrum_rows())
        return 0

    if args.sweep:
        try:
            start, stop, step = (float(x) for x in args.snr_range.split(":"))
        except ValueError:
            parser.error("--snr-range must look like start:stop:step")
        scn = SweepScenario(
            mode_names=[m.strip() for m in args.sweep.split(",") if m.strip()],
            channel_width_mhz=args.width,
            nbits=args.nbits,
            snr_db_start=start,
            snr_db_stop=stop,
            snr_db_step=step,
            nss=args.nss,
            guard_interval_ns=args.gi,
            config=config,
        )
        rows = run_sweep(scn)
        if args.out:
            save_sweep_csv(rows, args.out)
            print(f"Saved {len(rows)} rows to {args.out}")
        if args.plot:
            render_success_curves(rows, args.plot, title=f"{args.width:g} MHz, {args.nbits} bits")
            print(f"Saved plot to {args.plot}")
        if not args.out and not args.plot:
            _print_rows(rows_to_table(rows))
        return 0

    mode = get_mode(args.mode)
    payload = get_mode(args.payload_mode) if args.payload_mode else mode
    tx = TxParameters.single_user(payload, args.width, args.nss, args.gi)
    snr = float(db_to_linear(args.snr_db))
    result = estimate_chunk_success_probability(mode, tx, snr, args.nbits, PpduField(args.field), SU_STA_ID, config)
    if isinstance(result, Modeled):
        print(f"{mode.name} {args.width:g} MHz snr={args.snr_db:g} dB nbits={args.nbits}: success={result.probability:.12g}")
    else:
        print(f"{mode.name}: unmodeled ({result.modulation_class.name})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
