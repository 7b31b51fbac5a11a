from yans_error.cli import main


def test_single_query(capsys):
    assert main(["--mode", "HeMcs7", "--width", "80", "--snr-db", "30", "--nbits", "12000"]) == 0
    out = capsys.readouterr().out
    assert "HeMcs7" in out and "success=" in out


def test_unmodeled_query(capsys):
    main(["--mode", "DsssRate1Mbps", "--width", "22"])
    assert "unmodeled (DSSS)" in capsys.readouterr().out


def test_table(capsys):
    main(["--table"])
    out = capsys.readouterr().out
    assert "d_free" in out
    assert len(out.strip().splitlines()) == 16


def test_sweep_to_csv(tmp_path, capsys):
    out = tmp_path / "sweep.csv"
    cfg = tmp_path / "cfg.txt"
    cfg.write_text("header_width_mhz: 20\n", encoding="utf-8")
    main(["--sweep", "OfdmRate6Mbps,HtMcs7", "--snr-range", "0:20:5", "--out", str(out), "--config", str(cfg)])
    assert out.exists()
    assert "Saved 10 rows" in capsys.readouterr().out
