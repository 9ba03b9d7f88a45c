"""Tests for the command-line interface.

Run:
    pytest moody_plate/tests/test_cli.py -v
"""
import logging

from moody_plate.cli.main import main
from moody_plate.config.models import LineId


def test_analyze_prints_worksheets(write_plate, plate_readings, capsys):
    folder = write_plate(plate_readings)
    status = main(["analyze", "-d", str(folder), "--no-plot"])
    out = capsys.readouterr().out

    assert status == 0
    assert "TABLE NW_SE" in out
    assert "TABLE N_S" in out
    assert "Computed height at the center of the E_W.txt line" in out
    assert "SURFACE PLATE SUMMARY" in out
    assert not (folder / "gnuplot.cmd").exists()


def test_analyze_writes_outputs(write_plate, plate_readings, tmp_path):
    folder = write_plate(plate_readings)
    out_dir = tmp_path / "results"
    tables = tmp_path / "tables.txt"

    status = main([
        "analyze", "-d", str(folder), "-o", str(out_dir), "--tables", str(tables)
    ])

    assert status == 0
    assert (out_dir / "gnuplot.cmd").exists()
    assert (out_dir / "gnuplot.dat").exists()
    assert "TABLE E_W" in tables.read_text()


def test_analyze_with_separate_config(write_plate, plate_readings, tmp_path, capsys):
    folder = write_plate(plate_readings)
    config = tmp_path / "imperial.cfg"
    config.write_text("I 4.0\n")

    status = main(["analyze", "-d", str(folder), "-c", str(config), "--no-plot"])

    assert status == 0
    assert "micro-inches" in capsys.readouterr().out


def test_analyze_bad_config_fails(write_plate, plate_readings):
    folder = write_plate(plate_readings, config_text="Q 66\n")
    assert main(["analyze", "-d", str(folder), "--no-plot"]) == 1
    assert not (folder / "gnuplot.cmd").exists()


def test_analyze_bad_readings_fail(write_plate, plate_readings):
    folder = write_plate(plate_readings)
    (folder / "NE_SE.txt").write_text("1.0\n2.0\n")
    assert main(["analyze", "-d", str(folder)]) == 1
    assert not (folder / "gnuplot.dat").exists()


def test_check_command(write_plate, plate_readings, capsys):
    folder = write_plate(plate_readings)
    assert main(["check", "-d", str(folder)]) == 0
    assert "Station counts are consistent." in capsys.readouterr().out


def test_check_reports_mismatch(write_plate, plate_readings, capsys):
    plate_readings[next(iter(plate_readings))] = [0.0] * 9
    folder = write_plate(plate_readings)
    assert main(["check", "-d", str(folder)]) == 0
    assert "Warning:" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "analyze" in capsys.readouterr().out


def test_analyze_non_finite_reading_fails(write_plate, plate_readings):
    plate_readings[LineId.NW_SE][1] = float("nan")
    folder = write_plate(plate_readings)
    assert main(["analyze", "-d", str(folder), "--no-plot"]) == 1


def test_analyze_unwritable_tables_fails(write_plate, plate_readings, tmp_path, caplog):
    folder = write_plate(plate_readings)
    tables = tmp_path / "missing" / "tables.txt"

    status = main(["analyze", "-d", str(folder), "--no-plot", "--tables", str(tables)])

    assert status == 1
    assert any(str(tables) in r.getMessage() for r in caplog.records if r.levelno == logging.ERROR)


def test_analyze_unwritable_plot_folder_fails(write_plate, plate_readings, tmp_path):
    folder = write_plate(plate_readings)
    blocker = tmp_path / "not_a_folder"
    blocker.write_text("")

    status = main(["analyze", "-d", str(folder), "-o", str(blocker), "--tables",
                   str(tmp_path / "tables.txt")])
    assert status == 1


def test_failed_measurement_is_reported_once(write_plate, zero_readings, capsys, caplog):
    zero_readings[LineId.E_W] = [0.0, 100.0, 100.0, 100.0]
    folder = write_plate(zero_readings)

    assert main(["analyze", "-d", str(folder), "--no-plot"]) == 0
    out = capsys.readouterr().out

    assert out.count("done over") == 1
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


def test_station_warning_printed_once(write_plate, plate_readings, capsys, caplog):
    plate_readings[LineId.NW_SE] = [0.0] * 9
    folder = write_plate(plate_readings)

    assert main(["check", "-d", str(folder)]) == 0
    out = capsys.readouterr().out

    assert out.count("diagonals are expected to be the same") == 1
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
