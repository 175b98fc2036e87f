from pgmrotate.app import cli
from pgmrotate.app.diagnostics import backend_info
from pgmrotate.codec import load_raster


def test_rotate_file(write_pgm, tmp_path, capsys):
    path = write_pgm("small.pgm", 4, 2, [10, 20, 30, 40, 50, 60, 70, 80])
    out = str(tmp_path / "rotated.pgm")
    assert cli.main(["--input", path, "--output", out, "--angle", "90"]) == 0
    assert load_raster(out).size == (2, 4)
    stdout = capsys.readouterr().out
    assert f"Saved image: {out}" in stdout
    assert "Offset at 45.0 degrees" in stdout


def test_default_output_next_to_input(write_pgm, tmp_path):
    path = write_pgm("small.pgm", 4, 2, [10, 20, 30, 40, 50, 60, 70, 80])
    assert cli.main(["--input", path, "--angle", "30", "--workers", "2", "--no-diagnostics"]) == 0
    assert (tmp_path / "small_rotate.pgm").exists()


def test_missing_input_exits_non_zero(tmp_path, capsys):
    assert cli.main(["--input", str(tmp_path / "missing.pgm")]) == 2
    assert "File not found" in capsys.readouterr().err


def test_bad_workers(write_pgm, capsys):
    path = write_pgm("small.pgm", 2, 2, [1, 2, 3, 4])
    assert cli.main(["--input", path, "--workers", "0"]) == 2


def test_angle_from_environment(monkeypatch, write_pgm, tmp_path):
    monkeypatch.setenv("PGMROTATE_ANGLE", "90")
    path = write_pgm("small.pgm", 4, 2, [10, 20, 30, 40, 50, 60, 70, 80])
    out = str(tmp_path / "env.pgm")
    assert cli.main(["--input", path, "--output", out]) == 0
    assert load_raster(out).size == (2, 4)


def test_malformed_environment(monkeypatch, capsys):
    monkeypatch.setenv("PGMROTATE_WORKERS", "many")
    assert cli.main(["--info"]) == 2


def test_info(capsys):
    assert cli.main(["--info"]) == 0
    out = capsys.readouterr().out
    assert "numpy" in out and "Pillow" in out
    assert len(backend_info()) == 4
