import pytest

from voxcubes import __version__
from voxcubes.cli import main
from voxcubes.model import GridSize, Voxel
from voxcubes.voxfile import MaterialChunk, RawChunk, SizeChunk, XYZIChunk


def test_summary(write_vox, capsys):
    path = write_vox(
        SizeChunk(GridSize(10, 10, 10)),
        XYZIChunk([Voxel(1, 2, 3, 4), Voxel(5, 0, 9, 6)]),
        MaterialChunk(4, {"_rough": "0.4"}),
        RawChunk("nTRN", b"\x00" * 8),
    )

    assert main(["-vi", str(path)]) == 0

    out = capsys.readouterr().out
    assert "Size: 10x10x10" in out
    assert "Number of voxels: 2" in out
    assert "Palette: default, 2 colors used" in out
    assert "Material 4: {'_rough': '0.4'}" in out
    assert "nTRN: 1" in out
    assert "Extent: min=(1, 0, 3) max=(5, 2, 9)" in out
    assert "center=(3, 1, 6)" in out


def test_summary_no_voxels(write_vox, capsys):
    path = write_vox()

    assert main(["--voxin", str(path), "--verbose"]) == 0
    assert "Extent: empty" in capsys.readouterr().out


def test_missing_input(capsys):
    assert main([]) == 1
    assert "Mandatory -vi" in capsys.readouterr().err


def test_wrong_extension(tmp_path, capsys):
    path = tmp_path / "model.txt"
    path.write_bytes(b"VOX ")

    assert main(["-vi", str(path)]) == 1
    assert ".vox extension" in capsys.readouterr().err


def test_nonexistent_file(tmp_path, capsys):
    assert main(["-vi", str(tmp_path / "missing.vox")]) == 1
    assert "does not exist" in capsys.readouterr().err


def test_open_failure(tmp_path, capsys):
    path = tmp_path / "dir.vox"
    path.mkdir()

    assert main(["-vi", str(path)]) == 1
    assert "Error opening file" in capsys.readouterr().err


def test_bad_magic(tmp_path, capsys):
    path = tmp_path / "bad.vox"
    path.write_bytes(b"WRONG" + b"\x00" * 16)

    assert main(["-vi", str(path)]) == 1
    assert "Invalid .vox file header" in capsys.readouterr().err


def test_truncated_file(write_vox, capsys):
    path = write_vox(XYZIChunk([Voxel(1, 1, 1, 1)]))
    path.write_bytes(path.read_bytes()[:-3])

    assert main(["-vi", str(path)]) == 1
    assert "Unexpected end of data" in capsys.readouterr().err


def test_license(capsys):
    assert main(["--licenseinfo"]) == 0
    assert "Permission is hereby granted" in capsys.readouterr().out


def test_thirdparty(capsys):
    assert main(["-tp"]) == 0
    assert "third-party" in capsys.readouterr().out


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])

    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_short_verbose_flag(write_vox, capsys):
    path = write_vox(XYZIChunk([Voxel(1, 1, 1, 1)]))

    assert main(["-v", "-vi", str(path)]) == 0
    assert "Number of voxels: 1" in capsys.readouterr().out


def test_missing_option_value(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["-vi"])

    assert excinfo.value.code == 1
    assert "error" in capsys.readouterr().err


def test_unknown_flag(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])

    assert excinfo.value.code == 1
