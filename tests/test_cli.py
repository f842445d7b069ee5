"""CLI esconv: wymagane argumenty, --dry-run, podgląd rekordów."""

import pytest

from conftest import RECORD_NO_ID
from esconv.cli import build_parser, main


def test_convert_requires_two_paths():
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["convert", "allStruct.xml"])
    assert exc.value.code == 2


def test_command_is_required():
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args([])
    assert exc.value.code == 2


def test_convert_dry_run(struct_file, dump_file, capsys):
    main(["convert", str(struct_file), str(dump_file), "--dry-run", "--progress-every", "1"])
    out = capsys.readouterr().out
    assert "Jednostki:" in out
    assert "2 gotowych." in out
    assert "--dry-run" in out


def test_convert_dry_run_gzip(struct_file, gz_dump_file, capsys):
    main(["convert", str(struct_file), str(gz_dump_file), "--dry-run"])
    assert "2 gotowych." in capsys.readouterr().out


def test_convert_bad_record_exits_with_fragment(struct_file, tmp_path, capsys):
    dump = tmp_path / "bad.xml"
    dump.write_text(RECORD_NO_ID, encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["convert", str(struct_file), str(dump), "--dry-run"])
    assert exc.value.code == 1
    out = capsys.readouterr().out
    assert "Lost Record" in out
    assert "rollback" in out


def test_convert_missing_file(struct_file, tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["convert", str(struct_file), str(tmp_path / "nope.xml"), "--dry-run"])
    assert exc.value.code == 1


def test_records_preview(dump_file, capsys):
    main(["records", str(dump_file), "--limit", "1"])
    out = capsys.readouterr().out
    assert "qt0001" in out
    assert "qt0002" not in out
    assert "1 rekordów" in out
