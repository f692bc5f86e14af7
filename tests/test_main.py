"""Tests for the composition root and command-line entry point."""

import json

import pytest

from ccrm.main import CcrmPlatform, main


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "ccrm.json"
    path.write_text(json.dumps({
        "data_directory": str(tmp_path / "data"),
        "backup_directory": str(tmp_path / "backups"),
        "max_credits_per_semester": 8,
        "log_level": "WARNING",
    }))
    return path


def test_platform_wires_config(config):
    platform = CcrmPlatform(config)
    assert platform.engine.max_credits == 20
    assert platform.rest_api is platform.rest_api


def test_sample_data(platform):
    assert [s.reg_no for s in platform.students.all()] == ["S001", "S002"]
    assert [c.code for c in platform.courses.all()] == ["CS101", "MA201", "EN101"]


def test_demo(config_file, tmp_path, capsys):
    assert main(["--config", str(config_file), "--demo"]) == 0
    out = capsys.readouterr().out
    assert "Enrolled Alice Smith in CS101" in out
    # An 8 credit ceiling stops the third course.
    assert "Max credit limit of 8" in out
    assert "already enrolled in course CS101" in out
    assert "GPA: 8.50" in out
    assert (tmp_path / "data").is_dir()


def test_demo_without_sample_data(config_file, capsys):
    main(["--config", str(config_file), "--demo", "--no-sample-data"])
    assert "Demo needs the sample data" in capsys.readouterr().out


def test_import_option(config_file, tmp_path, capsys):
    csv_path = tmp_path / "courses.csv"
    csv_path.write_text("CS201,Data Structures,4,CS\n")
    main(["--config", str(config_file), "--no-sample-data", "--import", str(csv_path), "--demo"])
    assert "Imported 1 courses, skipped 0 lines" in capsys.readouterr().out


def test_unreadable_import_reported(config_file, tmp_path, capsys):
    csv_path = tmp_path / "latin1.csv"
    csv_path.write_bytes(b"FR101,Caf\xe9 Culture,3,French\n")
    assert main(["--config", str(config_file), "--import", str(csv_path), "--demo"]) == 0
    assert "Error: Could not read import file" in capsys.readouterr().out


def test_bad_config_exits(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('{"nope": true}')
    with pytest.raises(SystemExit):
        main(["--config", str(path), "--demo"])
