"""Tests for export, backup and directory sizing."""

from datetime import datetime

from ccrm.core import CourseBuilder, Grade
from ccrm.persistence import BackupManager, CourseImporter, CourseDirectory, DataExporter, directory_size


def test_export_writes_csv_files(platform):
    alice = platform.students.find_by_reg_no("S001")
    cs101 = platform.courses.find_by_code("CS101")
    platform.engine.enroll(alice, cs101)
    platform.engine.assign_grade(alice, cs101, Grade.A)

    paths = platform.exporter.export_all()

    assert paths['students'].read_text().splitlines()[0] == "1,S001,Alice Smith,alice@example.com"
    assert paths['courses'].read_text().splitlines() == [
        "CS101,Intro to Programming,4,CS",
        "MA201,Calculus I,4,Math",
        "EN101,English Composition,3,English",
    ]
    assert paths['enrollments'].read_text().startswith("S001,CS101,A,")


def test_exported_courses_reimport(platform):
    paths = platform.exporter.export_all()
    fresh = CourseDirectory()
    report = CourseImporter(fresh).import_file(paths['courses'])
    assert report.added_count == 3
    assert [c.code for c in fresh.all()] == ["CS101", "MA201", "EN101"]


def test_title_with_comma_survives_reimport(platform):
    platform.courses.add(CourseBuilder("HI101", "War, Peace and Society").credits(3).department("History").build())

    paths = platform.exporter.export_all()
    assert '"War, Peace and Society"' in paths['courses'].read_text()

    fresh = CourseDirectory()
    report = CourseImporter(fresh).import_file(paths['courses'])
    assert report.skipped_count == 0
    assert fresh.find_by_code("HI101").title == "War, Peace and Society"
    assert fresh.find_by_code("HI101").department == "History"


def test_backup_copies_data_tree(config):
    config.ensure_directories()
    (config.data_directory / "nested").mkdir()
    (config.data_directory / "a.txt").write_text("hello")
    (config.data_directory / "nested" / "b.txt").write_text("world!")

    destination = BackupManager(config).backup(now=datetime(2024, 1, 2, 3, 4, 5))

    assert destination == config.backup_directory / "backup_20240102_030405"
    assert (destination / "a.txt").read_text() == "hello"
    assert (destination / "nested" / "b.txt").read_text() == "world!"


def test_backup_size_sums_all_backups(config):
    config.ensure_directories()
    (config.data_directory / "a.txt").write_text("12345")
    manager = BackupManager(config)
    manager.backup(now=datetime(2024, 1, 1, 0, 0, 0))
    manager.backup(now=datetime(2024, 1, 1, 0, 0, 1))
    assert manager.backup_size() == 10


def test_directory_size(tmp_path):
    (tmp_path / "sub" / "deeper").mkdir(parents=True)
    (tmp_path / "one.bin").write_bytes(b"x" * 10)
    (tmp_path / "sub" / "two.bin").write_bytes(b"x" * 20)
    (tmp_path / "sub" / "deeper" / "three.bin").write_bytes(b"x" * 30)
    assert directory_size(tmp_path) == 60
    assert directory_size(tmp_path / "one.bin") == 10


def test_directory_size_missing_path_is_zero(tmp_path):
    assert directory_size(tmp_path / "missing") == 0
