"""Scripted sessions against the interactive menu."""

from ccrm.cli import CcrmCli


def run_session(platform, answers):
    inputs = iter(answers)
    output = []

    def fake_input(prompt=""):
        try:
            return next(inputs)
        except StopIteration:
            raise EOFError

    CcrmCli(platform, input_func=fake_input, output=output.append).run()
    return "\n".join(str(line) for line in output)


def test_enroll_grade_and_view_transcript(platform):
    out = run_session(platform, [
        "3", "1", "S001", "CS101",
        "3", "1", "S001", "MA201",
        "3", "2", "S001", "cs101", "a",
        "1", "2", "S001",
        "0",
    ])
    assert "Enrollment successful for Alice Smith in Intro to Programming" in out
    assert "Grade A assigned for Intro to Programming" in out
    assert "GPA: 9.00" in out
    assert "In Progress" in out
    assert out.endswith("Goodbye!")


def test_duplicate_enrollment_is_reported(platform):
    out = run_session(platform, [
        "3", "1", "S001", "CS101",
        "3", "1", "s001", "CS101",
        "0",
    ])
    assert "Enrollment Failed: Student is already enrolled in course CS101" in out
    assert len(platform.students.find_by_reg_no("S001").enrollments) == 1


def test_invalid_grade_rejected(platform):
    out = run_session(platform, ["3", "1", "S001", "CS101", "3", "2", "S001", "CS101", "Z", "0"])
    assert "Invalid grade entered." in out
    assert platform.students.find_by_reg_no("S001").find_enrollment("CS101").grade is None


def test_unknown_student_cancels(platform):
    out = run_session(platform, ["3", "1", "S404", "0"])
    assert "Student with RegNo 'S404' not found." in out
    assert "Operation cancelled." in out


def test_add_and_list_students(platform):
    out = run_session(platform, ["1", "1", "S003", "Carol Davis", "carol@example.com", "1", "3", "0"])
    assert "Student added: Carol Davis" in out
    assert "Student Profile [ID: 3, RegNo: S003, Name: Carol Davis]" in out


def test_list_courses(platform):
    out = run_session(platform, ["2", "1", "0"])
    assert "Course[Code=EN101, Title='English Composition', Credits=3, Dept=English]" in out


def test_import_and_backup(platform, tmp_path):
    csv_path = tmp_path / "more.csv"
    csv_path.write_text("CS201,Data Structures,4,CS\nbad line\n")
    out = run_session(platform, [
        "4", "1", str(csv_path),
        "4", "2",
        "4", "3",
        "4", "4",
        "4", "1", str(tmp_path / "missing.csv"),
        "0",
    ])
    assert "1 added, 1 skipped" in out
    assert "Exported courses to" in out
    assert "Backup successful:" in out
    assert "Total size of all backups is:" in out
    assert "Error: Import file not found:" in out
    assert platform.courses.find_by_code("CS201") is not None


def test_end_of_input_exits(platform):
    out = run_session(platform, [])
    assert out.endswith("Goodbye!")


def test_invalid_menu_choice(platform):
    out = run_session(platform, ["9", "0"])
    assert "Invalid choice. Please try again." in out


def test_duplicate_reg_no_rejected(platform):
    out = run_session(platform, ["1", "1", "s001", "Another Alice", "alice2@example.com", "0"])
    assert "Could not add student: RegNo 's001' already exists." in out
    assert len(platform.students) == 2


def test_unreadable_import_file_reported(platform, tmp_path):
    csv_path = tmp_path / "latin1.csv"
    csv_path.write_bytes(b"FR101,Caf\xe9 Culture,3,French\n")
    out = run_session(platform, ["4", "1", str(csv_path), "0"])
    assert "Error: Could not read import file" in out
    assert out.endswith("Goodbye!")


def test_platform_info(platform):
    out = run_session(platform, ["5", "0"])
    assert "--- Python Platform Info ---" in out
    assert "Python: " in out
    assert "CCRM: 1.0.0" in out
