"""Tests for the student and course directories."""

import pytest

from ccrm.core import Course, DuplicateEntityError, Student
from ccrm.persistence import CourseDirectory, StudentDirectory


class TestStudentDirectory:

    def test_ids_are_sequential_from_one(self, students):
        first = students.register("S001", "Alice", "a@example.com")
        second = students.add(Student("S002", "Bob", "b@example.com"))
        assert (first.id, second.id) == (1, 2)

    def test_find_is_case_insensitive(self, students):
        alice = students.register("ab12", "Alice", "a@example.com")
        assert students.find_by_key("AB12") is alice
        assert students.find_by_reg_no(" aB12 ") is alice

    def test_missing_key_returns_none(self, students):
        assert students.find_by_key("nope") is None
        assert students.find_by_key(None) is None

    def test_first_match_wins(self, students):
        first = students.register("S001", "Alice", "a@example.com")
        students.register("s001", "Impostor", "i@example.com")
        assert students.find_by_key("S001") is first

    def test_re_adding_student_rejected(self, students):
        alice = students.register("S001", "Alice", "a@example.com")
        with pytest.raises(DuplicateEntityError):
            students.add(alice)
        assert len(students) == 1

    def test_all_is_a_snapshot(self, students):
        students.register("S001", "Alice", "a@example.com")
        snapshot = students.all()
        snapshot.append(Student("S999", "Ghost", "g@example.com"))
        assert len(students.all()) == 1
        assert [s.reg_no for s in students] == ["S001"]


class TestCourseDirectory:

    def test_add_and_find(self, courses):
        course = courses.add(Course("CS101", "Intro", 4, "CS"))
        assert courses.find_by_code("cs101") is course
        assert courses.find_by_key("MA201") is None

    def test_insertion_order(self, courses):
        for code in ("ZZ1", "AA1", "MM1"):
            courses.add(Course(code, code))
        assert [c.code for c in courses.all()] == ["ZZ1", "AA1", "MM1"]
