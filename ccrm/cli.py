"""
Interactive menu for the CCRM platform.

The menu only resolves user input (registration numbers, course codes, grade
letters, file names) and hands already-validated values to the platform's
services. Input and output functions are injectable so sessions can be scripted.
"""

import platform
import sys
from typing import Callable, Optional

from . import __version__
from .core.entities import Course, Student
from .core.enums import Grade
from .core.exceptions import (
    ConfigurationError, EnrollmentError, PersistenceError, ResourceNotFoundError, ValidationError
)

MAIN_MENU = """
========== MAIN MENU ==========
1. Manage Students
2. Manage Courses
3. Manage Enrollment & Grades
4. Data Import/Export/Backup
5. Show Python Platform Info
0. Exit
==============================="""


class CcrmCli:
    """Menu loop driving one platform session."""

    def __init__(self, platform, input_func: Callable[[str], str] = input,
                 output: Callable[..., None] = print):
        self._platform = platform
        self._input = input_func
        self._print = output

    def run(self) -> None:
        self._print("Welcome to the Campus Course & Records Manager!")
        while True:
            self._print(MAIN_MENU)
            try:
                choice = self._input("Enter choice: ").strip()
            except EOFError:
                break
            if choice == "0":
                break
            handler = {
                "1": self._manage_students,
                "2": self._manage_courses,
                "3": self._manage_enrollment,
                "4": self._manage_data,
                "5": self._show_platform_info,
            }.get(choice)
            if handler is None:
                self._print("Invalid choice. Please try again.")
                continue
            handler()
        self._print("Goodbye!")

    def _manage_students(self) -> None:
        self._print("\n--- Student Menu ---")
        self._print("1. Add Student")
        self._print("2. View Transcript")
        self._print("3. List All Students")
        choice = self._input("Choice: ").strip()
        if choice == "1":
            reg_no = self._input("Enter RegNo: ")
            name = self._input("Enter Full Name: ")
            email = self._input("Enter Email: ")
            if self._platform.students.find_by_reg_no(reg_no.strip()) is not None:
                self._print(f"Could not add student: RegNo '{reg_no.strip()}' already exists.")
                return
            try:
                student = self._platform.students.register(reg_no, name, email)
            except ValidationError as e:
                self._print(f"Could not add student: {e.message}")
                return
            self._print(f"Student added: {student.full_name}")
        elif choice == "2":
            student = self._prompt_for_student()
            if student is not None:
                self._print(self._platform.transcripts.render(student))
        elif choice == "3":
            self._print("\n--- All Students ---")
            for student in self._platform.students.all():
                self._print(student.profile())
        else:
            self._print("Invalid choice.")

    def _manage_courses(self) -> None:
        self._print("\n--- Course Menu ---")
        self._print("1. List All Courses")
        if self._input("Choice: ").strip() != "1":
            self._print("Invalid choice.")
            return
        self._print("\n--- All Courses ---")
        for course in self._platform.courses.all():
            self._print(str(course))

    def _manage_enrollment(self) -> None:
        self._print("\n--- Enrollment Menu ---")
        self._print("1. Enroll Student in Course")
        self._print("2. Assign Grade")
        choice = self._input("Choice: ").strip()
        if choice not in ("1", "2"):
            self._print("Invalid choice.")
            return

        student = self._prompt_for_student()
        if student is None:
            self._print("Operation cancelled.")
            return
        course = self._prompt_for_course()
        if course is None:
            self._print("Operation cancelled.")
            return

        if choice == "1":
            try:
                self._platform.engine.enroll(student, course)
            except EnrollmentError as e:
                self._print(f"Enrollment Failed: {e.message}")
                return
            self._print(f"Enrollment successful for {student.full_name} in {course.title}")
        else:
            try:
                grade = Grade.parse(self._input("Enter Grade (S, A, B, ...): "))
            except ValidationError:
                self._print("Invalid grade entered.")
                return
            self._platform.engine.assign_grade(student, course, grade)
            if student.find_enrollment(course.code) is None:
                self._print(f"{student.full_name} is not enrolled in {course.code}.")
            else:
                self._print(f"Grade {grade.name} assigned for {course.title}")

    def _manage_data(self) -> None:
        self._print("\n--- Data Menu ---")
        self._print("1. Import Courses from CSV")
        self._print("2. Export Data")
        self._print("3. Create Backup")
        self._print("4. Show Backup Size")
        choice = self._input("Choice: ").strip()
        try:
            if choice == "1":
                file_name = self._input("Enter filename (e.g., test-data/courses.csv): ").strip()
                report = self._platform.importer.import_file(file_name)
                self._print(f"Courses imported from {file_name}: "
                            f"{report.added_count} added, {report.skipped_count} skipped")
            elif choice == "2":
                for kind, path in self._platform.exporter.export_all().items():
                    self._print(f"Exported {kind} to {path}")
            elif choice == "3":
                destination = self._platform.backups.backup()
                self._print(f"Backup successful: {destination}")
            elif choice == "4":
                size = self._platform.backups.backup_size()
                self._print(f"Total size of all backups is: {size / 1024.0:.2f} KB")
            else:
                self._print("Invalid choice.")
        except (ConfigurationError, ResourceNotFoundError, PersistenceError) as e:
            self._print(f"Error: {e.message}")

    def _show_platform_info(self) -> None:
        self._print("\n--- Python Platform Info ---")
        self._print(f"Python: {platform.python_implementation()} {sys.version.split()[0]}")
        self._print(f"Platform: {platform.platform()}")
        self._print(f"CCRM: {__version__}")

    def _prompt_for_student(self) -> Optional[Student]:
        reg_no = self._input("Enter Student RegNo: ").strip()
        student = self._platform.students.find_by_reg_no(reg_no)
        if student is None:
            self._print(f"Student with RegNo '{reg_no}' not found.")
        return student

    def _prompt_for_course(self) -> Optional[Course]:
        code = self._input("Enter Course Code: ").strip()
        course = self._platform.courses.find_by_code(code)
        if course is None:
            self._print(f"Course with code '{code}' not found.")
        return course
