"""
CSV export of the in-memory directories to the data directory.
"""

import csv
import logging
from pathlib import Path
from typing import Dict

from ..config import AppConfig
from ..core.exceptions import PersistenceError
from .directories import CourseDirectory, StudentDirectory

logger = logging.getLogger(__name__)

STUDENTS_FILE = "students.csv"
COURSES_FILE = "courses.csv"
ENROLLMENTS_FILE = "enrollments.csv"


class DataExporter:
    """Writes students, courses and enrollments as CSV files."""
    
    def __init__(self, config: AppConfig, students: StudentDirectory, courses: CourseDirectory):
        self._config = config
        self._students = students
        self._courses = courses
    
    def export_all(self) -> Dict[str, Path]:
        """Export every file and return the written paths keyed by kind."""
        self._config.ensure_directories()
        target = self._config.data_directory
        try:
            paths = {
                'students': self._export_students(target / STUDENTS_FILE),
                'courses': self._export_courses(target / COURSES_FILE),
                'enrollments': self._export_enrollments(target / ENROLLMENTS_FILE),
            }
        except OSError as e:
            raise PersistenceError(f"Export failed: {e}")
        logger.info("Data exported to %s", target)
        return paths
    
    def _export_students(self, path: Path) -> Path:
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            for student in self._students.all():
                writer.writerow([student.id, student.reg_no, student.full_name, student.email])
        return path
    
    def _export_courses(self, path: Path) -> Path:
        # Same layout the importer reads.
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f, lineterminator='\n')
            for course in self._courses.all():
                writer.writerow([course.code, course.title, course.credits, course.department])
        return path
    
    def _export_enrollments(self, path: Path) -> Path:
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            for student in self._students.all():
                for enrollment in student.enrollments:
                    row = enrollment.to_dict()
                    writer.writerow([row['reg_no'], row['course_code'], row['grade'] or "", row['enrolled_at']])
        return path
