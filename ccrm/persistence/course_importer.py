"""
CSV import of courses into a CourseDirectory.

Each line is ``code,title,credits,department`` in CSV quoting, so a quoted
title may contain commas. Lines with any other field
count are skipped silently; lines with bad credits or a rejected course are
skipped with an error log. Import is not atomic.
"""

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from ..core.entities import Course, CourseBuilder
from ..core.exceptions import PersistenceError, ResourceNotFoundError, ValidationError
from .directories import CourseDirectory

logger = logging.getLogger(__name__)

FIELD_COUNT = 4


@dataclass
class ImportReport:
    """Result of a course import."""
    source: str
    added: List[Course] = field(default_factory=list)
    skipped_lines: List[int] = field(default_factory=list)
    
    @property
    def added_count(self) -> int:
        return len(self.added)
    
    @property
    def skipped_count(self) -> int:
        return len(self.skipped_lines)


class CourseImporter:
    """Reads course CSV files into a course directory."""
    
    def __init__(self, course_directory: CourseDirectory):
        self._courses = course_directory
    
    def import_file(self, path: Union[str, Path]) -> ImportReport:
        path = Path(path)
        if not path.is_file():
            raise ResourceNotFoundError(f"Import file not found: {path}", error_code="IMPORT_FILE_NOT_FOUND")
        
        try:
            with open(path, 'r', encoding='utf-8', newline='') as f:
                report = self.import_lines(f, source=str(path))
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Could not read %s: %s", path, e)
            raise PersistenceError(f"Could not read import file {path}: {e}",
                                   error_code="IMPORT_FILE_UNREADABLE")
        logger.info("Courses imported from %s: %d added, %d skipped",
                    path, report.added_count, report.skipped_count)
        return report
    
    def import_lines(self, lines, source: str = "<lines>") -> ImportReport:
        report = ImportReport(source=source)
        for line_no, line in enumerate(lines, start=1):
            line = line.rstrip("\r\n")
            if not line.strip():
                continue
            course = self._parse_line(line, line_no, source)
            if course is None:
                report.skipped_lines.append(line_no)
                continue
            if self._courses.find_by_code(course.code) is not None:
                logger.warning("%s:%d: course %s already exists, skipped", source, line_no, course.code)
                report.skipped_lines.append(line_no)
                continue
            self._courses.add(course)
            report.added.append(course)
        return report
    
    def _parse_line(self, line: str, line_no: int, source: str):
        parts = [part.strip() for part in next(csv.reader([line]))]
        if len(parts) != FIELD_COUNT:
            logger.debug("%s:%d: expected %d fields, got %d", source, line_no, FIELD_COUNT, len(parts))
            return None
        
        code, title, credits, department = parts
        try:
            credit_value = int(credits)
        except ValueError:
            logger.error("%s:%d: invalid credits %r", source, line_no, credits)
            return None
        
        try:
            return CourseBuilder(code, title).credits(credit_value).department(department).build()
        except ValidationError as e:
            logger.error("%s:%d: %s", source, line_no, e.message)
            return None
