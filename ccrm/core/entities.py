"""
Core entities for the CCRM platform.

Course is an immutable value built through CourseBuilder. Student owns its
Enrollments; an Enrollment holds non-owning references to its Student and to a
Course that lives in the course directory.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .enums import Grade
from .exceptions import ValidationError
from .interfaces import Profiled

MIN_CREDITS = 1
MAX_CREDITS = 9
DEFAULT_CREDITS = 3
DEFAULT_DEPARTMENT = "General"


def validate_course_fields(code: Optional[str], credits: int) -> List[str]:
    """Return every problem with the given course fields (empty when valid)."""
    errors = []
    if code is None or not str(code).strip():
        errors.append("Course code cannot be null or empty.")
    if isinstance(credits, bool) or not isinstance(credits, int) \
            or not MIN_CREDITS <= credits <= MAX_CREDITS:
        errors.append(f"Credits must be between {MIN_CREDITS} and {MAX_CREDITS}.")
    return errors


@dataclass(frozen=True, eq=False)
class Course:
    """Immutable course. Identity is the course code, compared case-insensitively."""
    code: str
    title: str
    credits: int = DEFAULT_CREDITS
    department: str = DEFAULT_DEPARTMENT
    
    def __post_init__(self):
        errors = validate_course_fields(self.code, self.credits)
        if errors:
            raise ValidationError("; ".join(errors), error_code="INVALID_COURSE",
                                  details={"errors": errors})
    
    @property
    def key(self) -> str:
        return self.code.casefold()
    
    def matches(self, code: str) -> bool:
        """Check whether ``code`` names this course, ignoring case."""
        return code is not None and self.key == code.casefold()
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Course):
            return NotImplemented
        return self.key == other.key
    
    def __hash__(self) -> int:
        return hash(self.key)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'code': self.code,
            'title': self.title,
            'credits': self.credits,
            'department': self.department
        }
    
    def __str__(self) -> str:
        return f"Course[Code={self.code}, Title='{self.title}', Credits={self.credits}, Dept={self.department}]"
    
    @staticmethod
    def builder(code: str, title: str) -> "CourseBuilder":
        return CourseBuilder(code, title)


@dataclass
class BuildResult:
    """Outcome of validating a CourseBuilder."""
    success: bool
    course: Optional[Course] = None
    errors: List[str] = field(default_factory=list)


class CourseBuilder:
    """Fluent builder for Course.

    Usage::

        course = CourseBuilder("CS101", "Intro to Programming").credits(4).department("CS").build()

    ``validate()`` reports problems as a BuildResult; ``build()`` raises
    ValidationError carrying all of them.
    """
    
    def __init__(self, code: str, title: str):
        self._code = code
        self._title = title
        self._credits = DEFAULT_CREDITS
        self._department = DEFAULT_DEPARTMENT
    
    def credits(self, credits: int) -> "CourseBuilder":
        self._credits = credits
        return self
    
    def department(self, department: Optional[str]) -> "CourseBuilder":
        self._department = department or DEFAULT_DEPARTMENT
        return self
    
    def validate(self) -> BuildResult:
        errors = validate_course_fields(self._code, self._credits)
        if errors:
            return BuildResult(success=False, errors=errors)
        course = Course(
            code=self._code.strip(),
            title=self._title or "",
            credits=self._credits,
            department=self._department
        )
        return BuildResult(success=True, course=course)
    
    def build(self) -> Course:
        result = self.validate()
        if not result.success:
            raise ValidationError("; ".join(result.errors), error_code="INVALID_COURSE",
                                  details={"errors": result.errors})
        return result.course


class Student(Profiled):
    """Student entity owning an ordered list of enrollments.

    The id is assigned by the StudentDirectory when the student is added.
    """
    
    def __init__(self, reg_no: str, full_name: str, email: str, student_id: Optional[int] = None):
        if reg_no is None or not str(reg_no).strip():
            raise ValidationError("Registration number cannot be empty.", error_code="INVALID_STUDENT")
        self._id = student_id
        self._reg_no = reg_no.strip()
        self._full_name = full_name
        self._email = email
        self._enrollments: List["Enrollment"] = []
    
    @property
    def id(self) -> Optional[int]:
        return self._id
    
    @property
    def reg_no(self) -> str:
        return self._reg_no
    
    @property
    def full_name(self) -> str:
        return self._full_name
    
    @full_name.setter
    def full_name(self, value: str) -> None:
        self._full_name = value
    
    @property
    def email(self) -> str:
        return self._email
    
    @email.setter
    def email(self, value: str) -> None:
        self._email = value
    
    @property
    def enrollments(self) -> List["Enrollment"]:
        """Snapshot of the enrollments in insertion order."""
        return self._enrollments.copy()
    
    def find_enrollment(self, course_code: str) -> Optional["Enrollment"]:
        """Find the enrollment for a course code, ignoring case."""
        for enrollment in self._enrollments:
            if enrollment.course.matches(course_code):
                return enrollment
        return None
    
    def matches(self, reg_no: str) -> bool:
        return reg_no is not None and self._reg_no.casefold() == reg_no.strip().casefold()
    
    def _assign_id(self, student_id: int) -> None:
        self._id = student_id
    
    def _append_enrollment(self, enrollment: "Enrollment") -> None:
        self._enrollments.append(enrollment)
    
    def profile(self) -> str:
        return f"Student Profile [ID: {self._id}, RegNo: {self._reg_no}, Name: {self._full_name}]"
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert student to dictionary."""
        return {
            'id': self._id,
            'reg_no': self._reg_no,
            'full_name': self._full_name,
            'email': self._email,
            'enrollments': [e.to_dict() for e in self._enrollments]
        }
    
    def __str__(self) -> str:
        return f"ID: {self._id}, Name: {self._full_name}"
    
    def __repr__(self) -> str:
        return f"Student(id={self._id}, reg_no={self._reg_no!r})"


class Enrollment:
    """Link between one Student and one Course, with an optional grade."""
    
    IN_PROGRESS = "In Progress"
    
    def __init__(self, student: Student, course: Course):
        self._student = student
        self._course = course
        self._grade: Optional[Grade] = None
        self._enrolled_at = datetime.now(timezone.utc)
    
    @property
    def student(self) -> Student:
        return self._student
    
    @property
    def course(self) -> Course:
        return self._course
    
    @property
    def grade(self) -> Optional[Grade]:
        return self._grade
    
    @property
    def enrolled_at(self) -> datetime:
        return self._enrolled_at
    
    @property
    def is_graded(self) -> bool:
        return self._grade is not None
    
    @property
    def grade_label(self) -> str:
        return self._grade.name if self._grade is not None else self.IN_PROGRESS
    
    def set_grade(self, grade: Grade) -> None:
        self._grade = grade
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'reg_no': self._student.reg_no,
            'course_code': self._course.code,
            'grade': self._grade.name if self._grade is not None else None,
            'enrolled_at': self._enrolled_at.isoformat()
        }
    
    def __str__(self) -> str:
        label = f"{self._course.title} ({self._course.code})"
        return f"  - {label:<40} | Grade: {self.grade_label:<12}"
    
    def __repr__(self) -> str:
        return f"Enrollment(reg_no={self._student.reg_no!r}, course={self._course.code!r}, grade={self.grade_label!r})"
