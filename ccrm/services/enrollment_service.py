"""
Enrollment engine: the gatekeeper for creating enrollments and assigning grades.
"""

import logging
import threading
import weakref
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from ..config import MAX_CREDITS_PER_SEMESTER
from ..core.entities import Course, Enrollment, Student
from ..core.enrollment_policies import CreditLimitPolicy, DuplicateCoursePolicy
from ..core.enums import Grade
from ..core.interfaces import EnrollmentPolicy

logger = logging.getLogger(__name__)


class EnrollmentEngine:
    """Enforces enrollment rules and records grades.
    
    Policies run in order and the first violation wins. The check and the
    append happen under one lock per student, so an enroll call either fully
    succeeds or leaves the student untouched.
    """
    
    def __init__(self, max_credits: int = MAX_CREDITS_PER_SEMESTER,
                 policies: Optional[List[EnrollmentPolicy]] = None):
        self._max_credits = max_credits
        if policies is None:
            policies = [DuplicateCoursePolicy(), CreditLimitPolicy(max_credits)]
        self._policies: List[EnrollmentPolicy] = list(policies)
        self._student_locks = weakref.WeakKeyDictionary()
        self._lock = threading.RLock()
    
    @property
    def max_credits(self) -> int:
        return self._max_credits
    
    @property
    def policies(self) -> List[EnrollmentPolicy]:
        return self._policies.copy()
    
    @contextmanager
    def _student_scope(self, student: Student):
        with self._lock:
            student_lock = self._student_locks.get(student)
            if student_lock is None:
                student_lock = self._student_locks[student] = threading.RLock()
        with student_lock:
            yield
    
    def enroll(self, student: Student, course: Course) -> Enrollment:
        """Enroll a student in a course.
        
        Raises:
            DuplicateEnrollmentError: the student already holds this course.
            CreditLimitExceededError: the course would push the student past the ceiling.
        """
        with self._student_scope(student):
            for policy in self._policies:
                policy.check(student, course)
            
            enrollment = Enrollment(student, course)
            student._append_enrollment(enrollment)
        
        logger.info("Enrollment successful for %s in %s", student.full_name, course.title)
        return enrollment
    
    def assign_grade(self, student: Student, course: Course, grade: Grade) -> None:
        """Set or overwrite the grade of the student's enrollment in ``course``.
        
        Does nothing when the student is not enrolled in the course.
        """
        with self._student_scope(student):
            enrollment = student.find_enrollment(course.code)
            if enrollment is None:
                logger.debug("No enrollment for %s in %s; grade %s ignored",
                             student.reg_no, course.code, grade.name)
                return
            enrollment.set_grade(grade)
        
        logger.info("Grade %s assigned for %s", grade.name, course.title)
    
    def credits_for(self, student: Student) -> int:
        """Get the student's current credit load."""
        return sum(e.course.credits for e in student.enrollments)
    
    def get_statistics(self, students: List[Student]) -> Dict[str, Any]:
        """Get enrollment statistics over the given students."""
        enrollments = [e for s in students for e in s.enrollments]
        return {
            'total_enrollments': len(enrollments),
            'graded_enrollments': sum(1 for e in enrollments if e.is_graded),
            'max_credits': self._max_credits,
            'active_policies': [p.get_policy_name() for p in self._policies]
        }
