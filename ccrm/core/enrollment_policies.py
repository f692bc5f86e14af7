from .exceptions import CreditLimitExceededError, DuplicateEnrollmentError
from .interfaces import EnrollmentPolicy


class DuplicateCoursePolicy(EnrollmentPolicy):
    """A student may hold at most one enrollment per course code."""
    
    def check(self, student, course):
        if student.find_enrollment(course.code) is not None:
            raise DuplicateEnrollmentError(course.code)
    
    def get_policy_name(self):
        return "DuplicateCoursePolicy"


class CreditLimitPolicy(EnrollmentPolicy):
    """Total enrolled credits may not exceed the semester ceiling."""
    
    def __init__(self, max_credits=20):
        self.max_credits = max_credits
    
    def check(self, student, course):
        current = sum(e.course.credits for e in student.enrollments)
        if current + course.credits > self.max_credits:
            raise CreditLimitExceededError(self.max_credits)
    
    def get_policy_name(self):
        return "CreditLimitPolicy"
