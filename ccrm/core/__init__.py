"""
Core module containing the fundamental object model and base classes.
"""

from .entities import *
from .interfaces import *
from .exceptions import *
from .enums import *
from .enrollment_policies import *

__all__ = [
    # Entities
    "Course",
    "CourseBuilder",
    "BuildResult",
    "Student",
    "Enrollment",
    "validate_course_fields",
    
    # Interfaces
    "Profiled",
    "EnrollmentPolicy",
    
    # Policies
    "DuplicateCoursePolicy",
    "CreditLimitPolicy",
    
    # Enums
    "Grade",
    "ReportFormat",
    
    # Exceptions
    "CcrmException",
    "ValidationError",
    "EnrollmentError",
    "DuplicateEnrollmentError",
    "CreditLimitExceededError",
    "ResourceNotFoundError",
    "DuplicateEntityError",
    "PersistenceError",
    "ConfigurationError",
]
