"""
Custom exceptions for the CCRM platform.
"""

from typing import Optional, Any, Dict


class CcrmException(Exception):
    """Base exception for all CCRM-related errors."""
    
    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ValidationError(CcrmException):
    """Raised when data validation fails."""
    pass


class EnrollmentError(CcrmException):
    """Raised when enrollment operations fail."""
    pass


class DuplicateEnrollmentError(EnrollmentError):
    """Raised when a student is already enrolled in a course."""
    
    def __init__(self, course_code: str):
        super().__init__(
            f"Student is already enrolled in course {course_code}",
            error_code="DUPLICATE_ENROLLMENT",
            details={"course_code": course_code}
        )
        self.course_code = course_code


class CreditLimitExceededError(EnrollmentError):
    """Raised when an enrollment would push a student past the credit ceiling."""
    
    def __init__(self, max_credits: int):
        super().__init__(
            f"Cannot enroll. Max credit limit of {max_credits} would be exceeded.",
            error_code="CREDIT_LIMIT_EXCEEDED",
            details={"max_credits": max_credits}
        )
        self.max_credits = max_credits


class ResourceNotFoundError(CcrmException):
    """Raised when a requested resource is not found."""
    pass


class DuplicateEntityError(CcrmException):
    """Raised when attempting to create a duplicate entity."""
    pass


class PersistenceError(CcrmException):
    """Raised when persistence operations fail."""
    pass


class ConfigurationError(CcrmException):
    """Raised when configuration is invalid."""
    pass
