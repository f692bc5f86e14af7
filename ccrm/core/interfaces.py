"""
Core interfaces and abstract base classes for the CCRM platform.
"""

from abc import ABC, abstractmethod


class Profiled(ABC):
    """Capability interface for entities that can describe themselves."""
    
    @abstractmethod
    def profile(self) -> str:
        """Return a one-line profile of the entity."""
        pass


class EnrollmentPolicy(ABC):
    """Abstract base class for enrollment policies."""
    
    @abstractmethod
    def check(self, student: 'Student', course: 'Course') -> None:
        """Raise an EnrollmentError if the student may not enroll in the course."""
        pass
    
    @abstractmethod
    def get_policy_name(self) -> str:
        """Get the name of this policy."""
        pass
