"""
Enumerations and constants for the CCRM platform.
"""

from enum import Enum

from .exceptions import ValidationError


class Grade(Enum):
    """Letter grades and the grade points each one is worth."""
    S = 10.0
    A = 9.0
    B = 8.0
    C = 7.0
    D = 6.0
    E = 5.0
    F = 0.0
    
    @property
    def points(self) -> float:
        return self.value
    
    @classmethod
    def parse(cls, text: str) -> "Grade":
        """Resolve free-text grade input such as ``" a "`` to a Grade."""
        key = (text or "").strip().upper()
        try:
            return cls[key]
        except KeyError:
            raise ValidationError(
                f"Invalid grade '{text}'. Expected one of: {', '.join(g.name for g in cls)}",
                error_code="INVALID_GRADE"
            )


class ReportFormat(Enum):
    """Supported transcript formats."""
    TEXT = "text"
    JSON = "json"
