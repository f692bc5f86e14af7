"""
Services module containing the enrollment and academic record engines.
"""

from .enrollment_service import EnrollmentEngine
from .transcript_service import Transcript, TranscriptCalculator, TranscriptLine

__all__ = [
    "EnrollmentEngine",
    "TranscriptCalculator",
    "Transcript",
    "TranscriptLine",
]
