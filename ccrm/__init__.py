"""
CCRM: Campus Course & Records Manager

Tracks students, courses and enrollments for a single institution, enforces
enrollment rules and derives academic records (GPA, transcripts).
"""

__version__ = "1.0.0"
__author__ = "CCRM Development Team"
__description__ = "Campus Course & Records Manager"
