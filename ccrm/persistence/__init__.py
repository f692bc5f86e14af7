"""
Persistence module: in-memory directories and file collaborators.
"""

from .directories import BaseDirectory, StudentDirectory, CourseDirectory
from .course_importer import CourseImporter, ImportReport
from .exporter import DataExporter
from .backup_manager import BackupManager, directory_size

__all__ = [
    "BaseDirectory",
    "StudentDirectory",
    "CourseDirectory",
    "CourseImporter",
    "ImportReport",
    "DataExporter",
    "BackupManager",
    "directory_size",
]
