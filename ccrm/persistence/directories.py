"""
In-memory directories for students and courses.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Generic, Iterator, List, Optional, TypeVar

from ..core.entities import Course, Student
from ..core.exceptions import DuplicateEntityError

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BaseDirectory(ABC, Generic[T]):
    """Ordered registry with case-insensitive key lookup."""
    
    def __init__(self, entity_type: str):
        self._entity_type = entity_type
        self._entities: List[T] = []
        self._lock = threading.RLock()
    
    def add(self, entity: T) -> T:
        """Append an entity and return it."""
        with self._lock:
            self._entities.append(entity)
        logger.info("%s added: %s", self._entity_type.capitalize(), self._describe(entity))
        return entity
    
    def find_by_key(self, key: str) -> Optional[T]:
        """First entity whose key matches ``key`` ignoring case, or None."""
        if key is None:
            return None
        with self._lock:
            for entity in self._entities:
                if self._matches(entity, key):
                    return entity
        return None
    
    def all(self) -> List[T]:
        """Snapshot of every entity in insertion order."""
        with self._lock:
            return self._entities.copy()
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._entities)
    
    def __iter__(self) -> Iterator[T]:
        return iter(self.all())
    
    @abstractmethod
    def _matches(self, entity: T, key: str) -> bool:
        pass
    
    @abstractmethod
    def _describe(self, entity: T) -> str:
        pass


class StudentDirectory(BaseDirectory[Student]):
    """Directory of students keyed by registration number."""
    
    def __init__(self):
        super().__init__("student")
        self._next_id = 1
    
    def add(self, student: Student) -> Student:
        """Assign the next sequential id and store the student."""
        with self._lock:
            if student.id is not None:
                raise DuplicateEntityError(
                    f"Student {student.reg_no} already has id {student.id}",
                    error_code="STUDENT_ALREADY_ADDED"
                )
            student._assign_id(self._next_id)
            self._next_id += 1
            return super().add(student)
    
    def register(self, reg_no: str, full_name: str, email: str) -> Student:
        """Create a student and add it in one step."""
        return self.add(Student(reg_no, full_name, email))
    
    def find_by_reg_no(self, reg_no: str) -> Optional[Student]:
        return self.find_by_key(reg_no)
    
    def _matches(self, entity: Student, key: str) -> bool:
        return entity.matches(key)
    
    def _describe(self, entity: Student) -> str:
        return entity.full_name


class CourseDirectory(BaseDirectory[Course]):
    """Directory of courses keyed by course code."""
    
    def __init__(self):
        super().__init__("course")
    
    def find_by_code(self, code: str) -> Optional[Course]:
        return self.find_by_key(code)
    
    def _matches(self, entity: Course, key: str) -> bool:
        return entity.matches(key.strip())
    
    def _describe(self, entity: Course) -> str:
        return entity.title
