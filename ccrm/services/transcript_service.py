"""
Read-side derivations over a student's enrollments: GPA and transcripts.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core.entities import Enrollment, Student
from ..core.enums import Grade, ReportFormat

SEPARATOR = "-" * 50


@dataclass(frozen=True)
class TranscriptLine:
    """One enrollment as it appears on a transcript."""
    title: str
    code: str
    grade: Optional[Grade] = None
    
    @property
    def grade_label(self) -> str:
        return self.grade.name if self.grade is not None else Enrollment.IN_PROGRESS
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'title': self.title,
            'code': self.code,
            'grade': self.grade.name if self.grade is not None else None,
            'status': self.grade_label
        }
    
    def __str__(self) -> str:
        label = f"{self.title} ({self.code})"
        return f"  - {label:<40} | Grade: {self.grade_label:<12}"


@dataclass(frozen=True)
class Transcript:
    """Ordered transcript lines followed by the GPA."""
    profile: str
    lines: List[TranscriptLine] = field(default_factory=list)
    gpa: float = 0.0
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'profile': self.profile,
            'lines': [line.to_dict() for line in self.lines],
            'gpa': self.gpa
        }


class TranscriptCalculator:
    """Computes GPA and transcripts. Never mutates a student."""
    
    def gpa(self, student: Student) -> float:
        """Credit-weighted grade point average over graded enrollments.
        
        Returns 0.0 when the student has no graded enrollment.
        """
        graded = [e for e in student.enrollments if e.grade is not None]
        if not graded:
            return 0.0
        
        total_points = sum(e.grade.points * e.course.credits for e in graded)
        total_credits = sum(e.course.credits for e in graded)
        return total_points / total_credits
    
    def transcript(self, student: Student) -> Transcript:
        """Build the transcript in enrollment order."""
        lines = [
            TranscriptLine(title=e.course.title, code=e.course.code, grade=e.grade)
            for e in student.enrollments
        ]
        return Transcript(profile=student.profile(), lines=lines, gpa=self.gpa(student))
    
    def render(self, student: Student) -> str:
        transcript = self.transcript(student)
        out = [
            "",
            "-" * 20 + " TRANSCRIPT " + "-" * 20,
            transcript.profile,
            SEPARATOR,
        ]
        if transcript.lines:
            out.extend(str(line) for line in transcript.lines)
        else:
            out.append("No courses enrolled.")
        out.append(SEPARATOR)
        out.append(f"GPA: {transcript.gpa:.2f}")
        out.append(SEPARATOR)
        return "\n".join(out)
    
    def generate_report(self, student: Student, format: ReportFormat = ReportFormat.TEXT) -> str:
        """Render the transcript in the requested format."""
        if format == ReportFormat.JSON:
            return json.dumps(self.transcript(student).to_dict(), indent=2)
        return self.render(student)
