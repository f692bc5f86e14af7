"""
REST API implementation for the CCRM platform using FastAPI.
"""

import threading
from typing import Optional, Dict, Any, List
from datetime import datetime, timezone
from pydantic import BaseModel, Field

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from ..core.entities import Course, CourseBuilder, Student
from ..core.enums import Grade, ReportFormat
from ..core.exceptions import ValidationError, EnrollmentError
from ..services import EnrollmentEngine, TranscriptCalculator
from ..persistence import StudentDirectory, CourseDirectory


# Pydantic models for API
class StudentCreate(BaseModel):
    reg_no: str = Field(..., min_length=1, max_length=20)
    full_name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., pattern=r'^[^@]+@[^@]+\.[^@]+$')


class StudentResponse(BaseModel):
    id: int
    reg_no: str
    full_name: str
    email: str
    profile: str
    enrolled_courses: List[str] = []


class CourseCreate(BaseModel):
    # Range checks are left to CourseBuilder so the API reports the same errors as every other caller.
    code: str
    title: str = ""
    credits: int = 3
    department: Optional[str] = None


class CourseResponse(BaseModel):
    code: str
    title: str
    credits: int
    department: str


class EnrollmentRequest(BaseModel):
    reg_no: str = Field(..., min_length=1)
    course_code: str = Field(..., min_length=1)


class EnrollmentResponse(BaseModel):
    reg_no: str
    course_code: str
    grade: Optional[str] = None
    enrolled_at: datetime
    total_credits: int


class GradeRequest(BaseModel):
    reg_no: str = Field(..., min_length=1)
    course_code: str = Field(..., min_length=1)
    grade: str = Field(..., min_length=1)


class GradeResponse(BaseModel):
    success: bool
    message: str
    grade: Optional[str] = None


class TranscriptLineResponse(BaseModel):
    title: str
    code: str
    grade: Optional[str] = None
    status: str


class TranscriptResponse(BaseModel):
    profile: str
    lines: List[TranscriptLineResponse] = []
    gpa: float


class CcrmRestAPI:
    """REST API over one in-memory CCRM session."""

    def __init__(self, students: StudentDirectory, courses: CourseDirectory,
                 engine: EnrollmentEngine, calculator: TranscriptCalculator):
        self._students = students
        self._courses = courses
        self._engine = engine
        self._calculator = calculator

        self._lock = threading.RLock()

        # Create FastAPI app
        self.app = FastAPI(
            title="CCRM API",
            description="Campus Course & Records Manager",
            version="1.0.0",
            docs_url="/docs",
            redoc_url="/redoc"
        )

        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        self._setup_routes()

    def _setup_routes(self):
        """Setup API routes."""

        @self.app.get("/health", response_model=Dict[str, str])
        async def health_check():
            """Health check endpoint."""
            return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

        # Student endpoints
        @self.app.post("/students", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
        async def create_student(student_data: StudentCreate):
            """Create a new student."""
            try:
                with self._lock:
                    reg_no = student_data.reg_no.strip()
                    if self._students.find_by_reg_no(reg_no) is not None:
                        raise HTTPException(status_code=409, detail=f"Student {reg_no} already exists")

                    student = self._students.register(
                        student_data.reg_no,
                        student_data.full_name,
                        student_data.email
                    )
                    return self._student_to_response(student)

            except ValidationError as e:
                raise HTTPException(status_code=400, detail=e.message)

        @self.app.get("/students/{reg_no}", response_model=StudentResponse)
        async def get_student(reg_no: str):
            """Get a student by registration number."""
            return self._student_to_response(self._require_student(reg_no))

        @self.app.get("/students", response_model=List[StudentResponse])
        async def list_students(skip: int = 0, limit: int = 100):
            """List all students."""
            students = self._students.all()[skip:skip + limit]
            return [self._student_to_response(student) for student in students]

        @self.app.get("/students/{reg_no}/transcript")
        async def get_transcript(reg_no: str, format: ReportFormat = ReportFormat.JSON):
            """Get a student's transcript as JSON or as the printable text block."""
            student = self._require_student(reg_no)
            if format == ReportFormat.TEXT:
                return PlainTextResponse(self._calculator.render(student))
            return TranscriptResponse(**self._calculator.transcript(student).to_dict())

        # Course endpoints
        @self.app.post("/courses", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
        async def create_course(course_data: CourseCreate):
            """Create a new course."""
            try:
                with self._lock:
                    course = CourseBuilder(course_data.code, course_data.title) \
                        .credits(course_data.credits) \
                        .department(course_data.department) \
                        .build()

                    if self._courses.find_by_code(course.code) is not None:
                        raise HTTPException(status_code=409, detail=f"Course {course.code} already exists")

                    self._courses.add(course)
                    return self._course_to_response(course)

            except ValidationError as e:
                raise HTTPException(status_code=400, detail=e.message)

        @self.app.get("/courses/{code}", response_model=CourseResponse)
        async def get_course(code: str):
            """Get a course by code."""
            return self._course_to_response(self._require_course(code))

        @self.app.get("/courses", response_model=List[CourseResponse])
        async def list_courses(skip: int = 0, limit: int = 100):
            """List all courses."""
            courses = self._courses.all()[skip:skip + limit]
            return [self._course_to_response(course) for course in courses]

        # Enrollment endpoints
        @self.app.post("/enrollments", response_model=EnrollmentResponse, status_code=status.HTTP_201_CREATED)
        async def enroll_student(enrollment_data: EnrollmentRequest):
            """Enroll a student in a course."""
            student = self._require_student(enrollment_data.reg_no)
            course = self._require_course(enrollment_data.course_code)
            try:
                enrollment = self._engine.enroll(student, course)
            except EnrollmentError as e:
                raise HTTPException(status_code=409, detail=e.message)

            return EnrollmentResponse(
                reg_no=student.reg_no,
                course_code=course.code,
                grade=None,
                enrolled_at=enrollment.enrolled_at,
                total_credits=self._engine.credits_for(student)
            )

        @self.app.put("/grades", response_model=GradeResponse)
        async def assign_grade(grade_data: GradeRequest):
            """Assign a grade to an existing enrollment."""
            try:
                grade = Grade.parse(grade_data.grade)
            except ValidationError as e:
                raise HTTPException(status_code=400, detail=e.message)

            student = self._require_student(grade_data.reg_no)
            course = self._require_course(grade_data.course_code)
            self._engine.assign_grade(student, course, grade)

            enrollment = student.find_enrollment(course.code)
            if enrollment is None:
                return GradeResponse(success=False, message=f"Student is not enrolled in {course.code}")
            return GradeResponse(success=True, message="Grade assigned", grade=enrollment.grade.name)

        @self.app.get("/statistics", response_model=Dict[str, Any])
        async def get_statistics():
            """Get enrollment statistics."""
            stats = self._engine.get_statistics(self._students.all())
            stats['students'] = len(self._students)
            stats['courses'] = len(self._courses)
            return stats

    def _require_student(self, reg_no: str) -> Student:
        student = self._students.find_by_reg_no(reg_no)
        if student is None:
            raise HTTPException(status_code=404, detail=f"Student with RegNo '{reg_no}' not found")
        return student

    def _require_course(self, code: str) -> Course:
        course = self._courses.find_by_code(code)
        if course is None:
            raise HTTPException(status_code=404, detail=f"Course with code '{code}' not found")
        return course

    def _student_to_response(self, student: Student) -> StudentResponse:
        """Convert Student entity to response model."""
        return StudentResponse(
            id=student.id,
            reg_no=student.reg_no,
            full_name=student.full_name,
            email=student.email,
            profile=student.profile(),
            enrolled_courses=[e.course.code for e in student.enrollments]
        )

    def _course_to_response(self, course: Course) -> CourseResponse:
        """Convert Course entity to response model."""
        return CourseResponse(
            code=course.code,
            title=course.title,
            credits=course.credits,
            department=course.department
        )
