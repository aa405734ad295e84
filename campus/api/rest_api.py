"""
REST API implementation for the campus registry using FastAPI.
"""

import threading
from typing import Dict, Any, List
from datetime import datetime, timezone
from pydantic import BaseModel, Field

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

from ..core.interfaces import Student, StudentFactory
from ..core.decorators import DecoratorFactory, StudentDecorator, get_enhancements
from ..core.enums import StudentEnhancement
from ..core.university import University


# Pydantic models for API
class StudentCreate(BaseModel):
    categories: List[str] = Field(default_factory=list)
    test_to_skip_levels: bool = False
    enhancements: List[StudentEnhancement] = Field(default_factory=list)


class StudentResponse(BaseModel):
    index: int
    kind: str
    categories: List[str]
    test_to_skip_levels: bool
    enhancements: List[str] = []


class EligibilityResponse(BaseModel):
    index: int
    course: str
    can_take_course: bool


class StatisticsResponse(BaseModel):
    success: bool
    message: str
    statistics: Dict[str, Any]


class CampusRestAPI:
    """REST API implementation over a University registry."""
    
    def __init__(self, university: University, student_factory: StudentFactory):
        self._university = university
        self._student_factory = student_factory
        self._lock = threading.RLock()
        
        # Create FastAPI app
        self.app = FastAPI(
            title="Campus Student Registry API",
            description="Student/University object model built on classic design patterns",
            version="1.0.0",
            docs_url="/docs",
            redoc_url="/redoc"
        )
        
        # Add CORS middleware
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
        
        # Setup routes
        self._setup_routes()
    
    def _setup_routes(self):
        """Setup API routes."""
        
        @self.app.get("/", response_model=Dict[str, str])
        async def root():
            """Root endpoint."""
            return {
                "message": "Campus Student Registry API",
                "version": "1.0.0",
                "docs": "/docs"
            }
        
        @self.app.get("/health", response_model=Dict[str, str])
        async def health_check():
            """Health check endpoint."""
            return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}
        
        # Student endpoints
        @self.app.post("/students", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
        async def create_student(student_data: StudentCreate):
            """Create a student with the factory, decorate it and register it."""
            try:
                with self._lock:
                    student: Student = self._student_factory.create_student(
                        student_data.categories,
                        student_data.test_to_skip_levels
                    )
                    
                    # Innermost enhancement first
                    for enhancement in reversed(student_data.enhancements):
                        student = DecoratorFactory.create_decorator(enhancement, student)
                    
                    return self._register(student)
            
            except Exception as e:
                raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")
        
        @self.app.get("/students", response_model=List[StudentResponse])
        async def list_students(skip: int = 0, limit: int = 100):
            """List registered students."""
            try:
                with self._lock:
                    students = self._university.get_students()
                    
                    return [
                        self._student_to_response(index, student)
                        for index, student in enumerate(students)
                    ][skip:skip + limit]
            
            except Exception as e:
                raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")
        
        @self.app.get("/students/{index}", response_model=StudentResponse)
        async def get_student(index: int):
            """Get a student by registration index."""
            with self._lock:
                student = self._find_student(index)
                return self._student_to_response(index, student)
        
        @self.app.get("/students/{index}/eligibility", response_model=EligibilityResponse)
        async def check_eligibility(index: int, course: str):
            """Check whether a student can take a course."""
            with self._lock:
                student = self._find_student(index)
                return EligibilityResponse(
                    index=index,
                    course=course,
                    can_take_course=student.can_take_course(course)
                )
        
        @self.app.post("/students/{index}/clone", response_model=StudentResponse,
                       status_code=status.HTTP_201_CREATED)
        async def clone_student(index: int, keep_enhancements: bool = False):
            """
            Register a clone of an existing student.

            A plain clone of a decorated student is an undecorated copy of the
            innermost student; ``keep_enhancements`` re-applies the chain.
            """
            with self._lock:
                student = self._find_student(index)
                if keep_enhancements and isinstance(student, StudentDecorator):
                    return self._register(student.clone_decorated())
                return self._register(student.clone())
        
        # Statistics endpoints
        @self.app.get("/statistics", response_model=StatisticsResponse)
        async def get_statistics():
            """Get registry statistics."""
            try:
                with self._lock:
                    return StatisticsResponse(
                        success=True,
                        message="Statistics retrieved successfully",
                        statistics=self._university.get_statistics()
                    )
            
            except Exception as e:
                raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")
    
    def _find_student(self, index: int) -> Student:
        """Look up a registered student or raise a 404."""
        students = self._university.get_students()
        if index < 0 or index >= len(students):
            raise HTTPException(status_code=404, detail="Student not found")
        return students[index]
    
    def _register(self, student: Student) -> StudentResponse:
        self._university.add_student(student)
        return self._student_to_response(len(self._university.get_students()) - 1, student)
    
    def _student_to_response(self, index: int, student: Student) -> StudentResponse:
        """Convert a student to its response model."""
        return StudentResponse(
            index=index,
            kind=student.__class__.__name__,
            categories=student.get_categories(),
            test_to_skip_levels=student.has_test_to_skip_levels(),
            enhancements=[e.value for e in get_enhancements(student)]
        )
