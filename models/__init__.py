from models.student import (
    Shift,
    Student,
    StudentCreate,
    StudentSubject,
    StudentUpdate,
    SubjectRef,
    subject_refs,
)
from models.subject import Subject
from models.teacher import Teacher, TeacherCreate, TeacherUpdate

__all__ = [
    "Shift",
    "Student",
    "StudentCreate",
    "StudentSubject",
    "StudentUpdate",
    "SubjectRef",
    "subject_refs",
    "Subject",
    "Teacher",
    "TeacherCreate",
    "TeacherUpdate",
]
