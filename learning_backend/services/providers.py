"""FastAPI dependency providers that build services around the request session."""

from fastapi import Depends
from sqlalchemy.orm import Session

from learning_backend.database import get_db
from learning_backend.repositories.course_repository import CourseRepository
from learning_backend.repositories.enrollment_repository import EnrollmentRepository
from learning_backend.repositories.user_repository import UserRepository
from learning_backend.services.auth_service import AuthService
from learning_backend.services.course_service import CourseService
from learning_backend.services.enrollment_service import EnrollmentService
from learning_backend.services.user_service import UserService


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(UserRepository(db))


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(UserRepository(db))


def get_course_service(db: Session = Depends(get_db)) -> CourseService:
    return CourseService(CourseRepository(db))


def get_enrollment_service(db: Session = Depends(get_db)) -> EnrollmentService:
    return EnrollmentService(EnrollmentRepository(db), CourseService(CourseRepository(db)))
