import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from learning_backend import errors
from learning_backend.models.course import Course
from learning_backend.models.enrollment import Enrollment, utc_now
from learning_backend.repositories.enrollment_repository import EnrollmentRepository
from learning_backend.services.course_service import CourseService

logger = logging.getLogger(__name__)

MIN_PROGRESS = 0
MAX_PROGRESS = 100


def clamp_progress(progress: int) -> int:
    return max(MIN_PROGRESS, min(MAX_PROGRESS, progress))


@dataclass
class PurchasedCourse:
    """A purchased course joined with the owner's progress in it."""
    course: Course
    enrollment: Enrollment


class EnrollmentService:
    """Purchases and progress tracking, always scoped to the calling user."""

    def __init__(
        self,
        enrollments: EnrollmentRepository,
        catalog: CourseService,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.enrollments = enrollments
        self.catalog = catalog
        self.clock = clock

    def purchase(self, user_id: int, course_id: int) -> Enrollment:
        self.catalog.get_course(course_id)
        # A duplicate pair is rejected by the unique constraint, never overwritten.
        enrollment = self.enrollments.create(user_id=user_id, course_id=course_id, now=self.clock())
        logger.info('User %s purchased course %s', user_id, course_id)
        return enrollment

    def list_purchased(self, user_id: int) -> list[PurchasedCourse]:
        return [
            PurchasedCourse(course=course, enrollment=enrollment)
            for enrollment, course in self.enrollments.list_with_courses(user_id)
        ]

    def update_progress(self, user_id: int, course_id: int, progress: int) -> Enrollment:
        enrollment = self.enrollments.get(user_id, course_id)
        if enrollment is None:
            raise errors.NotFound('Enrollment not found.')
        return self.enrollments.update_progress(enrollment, clamp_progress(progress), self.clock())
