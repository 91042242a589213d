from datetime import datetime

from learning_backend.models.course import Course
from learning_backend.models.enrollment import Enrollment
from learning_backend.repositories.base import SqlRepository, is_storable_id


class EnrollmentRepository(SqlRepository):
    def get(self, user_id: int, course_id: int) -> Enrollment | None:
        if not (is_storable_id(user_id) and is_storable_id(course_id)):
            return None
        return (
            self.db.query(Enrollment)
            .filter(Enrollment.user_id == user_id, Enrollment.course_id == course_id)
            .first()
        )

    def list_with_courses(self, user_id: int) -> list[tuple[Enrollment, Course]]:
        return (
            self.db.query(Enrollment, Course)
            .join(Course, Enrollment.course_id == Course.id)
            .filter(Enrollment.user_id == user_id)
            .order_by(Enrollment.last_accessed.desc(), Enrollment.id.desc())
            .all()
        )

    def create(self, user_id: int, course_id: int, now: datetime) -> Enrollment:
        enrollment = Enrollment(
            user_id=user_id,
            course_id=course_id,
            progress=0,
            last_accessed=now,
            purchased_at=now,
        )
        self.db.add(enrollment)
        self._commit(conflict_message='Course already purchased.')
        self.db.refresh(enrollment)
        return enrollment

    def update_progress(self, enrollment: Enrollment, progress: int, now: datetime) -> Enrollment:
        enrollment.progress = progress
        enrollment.last_accessed = now
        self._commit()
        self.db.refresh(enrollment)
        return enrollment
