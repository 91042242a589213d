from sqlalchemy import func, or_

from learning_backend.models.course import Course
from learning_backend.repositories.base import SqlRepository, is_storable_id


class CourseRepository(SqlRepository):
    def get(self, course_id: int) -> Course | None:
        if not is_storable_id(course_id):
            return None
        return self.db.get(Course, course_id)

    def list_all(self) -> list[Course]:
        return self.db.query(Course).order_by(Course.id.asc()).all()

    def list_by_category(self, category: str) -> list[Course]:
        return (
            self.db.query(Course)
            .filter(Course.category == category)
            .order_by(Course.id.asc())
            .all()
        )

    def search(self, query: str) -> list[Course]:
        needle = query.lower()
        return (
            self.db.query(Course)
            .filter(
                or_(
                    func.lower(Course.title).contains(needle, autoescape=True),
                    func.lower(Course.description).contains(needle, autoescape=True),
                )
            )
            .order_by(Course.id.asc())
            .all()
        )

    def create(self, fields: dict) -> Course:
        course = Course(**fields)
        self.db.add(course)
        self._commit()
        self.db.refresh(course)
        return course

    def update(self, course: Course, fields: dict) -> Course:
        for name, value in fields.items():
            setattr(course, name, value)
        self._commit()
        self.db.refresh(course)
        return course

    def delete(self, course: Course) -> None:
        self.db.delete(course)
        self._commit()
