import logging

from learning_backend import errors
from learning_backend.models.course import Course
from learning_backend.repositories.course_repository import CourseRepository

logger = logging.getLogger(__name__)

REQUIRED_COURSE_FIELDS = (
    'title',
    'description',
    'price',
    'instructor',
    'level',
    'icon',
    'category',
)
MIN_RATING = 0.0
MAX_RATING = 5.0


def validate_course_fields(fields: dict) -> dict:
    """Return a cleaned copy of ``fields`` or raise ``ValidationError``.

    The same rule applies to creates and updates: every display field must be
    present and non-blank, and a supplied rating must lie within 0-5.
    """
    cleaned = {}
    for name in REQUIRED_COURSE_FIELDS:
        value = fields.get(name)
        if value is None or not str(value).strip():
            raise errors.ValidationError(f'{name} is required.')
        cleaned[name] = str(value).strip()

    rating = fields.get('rating')
    if rating is not None:
        if not MIN_RATING <= rating <= MAX_RATING:
            raise errors.ValidationError('rating must be between 0 and 5.')
        cleaned['rating'] = float(rating)

    playlist = (fields.get('youtube_playlist_id') or '').strip()
    cleaned['youtube_playlist_id'] = playlist or None

    return cleaned


class CourseService:
    def __init__(self, courses: CourseRepository):
        self.courses = courses

    def list_courses(self) -> list[Course]:
        return self.courses.list_all()

    def list_by_category(self, category: str) -> list[Course]:
        return self.courses.list_by_category(category)

    def search(self, query: str) -> list[Course]:
        return self.courses.search(query or '')

    def get_course(self, course_id: int) -> Course:
        course = self.courses.get(course_id)
        if course is None:
            raise errors.NotFound('Course not found.')
        return course

    def create_course(self, fields: dict) -> Course:
        course = self.courses.create(validate_course_fields(fields))
        logger.info('Created course %s (%s)', course.id, course.title)
        return course

    def update_course(self, course_id: int, fields: dict) -> Course:
        cleaned = validate_course_fields(fields)
        course = self.get_course(course_id)
        course = self.courses.update(course, cleaned)
        logger.info('Updated course %s', course.id)
        return course

    def delete_course(self, course_id: int) -> None:
        course = self.get_course(course_id)
        self.courses.delete(course)
        logger.info('Deleted course %s', course_id)
