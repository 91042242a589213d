from datetime import datetime, timedelta

import pytest

from learning_backend import errors
from learning_backend.models.enrollment import Enrollment
from learning_backend.repositories.course_repository import CourseRepository
from learning_backend.repositories.enrollment_repository import EnrollmentRepository
from learning_backend.services.course_service import CourseService
from learning_backend.services.enrollment_service import EnrollmentService, clamp_progress


class FakeClock:
    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, minutes: int = 1) -> None:
        self.now += timedelta(minutes=minutes)


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 1, 5, 9, 0))


@pytest.fixture
def enrollments(db, clock):
    return EnrollmentService(EnrollmentRepository(db), CourseService(CourseRepository(db)), clock=clock)


@pytest.mark.parametrize(('value', 'expected'), [(-5, 0), (0, 0), (42, 42), (100, 100), (150, 100)])
def test_clamp_progress(value: int, expected: int) -> None:
    assert clamp_progress(value) == expected


def test_purchase_creates_enrollment_with_zero_progress(enrollments, make_user, make_course, clock) -> None:
    user = make_user()
    course = make_course()

    enrollment = enrollments.purchase(user.id, course.id)

    assert enrollment.user_id == user.id
    assert enrollment.course_id == course.id
    assert enrollment.progress == 0
    assert enrollment.last_accessed == clock.now


def test_purchase_of_unknown_course_is_not_found(enrollments, make_user, db) -> None:
    user = make_user()

    with pytest.raises(errors.NotFound):
        enrollments.purchase(user.id, 999)

    assert db.query(Enrollment).count() == 0


def test_second_purchase_conflicts_and_keeps_original(enrollments, make_user, make_course, db, clock) -> None:
    user = make_user()
    course = make_course()
    enrollments.purchase(user.id, course.id)
    enrollments.update_progress(user.id, course.id, 42)
    recorded_access = clock.now
    clock.advance()

    with pytest.raises(errors.Conflict):
        enrollments.purchase(user.id, course.id)

    stored = db.query(Enrollment).one()
    assert stored.progress == 42
    assert stored.last_accessed == recorded_access


def test_same_course_can_be_purchased_by_different_users(enrollments, make_user, make_course, db) -> None:
    course = make_course()

    enrollments.purchase(make_user('a@example.com').id, course.id)
    enrollments.purchase(make_user('b@example.com').id, course.id)

    assert db.query(Enrollment).count() == 2


@pytest.mark.parametrize(('value', 'stored'), [(-5, 0), (150, 100), (42, 42)])
def test_update_progress_stores_clamped_value(enrollments, make_user, make_course, value: int, stored: int) -> None:
    user = make_user()
    course = make_course()
    enrollments.purchase(user.id, course.id)

    assert enrollments.update_progress(user.id, course.id, value).progress == stored


def test_update_progress_touches_last_accessed(enrollments, make_user, make_course, clock) -> None:
    user = make_user()
    course = make_course()
    enrollments.purchase(user.id, course.id)
    clock.advance(30)

    enrollment = enrollments.update_progress(user.id, course.id, 10)

    assert enrollment.last_accessed == clock.now
    assert enrollment.purchased_at == clock.now - timedelta(minutes=30)


def test_update_progress_without_enrollment_is_not_found(enrollments, make_user, make_course) -> None:
    user = make_user()
    course = make_course()

    with pytest.raises(errors.NotFound):
        enrollments.update_progress(user.id, course.id, 50)


def test_progress_is_scoped_to_the_caller(enrollments, make_user, make_course) -> None:
    owner = make_user('owner@example.com')
    other = make_user('other@example.com')
    course = make_course()
    enrollments.purchase(owner.id, course.id)

    with pytest.raises(errors.NotFound):
        enrollments.update_progress(other.id, course.id, 50)
    assert enrollments.list_purchased(other.id) == []


def test_list_purchased_orders_by_most_recent_access(enrollments, make_user, make_course, clock) -> None:
    user = make_user()
    vue = make_course(title='Vue.js Masterclass')
    react = make_course(title='React.js Fundamentals')
    enrollments.purchase(user.id, vue.id)
    clock.advance()
    enrollments.purchase(user.id, react.id)

    assert [item.course.title for item in enrollments.list_purchased(user.id)] == [
        'React.js Fundamentals',
        'Vue.js Masterclass',
    ]

    clock.advance()
    enrollments.update_progress(user.id, vue.id, 70)

    purchased = enrollments.list_purchased(user.id)
    assert [item.course.title for item in purchased] == ['Vue.js Masterclass', 'React.js Fundamentals']
    assert [item.enrollment.progress for item in purchased] == [70, 0]


class InMemoryEnrollmentRepository:
    def __init__(self):
        self.rows: dict[tuple[int, int], Enrollment] = {}

    def get(self, user_id, course_id):
        return self.rows.get((user_id, course_id))

    def create(self, user_id, course_id, now):
        if (user_id, course_id) in self.rows:
            raise errors.Conflict('Course already purchased.')
        enrollment = Enrollment(user_id=user_id, course_id=course_id, progress=0, last_accessed=now, purchased_at=now)
        self.rows[(user_id, course_id)] = enrollment
        return enrollment

    def update_progress(self, enrollment, progress, now):
        enrollment.progress = progress
        enrollment.last_accessed = now
        return enrollment

    def list_with_courses(self, user_id):
        return []


class StubCatalog:
    def __init__(self, known_ids):
        self.known_ids = set(known_ids)

    def get_course(self, course_id):
        if course_id not in self.known_ids:
            raise errors.NotFound('Course not found.')
        return object()


def test_service_runs_against_injected_repositories(clock) -> None:
    repository = InMemoryEnrollmentRepository()
    service = EnrollmentService(repository, StubCatalog({7}), clock=clock)

    service.purchase(1, 7)
    with pytest.raises(errors.Conflict):
        service.purchase(1, 7)
    with pytest.raises(errors.NotFound):
        service.purchase(1, 8)

    assert service.update_progress(1, 7, 250).progress == 100
    assert repository.rows[(1, 7)].last_accessed == clock.now
