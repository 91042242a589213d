import os

os.environ.setdefault('DATABASE_URL', 'sqlite://')
os.environ.setdefault('JWT_SECRET_KEY', 'test-secret')

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from learning_backend.auth import jwt_handler  # noqa: E402
from learning_backend.auth.passwords import hash_password  # noqa: E402
from learning_backend.database import Base, get_db, register_sqlite_functions  # noqa: E402
from learning_backend.main import app  # noqa: E402
from learning_backend.models.course import Course  # noqa: E402
from learning_backend.models.user import User, UserRole  # noqa: E402


COURSE_FIELDS = {
    'title': 'Vue.js Masterclass',
    'description': 'Master Vue.js from scratch. Build modern web applications with Vue 3.',
    'price': '$50',
    'rating': 4.8,
    'instructor': 'Sarah Wilson',
    'level': 'Beginner',
    'icon': '🔷',
    'category': 'Web',
}


@pytest.fixture
def session_factory():
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    register_sqlite_functions(engine)
    Base.metadata.create_all(bind=engine)
    try:
        yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make_user(email: str = 'student@example.com', role: UserRole = UserRole.USER, password: str = 'secret-pass') -> User:
        user = User(email=email, hashed_password=hash_password(password), name=email.split('@')[0], role=role)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_course(db):
    def _make_course(**overrides) -> Course:
        course = Course(**{**COURSE_FIELDS, **overrides})
        db.add(course)
        db.commit()
        db.refresh(course)
        return course

    return _make_course


@pytest.fixture
def auth_headers():
    def _auth_headers(user: User) -> dict[str, str]:
        return {'Authorization': f'Bearer {jwt_handler.create_access_token(user.id)}'}

    return _auth_headers
