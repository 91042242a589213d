from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from learning_backend.core import config


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def register_sqlite_functions(bind: Engine) -> None:
    """Replace SQLite's ASCII-only ``lower()`` on every new connection."""

    @event.listens_for(bind, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.create_function("lower", 1, _unicode_lower)


def build_engine(url: str) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        # Sessions are handed across FastAPI's threadpool workers.
        connect_args["check_same_thread"] = False
    bind = create_engine(url, echo=config.DATABASE_ECHO, connect_args=connect_args)
    if bind.dialect.name == "sqlite":
        register_sqlite_functions(bind)
    return bind


engine = build_engine(config.DATABASE_URL)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def ensure_course_schema(bind: Engine | None = None) -> None:
    bind = bind or engine
    inspector = inspect(bind)

    if 'courses' not in inspector.get_table_names():
        return

    existing_columns = {column['name'] for column in inspector.get_columns('courses')}
    migration_steps = [
        ('youtube_playlist_id', 'ALTER TABLE courses ADD COLUMN youtube_playlist_id VARCHAR'),
    ]

    with bind.begin() as connection:
        for column_name, statement in migration_steps:
            if column_name not in existing_columns:
                connection.execute(text(statement))


def ensure_enrollment_schema(bind: Engine | None = None) -> None:
    bind = bind or engine
    inspector = inspect(bind)

    if 'enrollments' not in inspector.get_table_names():
        return

    with bind.begin() as connection:
        connection.execute(
            text(
                'CREATE UNIQUE INDEX IF NOT EXISTS uq_enrollments_user_course '
                'ON enrollments(user_id, course_id)'
            )
        )
        connection.execute(
            text('CREATE INDEX IF NOT EXISTS idx_enrollments_user_accessed ON enrollments(user_id, last_accessed)')
        )
