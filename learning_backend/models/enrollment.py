"""Enrollment model definitions."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from learning_backend.database import Base


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Enrollment(Base):
    """A user's purchase of a course and their progress through it."""
    __tablename__ = "enrollments"
    __table_args__ = (
        UniqueConstraint("user_id", "course_id", name="uq_enrollments_user_course"),
    )

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    course_id = Column(Integer, ForeignKey("courses.id", ondelete="CASCADE"), nullable=False)
    progress = Column(Integer, nullable=False, default=0)
    last_accessed = Column(DateTime, nullable=False, default=utc_now)
    purchased_at = Column(DateTime, nullable=False, default=utc_now)

    user = relationship("User", back_populates="enrollments")
    course = relationship("Course", back_populates="enrollments")
