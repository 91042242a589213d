"""Course model definitions."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, Integer, String
from sqlalchemy.orm import relationship

from learning_backend.database import Base


class Course(Base):
    """Represents a catalog course."""
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=False)
    price = Column(String, nullable=False)  # display string, e.g. "$50"
    rating = Column(Float, nullable=False, default=0.0)
    instructor = Column(String, nullable=False)
    level = Column(String, nullable=False)
    icon = Column(String, nullable=False)
    category = Column(String, nullable=False, index=True)
    youtube_playlist_id = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    enrollments = relationship("Enrollment", back_populates="course", cascade="all, delete-orphan")
