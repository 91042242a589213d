"""Response models shared by the route modules.

None of these models carries a password field, so a password hash can never
be serialized into a response body.
"""

from datetime import datetime

from pydantic import BaseModel

from learning_backend.models.user import UserRole


class UserResponse(BaseModel):
    id: int
    email: str
    name: str
    role: UserRole

    class Config:
        from_attributes = True


class AdminUserResponse(UserResponse):
    created_at: datetime | None = None


class AuthResponse(BaseModel):
    message: str
    token: str
    user: UserResponse


class CourseResponse(BaseModel):
    id: int
    title: str
    description: str
    price: str
    rating: float
    instructor: str
    level: str
    icon: str
    category: str
    youtube_playlist_id: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class EnrollmentResponse(BaseModel):
    course_id: int
    progress: int
    last_accessed: datetime
    purchased_at: datetime

    class Config:
        from_attributes = True


class PurchasedCourseResponse(BaseModel):
    id: int
    title: str
    description: str
    price: str
    rating: float
    instructor: str
    level: str
    icon: str
    category: str
    youtube_playlist_id: str | None = None
    progress: int
    last_accessed: datetime
