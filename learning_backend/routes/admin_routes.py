from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from learning_backend.auth.dependencies import get_current_admin
from learning_backend.models.user import UserRole
from learning_backend.schemas import AdminUserResponse, CourseResponse
from learning_backend.services.course_service import CourseService
from learning_backend.services.providers import get_course_service, get_user_service
from learning_backend.services.user_service import UserService

# Every route in this group requires an admin caller; the dependency runs
# before any handler body, so a rejected call changes nothing.
router = APIRouter(tags=['admin'], dependencies=[Depends(get_current_admin)])


class CoursePayload(BaseModel):
    title: str
    description: str
    price: str
    instructor: str
    level: str
    icon: str
    category: str
    rating: float | None = None
    youtube_playlist_id: str | None = None


@router.post('/courses', response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
def create_course(data: CoursePayload, catalog: CourseService = Depends(get_course_service)):
    return catalog.create_course(data.model_dump())


@router.put('/courses/{course_id}', response_model=CourseResponse)
def update_course(course_id: int, data: CoursePayload, catalog: CourseService = Depends(get_course_service)):
    return catalog.update_course(course_id, data.model_dump())


@router.delete('/courses/{course_id}', status_code=status.HTTP_204_NO_CONTENT)
def delete_course(course_id: int, catalog: CourseService = Depends(get_course_service)):
    catalog.delete_course(course_id)


@router.get('/users', response_model=list[AdminUserResponse])
def list_users(users: UserService = Depends(get_user_service)):
    return users.list_users()


@router.post('/users/{user_id}/promote', response_model=AdminUserResponse)
def promote_user(user_id: int, users: UserService = Depends(get_user_service)):
    return users.set_role(user_id, UserRole.ADMIN)


@router.post('/users/{user_id}/demote', response_model=AdminUserResponse)
def demote_user(user_id: int, users: UserService = Depends(get_user_service)):
    return users.set_role(user_id, UserRole.USER)


@router.delete('/users/{user_id}', status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, users: UserService = Depends(get_user_service)):
    users.delete_user(user_id)
