from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from learning_backend.auth.dependencies import get_current_user
from learning_backend.models.user import User
from learning_backend.schemas import CourseResponse, EnrollmentResponse, PurchasedCourseResponse
from learning_backend.services.course_service import CourseService
from learning_backend.services.enrollment_service import EnrollmentService, PurchasedCourse
from learning_backend.services.providers import get_course_service, get_enrollment_service

router = APIRouter(tags=['courses'])


class ProgressRequest(BaseModel):
    progress: int


def to_purchased_response(item: PurchasedCourse) -> PurchasedCourseResponse:
    course = item.course
    return PurchasedCourseResponse(
        id=course.id,
        title=course.title,
        description=course.description,
        price=course.price,
        rating=course.rating,
        instructor=course.instructor,
        level=course.level,
        icon=course.icon,
        category=course.category,
        youtube_playlist_id=course.youtube_playlist_id,
        progress=item.enrollment.progress,
        last_accessed=item.enrollment.last_accessed,
    )


@router.get('', response_model=list[CourseResponse])
def list_courses(catalog: CourseService = Depends(get_course_service)):
    return catalog.list_courses()


@router.get('/category/{category}', response_model=list[CourseResponse])
def list_courses_by_category(category: str, catalog: CourseService = Depends(get_course_service)):
    return catalog.list_by_category(category)


@router.get('/search', response_model=list[CourseResponse])
def search_courses(
    query: str = Query(default=''),
    catalog: CourseService = Depends(get_course_service),
):
    return catalog.search(query)


@router.get('/purchased', response_model=list[PurchasedCourseResponse])
def list_purchased_courses(
    current_user: User = Depends(get_current_user),
    enrollments: EnrollmentService = Depends(get_enrollment_service),
):
    return [to_purchased_response(item) for item in enrollments.list_purchased(current_user.id)]


@router.post('/{course_id}/purchase', response_model=EnrollmentResponse, status_code=status.HTTP_201_CREATED)
def purchase_course(
    course_id: int,
    current_user: User = Depends(get_current_user),
    enrollments: EnrollmentService = Depends(get_enrollment_service),
):
    return enrollments.purchase(current_user.id, course_id)


@router.put('/{course_id}/progress', response_model=EnrollmentResponse)
def update_course_progress(
    course_id: int,
    data: ProgressRequest,
    current_user: User = Depends(get_current_user),
    enrollments: EnrollmentService = Depends(get_enrollment_service),
):
    return enrollments.update_progress(current_user.id, course_id, data.progress)
