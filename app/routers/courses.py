from fastapi import APIRouter, Depends, status

from app.core.deps import get_course_service
from app.schemas.course import CourseCreate, CourseRead
from app.schemas.user import StatusUpdate
from app.services.course_service import CourseService

router = APIRouter()


@router.get("", response_model=list[CourseRead])
def list_courses(courses: CourseService = Depends(get_course_service)):
    return courses.list_all()


@router.post(
    "",
    response_model=CourseRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Instructor missing or not found"}},
)
def create_course(payload: CourseCreate, courses: CourseService = Depends(get_course_service)):
    return courses.create(payload)


@router.get("/instructor/{instructor_id}", response_model=list[CourseRead])
def courses_by_instructor(instructor_id: int, courses: CourseService = Depends(get_course_service)):
    return courses.list_by_instructor(instructor_id)


@router.get("/category/{category_id}", response_model=list[CourseRead])
def courses_by_category(category_id: int, courses: CourseService = Depends(get_course_service)):
    return courses.list_by_category(category_id)


@router.get("/status/{course_status}", response_model=list[CourseRead])
def courses_by_status(course_status: str, courses: CourseService = Depends(get_course_service)):
    return courses.list_by_status(course_status)


@router.get("/{course_id}", response_model=CourseRead)
def get_course(course_id: int, courses: CourseService = Depends(get_course_service)):
    return courses.get(course_id)


@router.put("/{course_id}", response_model=CourseRead)
def update_course(
    course_id: int,
    payload: CourseCreate,
    courses: CourseService = Depends(get_course_service),
):
    return courses.update(course_id, payload)


@router.put("/{course_id}/status", response_model=CourseRead)
def update_course_status(
    course_id: int,
    payload: StatusUpdate,
    courses: CourseService = Depends(get_course_service),
):
    return courses.update_status(course_id, payload.status)


@router.delete("/{course_id}")
def delete_course(course_id: int, courses: CourseService = Depends(get_course_service)):
    courses.delete(course_id)
    return {"message": "Course deleted successfully"}
