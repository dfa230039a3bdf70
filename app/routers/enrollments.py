from fastapi import APIRouter, Depends, status

from app.core.deps import get_enrollment_service
from app.schemas.enrollment import EnrollmentCreate, EnrollmentOut
from app.schemas.user import StatusUpdate
from app.services.enrollment_service import EnrollmentService

router = APIRouter()


@router.get("", response_model=list[EnrollmentOut])
def list_enrollments(enrollments: EnrollmentService = Depends(get_enrollment_service)):
    return enrollments.list_all()


@router.post(
    "",
    response_model=EnrollmentOut,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "User or course not found, or invalid status"},
        409: {"description": "Already enrolled"},
    },
)
def enroll(
    payload: EnrollmentCreate,
    enrollments: EnrollmentService = Depends(get_enrollment_service),
):
    return enrollments.enroll(payload.user_id, payload.course_id, payload.status)


@router.get("/user/{user_id}", response_model=list[EnrollmentOut])
def enrollments_by_user(user_id: int, enrollments: EnrollmentService = Depends(get_enrollment_service)):
    return enrollments.list_by_user(user_id)


@router.get("/course/{course_id}", response_model=list[EnrollmentOut])
def enrollments_by_course(
    course_id: int,
    enrollments: EnrollmentService = Depends(get_enrollment_service),
):
    return enrollments.list_by_course(course_id)


@router.get("/{enrollment_id}", response_model=EnrollmentOut)
def get_enrollment(enrollment_id: int, enrollments: EnrollmentService = Depends(get_enrollment_service)):
    return enrollments.get(enrollment_id)


@router.put("/{enrollment_id}/status", response_model=EnrollmentOut)
def update_enrollment_status(
    enrollment_id: int,
    payload: StatusUpdate,
    enrollments: EnrollmentService = Depends(get_enrollment_service),
):
    return enrollments.update_status(enrollment_id, payload.status)


@router.delete("/{enrollment_id}")
def delete_enrollment(enrollment_id: int, enrollments: EnrollmentService = Depends(get_enrollment_service)):
    enrollments.delete(enrollment_id)
    return {"message": "Enrollment deleted successfully"}
