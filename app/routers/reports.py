from fastapi import APIRouter, Depends

from app.core.deps import get_report_service
from app.schemas.report import CourseStats, EnrollmentStats, RevenueStats, UserStats
from app.services.report_service import ReportService

router = APIRouter()


@router.get("/enrollments", response_model=EnrollmentStats)
def enrollment_report(reports: ReportService = Depends(get_report_service)):
    return reports.enrollment_stats()


@router.get("/users", response_model=UserStats)
def user_report(reports: ReportService = Depends(get_report_service)):
    return reports.user_stats()


@router.get("/courses", response_model=CourseStats)
def course_report(reports: ReportService = Depends(get_report_service)):
    return reports.course_stats()


@router.get("/revenue", response_model=RevenueStats)
def revenue_report(reports: ReportService = Depends(get_report_service)):
    return reports.revenue_stats()
