from sqlalchemy.orm import Session

from app.core.clock import utcnow
from app.core.errors import NotFoundError
from app.models.course import Course
from app.models.video import Video
from app.schemas.video import VideoCreate


class VideoService:
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> list[Video]:
        return self.db.query(Video).order_by(Video.id.asc()).all()

    def get(self, video_id: int) -> Video:
        video = self.db.get(Video, video_id)
        if video is None:
            raise NotFoundError(f"Video not found with id: {video_id}")
        return video

    def list_by_course(self, course_id: int) -> list[Video]:
        return self.db.query(Video).filter(Video.course_id == course_id).order_by(Video.id.asc()).all()

    def list_by_instructor(self, instructor_id: int) -> list[Video]:
        return (
            self.db.query(Video)
            .join(Course, Course.id == Video.course_id)
            .filter(Course.instructor_id == instructor_id)
            .order_by(Course.id.asc(), Video.id.asc())
            .all()
        )

    def _require_course(self, course_id: int) -> Course:
        course = self.db.get(Course, course_id)
        if course is None:
            raise NotFoundError(f"Course not found with id: {course_id}")
        return course

    def create(self, payload: VideoCreate) -> Video:
        course = self._require_course(payload.course_id)
        now = utcnow()
        video = Video(
            title=payload.title,
            description=payload.description,
            video_link=payload.video_link,
            notes_link=payload.notes_link,
            course_id=course.id,
            created_at=now,
            updated_at=now,
        )
        self.db.add(video)
        self.db.commit()
        self.db.refresh(video)
        return video

    def update(self, video_id: int, payload: VideoCreate) -> Video:
        video = self.get(video_id)
        course = self._require_course(payload.course_id)

        video.title = payload.title
        video.description = payload.description
        video.video_link = payload.video_link
        video.notes_link = payload.notes_link
        video.course_id = course.id
        video.updated_at = utcnow()

        self.db.commit()
        self.db.refresh(video)
        return video

    def delete(self, video_id: int) -> None:
        # unlike the other deletes, a missing video is an error
        video = self.get(video_id)
        self.db.delete(video)
        self.db.commit()
