from datetime import datetime

from pydantic import Field

from app.schemas.base import CamelModel


class VideoCreate(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    video_link: str = Field(min_length=1, max_length=2083)
    notes_link: str | None = Field(default=None, max_length=2083)
    course_id: int


class VideoRead(CamelModel):
    id: int
    title: str
    description: str | None = None
    video_link: str
    notes_link: str | None = None
    course_id: int
    created_at: datetime
    updated_at: datetime | None = None
