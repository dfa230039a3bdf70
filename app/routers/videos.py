from fastapi import APIRouter, Depends, status

from app.core.deps import get_video_service
from app.schemas.video import VideoCreate, VideoRead
from app.services.video_service import VideoService

router = APIRouter()


@router.get("", response_model=list[VideoRead])
def list_videos(videos: VideoService = Depends(get_video_service)):
    return videos.list_all()


@router.post("", response_model=VideoRead, status_code=status.HTTP_201_CREATED)
def create_video(payload: VideoCreate, videos: VideoService = Depends(get_video_service)):
    return videos.create(payload)


@router.get("/course/{course_id}", response_model=list[VideoRead])
def videos_by_course(course_id: int, videos: VideoService = Depends(get_video_service)):
    return videos.list_by_course(course_id)


@router.get("/instructor/{instructor_id}", response_model=list[VideoRead])
def videos_by_instructor(instructor_id: int, videos: VideoService = Depends(get_video_service)):
    return videos.list_by_instructor(instructor_id)


@router.get("/{video_id}", response_model=VideoRead)
def get_video(video_id: int, videos: VideoService = Depends(get_video_service)):
    return videos.get(video_id)


@router.put("/{video_id}", response_model=VideoRead)
def update_video(video_id: int, payload: VideoCreate, videos: VideoService = Depends(get_video_service)):
    return videos.update(video_id, payload)


@router.delete("/{video_id}")
def delete_video(video_id: int, videos: VideoService = Depends(get_video_service)):
    videos.delete(video_id)
    return {"deleted": True}
