from fastapi import APIRouter, Depends, status

from app.core.deps import get_category_service
from app.schemas.category import CategoryCreate, CategoryRead, CategoryStatusUpdate
from app.services.category_service import CategoryService

router = APIRouter()


@router.get("", response_model=list[CategoryRead])
def list_categories(categories: CategoryService = Depends(get_category_service)):
    return categories.list_all()


@router.get("/active", response_model=list[CategoryRead])
def list_active_categories(categories: CategoryService = Depends(get_category_service)):
    return categories.list_active()


@router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
def create_category(
    payload: CategoryCreate,
    categories: CategoryService = Depends(get_category_service),
):
    return categories.create(payload)


@router.get("/{category_id}", response_model=CategoryRead)
def get_category(category_id: int, categories: CategoryService = Depends(get_category_service)):
    return categories.get(category_id)


@router.put("/{category_id}", response_model=CategoryRead)
def update_category(
    category_id: int,
    payload: CategoryCreate,
    categories: CategoryService = Depends(get_category_service),
):
    return categories.update(category_id, payload)


@router.put("/{category_id}/status", response_model=CategoryRead)
def update_category_status(
    category_id: int,
    payload: CategoryStatusUpdate,
    categories: CategoryService = Depends(get_category_service),
):
    return categories.update_status(category_id, payload.active)


@router.delete("/{category_id}")
def delete_category(category_id: int, categories: CategoryService = Depends(get_category_service)):
    categories.delete(category_id)
    return {"message": "Category deleted successfully"}
