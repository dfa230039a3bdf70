import logging

from sqlalchemy.orm import Session

from app.core.errors import InvalidArgumentError, NotFoundError
from app.models.category import Category
from app.schemas.category import CategoryCreate

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> list[Category]:
        return self.db.query(Category).order_by(Category.id.asc()).all()

    def list_active(self) -> list[Category]:
        return self.db.query(Category).filter(Category.active.is_(True)).all()

    def get(self, category_id: int) -> Category:
        category = self.db.get(Category, category_id)
        if category is None:
            raise NotFoundError("Category not found")
        return category

    def create(self, payload: CategoryCreate) -> Category:
        if payload.name is None or not payload.name.strip():
            raise InvalidArgumentError("Category name is required")

        category = Category(
            name=payload.name,
            active=True if payload.active is None else payload.active,
        )
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)
        logger.info("Category created with ID: %s", category.id)
        return category

    def update(self, category_id: int, payload: CategoryCreate) -> Category:
        category = self.get(category_id)
        if payload.name is not None:
            if not payload.name.strip():
                raise InvalidArgumentError("Category name is required")
            category.name = payload.name
        if payload.active is not None:
            category.active = payload.active
        self.db.commit()
        self.db.refresh(category)
        return category

    def update_status(self, category_id: int, active: bool | None) -> Category:
        if active is None:
            raise InvalidArgumentError("Active status is required")
        category = self.get(category_id)
        category.active = active
        self.db.commit()
        self.db.refresh(category)
        return category

    def delete(self, category_id: int) -> None:
        category = self.db.get(Category, category_id)
        if category is None:
            return
        self.db.delete(category)
        self.db.commit()
