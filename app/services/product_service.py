import enum
import logging

from sqlalchemy.orm import Session

from app.core.errors import InvalidArgumentError, NotFoundError
from app.models.product import Headphone, Laptop, Mobile, ProductMixin
from app.schemas.product import ProductCreate

logger = logging.getLogger(__name__)


class ProductKind(str, enum.Enum):
    laptops = "laptops"
    mobiles = "mobiles"
    headphones = "headphones"


PRODUCT_MODELS: dict[ProductKind, type[ProductMixin]] = {
    ProductKind.laptops: Laptop,
    ProductKind.mobiles: Mobile,
    ProductKind.headphones: Headphone,
}


class ProductService:
    """CRUD over one retail catalog table."""

    def __init__(self, db: Session, model: type[ProductMixin]):
        self.db = db
        self.model = model

    @classmethod
    def for_kind(cls, db: Session, kind: ProductKind | str) -> "ProductService":
        return cls(db, PRODUCT_MODELS[ProductKind(kind)])

    def list_all(self) -> list:
        return self.db.query(self.model).order_by(self.model.id.asc()).all()

    def get(self, product_id: int):
        product = self.db.get(self.model, product_id)
        if product is None:
            raise NotFoundError(f"{self.model.__name__} not found")
        return product

    def create(self, payload: ProductCreate):
        if not payload.name or payload.cost <= 0 or payload.quantity <= 0:
            raise InvalidArgumentError("Invalid input parameters")

        product = self.model(
            name=payload.name,
            cost=payload.cost,
            quantity=payload.quantity,
            image=payload.image,
        )
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        logger.info("Saved %s: name=%s, cost=%s", self.model.__name__, product.name, product.cost)
        return product
