from app.schemas.base import CamelModel


class ProductCreate(CamelModel):
    name: str | None = None
    cost: int = 0
    quantity: int = 0
    image: str | None = None


class ProductRead(CamelModel):
    id: int
    name: str
    cost: int
    quantity: int
    image: str | None = None
