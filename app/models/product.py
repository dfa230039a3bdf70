from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base_class import Base


class ProductMixin:
    """Columns shared by the retail catalog tables."""

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    cost: Mapped[int] = mapped_column(Integer, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    image: Mapped[str | None] = mapped_column(String(2083))


class Laptop(ProductMixin, Base):
    __tablename__ = "laptops"


class Mobile(ProductMixin, Base):
    __tablename__ = "mobiles"


class Headphone(ProductMixin, Base):
    __tablename__ = "headphones"
