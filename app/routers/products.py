from fastapi import APIRouter, Depends, status

from app.core.auth_filter import Identity
from app.core.deps import get_product_service
from app.core.permissions import require_admin
from app.schemas.product import ProductCreate, ProductRead
from app.services.product_service import ProductKind, ProductService

router = APIRouter()


@router.get("/user/{kind}", response_model=list[ProductRead])
def list_products(kind: ProductKind, products: ProductService = Depends(get_product_service)):
    return products.list_all()


@router.get("/user/{kind}/{product_id}", response_model=ProductRead)
def get_product(
    kind: ProductKind,
    product_id: int,
    products: ProductService = Depends(get_product_service),
):
    return products.get(product_id)


@router.post(
    "/admin/upload/{kind}",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid input parameters"}},
)
def upload_product(
    kind: ProductKind,
    payload: ProductCreate,
    products: ProductService = Depends(get_product_service),
    admin: Identity = Depends(require_admin),
):
    return products.create(payload)
