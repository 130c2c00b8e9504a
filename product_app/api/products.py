"""
Products API Endpoints
CRUD over the products table

Error responses carry a single errorDescription field.
"""
from fastapi import APIRouter, Body, Depends, Query, Request, Response
from fastapi.responses import JSONResponse
from typing import Optional, List
from pydantic import BaseModel, Field

from product_app.core.exceptions import ProductAppError
from product_app.domain.product import Product, ProductCreate, ProductUpdate
from product_app.repositories.product_repository import ProductRepository
from product_app.services.product_service import ProductService

router = APIRouter()


# Response models
class ProductResponse(BaseModel):
    id: int
    name: str
    price: float
    discount: float
    store: str

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            discount=product.discount,
            store=product.store,
        )


class ErrorResponse(BaseModel):
    error_description: str = Field(..., serialization_alias="errorDescription")


def error_response(status_code: int, message: str) -> JSONResponse:
    """JSON error body with a one-line description"""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error_description=message).model_dump(by_alias=True),
    )


def get_product_service(request: Request) -> ProductService:
    """FastAPI dependency: service bound to the application's connection pool"""
    return ProductService(ProductRepository(request.app.state.db_pool))


def parse_product_id(raw_id: str) -> int:
    """Path ids that aren't integers are treated as 0, which never matches a row"""
    try:
        return int(raw_id)
    except ValueError:
        return 0


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_product_by_id(product_id: str, service: ProductService = Depends(get_product_service)):
    """Get a single product by id"""
    try:
        product = service.get_product_by_id(parse_product_id(product_id))
    except ProductAppError as e:
        return error_response(404, e.message)

    return ProductResponse.from_product(product)


@router.get("", response_model=List[ProductResponse])
def get_all_products(
    store: Optional[str] = Query(None, description="Filter by exact store name"),
    service: ProductService = Depends(get_product_service),
):
    """
    Get all products, optionally only those of one store

    Always succeeds; a failing query yields an empty list.
    """
    if store:
        products = service.get_all_products_by_store(store)
    else:
        products = service.get_all_products()

    return [ProductResponse.from_product(product) for product in products]


@router.post(
    "",
    status_code=201,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
def add_product(
    product: Optional[ProductCreate] = Body(None),
    service: ProductService = Depends(get_product_service),
):
    """
    Create a product; the response body is empty

    An empty body binds to a product with every field at its zero value,
    the same as a body with every field missing.
    """
    try:
        service.add_product(product if product is not None else ProductCreate())
    except ProductAppError as e:
        return error_response(422, e.message)

    return Response(status_code=201)


@router.put(
    "",
    status_code=204,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
def update_product(
    product: Optional[ProductUpdate] = Body(None),
    service: ProductService = Depends(get_product_service),
):
    """Update the non-empty fields of a product; the response body is empty"""
    try:
        service.update_product(product if product is not None else ProductUpdate())
    except ProductAppError as e:
        return error_response(422, e.message)

    return Response(status_code=204)


@router.delete(
    "/{product_id}",
    status_code=204,
    responses={404: {"model": ErrorResponse}},
)
def delete_product_by_id(product_id: str, service: ProductService = Depends(get_product_service)):
    """Delete a product by id; the response body is empty"""
    try:
        service.delete_product_by_id(parse_product_id(product_id))
    except ProductAppError as e:
        return error_response(404, e.message)

    return Response(status_code=204)
