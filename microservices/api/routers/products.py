"""
Product API endpoints.

Routes:
- POST /products - Create new product
- GET /products - List products, optionally by ?category=
- GET /products/category/{category} - List products in a category
- GET /products/{id} - Get single product
- PUT /products/{id} - Update product
- DELETE /products/{id} - Delete product

Dependencies: microservices.application.services, microservices.models
System role: Product catalog HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query

from microservices.api.deps import get_product_service
from microservices.application.services.product_service import ProductService
from microservices.models.common import ErrorResponse, MessageResponse
from microservices.models.product import (
    CreateProductRequest,
    ProductResponse,
    UpdateProductRequest,
)

from .router_utils import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/products",
    tags=["products"],
    responses={404: {"model": ErrorResponse, "description": "Product not found"}},
)


@router.post("", response_model=ProductResponse, status_code=201)
@handle_service_errors
async def create_product(
    request: CreateProductRequest,
    product_service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """
    Create new product.

    Args:
        request: CreateProductRequest with catalog fields
        product_service: Injected ProductService

    Returns:
        ProductResponse: Created product
    """
    logger.info("Creating new product", extra={"sku": request.sku, "category": request.category})
    product = await product_service.create_product(**request.model_dump())
    return ProductResponse(**product)


@router.get("", response_model=list[ProductResponse])
@handle_service_errors
async def list_products(
    category: str | None = Query(None, description="Case-insensitive category filter"),
    product_service: ProductService = Depends(get_product_service),
) -> list[ProductResponse]:
    """List products, optionally filtered by category."""
    products = await product_service.get_all_products(category=category)
    return [ProductResponse(**product) for product in products]


@router.get("/category/{category}", response_model=list[ProductResponse])
@handle_service_errors
async def list_products_by_category(
    category: str,
    product_service: ProductService = Depends(get_product_service),
) -> list[ProductResponse]:
    """List products in a category."""
    products = await product_service.get_products_by_category(category)
    return [ProductResponse(**product) for product in products]


@router.get("/{product_id}", response_model=ProductResponse)
@handle_service_errors
async def get_product(
    product_id: str,
    product_service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Get product by ID."""
    product = await product_service.get_product(product_id)
    return ProductResponse(**product)


@router.put("/{product_id}", response_model=ProductResponse)
@handle_service_errors
async def update_product(
    product_id: str,
    request: UpdateProductRequest,
    product_service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Update product fields present in the request body."""
    product = await product_service.update_product(
        product_id, **request.model_dump(exclude_unset=True)
    )
    return ProductResponse(**product)


@router.delete("/{product_id}", response_model=MessageResponse)
@handle_service_errors
async def delete_product(
    product_id: str,
    product_service: ProductService = Depends(get_product_service),
) -> MessageResponse:
    """Delete product by ID."""
    await product_service.delete_product(product_id)
    return MessageResponse(message=f"Product with ID {product_id} deleted successfully")
