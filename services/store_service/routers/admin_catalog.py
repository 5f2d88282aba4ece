"""Admin catalog router: product create, replace and delete."""

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status
from libs.auth.dependencies import require_admin
from libs.auth.models import AdminIdentity
from libs.common.errors import StoreError, ValidationError
from libs.db.session import get_async_db
from services.store_service.models import ProductCategory
from services.store_service.schemas import (
    MessageResponse,
    ProductCreatedResponse,
    ProductResponse,
)
from services.store_service.services import catalog as catalog_store
from services.store_service.services.catalog import ProductInput
from services.store_service.storage import (
    UploadStorage,
    get_upload_storage,
    resolve_image_source,
)
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(tags=["admin-store"])


def product_form(
    name: str = Form(..., min_length=1, max_length=255),
    category: ProductCategory = Form(...),
    price: Decimal = Form(..., ge=0),
    description: Optional[str] = Form(None),
    stock: int = Form(100, ge=0),
    best_seller: bool = Form(False),
    hover_image: Optional[str] = Form(None, alias="hoverImage"),
) -> ProductInput:
    return ProductInput(
        name=name,
        category=category,
        price=price,
        description=description or None,
        stock=stock,
        best_seller=best_seller,
        hover_image=hover_image or None,
    )


@router.post(
    "/products",
    response_model=ProductCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_product(
    request: Request,
    current_admin: AdminIdentity = Depends(require_admin),
    fields: ProductInput = Depends(product_form),
    image: Optional[UploadFile] = File(None),
    image_url: Optional[str] = Form(None, alias="imageUrl"),
    storage: UploadStorage = Depends(get_upload_storage),
    db: AsyncSession = Depends(get_async_db),
):
    """Create a product from an uploaded image or an image URL."""
    image_path, stored = await resolve_image_source(request, storage, image, image_url)
    if not image_path:
        raise ValidationError("An image file or imageUrl is required")

    try:
        product = await catalog_store.create_product(
            db, fields, image_path, performed_by=current_admin.email
        )
    except StoreError:
        storage.discard(stored)
        raise
    return ProductCreatedResponse(
        message="Product added successfully",
        id=product.id,
        product=ProductResponse.model_validate(product),
    )


@router.put("/products/{product_id}", response_model=MessageResponse)
async def update_product(
    product_id: int,
    request: Request,
    current_admin: AdminIdentity = Depends(require_admin),
    fields: ProductInput = Depends(product_form),
    image: Optional[UploadFile] = File(None),
    image_url: Optional[str] = Form(None, alias="imageUrl"),
    storage: UploadStorage = Depends(get_upload_storage),
    db: AsyncSession = Depends(get_async_db),
):
    """Replace a product. Omitting both image sources clears the image."""
    await catalog_store.get_product(db, product_id)

    image_path, stored = await resolve_image_source(request, storage, image, image_url)
    try:
        await catalog_store.update_product(
            db, product_id, fields, image_path, performed_by=current_admin.email
        )
    except StoreError:
        storage.discard(stored)
        raise
    return MessageResponse(message="Product updated successfully")


@router.delete("/products/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: int,
    current_admin: AdminIdentity = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """Delete a product. Deleting an unknown id also succeeds."""
    await catalog_store.delete_product(db, product_id, performed_by=current_admin.email)
    return MessageResponse(message="Product deleted successfully")
