"""Catalog routes registered against a FastAPI app and a Storage handle."""

from __future__ import annotations

from fastapi import APIRouter, FastAPI, Query

from storefront_pipeline.exceptions import NotFound
from storefront_pipeline.models import Category, Product, ProductDetail, StoreLocation
from storefront_pipeline.storage import Storage


def build_router(storage: Storage) -> APIRouter:
    """Return the catalog router bound to ``storage``."""
    router = APIRouter(tags=["catalog"])

    @router.get("/categories")
    async def list_categories() -> list[Category]:
        return await storage.get_categories()

    @router.get("/categories/{slug}")
    async def get_category(slug: str) -> Category:
        category = await storage.get_category_by_slug(slug)
        if category is None:
            raise NotFound("Category not found")
        return category

    @router.get("/products")
    async def list_products(
        featured: bool | None = None,
        new_arrival: bool | None = Query(None, alias="newArrival"),
        best_seller: bool | None = Query(None, alias="bestSeller"),
        category_id: int | None = Query(None, alias="categoryId"),
        limit: int | None = Query(None, ge=0),
    ) -> list[Product]:
        return await storage.get_products(
            featured=featured,
            new_arrival=new_arrival,
            best_seller=best_seller,
            category_id=category_id,
            limit=limit,
        )

    @router.get("/products/{slug}")
    async def get_product(slug: str) -> ProductDetail:
        product = await storage.get_product_by_slug(slug)
        if product is None:
            raise NotFound("Product not found")
        return ProductDetail.assemble(
            product,
            await storage.get_product_images(product.id),
            await storage.get_product_variants(product.id),
        )

    @router.get("/stores")
    async def list_stores() -> list[StoreLocation]:
        return await storage.get_store_locations()

    @router.get("/stores/{slug}")
    async def get_store(slug: str) -> StoreLocation:
        store = await storage.get_store_location_by_slug(slug)
        if store is None:
            raise NotFound("Store not found")
        return store

    return router


def register_routes(app: FastAPI, storage: Storage, *, prefix: str = "/api") -> None:
    """Mount the catalog routes on ``app`` under ``prefix``."""
    app.include_router(build_router(storage), prefix=prefix)
