"""Catalog records served by the storefront API.

Fields are snake_case in Python and camelCase on the wire, matching the
query parameters the client sends (``newArrival``, ``categoryId``).
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CatalogModel(BaseModel):
    """Immutable record serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class Category(CatalogModel):
    id: int
    name: str
    slug: str
    description: str | None = None
    image_url: str | None = None


class Product(CatalogModel):
    id: int
    name: str
    slug: str
    price: float
    description: str | None = None
    sale_price: float | None = None
    category_id: int | None = None
    in_stock: bool = True
    rating: float = 0.0
    review_count: int = 0
    featured: bool = False
    new_arrival: bool = False
    best_seller: bool = False
    main_image: str | None = None
    created_at: datetime = Field(default_factory=_utcnow)


class ProductImage(CatalogModel):
    id: int
    product_id: int
    image_url: str
    alt_text: str | None = None
    order: int = 0


VariantType = Literal["color", "size"]


class ProductVariant(CatalogModel):
    id: int
    product_id: int
    name: str
    value: str
    type: VariantType
    in_stock: bool = True


class ProductDetail(Product):
    """A product with its gallery and variants grouped by type."""

    images: list[ProductImage] = Field(default_factory=list)
    color_variants: list[ProductVariant] = Field(default_factory=list)
    size_variants: list[ProductVariant] = Field(default_factory=list)

    @classmethod
    def assemble(
        cls,
        product: Product,
        images: list[ProductImage],
        variants: list[ProductVariant],
    ) -> ProductDetail:
        return cls(
            **product.model_dump(),
            images=images,
            color_variants=[v for v in variants if v.type == "color"],
            size_variants=[v for v in variants if v.type == "size"],
        )


class StoreLocation(CatalogModel):
    id: int
    name: str
    slug: str
    address: str
    city: str
    state: str
    zip_code: str
    country: str
    phone: str | None = None
    email: str | None = None
    store_hours: str | None = None
    active: bool = True
    latitude: float | None = None
    longitude: float | None = None
    created_at: datetime = Field(default_factory=_utcnow)
