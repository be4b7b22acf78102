"""Catalog storage — Storage protocol and the in-memory MemStorage."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from storefront_pipeline.models import (
    Category,
    Product,
    ProductImage,
    ProductVariant,
    StoreLocation,
)


_IMAGE_BASE = "https://images.example.com/products"

_PLATE_CARRIER_COLORS = (
    ("Black", "#232323"),
    ("Olive", "#5B5D43"),
    ("Coyote", "#79624A"),
    ("Gray", "#758283"),
)

_STORES: tuple[dict[str, Any], ...] = (
    {
        "name": "Luma Flagship Store",
        "slug": "luma-flagship-store",
        "address": "123 Tactical Avenue",
        "city": "New York",
        "state": "NY",
        "zip_code": "10001",
        "country": "USA",
        "phone": "+1 (212) 555-7890",
        "email": "flagship@lumatactical.com",
        "store_hours": "Mon-Sat: 9AM-8PM, Sun: 10AM-6PM",
        "latitude": 40.7128,
        "longitude": -74.0060,
    },
    {
        "name": "Luma West Coast",
        "slug": "luma-west-coast",
        "address": "456 Outdoor Blvd",
        "city": "Los Angeles",
        "state": "CA",
        "zip_code": "90001",
        "country": "USA",
        "phone": "+1 (310) 555-1234",
        "email": "westcoast@lumatactical.com",
        "store_hours": "Mon-Sat: 10AM-9PM, Sun: 11AM-7PM",
        "latitude": 34.0522,
        "longitude": -118.2437,
    },
    {
        "name": "Luma Texas",
        "slug": "luma-texas",
        "address": "789 Ranger Street",
        "city": "Austin",
        "state": "TX",
        "zip_code": "78701",
        "country": "USA",
        "phone": "+1 (512) 555-6789",
        "email": "texas@lumatactical.com",
        "store_hours": "Mon-Sat: 9AM-9PM, Sun: 11AM-6PM",
        "latitude": 30.2672,
        "longitude": -97.7431,
    },
    {
        "name": "Main Distribution Center",
        "slug": "main-distribution-center",
        "address": "1000 Logistics Way",
        "city": "Columbus",
        "state": "OH",
        "zip_code": "43219",
        "country": "USA",
        "phone": "+1 (614) 555-9000",
        "email": "warehouse@lumatactical.com",
        "store_hours": "Mon-Fri: 8AM-5PM",
        "latitude": 39.9612,
        "longitude": -82.9988,
    },
)


@runtime_checkable
class Storage(Protocol):
    """Storage handle consumed by the route layer."""

    async def get_categories(self) -> list[Category]: ...
    async def get_category_by_slug(self, slug: str) -> Category | None: ...
    async def create_category(self, name: str, slug: str, **fields: Any) -> Category: ...
    async def get_products(
        self,
        *,
        featured: bool | None = None,
        new_arrival: bool | None = None,
        best_seller: bool | None = None,
        category_id: int | None = None,
        limit: int | None = None,
    ) -> list[Product]: ...
    async def get_product_by_slug(self, slug: str) -> Product | None: ...
    async def create_product(
        self, name: str, slug: str, price: float, **fields: Any
    ) -> Product: ...
    async def get_product_images(self, product_id: int) -> list[ProductImage]: ...
    async def create_product_image(
        self, product_id: int, image_url: str, **fields: Any
    ) -> ProductImage: ...
    async def get_product_variants(self, product_id: int) -> list[ProductVariant]: ...
    async def create_product_variant(
        self, product_id: int, name: str, value: str, type: str, **fields: Any
    ) -> ProductVariant: ...
    async def get_store_locations(self) -> list[StoreLocation]: ...
    async def get_store_location_by_slug(self, slug: str) -> StoreLocation | None: ...
    async def create_store_location(
        self, name: str, slug: str, **fields: Any
    ) -> StoreLocation: ...


class MemStorage:
    """In-memory catalog store. Single-process only, nothing is persisted."""

    def __init__(self, *, seed: bool = True) -> None:
        self._categories: dict[int, Category] = {}
        self._products: dict[int, Product] = {}
        self._images: dict[int, ProductImage] = {}
        self._variants: dict[int, ProductVariant] = {}
        self._stores: dict[int, StoreLocation] = {}
        self._category_id = 1
        self._product_id = 1
        self._image_id = 1
        self._variant_id = 1
        self._store_id = 1
        if seed:
            self._seed()

    async def get_categories(self) -> list[Category]:
        return list(self._categories.values())

    async def get_category_by_slug(self, slug: str) -> Category | None:
        return next(
            (c for c in self._categories.values() if c.slug == slug), None
        )

    async def create_category(self, name: str, slug: str, **fields: Any) -> Category:
        return self._add_category(name, slug, **fields)

    async def get_products(
        self,
        *,
        featured: bool | None = None,
        new_arrival: bool | None = None,
        best_seller: bool | None = None,
        category_id: int | None = None,
        limit: int | None = None,
    ) -> list[Product]:
        products = list(self._products.values())
        if featured is not None:
            products = [p for p in products if p.featured == featured]
        if new_arrival is not None:
            products = [p for p in products if p.new_arrival == new_arrival]
        if best_seller is not None:
            products = [p for p in products if p.best_seller == best_seller]
        if category_id is not None:
            products = [p for p in products if p.category_id == category_id]
        if limit is not None:
            products = products[:limit]
        return products

    async def get_product_by_slug(self, slug: str) -> Product | None:
        return next((p for p in self._products.values() if p.slug == slug), None)

    async def create_product(
        self, name: str, slug: str, price: float, **fields: Any
    ) -> Product:
        return self._add_product(name, slug, price, **fields)

    async def get_product_images(self, product_id: int) -> list[ProductImage]:
        images = [i for i in self._images.values() if i.product_id == product_id]
        return sorted(images, key=lambda i: i.order)

    async def create_product_image(
        self, product_id: int, image_url: str, **fields: Any
    ) -> ProductImage:
        return self._add_image(product_id, image_url, **fields)

    async def get_product_variants(self, product_id: int) -> list[ProductVariant]:
        return [v for v in self._variants.values() if v.product_id == product_id]

    async def create_product_variant(
        self, product_id: int, name: str, value: str, type: str, **fields: Any
    ) -> ProductVariant:
        return self._add_variant(product_id, name, value, type, **fields)

    async def get_store_locations(self) -> list[StoreLocation]:
        return list(self._stores.values())

    async def get_store_location_by_slug(self, slug: str) -> StoreLocation | None:
        return next((s for s in self._stores.values() if s.slug == slug), None)

    async def create_store_location(
        self, name: str, slug: str, **fields: Any
    ) -> StoreLocation:
        return self._add_store(name, slug, **fields)

    def _seed(self) -> None:
        tactical = self._add_category(
            "Tactical Gear",
            "tactical-gear",
            description="Professional-grade equipment for tactical operations",
        )
        outdoor = self._add_category(
            "Outdoor Equipment",
            "outdoor-equipment",
            description="Durable gear for your wilderness adventures",
        )
        self._add_category(
            "Tactical Apparel",
            "tactical-apparel",
            description="Performance clothing for extreme conditions",
        )

        self._add_product(
            "XTR-5 Tactical Backpack",
            "xtr-5-tactical-backpack",
            189.99,
            category_id=tactical.id,
            featured=True,
            new_arrival=True,
            rating=4.5,
            review_count=42,
        )
        plate_carrier = self._add_product(
            "Alpha-7 Plate Carrier",
            "alpha-7-plate-carrier",
            249.99,
            category_id=tactical.id,
            featured=True,
            best_seller=True,
            rating=5.0,
            review_count=87,
        )
        self._add_product(
            "Summit Trail Boots",
            "summit-trail-boots",
            159.99,
            category_id=outdoor.id,
            best_seller=True,
            rating=4.0,
            review_count=19,
        )

        for order, view in enumerate(("Front", "Side", "Back", "Detail")):
            self._add_image(
                plate_carrier.id,
                f"{_IMAGE_BASE}/alpha-7-plate-carrier-{view.lower()}.jpg",
                alt_text=f"Alpha-7 Plate Carrier - {view} view",
                order=order,
            )
        for name, value in _PLATE_CARRIER_COLORS:
            self._add_variant(plate_carrier.id, name, value, "color")
        for size in ("S", "M", "L", "XL"):
            self._add_variant(plate_carrier.id, size, size, "size")

        for store in _STORES:
            self._add_store(**store)

    def _add_category(self, name: str, slug: str, **fields: Any) -> Category:
        category = Category(id=self._category_id, name=name, slug=slug, **fields)
        self._categories[category.id] = category
        self._category_id += 1
        return category

    def _add_product(
        self, name: str, slug: str, price: float, **fields: Any
    ) -> Product:
        product = Product(
            id=self._product_id, name=name, slug=slug, price=price, **fields
        )
        self._products[product.id] = product
        self._product_id += 1
        return product

    def _add_image(
        self, product_id: int, image_url: str, **fields: Any
    ) -> ProductImage:
        image = ProductImage(
            id=self._image_id, product_id=product_id, image_url=image_url, **fields
        )
        self._images[image.id] = image
        self._image_id += 1
        return image

    def _add_variant(
        self, product_id: int, name: str, value: str, type: str, **fields: Any
    ) -> ProductVariant:
        variant = ProductVariant(
            id=self._variant_id,
            product_id=product_id,
            name=name,
            value=value,
            type=type,
            **fields,
        )
        self._variants[variant.id] = variant
        self._variant_id += 1
        return variant

    def _add_store(self, name: str, slug: str, **fields: Any) -> StoreLocation:
        store = StoreLocation(id=self._store_id, name=name, slug=slug, **fields)
        self._stores[store.id] = store
        self._store_id += 1
        return store
