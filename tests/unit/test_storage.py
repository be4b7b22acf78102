"""Tests for the in-memory catalog storage."""

from __future__ import annotations

from storefront_pipeline.storage import MemStorage, Storage


class TestStorageProtocol:
    def test_mem_storage_conforms(self) -> None:
        assert isinstance(MemStorage(), Storage)


class TestCategories:
    async def test_seeded_categories(self, storage: MemStorage) -> None:
        slugs = [c.slug for c in await storage.get_categories()]
        assert slugs == ["tactical-gear", "outdoor-equipment", "tactical-apparel"]

    async def test_get_by_slug(self, storage: MemStorage) -> None:
        category = await storage.get_category_by_slug("outdoor-equipment")
        assert category is not None
        assert category.name == "Outdoor Equipment"

    async def test_missing_slug(self, storage: MemStorage) -> None:
        assert await storage.get_category_by_slug("nope") is None

    async def test_create_assigns_incrementing_ids(self) -> None:
        storage = MemStorage(seed=False)
        first = await storage.create_category("Optics", "optics")
        second = await storage.create_category("Knives", "knives", description="Edged")
        assert (first.id, second.id) == (1, 2)
        assert second.description == "Edged"
        assert await storage.get_categories() == [first, second]


class TestProducts:
    async def test_unfiltered(self, storage: MemStorage) -> None:
        assert len(await storage.get_products()) == 3

    async def test_featured_filter(self, storage: MemStorage) -> None:
        products = await storage.get_products(featured=True)
        assert {p.slug for p in products} == {
            "xtr-5-tactical-backpack",
            "alpha-7-plate-carrier",
        }

    async def test_false_filter_matches_false(self, storage: MemStorage) -> None:
        products = await storage.get_products(new_arrival=False)
        assert all(not p.new_arrival for p in products)
        assert len(products) == 2

    async def test_category_and_limit(self, storage: MemStorage) -> None:
        tactical = await storage.get_category_by_slug("tactical-gear")
        assert tactical is not None
        products = await storage.get_products(category_id=tactical.id, limit=1)
        assert [p.slug for p in products] == ["xtr-5-tactical-backpack"]

    async def test_best_seller_filter(self, storage: MemStorage) -> None:
        products = await storage.get_products(best_seller=True)
        assert len(products) == 2

    async def test_get_by_slug(self, storage: MemStorage) -> None:
        product = await storage.get_product_by_slug("summit-trail-boots")
        assert product is not None
        assert product.price == 159.99

    async def test_create_product(self) -> None:
        storage = MemStorage(seed=False)
        product = await storage.create_product("Compass", "compass", 24.5, featured=True)
        assert product.id == 1
        assert product.featured is True
        assert product.rating == 0.0
        assert await storage.get_product_by_slug("compass") == product


class TestProductMedia:
    async def test_images_sorted_by_order(self) -> None:
        storage = MemStorage(seed=False)
        product = await storage.create_product("Compass", "compass", 24.5)
        await storage.create_product_image(product.id, "b.jpg", order=1)
        await storage.create_product_image(product.id, "a.jpg", alt_text="Top", order=0)
        await storage.create_product_image(product.id + 1, "other.jpg")
        images = await storage.get_product_images(product.id)
        assert [i.image_url for i in images] == ["a.jpg", "b.jpg"]
        assert images[0].alt_text == "Top"

    async def test_seeded_plate_carrier(self, storage: MemStorage) -> None:
        product = await storage.get_product_by_slug("alpha-7-plate-carrier")
        assert product is not None
        images = await storage.get_product_images(product.id)
        assert [i.alt_text for i in images] == [
            "Alpha-7 Plate Carrier - Front view",
            "Alpha-7 Plate Carrier - Side view",
            "Alpha-7 Plate Carrier - Back view",
            "Alpha-7 Plate Carrier - Detail view",
        ]
        variants = await storage.get_product_variants(product.id)
        assert [(v.name, v.type) for v in variants if v.type == "color"] == [
            ("Black", "color"),
            ("Olive", "color"),
            ("Coyote", "color"),
            ("Gray", "color"),
        ]
        assert [v.value for v in variants if v.type == "size"] == ["S", "M", "L", "XL"]

    async def test_product_without_media(self, storage: MemStorage) -> None:
        product = await storage.get_product_by_slug("summit-trail-boots")
        assert product is not None
        assert await storage.get_product_images(product.id) == []
        assert await storage.get_product_variants(product.id) == []

    async def test_create_variant_defaults_in_stock(self) -> None:
        storage = MemStorage(seed=False)
        variant = await storage.create_product_variant(1, "Tan", "#C2B280", "color")
        assert variant.id == 1
        assert variant.in_stock is True
        assert await storage.get_product_variants(1) == [variant]


class TestStoreLocations:
    async def test_seeded_stores(self, storage: MemStorage) -> None:
        slugs = [s.slug for s in await storage.get_store_locations()]
        assert slugs == [
            "luma-flagship-store",
            "luma-west-coast",
            "luma-texas",
            "main-distribution-center",
        ]

    async def test_get_by_slug(self, storage: MemStorage) -> None:
        store = await storage.get_store_location_by_slug("luma-west-coast")
        assert store is not None
        assert (store.city, store.state, store.zip_code) == ("Los Angeles", "CA", "90001")
        assert store.active is True

    async def test_missing_slug(self, storage: MemStorage) -> None:
        assert await storage.get_store_location_by_slug("nope") is None

    async def test_create_store(self) -> None:
        storage = MemStorage(seed=False)
        store = await storage.create_store_location(
            "Pop-up",
            "pop-up",
            address="1 Market St",
            city="Denver",
            state="CO",
            zip_code="80202",
            country="USA",
        )
        assert store.id == 1
        assert store.phone is None
        assert await storage.get_store_locations() == [store]
