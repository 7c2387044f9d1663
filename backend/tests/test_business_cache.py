"""Unit tests for the business listing cache and its key helpers."""
import pytest

from app.cache import (
    BusinessCache,
    business_stats_key,
    categories_key,
    featured_businesses_key,
    random_businesses_key,
)
from conftest import FakeClock


class TestCacheKey:
    """Test cache key generation."""

    def test_featured_businesses_key(self):
        assert featured_businesses_key(10) == "featured_businesses_10"

    def test_random_businesses_key(self):
        assert random_businesses_key(9) == "random_businesses_9"

    def test_default_limit(self):
        assert featured_businesses_key() == "featured_businesses_10"
        assert random_businesses_key() == "random_businesses_10"

    def test_fixed_keys(self):
        assert categories_key() == "categories_all"
        assert business_stats_key() == "business_stats"


class TestBusinessCache:

    def setup_method(self):
        self.clock = FakeClock()
        self.cache = BusinessCache(clock=self.clock)
        self.featured = [
            {"id": 1, "name": "Harbor Cafe", "featured": True},
            {"id": 4, "name": "Elm Street Dental", "featured": True},
        ]

    def test_featured_round_trip(self):
        self.cache.set_featured_businesses(self.featured, 10)
        assert self.cache.get_featured_businesses(10) == self.featured

    def test_featured_limit_is_part_of_key(self):
        self.cache.set_featured_businesses(self.featured, 10)
        assert self.cache.get_featured_businesses(20) is None

    def test_featured_default_limit(self):
        self.cache.set_featured_businesses(self.featured)
        assert self.cache.get_featured_businesses() == self.featured
        assert self.cache.get("featured_businesses_10") == self.featured

    def test_featured_ttl_is_five_minutes(self):
        self.cache.set_featured_businesses(self.featured, 6)
        self.clock.advance(299)
        assert self.cache.get_featured_businesses(6) == self.featured
        self.clock.advance(2)
        assert self.cache.get_featured_businesses(6) is None

    def test_random_ttl_is_two_minutes(self):
        self.cache.set_random_businesses([{"id": 7}], 9)
        self.clock.advance(119)
        assert self.cache.get_random_businesses(9) == [{"id": 7}]
        self.clock.advance(2)
        assert self.cache.get_random_businesses(9) is None

    def test_categories_and_stats_ttls(self):
        self.cache.set_categories([{"id": 1, "name": "Food"}])
        self.cache.set_business_stats({"total_businesses": 3})

        self.clock.advance(601)
        assert self.cache.get_categories() is None
        assert self.cache.get_business_stats() == {"total_businesses": 3}

        self.clock.advance(300)
        assert self.cache.get_business_stats() is None

    def test_invalidate_business_caches(self):
        self.cache.set_featured_businesses(self.featured, 6)
        self.cache.set_featured_businesses(self.featured, 10)
        self.cache.set_random_businesses([{"id": 7}], 9)
        self.cache.set_categories([{"id": 1}])
        self.cache.set("unrelated_key", "keep me", 60)

        removed = self.cache.invalidate_business_caches()

        assert removed == 3
        assert self.cache.get_featured_businesses(6) is None
        assert self.cache.get_featured_businesses(10) is None
        assert self.cache.get_random_businesses(9) is None
        assert self.cache.get_categories() == [{"id": 1}]
        assert self.cache.get("unrelated_key") == "keep me"

    def test_ttl_table_is_read_only(self):
        with pytest.raises(TypeError):
            BusinessCache.CACHE_TTLS["FEATURED_BUSINESSES"] = 1
        assert self.cache.CACHE_TTLS["FEATURED_BUSINESSES"] == 300

    def test_invalidate_on_empty_cache(self):
        assert self.cache.invalidate_business_caches() == 0

    def test_generic_primitives_still_available(self):
        self.cache.set("custom", {"a": 1}, 5)
        assert self.cache.has("custom")
        self.cache.delete("custom")
        assert not self.cache.has("custom")

    def test_cleanup_mixes_listing_types(self):
        self.cache.set_featured_businesses(self.featured, 6)
        self.cache.set_random_businesses([{"id": 7}], 9)

        self.clock.advance(150)
        assert self.cache.cleanup() == 1
        assert self.cache.keys() == ["featured_businesses_6"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
