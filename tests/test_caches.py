"""Tests for the tagged disk cache and the digests used as its keys."""

from datetime import date
from decimal import Decimal

import pytest

from rwa_ui.lib import objects
from rwa_ui.lib.caches import DiskCache


@pytest.fixture
def cache(tmp_path):
    disk_cache = DiskCache(tmp_path / "cache")
    yield disk_cache
    disk_cache.close()


class TestDiskCache:
    def test_miss_then_hit(self, cache):
        calls = []

        def loader():
            calls.append(1)
            return {"rows": [1, 2]}

        first = cache.get_or_load("k", loader, expire=60)
        second = cache.get_or_load("k", loader, expire=60)

        assert not first.hit
        assert second.hit
        assert second.value == {"rows": [1, 2]}
        assert len(calls) == 1

    def test_zero_expire_bypasses_cache(self, cache):
        cache.get_or_load("k", lambda: "a", expire=0)
        entry = cache.get_or_load("k", lambda: "b", expire=60)
        assert entry.value == "b"
        assert not entry.hit

    def test_none_is_not_stored(self, cache):
        cache.get_or_load("k", lambda: None, expire=60)
        assert not cache.get_or_load("k", lambda: [], expire=60).hit

    def test_evict_only_drops_tagged_entries(self, cache):
        cache.get_or_load("page-1", lambda: [1], tag="markets")
        cache.get_or_load("page-2", lambda: [2], tag="markets")
        cache.get_or_load("other", lambda: [3], tag="batches")

        assert cache.evict("markets") == 2
        assert not cache.get_or_load("page-1", lambda: [9]).hit
        assert cache.get_or_load("other", lambda: [9]).value == [3]

    def test_delete_and_clear(self, cache):
        cache.get_or_load("a", lambda: 1)
        cache.get_or_load("b", lambda: 2)
        cache.delete("a")
        assert not cache.get_or_load("a", lambda: 3).hit
        cache.clear()
        assert cache.get_or_load("b", lambda: 4).value == 4


class TestKeys:
    def test_key_ignores_param_order(self):
        assert DiskCache.key("/token/markets", {"page": 1, "page_size": 10}) == DiskCache.key(
            "/token/markets", {"page_size": 10, "page": 1}
        )

    def test_key_separates_params(self):
        assert DiskCache.key("/token/markets", {"page": 1}) != DiskCache.key(
            "/token/markets", {"page": 2}
        )

    def test_digest_normalizes_decimals(self):
        assert objects.digest(Decimal("100")) == objects.digest(Decimal("100.00"))

    def test_canonical_json_encodes_domain_values(self):
        assert objects.canonical_json({"b": date(2027, 1, 15), "a": Decimal("5.50")}) == (
            '{"a":"5.5","b":"2027-01-15"}'
        )
