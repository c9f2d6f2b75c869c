"""
==============================================================================
Search Tests
==============================================================================

Tests for the linear-scan and indexed search strategies, including their
equivalence on generated catalogs.

==============================================================================
"""

import itertools
import random

import pytest

from catalog_search.catalog import (
    Product,
    SearchQuery,
    build_index,
    compare_strategies,
    scan,
    search_indexed,
)


def names(results):
    return [p.name for p in results]


class TestSampleCatalog:
    """Scenario queries against the four-product sample."""

    @pytest.mark.parametrize("search", ["scan", "indexed"])
    @pytest.mark.parametrize(
        "criteria, expected",
        [
            (("Laptop", "", ""), ["Laptop"]),
            (("", "Electronics", ""), ["Laptop", "Smartphone"]),
            (("", "", "C"), ["Chair", "Table"]),
            (("Laptop", "Electronics", "A"), ["Laptop"]),
            (("Tablet", "", ""), []),
            (("", "Furniture", "C"), ["Chair", "Table"]),
            (("a", "Furniture", ""), ["Chair", "Table"]),
        ],
    )
    def test_queries(self, index, search, criteria, expected):
        """Test both strategies return the expected products in order."""
        if search == "scan":
            results = scan(index.catalog, *criteria)
        else:
            results = search_indexed(index, *criteria)
        assert names(results) == expected

    def test_all_absent_returns_nothing(self, index):
        """Test a query without criteria matches no product."""
        assert scan(index.catalog, "", "", "") == []
        assert search_indexed(index, "", "", "") == []
        assert search_indexed(index, SearchQuery()) == []

    def test_none_is_absent(self, index):
        """Test None criteria impose no constraint."""
        query = SearchQuery(name=None, category="Furniture", brand=None)
        assert names(search_indexed(index, query)) == ["Chair", "Table"]

    def test_substring_match(self, index):
        """Test name criterion uses containment, not prefix or equality."""
        assert names(scan(index.catalog, "top")) == ["Laptop"]
        assert names(search_indexed(index, "top")) == ["Laptop"]

    def test_name_is_case_sensitive(self, index):
        """Test name matching respects case."""
        assert search_indexed(index, "laptop") == []

    def test_unknown_category_short_circuits(self, index):
        """Test an unknown category yields nothing regardless of other criteria."""
        assert search_indexed(index, "Laptop", "Nonexistent", "A") == []
        assert scan(index.catalog, "Laptop", "Nonexistent", "A") == []

    def test_unknown_brand_short_circuits(self, index):
        """Test an unknown brand yields nothing."""
        assert search_indexed(index, "", "Electronics", "Z") == []

    def test_disjoint_criteria(self, index):
        """Test criteria that no single product satisfies."""
        assert search_indexed(index, "", "Electronics", "C") == []

    def test_category_only_is_exact(self, index):
        """Test category matching requires the full value."""
        assert search_indexed(index, "", "Electronic", "") == []

    def test_results_are_catalog_records(self, index):
        """Test results reference the stored products instead of copies."""
        result = search_indexed(index, "", "Furniture", "")
        assert result[0] is index.catalog[2]
        assert result[1] is index.catalog[3]

    def test_query_object_and_strings_agree(self, index):
        """Test a SearchQuery and positional strings give the same results."""
        query = SearchQuery(name="a", category="Electronics")
        assert scan(index.catalog, query) == scan(index.catalog, "a", "Electronics")

    @pytest.mark.parametrize("extra", [("Nope", ""), ("", "A"), ("Nope", "A")])
    def test_query_object_rejects_extra_criteria(self, index, extra):
        """Test category or brand alongside a SearchQuery is refused."""
        query = SearchQuery(name="Lap")
        with pytest.raises(TypeError):
            scan(index.catalog, query, *extra)
        with pytest.raises(TypeError):
            search_indexed(index, query, *extra)
        with pytest.raises(TypeError):
            compare_strategies(index, query, *extra)


class TestDuplicates:
    """Identical records at different positions."""

    def test_duplicates_each_returned(self):
        """Test each occurrence of a matching duplicate is returned."""
        lamp = Product(name="Lamp", category="Lighting", brand="L")
        desk = Product(name="Desk", category="Furniture", brand="L")
        index = build_index([lamp, desk, lamp])

        assert search_indexed(index, "", "Lighting", "") == [lamp, lamp]
        assert scan(index.catalog, "", "Lighting", "") == [lamp, lamp]
        assert names(search_indexed(index, "", "", "L")) == ["Lamp", "Desk", "Lamp"]


class TestEmptyValues:
    """Empty attribute values cannot be targeted by a criterion."""

    def test_empty_brand_not_queryable(self):
        """Test an empty brand is indexed but cannot be searched for."""
        index = build_index([Product(name="Mystery", category="Misc", brand="")])
        assert "" in index.by_brand
        assert search_indexed(index, "", "", "") == []
        assert names(search_indexed(index, "", "Misc", "")) == ["Mystery"]

    def test_empty_catalog(self):
        """Test searching an empty catalog returns nothing."""
        index = build_index([])
        assert scan(index.catalog, "a", "b", "c") == []
        assert search_indexed(index, "a", "b", "c") == []


class TestEquivalence:
    """Indexed search must return exactly what the scan returns."""

    NAMES = ["Laptop", "Lap", "Desk", "Desk Lamp", "Tablet", "Pad"]
    CATEGORIES = ["Electronics", "Furniture", "Office", ""]
    BRANDS = ["A", "B", "C", ""]

    def _catalog(self, rng, size):
        return [
            Product(
                name=rng.choice(self.NAMES),
                category=rng.choice(self.CATEGORIES),
                brand=rng.choice(self.BRANDS),
            )
            for _ in range(size)
        ]

    @pytest.mark.parametrize("seed", range(12))
    def test_generated_catalogs(self, seed):
        """Test both strategies agree on every query over a random catalog."""
        rng = random.Random(seed)
        catalog = self._catalog(rng, rng.randint(0, 25))
        index = build_index(catalog)

        name_terms = ["", "Lap", "a", "Desk", "k L", "Phone", "Laptop"]
        categories = self.CATEGORIES + ["Toys"]
        brands = self.BRANDS + ["Z"]

        for name, category, brand in itertools.product(name_terms, categories, brands):
            expected = scan(catalog, name, category, brand)
            assert search_indexed(index, name, category, brand) == expected, (name, category, brand)

    def test_compare_strategies_reports_consistency(self, index):
        """Test the comparison pairs both results and flags agreement."""
        comparison = compare_strategies(index, "", "Furniture", "")
        assert comparison.consistent
        assert names(comparison.scan_results) == ["Chair", "Table"]
        assert comparison.indexed_results[0] is index.catalog[2]

        data = comparison.model_dump()
        assert data["consistent"] is True
        assert data["query"] == {"name": "", "category": "Furniture", "brand": ""}
        assert len(data["indexed_results"]) == 2
