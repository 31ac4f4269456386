"""Application tests for ProductRepository queries."""

import json

import pytest
from products.product.creation import InsertProducts
from products.product.product import Product
from products.utils import settings
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain


def _insert(*entities):
    return current_domain.process(InsertProducts(entities=json.dumps(list(entities))), asynchronous=False)


@pytest.fixture()
def repo():
    return current_domain.repository_for(Product)


@pytest.fixture()
def sample_products():
    return _insert(
        {"name": "Samsung Galaxy S10 Plus", "quantity": 10, "price": 704},
        {"name": "iPhone 11 Pro", "quantity": 25, "price": 999},
        {"name": "Huawei P30 Pro", "quantity": 15, "price": 679},
    )


class TestList:
    def test_envelope(self, repo, sample_products):
        result = repo.list()

        assert result["total"] == 3
        assert result["page"] == 1
        assert result["pageSize"] == settings.PAGE_SIZE
        assert result["totalPages"] == 1
        assert len(result["rows"]) == 3

    def test_default_sort_is_by_name(self, repo, sample_products):
        names = [p.name for p in repo.list()["rows"]]
        assert names == sorted(names)

    def test_sort_descending_by_price(self, repo, sample_products):
        prices = [p.price for p in repo.list(sort="-price")["rows"]]
        assert prices == [999, 704, 679]

    def test_pagination(self, repo, sample_products):
        first = repo.list(page=1, page_size=2, sort="quantity")
        second = repo.list(page=2, page_size=2, sort="quantity")

        assert [p.quantity for p in first["rows"]] == [10, 15]
        assert [p.quantity for p in second["rows"]] == [25]
        assert first["totalPages"] == 2

    def test_page_past_the_end_is_empty(self, repo, sample_products):
        result = repo.list(page=5, page_size=2)
        assert result["rows"] == []
        assert result["total"] == 3

    def test_empty_collection(self, repo):
        result = repo.list()
        assert result["total"] == 0
        assert result["totalPages"] == 0

    def test_page_below_one_rejected(self, repo):
        with pytest.raises(ValidationError):
            repo.list(page=0)

    def test_page_size_above_maximum_rejected(self, repo):
        with pytest.raises(ValidationError):
            repo.list(page_size=settings.MAX_PAGE_SIZE + 1)

    def test_unknown_sort_field_rejected(self, repo):
        with pytest.raises(ValidationError) as exc:
            repo.list(sort="colour")
        assert "sort" in exc.value.messages


class TestFind:
    def test_search_is_case_insensitive(self, repo, sample_products):
        found = repo.find(search="PRO")
        assert {p.name for p in found} == {"iPhone 11 Pro", "Huawei P30 Pro"}

    def test_no_search_returns_everything(self, repo, sample_products):
        assert len(repo.find()) == 3

    def test_limit_and_offset(self, repo, sample_products):
        found = repo.find(limit=1, offset=1, sort="price")
        assert [p.price for p in found] == [704]

    def test_no_match(self, repo, sample_products):
        assert repo.find(search="Nokia") == []


class TestCount:
    def test_counts_all(self, repo, sample_products):
        assert repo.count() == 3

    def test_counts_matching(self, repo, sample_products):
        assert repo.count(search="galaxy") == 1

    def test_empty(self, repo):
        assert repo.count() == 0


class TestIncrementQuantity:
    def test_increment_persists(self, repo, sample_products):
        product_id = sample_products[0]["_id"]
        repo.increment_quantity(product_id, 3)
        assert repo.get(product_id).quantity == 13

    def test_zero_delta_rejected(self, repo, sample_products):
        product_id = sample_products[0]["_id"]
        with pytest.raises(ValidationError):
            repo.increment_quantity(product_id, 0)
        assert repo.get(product_id).quantity == 10
