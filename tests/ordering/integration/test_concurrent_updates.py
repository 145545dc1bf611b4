"""Optimistic concurrency: a copy loaded before someone else's save cannot overwrite it."""

import json

import pytest
from catalogue.product.product import Product, load_product
from ordering.order.creation import PlaceOrder
from protean.exceptions import ExpectedVersionError
from protean.utils.globals import current_domain


@pytest.fixture()
def product_id(make_product):
    return make_product(name="Laptop", price=10.00, quantity_in_stock=10)


class TestStaleCopies:
    def test_second_writer_of_the_same_version_loses(self, product_id):
        repo = current_domain.repository_for(Product)
        stale = repo.get(product_id)
        fresh = repo.get(product_id)
        seen_version = stale._version

        fresh.restock(5)
        repo.add(fresh)

        stale.withdraw(2)
        with pytest.raises(ExpectedVersionError):
            repo.add(stale)

        product = load_product(product_id)
        assert product.quantity_in_stock == 15
        assert product._version == seen_version + 1

    def test_stale_copy_cannot_undo_an_order(self, product_id):
        stale = load_product(product_id)

        current_domain.process(
            PlaceOrder(
                guest_name="Ada",
                guest_email="ada@example.com",
                items=json.dumps([{"product_id": product_id, "quantity": 8}]),
            ),
            asynchronous=False,
        )

        stale.withdraw(5)
        with pytest.raises(ExpectedVersionError):
            current_domain.repository_for(Product).add(stale)

        assert load_product(product_id).quantity_in_stock == 2
