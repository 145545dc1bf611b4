"""Application tests for the dashboard overview."""

import json

from ordering.order.creation import PlaceOrder
from protean.utils.globals import current_domain
from reporting.overview import RECENT_ORDER_COUNT, build_overview


def _place(product_id, quantity=1):
    return current_domain.process(
        PlaceOrder(
            guest_name="Ada",
            guest_email="ada@example.com",
            items=json.dumps([{"product_id": product_id, "quantity": quantity}]),
        ),
        asynchronous=False,
    )


class TestBuildOverview:
    def test_empty_inventory(self):
        overview = build_overview()

        assert overview.total_products == 0
        assert overview.total_categories == 0
        assert overview.low_stock_products == []
        assert overview.recent_orders == []

    def test_counts_and_low_stock(self, make_category, make_product):
        category_id = make_category()
        make_product(name="Plenty", quantity_in_stock=50, low_stock_threshold=5, category_id=category_id)
        scarce = make_product(name="Scarce", quantity_in_stock=1, low_stock_threshold=5, category_id=category_id)

        overview = build_overview()

        assert overview.total_products == 2
        assert overview.total_categories == 1
        assert [str(listing.product.id) for listing in overview.low_stock_products] == [scarce]

    def test_recent_orders_capped(self, make_product):
        product_id = make_product(quantity_in_stock=100)
        placed = [_place(product_id) for _ in range(RECENT_ORDER_COUNT + 2)]

        overview = build_overview()

        assert len(overview.recent_orders) == RECENT_ORDER_COUNT
        assert str(overview.recent_orders[0].order.id) == placed[-1]
