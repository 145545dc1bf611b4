"""Application tests for order deletion, guest cancellation and admin edits."""

import json

import pytest
from catalogue.product.product import load_product
from ordering.order.cancellation import CancelGuestOrder, DeleteOrder
from ordering.order.creation import PlaceOrder
from ordering.order.lookup import get_order_by_id, list_orders, order_lines_for_product
from ordering.order.management import UpdateOrder
from ordering.order.order import Order
from protean.exceptions import ExpectedVersionError, ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain


@pytest.fixture()
def stocked(make_product):
    return make_product(quantity_in_stock=10)


@pytest.fixture()
def order_id(stocked):
    return current_domain.process(
        PlaceOrder(
            guest_name="Ada Lovelace",
            guest_email="Ada@Example.com",
            items=json.dumps([{"product_id": stocked, "quantity": 4}]),
        ),
        asynchronous=False,
    )


def _stock(product_id):
    return load_product(product_id).quantity_in_stock


def _order_exists(order_id):
    try:
        current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        return False
    return True


class TestDeleteOrder:
    def test_delete_restocks_and_removes(self, stocked, order_id):
        assert _stock(stocked) == 6

        detail = current_domain.process(DeleteOrder(order_id=order_id), asynchronous=False)

        assert str(detail.order.id) == order_id
        assert [line.item.quantity for line in detail.lines] == [4]
        assert _stock(stocked) == 10
        assert not _order_exists(order_id)
        assert order_lines_for_product(stocked) == []

    def test_delete_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(DeleteOrder(order_id="missing"), asynchronous=False)


class TestCancelGuestOrder:
    def test_matching_email_cancels(self, stocked, order_id):
        current_domain.process(CancelGuestOrder(order_id=order_id, guest_email="ada@example.com"), asynchronous=False)

        assert not _order_exists(order_id)
        assert _stock(stocked) == 10

    def test_email_match_ignores_case_and_whitespace(self, order_id):
        current_domain.process(
            CancelGuestOrder(order_id=order_id, guest_email="  ADA@example.COM "), asynchronous=False
        )

        assert not _order_exists(order_id)

    def test_other_email_answered_like_an_unknown_order(self, stocked, order_id):
        with pytest.raises(ObjectNotFoundError) as mismatch:
            current_domain.process(
                CancelGuestOrder(order_id=order_id, guest_email="mallory@example.com"), asynchronous=False
            )
        with pytest.raises(ObjectNotFoundError) as unknown:
            current_domain.process(
                CancelGuestOrder(order_id=order_id[::-1], guest_email="mallory@example.com"), asynchronous=False
            )

        assert mismatch.value.messages == {"order_id": [f"Order with ID {order_id} not found."]}
        assert unknown.value.messages == {"order_id": [f"Order with ID {order_id[::-1]} not found."]}
        assert _order_exists(order_id)
        assert _stock(stocked) == 6

    def test_blank_email_rejected(self, order_id):
        with pytest.raises((ValidationError, ObjectNotFoundError)):
            current_domain.process(CancelGuestOrder(order_id=order_id, guest_email=""), asynchronous=False)
        assert _order_exists(order_id)


class TestUpdateOrder:
    def test_update_guest_details(self, order_id):
        before = get_order_by_id(order_id).order

        current_domain.process(
            UpdateOrder(order_id=order_id, guest_name="Ada King", guest_email="ada.king@example.com"),
            asynchronous=False,
        )

        detail = get_order_by_id(order_id)
        assert detail.order.guest_name == "Ada King"
        assert detail.order.guest_email == "ada.king@example.com"
        assert detail.order.total() == before.total()
        assert len(detail.lines) == 1
        assert detail.order._version == before._version + 1

    def test_blank_name_rejected(self, order_id):
        with pytest.raises(ValidationError) as exc:
            UpdateOrder(order_id=order_id, guest_name="", guest_email="ada@example.com")
        assert "guest_name" in exc.value.messages

    def test_malformed_email_rejected(self, order_id):
        with pytest.raises(ValidationError) as exc:
            current_domain.process(
                UpdateOrder(order_id=order_id, guest_name="Ada", guest_email="broken"), asynchronous=False
            )
        assert "guest_email" in exc.value.messages
        assert get_order_by_id(order_id).order.guest_email == "Ada@Example.com"

    def test_stale_version_rejected(self, order_id):
        seen_version = get_order_by_id(order_id).order._version
        current_domain.process(
            UpdateOrder(order_id=order_id, guest_name="First", guest_email="a@example.com", expected_version=seen_version),
            asynchronous=False,
        )

        with pytest.raises(ExpectedVersionError):
            current_domain.process(
                UpdateOrder(
                    order_id=order_id, guest_name="Second", guest_email="b@example.com", expected_version=seen_version
                ),
                asynchronous=False,
            )

        assert get_order_by_id(order_id).order.guest_name == "First"

    def test_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(
                UpdateOrder(order_id="missing", guest_name="A", guest_email="a@example.com"), asynchronous=False
            )
        assert list_orders() == []
