"""Order cancellation and deletion: commands and handlers.

Removing an order returns each line's quantity to the product's stock in
the same unit of work. Guest cancellation only checks that the supplied
email matches the one on the order.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from catalogue.product.product import Product
from ordering.order.lookup import OrderDetail, get_order_by_id
from ordering.order.order import Order
from shared.domain import inventory
from shared.email import normalize_email
from shared.utils.logging import get_logger

logger = get_logger(__name__)


@inventory.command(part_of="Order")
class DeleteOrder:
    order_id: Identifier(required=True)


@inventory.command(part_of="Order")
class CancelGuestOrder:
    order_id: Identifier(required=True)
    guest_email: String(required=True, max_length=100)


def _remove_order(detail: OrderDetail) -> None:
    product_repo = current_domain.repository_for(Product)
    for line in detail.lines:
        if line.product is not None:
            line.product.restock(line.item.quantity)
            product_repo.add(line.product)

    order_repo = current_domain.repository_for(Order)
    detail.order.clear_items()
    order_repo.add(detail.order)
    order_repo._dao.delete(detail.order)


@inventory.command_handler(part_of=Order)
class CancelOrderHandler:
    @handle(DeleteOrder)
    def delete_order(self, command):
        detail = get_order_by_id(command.order_id)
        _remove_order(detail)

        logger.info("order_deleted", order_id=command.order_id)
        return detail

    @handle(CancelGuestOrder)
    def cancel_guest_order(self, command):
        """Cancel an order on behalf of the guest who placed it.

        A mismatched email is answered exactly like an unknown order id. This
        is an email match only: anyone who knows the order id and its email
        can cancel it.
        """
        try:
            detail = get_order_by_id(command.order_id)
        except ObjectNotFoundError:
            logger.warning("guest_cancellation_unknown_order", order_id=command.order_id)
            raise

        supplied = normalize_email(command.guest_email)
        if not supplied or supplied != normalize_email(detail.order.guest_email):
            logger.warning("guest_cancellation_email_mismatch", order_id=command.order_id)
            raise ObjectNotFoundError({"order_id": [f"Order with ID {command.order_id} not found."]})

        _remove_order(detail)

        logger.info("order_cancelled_by_guest", order_id=command.order_id)
        return detail
