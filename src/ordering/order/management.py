"""Order administration: editing guest contact details."""

from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from ordering.order.lookup import load_order
from ordering.order.order import Order
from shared.domain import ensure_current_version, inventory
from shared.utils.logging import get_logger

logger = get_logger(__name__)


@inventory.command(part_of="Order")
class UpdateOrder:
    order_id: Identifier(required=True)
    guest_name: String(required=True, max_length=100)
    guest_email: String(required=True, max_length=100)
    expected_version: Integer()


@inventory.command_handler(part_of=Order)
class ManageOrderHandler:
    @handle(UpdateOrder)
    def update_order(self, command):
        """Change the guest name and email. Items, totals and the order date stay fixed."""
        order = load_order(command.order_id)
        ensure_current_version(order, command.expected_version)

        order.update_guest_details(guest_name=command.guest_name, guest_email=command.guest_email)
        current_domain.repository_for(Order).add(order)

        logger.info("order_updated", order_id=order.id)
        return str(order.id)
