"""Product management: commands and handlers."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from catalogue.category.category import Category
from catalogue.product.product import Product, load_product
from shared.domain import ensure_current_version, inventory
from shared.utils.logging import get_logger

logger = get_logger(__name__)


@inventory.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=100)
    description: String(max_length=1000)
    price: Float(required=True)
    quantity_in_stock: Integer(default=0)
    low_stock_threshold: Integer(default=0)
    category_id: Identifier(required=True)


@inventory.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String(required=True, max_length=100)
    description: String(max_length=1000)
    price: Float(required=True)
    quantity_in_stock: Integer(required=True)
    low_stock_threshold: Integer(required=True)
    category_id: Identifier(required=True)
    expected_version: Integer()


@inventory.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


def _ensure_category_exists(category_id) -> None:
    try:
        current_domain.repository_for(Category).get(category_id)
    except ObjectNotFoundError:
        raise ValidationError({"category_id": [f"Category with ID {category_id} does not exist."]}) from None


@inventory.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            quantity_in_stock=command.quantity_in_stock,
            low_stock_threshold=command.low_stock_threshold,
            category_id=command.category_id,
        )
        _ensure_category_exists(command.category_id)
        current_domain.repository_for(Product).add(product)

        logger.info("product_created", product_id=product.id, name=product.name)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        product = load_product(command.product_id)
        ensure_current_version(product, command.expected_version)
        _ensure_category_exists(command.category_id)

        product.update_details(
            name=command.name,
            description=command.description,
            price=command.price,
            quantity_in_stock=command.quantity_in_stock,
            low_stock_threshold=command.low_stock_threshold,
            category_id=command.category_id,
        )
        current_domain.repository_for(Product).add(product)

        logger.info("product_updated", product_id=product.id)
        return str(product.id)

    @handle(DeleteProduct)
    def delete_product(self, command):
        from ordering.order.lookup import order_lines_for_product

        product = load_product(command.product_id)

        line_count = len(order_lines_for_product(product.id))
        if line_count:
            raise ValidationError(
                {"product_id": [f"Product {product.name} appears on {line_count} order line(s) and cannot be deleted."]}
            )

        current_domain.repository_for(Product)._dao.delete(product)
        logger.info("product_deleted", product_id=command.product_id)
