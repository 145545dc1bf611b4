"""Category management: commands and handlers."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from catalogue.category.category import Category, load_category
from shared.domain import inventory
from shared.utils.logging import get_logger

logger = get_logger(__name__)


@inventory.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    description: String(max_length=500)


@inventory.command(part_of="Category")
class UpdateCategory:
    category_id: Identifier(required=True)
    name: String(required=True, max_length=100)
    description: String(max_length=500)


@inventory.command(part_of="Category")
class DeleteCategory:
    category_id: Identifier(required=True)


@inventory.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        category = Category.create(name=command.name, description=command.description)
        current_domain.repository_for(Category).add(category)

        logger.info("category_created", category_id=category.id, name=category.name)
        return str(category.id)

    @handle(UpdateCategory)
    def update_category(self, command):
        category = load_category(command.category_id)
        category.update_details(name=command.name, description=command.description)
        current_domain.repository_for(Category).add(category)

        logger.info("category_updated", category_id=category.id)
        return str(category.id)

    @handle(DeleteCategory)
    def delete_category(self, command):
        from catalogue.product.product import products_in_category

        category = load_category(command.category_id)

        product_count = len(products_in_category(category.id))
        if product_count:
            raise ValidationError(
                {"category_id": [f"Category {category.name} still has {product_count} product(s) and cannot be deleted."]}
            )

        current_domain.repository_for(Category)._dao.delete(category)
        logger.info("category_deleted", category_id=command.category_id)
