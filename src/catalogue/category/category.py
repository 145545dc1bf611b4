"""Category aggregate: a named grouping of products in the catalogue."""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError
from protean.fields import DateTime, String
from protean.utils.globals import current_domain

from shared.domain import inventory


def _now():
    return datetime.now(UTC)


@inventory.aggregate
class Category:
    """A grouping for organizing products in the catalogue.

    Products point at their category through ``Product.category_id`` and are
    loaded explicitly with ``products_in_category``.
    """

    name: String(required=True, max_length=100)
    description: String(max_length=500)
    created_at: DateTime(default=_now)
    updated_at: DateTime(default=_now)

    @classmethod
    def create(cls, name, description=None):
        now = _now()
        return cls(
            name=name.strip() if name else name,
            description=description,
            created_at=now,
            updated_at=now,
        )

    def update_details(self, name, description=None):
        self.name = name.strip() if name else name
        self.description = description
        self.updated_at = _now()


def load_category(category_id) -> Category:
    try:
        return current_domain.repository_for(Category).get(category_id)
    except ObjectNotFoundError:
        raise ObjectNotFoundError({"category_id": [f"Category with ID {category_id} not found."]}) from None


def list_categories() -> list[Category]:
    """Every category, alphabetically."""
    categories = current_domain.repository_for(Category)._dao.query.all().items
    return sorted(categories, key=lambda category: (category.name.lower(), category.id))


def count_categories() -> int:
    return len(current_domain.repository_for(Category)._dao.query.all().items)
