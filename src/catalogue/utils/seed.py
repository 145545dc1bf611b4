"""Sample catalogue for a fresh database."""

from protean.utils.globals import current_domain

from catalogue.category.category import count_categories
from catalogue.category.management import CreateCategory
from catalogue.product.management import CreateProduct
from shared.utils.logging import get_logger

logger = get_logger(__name__)

CATEGORIES = [
    ("Electronics", "Electronic devices and accessories"),
    ("Clothing", "Apparel and fashion items"),
    ("Books", "Books and publications"),
    ("Home and Garden", "Home improvement and garden supplies"),
]

# (name, description, price, stock, low-stock threshold, category name)
PRODUCTS = [
    ("Laptop", "High-performance laptop", 999.99, 15, 5, "Electronics"),
    ("Smartphone", "Latest model smartphone", 699.99, 25, 8, "Electronics"),
    ("T-Shirt", "Cotton t-shirt", 19.99, 100, 20, "Clothing"),
    ("Jeans", "Denim jeans", 49.99, 50, 10, "Clothing"),
    ("Programming Book", "Learn programming", 39.99, 30, 5, "Books"),
    ("Garden Tools Set", "Essential garden tools", 79.99, 20, 4, "Home and Garden"),
]


def seed_catalogue() -> bool:
    """Insert the sample catalogue unless categories already exist.

    Returns True when data was inserted.
    """
    if count_categories():
        logger.info("seed_skipped", reason="catalogue already populated")
        return False

    category_ids = {
        name: current_domain.process(CreateCategory(name=name, description=description), asynchronous=False)
        for name, description in CATEGORIES
    }

    for name, description, price, stock, threshold, category_name in PRODUCTS:
        current_domain.process(
            CreateProduct(
                name=name,
                description=description,
                price=price,
                quantity_in_stock=stock,
                low_stock_threshold=threshold,
                category_id=category_ids[category_name],
            ),
            asynchronous=False,
        )

    logger.info("seed_completed", categories=len(CATEGORIES), products=len(PRODUCTS))
    return True
