"""Domain composition root for the inventory application.

Categories, products and orders are registered on one domain so that placing
an order and withdrawing its stock commit in the same unit of work.
"""

import importlib

from protean.domain import Domain
from protean.exceptions import ExpectedVersionError

from shared.utils.logging import get_logger

inventory = Domain(name="inventory")

logger = get_logger(__name__)

STALE_RECORD_MESSAGE = "The record was modified by someone else. Reload and try again."

# Modules that register aggregates, entities, commands and handlers
ELEMENT_MODULES = (
    "catalogue.category.category",
    "catalogue.category.management",
    "catalogue.product.product",
    "catalogue.product.management",
    "ordering.order.order",
    "ordering.order.creation",
    "ordering.order.management",
    "ordering.order.cancellation",
)

_initialized = False


def provider_config(database_url: str) -> dict:
    """Translate a database URL into the default provider's configuration.

    ``memory://`` selects protean's in-memory provider.
    """
    if database_url.startswith("memory"):
        return {"provider": "memory"}
    if database_url.startswith("sqlite"):
        return {"provider": "sqlite", "database_uri": database_url}
    if database_url.startswith(("postgresql", "postgres")):
        return {"provider": "postgresql", "database_uri": database_url}
    raise ValueError(f"Unsupported database URL: {database_url}")


def init_domain(database_url: str | None = None) -> Domain:
    """Register every element and initialize the domain once per process."""
    global _initialized
    if _initialized:
        return inventory

    from shared.config import get_settings

    for module in ELEMENT_MODULES:
        importlib.import_module(module)

    database_url = database_url or get_settings().resolved_database_url
    inventory.config["databases"]["default"] = provider_config(database_url)
    inventory.init(traverse=False)
    _initialized = True

    logger.info("domain_initialized", domain=inventory.name, provider=inventory.config["databases"]["default"]["provider"])
    return inventory


def ensure_current_version(aggregate, expected_version: int | None) -> None:
    """Reject an edit made against an older copy of ``aggregate``."""
    if expected_version is not None and expected_version != aggregate._version:
        logger.warning(
            "stale_edit_rejected",
            aggregate=type(aggregate).__name__,
            aggregate_id=aggregate.id,
            expected_version=expected_version,
            current_version=aggregate._version,
        )
        raise ExpectedVersionError(STALE_RECORD_MESSAGE)
