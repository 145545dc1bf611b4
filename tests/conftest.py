import os
from pathlib import Path

import pytest

os.environ["INVENTORY_ENV"] = "test"


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pin the configuration environment before any application module reads settings."""
    os.environ["INVENTORY_ENV"] = session.config.option.env

    from shared.config import reset_settings
    from shared.utils.logging import configure_logging

    reset_settings()
    configure_logging(log_dir=None)


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def _inventory_domain():
    """Initialize the inventory domain once per session."""
    from shared.domain import init_domain

    return init_domain()


@pytest.fixture(scope="session", autouse=True)
def setup_db(_inventory_domain):
    from shared.utils.db import drop_db, setup_db

    setup_db(_inventory_domain)

    yield

    drop_db(_inventory_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_inventory_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _inventory_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    ctx.pop()


@pytest.fixture(autouse=True)
def fake_email():
    from notifications.channel import reset_email_adapter, set_email_adapter
    from notifications.channel.fake_email import FakeEmailAdapter

    adapter = FakeEmailAdapter()
    set_email_adapter(adapter)

    yield adapter

    reset_email_adapter()


@pytest.fixture()
def make_category():
    """Create a category through its command handler and return its id."""
    from catalogue.category.management import CreateCategory
    from protean.utils.globals import current_domain

    def _make(name="Electronics", description=None):
        return current_domain.process(CreateCategory(name=name, description=description), asynchronous=False)

    return _make


@pytest.fixture()
def make_product(make_category):
    """Create a product (and, unless given one, a category for it) and return its id."""
    from catalogue.product.management import CreateProduct
    from protean.utils.globals import current_domain

    def _make(
        name="Laptop",
        price=10.00,
        quantity_in_stock=10,
        low_stock_threshold=2,
        category_id=None,
        description=None,
    ):
        command = CreateProduct(
            name=name,
            description=description,
            price=price,
            quantity_in_stock=quantity_in_stock,
            low_stock_threshold=low_stock_threshold,
            category_id=category_id or make_category(),
        )
        return current_domain.process(command, asynchronous=False)

    return _make
