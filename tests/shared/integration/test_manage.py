"""Tests for the database management CLI."""

import pytest
from catalogue.category.category import count_categories
from catalogue.product.product import count_products
from catalogue.product.search import low_stock_products
from catalogue.utils.seed import CATEGORIES, PRODUCTS
from manage import main


class TestManageCommands:
    def test_setup_db(self, capsys):
        main(["setup-db"])
        assert "Creating inventory database schema..." in capsys.readouterr().out

    def test_drop_db(self, capsys):
        main(["drop-db"])
        assert "Dropping inventory database schema..." in capsys.readouterr().out

    def test_seed_loads_sample_catalogue_once(self, capsys):
        main(["seed"])
        main(["seed"])

        output = capsys.readouterr().out
        assert "Sample catalogue loaded." in output
        assert "nothing seeded" in output

        assert count_categories() == len(CATEGORIES)
        assert count_products() == len(PRODUCTS)
        assert low_stock_products() == []

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            main([])
