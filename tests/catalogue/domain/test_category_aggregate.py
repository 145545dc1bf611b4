"""Tests for the Category aggregate's own rules."""

import pytest
from catalogue.category.category import Category
from protean.exceptions import ValidationError


class TestCategoryCreation:
    def test_create_category(self):
        category = Category.create(name="Electronics", description="Devices")
        assert category.name == "Electronics"
        assert category.description == "Devices"
        assert category.id is not None
        assert category.created_at is not None
        assert category.updated_at == category.created_at

    def test_name_is_trimmed(self):
        category = Category.create(name="  Books  ")
        assert category.name == "Books"

    def test_description_is_optional(self):
        category = Category.create(name="Books")
        assert category.description is None

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_name_is_required(self, name):
        with pytest.raises(ValidationError) as exc:
            Category.create(name=name)
        assert "name" in exc.value.messages

    def test_name_longer_than_100_characters_rejected(self):
        with pytest.raises(ValidationError) as exc:
            Category.create(name="x" * 101)
        assert "name" in exc.value.messages

    def test_name_of_exactly_100_characters_accepted(self):
        assert Category.create(name="x" * 100).name == "x" * 100

    def test_description_longer_than_500_characters_rejected(self):
        with pytest.raises(ValidationError) as exc:
            Category.create(name="Books", description="d" * 501)
        assert "description" in exc.value.messages


class TestCategoryUpdate:
    def test_update_details(self):
        category = Category.create(name="Books")
        category.update_details(name="Magazines", description="Periodicals")
        assert category.name == "Magazines"
        assert category.description == "Periodicals"

    def test_blank_name_rejected_on_update(self):
        category = Category.create(name="Books", description="Printed")
        with pytest.raises(ValidationError) as exc:
            category.update_details(name="")
        assert "name" in exc.value.messages
