"""Tests for category service and commands."""

import pytest
from erpledger.cli.main import cli
from erpledger.domain.entities import CategoryType
from erpledger.domain.errors import ConflictError, NotFoundError, ValidationError


class TestCategoryService:
    """Tests for CategoryService."""

    def test_create_category(self, category_service):
        category_id = category_service.create_category(
            name="Utilities", category_type=CategoryType.EXPENSE
        )

        category = category_service.get_category(category_id)
        assert category.name == "Utilities"
        assert category.category_type is CategoryType.EXPENSE
        assert category.subcategories == ()

    def test_create_duplicate_category(self, category_service, sample_categories):
        with pytest.raises(ConflictError):
            category_service.create_category(name="Rent", category_type=CategoryType.EXPENSE)

    def test_create_blank_category(self, category_service):
        with pytest.raises(ValidationError):
            category_service.create_category(name=" ", category_type=CategoryType.INCOME)

    def test_add_subcategory(self, category_service, sample_categories):
        sub_id = category_service.add_subcategory(sample_categories["Rent"], "Warehouse")

        category = category_service.get_category(sample_categories["Rent"])
        assert [sub.name for sub in category.subcategories] == ["Office", "Warehouse"]
        assert all(sub.category_id == category.id for sub in category.subcategories)
        assert sub_id in [sub.id for sub in category.subcategories]

    def test_add_duplicate_subcategory(self, category_service, sample_categories):
        with pytest.raises(ConflictError):
            category_service.add_subcategory(sample_categories["Rent"], "Office")

    def test_add_subcategory_unknown_category(self, category_service):
        with pytest.raises(NotFoundError):
            category_service.add_subcategory(999, "Anything")

    def test_list_categories_by_type(self, category_service, sample_categories):
        income = category_service.list_categories(category_type=CategoryType.INCOME)

        assert [cat.name for cat in income] == ["Sales"]
        assert len(category_service.list_categories()) == 2

    def test_subcategories_of(self, category_service, sample_categories):
        subs = category_service.subcategories_of(sample_categories["Sales"])

        assert [sub.name for sub in subs] == ["Retail"]
        assert category_service.subcategories_of(None) == []
        assert category_service.subcategories_of(999) == []


def test_category_create_and_list(cli_runner, temp_db):
    """Test creating categories and listing them with subcategories."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "category", "create", "Sales", "--type", "income"],
    )
    assert result.exit_code == 0
    assert "Created category 'Sales'" in result.output

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "category", "add-sub", "1", "Wholesale"]
    )
    assert result.exit_code == 0
    assert "Created subcategory 'Wholesale'" in result.output

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "category", "list"])
    assert result.exit_code == 0
    assert "Sales [INCOME]" in result.output
    assert "  Wholesale" in result.output


def test_category_list_empty(cli_runner, temp_db):
    """Test listing categories when none exist."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "category", "list"])

    assert result.exit_code == 0
    assert "No categories found" in result.output


def test_category_add_sub_unknown_category(cli_runner, temp_db):
    """Test adding a subcategory to a missing category fails."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "category", "add-sub", "42", "Nothing"]
    )

    assert result.exit_code == 1
    assert "Category 42 not found" in result.output
