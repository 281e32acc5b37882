"""Finance category domain service."""

from typing import Optional
from erpledger.database.base import Database
from erpledger.domain.entities import CategoryType, FinanceCategory, FinanceSubcategory
from erpledger.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    category_not_found,
)


class CategoryService:
    """Service for managing finance categories and their subcategories."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_category(
        self, name: str, category_type: CategoryType, description: Optional[str] = None
    ) -> int:
        """Create a category.

        Args:
            name: Category name
            category_type: INCOME or EXPENSE
            description: Optional description

        Returns:
            Category ID

        Raises:
            ValidationError: If the name is blank
            ConflictError: If a category with the same name exists
        """
        name = name.strip()
        if not name:
            raise ValidationError("Category name cannot be empty")
        if self.get_category_by_name(name) is not None:
            raise ConflictError(f"Category with name '{name}' already exists")

        return self.db.create_category(
            name=name, category_type=category_type, description=description
        )

    def add_subcategory(self, category_id: int, name: str) -> int:
        """Create a subcategory under an existing category.

        Args:
            category_id: Parent category ID
            name: Subcategory name

        Returns:
            Subcategory ID

        Raises:
            NotFoundError: If the category doesn't exist
            ConflictError: If the category already has a subcategory with that name
        """
        category = self.require_category(category_id)
        name = name.strip()
        if not name:
            raise ValidationError("Subcategory name cannot be empty")
        if any(sub.name == name for sub in category.subcategories):
            raise ConflictError(
                f"Category '{category.name}' already has a subcategory named '{name}'"
            )
        return self.db.create_subcategory(category_id=category_id, name=name)

    def get_category(self, category_id: int) -> Optional[FinanceCategory]:
        """Get category by ID.

        Args:
            category_id: Category ID

        Returns:
            Category entity or None if not found
        """
        return self.db.get_category(category_id)

    def require_category(self, category_id: int) -> FinanceCategory:
        """Get category by ID or raise NotFoundError."""
        category = self.db.get_category(category_id)
        if category is None:
            raise NotFoundError(category_not_found(category_id))
        return category

    def get_category_by_name(self, name: str) -> Optional[FinanceCategory]:
        """Get category by exact name."""
        for category in self.db.list_categories():
            if category.name == name:
                return category
        return None

    def list_categories(self, category_type: Optional[CategoryType] = None) -> list[FinanceCategory]:
        """List categories with their subcategories."""
        return self.db.list_categories(category_type=category_type)

    def subcategories_of(self, category_id: Optional[int]) -> list[FinanceSubcategory]:
        """Subcategories offered once a category is chosen; empty when none is."""
        if category_id is None:
            return []
        category = self.db.get_category(category_id)
        if category is None:
            return []
        return list(category.subcategories)
