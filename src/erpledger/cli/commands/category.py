"""Finance category management commands."""

import click
from erpledger.cli.error_handling import handle_domain_error
from erpledger.domain.category import CategoryService
from erpledger.domain.entities import CategoryType

CATEGORY_TYPE_CHOICE = click.Choice([t.value for t in CategoryType], case_sensitive=False)


@click.group()
def category_group():
    """Manage finance categories."""
    pass


@category_group.command("list")
@click.option("--type", "category_type", type=CATEGORY_TYPE_CHOICE, help="Only this type")
@click.pass_context
def list_categories(ctx, category_type: str | None):
    """List categories with their subcategories."""
    service = CategoryService(ctx.obj["db"])

    categories = service.list_categories(
        category_type=CategoryType(category_type.upper()) if category_type else None
    )
    if not categories:
        click.echo("No categories found.")
        return

    click.echo("\nCategories:")
    for cat in categories:
        click.echo(f"{cat.name} [{cat.category_type.value}] (ID: {cat.id})")
        for sub in cat.subcategories:
            click.echo(f"  {sub.name} (ID: {sub.id})")


@category_group.command("create")
@click.argument("name")
@click.option(
    "--type",
    "category_type",
    type=CATEGORY_TYPE_CHOICE,
    default="EXPENSE",
    help="Category type (default: EXPENSE)",
)
@click.option("--description", help="Category description")
@click.pass_context
def create_category(ctx, name: str, category_type: str, description: str | None):
    """Create a new category."""
    service = CategoryService(ctx.obj["db"])

    try:
        category_id = service.create_category(
            name=name,
            category_type=CategoryType(category_type.upper()),
            description=description,
        )
        click.echo(f"Created category '{name.strip()}' (ID: {category_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@category_group.command("add-sub")
@click.argument("category_id", type=int)
@click.argument("name")
@click.pass_context
def add_subcategory(ctx, category_id: int, name: str):
    """Add a subcategory to a category."""
    service = CategoryService(ctx.obj["db"])

    try:
        subcategory_id = service.add_subcategory(category_id=category_id, name=name)
        click.echo(f"Created subcategory '{name.strip()}' (ID: {subcategory_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
