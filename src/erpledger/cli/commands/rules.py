"""Operation rule table command."""

import click
from erpledger.domain.operation_rules import FORM_OPERATION_KINDS, OPERATION_RULES


def _classes(classes) -> str:
    return ", ".join(sorted(c.value for c in classes)) or "-"


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


@click.command("rules")
def show_rules():
    """Show which accounts and category each operation requires."""
    click.echo(
        f"{'Operation':<18} {'Source':<6} {'Source classes':<16} "
        f"{'Dest':<6} {'Destination classes':<20} {'Category':<8}"
    )
    click.echo("-" * 80)
    for kind, rule in OPERATION_RULES.items():
        marker = "" if kind in FORM_OPERATION_KINDS else " *"
        click.echo(
            f"{kind.value:<18} {_yes_no(rule.requires_source):<6} "
            f"{_classes(rule.allowed_source_classes):<16} "
            f"{_yes_no(rule.requires_destination):<6} "
            f"{_classes(rule.allowed_destination_classes):<20} "
            f"{_yes_no(rule.requires_category):<8}{marker}"
        )
    click.echo("\n* not offered by the manual transaction form")


def register_commands(cli):
    """Register rules command with main CLI."""
    cli.add_command(show_rules)
