#!/usr/bin/env python3
"""Clientele CLI for day-to-day customer maintenance."""

import argparse

import questionary
from rich.console import Console
from rich.table import Table

from clientele import db
from clientele.config import config
from clientele.customer import Customer, CustomerService
from clientele.logging_config import setup_logging

console = Console()


def print_customers(customers: list[Customer]) -> None:
    table = Table(title="Customers")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Email")
    for c in customers:
        table.add_row(str(c.id), c.name or "", c.email or "")
    console.print(table)


def select_customer(service: CustomerService) -> Customer | None:
    """Prompt the user to select a customer from the full list."""
    customers = service.list_all()
    if not customers:
        console.print("[red]No customers found.[/]")
        return None
    return questionary.select(
        "Select a customer:",
        choices=[
            questionary.Choice(title=f"{c.id}: {c.name} <{c.email}>", value=c) for c in customers
        ],
    ).ask()


def init_db(args, service: CustomerService) -> None:
    """Apply SQL migrations to the configured database."""
    applied = db.apply_migrations(config.migrations_path)
    console.print(f"[green]Applied {len(applied)} migration(s).[/]")


def list_customers(args, service: CustomerService) -> None:
    customers = service.list_all()
    if not customers:
        console.print("[dim]No customers yet.[/]")
        return
    print_customers(customers)


def add_customer(args, service: CustomerService) -> None:
    """Create a customer, prompting for any field not given on the command line."""
    name = args.name if args.name is not None else questionary.text("Name:").ask()
    email = args.email if args.email is not None else questionary.text("Email:").ask()
    if name is None or email is None:
        console.print("[dim]Cancelled.[/]")
        return

    created = service.create(Customer(name=name, email=email))
    console.print(f"[green]Created customer {created.id}.[/]")


def show_customer(args, service: CustomerService) -> None:
    customer = service.get_by_id(args.id)
    if customer is None:
        console.print(f"[red]Customer {args.id} not found.[/]")
        return
    print_customers([customer])


def update_customer(args, service: CustomerService) -> None:
    """Update name and email, defaulting prompts to the current values."""
    current = service.get_by_id(args.id)
    if current is None:
        console.print(f"[red]Customer {args.id} not found.[/]")
        return

    name = args.name
    if name is None:
        name = questionary.text("Name:", default=current.name or "").ask()
    email = args.email
    if email is None:
        email = questionary.text("Email:", default=current.email or "").ask()
    if name is None or email is None:
        console.print("[dim]Cancelled.[/]")
        return

    updated = service.update(args.id, Customer(name=name, email=email))
    if updated is None:
        console.print(f"[red]Customer {args.id} not found.[/]")
        return
    console.print(f"[green]Updated customer {updated.id}.[/]")


def remove_customer(args, service: CustomerService) -> None:
    """Delete a customer after confirmation."""
    if args.id is not None:
        customer_id = args.id
    else:
        selected = select_customer(service)
        # User pressed Ctrl+C or Escape
        if selected is None:
            return
        customer_id = selected.id

    if not questionary.confirm(f"Delete customer {customer_id}?").ask():
        console.print("[dim]Cancelled.[/]")
        return

    service.delete(customer_id)
    console.print(f"[green]Deleted customer {customer_id}.[/]")


def reset_customers(args, service: CustomerService) -> None:
    """Delete every customer after confirmation."""
    if not questionary.confirm("Delete ALL customers?", default=False).ask():
        console.print("[dim]Cancelled.[/]")
        return

    count = service.delete_all()
    console.print(f"[green]Deleted {count} customer(s).[/]")


COMMANDS = {
    "init-db": init_db,
    "list": list_customers,
    "add": add_customer,
    "show": show_customer,
    "update": update_customer,
    "remove": remove_customer,
    "reset": reset_customers,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Clientele CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init-db", help="Apply database migrations")
    subparsers.add_parser("list", help="List all customers")

    add = subparsers.add_parser("add", help="Create a customer")
    add.add_argument("--name")
    add.add_argument("--email")

    show = subparsers.add_parser("show", help="Show a customer")
    show.add_argument("id", type=int)

    update = subparsers.add_parser("update", help="Update a customer's name and email")
    update.add_argument("id", type=int)
    update.add_argument("--name")
    update.add_argument("--email")

    remove = subparsers.add_parser("remove", help="Delete a customer")
    remove.add_argument("id", type=int, nargs="?")

    subparsers.add_parser("reset", help="Delete all customers")

    return parser


def main(argv: list[str] = None, service: CustomerService = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(config.log_level)
    COMMANDS[args.command](args, service if service is not None else CustomerService())


if __name__ == "__main__":
    main()
